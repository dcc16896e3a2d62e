"""
State machine for natural-language roster searches.

    IDLE -> SEARCHING -> {SUCCESS(n) | EMPTY | RECOVERED(n) | FAILED(reason)} -> IDLE

Only one search may be in flight per session; a second call while SEARCHING
raises `SearchInProgressError`. Every terminal failure is turned into a FAILED
outcome with a user-facing message and the session always returns to IDLE.
There is no cancellation and no retry: the user re-invokes the search.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from roster.domain.models import PersonnelRecord
from roster.errors import EmptyQueryError, RecoveryError, RequestError, SearchInProgressError
from roster.search.client import SearchClient
from roster.search.pipeline import RECOVERY_ADVICE, SearchOutcome, failed, interpret_response
from roster.utils.logging import get_logger

log = get_logger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"


class SearchSession:
    """Drives one search at a time through the client and the response pipeline."""

    def __init__(self, client: Optional[SearchClient] = None) -> None:
        self.client = client or SearchClient()
        self.state = SessionState.IDLE
        self.last_outcome: Optional[SearchOutcome] = None

    @property
    def is_searching(self) -> bool:
        return self.state is SessionState.SEARCHING

    async def run(self, records: Iterable[PersonnelRecord], query: str) -> SearchOutcome:
        """
        Search `records` for `query` and return the terminal outcome.

        Raises
        ------
        EmptyQueryError
            If the query is blank; the session stays IDLE.
        SearchInProgressError
            If another search is still in flight.
        """
        if not query.strip():
            raise EmptyQueryError("Please enter a search query")
        if self.state is SessionState.SEARCHING:
            raise SearchInProgressError("A search is already in progress")

        self.state = SessionState.SEARCHING
        snapshot = tuple(records)
        log.info("[SEARCH START]", extra={"query": query, "records": len(snapshot)})
        try:
            raw_text = await self.client.search(snapshot, query)
            outcome = interpret_response(raw_text)
        except RequestError as exc:
            log.exception("[SEARCH FAILED] Request error", extra={"status_code": exc.status_code})
            outcome = failed("request", str(exc))
        except RecoveryError:
            log.exception("[SEARCH FAILED] Could not parse results")
            outcome = failed("recovery", RECOVERY_ADVICE)
        finally:
            self.state = SessionState.IDLE

        self.last_outcome = outcome
        log.info(
            "[SEARCH COMPLETE]",
            extra={
                "status": outcome.status.value,
                "count": outcome.count,
                "rejected": outcome.rejected_count,
            },
        )
        return outcome


__all__ = ["SessionState", "SearchSession"]
