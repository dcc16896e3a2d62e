"""
HTTP client for the generative-text search service.

Sends one generateContent POST carrying the full roster and the user's query
and returns the raw answer text. Failures are reported as `RequestError`; the
client never retries, the user re-invokes the search instead.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import httpx

from roster.config import Settings, get_settings
from roster.domain.models import PersonnelRecord
from roster.errors import RequestError
from roster.search.prompt import TEMPLATE_VERSION, build_prompt, build_request_body
from roster.utils.logging import get_logger

log = get_logger(__name__)


def extract_answer_text(payload: Any) -> str:
    """
    Pull `candidates[0].content.parts[0].text` out of the response envelope.

    Raises
    ------
    RequestError
        If the envelope has any other shape.
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise RequestError("Unexpected API response format") from None
    if not isinstance(text, str):
        raise RequestError("Unexpected API response format")
    return text


def _error_detail(response: httpx.Response) -> str:
    try:
        message = response.json().get("error", {}).get("message")
    except (ValueError, AttributeError):
        message = None
    return message or response.reason_phrase or "request failed"


class SearchClient:
    """
    Async client for the natural-language search endpoint.

    An `httpx.AsyncClient` may be injected (tests use `httpx.MockTransport`);
    otherwise one is opened per call with the configured transport timeout.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._http_client = http_client

    async def search(self, records: Iterable[PersonnelRecord], query: str) -> str:
        """
        Ask the service which records match `query` and return its raw answer.

        Parameters
        ----------
        records : iterable[PersonnelRecord]
            The entire current collection, embedded verbatim as context.
        query : str
            The user's natural-language query.
        """
        prompt = build_prompt(records, query, self.settings.search_allowed_locations)
        body = build_request_body(prompt, self.settings)
        params = {"key": self.settings.search_api_key} if self.settings.search_api_key else None

        log.info(
            "[SEARCH REQUEST] Sending search request",
            extra={
                "model": self.settings.search_model,
                "template_version": TEMPLATE_VERSION,
                "prompt_chars": len(prompt),
            },
        )
        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    self.settings.search_endpoint, params=params, json=body
                )
            else:
                async with httpx.AsyncClient(timeout=self.settings.search_timeout_seconds) as client:
                    response = await client.post(
                        self.settings.search_endpoint, params=params, json=body
                    )
        except httpx.HTTPError as exc:
            log.error("[SEARCH REQUEST] Transport failure", extra={"error": str(exc)})
            raise RequestError(f"API request failed: {exc}") from exc

        if not response.is_success:
            detail = _error_detail(response)
            log.error(
                "[SEARCH REQUEST] Service returned an error",
                extra={"status_code": response.status_code, "detail": detail},
            )
            raise RequestError(
                f"API request failed: {response.status_code} - {detail}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError:
            raise RequestError("Unexpected API response format") from None

        text = extract_answer_text(payload)
        log.debug("[SEARCH REQUEST] Raw answer received", extra={"answer_chars": len(text)})
        return text


__all__ = ["SearchClient", "extract_answer_text"]
