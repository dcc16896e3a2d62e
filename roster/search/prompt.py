"""
Instruction template for the natural-language roster search.

The whole record collection is pushed into the prompt and matching is left to
the generative-text service; this module owns the exact wording of that
contract so it can be versioned and tested apart from the transport.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Sequence

from roster.config import Settings
from roster.domain.models import PersonnelRecord

# Bump whenever the instruction wording or the requested output shape changes.
TEMPLATE_VERSION = "1"

INSTRUCTION_TEMPLATE = """You are an AI assistant that helps filter employee data based on user queries.

YOUR TASK: Search within the dataset provided below and return employees that match this query: "{query}"

Here is the complete employee dataset to search within:
{dataset}

IMPORTANT INSTRUCTIONS:
{instructions}

Your response must be structured exactly like this:
[
  {{
    "id": "...",
    "employeeCode": "...",
    "name": "...",
    "skillset": ["..."],
    ... include all fields ...
  }},
  ... more matching employees ...
]"""

INSTRUCTIONS: List[str] = [
    "ONLY return employees from the provided dataset that match the query criteria",
    "Return results as a valid JSON array of objects that can be parsed as JSON",
    "Each result MUST include ALL fields for each matching employee record, exactly as they appear in the dataset",
    "Pay SPECIAL ATTENTION to the 'skillset' field which contains skills like 'Power BI', 'SAP', 'Strategic Sourcing', etc.",
    "For skillset queries (e.g., \"find employees with SAP skills\"), check the 'skillset' array for matches",
    "Do not add any explanation, markdown, or text outside of the JSON array",
    "If no employees match the criteria, return an empty array []",
    "Make your response ONLY the JSON array, nothing else",
]

LOCATION_INSTRUCTION = "Only include employees from these locations: {locations}"


def serialize_records(records: Iterable[PersonnelRecord]) -> str:
    """Render the collection verbatim, camelCase keys, one field per line."""
    return json.dumps([record.to_wire() for record in records], indent=2, ensure_ascii=False)


def build_prompt(
    records: Iterable[PersonnelRecord],
    query: str,
    allowed_locations: Sequence[str] = (),
) -> str:
    """
    Interpolate the dataset and the user's query into the instruction template.

    The location restriction is rendered only when a whitelist is configured.
    """
    instructions = list(INSTRUCTIONS)
    if allowed_locations:
        instructions.append(LOCATION_INSTRUCTION.format(locations=", ".join(allowed_locations)))
    numbered = "\n".join(f"{index}. {line}" for index, line in enumerate(instructions, start=1))
    return INSTRUCTION_TEMPLATE.format(
        query=query,
        dataset=serialize_records(records),
        instructions=numbered,
    )


def build_request_body(prompt: str, settings: Settings) -> Dict[str, Any]:
    """generateContent request body with deterministic-leaning generation parameters."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": settings.search_temperature,
            "topK": settings.search_top_k,
            "topP": settings.search_top_p,
            "maxOutputTokens": settings.search_max_output_tokens,
        },
    }


__all__ = [
    "TEMPLATE_VERSION",
    "INSTRUCTION_TEMPLATE",
    "INSTRUCTIONS",
    "LOCATION_INSTRUCTION",
    "serialize_records",
    "build_prompt",
    "build_request_body",
]
