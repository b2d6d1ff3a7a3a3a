"""Builds the chat messages sent to the analysis model."""
import logging
from typing import List, Sequence

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from constants import (
    SYSTEM_PROMPT, JURISDICTION_PROMPT_TEMPLATE, GENERIC_PROMPT_TEMPLATE,
    REQUIRED_CLAUSES_PROMPT_TEMPLATE, LEASE_TEXT_PROMPT_TEMPLATE,
    OUTPUT_FORMAT_PROMPT_TEMPLATE, OUTPUT_TEMPLATE,
)
from schemas import RequiredClause, SchemaResolution

logger = logging.getLogger(__name__)

_USER_SEGMENTS = [
    ("human", REQUIRED_CLAUSES_PROMPT_TEMPLATE),
    ("human", LEASE_TEXT_PROMPT_TEMPLATE),
    ("human", OUTPUT_FORMAT_PROMPT_TEMPLATE),
]

JURISDICTION_PROMPT = ChatPromptTemplate.from_messages(
    [("system", SYSTEM_PROMPT), ("human", JURISDICTION_PROMPT_TEMPLATE), *_USER_SEGMENTS]
)

GENERIC_PROMPT = ChatPromptTemplate.from_messages(
    [("system", SYSTEM_PROMPT), ("human", GENERIC_PROMPT_TEMPLATE), *_USER_SEGMENTS]
)


def format_required_clauses(clauses: Sequence[RequiredClause]) -> str:
    """Render required clauses as a numbered list, keeping their order."""
    blocks = []
    for index, clause in enumerate(clauses, start=1):
        indicators = "; ".join(clause.risk_indicators) if clause.risk_indicators else "None listed"
        blocks.append(
            f"{index}. {clause.title}\n"
            f"   Legal basis: {clause.legal_basis}\n"
            f"   Risk indicators: {indicators}\n"
            f"   Drafting hints: {clause.drafting_hints or 'None'}"
        )
    return "\n\n".join(blocks)


def compose_prompt(lease_text: str, resolution: SchemaResolution) -> List[BaseMessage]:
    """
    Merge the lease text and the resolved schema into chat messages.

    The default schema gets the jurisdiction-agnostic variant: same output
    contract, no country framing.
    """
    schema = resolution.legal_schema
    variables = {
        "required_clauses": format_required_clauses(schema.required_clauses),
        "lease_text": lease_text,
        "output_template": OUTPUT_TEMPLATE,
    }

    if resolution.is_default:
        prompt = GENERIC_PROMPT
    else:
        prompt = JURISDICTION_PROMPT
        variables["jurisdiction"] = resolution.country_code.upper()
        variables["law_summary"] = schema.law_summary

    messages = prompt.format_messages(**variables)
    logger.debug(f"Composed {len(messages)} prompt messages for jurisdiction '{resolution.country_code}'")
    return messages
