"""
Recovers a lease assessment from raw model output.

Models do not always honour "JSON only": they add a greeting, wrap the object
in a markdown fence, or drop fields. ``recover_analysis`` takes whatever came
back and always returns a valid ``LeaseAnalysisResponse``. When nothing usable
can be parsed it returns the fallback assessment, whose fields spell out that
the analysis failed.
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError

from constants import FALLBACK_CLAUSE, FALLBACK_MISSING_CLAUSE, FALLBACK_METADATA
from schemas import LeaseAnalysisResponse

logger = logging.getLogger(__name__)


def extract_json_block(raw_text) -> Optional[str]:
    """Return the text from the first '{' to the last '}' inclusive, or None."""
    if not isinstance(raw_text, str):
        return None
    start = raw_text.find("{")
    end = raw_text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return raw_text[start:end + 1]


def create_fallback_analysis() -> LeaseAnalysisResponse:
    """Build a fresh fallback assessment filled with "Unable to ..." sentinels."""
    return LeaseAnalysisResponse.model_validate({
        "clauses": [FALLBACK_CLAUSE],
        "missingClauses": [FALLBACK_MISSING_CLAUSE],
        "metadata": FALLBACK_METADATA,
    })


def is_fallback_analysis(result: LeaseAnalysisResponse) -> bool:
    return result == create_fallback_analysis()


def recover_analysis(raw_text) -> LeaseAnalysisResponse:
    """Parse model output into an assessment. Never raises."""
    json_block = extract_json_block(raw_text)
    if json_block is None:
        logger.warning("No JSON object found in model output; returning fallback analysis")
        return create_fallback_analysis()

    try:
        data = json.loads(json_block)
        return LeaseAnalysisResponse.model_validate(data)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse analysis JSON: {str(e)}")
    except ValidationError as e:
        logger.warning(f"Analysis JSON does not match the expected structure: {e.error_count()} error(s)")
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Unexpected content in analysis JSON: {str(e)}")

    return create_fallback_analysis()
