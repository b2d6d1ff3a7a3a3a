import hashlib
import logging
from typing import Optional

from pydantic import ValidationError

from ai_processor import GenerationInvoker
from config import CACHE_TTL_SECONDS, SCHEMA_DIR
from constants import GENERIC_JURISDICTION_LABEL
from document_loader import ExtractionError
from prompt_composer import compose_prompt
from response_parser import is_fallback_analysis, recover_analysis
from result_cache import ResultCache, generate_cache_key
from schema_registry import SchemaRegistry
from schemas import Jurisdiction, LeaseAnalysisResponse

logger = logging.getLogger(__name__)


def document_identity(lease_text: str) -> str:
    return "sha256:" + hashlib.sha256(lease_text.encode("utf-8")).hexdigest()


def _normalize_jurisdiction(country_code, region_code) -> Jurisdiction:
    try:
        return Jurisdiction(country_code=country_code, region_code=region_code)
    except ValidationError:
        pass
    try:
        jurisdiction = Jurisdiction(country_code=country_code)
        logger.warning(f"Ignoring invalid region code '{region_code}' for country '{jurisdiction.country_code}'")
        return jurisdiction
    except ValidationError:
        logger.warning(f"Invalid country code '{country_code}'; using default schema")
        return Jurisdiction(country_code=GENERIC_JURISDICTION_LABEL)


class LeaseAnalyzer:
    """
    Jurisdiction-aware lease analysis pipeline.

    Safe to call from several request threads at once. Two concurrent misses
    for the same key may both call the model; the later result overwrites the
    earlier one in the cache.
    """

    def __init__(self, registry: SchemaRegistry, invoker: GenerationInvoker, cache: ResultCache):
        self.registry = registry
        self.invoker = invoker
        self.cache = cache

    def analyze(self, lease_text: str, country_code: str, region_code: Optional[str] = None,
                document_id: Optional[str] = None) -> LeaseAnalysisResponse:
        """
        Analyze lease text for a jurisdiction.

        ``document_id`` identifies the source document (for example its upload
        address); the text hash is used when it is not given. A blank or
        malformed country code is analyzed with the default schema. Raises
        ``GenerationError`` when the model is unavailable.
        """
        if not lease_text or not lease_text.strip():
            raise ExtractionError("Could not extract text from PDF")

        jurisdiction = _normalize_jurisdiction(country_code, region_code)
        cache_key = generate_cache_key(
            document_id or document_identity(lease_text),
            jurisdiction.country_code,
            jurisdiction.region_code,
        )

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for {cache_key}")
            return cached

        resolution = self.registry.resolve(jurisdiction.country_code, jurisdiction.region_code)
        messages = compose_prompt(lease_text, resolution)
        raw_output = self.invoker.invoke(messages)
        result = recover_analysis(raw_output)

        if is_fallback_analysis(result):
            logger.warning(f"Model output could not be parsed for {cache_key}; result not cached")
        else:
            self.cache.set(cache_key, result)
            logger.info(
                f"Analysis completed for jurisdiction '{resolution.country_code}': "
                f"{len(result.clauses)} clause(s), {len(result.missing_clauses)} missing"
            )
        return result


def build_default_analyzer() -> LeaseAnalyzer:
    """Wire the analyzer from configuration."""
    return LeaseAnalyzer(
        registry=SchemaRegistry.from_directory(SCHEMA_DIR),
        invoker=GenerationInvoker(),
        cache=ResultCache(default_ttl_seconds=CACHE_TTL_SECONDS),
    )
