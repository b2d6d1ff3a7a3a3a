import logging
from typing import Optional, Sequence

from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI

# Import configuration
from config import (
    OPENAI_API_KEY, ANALYSIS_MODEL, ANALYSIS_TEMPERATURE,
    GENERATION_TIMEOUT_SECONDS, GENERATION_MAX_RETRIES
)

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The analysis model was unreachable, timed out, or returned nothing."""


def create_analysis_llm() -> ChatOpenAI:
    return ChatOpenAI(
        api_key=OPENAI_API_KEY,
        model=ANALYSIS_MODEL,
        temperature=ANALYSIS_TEMPERATURE,
        timeout=GENERATION_TIMEOUT_SECONDS,
        max_retries=GENERATION_MAX_RETRIES,
    )


class GenerationInvoker:
    """Thin boundary around the chat model. Retries are left to the client."""

    def __init__(self, llm=None):
        self._llm = llm

    @property
    def llm(self):
        # Created lazily so importing the module does not require an API key
        if self._llm is None:
            self._llm = create_analysis_llm()
        return self._llm

    def invoke(self, messages: Sequence[BaseMessage]) -> str:
        """Send the prompt and return the raw completion text."""
        try:
            logger.info("Requesting lease analysis from model")
            response = self.llm.invoke(list(messages))
        except Exception as e:
            logger.error(f"Error calling analysis model: {str(e)}")
            raise GenerationError("Failed to analyze lease with AI") from e

        content: Optional[str] = getattr(response, "content", response)
        if not isinstance(content, str) or not content.strip():
            logger.error("Analysis model returned no content")
            raise GenerationError("No response from analysis model")

        logger.debug(f"Raw model output: {content}")
        return content
