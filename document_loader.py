"""
Document retrieval and text extraction.

These sit in front of the analysis pipeline: the pipeline only ever sees
extracted text.
"""
import logging
import os
import tempfile

import requests
from langchain_community.document_loaders import PyMuPDFLoader

from config import DOCUMENT_FETCH_TIMEOUT

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """The source document could not be fetched or yielded no text."""


def fetch_document(file_url: str) -> bytes:
    """Download an uploaded document from its storage address."""
    try:
        response = requests.get(file_url, timeout=DOCUMENT_FETCH_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to fetch document from {file_url}: {str(e)}")
        raise ExtractionError("Failed to fetch PDF file") from e
    return response.content


def extract_text_from_file(filepath: str) -> str:
    """Extract plain text from a PDF on disk."""
    try:
        documents = PyMuPDFLoader(filepath).load()
    except Exception as e:
        logger.error(f"Error parsing PDF {filepath}: {str(e)}")
        raise ExtractionError("Failed to parse PDF file") from e

    text = "\n".join(doc.page_content for doc in documents)
    if not text.strip():
        raise ExtractionError("Could not extract text from PDF")
    return text


def extract_text_from_pdf(data: bytes) -> str:
    """Extract plain text from PDF bytes."""
    if not data:
        raise ExtractionError("Empty document")

    fd, filepath = tempfile.mkstemp(suffix=".pdf")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        return extract_text_from_file(filepath)
    finally:
        try:
            os.remove(filepath)
        except OSError as e:
            logger.warning(f"Failed to cleanup temporary file {filepath}: {str(e)}")
