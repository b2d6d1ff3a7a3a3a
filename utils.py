"""
Utility functions for the Lease Analyzer API.
"""
import os
import logging
import uuid
from typing import Optional, Tuple
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


def validate_pdf_file(file) -> Tuple[bool, str]:
    """
    Validate uploaded PDF file.

    Args:
        file: Uploaded file object

    Returns:
        tuple: (is_valid, error_message)
    """
    if not file:
        return False, "No file provided"

    if file.filename == '':
        return False, "No file selected"

    if not file.filename.lower().endswith('.pdf'):
        return False, "Invalid file type, please upload a PDF"

    return True, ""


def save_upload(file, upload_folder: str) -> str:
    """Save an uploaded file under a secure name and return its path."""
    os.makedirs(upload_folder, exist_ok=True)
    filename = f"{uuid.uuid4().hex}_{secure_filename(file.filename)}"
    filepath = os.path.join(upload_folder, filename)
    file.save(filepath)
    return filepath


def safe_file_cleanup(filepath: Optional[str]) -> bool:
    """
    Safely remove a file with error handling.

    Args:
        filepath: Path to file to remove

    Returns:
        bool: True if successfully removed or file doesn't exist
    """
    if not filepath:
        return True
    try:
        if os.path.exists(filepath):
            os.remove(filepath)
            logger.info(f"Cleaned up file: {filepath}")
        return True
    except OSError as e:
        logger.warning(f"Failed to cleanup file {filepath}: {str(e)}")
        return False


def error_response(error_msg: str, status_code: int = 500):
    """
    Log an error and return a formatted error body.

    Returns:
        tuple: (error_dict, status_code)
    """
    if status_code >= 500:
        logger.error(error_msg)
    else:
        logger.warning(error_msg)
    return {"error": error_msg}, status_code
