"""
Simple configuration for the Lease Analyzer.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Configuration class for the Lease Analyzer."""

    # API Configuration
    OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")

    # Model Settings
    ANALYSIS_MODEL = os.environ.get("ANALYSIS_MODEL", "gpt-4o-mini")
    # Fixed, not read from the environment: the JSON shape must stay stable between runs
    ANALYSIS_TEMPERATURE = 0
    GENERATION_TIMEOUT_SECONDS = float(os.environ.get("GENERATION_TIMEOUT_SECONDS", "120"))
    GENERATION_MAX_RETRIES = int(os.environ.get("GENERATION_MAX_RETRIES", "2"))

    # Jurisdiction catalog
    SCHEMA_DIR = os.environ.get("SCHEMA_DIR", os.path.join(BASE_DIR, "legal_schemas"))

    # Result cache
    CACHE_TTL_SECONDS = int(os.environ.get("CACHE_TTL_SECONDS", "600"))  # 10 minutes

    # Document Processing
    DOCUMENT_FETCH_TIMEOUT = int(os.environ.get("DOCUMENT_FETCH_TIMEOUT", "30"))

    # File Upload
    UPLOAD_FOLDER = 'uploads'
    MAX_FILE_SIZE = 4 * 1024 * 1024  # 4MB

    # API Settings
    API_HOST = "0.0.0.0"
    API_PORT = int(os.environ.get("API_PORT", "5001"))
    API_DEBUG = os.environ.get("API_DEBUG", "false").lower() in ("1", "true", "yes", "on")
    API_VERSION = "1.0.0"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


# Module-level aliases
OPENAI_API_KEY = Config.OPENAI_API_KEY
ANALYSIS_MODEL = Config.ANALYSIS_MODEL
ANALYSIS_TEMPERATURE = Config.ANALYSIS_TEMPERATURE
GENERATION_TIMEOUT_SECONDS = Config.GENERATION_TIMEOUT_SECONDS
GENERATION_MAX_RETRIES = Config.GENERATION_MAX_RETRIES
SCHEMA_DIR = Config.SCHEMA_DIR
CACHE_TTL_SECONDS = Config.CACHE_TTL_SECONDS
DOCUMENT_FETCH_TIMEOUT = Config.DOCUMENT_FETCH_TIMEOUT
UPLOAD_FOLDER = Config.UPLOAD_FOLDER
MAX_FILE_SIZE = Config.MAX_FILE_SIZE
API_HOST = Config.API_HOST
API_PORT = Config.API_PORT
API_DEBUG = Config.API_DEBUG
API_VERSION = Config.API_VERSION
LOG_LEVEL = Config.LOG_LEVEL
