"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (access tokens) should be in .env, NOT here
- Import these settings in modules: from config.settings import HTTP_TIMEOUT
- Per-deployment overrides for upload behaviour go in config/upload.yaml
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# VIMEO API CONFIGURATION
# =============================================================================

# Relative request targets ("/me/videos") are prefixed with this base URL.
# The bearer token is only ever sent to targets under this host.
VIMEO_API_BASE_URL = os.getenv("VIMEO_API_BASE_URL", "https://api.vimeo.com")

# Versioned media type, pins the response shape
VIMEO_API_ACCEPT = "application/vnd.vimeo.*+json; version=3.2"

VIMEO_USER_AGENT = os.getenv("VIMEO_USER_AGENT", "Python Vimeo Upload Client")

# =============================================================================
# TRANSPORT CONFIGURATION
# =============================================================================

# Per-request deadline (seconds). Chunk writes carry the whole remaining file,
# so this is (connect, read) and the read side is generous.
HTTP_CONNECT_TIMEOUT = float(os.getenv("HTTP_CONNECT_TIMEOUT", "10"))
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "300"))

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Overall deadline for one upload_file() call (seconds)
UPLOAD_TIMEOUT = int(os.getenv("UPLOAD_TIMEOUT", "3600"))  # 1 hour

# Consecutive chunk/probe rounds without forward progress before giving up
MAX_NO_PROGRESS_RETRIES = int(os.getenv("MAX_NO_PROGRESS_RETRIES", "5"))

# Capped exponential backoff between rounds without progress
RETRY_BACKOFF_BASE_SECONDS = float(os.getenv("RETRY_BACKOFF_BASE_SECONDS", "1.0"))
RETRY_BACKOFF_MAX_SECONDS = float(os.getenv("RETRY_BACKOFF_MAX_SECONDS", "30.0"))

# Optional YAML overrides for the values above
UPLOAD_CONFIG_PATH = Path(os.getenv("UPLOAD_CONFIG_PATH", "config/upload.yaml"))

# =============================================================================
# LISTING CONFIGURATION
# =============================================================================

VIDEO_LIST_PAGE_SIZE = 100  # Maximum the API allows per page
VIDEO_LIST_SORT = "date"
VIDEO_LIST_DIRECTION = "desc"

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# =============================================================================
# SECRETS (loaded from .env)
# =============================================================================
# IMPORTANT: These should NEVER be committed to version control!
# Create a .env file in the project root with these values

# Personal access token with the "upload", "edit" and "private" scopes
VIMEO_ACCESS_TOKEN = os.getenv("VIMEO_ACCESS_TOKEN", "")
