"""
Spy Cat Agency console.
Configuration - read once from the environment (and .env when present).
"""

import os
from typing import Union

from dotenv import load_dotenv

load_dotenv()

# Backend base URL; passed explicitly to SpyCatsClient
API_URL = os.getenv("SPY_CATS_API_URL", "http://localhost:8000")

# Debug flag controls log verbosity
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# Version string
VERSION = "1.0.0"


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def validate_config() -> Union[dict, str]:
    """
    Validate client configuration.

    Returns:
        dict with valid config if successful, error message string if invalid
    """
    issues = []

    if not API_URL or not API_URL.strip():
        issues.append("SPY_CATS_API_URL must not be empty")
    elif not API_URL.strip().lower().startswith(("http://", "https://")):
        issues.append(f"Invalid SPY_CATS_API_URL: {API_URL}. Must start with http:// or https://")

    if issues:
        return f"Configuration invalid: {', '.join(issues)}"

    return {
        "api_url": API_URL.strip().rstrip("/"),
        "debug": DEBUG,
        "version": VERSION
    }
