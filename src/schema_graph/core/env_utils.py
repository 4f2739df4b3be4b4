#!/usr/bin/env python3
"""
Utility functions for reading environment variables with cross-platform support.

Handles Windows CRLF line endings and other whitespace issues that can occur
when .env files are edited on different operating systems.
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def getenv_clean(key: str, default: str = None, strip: bool = True) -> Optional[str]:
    """Get environment variable with automatic cleaning of line endings and whitespace.

    Args:
        key: Environment variable name
        default: Default value if variable is not set
        strip: If True, strip whitespace and line endings (default: True)

    Returns:
        Cleaned environment variable value, or default if not set

    Example:
        >>> # .env file has: SCHEMA_GRAPH_PROXY=proxy.local:3128\r\n
        >>> value = getenv_clean("SCHEMA_GRAPH_PROXY")
        >>> # Returns: "proxy.local:3128" (without \r\n)
    """
    raw_value = os.getenv(key, default)

    if raw_value is None:
        return None

    if not strip:
        return raw_value

    cleaned = raw_value.strip().rstrip("\r\n")

    # Log warning if cleaning changed the value (indicates line ending issues)
    if raw_value != cleaned:
        logger.warning(
            f"Environment variable {key} had trailing whitespace/line endings: "
            f"raw={repr(raw_value)}, cleaned={repr(cleaned)}"
        )

    return cleaned


def getenv_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean with automatic cleaning.

    - "true", "1", "yes", "on" → True
    - "false", "0", "no", "off", "" → False
    - anything else → default (with a warning)
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    cleaned_lower = raw_value.lower()
    if cleaned_lower in ("true", "1", "yes", "on"):
        return True
    elif cleaned_lower in ("false", "0", "no", "off", ""):
        return False
    else:
        logger.warning(
            f"Environment variable {key} has unexpected boolean value: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default


def getenv_float(key: str, default: float) -> float:
    """Get environment variable as float, falling back to default when unset or invalid."""
    raw_value = getenv_clean(key, None)

    if raw_value is None or raw_value == "":
        return default

    try:
        return float(raw_value)
    except ValueError:
        logger.warning(
            f"Environment variable {key} is not a valid number: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default
