#!/usr/bin/env python3
"""
Configuration settings for schema graph resolution.

Network options (proxy, timeout, TLS verification) can be overridden via
environment variables so the same CLI works behind a corporate proxy and
on a developer machine.
"""

import logging

from ..models.models import ProxySettings, ResolverConfig
from .env_utils import getenv_bool, getenv_clean, getenv_float

logger = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"


def load_proxy_from_env() -> ProxySettings | None:
    """Build proxy settings from SCHEMA_GRAPH_PROXY and the optional credential variables.

    Returns:
        ProxySettings, or None when no proxy is configured
    """
    proxy_value = getenv_clean("SCHEMA_GRAPH_PROXY")
    if not proxy_value:
        return None

    proxy = ProxySettings.from_string(proxy_value)

    login = getenv_clean("SCHEMA_GRAPH_PROXY_LOGIN")
    password = getenv_clean("SCHEMA_GRAPH_PROXY_PASSWORD", strip=False)
    if login:
        proxy = proxy.model_copy(update={"login": login, "password": password})

    logger.debug(f"Using proxy {proxy.host}:{proxy.port or ''} from environment")
    return proxy


def load_config_from_env() -> ResolverConfig:
    """Create a ResolverConfig from SCHEMA_GRAPH_* environment variables.

    Raises:
        ValueError: If SCHEMA_GRAPH_PROXY cannot be parsed
    """
    return ResolverConfig(
        proxy=load_proxy_from_env(),
        timeout=getenv_float("SCHEMA_GRAPH_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
        verify_tls=getenv_bool("SCHEMA_GRAPH_VERIFY_TLS", True),
    )


def get_log_level() -> str:
    """Log level from SCHEMA_GRAPH_LOG_LEVEL."""
    return (getenv_clean("SCHEMA_GRAPH_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
