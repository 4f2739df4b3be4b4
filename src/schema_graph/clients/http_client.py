#!/usr/bin/env python3
"""
HTTP session factory for fetching remote schema documents.

A fresh session is created for every document load so that proxy and
header settings from the resolver configuration apply to that load only.
"""

import logging

from requests import Session

from ..models.models import ResolverConfig

logger = logging.getLogger(__name__)


def create_session(config: ResolverConfig) -> Session:
    """
    Create an HTTP session honoring the proxy, TLS and header settings of config.

    Args:
        config: Resolver configuration

    Returns:
        Configured requests Session (caller is responsible for closing it)
    """
    session = Session()

    session.headers.update({
        'User-Agent': config.user_agent,
        'Accept': 'application/xml, text/xml, */*',
    })
    session.headers.update(config.headers)
    session.verify = config.verify_tls

    if config.proxy is not None:
        proxy_url = config.proxy.url
        session.proxies.update({'http': proxy_url, 'https': proxy_url})
        # Environment proxies would otherwise override the configured one
        session.trust_env = False
        logger.debug(f"HTTP session uses proxy {config.proxy.host}")

    return session


def fetch_bytes(session: Session, url: str, timeout: float) -> bytes:
    """
    Fetch a remote document.

    Raises:
        requests.RequestException: For connection errors, timeouts and 4xx/5xx responses
    """
    logger.debug(f"Fetching {url}", extra={"location": url})
    response = session.get(url, timeout=timeout, allow_redirects=True)
    response.raise_for_status()

    logger.info(
        f"Fetched {url}: {len(response.content)} bytes",
        extra={"location": url},
    )
    return response.content
