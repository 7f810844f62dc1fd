#!/usr/bin/env python3
"""
URL helpers for allowlist matching.
"""

import logging
import urllib.parse

logger = logging.getLogger(__name__)


def extract_host(url: str) -> str:
    """
    Extract the host component of a URL.
    
    Case is preserved and userinfo/port are dropped. URLs without a
    network location (or that fail to parse) yield an empty string.

    ``urllib.parse`` drops tab/CR/LF characters and leading whitespace
    before splitting, so ``https://em\\tol.com/x`` yields ``emol.com``.

    Args:
        url: URL to inspect, e.g. ``https://www.emol.com/nacional/foo``
        
    Returns:
        Host such as ``www.emol.com``, or ``''``
    """
    if not url:
        return ''
    
    try:
        netloc = urllib.parse.urlsplit(url).netloc
    except ValueError as e:
        logger.debug(f"Could not parse URL {url!r}: {e}")
        return ''
    
    host = netloc.rpartition('@')[2]
    if host.startswith('['):
        # IPv6 literal, keep the brackets
        end = host.find(']')
        return host[:end + 1] if end != -1 else ''
    return host.split(':', 1)[0]
