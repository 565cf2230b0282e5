"""
Image CDN Configuration

Defaults for the CDN URL transformer, overridable through the environment.
"""

import os
import logging

logger = logging.getLogger(__name__)

DEFAULT_CDN_HOST = "stream-io-cdn.com"


def _cdn_host_from_env() -> str:
    """Read the CDN host marker, ignoring blank values."""
    raw = os.getenv("IMAGE_CDN_HOST")
    if raw is None:
        return DEFAULT_CDN_HOST
    host = raw.strip()
    if not host:
        logger.warning(
            f"[ImageCDN] Empty IMAGE_CDN_HOST, using {DEFAULT_CDN_HOST!r}"
        )
        return DEFAULT_CDN_HOST
    return host


# ============================================
# Configuration
# ============================================

# Host substring identifying images served by the Stream CDN
CDN_HOST = _cdn_host_from_env()
