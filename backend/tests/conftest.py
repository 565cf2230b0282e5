"""
Image CDN test configuration

Shared fixtures for the image_cdn test modules.
"""

import pytest
import sys
from pathlib import Path

# Add backend directory to the Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from image_cdn import StreamImageCDN


# ============================================
# Provider Fixtures
# ============================================

@pytest.fixture
def provider():
    """A Stream CDN provider using the default host marker."""
    return StreamImageCDN(cdn_host="stream-io-cdn.com")


@pytest.fixture
def cdn_url():
    """An image URL on the Stream CDN without query parameters."""
    return "https://wwww.stream-io-cdn.com/image.jpg"
