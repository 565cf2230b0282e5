"""
Image CDN Module

URL helpers for images served through a CDN.

Features:
- Stable cache keys (volatile CDN query parameters stripped)
- Thumbnail URLs with size, crop and resize parameters
- Configurable CDN host and thumbnail defaults via environment
"""

from .models import ImageCrop, ImageResize, ImageSize
from .cdn import ImageCDN, StreamImageCDN, default_image_cdn, format_dimension

__all__ = [
    "ImageCrop",
    "ImageResize",
    "ImageSize",
    "ImageCDN",
    "StreamImageCDN",
    "default_image_cdn",
    "format_dimension",
]
