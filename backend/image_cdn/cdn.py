"""
Image CDN URL Transformer

Derives image cache keys and thumbnail URLs for images served from a CDN.

Features:
- Cache keys with volatile query parameters stripped (CDN hosts only)
- Thumbnail URLs addressing the CDN's server-side resizing endpoint
- Best-effort: malformed URLs are returned unchanged, never raised
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union
from urllib.parse import urlencode, urlsplit, urlunsplit

from pydantic import ValidationError

from . import config
from .models import ImageCrop, ImageResize, ImageSize

logger = logging.getLogger(__name__)

SizeLike = Union[ImageSize, Tuple[float, float]]


def format_dimension(value: float) -> str:
    """Format a pixel dimension the way the resizing endpoint expects ("%.0f")."""
    if value == 0:
        # "%.0f" would write -0.0 as "-0"
        value = 0.0
    return "%.0f" % value


class ImageCDN(ABC):
    """
    Caching key and thumbnail provider for a CDN.

    Image URLs can carry extra query parameters that change on every request.
    Those parameters defeat caching, so providers expose a filtered key to be
    used for the image cache instead of the raw URL.
    """

    @abstractmethod
    def caching_key(self, url: str) -> str:
        """
        Customised (filtered) key for the image cache.

        Args:
            url: URL of the image.

        Returns:
            String to be used as the image cache key.
        """

    @abstractmethod
    def thumbnail_url(
        self,
        original_url: str,
        preferred_size: SizeLike,
        crop: ImageCrop,
        resize: ImageResize,
    ) -> str:
        """
        Enhance an image URL with size parameters to get a thumbnail.

        Args:
            original_url: URL of the image to get the thumbnail for.
            preferred_size: The requested thumbnail size.
            crop: Crop type to be used for the thumbnail.
            resize: Resize type to be used for the thumbnail.
        """

    def default_thumbnail_url(self, original_url: str, preferred_size: SizeLike) -> str:
        """Thumbnail URL with the center crop and fill resize."""
        return self.thumbnail_url(
            original_url,
            preferred_size,
            crop=ImageCrop.CENTER,
            resize=ImageResize.FILL,
        )


class StreamImageCDN(ImageCDN):
    """
    Provider for images hosted on the Stream CDN.

    The host marker is resolved on every call: the ``cdn_host`` passed to the
    constructor, else the ``stream_cdn_host`` class attribute, else
    ``config.CDN_HOST``. An empty marker matches no host, so no query is
    ever stripped.
    """

    stream_cdn_host: Optional[str] = None

    def __init__(self, cdn_host: Optional[str] = None):
        self._cdn_host = cdn_host

    @property
    def cdn_host(self) -> str:
        if self._cdn_host is not None:
            return self._cdn_host
        if type(self).stream_cdn_host is not None:
            return type(self).stream_cdn_host
        return config.CDN_HOST

    def caching_key(self, url: str) -> str:
        marker = self.cdn_host.strip().lower()
        if not marker:
            return url

        try:
            parts = urlsplit(url)
        except ValueError as e:
            logger.debug(f"[ImageCDN] Cannot parse {url[:60]!r}: {e}")
            return url

        host = parts.hostname
        if not host or marker not in host:
            return url

        return urlunsplit(parts._replace(query=""))

    def thumbnail_url(
        self,
        original_url: str,
        preferred_size: SizeLike,
        crop: ImageCrop,
        resize: ImageResize,
    ) -> str:
        try:
            size = ImageSize.of(preferred_size)
        except (ValidationError, ValueError, TypeError) as e:
            logger.debug(f"[ImageCDN] Invalid thumbnail size {preferred_size!r}: {e}")
            return original_url

        try:
            crop = ImageCrop(crop)
            resize = ImageResize(resize)
        except ValueError as e:
            logger.warning(f"[ImageCDN] Invalid thumbnail option: {e}")
            return original_url

        params = urlencode([
            ("w", format_dimension(size.width)),
            ("h", format_dimension(size.height)),
            ("crop", crop.value),
            ("resize", resize.value),
            ("ro", "0"),  # Required parameter
        ])

        try:
            parts = urlsplit(original_url)
            query = f"{parts.query}&{params}" if parts.query else params
            return urlunsplit(parts._replace(query=query))
        except ValueError as e:
            logger.debug(f"[ImageCDN] Cannot build thumbnail for {original_url[:60]!r}: {e}")
            return original_url


default_image_cdn = StreamImageCDN()
