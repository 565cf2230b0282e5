"""
Image CDN Models

Value types passed to the CDN URL transformer.
"""

from __future__ import annotations
from typing import Tuple, Union
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ============================================
# Enums
# ============================================

class ImageCrop(str, Enum):
    """Which part of the image is kept when cropping"""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class ImageResize(str, Enum):
    """How the image is fitted into the requested size"""
    CROP = "crop"
    SCALE = "scale"
    FILL = "fill"


# ============================================
# Size
# ============================================

class ImageSize(BaseModel):
    """Requested thumbnail size in pixels"""
    model_config = ConfigDict(frozen=True)

    width: float = Field(ge=0, allow_inf_nan=False)
    height: float = Field(ge=0, allow_inf_nan=False)

    @classmethod
    def of(cls, value: Union["ImageSize", Tuple[float, float]]) -> "ImageSize":
        """
        Build a size from an ImageSize or a (width, height) pair.

        Raises:
            pydantic.ValidationError: if a dimension is negative or not a number.
        """
        if isinstance(value, cls):
            return value
        width, height = value
        return cls(width=width, height=height)
