"""
Flag image assets and display styles.

Images are PNG files named by lowercase country code ('us.png', 'cz.png')
in the images directory. This module only locates and reads them; drawing
is left to the caller's UI toolkit, using FlagStyle and ContentMode.
"""

import logging
import math
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from flagskit import config

logger = logging.getLogger(__name__)

IMAGE_NAME_PATTERN = re.compile(r"[a-z]{2}")
IMAGE_EXTENSION_PATTERN = re.compile(r"[A-Za-z0-9]+")


class ContentMode(Enum):
    """How the image fills its frame"""
    FILL = "fill"
    FIT = "fit"


class StyleKind(Enum):
    DEFAULT = "default"
    CIRCLE = "circle"
    ROUNDED = "rounded"


@dataclass(frozen=True)
class FlagStyle:
    """
    Clip shape for a flag image.

    Use FlagStyle.DEFAULT, FlagStyle.CIRCLE or FlagStyle.rounded(radius).
    Only the rounded style carries a corner radius.
    """
    kind: StyleKind = StyleKind.DEFAULT
    corner_radius: float = 0.0

    def __post_init__(self):
        if self.kind is not StyleKind.ROUNDED:
            if self.corner_radius != 0:
                raise ValueError(f"Only rounded flags take a corner radius, got {self.corner_radius} for {self.kind.value}")
        elif math.isnan(self.corner_radius) or self.corner_radius < 0:
            raise ValueError(f"Corner radius must be >= 0, got {self.corner_radius}")

    @classmethod
    def rounded(cls, radius: float) -> 'FlagStyle':
        return cls(StyleKind.ROUNDED, float(radius))


FlagStyle.DEFAULT = FlagStyle(StyleKind.DEFAULT)
FlagStyle.CIRCLE = FlagStyle(StyleKind.CIRCLE)


def images_dir() -> str:
    """Directory holding the flag images (FLAGSKIT_IMAGES_DIR wins over config)."""
    return os.environ.get('FLAGSKIT_IMAGES_DIR') or config.FLAG_IMAGES_DIR


def normalized_image_name(code: str) -> str:
    """Image name for a country code (e.g., ' FR ' -> 'fr')."""
    return code.strip().lower()


def image_path(code: Optional[str], ext: Optional[str] = None) -> Optional[str]:
    """
    Locate the image file for a country code.

    Args:
        code: Country code, any case
        ext: File extension without dot (defaults to config.FLAG_IMAGE_EXTENSION)

    Returns:
        Path to the image, or None if there is no such file
    """
    if not isinstance(code, str):
        return None
    name = normalized_image_name(code)
    if not IMAGE_NAME_PATTERN.fullmatch(name):
        if name:
            logger.debug(f"Not a country code: {code!r}, no flag image")
        return None
    ext = ext or config.FLAG_IMAGE_EXTENSION
    if not IMAGE_EXTENSION_PATTERN.fullmatch(ext):
        logger.debug(f"Invalid image extension {ext!r}")
        return None
    path = os.path.join(images_dir(), f"{name}.{ext}")
    if not os.path.isfile(path):
        logger.debug(f"Flag image not found: {path}")
        return None
    return path


def image_data(code: Optional[str], ext: Optional[str] = None) -> Optional[bytes]:
    """
    Read the image bytes for a country code.

    Args:
        code: Country code, any case (e.g., 'US', 'fr')
        ext: File extension without dot (defaults to config.FLAG_IMAGE_EXTENSION)

    Returns:
        File contents, or None if the image is missing or unreadable
    """
    path = image_path(code, ext)
    if path is None:
        return None
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        logger.warning(f"Could not read flag image {path}: {e}")
        return None
