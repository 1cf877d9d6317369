"""Utility functions for legend building."""

from .image_utils import (
    blend_images,
    hex_to_rgba,
    load_image,
    resize_image,
    save_image,
)

__all__ = [
    "blend_images",
    "hex_to_rgba",
    "load_image",
    "resize_image",
    "save_image",
]
