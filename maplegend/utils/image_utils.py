"""Image processing utilities."""

from pathlib import Path
from typing import Union

from PIL import Image


def hex_to_rgba(hex_color: str, alpha: int = 255) -> tuple[int, int, int, int]:
    """Convert a hex color string to an RGBA tuple."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 6:
        r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    elif len(hex_color) == 8:
        r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
        alpha = int(hex_color[6:8], 16)
    else:
        r, g, b = 0, 0, 0
    return (r, g, b, alpha)


def load_image(path: Union[str, Path]) -> Image.Image:
    """Load an image from file."""
    return Image.open(path).convert("RGBA")


def save_image(image: Image.Image, path: Union[str, Path]) -> None:
    """Save an image to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path)


def resize_image(
    image: Image.Image,
    size: tuple[int, int],
    resample: int = Image.Resampling.LANCZOS,
) -> Image.Image:
    """Resize image to specified size."""
    return image.resize(size, resample=resample)


def blend_images(
    base: Image.Image,
    overlay: Image.Image,
    position: tuple[int, int] = (0, 0),
) -> Image.Image:
    """Alpha-composite overlay onto a copy of base at the given position."""
    if base.mode != "RGBA":
        base = base.convert("RGBA")
    if overlay.mode != "RGBA":
        overlay = overlay.convert("RGBA")

    result = base.copy()
    result.paste(overlay, position, overlay)
    return result
