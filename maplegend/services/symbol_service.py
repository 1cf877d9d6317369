"""Generic legend symbols: small off-screen previews of layers and styles."""

import logging
from typing import Any, Optional

from PIL import Image, ImageDraw

from ..models.layer import LayerGroup, RasterLayer, SymbolShape, VectorStyle
from ..utils.image_utils import blend_images, hex_to_rgba, load_image, resize_image

logger = logging.getLogger(__name__)

# Previews are drawn at this multiple of the target size, then downsampled
OVERSAMPLE = 10


class SymbolPreviewService:
    """Renders layer previews and style swatches with Pillow.

    All drawing happens on a transparent canvas ``OVERSAMPLE`` times the
    requested size, which is then downsampled with LANCZOS. A requested size
    with a zero dimension disables previews and yields None.
    """

    PLACEHOLDER_COLOR = "#D5C8B8"
    OUTLINE_COLOR = "#3C2415"

    def render(self, layer: Any, width: int, height: int) -> Optional[Image.Image]:
        """Render a preview of ``layer`` at ``width`` x ``height`` pixels.

        Args:
            layer: Any layer-like object. Styled layers draw their style
                swatch, raster layers their image or flat color, groups their
                enabled members; anything else draws a placeholder tile.
            width: Target width in pixels.
            height: Target height in pixels.

        Returns:
            RGBA image of the requested size, or None if either dimension is 0.
        """
        if width <= 0 or height <= 0:
            return None

        canvas = self._new_canvas(width, height)
        canvas = self._draw_layer(canvas, layer, seen=set())
        return resize_image(canvas, (width, height))

    def render_style(self, style: VectorStyle, width: int, height: int) -> Optional[Image.Image]:
        """Render the legend swatch for ``style``, or None for a zero size."""
        if width <= 0 or height <= 0:
            return None

        canvas = self._new_canvas(width, height)
        self._draw_style(canvas, style)
        return resize_image(canvas, (width, height))

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    @staticmethod
    def _new_canvas(width: int, height: int) -> Image.Image:
        return Image.new("RGBA", (width * OVERSAMPLE, height * OVERSAMPLE), (0, 0, 0, 0))

    def _draw_layer(self, canvas: Image.Image, layer: Any, seen: set[int]) -> Image.Image:
        if isinstance(layer, LayerGroup):
            if id(layer) in seen:
                return canvas
            seen.add(id(layer))
            # Index 0 is drawn first, so later members end up on top
            for member in layer.layers:
                if member.enabled:
                    canvas = self._draw_layer(canvas, member, seen)
            return canvas

        style = getattr(layer, "style", None)
        if isinstance(style, VectorStyle):
            self._draw_style(canvas, style)
            return canvas

        if isinstance(layer, RasterLayer):
            return self._draw_raster(canvas, layer)

        self._draw_placeholder(canvas)
        return canvas

    def _draw_raster(self, canvas: Image.Image, layer: RasterLayer) -> Image.Image:
        if layer.image_path is not None:
            try:
                image = load_image(layer.image_path)
            except OSError as exc:
                logger.warning(
                    "Could not read image for layer '%s' (%s): %s",
                    layer.name,
                    layer.image_path,
                    exc,
                )
            else:
                return blend_images(canvas, resize_image(image, canvas.size))

        draw = ImageDraw.Draw(canvas)
        draw.rectangle([0, 0, canvas.width - 1, canvas.height - 1], fill=hex_to_rgba(layer.color))
        return canvas

    def _draw_placeholder(self, canvas: Image.Image) -> None:
        draw = ImageDraw.Draw(canvas)
        inset = canvas.width // 8
        draw.rectangle(
            [inset, inset, canvas.width - inset - 1, canvas.height - inset - 1],
            fill=hex_to_rgba(self.PLACEHOLDER_COLOR),
            outline=hex_to_rgba(self.OUTLINE_COLOR),
            width=OVERSAMPLE,
        )

    def _draw_style(self, canvas: Image.Image, style: VectorStyle) -> None:
        """Draw a rect, circle, line or dashed-line swatch filling the canvas."""
        draw = ImageDraw.Draw(canvas)
        w, h = canvas.size
        inset = max(1, min(w, h) // 8)
        box = [inset, inset, w - inset - 1, h - inset - 1]
        fill = hex_to_rgba(style.fill) if style.fill else None
        line = hex_to_rgba(style.line)
        outline_width = style.line_width * OVERSAMPLE
        stroke_width = max(outline_width, h // 5)
        cy = h // 2

        if style.symbol == SymbolShape.CIRCLE:
            draw.ellipse(box, fill=fill, outline=line if outline_width else None, width=outline_width)
        elif style.symbol == SymbolShape.LINE:
            draw.line([(inset, cy), (w - inset - 1, cy)], fill=line, width=stroke_width)
        elif style.symbol == SymbolShape.DASHED:
            dash_len = max(3, w // 4)
            x = inset
            while x < w - inset:
                x_end = min(x + dash_len, w - inset - 1)
                draw.line([(x, cy), (x_end, cy)], fill=line, width=stroke_width)
                x += dash_len * 2
        else:
            draw.rectangle(box, fill=fill, outline=line if outline_width else None, width=outline_width)
