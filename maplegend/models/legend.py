"""Legend tree, style and decoration models."""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Optional

from PIL import Image
from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from ..services.legend_service import LegendService


class LayerNestingError(ValueError):
    """Raised when layer groups nest cyclically or deeper than allowed."""


class FontSpec(BaseModel):
    """Font reference carried on legend nodes; never resolved by the builder."""

    family: str = "Arial"
    size: int = Field(default=11, ge=1, le=200, description="Size in pixels")
    bold: bool = False


class LegendStyle(BaseModel):
    """Styling defaults copied onto every legend node."""

    header_font: FontSpec = Field(default_factory=lambda: FontSpec(size=14, bold=True))
    item_font: FontSpec = Field(default_factory=lambda: FontSpec(size=11))
    fore_color: str = Field(default="#483D8B", description="Label color (DarkSlateBlue)")
    symbol_size: tuple[int, int] = Field(
        default=(16, 16),
        description="Symbol size in pixels; (0, 0) disables generic symbols",
    )
    indentation: Optional[int] = Field(
        default=None,
        ge=0,
        description="Child indentation in pixels (defaults to the symbol width)",
    )
    padding: tuple[int, int] = Field(default=(3, 3), description="Padding between items")
    max_depth: int = Field(default=32, ge=1, description="Maximum layer group nesting")

    @model_validator(mode="after")
    def _default_indentation(self) -> "LegendStyle":
        if self.indentation is None:
            self.indentation = self.symbol_size[0]
        return self

    @property
    def symbol_disabled(self) -> bool:
        return self.symbol_size[0] <= 0 or self.symbol_size[1] <= 0


class LegendDecoration(BaseModel):
    """Frame settings for the drawn legend panel."""

    border_color: str = "#FF6347"  # Tomato
    border_margin: tuple[int, int] = (5, 5)
    border_width: int = Field(default=2, ge=0)
    rounded_edges: bool = True
    background_color: str = "#ADD8E6"  # LightBlue


@dataclass
class LegendNode:
    """One entry of the legend tree: header, group or leaf.

    ``children`` is kept in the order it was produced; that order is the
    visible top-to-bottom order.
    """

    label: str = ""
    label_font: Optional[FontSpec] = None
    label_brush: Optional[str] = None
    indentation: int = 0
    padding: tuple[int, int] = (0, 0)
    expanded: bool = True
    exclude: bool = False
    symbol: Optional[Image.Image] = None
    children: list["LegendNode"] = field(default_factory=list)

    def walk(self, depth: int = 0) -> Iterator[tuple[int, "LegendNode"]]:
        """Yield ``(depth, node)`` for this node and its descendants, in visible order."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def find(self, label: str) -> Optional["LegendNode"]:
        """Return the first descendant (or self) with the given label."""
        for _, node in self.walk():
            if node.label == label:
                return node
        return None


@dataclass
class Legend:
    """Result of one legend build, and the context passed to item factories."""

    factory: "LegendService"
    style: LegendStyle
    decoration: LegendDecoration = field(default_factory=LegendDecoration)
    map_name: str = "Map"
    root: LegendNode = field(default_factory=LegendNode)
    _path: list[int] = field(default_factory=list, repr=False)

    @contextmanager
    def visiting(self, item: Any) -> Iterator[None]:
        """Track ``item`` on the current build path.

        Raises:
            LayerNestingError: if ``item`` is already being built further up
                the path, or the path would exceed ``style.max_depth``.
        """
        key = id(item)
        if key in self._path:
            name = getattr(item, "name", repr(item))
            raise LayerNestingError(f"Layer '{name}' contains itself")
        if len(self._path) >= self.style.max_depth:
            raise LayerNestingError(
                f"Layer nesting deeper than {self.style.max_depth} levels"
            )
        self._path.append(key)
        try:
            yield
        finally:
            self._path.pop()

    @property
    def depth(self) -> int:
        """Number of layers currently being built above this point."""
        return len(self._path)
