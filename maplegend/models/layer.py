"""Map and layer models consumed by the legend builder."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Iterator, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field

from .type_key import Capability


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------

class Styled(Capability):
    """Layer drawn with a single ``VectorStyle``."""


class Themed(Capability):
    """Layer whose features may be classified by a theme."""


class Queryable(Capability):
    """Layer whose features can be queried by attribute."""


# ---------------------------------------------------------------------------
# Styles and themes
# ---------------------------------------------------------------------------

class GeometryType(str, Enum):
    """Geometry kind of a vector layer."""

    POINT = "point"
    LINE = "line"
    POLYGON = "polygon"


class SymbolShape(str, Enum):
    """Swatch shape used for a style in the legend."""

    RECT = "rect"
    CIRCLE = "circle"
    LINE = "line"
    DASHED = "dashed"


class VectorStyle(BaseModel):
    """Fill and outline of vector features."""

    name: str = ""
    fill: Optional[str] = Field(default="#7CB342", description="Fill color (hex), None for no fill")
    line: str = Field(default="#4A4A4A", description="Outline/line color (hex)")
    line_width: int = Field(default=1, ge=0, le=20)
    symbol: SymbolShape = SymbolShape.RECT


class ThemeCategory(BaseModel):
    """One class of a category theme."""

    label: str
    style: VectorStyle = Field(default_factory=VectorStyle)


class CategoryTheme(BaseModel):
    """Classifies features by the value of one attribute."""

    attribute: str
    categories: list[ThemeCategory] = Field(default_factory=list)


class Symbolizer(BaseModel):
    """Draws every feature of one geometry type with a single style."""

    name: str = ""
    geometry: GeometryType = GeometryType.POINT
    style: VectorStyle = Field(default_factory=lambda: VectorStyle(symbol=SymbolShape.CIRCLE))


# ---------------------------------------------------------------------------
# Layers
# ---------------------------------------------------------------------------

class Layer(BaseModel):
    """Common surface of every layer: a display name and an enabled flag."""

    kind: str = "layer"
    name: str = Field(..., min_length=1, description="Display name")
    enabled: bool = True


class VectorLayer(Layer, Styled, Themed, Queryable):
    """Layer of vector features."""

    kind: Literal["vector"] = "vector"
    geometry: GeometryType = GeometryType.POLYGON
    style: VectorStyle = Field(default_factory=VectorStyle)
    theme: Optional[CategoryTheme] = None


class LabelLayer(Layer, Styled):
    """Text labels drawn from a feature attribute."""

    kind: Literal["label"] = "label"
    label_field: str = "name"
    style: VectorStyle = Field(
        default_factory=lambda: VectorStyle(fill=None, line="#2C1810", symbol=SymbolShape.LINE)
    )


class SymbolizerLayer(Layer, Styled):
    """Vector layer rendered through a point, line or polygon symbolizer."""

    kind: Literal["symbolizer"] = "symbolizer"
    symbolizer: Symbolizer = Field(default_factory=Symbolizer)

    @property
    def style(self) -> VectorStyle:
        return self.symbolizer.style


class RasterLayer(Layer):
    """Image layer, drawn from a file or as a flat color."""

    kind: Literal["raster"] = "raster"
    image_path: Optional[Path] = None
    color: str = "#E8F4FC"


class TileLayer(RasterLayer):
    """Raster layer fetched from a tile server."""

    kind: Literal["tile"] = "tile"
    url_template: str = ""


class LayerGroup(Layer):
    """Named group of nested layers."""

    kind: Literal["group"] = "group"
    layers: list["AnyLayer"] = Field(default_factory=list)

    def iter_layers(self) -> Iterator[Layer]:
        """Yield every nested layer, depth first."""
        for layer in self.layers:
            yield layer
            if isinstance(layer, LayerGroup):
                yield from layer.iter_layers()


AnyLayer = Annotated[
    Union[VectorLayer, LabelLayer, SymbolizerLayer, RasterLayer, TileLayer, LayerGroup],
    Field(discriminator="kind"),
]

LayerGroup.model_rebuild()


# ---------------------------------------------------------------------------
# Map
# ---------------------------------------------------------------------------

class MapDefinition(BaseModel):
    """A map's three layer collections, in draw order (index 0 drawn first)."""

    name: str = Field(default="Map", min_length=1)
    variable_layers: list[AnyLayer] = Field(default_factory=list)
    layers: list[AnyLayer] = Field(default_factory=list)
    background_layers: list[AnyLayer] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: Path) -> "MapDefinition":
        """Load a map definition from a YAML file.

        Raises:
            yaml.YAMLError: if the file is not valid YAML.
            pydantic.ValidationError: if the document is not a valid map,
                including a top level that is not a mapping.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        return cls.model_validate(data)

    def to_yaml(self, path: Path) -> None:
        """Save the map definition to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def iter_layers(self) -> Iterator[Layer]:
        """Yield every layer of every collection, nested groups included."""
        for collection in (self.variable_layers, self.layers, self.background_layers):
            for layer in collection:
                yield layer
                if isinstance(layer, LayerGroup):
                    yield from layer.iter_layers()

    def find_layer(self, name: str) -> Optional[Layer]:
        """Return the first layer with the given name, or None."""
        for layer in self.iter_layers():
            if layer.name == name:
                return layer
        return None
