"""Data models for legend building."""

from .type_key import Capability, TypeKey, is_capability
from .layer import (
    AnyLayer,
    CategoryTheme,
    GeometryType,
    LabelLayer,
    Layer,
    LayerGroup,
    MapDefinition,
    Queryable,
    RasterLayer,
    Styled,
    SymbolShape,
    Symbolizer,
    SymbolizerLayer,
    Themed,
    ThemeCategory,
    TileLayer,
    VectorLayer,
    VectorStyle,
)
from .legend import (
    FontSpec,
    Legend,
    LegendDecoration,
    LegendNode,
    LegendStyle,
    LayerNestingError,
)

__all__ = [
    "Capability",
    "TypeKey",
    "is_capability",
    "AnyLayer",
    "CategoryTheme",
    "GeometryType",
    "LabelLayer",
    "Layer",
    "LayerGroup",
    "MapDefinition",
    "Queryable",
    "RasterLayer",
    "Styled",
    "SymbolShape",
    "Symbolizer",
    "SymbolizerLayer",
    "Themed",
    "ThemeCategory",
    "TileLayer",
    "VectorLayer",
    "VectorStyle",
    "FontSpec",
    "Legend",
    "LegendDecoration",
    "LegendNode",
    "LegendStyle",
    "LayerNestingError",
]
