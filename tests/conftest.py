"""Shared test fixtures."""

import pytest

from maplegend.models.layer import (
    CategoryTheme,
    LabelLayer,
    LayerGroup,
    MapDefinition,
    RasterLayer,
    SymbolShape,
    ThemeCategory,
    TileLayer,
    VectorLayer,
    VectorStyle,
)
from maplegend.models.legend import LegendStyle
from maplegend.services.legend_service import LegendService


@pytest.fixture
def park_style():
    """Green filled rectangle style."""
    return VectorStyle(name="Parks", fill="#7CB342", line="#1B5E20", line_width=1)


@pytest.fixture
def road_theme():
    """Category theme with three road classes."""
    return CategoryTheme(
        attribute="highway",
        categories=[
            ThemeCategory(label="Motorway", style=VectorStyle(line="#E65100", symbol=SymbolShape.LINE)),
            ThemeCategory(label="Primary", style=VectorStyle(line="#FFB300", symbol=SymbolShape.LINE)),
            ThemeCategory(label="Track", style=VectorStyle(line="#6A6A6A", symbol=SymbolShape.DASHED)),
        ],
    )


@pytest.fixture
def sample_map(park_style, road_theme):
    """Map with all three layer collections populated."""
    return MapDefinition(
        name="Test City",
        variable_layers=[VectorLayer(name="Vehicles", geometry="point")],
        layers=[
            VectorLayer(name="Parks", style=park_style),
            VectorLayer(name="Roads", geometry="line", theme=road_theme),
            LayerGroup(
                name="Annotations",
                layers=[
                    LabelLayer(name="Street names"),
                    LabelLayer(name="POI names", enabled=False),
                ],
            ),
        ],
        background_layers=[
            RasterLayer(name="Paper", color="#FFF8F0"),
            TileLayer(name="Hillshade", url_template="https://tiles.example/{z}/{x}/{y}.png"),
        ],
    )


@pytest.fixture
def static_only_map():
    """Map with only static layers A, B, C (index 0..2)."""
    return MapDefinition(
        name="Static only",
        layers=[RasterLayer(name="A"), RasterLayer(name="B"), RasterLayer(name="C")],
    )


@pytest.fixture
def small_style():
    """Legend style with small symbols to keep rendering cheap."""
    return LegendStyle(symbol_size=(8, 8))


@pytest.fixture
def service(small_style):
    """Legend service with the default item factories."""
    return LegendService(style=small_style)


MAP_YAML = """
name: Harbour
variable_layers: []
layers:
  - kind: vector
    name: Water
    style:
      fill: "#4A90D9"
      line: "#1A5276"
  - kind: group
    name: Labels
    layers:
      - kind: label
        name: Quay names
      - kind: label
        name: Buoy names
        enabled: false
background_layers:
  - kind: raster
    name: Paper
    color: "#FFF8F0"
"""


@pytest.fixture
def map_file(tmp_path):
    """Map definition written to a YAML file."""
    path = tmp_path / "map.yaml"
    path.write_text(MAP_YAML)
    return path
