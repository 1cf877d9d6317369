"""Tests for maplegend.models.legend."""

import pytest
from pydantic import ValidationError

from maplegend.models.layer import RasterLayer
from maplegend.models.legend import (
    FontSpec,
    Legend,
    LegendDecoration,
    LegendNode,
    LegendStyle,
    LayerNestingError,
)


# ---------------------------------------------------------------------------
# LegendStyle / LegendDecoration
# ---------------------------------------------------------------------------

class TestLegendStyle:
    def test_defaults(self):
        style = LegendStyle()
        assert style.header_font == FontSpec(family="Arial", size=14, bold=True)
        assert style.item_font == FontSpec(family="Arial", size=11, bold=False)
        assert style.fore_color == "#483D8B"
        assert style.symbol_size == (16, 16)
        assert style.padding == (3, 3)
        assert style.max_depth == 32

    def test_indentation_defaults_to_symbol_width(self):
        assert LegendStyle().indentation == 16
        assert LegendStyle(symbol_size=(24, 10)).indentation == 24

    def test_explicit_indentation_kept(self):
        assert LegendStyle(symbol_size=(24, 10), indentation=5).indentation == 5

    def test_symbol_disabled(self):
        assert LegendStyle(symbol_size=(0, 0)).symbol_disabled is True
        assert LegendStyle(symbol_size=(16, 0)).symbol_disabled is True
        assert LegendStyle().symbol_disabled is False

    def test_list_sizes_coerced(self):
        style = LegendStyle(symbol_size=[8, 8], padding=[1, 2])
        assert style.symbol_size == (8, 8)
        assert style.padding == (1, 2)

    def test_max_depth_lower_bound(self):
        with pytest.raises(ValidationError):
            LegendStyle(max_depth=0)


class TestLegendDecoration:
    def test_defaults(self):
        decoration = LegendDecoration()
        assert decoration.border_color == "#FF6347"
        assert decoration.border_margin == (5, 5)
        assert decoration.border_width == 2
        assert decoration.rounded_edges is True
        assert decoration.background_color == "#ADD8E6"


# ---------------------------------------------------------------------------
# LegendNode
# ---------------------------------------------------------------------------

@pytest.fixture
def tree():
    return LegendNode(
        label="Map",
        children=[
            LegendNode(label="Static", children=[LegendNode(label="C"), LegendNode(label="B")]),
            LegendNode(label="Background", children=[LegendNode(label="Paper")]),
        ],
    )


class TestLegendNode:
    def test_defaults(self):
        node = LegendNode()
        assert node.expanded is True
        assert node.exclude is False
        assert node.symbol is None
        assert node.children == []

    def test_children_not_shared(self):
        first, second = LegendNode(), LegendNode()
        first.children.append(LegendNode(label="x"))
        assert second.children == []

    def test_walk_visible_order(self, tree):
        walked = [(depth, node.label) for depth, node in tree.walk()]
        assert walked == [
            (0, "Map"),
            (1, "Static"),
            (2, "C"),
            (2, "B"),
            (1, "Background"),
            (2, "Paper"),
        ]

    def test_find(self, tree):
        assert tree.find("Paper").label == "Paper"
        assert tree.find("Map") is tree
        assert tree.find("missing") is None


# ---------------------------------------------------------------------------
# Legend.visiting
# ---------------------------------------------------------------------------

class TestVisiting:
    @pytest.fixture
    def legend(self):
        return Legend(factory=None, style=LegendStyle(max_depth=3))

    def test_tracks_depth(self, legend):
        a, b = RasterLayer(name="a"), RasterLayer(name="b")
        with legend.visiting(a):
            assert legend.depth == 1
            with legend.visiting(b):
                assert legend.depth == 2
        assert legend.depth == 0

    def test_reentry_raises(self, legend):
        a = RasterLayer(name="a")
        with legend.visiting(a):
            with pytest.raises(LayerNestingError, match="'a' contains itself"):
                with legend.visiting(a):
                    pass

    def test_sequential_visits_allowed(self, legend):
        a = RasterLayer(name="a")
        with legend.visiting(a):
            pass
        with legend.visiting(a):
            assert legend.depth == 1

    def test_max_depth(self, legend):
        layers = [RasterLayer(name=str(i)) for i in range(4)]
        with legend.visiting(layers[0]):
            with legend.visiting(layers[1]):
                with legend.visiting(layers[2]):
                    with pytest.raises(LayerNestingError, match="deeper than 3"):
                        with legend.visiting(layers[3]):
                            pass

    def test_nesting_error_is_value_error(self):
        assert issubclass(LayerNestingError, ValueError)
