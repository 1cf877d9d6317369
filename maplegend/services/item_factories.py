"""Item factories registered with every new legend service."""

import logging

from ..models.layer import (
    CategoryTheme,
    LayerGroup,
    Symbolizer,
    SymbolizerLayer,
    VectorLayer,
    VectorStyle,
)
from ..models.legend import Legend, LegendNode
from .registry_service import ItemFactory

logger = logging.getLogger(__name__)


class LayerGroupItemFactory(ItemFactory):
    """Legend node for a layer group, with one child per member layer.

    Members are listed last-to-first, matching how sections list layers.
    """

    for_types = (LayerGroup,)

    def create(self, legend: Legend, item: LayerGroup) -> LegendNode:
        node = LegendNode(
            label=item.name,
            label_font=legend.style.item_font,
            label_brush=legend.style.fore_color,
            indentation=legend.style.indentation,
            padding=legend.style.padding,
            exclude=not item.enabled,
            expanded=True,
        )
        for member in reversed(item.layers):
            node.children.append(legend.factory.create_leaf(legend, member))
        return node


class VectorLayerItemFactory(ItemFactory):
    """Legend node for a vector layer.

    Unthemed layers carry their style swatch. Themed layers carry no symbol of
    their own; the node built for the theme supplies their children.
    """

    for_types = (VectorLayer,)

    def create(self, legend: Legend, item: VectorLayer) -> LegendNode:
        node = LegendNode(
            label=item.name,
            label_font=legend.style.item_font,
            label_brush=legend.style.fore_color,
            indentation=legend.style.indentation,
            padding=legend.style.padding,
            exclude=not item.enabled,
            expanded=True,
        )

        if item.theme is None:
            width, height = legend.style.symbol_size
            node.symbol = legend.factory.symbols.render_style(item.style, width, height)
            return node

        theme_factory = legend.factory.factory_for(item.theme)
        if theme_factory is None:
            logger.debug("No factory for theme of layer '%s'", item.name)
            return node

        node.children.extend(theme_factory.create(legend, item.theme).children)
        return node


class VectorStyleItemFactory(ItemFactory):
    """Swatch node for a single vector style."""

    for_types = (VectorStyle,)

    def create(self, legend: Legend, item: VectorStyle) -> LegendNode:
        width, height = legend.style.symbol_size
        return LegendNode(
            label=item.name,
            label_font=legend.style.item_font,
            label_brush=legend.style.fore_color,
            indentation=legend.style.indentation,
            padding=legend.style.padding,
            symbol=legend.factory.symbols.render_style(item, width, height),
        )


class CategoryThemeItemFactory(ItemFactory):
    """Node listing a theme's categories in declaration order."""

    for_types = (CategoryTheme,)

    def create(self, legend: Legend, item: CategoryTheme) -> LegendNode:
        node = LegendNode(
            label=item.attribute,
            label_font=legend.style.item_font,
            label_brush=legend.style.fore_color,
            indentation=legend.style.indentation,
            padding=legend.style.padding,
        )
        for category in item.categories:
            style_factory = legend.factory.factory_for(category.style)
            if style_factory is None:
                child = LegendNode(
                    label=category.label,
                    label_font=legend.style.item_font,
                    label_brush=legend.style.fore_color,
                    indentation=legend.style.indentation,
                    padding=legend.style.padding,
                )
            else:
                child = style_factory.create(legend, category.style)
                child.label = category.label
            node.children.append(child)
        return node


class SymbolizerItemFactory(ItemFactory):
    """Swatch node for a symbolizer, labeled with the symbolizer's name."""

    for_types = (Symbolizer,)

    def create(self, legend: Legend, item: Symbolizer) -> LegendNode:
        width, height = legend.style.symbol_size
        return LegendNode(
            label=item.name,
            label_font=legend.style.item_font,
            label_brush=legend.style.fore_color,
            indentation=legend.style.indentation,
            padding=legend.style.padding,
            symbol=legend.factory.symbols.render_style(item.style, width, height),
        )


class SymbolizerLayerItemFactory(ItemFactory):
    """Legend node for a symbolizer layer.

    The symbol is taken from the node built for the layer's symbolizer.
    """

    for_types = (SymbolizerLayer,)

    def create(self, legend: Legend, item: SymbolizerLayer) -> LegendNode:
        node = LegendNode(
            label=item.name,
            label_font=legend.style.item_font,
            label_brush=legend.style.fore_color,
            indentation=legend.style.indentation,
            padding=legend.style.padding,
            exclude=not item.enabled,
            expanded=True,
        )

        symbolizer_factory = legend.factory.factory_for(item.symbolizer)
        if symbolizer_factory is None:
            logger.debug("No factory for symbolizer of layer '%s'", item.name)
            return node

        node.symbol = symbolizer_factory.create(legend, item.symbolizer).symbol
        return node


def default_item_factories() -> list[ItemFactory]:
    """Fresh instances of the factories a legend service starts with."""
    return [
        LayerGroupItemFactory(),
        VectorLayerItemFactory(),
        VectorStyleItemFactory(),
        CategoryThemeItemFactory(),
        SymbolizerItemFactory(),
        SymbolizerLayerItemFactory(),
    ]
