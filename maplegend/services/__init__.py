"""Legend building services."""

from .registry_service import InvalidArgumentError, ItemFactory, ItemFactoryRegistry
from .symbol_service import SymbolPreviewService
from .item_factories import (
    CategoryThemeItemFactory,
    SymbolizerItemFactory,
    SymbolizerLayerItemFactory,
    LayerGroupItemFactory,
    VectorLayerItemFactory,
    VectorStyleItemFactory,
    default_item_factories,
)
from .legend_service import LegendService

__all__ = [
    "InvalidArgumentError",
    "ItemFactory",
    "ItemFactoryRegistry",
    "SymbolPreviewService",
    "CategoryThemeItemFactory",
    "SymbolizerItemFactory",
    "SymbolizerLayerItemFactory",
    "LayerGroupItemFactory",
    "VectorLayerItemFactory",
    "VectorStyleItemFactory",
    "default_item_factories",
    "LegendService",
]
