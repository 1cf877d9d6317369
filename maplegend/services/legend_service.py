"""Service that assembles a legend tree from a map's layer collections."""

import logging
from typing import Any, Optional, Sequence

from ..models.layer import MapDefinition
from ..models.legend import Legend, LegendDecoration, LegendNode, LegendStyle
from .item_factories import default_item_factories
from .registry_service import InvalidArgumentError, ItemFactory, ItemFactoryRegistry
from .symbol_service import SymbolPreviewService

logger = logging.getLogger(__name__)


class LegendService:
    """Builds legends: a "Map" root, one section per non-empty layer
    collection, and one node per layer.

    Layer nodes come from the item factory registered for the layer's type
    (see :class:`ItemFactoryRegistry` for the lookup rules). Layers without a
    factory get a generic node with a rendered preview as their symbol.
    """

    ROOT_LABEL = "Map"

    def __init__(
        self,
        style: Optional[LegendStyle] = None,
        decoration: Optional[LegendDecoration] = None,
        registry: Optional[ItemFactoryRegistry] = None,
        symbols: Optional[SymbolPreviewService] = None,
    ):
        """Initialize the legend service.

        Args:
            style: Fonts, colors and sizes copied onto nodes.
            decoration: Frame settings attached to each built legend.
            registry: Item factory registry. Defaults to a new registry
                seeded with :func:`default_item_factories`.
            symbols: Preview renderer for generic symbols.
        """
        self.style = style or LegendStyle()
        self.decoration = decoration or LegendDecoration()
        self.registry = registry if registry is not None else ItemFactoryRegistry(default_item_factories())
        self.symbols = symbols or SymbolPreviewService()

    # ------------------------------------------------------------------
    # Registry access
    # ------------------------------------------------------------------

    def register(self, factory: ItemFactory) -> None:
        """Register an item factory; it replaces earlier ones for its types."""
        self.registry.register(factory)

    def factory_for(self, item: Any) -> Optional[ItemFactory]:
        """Return the item factory resolved for ``item``'s type, or None."""
        return self.registry.resolve_for(item)

    # ------------------------------------------------------------------
    # Tree assembly
    # ------------------------------------------------------------------

    def create(self, map_definition: MapDefinition) -> Legend:
        """Build the legend for a map.

        Sections are added in the fixed order Variable, Static, Background,
        skipping empty collections.
        """
        legend = Legend(
            factory=self,
            style=self.style,
            decoration=self.decoration.model_copy(),
            map_name=map_definition.name,
        )
        legend.root = LegendNode(
            label=self.ROOT_LABEL,
            label_font=self.style.header_font,
            label_brush=self.style.fore_color,
        )

        sections = (
            ("Variable", map_definition.variable_layers),
            ("Static", map_definition.layers),
            ("Background", map_definition.background_layers),
        )
        for title, layers in sections:
            if len(layers) > 0:
                legend.root.children.append(self.create_section(legend, title, layers))

        logger.info(
            "Built legend for '%s': %d sections, %d nodes",
            map_definition.name,
            len(legend.root.children),
            sum(1 for _ in legend.root.walk()),
        )
        return legend

    def create_section(self, legend: Legend, title: str, layers: Sequence[Any]) -> LegendNode:
        """Build a section header node listing ``layers`` last-to-first."""
        section = LegendNode(
            label=title,
            label_font=self.style.header_font,
            label_brush=self.style.fore_color,
            indentation=self.style.indentation,
            padding=self.style.padding,
            expanded=True,
        )
        for i in range(len(layers) - 1, -1, -1):
            section.children.append(self.create_leaf(legend, layers[i]))
        return section

    def create_leaf(self, legend: Legend, layer: Any) -> LegendNode:
        """Build the node for one layer.

        Delegates to the resolved item factory and returns its node as is;
        falls back to a generic node when no factory matches.

        Raises:
            InvalidArgumentError: if ``layer`` is None.
            LayerNestingError: if layer groups nest cyclically or too deep.
        """
        if layer is None:
            raise InvalidArgumentError("layer must not be None")

        with legend.visiting(layer):
            factory = self.factory_for(layer)
            if factory is not None:
                return factory.create(legend, layer)

            logger.debug("No item factory for %s, using generic node", type(layer).__name__)
            return LegendNode(
                label=layer.name,
                label_font=self.style.item_font,
                label_brush=self.style.fore_color,
                symbol=self._create_generic_symbol(layer),
                exclude=not layer.enabled,
                indentation=self.style.indentation,
                padding=self.style.padding,
                expanded=True,
            )

    def _create_generic_symbol(self, layer: Any):
        if self.style.symbol_disabled:
            return None
        width, height = self.style.symbol_size
        return self.symbols.render(layer, width, height)
