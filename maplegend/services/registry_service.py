"""Registry mapping runtime types to legend item factories."""

import logging
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

from ..models.type_key import TypeKey

if TYPE_CHECKING:
    from ..models.legend import Legend, LegendNode

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a lookup is attempted without a type key."""


class ItemFactory(ABC):
    """Builds the legend node for items of the types listed in ``for_types``."""

    for_types: tuple[type, ...] = ()

    @abstractmethod
    def create(self, legend: "Legend", item: Any) -> "LegendNode":
        """Create the legend node for ``item``."""


class ItemFactoryRegistry:
    """Type-keyed table of item factories with inheritance-aware lookup.

    Reads go against an immutable snapshot of the table and take no lock.
    Writers serialize on a lock and publish a fresh copy, so a lookup racing
    a registration sees either the old or the new table, never a partial one.
    """

    def __init__(self, defaults: Iterable[ItemFactory] = ()):
        """Initialize the registry.

        Args:
            defaults: Factories registered in order at construction. Later
                factories replace earlier ones for shared types.
        """
        self._lock = threading.Lock()
        self._factories: dict[TypeKey, ItemFactory] = {}
        for factory in defaults:
            self.register(factory)

    def register(self, factory: ItemFactory) -> None:
        """Map every type in ``factory.for_types`` to ``factory``.

        An existing mapping for the same type is replaced (last write wins).
        """
        with self._lock:
            table = dict(self._factories)
            for for_type in factory.for_types:
                key = TypeKey(for_type)
                previous = table.get(key)
                if previous is not None and previous is not factory:
                    logger.debug(
                        "Replacing %s with %s for %s",
                        type(previous).__name__,
                        type(factory).__name__,
                        key.name,
                    )
                table[key] = factory
            self._factories = table
        logger.debug(
            "Registered %s for %s",
            type(factory).__name__,
            ", ".join(t.__qualname__ for t in factory.for_types) or "no types",
        )

    def resolve(self, type_key: Union[TypeKey, type, None]) -> Optional[ItemFactory]:
        """Return the factory for ``type_key``, or None if nothing matches.

        Walks the ancestor chain from the type itself to ``object``. At each
        ancestor an exact mapping wins; failing that, the capabilities the
        ancestor declares are tried in declaration order. A capability hit
        ends the walk, so a capability declared on a more specific type
        outranks an exact mapping registered for a less specific ancestor.

        Only the capabilities an ancestor lists in its own bases are tried at
        that ancestor; inherited ones are tried once the walk reaches the
        class that declares them (see
        ``test_inherited_capability_found_at_declaring_ancestor``).

        Raises:
            InvalidArgumentError: if ``type_key`` is None.
        """
        if type_key is None:
            raise InvalidArgumentError("type_key must not be None")
        if not isinstance(type_key, TypeKey):
            type_key = TypeKey(type_key)

        table = self._factories
        for ancestor in type_key.ancestors():
            factory = table.get(ancestor)
            if factory is not None:
                return factory

            for capability in ancestor.capabilities():
                factory = table.get(capability)
                if factory is not None:
                    return factory

        return None

    def resolve_for(self, item: Any) -> Optional[ItemFactory]:
        """Return the factory for ``item``'s runtime type."""
        return self.resolve(TypeKey.of(item))

    def items(self) -> list[tuple[TypeKey, ItemFactory]]:
        """Snapshot of the current mappings, in registration order."""
        return list(self._factories.items())

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, type_key: Union[TypeKey, type]) -> bool:
        if not isinstance(type_key, TypeKey):
            type_key = TypeKey(type_key)
        return type_key in self._factories
