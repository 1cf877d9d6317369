"""Type keys used to look up legend item factories."""

from dataclasses import dataclass


class Capability:
    """Marker base for capability types.

    A capability describes something a layer supports independent of its
    concrete ancestry. Layer kinds declare capabilities by listing them as
    bases; the declaration order is the lookup order.
    """


def is_capability(cls: type) -> bool:
    """Return True if ``cls`` is a capability type.

    Only classes built purely from capabilities qualify; a layer class that
    declares capabilities is not itself one.
    """
    if cls is Capability:
        return True
    if not isinstance(cls, type) or not issubclass(cls, Capability):
        return False
    return all(is_capability(base) for base in cls.__bases__)


@dataclass(frozen=True)
class TypeKey:
    """Hashable identifier for a runtime type or capability."""

    type_: type

    def __post_init__(self):
        if not isinstance(self.type_, type):
            raise TypeError(f"TypeKey requires a class, got {self.type_!r}")

    @classmethod
    def of(cls, value) -> "TypeKey":
        """Key of the value's own, most specific type."""
        return cls(type(value))

    @property
    def name(self) -> str:
        return self.type_.__qualname__

    @property
    def is_universal(self) -> bool:
        return self.type_ is object

    @property
    def is_capability(self) -> bool:
        return is_capability(self.type_)

    def ancestors(self) -> list["TypeKey"]:
        """This key and its ancestors, most specific first, ending at ``object``.

        Capability types are not part of the chain; they are reached through
        :meth:`capabilities` of the type that declares them.
        """
        chain = [self]
        chain.extend(TypeKey(t) for t in self.type_.__mro__[1:] if not is_capability(t))
        if not chain[-1].is_universal:
            chain.append(TypeKey(object))
        return chain

    def capabilities(self) -> list["TypeKey"]:
        """Capabilities declared directly by this type, in declaration order."""
        return [TypeKey(base) for base in self.type_.__bases__ if is_capability(base)]

    def __repr__(self) -> str:
        return f"TypeKey({self.name})"
