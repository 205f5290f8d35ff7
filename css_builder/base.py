from typing import Protocol, runtime_checkable


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as a selector string."""

    def stringify(self) -> str:
        ...
