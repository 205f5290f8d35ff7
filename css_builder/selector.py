from dataclasses import dataclass
from typing import Self

from .base import Stringifiable
from .errors import DuplicatePartError, OrderError
from .parts import Category, Combinator


class SelectorBuilder:
    """Collects the parts of one simple selector, e.g. ``a#x.c1[href]:focus::before``.

    Parts must be added in category order (element, id, class, attribute,
    pseudo-class, pseudo-element). Element, id and pseudo-element may only be
    set once.
    """

    def __init__(self) -> None:
        self._parts: dict[Category, list[str]] = {category: [] for category in Category}
        self._reached: Category | None = None

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.stringify()!r})'

    def _add(self, category: Category, value: str) -> Self:
        if not category.repeatable and self._parts[category]:
            raise DuplicatePartError(category)
        if self._reached is not None and category < self._reached:
            raise OrderError(category)
        self._parts[category].append(value)
        self._reached = category
        return self

    def element(self, value: str) -> Self:
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> Self:
        return self._add(Category.ID, value)

    def class_(self, value: str) -> Self:
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> Self:
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Self:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Self:
        return self._add(Category.PSEUDO_ELEMENT, value)

    def parts(self, category: Category) -> tuple[str, ...]:
        return tuple(self._parts[category])

    def stringify(self) -> str:
        return ''.join(
            category.format(value)
            for category in Category
            for value in self._parts[category]
        )


@dataclass
class CombinedSelector:
    left: Stringifiable
    combinator: Combinator | str
    right: Stringifiable

    def __str__(self) -> str:
        return self.stringify()

    def stringify(self) -> str:
        # the combinator is always padded, so the descendant one renders as three spaces
        return f'{self.left.stringify()} {self.combinator} {self.right.stringify()}'
