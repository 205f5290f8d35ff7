from enum import IntEnum, StrEnum


class Category(IntEnum):
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def repeatable(self) -> bool:
        return self in (Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS)

    def format(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f'{prefix}{value}{suffix}'


_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ('', ''),
    Category.ID: ('#', ''),
    Category.CLASS: ('.', ''),
    Category.ATTRIBUTE: ('[', ']'),
    Category.PSEUDO_CLASS: (':', ''),
    Category.PSEUDO_ELEMENT: ('::', ''),
}


class Combinator(StrEnum):
    """Combinators accepted by ``combine``. Plain strings work as well."""

    DESCENDANT = ' '
    ADJACENT_SIBLING = '+'
    GENERAL_SIBLING = '~'
    CHILD = '>'
