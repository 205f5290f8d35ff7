from .parts import Category


class SelectorError(Exception):
    message = 'Invalid selector'

    def __init__(self, category: Category, message: str | None = None) -> None:
        self.category = category
        super().__init__(message or self.message)


class DuplicatePartError(SelectorError):
    message = 'Element, id and pseudo-element should not occur more than one time inside the selector'


class OrderError(SelectorError):
    message = (
        'Selector parts should be arranged in the following order: '
        'element, id, class, attribute, pseudo-class, pseudo-element'
    )
