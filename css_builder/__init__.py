from .base import Stringifiable
from .builder import CssSelectorBuilder, css_selector_builder
from .errors import DuplicatePartError, OrderError, SelectorError
from .parts import Category, Combinator
from .selector import CombinedSelector, SelectorBuilder
from .serialization import from_json, to_json
from .shapes import Rectangle

element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine

__all__ = [
    'Category',
    'Combinator',
    'CombinedSelector',
    'CssSelectorBuilder',
    'DuplicatePartError',
    'OrderError',
    'Rectangle',
    'SelectorBuilder',
    'SelectorError',
    'Stringifiable',
    'attr',
    'class_',
    'combine',
    'css_selector_builder',
    'element',
    'from_json',
    'id',
    'pseudo_class',
    'pseudo_element',
    'to_json',
]
