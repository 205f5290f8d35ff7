import logging

from .base import Stringifiable
from .parts import Combinator
from .selector import CombinedSelector, SelectorBuilder

logger = logging.getLogger(__name__)


class CssSelectorBuilder:
    """Entry point for building selectors.

    Every part method starts a new ``SelectorBuilder``, so the same instance
    can be shared freely::

        builder = CssSelectorBuilder()
        builder.id('main').class_('container').stringify()  # '#main.container'
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: Combinator | str, right: Stringifiable
    ) -> CombinedSelector:
        logger.debug('Combining %r %r %r', left, str(combinator), right)
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = CssSelectorBuilder()
