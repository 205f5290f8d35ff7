"""Tests for the selector facade and the package-level shortcuts."""

import logging

import pytest

import css_builder
from css_builder import (
    CombinedSelector,
    CssSelectorBuilder,
    DuplicatePartError,
    OrderError,
    SelectorBuilder,
    css_selector_builder as builder,
)


class TestFacadeEntryPoints:
    def test_id_and_classes(self):
        assert builder.id('main').class_('container').class_('editable').stringify() == '#main.container.editable'

    def test_element_attr_pseudo_class(self):
        selector = builder.element('a').attr('href$=".png"').pseudo_class('focus')
        assert selector.stringify() == 'a[href$=".png"]:focus'

    @pytest.mark.parametrize(
        'method, value, expected',
        [
            ('element', 'div', 'div'),
            ('id', 'nav', '#nav'),
            ('class_', 'item', '.item'),
            ('attr', 'title', '[title]'),
            ('pseudo_class', 'hover', ':hover'),
            ('pseudo_element', 'before', '::before'),
        ],
    )
    def test_each_entry_point_starts_builder(self, method, value, expected):
        selector = getattr(builder, method)(value)
        assert isinstance(selector, SelectorBuilder)
        assert selector.stringify() == expected

    def test_each_call_gets_fresh_builder(self):
        first = builder.element('div')
        second = builder.element('span')
        assert first is not second
        assert first.stringify() == 'div'
        assert second.stringify() == 'span'

    def test_errors_surface_through_facade(self):
        with pytest.raises(DuplicatePartError):
            builder.element('div').element('span')
        with pytest.raises(OrderError):
            builder.class_('c').id('x')

    def test_facade_holds_no_state(self):
        assert vars(CssSelectorBuilder()) == {}


class TestCombine:
    def test_combine(self):
        combined = builder.combine(builder.element('div').id('main'), '+', builder.element('span'))
        assert isinstance(combined, CombinedSelector)
        assert combined.stringify() == 'div#main + span'

    def test_deep_nesting(self):
        combined = builder.combine(
            builder.element('div').id('main').class_('container').class_('draggable'),
            '+',
            builder.combine(
                builder.element('table').id('data'),
                '~',
                builder.combine(
                    builder.element('tr').pseudo_class('nth-of-type(even)'),
                    ' ',
                    builder.element('td').pseudo_class('nth-of-type(even)'),
                ),
            ),
        )
        assert combined.stringify() == (
            'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)'
        )

    def test_nested_on_the_left(self):
        a, b, c = builder.element('a'), builder.element('b'), builder.element('c')
        combined = builder.combine(builder.combine(a, '>', b), '~', c)
        assert combined.stringify() == 'a > b ~ c'

    def test_unknown_combinator_is_rendered_as_is(self):
        assert builder.combine(builder.element('a'), '|', builder.element('b')).stringify() == 'a | b'

    def test_combine_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='css_builder.builder')
        builder.combine(builder.element('a'), '>', builder.element('b'))
        assert 'Combining' in caplog.text


class TestModuleShortcuts:
    def test_free_functions(self):
        selector = css_builder.element('a').id('x').class_('c')
        assert selector.stringify() == 'a#x.c'
        combined = css_builder.combine(selector, '>', css_builder.pseudo_element('after'))
        assert combined.stringify() == 'a#x.c > ::after'

    def test_all_entry_points_exported(self):
        for name in ('element', 'id', 'class_', 'attr', 'pseudo_class', 'pseudo_element', 'combine'):
            assert name in css_builder.__all__
            assert callable(getattr(css_builder, name))


class TestDemoScript:
    def test_build_examples(self):
        from main import build_examples

        assert build_examples() == [
            '#main.container.editable',
            'a[href$=".png"]:focus',
            'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)',
        ]
