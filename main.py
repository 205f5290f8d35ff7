import logging

from css_builder import Combinator, DuplicatePartError, OrderError, css_selector_builder as builder


def build_examples() -> list[str]:
    return [
        builder.id('main').class_('container').class_('editable').stringify(),
        builder.element('a').attr('href$=".png"').pseudo_class('focus').stringify(),
        builder.combine(
            builder.element('div').id('main').class_('container').class_('draggable'),
            Combinator.ADJACENT_SIBLING,
            builder.combine(
                builder.element('table').id('data'),
                Combinator.GENERAL_SIBLING,
                builder.combine(
                    builder.element('tr').pseudo_class('nth-of-type(even)'),
                    Combinator.DESCENDANT,
                    builder.element('td').pseudo_class('nth-of-type(even)'),
                ),
            ),
        ).stringify(),
    ]


def main():
    logging.basicConfig(level=logging.INFO)
    for selector in build_examples():
        print('Built selector', repr(selector))
    try:
        builder.element('div').element('span')
    except DuplicatePartError as e:
        print('Rejected:', e)
    try:
        builder.class_('container').id('main')
    except OrderError as e:
        print('Rejected:', e)


if __name__ == '__main__':
    main()
