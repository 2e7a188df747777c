"""
Name casing and normalization

String casing functions plus the two factories meant for
``Options.transform_tag`` and ``Options.transform_attribute``:

    tag_normalize('pascal')      'my-component' -> 'MyComponent', 'DIV' -> 'div'
    attribute_normalize('camel') 'data-value'   -> 'dataValue'

Words are split the way lodash's ``words()`` does: at separators
(``-``, ``_``, whitespace, punctuation), at lower-to-upper transitions,
and before the last capital of an upper-case run (``XMLHttp`` ->
``XML``, ``Http``).
"""

import re
from typing import Callable, Dict, List, Union

from ..models.casing import Casing, htmlTag_is
from .log import LOG


_UPPER = r'A-Z\xc0-\xd6\xd8-\xde'
_LOWER = r'a-z\xdf-\xf6\xf8-\xff'
_BREAK = r'\x00-\x2f\x3a-\x40\x5b-\x60\x7b-\xbf\xd7\xf7\u2000-\u206f\u2e00-\u2e7f'
_MISC = f'[^{_BREAK}\\d{_UPPER}{_LOWER}]'
_LOWER_OR_MISC = f'(?:[{_LOWER}]|{_MISC})'
_CONTRACTION_LOWER = "(?:['’](?:d|ll|m|re|s|t|ve))?"
_CONTRACTION_UPPER = "(?:['’](?:D|LL|M|RE|S|T|VE))?"

_WORDS = re.compile('|'.join([
    # Capitalized or lower word ending at a break, a capital or the end
    f'[{_UPPER}]?[{_LOWER}]+{_CONTRACTION_LOWER}(?=[{_BREAK}]|[{_UPPER}]|$)',
    # Upper-case run, stopping before the capital that starts the next word
    f'(?:[{_UPPER}]|{_MISC})+(?=[{_BREAK}]|[{_UPPER}]{_LOWER_OR_MISC}|$)',
    f'[{_UPPER}]?{_LOWER_OR_MISC}+{_CONTRACTION_LOWER}',
    f'[{_UPPER}]+{_CONTRACTION_UPPER}',
    # Ordinals
    r'\d*(?:1ST|2ND|3RD|(?![123])\dTH)(?=\b|[a-z_])',
    r'\d*(?:1st|2nd|3rd|(?![123])\dth)(?=\b|[A-Z_])',
    r'\d+',
]))


def words_split(text: str) -> List[str]:
    """
    Split a name into its words

    Example:
        >>> words_split('fancy-buttonXMLHttp_2nd')
        ['fancy', 'button', 'XML', 'Http', '2nd']
    """
    return _WORDS.findall(text)


def upperFirst(text: str) -> str:
    return text[:1].upper() + text[1:]


def camel_case(text: str) -> str:
    words = words_split(text)
    if not words:
        return ''
    return words[0].lower() + ''.join(upperFirst(word.lower()) for word in words[1:])


def pascal_case(text: str) -> str:
    return upperFirst(camel_case(text))


def kebab_case(text: str) -> str:
    return '-'.join(words_split(text)).lower()


def snake_case(text: str) -> str:
    return '_'.join(words_split(text)).lower()


def none_case(text: str) -> str:
    return text


CASE_NORMALIZERS: Dict[Casing, Callable[[str], str]] = {
    Casing.CAMEL: camel_case,
    Casing.PASCAL: pascal_case,
    Casing.KEBAB: kebab_case,
    Casing.SNAKE: snake_case,
    Casing.NONE: none_case,
}


def caseNormalizer_get(casing: Union[Casing, str]) -> Callable[[str], str]:
    """
    Look up the casing function for a mode

    Raises:
        ValueError: if ``casing`` is not a known mode
    """
    return CASE_NORMALIZERS[Casing(casing)]


def tag_normalize(casing: Union[Casing, str] = Casing.PASCAL) -> Callable[[str], str]:
    """
    Build a tag transform for ``Options.transform_tag``

    HTML element names are lowercased; every other name gets ``casing``.
    PascalCase is the default since React, Astro, Solid, Vue and Svelte
    all expect components in PascalCase.

    Args:
        casing: Casing for non-HTML tags

    Returns:
        Function mapping a directive name to an element name

    Example:
        >>> normalize = tag_normalize()
        >>> normalize('Span'), normalize('my-component')
        ('span', 'MyComponent')
    """
    case_normalize = caseNormalizer_get(casing)
    LOG(f"Tag normalizer: {Casing(casing).value}", level=3)

    def tag_transform(tag: str) -> str:
        if htmlTag_is(tag):
            return tag.lower()
        return case_normalize(tag)

    return tag_transform


def attribute_normalize(
    casing: Union[Casing, str] = Casing.CAMEL,
    className: bool = False,
) -> Callable[[str, str], str]:
    """
    Build an attribute transform for ``Options.transform_attribute``

    Args:
        casing: Casing for attribute names (camelCase by default, as
                React and Solid use)
        className: Rename ``class`` to ``className`` after casing

    Returns:
        Function mapping ``(tag, attribute)`` to an attribute name

    Example:
        >>> attribute_normalize(className=True)('div', 'class')
        'className'
    """
    case_normalize = caseNormalizer_get(casing)
    LOG(f"Attribute normalizer: {Casing(casing).value} (className={className})", level=3)

    def attribute_transform(tag: str, attr: str) -> str:
        normalized = case_normalize(attr)
        if className and normalized == 'class':
            normalized = 'className'
        return normalized

    return attribute_transform
