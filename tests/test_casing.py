"""
Casing tests - word splitting, casing modes and the name normalizers
"""

import pytest

from directive_mdx.lib.casing import (
    attribute_normalize,
    camel_case,
    kebab_case,
    pascal_case,
    snake_case,
    tag_normalize,
    words_split,
)
from directive_mdx.models.casing import Casing, htmlTag_is


class TestWordSplitting:
    """Test how names break into words"""

    def test_separators(self):
        """Dashes, underscores and spaces separate words"""
        assert words_split('my-component') == ['my', 'component']
        assert words_split('another_example') == ['another', 'example']
        assert words_split('fancy box') == ['fancy', 'box']

    def test_case_transitions(self):
        """A lower-to-upper transition starts a new word"""
        assert words_split('myComponent') == ['my', 'Component']
        assert words_split('AnotherExample') == ['Another', 'Example']

    def test_upper_case_run(self):
        """Upper-case run stops before the capital starting the next word"""
        assert words_split('XMLHttpRequest') == ['XML', 'Http', 'Request']

    def test_digits_and_ordinals(self):
        """Digit runs and ordinals are words of their own"""
        assert words_split('h2-title') == ['h', '2', 'title']
        assert words_split('step_2nd') == ['step', '2nd']

    def test_empty(self):
        """Empty or separator-only input has no words"""
        assert words_split('') == []
        assert words_split('--') == []


class TestCasingFunctions:
    """Test each casing mode on plain strings"""

    def test_camel(self):
        """camelCase lowers the first word and capitalizes the rest"""
        assert camel_case('data-value') == 'dataValue'
        assert camel_case('Aria_Label') == 'ariaLabel'

    def test_pascal(self):
        """PascalCase capitalizes every word"""
        assert pascal_case('my-component') == 'MyComponent'
        assert pascal_case('XMLHttp') == 'XmlHttp'

    def test_kebab(self):
        """kebab-case joins lowered words with dashes"""
        assert kebab_case('myComponent') == 'my-component'

    def test_snake(self):
        """snake_case joins lowered words with underscores"""
        assert snake_case('dataValue') == 'data_value'

    def test_empty_input(self):
        """Empty input gives an empty name instead of failing"""
        assert camel_case('') == ''
        assert pascal_case('') == ''
        assert kebab_case('') == ''


class TestNormalizeTag:
    """Test tag_normalize()"""

    def test_html_tags_lowercase(self):
        """HTML tag names are lowercased whatever the casing"""
        normalize = tag_normalize()
        assert normalize('DIV') == 'div'
        assert normalize('Span') == 'span'

    def test_html_tags_ignore_casing_mode(self):
        """Every casing mode leaves HTML tags lowercase"""
        for casing in Casing:
            assert tag_normalize(casing)('BlockQuote') == 'blockquote'

    def test_pascal_by_default(self):
        """Non-HTML tags become PascalCase by default"""
        normalize = tag_normalize()
        assert normalize('my-component') == 'MyComponent'
        assert normalize('another_example') == 'AnotherExample'

    def test_kebab(self):
        """Non-HTML tags follow the requested casing"""
        normalize = tag_normalize('kebab')
        assert normalize('myComponent') == 'my-component'
        assert normalize('AnotherExample') == 'another-example'

    def test_unknown_casing_rejected(self):
        """An unknown casing name fails when the transform is built"""
        with pytest.raises(ValueError):
            tag_normalize('shouty')

    def test_html_tag_lookup(self):
        """HTML tag lookup ignores case"""
        assert htmlTag_is('SECTION')
        assert not htmlTag_is('Note')


class TestNormalizeAttribute:
    """Test attribute_normalize()"""

    def test_camel_by_default(self):
        """Attribute names become camelCase by default"""
        normalize = attribute_normalize()
        assert normalize('div', 'data-value') == 'dataValue'
        assert normalize('span', 'aria-label') == 'ariaLabel'

    def test_snake(self):
        """Attribute names follow the requested casing"""
        normalize = attribute_normalize('snake')
        assert normalize('div', 'dataValue') == 'data_value'
        assert normalize('span', 'AriaLabel') == 'aria_label'

    def test_class_kept_without_switch(self):
        """'class' stays 'class' when the className switch is off"""
        assert attribute_normalize('snake')('div', 'class') == 'class'

    def test_class_to_classname(self):
        """'class' becomes 'className' when the switch is on"""
        normalize = attribute_normalize('camel', className=True)
        assert normalize('div', 'class') == 'className'
        assert normalize('div', 'data-class') == 'dataClass'

    def test_class_rename_after_casing(self):
        """The rename applies to the cased result, not the raw name"""
        normalize = attribute_normalize('camel', className=True)
        assert normalize('div', 'CLASS') == 'className'


class TestNoneCasing:
    """'none' leaves names unchanged"""

    def test_tags(self):
        """Non-HTML tags pass through unchanged"""
        normalize = tag_normalize('none')
        assert normalize('myComponent') == 'myComponent'
        assert normalize('AnotherExample') == 'AnotherExample'

    def test_attributes(self):
        """Attribute names pass through unchanged"""
        normalize = attribute_normalize(Casing.NONE)
        assert normalize('div', 'dataValue') == 'dataValue'
        assert normalize('span', 'data-value') == 'data-value'
