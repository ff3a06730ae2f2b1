import pytest

from nestconf.classifier import KeyValue, SectionHeader, classify_line
from nestconf.errors import MalformedInputError


def test_singleton_header_uses_default_subsection() -> None:
    assert classify_line("[alpha]", 1) == SectionHeader(group="alpha", subsection="")


def test_compound_header_splits_on_first_space() -> None:
    assert classify_line("[alpha beta]", 1) == SectionHeader(group="alpha", subsection="beta")
    assert classify_line("[alpha   beta gamma]", 1) == SectionHeader(group="alpha", subsection="beta gamma")


def test_quoted_header_names_may_contain_spaces() -> None:
    parsed = classify_line('["my group" "sub \\"x\\""]', 3)
    assert parsed == SectionHeader(group="my group", subsection='sub "x"')
    assert classify_line('["only one"]', 3) == SectionHeader(group="only one")


def test_header_inner_whitespace_is_trimmed() -> None:
    assert classify_line("[ db ]", 1) == SectionHeader(group="db")


def test_empty_header_selects_default_section() -> None:
    assert classify_line("[]", 1) == SectionHeader(group="", subsection="")


def test_unmatched_bracket_fails() -> None:
    with pytest.raises(MalformedInputError) as excinfo:
        classify_line("[alpha", 4)
    assert excinfo.value.line_number == 4
    assert excinfo.value.line == "[alpha"


def test_key_value_trims_both_sides() -> None:
    assert classify_line("key =  value", 1) == KeyValue(key="key", value="value")


def test_key_value_quoted_delimiter() -> None:
    assert classify_line('"a=b" = "c=d"', 1) == KeyValue(key="a=b", value="c=d")


def test_value_may_contain_further_equals() -> None:
    assert classify_line("expr=a=b", 1) == KeyValue(key="expr", value="a=b")


def test_empty_value_is_allowed() -> None:
    assert classify_line("key=", 1) == KeyValue(key="key", value="")


def test_missing_delimiter_fails_with_line() -> None:
    with pytest.raises(MalformedInputError) as excinfo:
        classify_line("just words", 12)
    assert excinfo.value.line_number == 12
    assert excinfo.value.line == "just words"


def test_unterminated_value_quote_fails() -> None:
    with pytest.raises(MalformedInputError) as excinfo:
        classify_line('key="a', 2)
    assert excinfo.value.line_number == 2
    assert excinfo.value.line == 'key="a'
