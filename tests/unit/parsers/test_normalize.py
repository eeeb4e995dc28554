import pytest

from xml_kit.parsers.normalize import normalize_attribute, normalize_attribute_value


class TestNormalizeAttributeValue:
    def test_trims_surrounding_whitespace(self) -> None:
        """Leading and trailing whitespace is removed."""
        assert normalize_attribute_value("  hello  ") == "hello"

    def test_null_literal_becomes_empty(self) -> None:
        """The literal null maps to an empty string."""
        assert normalize_attribute_value("null") == ""

    def test_null_check_is_exact(self) -> None:
        """Only the bare literal is mapped; other casings are plain text."""
        assert normalize_attribute_value("NULL") == "NULL"
        assert normalize_attribute_value("nullable") == "nullable"

    def test_numeric_looking_values_stay_strings(self) -> None:
        """Values are never coerced to numbers."""
        assert normalize_attribute_value("007") == "007"
        assert normalize_attribute_value("0x1F") == "0x1F"

    def test_collapses_nbsp_and_space_runs(self) -> None:
        """Space and &nbsp; runs collapse to one space."""
        assert normalize_attribute_value("hello&nbsp;&nbsp;world") == "hello world"
        assert normalize_attribute_value("a   &nbsp; b") == "a b"

    def test_tabs_and_line_breaks_become_spaces(self) -> None:
        """Tabs, LF and CR each become a space."""
        assert (
            normalize_attribute_value("line1\tline2\nline3\rline4")
            == "line1 line2 line3 line4"
        )

    def test_mixed_nbsp_and_tab_collapse_to_one_space(self) -> None:
        """A mixed run of &nbsp; and tabs is one space."""
        assert normalize_attribute_value("a&nbsp;\tb") == "a b"

    def test_deletes_invisible_characters(self) -> None:
        """Invisible characters are deleted outright."""
        assert (
            normalize_attribute_value("clean\u0002\u0003\u200b\u202a\u202btext")
            == "cleantext"
        )

    def test_invisible_character_between_spaces_leaves_single_space(self) -> None:
        """Deleting an invisible character doesn't leave a double space."""
        assert normalize_attribute_value("a \u200b b") == "a b"

    def test_empty_string(self) -> None:
        """An empty value stays empty."""
        assert normalize_attribute_value("") == ""


@pytest.mark.parametrize(
    "raw",
    [
        "plain",
        " \t\n\r ",
        "x\u200b \u202a\ty",
        "&nbsp;&nbsp;lead and trail&nbsp;",
        "many     spaces\n\n\nand lines",
    ],
)
def test_output_has_no_line_breaks_or_double_spaces(raw: str) -> None:
    """Normalized output is trimmed and single-spaced."""
    result = normalize_attribute_value(raw)

    assert not any(c in result for c in "\t\n\r")
    assert "  " not in result
    assert not any(c in result for c in "\u0002\u0003\u200b\u202a\u202b")
    assert result == result.strip()


def test_attribute_hook_ignores_name() -> None:
    """The attribute hook normalizes regardless of the name."""
    assert normalize_attribute("id", " 42 ") == "42"
