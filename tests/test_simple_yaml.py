"""Tests for simple_yaml.py."""

import pytest

from simple_yaml import (
    LineKind,
    ParseDiagnostics,
    classify_line,
    parse_simple_yaml,
    parse_yaml_scalar,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ""),
        ("", ""),
        ("   ", ""),
        ("  plain text  ", "plain text"),
        ('"quoted"', "quoted"),
        ("'single'", "single"),
        ('  "padded"  ', "padded"),
        ('""', ""),
        ('"', '"'),
        ("'mixed\"", "'mixed\""),
        ('"a "b" c"', 'a "b" c'),
        ('"\\n"', "\\n"),
    ],
)
def test_parse_yaml_scalar(raw, expected):
    assert parse_yaml_scalar(raw) == expected


def test_scalar_is_idempotent_on_unquoted_values():
    for value in ["hello", "2024", "a: b", "https://example.com/x?y=1"]:
        once = parse_yaml_scalar(value)
        assert parse_yaml_scalar(once) == once == value


def test_empty_and_none_input():
    assert parse_simple_yaml("") == {}
    assert parse_simple_yaml(None) == {}


def test_comments_and_blank_lines_only():
    text = "# heading\n\n   \n  # indented comment\n\t\n"
    assert parse_simple_yaml(text) == {}


def test_inline_values():
    text = 'title: "A Paper"\nvenue: NeurIPS\nyear: 2024\n'
    assert parse_simple_yaml(text) == {"title": "A Paper", "venue": "NeurIPS", "year": "2024"}


def test_list_value_keeps_order():
    text = "authors:\n  - a\n  - b\n  - c\n"
    assert parse_simple_yaml(text) == {"authors": ["a", "b", "c"]}


def test_list_items_are_scalar_parsed():
    text = "items:\n- 'one.yaml'\n-   \"two.yaml\"  \n-three.yaml\n"
    assert parse_simple_yaml(text)["items"] == ["one.yaml", "two.yaml", "three.yaml"]


def test_blank_lines_inside_and_before_list():
    text = "authors:\n\n  - a\n\n  - b\ntitle: T\n"
    assert parse_simple_yaml(text) == {"authors": ["a", "b"], "title": "T"}


def test_list_ends_at_first_non_dash_line():
    text = "authors:\n  - a\n  - b\nvenue: ICML\n  - orphan\n"
    assert parse_simple_yaml(text) == {"authors": ["a", "b"], "venue": "ICML"}


def test_comment_ends_list():
    text = "authors:\n  - a\n  # - b\n  - c\n"
    assert parse_simple_yaml(text) == {"authors": ["a"]}


def test_inline_value_does_not_consume_following_lines():
    text = "title: Hello\nnot a key line\nvenue: X\n"
    assert parse_simple_yaml(text) == {"title": "Hello", "venue": "X"}


def test_inline_value_followed_by_dashes_stays_string():
    text = "title: Hello\n  - a\n  - b\n"
    assert parse_simple_yaml(text) == {"title": "Hello"}


def test_bare_key_is_empty_string():
    text = "cover:\nwebsite: https://example.com\n"
    assert parse_simple_yaml(text) == {"cover": "", "website": "https://example.com"}


def test_bare_key_at_end_of_file():
    assert parse_simple_yaml("cover:") == {"cover": ""}
    assert parse_simple_yaml("cover:\n\n\n") == {"cover": ""}


def test_nested_mapping_is_not_supported():
    text = "outer:\n  inner: value\n"
    # The indented line is read as a key of its own.
    assert parse_simple_yaml(text) == {"outer": "", "inner": "value"}


def test_duplicate_keys_last_wins():
    text = "title: first\ntitle: second\n"
    assert parse_simple_yaml(text) == {"title": "second"}


def test_key_without_space_after_colon():
    assert parse_simple_yaml("key:value") == {"key": "value"}


def test_inline_value_keeps_later_colons():
    assert parse_simple_yaml("website: https://example.com:8080/a") == {
        "website": "https://example.com:8080/a"
    }


def test_keys_are_case_sensitive():
    assert parse_simple_yaml("Title: A\ntitle: B\n") == {"Title": "A", "title": "B"}


def test_crlf_line_endings():
    text = "title: A\r\nauthors:\r\n  - x\r\n  - y\r\n"
    assert parse_simple_yaml(text) == {"title": "A", "authors": ["x", "y"]}


def test_malformed_lines_are_skipped():
    text = "title: A\nthis has no colon\nbad key: value\n- stray item\nyear: 2020\n"
    assert parse_simple_yaml(text) == {"title": "A", "year": "2020"}


def test_diagnostics_count_skipped_lines():
    text = "title: A\nthis has no colon\n# comment\n\nbad key: value\n- stray\n"
    diagnostics = ParseDiagnostics()
    result = parse_simple_yaml(text, diagnostics)
    assert result == {"title": "A"}
    assert diagnostics.skipped == [2, 5, 6]
    assert diagnostics.skipped_lines == 3


def test_diagnostics_do_not_change_result():
    text = "a: 1\nnoise\nb:\n  - x\n"
    assert parse_simple_yaml(text, ParseDiagnostics()) == parse_simple_yaml(text)


def test_each_parse_returns_a_fresh_dict():
    first = parse_simple_yaml("a: 1")
    first["a"] = "changed"
    assert parse_simple_yaml("a: 1") == {"a": "1"}


@pytest.mark.parametrize(
    "line, in_list, expected",
    [
        ("", False, LineKind.BLANK),
        ("   ", True, LineKind.BLANK),
        ("# note", False, LineKind.COMMENT),
        ("title: x", False, LineKind.KEY),
        ("  - item", False, LineKind.ITEM),
        ("  - item", True, LineKind.ITEM),
        ("-a: b", False, LineKind.KEY),
        ("-a: b", True, LineKind.ITEM),
        ("# note", True, LineKind.OTHER),
        ("title: x", True, LineKind.OTHER),
        ("no colon", False, LineKind.OTHER),
    ],
)
def test_classify_line(line, in_list, expected):
    assert classify_line(line, in_list=in_list) is expected


def test_dash_key_inside_list_is_an_item():
    text = "tags:\n  - a\n-b: c\n"
    assert parse_simple_yaml(text) == {"tags": ["a", "b: c"]}


def test_index_document():
    text = "# order matters\nitems:\n  - b.yaml\n  - a.yaml\n"
    assert parse_simple_yaml(text) == {"items": ["b.yaml", "a.yaml"]}
