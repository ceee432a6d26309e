"""Tests for Lexer line classification and mode switching."""

import pytest

from ifupdown_interfaces.config import ParseConfig, parse_config_context
from ifupdown_interfaces.errors import ParseError
from ifupdown_interfaces.lexer import Lexer, LexerMode
from ifupdown_interfaces.lexer.classifiers import split_options
from ifupdown_interfaces.tokens import Line, LineType


def _types(source: str) -> list[LineType]:
    return [line.type for line in Lexer(source).tokenize()]


class TestClassification:
    """Each line maps to one LineType."""

    def test_one_line_per_physical_line(self) -> None:
        assert _types("auto lo\niface lo inet loopback\n    mtu 1500\n") == [
            LineType.SINGLE,
            LineType.IFACE,
            LineType.SETTING,
            LineType.COMMENT,
        ]

    def test_comment_and_blank(self) -> None:
        assert _types("# hi\n\n   \n  # indented") == [LineType.COMMENT] * 4

    def test_hash_inside_word_is_not_comment(self) -> None:
        with pytest.raises(ParseError):
            list(Lexer("a#b").tokenize())

    def test_directive_fields(self) -> None:
        (line,) = Lexer("source /etc/network/interfaces.d/*").tokenize()
        assert line == Line(
            LineType.SINGLE,
            "source /etc/network/interfaces.d/*",
            1,
            key="source",
            options=("/etc/network/interfaces.d/*",),
        )

    def test_iface_fields(self) -> None:
        (line,) = Lexer("  iface eth0.100 inet6 auto").tokenize()
        assert line.key == "eth0.100"
        assert line.options == ("inet6", "auto")
        assert line.raw == "  iface eth0.100 inet6 auto"

    def test_setting_fields(self) -> None:
        lines = list(Lexer("iface a inet manual\n  up ip link set $IFACE up  ").tokenize())
        assert lines[1].key == "up"
        assert lines[1].value == "ip link set $IFACE up"
        assert lines[1].raw == "  up ip link set $IFACE up"

    def test_raw_is_right_trimmed(self) -> None:
        (line,) = Lexer("auto lo \r").tokenize()
        assert line.raw == "auto lo"

    def test_line_numbers(self) -> None:
        assert [line.lineno for line in Lexer("\n\nauto lo").tokenize()] == [1, 2, 3]

    def test_repr(self) -> None:
        (line,) = Lexer("auto lo").tokenize()
        assert repr(line) == "Line(SINGLE, 'auto lo', 1)"


class TestModes:
    """The lexer tracks whether an iface stanza is open."""

    def test_starts_top_level(self) -> None:
        assert Lexer("").mode is LexerMode.TOP_LEVEL

    def test_iface_opens(self) -> None:
        lexer = Lexer("iface a inet manual")
        list(lexer.tokenize())
        assert lexer.mode is LexerMode.IFACE

    def test_directive_closes(self) -> None:
        lexer = Lexer("iface a inet manual\nauto a")
        list(lexer.tokenize())
        assert lexer.mode is LexerMode.TOP_LEVEL

    def test_comment_keeps_mode(self) -> None:
        lexer = Lexer("iface a inet manual\n# still open")
        list(lexer.tokenize())
        assert lexer.mode is LexerMode.IFACE

    def test_setting_rejected_at_top_level(self) -> None:
        tokens = Lexer("auto a\nmtu 1500").tokenize()
        assert next(tokens).type is LineType.SINGLE
        with pytest.raises(ParseError) as excinfo:
            next(tokens)
        assert excinfo.value.line == "mtu 1500"

    def test_directive_keys_from_context(self) -> None:
        with parse_config_context(ParseConfig(directive_keys=frozenset({"mapping"}))):
            (line,) = Lexer("mapping eth0").tokenize()
        assert line.key == "mapping"


class TestSplitOptions:
    """Options split on single literal spaces."""

    def test_simple(self) -> None:
        assert split_options("inet static") == ("inet", "static")

    def test_double_space_gives_empty_token(self) -> None:
        assert split_options("inet  static") == ("inet", "", "static")

    def test_tab_stays_inside_token(self) -> None:
        assert split_options("inet\tstatic") == ("inet\tstatic",)
