"""Tests for character-class tables."""

import pytest

from uricomponent.char_map import (
    PCHAR,
    UNRESERVED,
    UNRESERVED_CHAR_MAP,
    CharClass,
    allows_literal,
    char_map,
    classify,
    is_unreserved,
)
from uricomponent.fragment import FRAGMENT_CHAR_MAP


class TestCharMap:
    def test_has_an_entry_per_byte(self) -> None:
        assert len(char_map(b"abc")) == 256
        assert len(FRAGMENT_CHAR_MAP) == 256

    def test_entries(self) -> None:
        table = char_map(b"a%")
        assert table[ord("a")] == ord("a")
        assert table[ord("%")] == ord("%")
        assert table[ord("b")] == 0

    def test_rejects_non_ascii(self) -> None:
        with pytest.raises(ValueError):
            char_map(b"a\xe9")


class TestClassify:
    @pytest.mark.parametrize(
        "char,expected",
        [
            ("a", CharClass.LITERAL),
            ("Z", CharClass.LITERAL),
            ("0", CharClass.LITERAL),
            ("~", CharClass.LITERAL),
            ("!", CharClass.LITERAL),
            ("'", CharClass.LITERAL),
            (":", CharClass.LITERAL),
            ("@", CharClass.LITERAL),
            ("/", CharClass.LITERAL),
            ("?", CharClass.LITERAL),
            ("%", CharClass.PERCENT),
            (" ", CharClass.INVALID),
            ("#", CharClass.INVALID),
            ("[", CharClass.INVALID),
            ("<", CharClass.INVALID),
            ('"', CharClass.INVALID),
            ("\0", CharClass.INVALID),
            ("\x7f", CharClass.INVALID),
        ],
    )
    def test_fragment_classes(self, char: str, expected: CharClass) -> None:
        assert classify(FRAGMENT_CHAR_MAP, ord(char)) is expected

    def test_non_ascii_bytes_are_invalid(self) -> None:
        for b in range(0x80, 0x100):
            assert classify(FRAGMENT_CHAR_MAP, b) is CharClass.INVALID

    def test_fragment_literals(self) -> None:
        literals = {b for b in range(0x100) if allows_literal(FRAGMENT_CHAR_MAP, b)}
        assert literals == set(PCHAR + b"/?")


class TestUnreserved:
    def test_unreserved_set(self) -> None:
        assert {b for b in range(0x100) if is_unreserved(b)} == set(UNRESERVED)
        assert len(UNRESERVED) == 66

    @pytest.mark.parametrize("char", ["-", ".", "_", "~", "a", "Z", "5"])
    def test_unreserved(self, char: str) -> None:
        assert is_unreserved(ord(char))
        assert UNRESERVED_CHAR_MAP[ord(char)] == ord(char)

    @pytest.mark.parametrize("char", ["/", "?", "%", "!", ":", "@", " "])
    def test_reserved(self, char: str) -> None:
        assert not is_unreserved(ord(char))
