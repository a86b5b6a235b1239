import dataclasses

import pytest
from hypothesis import given, strategies as st

from binstring import BinString
from binstring.config import DEFAULT_SETTINGS, UNICODE_WHITESPACE, Settings


class TestSettings:
    def test_default_values(self):
        """Test that Settings has sensible defaults."""
        settings = Settings()
        assert settings.repr_limit == 64
        assert settings.whitespace == UNICODE_WHITESPACE
        assert DEFAULT_SETTINGS == settings

    def test_custom_values(self):
        """Test that Settings accepts custom values."""
        settings = Settings(repr_limit=8, whitespace=" ")
        assert settings.repr_limit == 8
        assert settings.whitespace == " "

    def test_settings_are_frozen(self):
        """Shared defaults cannot be changed at runtime."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SETTINGS.repr_limit = 1

    def test_repr_uses_default_limit(self):
        """repr() truncates buffers longer than the configured limit."""
        short = BinString(b"a" * DEFAULT_SETTINGS.repr_limit)
        long = BinString(b"a" * (DEFAULT_SETTINGS.repr_limit + 1))

        assert repr(short) == f"BinString({short.as_bytes()!r})"
        assert repr(long).endswith(f"... <{DEFAULT_SETTINGS.repr_limit + 1} bytes>)")


class TestWhitespaceSet:
    def test_whitespace_chars_are_unique(self):
        """The whitespace table lists each character once."""
        assert len(set(UNICODE_WHITESPACE)) == len(UNICODE_WHITESPACE)

    def test_separators_are_not_whitespace(self):
        """U+001C..U+001F pass str.isspace() but are not Unicode whitespace."""
        for ch in "\x1c\x1d\x1e\x1f":
            assert ch.isspace()
            assert ch not in UNICODE_WHITESPACE

    def test_zero_width_space_is_not_whitespace(self):
        """U+200B has no White_Space property."""
        assert "\u200b" not in UNICODE_WHITESPACE

    @given(st.sampled_from(UNICODE_WHITESPACE))
    def test_every_whitespace_char_is_space(self, ch):
        """For any char in the set, Python agrees it is a space."""
        assert ch.isspace()


class TestCustomSettings:
    def test_custom_repr_limit_reaches_repr(self):
        """A BinString built with custom settings truncates at their limit."""
        value = BinString.from_text("abcdefghij", Settings(repr_limit=4))
        assert repr(value) == "BinString(b'abcd'... <10 bytes>)"

    def test_custom_whitespace_reaches_trim(self):
        """trim() strips the characters configured on the instance."""
        value = BinString.from_text("--hi--", Settings(whitespace="-"))
        assert value.trim().as_bytes() == b"hi"

    def test_settings_follow_derived_instances(self):
        """Slices, concatenations, trims and copies keep the source settings."""
        settings = Settings(repr_limit=2)
        value = BinString.from_bytes(b" abc ", settings)

        derived = [
            value.slice(),
            value[1:4],
            value.concat(b"x"),
            value + "y",
            value.replace(b"a", b"z"),
            value.trim(),
            value.copy(),
        ]
        assert all(item.settings is settings for item in derived)

    def test_settings_do_not_affect_identity(self):
        """Equality, ordering and hashing only look at the bytes."""
        plain = BinString(b"abc")
        tuned = BinString(b"abc", Settings(repr_limit=1))

        assert plain == tuned
        assert hash(plain) == hash(tuned)
        assert not plain < tuned
