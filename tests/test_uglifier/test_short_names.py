"""Tests for the short class-name generator."""

import pytest

from cssatom.uglifier import ALPHABET, Token, next_token, short_name


class TestShortName:
    def test_first_names(self):
        assert short_name(0) == "0"
        assert short_name(9) == "9"
        assert short_name(10) == "a"
        assert short_name(35) == "z"

    def test_length_grows(self):
        assert short_name(36) == "00"
        assert short_name(37) == "01"
        assert short_name(36 + 36 * 36) == "000"

    def test_injective(self):
        names = [short_name(i) for i in range(5000)]
        assert len(set(names)) == len(names)

    def test_minimal_length(self):
        assert all(len(short_name(i)) == 1 for i in range(len(ALPHABET)))

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            short_name(-1)


class TestNextToken:
    def test_first_token(self):
        assert next_token(0) == Token(name=".rp__0", counter=1)

    def test_prefix(self):
        assert next_token(0, "x-").name == ".x-0"

    def test_counter_carried_forward(self):
        names = []
        counter = 0
        for _ in range(500):
            token = next_token(counter)
            names.append(token.name)
            assert token.counter > counter
            counter = token.counter
        assert len(set(names)) == len(names)

    def test_skips_ad(self):
        # "ad" is the 10*36 + 13 + 36th name
        index = 36 + 10 * 36 + 13
        assert short_name(index) == "ad"
        token = next_token(index)
        assert token.name == ".rp__ae"
        assert token.counter == index + 2

    def test_never_contains_ad(self):
        counter = 0
        for _ in range(3000):
            token = next_token(counter)
            assert "ad" not in token.name[len(".rp__"):]
            counter = token.counter
