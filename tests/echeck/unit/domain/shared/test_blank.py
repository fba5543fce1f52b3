"""Tests for the blank predicate."""

import pytest

from echeck.domain.shared import is_blank, is_present


class TestIsBlank:
    @pytest.mark.parametrize("value", [None, "", " ", "\t\n  "])
    def test_blank_values(self, value):
        assert is_blank(value)
        assert not is_present(value)

    @pytest.mark.parametrize("value", ["a", " James ", "0"])
    def test_present_values(self, value):
        assert not is_blank(value)
        assert is_present(value)
