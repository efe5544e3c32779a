"""ObjectComparator tests."""

import pytest

from commons.validate import ObjectComparator


class TestCompare:
    @pytest.mark.parametrize("op", ["=", "==", "EQ", "eq"])
    def test_equality_aliases(self, op) -> None:
        assert ObjectComparator.compare("a", op, "a")
        assert not ObjectComparator.compare("a", op, "b")

    @pytest.mark.parametrize("op", ["!=", "<>", "NE"])
    def test_inequality_aliases(self, op) -> None:
        assert ObjectComparator.compare(1, op, 2)

    def test_equality_is_structural(self) -> None:
        assert ObjectComparator.compare({"a": [1, 2]}, "EQ", {"a": [1, 2]})

    def test_booleans_never_equal_numbers(self) -> None:
        assert not ObjectComparator.are_equal(True, 1)
        assert not ObjectComparator.are_equal(0, False)
        assert ObjectComparator.compare(False, "NE", 0)
        assert ObjectComparator.are_equal(False, False)

    def test_both_none_are_equal(self) -> None:
        assert ObjectComparator.are_equal(None, None)
        assert not ObjectComparator.are_equal(None, 0)

    def test_ordering_coerces_to_numbers(self) -> None:
        assert ObjectComparator.compare("2", "<", 10)
        assert ObjectComparator.compare(3, "GE", 3)
        assert ObjectComparator.compare(3.5, "GT", "3")

    def test_ordering_fails_on_non_numbers(self) -> None:
        assert not ObjectComparator.compare("abc", "<", 1)
        assert not ObjectComparator.compare("abc", ">", 1)
        assert not ObjectComparator.is_less(None, 1)

    def test_like(self) -> None:
        assert ObjectComparator.compare("hello world", "LIKE", "wor")
        assert not ObjectComparator.compare("hello", "like", "^world")

    def test_like_with_invalid_pattern(self) -> None:
        assert not ObjectComparator.match("abc", "(")

    def test_unknown_operator_passes(self) -> None:
        # Unrecognized operators compare as true
        assert ObjectComparator.compare(1, "SOUNDS_LIKE", 2)
