"""Tests for the split strategies."""
from decimal import Decimal

import pytest

from splitledger.core import InvalidSplit, SplitCalculator, resolve_splits
from splitledger.utils.enums import SplitKind


def amounts(splits):
    return [s.amount for s in splits]


class TestEqualSplit:
    def test_divides_evenly(self):
        splits = SplitCalculator.calculate_equal_split(Decimal("1000"), ["u1", "u2", "u3", "u4"])
        assert amounts(splits) == [Decimal("250")] * 4
        assert [s.participant_id for s in splits] == ["u1", "u2", "u3", "u4"]

    def test_first_participant_absorbs_remainder(self):
        splits = SplitCalculator.calculate_equal_split(Decimal("100"), ["a", "b", "c"])
        assert amounts(splits) == [Decimal("33.34"), Decimal("33.33"), Decimal("33.33")]
        assert sum(amounts(splits)) == Decimal("100")

    def test_negative_remainder_when_rounding_up(self):
        # 0.05 / 3 = 0.01666.. rounds up to 0.02, so the first share shrinks
        splits = SplitCalculator.calculate_equal_split(Decimal("0.05"), ["a", "b", "c"])
        assert amounts(splits) == [Decimal("0.01"), Decimal("0.02"), Decimal("0.02")]
        assert sum(amounts(splits)) == Decimal("0.05")

    def test_rounds_half_up(self):
        # 0.10 / 4 = 0.025 -> 0.03
        splits = SplitCalculator.calculate_equal_split(Decimal("0.10"), ["a", "b", "c", "d"])
        assert splits[1].amount == Decimal("0.03")
        assert sum(amounts(splits)) == Decimal("0.10")

    @pytest.mark.parametrize("total,n", [
        ("10", 3), ("1", 7), ("99.99", 6), ("1234.56", 11), ("0.01", 2), ("250", 9),
    ])
    def test_sum_is_exact_and_shares_are_close(self, total, n):
        total = Decimal(total)
        ids = [f"p{i}" for i in range(n)]
        splits = SplitCalculator.calculate_equal_split(total, ids)
        assert sum(amounts(splits)) == total
        first = splits[0].amount
        for s in splits[1:]:
            assert abs(first - s.amount) <= Decimal("0.01") * n

    def test_single_participant_gets_everything(self):
        splits = SplitCalculator.calculate_equal_split(Decimal("42.42"), ["solo"])
        assert amounts(splits) == [Decimal("42.42")]

    def test_no_participants(self):
        with pytest.raises(InvalidSplit):
            SplitCalculator.calculate_equal_split(Decimal("10"), [])

    def test_duplicate_participant(self):
        with pytest.raises(InvalidSplit):
            SplitCalculator.calculate_equal_split(Decimal("10"), ["a", "a"])

    def test_accepts_pairs(self):
        splits = SplitCalculator.calculate_equal_split(Decimal("10"), [("a", None), ("b", None)])
        assert [s.participant_id for s in splits] == ["a", "b"]


class TestExactSplit:
    def test_uses_amounts_as_given(self):
        splits = SplitCalculator.calculate_exact_split(Decimal("1250"), [("u2", 370), ("u3", 880)])
        assert [(s.participant_id, s.amount) for s in splits] == [
            ("u2", Decimal("370")),
            ("u3", Decimal("880")),
        ]
        assert all(s.percent is None for s in splits)

    def test_accepts_mapping(self):
        splits = SplitCalculator.calculate_exact_split(Decimal("3"), {"a": "1.5", "b": 1.5})
        assert amounts(splits) == [Decimal("1.5"), Decimal("1.5")]

    def test_float_inputs_sum_exactly(self):
        splits = SplitCalculator.calculate_exact_split(Decimal("0.3"), [("a", 0.1), ("b", 0.2)])
        assert sum(amounts(splits)) == Decimal("0.3")

    def test_rejects_wrong_sum(self):
        with pytest.raises(InvalidSplit, match="sum"):
            SplitCalculator.calculate_exact_split(Decimal("1000"), [("u2", 370), ("u3", 880)])

    def test_rejects_negative_amount(self):
        with pytest.raises(InvalidSplit, match="Negative"):
            SplitCalculator.calculate_exact_split(Decimal("10"), [("a", 20), ("b", -10)])

    def test_rejects_non_numeric_amount(self):
        with pytest.raises(InvalidSplit):
            SplitCalculator.calculate_exact_split(Decimal("10"), [("a", "ten")])

    def test_rejects_empty(self):
        with pytest.raises(InvalidSplit):
            SplitCalculator.calculate_exact_split(Decimal("10"), [])

    def test_rejects_malformed_descriptor(self):
        with pytest.raises(InvalidSplit):
            SplitCalculator.calculate_exact_split(Decimal("10"), ["a"])


class TestPercentageSplit:
    def test_amounts_from_percentages(self):
        splits = SplitCalculator.calculate_percentage_split(
            Decimal("1200"), [("u1", 40), ("u2", 20), ("u3", 20), ("u4", 20)]
        )
        assert amounts(splits) == [Decimal("480"), Decimal("240"), Decimal("240"), Decimal("240")]
        assert [s.percent for s in splits] == [Decimal("40"), Decimal("20"), Decimal("20"), Decimal("20")]

    def test_fractional_percentages_sum_exactly(self):
        splits = SplitCalculator.calculate_percentage_split(
            Decimal("100"), [("a", "33.33"), ("b", "33.33"), ("c", "33.34")]
        )
        assert sum(amounts(splits)) == Decimal("100")

    def test_rejects_percentages_not_totalling_100(self):
        with pytest.raises(InvalidSplit, match="100"):
            SplitCalculator.calculate_percentage_split(Decimal("100"), [("a", 50), ("b", 40)])

    def test_rejects_negative_percentage(self):
        with pytest.raises(InvalidSplit):
            SplitCalculator.calculate_percentage_split(Decimal("100"), [("a", 120), ("b", -20)])


def test_resolve_dispatches_by_kind():
    equal = resolve_splits(SplitKind.EQUAL, Decimal("10"), ["a", "b"])
    exact = resolve_splits(SplitKind.EXACT, Decimal("10"), [("a", 4), ("b", 6)])
    percent = resolve_splits(SplitKind.PERCENT, Decimal("10"), [("a", 25), ("b", 75)])
    assert amounts(equal) == [Decimal("5"), Decimal("5")]
    assert amounts(exact) == [Decimal("4"), Decimal("6")]
    assert amounts(percent) == [Decimal("2.5"), Decimal("7.5")]


def test_strategies_are_pure():
    descriptors = [("a", 30), ("b", 70)]
    first = SplitCalculator.calculate_percentage_split(Decimal("50"), descriptors)
    second = SplitCalculator.calculate_percentage_split(Decimal("50"), descriptors)
    assert first == second
    assert descriptors == [("a", 30), ("b", 70)]


def test_equal_split_too_small_to_share():
    # 0.05 / 7 rounds to 0.01 each, which would leave the first share at -0.01
    with pytest.raises(InvalidSplit, match="too small"):
        SplitCalculator.calculate_equal_split(Decimal("0.05"), [f"p{i}" for i in range(7)])
