import pytest

from softball_stats.innings import (
    display_from_outs,
    format_innings,
    innings_from_outs,
    is_valid_innings,
    normalize,
    outs_from_display,
    parse_innings,
)


class TestOutsFromDisplay:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (7.0, 21),
            (7.1, 22),
            (7.2, 23),
            (0, 0),
            (4, 12),
            ("4.1", 13),
            ("6.2", 20),
            (" 3 ", 9),
        ],
    )
    def test_converts_display_to_outs(self, value: float | str, expected: int) -> None:
        assert outs_from_display(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "-1", -2.1, None, float("nan"), float("inf")])
    def test_malformed_or_negative_is_zero(self, value: float | str | None) -> None:
        assert outs_from_display(value) == 0

    def test_unnormalized_fraction_rolls_into_outs(self) -> None:
        assert outs_from_display(5.3) == 18


class TestDisplayFromOuts:
    def test_whole_innings(self) -> None:
        assert display_from_outs(21) == 7.0

    def test_partial_innings(self) -> None:
        assert display_from_outs(22) == 7.1
        assert display_from_outs(23) == 7.2

    def test_non_positive_is_zero(self) -> None:
        assert display_from_outs(0) == 0.0
        assert display_from_outs(-4) == 0.0

    def test_round_trip(self) -> None:
        for outs in range(0, 200):
            assert outs_from_display(display_from_outs(outs)) == outs


class TestNormalize:
    def test_rolls_over_third_out(self) -> None:
        assert normalize(5.3) == 6.0

    def test_valid_value_unchanged(self) -> None:
        assert normalize(4.2) == 4.2
        assert normalize("4.1") == 4.1

    def test_fraction_digit_always_valid(self) -> None:
        for whole in range(0, 10):
            for digit in range(0, 10):
                text = f"{normalize(f'{whole}.{digit}'):.1f}"
                assert text[-1] in "012"

    def test_malformed_is_zero(self) -> None:
        assert normalize("x.y") == 0.0


class TestInningsFromOuts:
    def test_linear_innings(self) -> None:
        assert innings_from_outs(22) == pytest.approx(7 + 1 / 3)

    def test_zero(self) -> None:
        assert innings_from_outs(0) == 0.0


class TestIsValidInnings:
    @pytest.mark.parametrize("text", ["0", "7", "12", "4.1", "4.2"])
    def test_accepts(self, text: str) -> None:
        assert is_valid_innings(text)

    @pytest.mark.parametrize("text", ["4.3", "4.0", "4.12", ".1", "-1", "a", "", "4.1\n"])
    def test_rejects(self, text: str) -> None:
        assert not is_valid_innings(text)


class TestFormatInnings:
    def test_formats_one_decimal(self) -> None:
        assert format_innings(6.1) == "6.1"
        assert format_innings(7) == "7.0"

    def test_normalizes(self) -> None:
        assert format_innings(2.3) == "3.0"

    def test_none(self) -> None:
        assert format_innings(None) == "0.0"


class TestParseInnings:
    def test_keeps_value_unnormalized(self) -> None:
        assert parse_innings("5.3") == 5.3
        assert parse_innings(6.1) == 6.1

    @pytest.mark.parametrize("value", ["4.1.", "7.x", "", None, -1.2, float("nan")])
    def test_malformed_reads_as_zero(self, value: float | str | None) -> None:
        assert parse_innings(value) == 0.0
