import pytest

from softball_stats.formatting import (
    THRESHOLDS,
    Direction,
    Metric,
    PerformanceLevel,
    avg_level,
    classify,
    era_level,
    fld_level,
    format_avg,
    format_era,
    format_pct,
    format_rate,
    format_whip,
    obp_level,
    ops_level,
    slg_level,
)


class TestFormatPct:
    def test_strips_leading_zero(self) -> None:
        assert format_pct(0.3) == ".300"
        assert format_pct(0.0) == ".000"

    def test_rounds_to_three_places(self) -> None:
        assert format_pct(1 / 3) == ".333"

    def test_one_or_more_keeps_integer_part(self) -> None:
        assert format_pct(1.0) == "1.000"
        assert format_pct(1.2345) == "1.234"

    def test_negative(self) -> None:
        assert format_pct(-0.05) == "-.050"


class TestFormatAvg:
    def test_plain(self) -> None:
        assert format_avg(0.25) == ".250"

    def test_with_counts(self) -> None:
        assert format_avg(0.3, hits=3, at_bats=10) == ".300 (3/10)"

    def test_counts_need_both(self) -> None:
        assert format_avg(0.3, hits=3) == ".300"


class TestFormatTwoDecimals:
    def test_era(self) -> None:
        assert format_era(2.0) == "2.00"
        assert format_era(3.456) == "3.46"

    def test_whip(self) -> None:
        assert format_whip(1.1666) == "1.17"


class TestFormatRate:
    def test_percentage(self) -> None:
        assert format_rate(0.125) == "12.5%"


class TestLevels:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.300, PerformanceLevel.ELITE), (0.299, PerformanceLevel.AVERAGE), (0.250, PerformanceLevel.AVERAGE), (0.249, PerformanceLevel.UNDER)],
    )
    def test_avg(self, value: float, expected: PerformanceLevel) -> None:
        assert avg_level(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.99, PerformanceLevel.ELITE), (3.00, PerformanceLevel.AVERAGE), (4.00, PerformanceLevel.AVERAGE), (4.01, PerformanceLevel.UNDER)],
    )
    def test_era_lower_is_better(self, value: float, expected: PerformanceLevel) -> None:
        assert era_level(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.975, PerformanceLevel.ELITE), (0.960, PerformanceLevel.AVERAGE), (0.949, PerformanceLevel.UNDER)],
    )
    def test_fielding(self, value: float, expected: PerformanceLevel) -> None:
        assert fld_level(value) is expected

    def test_obp_slg_ops(self) -> None:
        assert obp_level(0.400) is PerformanceLevel.ELITE
        assert obp_level(0.330) is PerformanceLevel.AVERAGE
        assert slg_level(0.399) is PerformanceLevel.UNDER
        assert ops_level(0.850) is PerformanceLevel.ELITE
        assert ops_level(0.699) is PerformanceLevel.UNDER

    def test_classify_by_name(self) -> None:
        assert classify("era", 2.5) is PerformanceLevel.ELITE
        assert classify(Metric.AVG, 0.1) is PerformanceLevel.UNDER

    def test_unknown_metric_raises(self) -> None:
        with pytest.raises(ValueError):
            classify("whatever", 1.0)

    def test_each_family_has_own_table(self) -> None:
        assert set(THRESHOLDS) == set(Metric)
        assert THRESHOLDS[Metric.ERA].direction is Direction.LOWER
        assert all(t.direction is Direction.HIGHER for m, t in THRESHOLDS.items() if m is not Metric.ERA)
