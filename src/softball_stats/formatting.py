from dataclasses import dataclass
from enum import StrEnum


class PerformanceLevel(StrEnum):
    ELITE = "elite"
    AVERAGE = "average"
    UNDER = "under"


class Direction(StrEnum):
    HIGHER = "higher"
    LOWER = "lower"


class Metric(StrEnum):
    AVG = "avg"
    OBP = "obp"
    SLG = "slg"
    OPS = "ops"
    ERA = "era"
    FLD = "fld_pct"


@dataclass(frozen=True)
class MetricThresholds:
    elite: float
    average: float
    direction: Direction = Direction.HIGHER

    def classify(self, value: float) -> PerformanceLevel:
        if self.direction is Direction.LOWER:
            if value < self.elite:
                return PerformanceLevel.ELITE
            if value <= self.average:
                return PerformanceLevel.AVERAGE
            return PerformanceLevel.UNDER
        if value >= self.elite:
            return PerformanceLevel.ELITE
        if value >= self.average:
            return PerformanceLevel.AVERAGE
        return PerformanceLevel.UNDER


THRESHOLDS: dict[Metric, MetricThresholds] = {
    Metric.AVG: MetricThresholds(elite=0.300, average=0.250),
    Metric.OBP: MetricThresholds(elite=0.400, average=0.330),
    Metric.SLG: MetricThresholds(elite=0.500, average=0.400),
    Metric.OPS: MetricThresholds(elite=0.850, average=0.700),
    Metric.ERA: MetricThresholds(elite=3.00, average=4.00, direction=Direction.LOWER),
    Metric.FLD: MetricThresholds(elite=0.975, average=0.950),
}


def classify(metric: Metric | str, value: float) -> PerformanceLevel:
    return THRESHOLDS[Metric(metric)].classify(value)


def avg_level(value: float) -> PerformanceLevel:
    return classify(Metric.AVG, value)


def obp_level(value: float) -> PerformanceLevel:
    return classify(Metric.OBP, value)


def slg_level(value: float) -> PerformanceLevel:
    return classify(Metric.SLG, value)


def ops_level(value: float) -> PerformanceLevel:
    return classify(Metric.OPS, value)


def era_level(value: float) -> PerformanceLevel:
    return classify(Metric.ERA, value)


def fld_level(value: float) -> PerformanceLevel:
    return classify(Metric.FLD, value)


def format_pct(value: float) -> str:
    """Three decimals with the leading zero dropped: 0.3 -> ``.300``."""
    text = f"{value:.3f}"
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0."):
        return "-" + text[2:]
    return text


def format_avg(value: float, hits: int | None = None, at_bats: int | None = None) -> str:
    formatted = format_pct(value)
    if hits is not None and at_bats is not None:
        return f"{formatted} ({hits}/{at_bats})"
    return formatted


def format_era(value: float) -> str:
    return f"{value:.2f}"


def format_whip(value: float) -> str:
    return f"{value:.2f}"


def format_rate(value: float) -> str:
    """Percentage with one decimal: 0.125 -> ``12.5%``."""
    return f"{value * 100:.1f}%"
