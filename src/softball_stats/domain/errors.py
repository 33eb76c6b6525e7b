from dataclasses import dataclass


@dataclass(frozen=True)
class StatsError:
    message: str


@dataclass(frozen=True)
class DocumentError(StatsError):
    path: str


@dataclass(frozen=True)
class ConfigError(StatsError):
    unrecognized_keys: tuple[str, ...] = ()
