from __future__ import annotations

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from softball_stats.domain.errors import ConfigError
from softball_stats.stats import REGULATION_INNINGS, StatsSettings


class StatsConfigError(Exception):
    """Raised when statistics configuration is invalid."""

    def __init__(self, error: ConfigError) -> None:
        super().__init__(error.message)
        self.error = error


_STATS_KEYS = frozenset({"regulation_innings", "fallback"})


_DEFAULTS: dict[str, object] = {
    "stats": {
        "regulation_innings": REGULATION_INNINGS,
        "fallback": 0.0,
    },
}


def create_config(
    yaml_path: str = "softball.yaml",
    env_prefix: str = "SOFTBALL",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g. ``SOFTBALL__STATS__FALLBACK``.
        defaults: Default configuration values.
        overrides: Values that win over every other layer.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def load_stats_settings(cfg: ConfigurationSet | None = None) -> StatsSettings:
    if cfg is None:
        cfg = create_config()
    unknown = tuple(sorted({key.split(".")[0] for key in cfg.get_dict("stats")} - _STATS_KEYS))
    if unknown:
        raise StatsConfigError(
            ConfigError(message=f"Unrecognized stats keys: {', '.join(unknown)}", unrecognized_keys=unknown)
        )
    # env vars arrive as strings
    try:
        regulation_innings = int(str(cfg["stats.regulation_innings"]))
        fallback = float(str(cfg["stats.fallback"]))
    except ValueError as e:
        raise StatsConfigError(ConfigError(message=f"Invalid stats configuration: {e}")) from e
    if regulation_innings <= 0:
        raise StatsConfigError(
            ConfigError(message=f"stats.regulation_innings must be > 0, got {regulation_innings}")
        )
    return StatsSettings(regulation_innings=regulation_innings, fallback=fallback)
