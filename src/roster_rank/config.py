from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

_DEFAULTS: dict[str, object] = {
    "data": {
        "dir": "./data",
        "db_name": "roster.db",
    },
    "history": {
        "recent_count": 5,
        "recent_days": 30,
    },
    "leaderboard": {
        "top": 0,
    },
    "overview": {
        "recent_games": 5,
    },
    "logging": {
        "level": "INFO",
    },
}


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    db_name: str = "roster.db"
    recent_count: int = 5
    recent_days: int = 30
    leaderboard_top: int | None = None
    recent_games: int = 5
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


def create_config(
    yaml_path: str = "roster.yaml",
    env_prefix: str = "ROSTER",
    defaults: dict[str, object] | None = None,
    *,
    data_dir: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if data_dir is not None:
        layers.insert(0, config_from_dict({"data": {"dir": data_dir}}))

    return ConfigurationSet(*layers)


def load_settings(cfg: ConfigurationSet | None = None) -> Settings:
    if cfg is None:
        cfg = create_config()
    top = int(str(cfg["leaderboard.top"]))
    return Settings(
        data_dir=Path(str(cfg["data.dir"])).expanduser(),
        db_name=str(cfg["data.db_name"]),
        recent_count=int(str(cfg["history.recent_count"])),
        recent_days=int(str(cfg["history.recent_days"])),
        leaderboard_top=top if top > 0 else None,
        recent_games=int(str(cfg["overview.recent_games"])),
        log_level=str(cfg["logging.level"]),
    )
