# ataxx/config.py
from dataclasses import dataclass, field
import logging
import os
import tomllib

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 4
    seed: int = 0  # seeds the AI player's random generator


@dataclass
class UIConfig:
    engine_name: str = "AtaxxEngine"


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


def _apply_env_overrides(cfg: Config) -> Config:
    override_depth = os.environ.get("ATAXX_SEARCH_DEPTH")
    if override_depth:
        try:
            depth = int(override_depth)
        except ValueError:
            logger.warning("Ignoring non-numeric ATAXX_SEARCH_DEPTH=%r", override_depth)
        else:
            if depth > 0:
                cfg.search.depth = depth
    return cfg


# single globally importable config instance
CONFIG = _apply_env_overrides(Config.load_from_toml(os.environ.get("ATAXX_CONFIG_TOML", "config.toml")))
