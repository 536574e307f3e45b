"""Settings from the environment. Only logging is configurable; pricing constants are fixed."""
import os
from dataclasses import dataclass
from typing import Any

ENV_PREFIX = "BOOKPRICING_"


class Config:
    """Environment lookups used to build Settings."""

    @classmethod
    def load_from_env(cls, prefix: str = ENV_PREFIX, **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. BOOKPRICING_LOG_LEVEL=debug -> {"log_level": "debug"}."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                if name:
                    result[name] = value
        return result


@dataclass
class Settings:
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Settings from BOOKPRICING_* variables; unknown keys are ignored."""
    values = Config.load_from_env(log_level=Settings.log_level)
    return Settings(log_level=str(values["log_level"]).strip().upper() or Settings.log_level)
