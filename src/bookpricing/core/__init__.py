from bookpricing.core.config import Config, Settings, load_settings
from bookpricing.core.log import configure_logging

__all__ = [
    "Config",
    "Settings",
    "load_settings",
    "configure_logging",
]
