# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "ticktrack"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
LOG_PATH = platformdirs.user_log_path(APP_NAME)
APP_LOG_PATH = LOG_PATH / "ticktrack.log"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_PATH: Path = DATA_PATH / "time-entries.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    description_save_debounce_seconds: float
    display_timer_interval_seconds: float
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "description_save_debounce_seconds": 1.0,
        "display_timer_interval_seconds": 1.0,
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the entry
    repository is instantiated.
    """
    global DATA_PATH, DATA_ENTRIES_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_ENTRIES_PATH = DATA_PATH / "time-entries.yaml"
