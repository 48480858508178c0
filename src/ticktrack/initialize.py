# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from ticktrack import configuration
from ticktrack.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    __configure_logging(config["log_level"])
    CONFIGURATION_REPO.flush()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_ENTRIES_PATH.is_file():
        configuration.DATA_ENTRIES_PATH.touch()
        configuration.DATA_ENTRIES_PATH.write_text(dump({"entries": []}, Dumper=Dumper))


def __configure_logging(level: str) -> None:
    # stdout belongs to the rich views
    configuration.LOG_PATH.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=configuration.APP_LOG_PATH,
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
