# --------------------------------------------------------------------------
# Software:     UndoRedo - Historico de acoes reversiveis (desfazer/refazer)
# Copyright:    (C) 2022  UndoRedo developers
# License:      GNU - GPL 3 (LICENSE.txt)
# --------------------------------------------------------------------------
#    Este programa e software livre; voce pode redistribui-lo e/ou
#    modifica-lo sob os termos da Licenca Publica Geral GNU, conforme
#    publicada pela Free Software Foundation; de acordo com a versao 3
#    da Licenca, ou (a seu criterio) qualquer versao posterior.
#
#    Este programa eh distribuido na expectativa de ser util, mas SEM
#    QUALQUER GARANTIA; sem mesmo a garantia implicita de
#    COMERCIALIZACAO ou de ADEQUACAO A QUALQUER PROPOSITO EM
#    PARTICULAR. Consulte a Licenca Publica Geral GNU para obter mais
#    detalhes.
# --------------------------------------------------------------------------

import json
import logging
import os
from json.decoder import JSONDecodeError
from typing import Any, Dict, Optional

import undoredo.constants as const
from undoredo.utils import Singleton, deep_merge_dict

logger = logging.getLogger(__name__)

USER_CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".config", "undoredo")
CONFIG_PATH = os.environ.get("UNDOREDO_CONFIG", os.path.join(USER_CONFIG_DIR, "config.json"))

SESSION_ENCODING = "utf8"


# Only one session exists per process, so Session is a Singleton
class Session(metaclass=Singleton):
    def __init__(self):
        self._config: Dict[str, Any] = self._default_config()

    @staticmethod
    def _default_config() -> Dict[str, Any]:
        return {
            "history_limit": const.DEFAULT_EDITOR_HISTORY_LIMIT,
            "debug": False,
            "console_logging": 1,
            "console_logging_level": 3,
            "file_logging": 0,
            "file_logging_level": 1,
            "logging_file": "",
        }

    def SetConfig(self, key: str, value: Any) -> None:
        self._config[key] = value

    def GetConfig(self, key: str, default_value: Any = None) -> Any:
        return self._config.get(key, default_value)

    def ReadConfigFile(self, path: Optional[str] = None) -> bool:
        """
        Merges the JSON config file into the current config. Returns False
        when the file is missing or cannot be parsed; the config is then
        left untouched.
        """
        path = path or CONFIG_PATH
        if not os.path.exists(path):
            logger.debug(f"Config file {path} not found, using defaults")
            return False

        try:
            with open(path, "r", encoding=SESSION_ENCODING) as config_file:
                config_dict = json.load(config_file)
        except (OSError, JSONDecodeError) as e:
            logger.error(f"Error reading config file {path}: {e}")
            return False

        if not isinstance(config_dict, dict):
            logger.error(f"Config file {path} does not hold a JSON object")
            return False

        self._config = deep_merge_dict(self._config.copy(), config_dict)
        logger.info(f"Read config file {path}")
        return True

    def WriteConfigFile(self, path: Optional[str] = None) -> None:
        path = path or CONFIG_PATH
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding=SESSION_ENCODING) as config_file:
            json.dump(self._config, config_file, sort_keys=True, indent=4)
