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

import logging
import logging.config
import os
from typing import Any, Dict, Optional

import undoredo.constants as const

LOGGER_NAME = "undoredo"

logger = logging.getLogger(__name__)


def level_from_index(index: int) -> int:
    """
    Maps a LOGGING_LEVEL_TYPES index, as stored in the config, to a level.
    Unknown indexes fall back to WARNING.
    """
    valid = isinstance(index, int) and not isinstance(index, bool)
    if not valid or not 0 <= index < len(const.LOGGING_LEVEL_TYPES):
        logger.error(f"Invalid logging level index {index!r}, using WARNING")
        return logging.WARNING
    return getattr(logging, const.LOGGING_LEVEL_TYPES[index].upper())


def build_logging_config(
    console_level: Optional[int] = logging.WARNING,
    file_level: Optional[int] = None,
    logging_file: str = "",
) -> Dict[str, Any]:
    handlers: Dict[str, Dict[str, Any]] = {}
    if console_level is not None:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": console_level,
        }
    if file_level is not None and logging_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "detailed",
            "filename": os.path.abspath(logging_file),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "level": file_level,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s - %(levelname)s - %(message)s"},
            "detailed": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {
                "level": "DEBUG",
                "handlers": list(handlers),
                "propagate": False,
            }
        },
    }


def setup_logging(
    console_level: Optional[int] = logging.WARNING,
    file_level: Optional[int] = None,
    logging_file: str = "",
) -> logging.Logger:
    logging.config.dictConfig(build_logging_config(console_level, file_level, logging_file))
    return logging.getLogger(LOGGER_NAME)


def setup_logging_from_session() -> logging.Logger:
    from undoredo.session import Session

    session = Session()
    console_level = None
    file_level = None
    if session.GetConfig("console_logging"):
        console_level = level_from_index(session.GetConfig("console_logging_level", 0))
    if session.GetConfig("debug"):
        console_level = logging.DEBUG
    if session.GetConfig("file_logging"):
        file_level = level_from_index(session.GetConfig("file_logging_level", 0))

    return setup_logging(console_level, file_level, session.GetConfig("logging_file", ""))
