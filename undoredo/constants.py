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

UNDOREDO_VERSION = "1.0.0"

# Pubsub topics
HISTORY_CHANGED = "History changed"
ERROR_OCCURRED = "Error occurred"

# Sentinel descriptions
EMPTY_TRANSACTION = "Empty transaction"
EMPTY_HISTORY = "Empty or rewound manager"
CANT_UNDO = "Can't undo"
CANT_REDO = "Can't redo"

UNDO_PREFIX = "Undo"
REDO_PREFIX = "Redo"

# None means the history grows without bound
DEFAULT_HISTORY_LIMIT = None

# Limit used by the command line editor when the config does not set one
DEFAULT_EDITOR_HISTORY_LIMIT = 100

LOGGING_LEVEL_TYPES = ["NOTSET", "DEBUG", "INFO", "WARN", "ERROR", "CRITICAL"]
