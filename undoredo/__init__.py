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

from undoredo.command import Command, CompositeCommand, HistoryManager
from undoredo.constants import UNDOREDO_VERSION as __version__
from undoredo.errors import IllegalStateError, InvalidArgumentError, UndoRedoException
from undoredo.text import AppendText, ClearText, InsertText, TextBuffer

__all__ = [
    "Command",
    "CompositeCommand",
    "HistoryManager",
    "UndoRedoException",
    "IllegalStateError",
    "InvalidArgumentError",
    "TextBuffer",
    "AppendText",
    "InsertText",
    "ClearText",
]
