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

"""
Text editing commands over a mutable text buffer.
"""

from typing import List

from undoredo.command import Command


class TextBuffer:
    """Mutable piece of text, edited in place by the text commands."""

    def __init__(self, text: str = ""):
        self._chunks: List[str] = [text] if text else []

    def _text(self) -> str:
        # Collapse the pending appends into a single chunk
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def append(self, text: str) -> None:
        if text:
            self._chunks.append(text)

    def insert(self, index: int, text: str) -> None:
        current = self._text()
        if not 0 <= index <= len(current):
            raise IndexError(f"Insert position {index} out of range for length {len(current)}")
        self._chunks = [current[:index] + text + current[index:]]

    def delete(self, start: int, end: int) -> None:
        current = self._text()
        if not 0 <= start <= end <= len(current):
            raise IndexError(f"Delete range [{start}, {end}) out of range for length {len(current)}")
        self._chunks = [current[:start] + current[end:]]

    def clear(self) -> None:
        self._chunks = []

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def __str__(self) -> str:
        return self._text()

    def __eq__(self, other) -> bool:
        if isinstance(other, TextBuffer):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TextBuffer({str(self)!r})"


class AppendText(Command):
    def __init__(self, buffer: TextBuffer, text: str):
        self.buffer = buffer
        self.text = text

    def get_description(self) -> str:
        return f'append "{self.text}"'

    def redo(self) -> None:
        self.buffer.append(self.text)

    def undo(self) -> None:
        length = len(self.buffer)
        self.buffer.delete(length - len(self.text), length)


class InsertText(Command):
    def __init__(self, buffer: TextBuffer, index: int, text: str):
        self.buffer = buffer
        self.index = index
        self.text = text

    def get_description(self) -> str:
        return f'insert in {self.index} the text "{self.text}"'

    def redo(self) -> None:
        self.buffer.insert(self.index, self.text)

    def undo(self) -> None:
        self.buffer.delete(self.index, self.index + len(self.text))


class ClearText(Command):
    """
    Clears the buffer. The command keeps a copy of the text it is built
    with, so it must be created before the buffer is cleared.
    """

    def __init__(self, buffer: TextBuffer):
        self.buffer = buffer
        self.old_text = str(buffer)

    def get_description(self) -> str:
        return "clear buffer"

    def redo(self) -> None:
        self.buffer.clear()

    def undo(self) -> None:
        self.buffer.append(self.old_text)
