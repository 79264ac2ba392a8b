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
Line based text editor driving a HistoryManager.

Each input line is one editing command:

    append TEXT         append TEXT to the buffer
    insert POS TEXT     insert TEXT at position POS
    clear               empty the buffer
    undo / redo         walk the history
    begin [LABEL]       start grouping the following edits in one transaction
    commit              register the open transaction as a single step
    show                print the buffer
    history             print the history, ">" marks the cursor
    quit                stop reading commands
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

import undoredo.constants as const
from undoredo import utils
from undoredo.command import CompositeCommand, HistoryManager
from undoredo.errors import (
    ErrorCategory,
    IllegalStateError,
    InvalidArgumentError,
    UndoRedoException,
    handle_errors,
)
from undoredo.log import setup_logging_from_session
from undoredo.pubsub import pub as Publisher
from undoredo.session import Session
from undoredo.text import AppendText, ClearText, InsertText, TextBuffer

# Failures reported to the user without ending the session
EDITING_ERRORS = (UndoRedoException, IndexError, ValueError)


class Editor:
    def __init__(self, limit: Optional[int] = None, out: Optional[TextIO] = None):
        self.buffer = TextBuffer()
        self.history = HistoryManager(limit)
        self.transaction: Optional[CompositeCommand] = None
        self.out = out if out is not None else sys.stdout

    def _record(self, command) -> None:
        if self.transaction is not None:
            self.transaction.add(command)
        else:
            self.history.add_item(command)

    def _check_no_transaction(self, operation: str) -> None:
        if self.transaction is not None:
            raise IllegalStateError(
                f"Can't {operation} while a transaction is open",
                category=ErrorCategory.TRANSACTION,
            )

    def append(self, text: str) -> None:
        self.buffer.append(text)
        self._record(AppendText(self.buffer, text))

    def insert(self, index: int, text: str) -> None:
        self.buffer.insert(index, text)
        self._record(InsertText(self.buffer, index, text))

    def clear(self) -> None:
        # The command snapshots the text, so build it first
        command = ClearText(self.buffer)
        self.buffer.clear()
        self._record(command)

    def undo(self) -> str:
        self._check_no_transaction("undo")
        description = self.history.undo_description()
        self.history.undo()
        return description

    def redo(self) -> str:
        self._check_no_transaction("redo")
        description = self.history.redo_description()
        self.history.redo()
        return description

    def begin(self, label: Optional[str] = None) -> None:
        self._check_no_transaction("begin a transaction")
        self.transaction = CompositeCommand(description=label)

    def commit(self) -> str:
        if self.transaction is None:
            raise IllegalStateError("No transaction to commit", category=ErrorCategory.TRANSACTION)
        transaction, self.transaction = self.transaction, None
        if not len(transaction):
            return "empty transaction discarded"
        self.history.add_item(transaction)
        return f"committed {transaction.get_description()}"

    def history_lines(self) -> List[str]:
        lines = []
        for i, command in enumerate(self.history.entries):
            marker = ">" if i == self.history.index else " "
            lines.append(f"{marker} {i:3d}  {command.get_description()}")
        if not lines:
            lines.append(const.EMPTY_HISTORY)
        return lines

    @handle_errors("Editing command failed", expected_exceptions=EDITING_ERRORS)
    def execute(self, line: str) -> Optional[str]:
        """Runs one editing command and returns the text to print, if any."""
        name, _, argument = line.partition(" ")
        name = name.lower()

        if name == "append":
            self.append(argument)
        elif name == "insert":
            position, _, text = argument.partition(" ")
            self.insert(int(position), text)
        elif name == "clear":
            self.clear()
        elif name == "undo":
            return self.undo()
        elif name == "redo":
            return self.redo()
        elif name == "begin":
            self.begin(argument or None)
        elif name == "commit":
            return self.commit()
        elif name == "show":
            return f'"{self.buffer}"'
        elif name == "history":
            return "\n".join(self.history_lines())
        else:
            raise InvalidArgumentError(f"Unknown command {name!r}")
        return None

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            if line.strip().lower() == "quit":
                break
            try:
                reply = self.execute(line)
            except EDITING_ERRORS as e:
                print(f"error: {e}", file=self.out)
                continue
            if reply is not None:
                print(reply, file=self.out)


def print_events(topic=Publisher.AUTO_TOPIC, **msg_data):
    """
    Print pubsub messages
    """
    utils.debug(f"{topic.getName()}\n\tParameters: {msg_data}")


def parse_command_line(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Handle command line arguments.
    """
    parser = argparse.ArgumentParser(prog="undoredo", description="Text editor with undo/redo history")

    # -d or --debug: print all pubsub messages sent
    parser.add_argument("-d", "--debug", action="store_true", dest="debug")
    parser.add_argument(
        "-l", "--limit", type=int, dest="limit", default=None, help="Maximum number of history entries"
    )
    parser.add_argument("-c", "--config", dest="config", default=None, help="JSON config file")
    parser.add_argument(
        "script", nargs="?", default=None, help="File with editing commands (default: stdin)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_command_line(argv)

    session = Session()
    session.ReadConfigFile(args.config)
    if args.debug:
        session.SetConfig("debug", True)
    setup_logging_from_session()

    if args.debug:
        Publisher.subscribe_all(print_events)

    limit = args.limit if args.limit is not None else session.GetConfig("history_limit")
    try:
        editor = Editor(limit)
    except InvalidArgumentError as e:
        print(f"undoredo: {e.message}", file=sys.stderr)
        return 2

    if args.script:
        try:
            script = open(args.script, "r", encoding="utf8")
        except OSError as e:
            print(f"undoredo: can't open script {args.script}: {e.strerror}", file=sys.stderr)
            return 2
        with script:
            editor.run(script)
    else:
        editor.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
