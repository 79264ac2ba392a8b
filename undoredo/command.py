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
Undoable commands, transactions and the bounded history that drives them.

Callers change their own state first and then register a command describing
that change. The history never calls ``redo()`` on registration and never
touches the caller's state directly: it only walks a cursor over the recorded
commands and asks them to revert or reapply themselves.
"""

import abc
import logging
from typing import Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

import undoredo.constants as const
from undoredo.errors import ErrorCategory, IllegalStateError, InvalidArgumentError
from undoredo.pubsub import pub as Publisher

logger = logging.getLogger(__name__)

SubscriberCallback = Callable[["Command"], None]


class Command(abc.ABC):
    """
    Abstract base class for all undoable commands.

    ``undo()`` and ``redo()`` must be exact inverses of each other. A plain
    command reports itself as always available; guarding against applying the
    same command twice is the job of the transaction and history cursors.
    """

    @abc.abstractmethod
    def undo(self) -> None:
        pass

    @abc.abstractmethod
    def redo(self) -> None:
        pass

    @abc.abstractmethod
    def get_description(self) -> str:
        pass

    def can_undo(self) -> bool:
        return True

    def can_redo(self) -> bool:
        return True

    def undo_description(self) -> str:
        return f"{const.UNDO_PREFIX} {self.get_description()}"

    def redo_description(self) -> str:
        return f"{const.REDO_PREFIX} {self.get_description()}"

    # Concrete commands are not required to call Command.__init__, so the
    # subscriber mapping is created on first use.
    @property
    def subscribers(self) -> Dict[Hashable, SubscriberCallback]:
        try:
            return self._subscribers
        except AttributeError:
            self._subscribers: Dict[Hashable, SubscriberCallback] = {}
            return self._subscribers

    def subscribe(self, callback: SubscriberCallback, key: Optional[Hashable] = None) -> Hashable:
        """
        Registers a callback receiving this command each time
        notify_subscribers() runs. The key identifies the subscriber and
        defaults to the callback itself; subscribing again with the same key
        replaces the callback but keeps its position.
        """
        if key is None:
            key = callback
        self.subscribers[key] = callback
        return key

    def unsubscribe(self, key: Hashable) -> bool:
        """Removes a subscriber. Returns False if the key was not subscribed."""
        return self.subscribers.pop(key, None) is not None

    def notify_subscribers(self) -> None:
        """Calls every subscriber with this command, in registration order."""
        for callback in list(self.subscribers.values()):
            callback(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(undo_description={self.undo_description()!r}, "
            f"redo_description={self.redo_description()!r}, "
            f"can_undo={self.can_undo()}, can_redo={self.can_redo()})"
        )


class CompositeCommand(Command):
    """
    Transaction grouping several commands into one undoable step.

    Members are undone in reverse insertion order and redone in insertion
    order, so a member may depend on the state left by the ones before it.
    A transaction is created in the applied state: its members' changes have
    already been made by the caller.
    """

    def __init__(self, commands: Iterable[Command] = (), description: Optional[str] = None):
        self._commands: List[Command] = []
        self._undone = False
        self._description = description
        for command in commands:
            self.add(command)

    def add(self, command: Command) -> None:
        if not isinstance(command, Command):
            raise InvalidArgumentError(
                f"Only commands can be added to a transaction, got {type(command).__name__}",
                category=ErrorCategory.TRANSACTION,
            )
        self._commands.append(command)

    @property
    def undone(self) -> bool:
        return self._undone

    @property
    def commands(self) -> Tuple[Command, ...]:
        """Read-only snapshot of the members, oldest first."""
        return tuple(self._commands)

    def undo(self) -> None:
        if not self.can_undo():
            raise IllegalStateError(
                const.CANT_UNDO,
                category=ErrorCategory.TRANSACTION,
                details={"operation": "undo", "description": self.get_description()},
            )
        for command in reversed(self._commands):
            command.undo()
        self._undone = True

    def redo(self) -> None:
        if not self.can_redo():
            raise IllegalStateError(
                const.CANT_REDO,
                category=ErrorCategory.TRANSACTION,
                details={"operation": "redo", "description": self.get_description()},
            )
        for command in self._commands:
            command.redo()
        self._undone = False

    def can_undo(self) -> bool:
        return bool(self._commands) and not self._undone

    def can_redo(self) -> bool:
        return bool(self._commands) and self._undone

    def get_description(self) -> str:
        if not self._commands:
            return const.EMPTY_TRANSACTION
        if self._description is not None:
            return self._description
        return self._commands[-1].get_description()

    def undo_description(self) -> str:
        if not self._commands:
            return const.EMPTY_TRANSACTION
        if self._description is not None:
            return super().undo_description()
        return self._commands[-1].undo_description()

    def redo_description(self) -> str:
        if not self._commands:
            return const.EMPTY_TRANSACTION
        if self._description is not None:
            return super().redo_description()
        return self._commands[-1].redo_description()

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(tuple(self._commands))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(undo_description={self.undo_description()!r}, "
            f"redo_description={self.redo_description()!r}, "
            f"commands={self._commands!r}, "
            f"can_undo={self.can_undo()}, can_redo={self.can_redo()})"
        )


class HistoryManager(Command):
    """
    Bounded undo/redo history.

    Entries up to and including ``index`` are done, entries after it are
    undone and form the redo branch. ``index`` is -1 when nothing is done.
    Registering a new command drops the redo branch, and once ``limit``
    entries are stored the oldest ones are discarded for good.

    Every change (add_item, undo, redo, clear_all) calls the subscribers once
    with the manager and then broadcasts ``const.HISTORY_CHANGED`` with
    ``history=<manager>``.

    The manager is itself a command, so a history can be nested in a
    transaction or in another history.
    """

    def __init__(self, limit: Optional[int] = const.DEFAULT_HISTORY_LIMIT):
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0):
            raise InvalidArgumentError(
                f"History limit must be a positive integer or None, got {limit!r}",
                category=ErrorCategory.CONFIGURATION,
                details={"limit": limit},
            )
        self._commands: List[Command] = []
        self._index = -1
        self._limit = limit

    @property
    def index(self) -> int:
        return self._index

    @property
    def limit(self) -> Optional[int]:
        return self._limit

    @property
    def entries(self) -> Tuple[Command, ...]:
        """
        Read-only snapshot of the history, oldest first. Use add_item() and
        clear_all() to change it.
        """
        return tuple(self._commands)

    def add_item(self, command: Command) -> None:
        """
        Registers a command whose change the caller has already made.
        """
        if not isinstance(command, Command):
            raise InvalidArgumentError(
                f"Only commands can be added to the history, got {type(command).__name__}",
                category=ErrorCategory.HISTORY,
            )

        discarded = len(self._commands) - (self._index + 1)
        if discarded:
            del self._commands[self._index + 1 :]
            logger.debug(f"Discarded {discarded} redoable entries")

        if self._limit is not None and len(self._commands) >= self._limit:
            evicted = len(self._commands) - self._limit + 1
            del self._commands[:evicted]
            logger.debug(f"History limit {self._limit} reached, evicted {evicted} oldest entries")

        if isinstance(command, CompositeCommand) and not len(command):
            logger.warning("Empty transaction added to the history; nothing before it can be undone")

        self._commands.append(command)
        self._index = len(self._commands) - 1
        logger.debug(f"Added {command.get_description()!r} at {self._index}")

        self.notify_subscribers()

    def undo(self) -> None:
        if not self.can_undo():
            raise IllegalStateError(
                const.CANT_UNDO,
                details={"operation": "undo", "index": self._index, "size": len(self._commands)},
            )
        command = self._commands[self._index]
        command.undo()
        self._index -= 1
        logger.debug(f"Undone {command.get_description()!r}, cursor at {self._index}")

        self.notify_subscribers()

    def redo(self) -> None:
        if not self.can_redo():
            raise IllegalStateError(
                const.CANT_REDO,
                details={"operation": "redo", "index": self._index, "size": len(self._commands)},
            )
        command = self._commands[self._index + 1]
        command.redo()
        self._index += 1
        logger.debug(f"Redone {command.get_description()!r}, cursor at {self._index}")

        self.notify_subscribers()

    def clear_all(self) -> None:
        self._commands.clear()
        self._index = -1
        logger.debug("History cleared")

        self.notify_subscribers()

    def can_undo(self) -> bool:
        return bool(self._commands) and self._index >= 0 and self._commands[self._index].can_undo()

    def can_redo(self) -> bool:
        return (
            bool(self._commands)
            and self._index < len(self._commands) - 1
            and self._commands[self._index + 1].can_redo()
        )

    def undo_description(self) -> str:
        if self.can_undo():
            return self._commands[self._index].undo_description()
        return const.CANT_UNDO

    def redo_description(self) -> str:
        if self.can_redo():
            return self._commands[self._index + 1].redo_description()
        return const.CANT_REDO

    def get_description(self) -> str:
        if self._commands and self._index >= 0:
            return self._commands[self._index].get_description()
        return const.EMPTY_HISTORY

    def notify_subscribers(self) -> None:
        super().notify_subscribers()
        Publisher.sendMessage(const.HISTORY_CHANGED, history=self)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(tuple(self._commands))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entries={self._commands!r}, index={self._index}, "
            f"limit={self._limit}, can_undo={self.can_undo()}, can_redo={self.can_redo()})"
        )
