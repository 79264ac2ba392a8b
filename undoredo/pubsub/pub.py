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
Message bus used to broadcast history changes.

Listeners subscribe to topic names from :mod:`undoredo.constants` and receive
the message data as keyword arguments, e.g. a listener for
``const.HISTORY_CHANGED`` is called as ``listener(history=manager)``.
"""

from typing import Tuple

from pubsub import pub as Publisher
from pubsub.core.listener import Listener, UserListener

__all__ = [
    # subscribing
    "subscribe",
    "subscribe_all",
    "unsubscribe",
    # publishing
    "sendMessage",
]


def subscribe(listener: UserListener, topicName: str, **curriedArgs) -> Tuple[Listener, bool]:
    """Subscribe a listener to a topic. The listener is held by a weak
    reference, so the caller must keep it alive.

    :param listener:
    :param topicName:
    :param curriedArgs:
    """
    subscribedListener, success = Publisher.subscribe(listener, topicName, **curriedArgs)
    return subscribedListener, success


def subscribe_all(listener: UserListener) -> Tuple[Listener, bool]:
    """Subscribe a listener to every topic. The listener must accept
    ``topic=AUTO_TOPIC`` and arbitrary keyword arguments."""
    return subscribe(listener, ALL_TOPICS)


def unsubscribe(*args, **kwargs) -> None:
    """Unsubscribe from a topic."""
    Publisher.unsubscribe(*args, **kwargs)


def sendMessage(topicName: str, **msgdata) -> None:
    """Send a message in a given topic.

    :param topicName:
    :param msgdata:
    """
    Publisher.sendMessage(topicName, **msgdata)


AUTO_TOPIC = Publisher.AUTO_TOPIC
ALL_TOPICS = Publisher.ALL_TOPICS
