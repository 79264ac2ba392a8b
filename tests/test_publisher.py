import pytest

import undoredo.constants as const
from undoredo.pubsub.pub import (
    ALL_TOPICS,
    sendMessage,
    subscribe,
    subscribe_all,
    unsubscribe,
)


@pytest.fixture
def mock_publisher(mocker):
    return mocker.patch("undoredo.pubsub.pub.Publisher")


def test_subscribe(mock_publisher, mocker):
    mock_publisher.subscribe.return_value = ("mocked_listener", True)
    mock_listener = mocker.Mock()
    listener, success = subscribe(mock_listener, const.HISTORY_CHANGED)
    mock_publisher.subscribe.assert_called_once_with(mock_listener, const.HISTORY_CHANGED)
    assert listener == "mocked_listener"
    assert success is True


def test_subscribe_all(mock_publisher, mocker):
    mock_publisher.subscribe.return_value = ("mocked_listener", True)
    mock_listener = mocker.Mock()
    subscribe_all(mock_listener)
    mock_publisher.subscribe.assert_called_once_with(mock_listener, ALL_TOPICS)


def test_unsubscribe(mocker):
    mock_unsubscribe = mocker.patch("undoredo.pubsub.pub.Publisher.unsubscribe")
    mock_listener = mocker.Mock()
    unsubscribe(mock_listener, const.HISTORY_CHANGED)
    mock_unsubscribe.assert_called_once_with(mock_listener, const.HISTORY_CHANGED)


def test_send_message(mock_publisher):
    sendMessage(const.HISTORY_CHANGED, history="manager")
    mock_publisher.sendMessage.assert_called_once_with(const.HISTORY_CHANGED, history="manager")
