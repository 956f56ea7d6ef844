import random

import pytest

from courtshuffle.models import RosterState, SessionConfig
from courtshuffle.notifications import Notifier
from courtshuffle.controllers import EntityRepository
from courtshuffle.session import MatchSession
from courtshuffle.storage import MemoryStore, RosterPersistence


class RecordingNotifier(Notifier):
    def __init__(self):
        self.messages = []

    def notify(self, title, message, severity="info"):
        self.messages.append((title, message, severity))

    @property
    def last(self):
        return self.messages[-1] if self.messages else None


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def grouped_config():
    return SessionConfig(groups_enabled=True)


@pytest.fixture
def repository(store, notifier):
    config = SessionConfig()
    return EntityRepository(
        RosterState(), RosterPersistence(store, config), config, notifier
    )


@pytest.fixture
def grouped_repository(store, notifier, grouped_config):
    return EntityRepository(
        RosterState(),
        RosterPersistence(store, grouped_config),
        grouped_config,
        notifier,
    )


@pytest.fixture
def session(store, notifier):
    return MatchSession(store, SessionConfig(), notifier, random.Random(7))


@pytest.fixture
def grouped_session(store, notifier, grouped_config):
    return MatchSession(store, grouped_config, notifier, random.Random(7))
