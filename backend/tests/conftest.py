import os
import sys
from collections import defaultdict

import pytest

# Ensure the backend root (containing the `arena` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from arena import create_app, socketio
from arena.services.rooms import RelayDispatcher, RoomLifecycleManager, RoomStore

PUZZLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    ROOM_ID_LENGTH = 6
    ROOM_ID_MAX_ATTEMPTS = 10


class RecordingGateway:
    """Stands in for Socket.IO: tracks topics and what each connection got."""

    def __init__(self):
        self.topics = defaultdict(set)
        self.inbox = defaultdict(list)

    def send_to(self, connection_id, event, *args):
        self.inbox[connection_id].append((event, args))

    def broadcast_to_room(self, room_id, event, *args, exclude=None):
        for cid in sorted(self.topics[room_id]):
            if cid != exclude:
                self.inbox[cid].append((event, args))

    def subscribe(self, connection_id, room_id):
        self.topics[room_id].add(connection_id)

    def unsubscribe(self, connection_id, room_id):
        self.topics[room_id].discard(connection_id)

    def drop(self, connection_id):
        # What the transport does when a socket closes
        for members in self.topics.values():
            members.discard(connection_id)

    def events(self, connection_id):
        return [name for name, _ in self.inbox[connection_id]]

    def clear(self):
        self.inbox.clear()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def gateway():
    return RecordingGateway()


@pytest.fixture()
def store():
    return RoomStore()


@pytest.fixture()
def lifecycle(store, gateway):
    return RoomLifecycleManager(store, gateway)


@pytest.fixture()
def relay(store, gateway):
    return RelayDispatcher(store, gateway)
