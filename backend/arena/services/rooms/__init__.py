"""Room services: matchmaking state and move relay.

This package holds the in-memory room state and the operations on it,
kept apart from Socket.IO so the state machine can be driven directly
from tests. Transport concerns live in ``arena.gateway`` and
``arena.socketio_events``.
"""

from .errors import CapacityExhausted, InvalidPayload, RoomError, RoomFull, RoomNotFound
from .lifecycle import RoomLifecycleManager
from .relay import RelayDispatcher
from .store import RoomStore

__all__ = [
    'CapacityExhausted',
    'InvalidPayload',
    'RelayDispatcher',
    'RoomError',
    'RoomFull',
    'RoomLifecycleManager',
    'RoomNotFound',
    'RoomStore',
]
