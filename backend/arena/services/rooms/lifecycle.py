import logging
from typing import Any, Callable, List, Optional, Tuple

from arena.models import Room, RoomSnapshot, generate_room_code, is_valid_puzzle
from .errors import CapacityExhausted, InvalidPayload, RoomFull, RoomNotFound
from .store import RoomStore

logger = logging.getLogger(__name__)

# (room_id, participants still seated)
Departure = Tuple[str, List[str]]


class RoomLifecycleManager:
    """Creates, fills and tears down rooms.

    Every check-then-mutate runs inside one store transaction. Fan-out to
    clients happens after the transaction so a slow connection never holds
    the store lock; topic subscription is local and is rechecked against
    the seat under the lock.
    """

    def __init__(self, store: RoomStore, gateway, id_factory: Optional[Callable[[], str]] = None,
                 max_attempts: int = 10, id_length: int = 6):
        self.store = store
        self.gateway = gateway
        self.id_factory = id_factory or (lambda: generate_room_code(id_length))
        self.max_attempts = max_attempts

    def create_room(self, puzzle: Any, initial_puzzle: Any, creator_id: str) -> str:
        if not is_valid_puzzle(puzzle) or not is_valid_puzzle(initial_puzzle):
            raise InvalidPayload()
        with self.store.transaction():
            room_id = self._allocate_id()
            departed = self._vacate(creator_id)
            self.store.insert(Room(room_id, puzzle, initial_puzzle, creator_id))
        self._announce_departure(creator_id, departed)
        if not self._subscribe_if_seated(creator_id, room_id):
            return room_id
        self.gateway.send_to(creator_id, 'roomCreated', {'roomId': room_id})
        logger.info(f"[room-created] room={room_id} by={creator_id}")
        return room_id

    def join_room(self, room_id: Optional[str], joiner_id: str) -> RoomSnapshot:
        with self.store.transaction():
            room = self.store.get(room_id)
            if room is None:
                raise RoomNotFound()
            if room.is_full or joiner_id in room.participants:
                raise RoomFull()
            departed = self._vacate(joiner_id)
            self.store.seat(room_id, joiner_id)
            snapshot = room.snapshot()
        self._announce_departure(joiner_id, departed)
        if not self._subscribe_if_seated(joiner_id, room_id):
            return snapshot
        # Both seats are committed; start the match for everyone at once
        self.gateway.broadcast_to_room(room_id, 'gameStart', snapshot.to_dict())
        logger.info(f"[room-joined] room={room_id} by={joiner_id}")
        return snapshot

    def leave_room(self, room_id: Optional[str], connection_id: str) -> bool:
        """Voluntary leave. Returns False when there was nothing to leave."""
        with self.store.transaction():
            remaining = self.store.unseat(room_id, connection_id)
        if remaining is None:
            logger.debug(f"[leave-noop] room={room_id} conn={connection_id}")
            return False
        self._announce_departure(connection_id, (room_id, remaining))
        return True

    def handle_disconnect(self, connection_id: str) -> Optional[str]:
        """Release whatever seat the connection held. Never raises."""
        try:
            with self.store.transaction():
                room_id = self.store.room_of(connection_id)
                remaining = self.store.unseat(room_id, connection_id) if room_id else None
            if remaining is None:
                return None
            # The transport drops a closed socket from its topics on its own
            self._notify_left(room_id, connection_id, remaining)
            return room_id
        except Exception:
            logger.exception(f"[disconnect] cleanup failed for conn={connection_id}")
            return None

    def stats(self):
        return self.store.stats()

    def _allocate_id(self) -> str:
        for attempt in range(1, self.max_attempts + 1):
            room_id = self.id_factory()
            if not self.store.contains(room_id):
                return room_id
            logger.warning(f"[room-id-collision] id={room_id} attempt={attempt}")
        raise CapacityExhausted()

    def _subscribe_if_seated(self, connection_id: str, room_id: str) -> bool:
        # A disconnect between commit and here has already released the seat;
        # subscribing then would leave a dead sid in the topic.
        with self.store.transaction():
            if self.store.room_of(connection_id) != room_id:
                logger.info(f"[subscribe-skip] room={room_id} conn={connection_id} no longer seated")
                return False
            self.gateway.subscribe(connection_id, room_id)
        return True

    def _vacate(self, connection_id: str) -> Optional[Departure]:
        # Caller holds the transaction
        previous = self.store.room_of(connection_id)
        if previous is None:
            return None
        return previous, self.store.unseat(previous, connection_id)

    def _announce_departure(self, connection_id: str, departed: Optional[Departure]) -> None:
        if departed is None:
            return
        room_id, remaining = departed
        self.gateway.unsubscribe(connection_id, room_id)
        self._notify_left(room_id, connection_id, remaining)

    def _notify_left(self, room_id, connection_id, remaining):
        if remaining:
            self.gateway.broadcast_to_room(room_id, 'opponentLeft', exclude=connection_id)
            logger.info(f"[room-left] room={room_id} conn={connection_id} remaining={len(remaining)}")
        else:
            logger.info(f"[room-deleted] room={room_id} is empty and has been deleted")
