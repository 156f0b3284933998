import threading
from typing import Dict, List, Optional

from arena.models import Room


class RoomStore:
    """In-memory rooms plus the connection -> room reverse index.

    Both mappings change only through ``insert``, ``seat`` and ``unseat``,
    so they never disagree. Callers that read and then write (the
    "is it full, then append" check) must hold ``transaction()`` across
    both steps.
    """

    def __init__(self):
        self._rooms: Dict[str, Room] = {}
        self._seats: Dict[str, str] = {}
        self._lock = threading.RLock()

    def transaction(self):
        return self._lock

    def __len__(self):
        with self._lock:
            return len(self._rooms)

    def contains(self, room_id: str) -> bool:
        with self._lock:
            return room_id in self._rooms

    def get(self, room_id: str) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(room_id)

    def room_of(self, connection_id: str) -> Optional[str]:
        with self._lock:
            return self._seats.get(connection_id)

    def insert(self, room: Room) -> None:
        with self._lock:
            if room.room_id in self._rooms:
                raise KeyError(f"room {room.room_id} already exists")
            for cid in room.participants:
                if cid in self._seats:
                    raise ValueError(f"connection {cid} already seated in {self._seats[cid]}")
            self._rooms[room.room_id] = room
            for cid in room.participants:
                self._seats[cid] = room.room_id

    def seat(self, room_id: str, connection_id: str) -> Room:
        with self._lock:
            room = self._rooms[room_id]
            if connection_id in self._seats:
                raise ValueError(f"connection {connection_id} already seated in {self._seats[connection_id]}")
            if room.is_full:
                raise ValueError(f"room {room_id} is full")
            room.participants.append(connection_id)
            self._seats[connection_id] = room_id
            return room

    def unseat(self, room_id: str, connection_id: str) -> Optional[List[str]]:
        """Remove a participant; drop the room when it empties.

        Returns the remaining participants, or None if the connection was
        not seated in that room.
        """
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None or connection_id not in room.participants:
                return None
            room.participants.remove(connection_id)
            self._seats.pop(connection_id, None)
            if room.is_empty:
                del self._rooms[room_id]
            return list(room.participants)

    def stats(self):
        with self._lock:
            waiting = sum(1 for r in self._rooms.values() if not r.is_full)
            return {
                'rooms': len(self._rooms),
                'waiting': waiting,
                'connections': len(self._seats),
            }
