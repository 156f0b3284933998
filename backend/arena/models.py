import random
from typing import Any, List, NamedTuple

ROOM_CAPACITY = 2


def generate_room_code(length=6):
    """Generate a short numeric room code, e.g. '482913'."""
    low = 10 ** (length - 1)
    return str(random.randint(low, low * 10 - 1))


def is_valid_puzzle(payload: Any) -> bool:
    # Opaque to the server: an encoded string or the client's cell array
    if isinstance(payload, str):
        return bool(payload.strip())
    if isinstance(payload, list):
        return len(payload) > 0
    return False


class RoomSnapshot(NamedTuple):
    puzzle: Any
    initial_puzzle: Any
    room_id: str

    def to_dict(self):
        return {
            'puzzle': self.puzzle,
            'initialPuzzle': self.initial_puzzle,
            'roomId': self.room_id,
        }


class Room:
    """A two-seat session around one shared puzzle.

    ``participants`` is in join order, so the creator is always first while
    seated. The puzzle payloads are stored once and never modified.
    """

    def __init__(self, room_id: str, puzzle: Any, initial_puzzle: Any, creator_id: str):
        self.room_id = room_id
        self.puzzle = puzzle
        self.initial_puzzle = initial_puzzle
        self.participants: List[str] = [creator_id]

    @property
    def is_full(self) -> bool:
        return len(self.participants) >= ROOM_CAPACITY

    @property
    def is_empty(self) -> bool:
        return not self.participants

    def others(self, connection_id: str) -> List[str]:
        return [p for p in self.participants if p != connection_id]

    def snapshot(self) -> RoomSnapshot:
        return RoomSnapshot(self.puzzle, self.initial_puzzle, self.room_id)

    def __repr__(self):
        return f"<Room {self.room_id} {self.participants}>"
