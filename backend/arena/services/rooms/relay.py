import logging
from typing import Any

from .store import RoomStore

logger = logging.getLogger(__name__)


class RelayDispatcher:
    """Forwards one participant's events to the other side of the room.

    Payloads are passed through untouched; move legality is the clients'
    business. A room that vanished, or a sender not seated in it, makes the
    call a silent no-op.
    """

    def __init__(self, store: RoomStore, gateway):
        self.store = store
        self.gateway = gateway

    def relay_move(self, room_id: str, sender_id: str, move_state: Any) -> bool:
        return self._forward(room_id, sender_id, 'opponentMove', move_state)

    def relay_game_over(self, room_id: str, sender_id: str) -> bool:
        return self._forward(room_id, sender_id, 'opponentWon')

    def _forward(self, room_id, sender_id, event, *args) -> bool:
        with self.store.transaction():
            room = self.store.get(room_id)
            recipients = room.others(sender_id) if room and sender_id in room.participants else None
        if recipients is None:
            logger.debug(f"[relay-drop] {event} room={room_id} sender={sender_id}")
            return False
        if recipients:
            self.gateway.broadcast_to_room(room_id, event, *args, exclude=sender_id)
        return True
