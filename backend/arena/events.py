"""Inbound client events.

Each named Socket.IO event is parsed into one of the small event types
below and then handed to ``dispatch``, which maps it onto exactly one room
service call. Nothing here touches the transport.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from arena.services.rooms import InvalidPayload, RelayDispatcher, RoomLifecycleManager


@dataclass(frozen=True)
class CreateRoom:
    puzzle: Any
    initial_puzzle: Any


@dataclass(frozen=True)
class JoinRoom:
    room_id: Optional[str]


@dataclass(frozen=True)
class PlayerMove:
    room_id: Optional[str]
    puzzle_state: Any


@dataclass(frozen=True)
class GameOver:
    room_id: Optional[str]


@dataclass(frozen=True)
class LeaveRoom:
    room_id: Optional[str]


InboundEvent = Union[CreateRoom, JoinRoom, PlayerMove, GameOver, LeaveRoom]


def _room_id(data: Dict[str, Any]) -> Optional[str]:
    raw = data.get('roomId')
    # Clients may send the code back as a number. Anything else matches no
    # room: joins fail as not found, relays and leaves do nothing.
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        return None
    return str(raw).strip() or None


def parse_event(name: str, data: Any) -> InboundEvent:
    data = data if isinstance(data, dict) else {}
    if name == 'createRoom':
        return CreateRoom(data.get('puzzle'), data.get('initialPuzzle'))
    if name == 'joinRoom':
        return JoinRoom(_room_id(data))
    if name == 'playerMove':
        return PlayerMove(_room_id(data), data.get('puzzleState'))
    if name == 'gameOver':
        return GameOver(_room_id(data))
    if name == 'leaveRoom':
        return LeaveRoom(_room_id(data))
    raise InvalidPayload(f'Unknown event: {name}')


def dispatch(event: InboundEvent, connection_id: str,
             lifecycle: RoomLifecycleManager, relay: RelayDispatcher):
    if isinstance(event, CreateRoom):
        return lifecycle.create_room(event.puzzle, event.initial_puzzle, connection_id)
    if isinstance(event, JoinRoom):
        return lifecycle.join_room(event.room_id, connection_id)
    if isinstance(event, PlayerMove):
        return relay.relay_move(event.room_id, connection_id, event.puzzle_state)
    if isinstance(event, GameOver):
        return relay.relay_game_over(event.room_id, connection_id)
    if isinstance(event, LeaveRoom):
        return lifecycle.leave_room(event.room_id, connection_id)
    raise TypeError(f"unhandled event type: {type(event).__name__}")
