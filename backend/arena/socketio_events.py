from flask import current_app, request
from flask_socketio import emit

from arena.events import dispatch, parse_event
from arena.services.rooms import RoomError

INBOUND_EVENTS = ('createRoom', 'joinRoom', 'playerMove', 'gameOver', 'leaveRoom')


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _services():
    return current_app.extensions['arena']


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    current_app.logger.info(f"[disconnect] sid={sid} reason={reason}")
    _services().lifecycle.handle_disconnect(sid)


def _handle_inbound(name, data):
    sid = _get_sid()
    services = _services()
    try:
        event = parse_event(name, data)
        dispatch(event, sid, services.lifecycle, services.relay)
    except RoomError as exc:
        # Reported to the requester only; other rooms are unaffected
        current_app.logger.info(f"[room-error] event={name} sid={sid} message={exc.message!r}")
        emit('error', {'message': exc.message})


def _make_handler(name):
    def handler(data=None):
        _handle_inbound(name, data)
    handler.__name__ = f"handle_{name}"
    return handler


def register_socketio_handlers(socketio, namespace: str = '/') -> None:
    """Bind the relay's connection callbacks and inbound events on *namespace*."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    for name in INBOUND_EVENTS:
        socketio.on_event(name, _make_handler(name), namespace=namespace)
