from typing import Optional

from flask_socketio import SocketIO


class SocketIOGateway:
    """Send side of the transport, backed by Flask-SocketIO.

    Room ids double as Socket.IO room names, so ``broadcast_to_room``
    reaches exactly the connections subscribed through ``subscribe``.
    """

    def __init__(self, socketio: SocketIO, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def send_to(self, connection_id: str, event: str, *args) -> None:
        self.socketio.emit(event, *args, to=connection_id, namespace=self.namespace)

    def broadcast_to_room(self, room_id: str, event: str, *args, exclude: Optional[str] = None) -> None:
        self.socketio.emit(event, *args, to=room_id, skip_sid=exclude, namespace=self.namespace)

    def subscribe(self, connection_id: str, room_id: str) -> None:
        self.socketio.server.enter_room(connection_id, room_id, namespace=self.namespace)

    def unsubscribe(self, connection_id: str, room_id: str) -> None:
        self.socketio.server.leave_room(connection_id, room_id, namespace=self.namespace)
