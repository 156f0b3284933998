from typing import NamedTuple

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from config import Config
from arena.gateway import SocketIOGateway
from arena.services.rooms import RelayDispatcher, RoomLifecycleManager, RoomStore

socketio = SocketIO(async_mode=None)


class RoomServices(NamedTuple):
    lifecycle: RoomLifecycleManager
    relay: RelayDispatcher


def build_room_services(gateway, config) -> RoomServices:
    store = RoomStore()
    lifecycle = RoomLifecycleManager(
        store,
        gateway,
        max_attempts=int(config.get('ROOM_ID_MAX_ATTEMPTS', 10)),
        id_length=int(config.get('ROOM_ID_LENGTH', 6)),
    )
    return RoomServices(lifecycle, RelayDispatcher(store, gateway))


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    origins = flask_app.config.get('CORS_ORIGINS', '*')
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    CORS(flask_app, origins=origins)

    socketio.init_app(
        flask_app,
        cors_allowed_origins=origins,
        ping_interval=flask_app.config.get('SOCKETIO_PING_INTERVAL', 20),
        ping_timeout=flask_app.config.get('SOCKETIO_PING_TIMEOUT', 5),
        # One handler at a time per client so a sender's moves keep their order
        async_handlers=False,
    )

    # Fresh room state per app instance; nothing survives a restart
    gateway = SocketIOGateway(socketio, namespace=namespace)
    flask_app.extensions['arena'] = build_room_services(gateway, flask_app.config)

    from arena.main import main
    flask_app.register_blueprint(main)

    from arena.api.puzzles import puzzles
    flask_app.register_blueprint(puzzles, url_prefix='/api/puzzles')

    from arena.socketio_events import register_socketio_handlers
    register_socketio_handlers(socketio, namespace=namespace)

    return flask_app
