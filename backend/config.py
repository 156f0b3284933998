import os


def _origins(raw):
    if not raw or raw.strip() == '*':
        return '*'
    return [o.strip() for o in raw.split(',') if o.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3001'))
    CORS_ORIGINS = _origins(os.environ.get('CORS_ORIGINS', '*'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Heartbeat (seconds); a missed pong triggers the disconnect path
    SOCKETIO_PING_INTERVAL = int(os.environ.get('SOCKETIO_PING_INTERVAL', '20'))
    SOCKETIO_PING_TIMEOUT = int(os.environ.get('SOCKETIO_PING_TIMEOUT', '5'))
    # Room ids are digit strings without a leading zero
    ROOM_ID_LENGTH = int(os.environ.get('ROOM_ID_LENGTH', '6'))
    ROOM_ID_MAX_ATTEMPTS = int(os.environ.get('ROOM_ID_MAX_ATTEMPTS', '10'))
    DEBUG = os.environ.get('FLASK_DEBUG', '0') == '1'
    # Serve with Werkzeug outside debug; off unless explicitly enabled
    ALLOW_UNSAFE_WERKZEUG = os.environ.get('ALLOW_UNSAFE_WERKZEUG', '0') == '1'
