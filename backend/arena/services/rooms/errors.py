JOIN_FAILED_MESSAGE = 'Room is full or does not exist.'


class RoomError(Exception):
    """Base for failures reported back to the requesting connection."""

    message = 'Room request failed.'

    def __init__(self, message=None):
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidPayload(RoomError):
    message = 'Invalid room payload.'


class RoomNotFound(RoomError):
    message = JOIN_FAILED_MESSAGE


class RoomFull(RoomError):
    message = JOIN_FAILED_MESSAGE


class CapacityExhausted(RoomError):
    message = 'Could not allocate a room id, please try again.'
