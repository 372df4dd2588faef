from fastapi import status


class NotificationError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(NotificationError):
    status_code = status.HTTP_400_BAD_REQUEST


class UserNotFound(NotificationError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class SerializationError(NotificationError):
    pass


class PublishFailure(NotificationError):
    pass
