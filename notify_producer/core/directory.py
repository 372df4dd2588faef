# notify_producer/core/directory.py
from typing import Iterable, Optional, Protocol

from notify_producer.schemas.notification import User

DEFAULT_USERS = (
    User(id=1, name="Emma"),
    User(id=2, name="Bruno"),
    User(id=3, name="Rick"),
    User(id=4, name="Lena"),
)


class UserDirectory(Protocol):
    def resolve(self, user_id: int) -> Optional[User]: ...


class StaticUserDirectory:
    """
    Fixed roster loaded once at startup. Lookups scan the list in order and
    the first entry with a matching id wins.
    """

    def __init__(self, users: Iterable[User] = DEFAULT_USERS):
        self._users = tuple(users)

    def resolve(self, user_id: int) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def __len__(self) -> int:
        return len(self._users)
