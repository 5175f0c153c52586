import logging
from typing import Callable, List, Optional

from recipebox.domain.User import User
from recipebox.infra.store import KeyValueStore
from recipebox.utilities.constants import CURRENT_USER_KEY, USER_COLORS, USER_PREFIX
from recipebox.utilities.dates import now_iso
from recipebox.utilities.ids import IdFactory, generate_id

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, store: KeyValueStore, new_id: IdFactory = generate_id,
                 now: Callable[[], str] = now_iso):
        self.store = store
        self.new_id = new_id
        self.now = now

    async def list_all(self) -> List[User]:
        users = []
        for key in await self.store.list(USER_PREFIX):
            data = await self.store.get(key, None)
            if data:
                users.append(User.from_dict(data))
        return users

    async def get(self, user_id: str) -> Optional[User]:
        data = await self.store.get(USER_PREFIX + user_id, None)
        return User.from_dict(data) if data else None

    async def create(self, name: str) -> User:
        '''New profile; the avatar color cycles through USER_COLORS by user count.'''
        existing = await self.list_all()
        user = User(
            id=self.new_id("user"),
            name=name,
            color=USER_COLORS[len(existing) % len(USER_COLORS)],
            created=self.now(),
        )
        await self.store.set(USER_PREFIX + user.id, user.to_dict())
        logger.info("User created: %s (%s)", user.name, user.id)
        return user

    async def get_current(self) -> Optional[User]:
        data = await self.store.get(CURRENT_USER_KEY, None)
        return User.from_dict(data) if data else None

    async def set_current(self, user: User) -> None:
        await self.store.set(CURRENT_USER_KEY, user.to_dict())
