"""User Repository - account lookup by id or unique username."""

from portfolio.models.user import User
from portfolio.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User
    entity = "user"
    order_by = (User.username.asc(),)

    async def get_by_username(self, username: str) -> User | None:
        return await self._get_one(User.username == username)
