"""User Repository - verifies unique username lookup."""

import pytest

from portfolio.core.errors import StoreError
from portfolio.repositories import UserRepository


async def test_get_by_username(test_db):
    repo = UserRepository(test_db)
    created = await repo.create({"username": "owner", "password": "secret"})

    found = await repo.get_by_username("owner")

    assert found is not None
    assert found.id == created.id


async def test_get_by_username_missing(test_db):
    assert await UserRepository(test_db).get_by_username("nobody") is None


async def test_duplicate_username_raises_store_error(test_db):
    repo = UserRepository(test_db)
    await repo.create({"username": "owner", "password": "a"})
    with pytest.raises(StoreError):
        await repo.create({"username": "owner", "password": "b"})
