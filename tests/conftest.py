import uuid
from typing import List, Optional, Tuple

import pytest

from examples.user_directory import User, UserMapper, create_schema
from uowkit.mapping import EntityMapper
from uowkit.persistence import ConnectionProvider, UnitOfWork


class MapperFailure(RuntimeError):
    pass


class RecordingMapper(EntityMapper[User]):
    """
    Wraps a real mapper, recording each call and optionally failing one of them.
    """

    entity_type = User

    def __init__(self, inner: EntityMapper[User]) -> None:
        self.inner = inner
        self.calls: List[Tuple[str, uuid.UUID]] = []
        self.fail_on: Optional[Tuple[str, uuid.UUID]] = None

    def _record(self, operation: str, id: uuid.UUID) -> None:
        self.calls.append((operation, id))
        if self.fail_on == (operation, id):
            raise MapperFailure(f"{operation} failed for {id}")

    def insert(self, transaction, entity):
        self._record("insert", entity.id)
        self.inner.insert(transaction, entity)

    def update(self, transaction, entity):
        self._record("update", entity.id)
        self.inner.update(transaction, entity)

    def delete(self, transaction, entity):
        self._record("delete", entity.id)
        self.inner.delete(transaction, entity)

    def fetch(self, id, connection):
        self._record("fetch", id)
        return self.inner.fetch(id, connection)

    def operations(self, name: str) -> List[uuid.UUID]:
        return [id for operation, id in self.calls if operation == name]


@pytest.fixture
def provider(tmp_path):
    provider = ConnectionProvider.from_dsn(f"sqlite:///{tmp_path / 'users.db'}")
    create_schema(provider)
    return provider


@pytest.fixture
def recorder():
    return RecordingMapper(UserMapper())


@pytest.fixture
def uow(provider, recorder):
    return UnitOfWork([recorder], provider)


@pytest.fixture
def count_users(provider):
    def count() -> int:
        with provider.connection() as connection:
            return connection.execute('SELECT COUNT(*) FROM "users"').fetchone()[0]

    return count


@pytest.fixture
def stored_user(provider):
    """
    Persist a user through a throwaway unit of work and return it.
    """

    user = User("John Doe")
    setup = UnitOfWork([UserMapper()], provider)
    setup.register_new(user)
    setup.commit()
    return user
