import pytest

from aistudio.domain.value_objects import UserId, WorkspaceId
from aistudio.infrastructure.persistence.memory import InMemoryAdapters, InMemoryStore
from aistudio.setup.ioc.container import Container


@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    """Every test runs against the testing config (memory backend) and a fresh container."""
    monkeypatch.setenv("APP_ENV", "testing")
    Container.reset()
    yield
    Container.reset()


@pytest.fixture()
def workspace_id():
    return WorkspaceId.generate()


@pytest.fixture()
def other_workspace_id():
    return WorkspaceId.generate()


@pytest.fixture()
def user_id():
    return UserId.generate()


@pytest.fixture()
def other_user_id():
    return UserId.generate()


@pytest.fixture()
def store(workspace_id, other_workspace_id, user_id, other_user_id):
    """In-memory store seeded with two workspaces and two users."""
    store = InMemoryStore(workspaces=[workspace_id], users=[user_id])
    store.add_workspace(other_workspace_id)
    store.add_user(other_user_id)
    return store


@pytest.fixture()
def container(store):
    """Container wired to the seeded store."""
    return Container(adapters=InMemoryAdapters(store))
