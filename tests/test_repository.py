"""Test the relational task store against SQLite."""
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.database import build_engine, init_db
from verticals.todo.errors import TaskNotFoundError
from verticals.todo.models.schemas import TaskIn
from verticals.todo.repository import SqlTaskStore, TaskRepository


@pytest_asyncio.fixture
async def session(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    await init_db(engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.mark.asyncio
async def test_repository_create_returns_generated_id(session):
    repo = TaskRepository(session)
    row = await repo.create({"name": "a", "description": "", "status": False})
    assert isinstance(row["id"], int)
    assert row["name"] == "a"


@pytest.mark.asyncio
async def test_repository_update_missing_returns_none(session):
    repo = TaskRepository(session)
    assert await repo.update(999, {"name": "x"}) is None
    assert await repo.delete(999) is False


@pytest.mark.asyncio
async def test_create_and_get(session):
    store = SqlTaskStore(session)
    created = await store.create(TaskIn(name="Buy milk", desc="2 litres"))
    assert created.id.isdigit()
    assert created.status is False
    assert await store.get(created.id) == created


@pytest.mark.asyncio
async def test_ids_are_unique(session):
    store = SqlTaskStore(session)
    ids = {(await store.create(TaskIn(name=f"t{i}"))).id for i in range(5)}
    assert len(ids) == 5


@pytest.mark.asyncio
async def test_list_ordered_by_id(session):
    store = SqlTaskStore(session)
    for name in ("a", "b", "c"):
        await store.create(TaskIn(name=name))
    assert [t.name for t in await store.list()] == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_update_returns_post_write_state(session):
    store = SqlTaskStore(session)
    created = await store.create(TaskIn(name="a", desc="old"))
    updated = await store.update(created.id, TaskIn(name="b", desc="new", status=True))
    assert updated.id == created.id
    assert (updated.name, updated.desc, updated.status) == ("b", "new", True)
    assert await store.get(created.id) == updated


@pytest.mark.asyncio
async def test_update_missing_does_not_mutate(session):
    store = SqlTaskStore(session)
    created = await store.create(TaskIn(name="a"))
    with pytest.raises(TaskNotFoundError):
        await store.update("12345", TaskIn(name="b"))
    assert await store.list() == [created]


@pytest.mark.asyncio
async def test_non_numeric_id_not_found(session):
    store = SqlTaskStore(session)
    with pytest.raises(TaskNotFoundError):
        await store.get("abc")
    with pytest.raises(TaskNotFoundError):
        await store.complete("abc")


@pytest.mark.asyncio
async def test_delete_then_get_not_found(session):
    store = SqlTaskStore(session)
    created = await store.create(TaskIn(name="a"))
    await store.delete(created.id)
    with pytest.raises(TaskNotFoundError):
        await store.get(created.id)
    with pytest.raises(TaskNotFoundError):
        await store.delete(created.id)


@pytest.mark.asyncio
async def test_complete_is_idempotent(session):
    store = SqlTaskStore(session)
    created = await store.create(TaskIn(name="a"))
    first = await store.complete(created.id)
    second = await store.complete(created.id)
    assert first == second
    assert second.status is True


@pytest.mark.asyncio
@pytest.mark.parametrize("task_id", ["99999999999999999999", str(2**31), "0", "-1"])
async def test_out_of_range_id_not_found(session, task_id):
    store = SqlTaskStore(session)
    await store.create(TaskIn(name="a"))
    with pytest.raises(TaskNotFoundError):
        await store.get(task_id)
    with pytest.raises(TaskNotFoundError):
        await store.update(task_id, TaskIn(name="b"))
    with pytest.raises(TaskNotFoundError):
        await store.delete(task_id)
    with pytest.raises(TaskNotFoundError):
        await store.complete(task_id)


@pytest.mark.asyncio
async def test_id_aliases_do_not_resolve(session):
    store = SqlTaskStore(session)
    for i in range(10):
        created = await store.create(TaskIn(name=f"t{i}"))
    assert created.id == "10"
    for alias in ("010", "1_0", " 10 ", "+10", "١٠", "10.0"):
        with pytest.raises(TaskNotFoundError):
            await store.get(alias)
    assert (await store.get("10")).name == "t9"
