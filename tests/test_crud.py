import pytest

from atomhabits.crud import Crud


class MemoryStore(Crud):
    def __init__(self):
        self.items = {}

    async def read_all(self):
        return list(self.items.values())

    async def read(self, id):
        return self.items.get(id)

    async def create(self, value):
        self.items[value[0]] = value
        return value

    async def update(self, id, value):
        self.items[id] = value
        return value

    async def delete(self, id):
        return self.items.pop(id, None)


class FailingStore(MemoryStore):
    async def read(self, id):
        raise LookupError(id)


@pytest.mark.asyncio
async def test_exists_follows_read():
    store = MemoryStore()
    await store.create(("a", 1))
    assert await Crud.exists(store, "a") is True
    assert await Crud.exists(store, "b") is False


@pytest.mark.asyncio
async def test_exists_false_after_delete():
    store = MemoryStore()
    await store.create(("a", 1))
    assert await store.delete("a") == ("a", 1)
    assert await Crud.exists(store, "a") is False


@pytest.mark.asyncio
async def test_exists_propagates_read_errors():
    with pytest.raises(LookupError) as caught:
        await Crud.exists(FailingStore(), "a")
    assert caught.value.args == ("a",)


def test_crud_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Crud()