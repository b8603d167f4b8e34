"""Domain services backed by PostgREST tables."""

from __future__ import annotations

import json
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from .crud import Crud
from .database import Postgrest, QueryBuilder
from .errors import DomainError, PostgrestError
from .models import Habit, PostgrestResponse

T = TypeVar("T")


def _decode(body: str, parse: Callable[[Any], T]) -> T:
    try:
        return parse(json.loads(body))
    except ValueError as error:
        raise DomainError(f"SERDE_JSON_ERROR: {error}") from error


def _habits(data: Any) -> list[Habit]:
    if not isinstance(data, list):
        raise ValueError("invalid type: expected a sequence of Habit")
    return [Habit.from_json(item) for item in data]


def _encode(habit: Habit) -> str:
    return json.dumps(habit.to_json(), separators=(",", ":"))


class HabitService(Crud[uuid.UUID, Habit]):
    """Stores habits in the ``habit`` table."""

    def __init__(self, database: Postgrest) -> None:
        self.database = database
        self.table = "habit"

    def _query(self) -> QueryBuilder:
        return self.database.table(self.table)

    async def _fetch(self, query: QueryBuilder) -> str:
        try:
            response = await query.execute()
        except httpx.HTTPError as error:
            raise DomainError(f"REQWEST_ERROR: {error}") from error
        return response.text

    async def read_all(self) -> list[Habit]:
        body = await self._fetch(self._query().select("*"))
        return _decode(body, _habits)

    async def read(self, id: uuid.UUID) -> Habit | None:
        body = await self._fetch(self._query().eq("id", str(id)).single())
        try:
            return Habit.from_json(json.loads(body))
        except ValueError:
            pass
        raise PostgrestError(_decode(body, PostgrestResponse.from_json))

    async def create(self, value: Habit) -> Habit:
        body = await self._fetch(self._query().insert(_encode(value)).select("*"))
        return _decode(body, Habit.from_json)

    async def update(self, id: uuid.UUID, value: Habit) -> Habit:
        query = self._query().update(_encode(value)).eq("id", str(id)).select("*")
        return _decode(await self._fetch(query), Habit.from_json)

    async def delete(self, id: uuid.UUID) -> Habit | None:
        query = self._query().delete().eq("id", str(id)).select("*")
        return _decode(await self._fetch(query), Habit.from_json)