"""HTTP endpoints for habits."""

from __future__ import annotations

import functools
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from .crud import Crud
from .errors import ApiError, DomainError, InfrastructureError, InvalidParams
from .models import Habit


@dataclass(frozen=True)
class HabitPayload:
    """The habit as it travels over the HTTP API."""

    id: uuid.UUID

    @classmethod
    def from_model(cls, habit: Habit) -> HabitPayload:
        return cls(habit.id)

    def to_model(self) -> Habit:
        return Habit(self.id)

    @classmethod
    def from_json(cls, data: Any) -> HabitPayload:
        return cls.from_model(Habit.from_json(data))

    def to_json(self) -> dict[str, Any]:
        return {"id": str(self.id)}


def error_response(error: ApiError) -> Response:
    """Render an ApiError as its status code and, if any, its description."""
    status = int(error.status_code())
    if error.description is None:
        return Response(status_code=status)
    return PlainTextResponse(error.description, status_code=status)


Handler = Callable[["HabitRoutes", Request], Awaitable[Response]]


def _endpoint(handler: Handler) -> Handler:
    @functools.wraps(handler)
    async def wrapper(self: HabitRoutes, request: Request) -> Response:
        try:
            return await handler(self, request)
        except (ApiError, DomainError, InfrastructureError, OSError) as error:
            return error_response(ApiError.wrap(error))

    return wrapper


def _path_id(request: Request) -> uuid.UUID:
    try:
        return uuid.UUID(request.path_params["id"])
    except ValueError as error:
        raise InvalidParams() from error


async def _read_payload(request: Request) -> HabitPayload:
    try:
        return HabitPayload.from_json(await request.json())
    except ValueError as error:
        raise InvalidParams() from error


def _to_json(habit: Habit) -> dict[str, Any]:
    return HabitPayload.from_model(habit).to_json()


class HabitRoutes:
    """Request handlers bound to a habit service."""

    def __init__(self, service: Crud[uuid.UUID, Habit]) -> None:
        self.service = service

    def routes(self) -> list[Route]:
        return [
            Route("/api/habit/{id}", self.get, methods=["GET"]),
            Route("/api/habit/{id}", self.update, methods=["PUT"]),
            Route("/api/habit/{id}", self.delete, methods=["DELETE"]),
            Route("/api/habit", self.all, methods=["GET"]),
            Route("/api/habit", self.create, methods=["POST"]),
        ]

    @_endpoint
    async def all(self, request: Request) -> Response:
        habits = await self.service.read_all()
        return JSONResponse([_to_json(habit) for habit in habits])

    @_endpoint
    async def get(self, request: Request) -> Response:
        habit = await self.service.read(_path_id(request))
        return JSONResponse(None if habit is None else _to_json(habit))

    @_endpoint
    async def create(self, request: Request) -> Response:
        payload = await _read_payload(request)
        habit = await self.service.create(payload.to_model())
        return JSONResponse(_to_json(habit))

    @_endpoint
    async def update(self, request: Request) -> Response:
        habit_id = _path_id(request)
        payload = await _read_payload(request)
        habit = await self.service.update(habit_id, payload.to_model())
        return JSONResponse(_to_json(habit))

    @_endpoint
    async def delete(self, request: Request) -> Response:
        await self.service.delete(_path_id(request))
        return Response(status_code=200)