"""The web application and the command that serves it."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from .database import Postgrest, client
from .errors import ApiError, InfrastructureError
from .routes import HabitRoutes
from .services import HabitService


async def _hello(request: Request) -> PlainTextResponse:
    return PlainTextResponse("Hello, World!")


def create_app(database: Postgrest) -> Starlette:
    """Build the application serving the habit API from the given database."""
    routes = HabitRoutes(HabitService(database)).routes()
    return Starlette(routes=[Route("/", _hello, methods=["GET"]), *routes])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="atomhabits")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        database = client()
    except InfrastructureError as error:
        print(f"Error: {ApiError.wrap(error)}", file=sys.stderr)
        return 1

    uvicorn.run(create_app(database), host=args.host, port=args.port)
    return 0