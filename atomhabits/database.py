"""A small PostgREST client and the factory that configures it from the environment."""

from __future__ import annotations

import logging
import os

import httpx
from dotenv import find_dotenv, load_dotenv

from .errors import DotEnvError

log = logging.getLogger(__name__)


class QueryBuilder:
    """Builds one request against a PostgREST table."""

    def __init__(self, url: str, headers: dict[str, str] | None = None, schema: str | None = None) -> None:
        self.url = url
        self.method = "GET"
        self.headers: dict[str, str] = dict(headers or {})
        self.params: list[tuple[str, str]] = []
        self.body: str | None = None
        self._schema = schema

    def select(self, columns: str) -> QueryBuilder:
        self.params.append(("select", columns))
        return self

    def eq(self, column: str, value: str) -> QueryBuilder:
        self.params.append((column, f"eq.{value}"))
        return self

    def single(self) -> QueryBuilder:
        self.headers["Accept"] = "application/vnd.pgrst.object+json"
        return self

    def _write(self, method: str, body: str | None) -> QueryBuilder:
        self.method, self.body = method, body
        self.headers["Prefer"] = "return=representation"
        return self

    def insert(self, body: str) -> QueryBuilder:
        return self._write("POST", body)

    def update(self, body: str) -> QueryBuilder:
        return self._write("PATCH", body)

    def delete(self) -> QueryBuilder:
        return self._write("DELETE", None)

    async def execute(self) -> httpx.Response:
        """Send the request and return the response, whatever its status."""
        headers = dict(self.headers)
        if self._schema is not None:
            profile = "Accept-Profile" if self.method in ("GET", "HEAD") else "Content-Profile"
            headers[profile] = self._schema
        if self.body is not None:
            headers.setdefault("Content-Type", "application/json")
        async with httpx.AsyncClient() as http:
            return await http.request(
                self.method, self.url, params=self.params, headers=headers, content=self.body
            )


class Postgrest:
    """Connection settings for a PostgREST endpoint."""

    def __init__(self, url: str) -> None:
        self.url = url
        self.headers: dict[str, str] = {}
        self.schema_name: str | None = None

    def insert_header(self, name: str, value: str) -> Postgrest:
        self.headers[name] = value
        return self

    def schema(self, schema: str) -> Postgrest:
        self.schema_name = schema
        return self

    def table(self, name: str) -> QueryBuilder:
        return QueryBuilder(f"{self.url}/{name}", self.headers, self.schema_name)


def client() -> Postgrest:
    """Create a client for the Supabase instance named by the environment."""
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path)

    url, key = (os.environ.get(name) for name in ("SUPABASE_URL", "SUPABASE_KEY"))
    if url is None:
        raise DotEnvError("SUPABASE_URL")
    if key is None:
        raise DotEnvError("SUPABASE_KEY")

    log.info("Connecting to Supabase at %s", url)
    return Postgrest(url).insert_header("apikey", key).schema("public")