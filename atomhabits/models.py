"""Records stored in the habit table and error bodies returned by PostgREST."""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Habit:
    """A habit row, identified by its UUID."""

    id: uuid.UUID

    def to_json(self) -> dict[str, Any]:
        return {"id": str(self.id)}

    @classmethod
    def from_json(cls, data: Any) -> Habit:
        """Build a habit from decoded JSON; raises ValueError on malformed data."""
        try:
            return cls(uuid.UUID(data["id"]))
        except (KeyError, TypeError, ValueError, AttributeError) as error:
            raise ValueError(f"invalid Habit: {data!r}") from error


@dataclass(frozen=True)
class PostgrestResponse:
    """The error object PostgREST sends back when a request fails."""

    code: str
    details: str
    hint: str | None
    message: str

    def to_json(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_json(cls, data: Any) -> PostgrestResponse:
        """Build a response from decoded JSON; raises ValueError on malformed data."""
        try:
            fields = {name: data[name] for name in ("code", "details", "message")}
            fields["hint"] = data.get("hint")
        except (KeyError, TypeError, AttributeError) as error:
            raise ValueError(f"invalid PostgrestResponse: {data!r}") from error
        if not all(isinstance(value, str) for name, value in fields.items() if name != "hint"):
            raise ValueError(f"invalid PostgrestResponse: {data!r}")
        if fields["hint"] is not None and not isinstance(fields["hint"], str):
            raise ValueError(f"invalid PostgrestResponse: {data!r}")
        return cls(**fields)