import uuid

import pytest

from atomhabits.models import Habit, PostgrestResponse


def test_habit_round_trip():
    habit = Habit(uuid.uuid4())
    assert Habit.from_json(habit.to_json()) == habit


def test_habit_serialises_id_as_string():
    habit_id = uuid.uuid4()
    assert Habit(habit_id).to_json() == {"id": str(habit_id)}


@pytest.mark.parametrize(
    "data",
    [{}, {"id": "not-a-uuid"}, {"id": 12}, ["id"], "id", None],
)
def test_habit_rejects_malformed_data(data):
    with pytest.raises(ValueError):
        Habit.from_json(data)


def test_postgrest_response_round_trip_without_hint():
    response = PostgrestResponse(code="PGRST116", details="no rows", hint=None, message="missing")
    assert PostgrestResponse.from_json(response.to_json()) == response


def test_postgrest_response_reads_fields():
    data = {"code": "22P02", "details": "bad input", "hint": "check it", "message": "invalid"}
    response = PostgrestResponse.from_json(data)
    assert (response.code, response.details, response.hint, response.message) == (
        data["code"],
        data["details"],
        data["hint"],
        data["message"],
    )


def test_postgrest_response_hint_is_optional():
    response = PostgrestResponse.from_json({"code": "c", "details": "d", "message": "m"})
    assert response.hint is None
    assert response.to_json()["hint"] is None


@pytest.mark.parametrize(
    "data",
    [
        {"code": "c", "details": "d", "hint": None},
        {"code": "c", "details": 3, "hint": None, "message": "m"},
        {"code": "c", "details": "d", "hint": 5, "message": "m"},
        [],
    ],
)
def test_postgrest_response_rejects_malformed_data(data):
    with pytest.raises(ValueError):
        PostgrestResponse.from_json(data)