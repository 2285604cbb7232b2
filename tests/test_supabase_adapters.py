"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

import pytest

from nutrilog.adapters.rows import meal_to_row, profile_to_row
from nutrilog.adapters.supabase_meal_repository import SupabaseMealRepository
from nutrilog.adapters.supabase_profile_repository import SupabaseProfileRepository
from nutrilog.services.profile import compute_profile
from tests.conftest import FIXED_NOW, make_meal, sample_profile_input


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def _start(self, action: str) -> "FakeTable":
        self._action = action
        self.actions.append(action)
        return self

    def select(self, *_args) -> "FakeTable":
        return self._start("select")

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_payload = payload
        return self._start("insert")

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_payload = payload
        return self._start("update")

    def upsert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_payload = payload
        return self._start("upsert")

    def delete(self) -> "FakeTable":
        return self._start("delete")

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_meal_repository_list_and_get() -> None:
    client = FakeSupabaseClient()
    meals_table = client.table("meals")
    row = meal_to_row(make_meal("a", calories=150))
    meals_table.queue("select", [row])
    meals_table.queue("select", [row])

    repository = SupabaseMealRepository(client)
    meals = repository.list_meals()
    fetched = repository.get_meal("a")

    assert meals == [make_meal("a", calories=150)]
    assert fetched == meals[0]
    assert ("id", "a") in meals_table.last_filters


def test_supabase_meal_repository_get_missing() -> None:
    repository = SupabaseMealRepository(FakeSupabaseClient())

    assert repository.get_meal("missing") is None


def test_supabase_meal_repository_create() -> None:
    client = FakeSupabaseClient()
    meals_table = client.table("meals")
    meal = make_meal("a")
    meals_table.queue("insert", [meal_to_row(meal)])

    SupabaseMealRepository(client).create_meal(meal)

    assert meals_table.last_payload == meal_to_row(meal)


def test_supabase_meal_repository_create_failure_raises() -> None:
    repository = SupabaseMealRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError):
        repository.create_meal(make_meal("a"))


def test_supabase_meal_repository_update_and_delete() -> None:
    client = FakeSupabaseClient()
    meals_table = client.table("meals")
    meal = make_meal("a", calories=410)
    meals_table.queue("update", [meal_to_row(meal)])

    repository = SupabaseMealRepository(client)
    repository.update_meal(meal)
    repository.delete_meal("a")

    assert isinstance(meals_table.last_payload, dict)
    assert "id" not in meals_table.last_payload
    assert meals_table.last_payload["calories"] == 410
    assert meals_table.actions[-1] == "delete"
    assert meals_table.last_filters[-1] == ("id", "a")


def test_supabase_profile_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    profiles_table = client.table("profiles")
    profile = compute_profile(sample_profile_input(), now=FIXED_NOW)
    row = {"id": "default", **profile_to_row(profile)}
    profiles_table.queue("upsert", [row])
    profiles_table.queue("select", [row])

    repository = SupabaseProfileRepository(client)
    repository.save_profile(profile)
    fetched = repository.get_profile()

    assert profiles_table.last_payload == row
    assert fetched == profile


def test_supabase_profile_repository_empty() -> None:
    repository = SupabaseProfileRepository(FakeSupabaseClient())

    assert repository.get_profile() is None
    with pytest.raises(RuntimeError):
        repository.save_profile(
            compute_profile(sample_profile_input(), now=FIXED_NOW)
        )
