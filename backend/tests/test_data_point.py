"""Tests for the weekly data point rotation and lookup."""

import asyncio
from datetime import date, datetime, timezone

from fakes import DATA_POINT, ScriptedCompletion

from sunday_edition.models import Locale
from sunday_edition.stages.data_point import (
    DATA_UNAVAILABLE,
    build_data_point_prompt,
    generate_data_point,
    select_data_point_type,
    unavailable_data_point,
)

TRIBECA = Locale(id="tribeca", name="Tribeca", city="New York", country="USA")
DAIKANYAMA = Locale(id="daikanyama", name="Daikanyama", city="Tokyo", country="Japan")

# ISO week 43 of 2026 -> flaneur_index
NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def test_rotation_follows_iso_week() -> None:
    assert select_data_point_type(date(2026, 1, 1)) == "safety"  # week 1
    assert select_data_point_type(date(2026, 1, 5)) == "environment"  # week 2
    assert select_data_point_type(NOW) == "flaneur_index"  # week 43


def test_rotation_uses_iso_year_boundaries() -> None:
    # Dec 29 2025 already belongs to ISO week 1 of 2026
    assert select_data_point_type(date(2025, 12, 29)) == "safety"
    # Jan 1 2027 is still ISO week 53 of 2026
    assert select_data_point_type(date(2027, 1, 1)) == "safety"


def test_rotation_is_stable_within_a_week() -> None:
    week = [date(2026, 10, 19 + offset) for offset in range(7)]
    assert {select_data_point_type(day) for day in week} == {"flaneur_index"}


def test_prompt_uses_locale_units() -> None:
    usa = build_data_point_prompt("environment", TRIBECA)
    japan = build_data_point_prompt("environment", DAIKANYAMA)

    assert "°F ONLY" in usa
    assert "°C ONLY" in japan
    assert "JPY" in build_data_point_prompt("flaneur_index", DAIKANYAMA)


def test_generate_data_point_success() -> None:
    completion = ScriptedCompletion(
        [(DATA_POINT, '```json\n{"value": "$7.25", "context": "Our lattes are creeping up."}\n```')]
    )

    data_point = asyncio.run(generate_data_point(completion, TRIBECA, NOW))

    assert data_point.type == "flaneur_index"
    assert data_point.label == "The Flaneur Index"
    assert data_point.value == "$7.25"
    assert data_point.context == "Our lattes are creeping up."
    assert completion.calls[0]["grounded"] is True
    assert completion.calls[0]["temperature"] == 0.3


def test_generate_data_point_numeric_value_is_stringified() -> None:
    completion = ScriptedCompletion([(DATA_POINT, '{"value": 12, "context": null}')])

    data_point = asyncio.run(generate_data_point(completion, TRIBECA, NOW))

    assert data_point.value == "12"
    assert data_point.context == ""


def test_generate_data_point_garbage_returns_sentinel() -> None:
    completion = ScriptedCompletion([(DATA_POINT, "I could not find that information.")])

    data_point = asyncio.run(generate_data_point(completion, TRIBECA, NOW))

    assert data_point == unavailable_data_point("flaneur_index")
    assert data_point.value == DATA_UNAVAILABLE


def test_generate_data_point_blank_value() -> None:
    completion = ScriptedCompletion([(DATA_POINT, '{"value": "  ", "context": "Nothing yet."}')])

    data_point = asyncio.run(generate_data_point(completion, TRIBECA, NOW))

    assert data_point.value == "Data unavailable"
    assert data_point.value != DATA_UNAVAILABLE
