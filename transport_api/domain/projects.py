"""Domain helpers for project records (field names, builders, sample data)."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from transport_api.core.utils import iso_timestamp, new_id

ID_FIELD = "id"
CREATED_AT_FIELD = "createdAt"
UPDATED_AT_FIELD = "updatedAt"
INVESTMENT_SCORE_FIELD = "инвестиционнаяОценка"
TRANSPORT_SCORE_FIELD = "транспортнаяОценка"

# Fields the server owns; client payloads never override them.
SERVER_FIELDS = frozenset({ID_FIELD, CREATED_AT_FIELD, UPDATED_AT_FIELD})

SAMPLE_PROJECTS = (
    {
        "name": "Умная мобильность",
        "industry": "Транспорт",
        INVESTMENT_SCORE_FIELD: 68,
        TRANSPORT_SCORE_FIELD: 8,
        "status": "Рекомендовано к полной оценке",
    },
    {
        "name": "Билетная система с ИИ",
        "industry": "Транспорт",
        INVESTMENT_SCORE_FIELD: 61,
        TRANSPORT_SCORE_FIELD: 5,
        "status": "Только инвестиции",
    },
    {
        "name": "Экологичная парковка",
        "industry": "Транспорт",
        INVESTMENT_SCORE_FIELD: 52,
        TRANSPORT_SCORE_FIELD: 7,
        "status": "Только пилот",
    },
)


def _strip(payload: Mapping[str, Any] | None, protected: Iterable[str]) -> dict:
    blocked = set(protected)
    return {key: value for key, value in (payload or {}).items() if key not in blocked}


def build_project(payload: Mapping[str, Any] | None, *, now: str | None = None) -> dict:
    """Return a new record: fresh id, the payload fields, createdAt == updatedAt."""
    stamp = now or iso_timestamp()
    record = {ID_FIELD: new_id()}
    record.update(_strip(payload, SERVER_FIELDS))
    record[CREATED_AT_FIELD] = stamp
    record[UPDATED_AT_FIELD] = stamp
    return record


def merge_project(existing: Mapping[str, Any], payload: Mapping[str, Any] | None, *, now: str | None = None) -> dict:
    """Shallow-merge payload over an existing record and refresh updatedAt."""
    merged = dict(existing)
    merged.update(_strip(payload, SERVER_FIELDS))
    merged[UPDATED_AT_FIELD] = now or iso_timestamp()
    return merged


def find_index(records: list[dict], project_id: str) -> int:
    """Position of the record with the given id, or -1."""
    for idx, record in enumerate(records):
        if isinstance(record, dict) and record.get(ID_FIELD) == project_id:
            return idx
    return -1


def sample_projects() -> list[dict]:
    """Fresh copies of the sample records, each with its own id and timestamps."""
    stamp = iso_timestamp()
    return [build_project(sample, now=stamp) for sample in SAMPLE_PROJECTS]
