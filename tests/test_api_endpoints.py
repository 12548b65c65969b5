"""Integration tests for the FastAPI endpoints."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import pytest
from fastapi.testclient import TestClient

from app import main
from app.main import app
from devmatch.criteria import CRITERIA
from devmatch.engine import MatchingEngine
from devmatch.models import DeveloperProfile, TargetCriteria

client = TestClient(app)


def _developer_payload(dev_id: str = "dev-123", **overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "id": dev_id,
        "full_name": "Jamie Developer",
        "role_types": ["backend"],
        "seniority": "senior",
        "languages": ["Python", "Go"],
        "years_experience": 6,
        "frameworks": ["FastAPI"],
    }
    data.update(overrides)
    return data


def _target_payload(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "role_types": ["backend"],
        "seniority_levels": ["senior", "staff"],
        "languages": ["Python", "TypeScript"],
        "min_experience": 5,
    }
    data.update(overrides)
    return data


def test_health_endpoint_reports_ok() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_criteria_endpoint_lists_weight_table() -> None:
    response = client.get("/criteria")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == len(CRITERIA)
    assert sum(item["weight"] for item in body) == 100
    assert body[0] == {
        "target_field": "role_types",
        "candidate_field": "role_types",
        "label": "Role Types",
        "weight": 20,
        "kind": "set",
    }


def test_match_endpoint_returns_engine_results() -> None:
    developers = [
        _developer_payload("dev-1", languages=["TypeScript"]),
        _developer_payload("dev-2"),
        _developer_payload("dev-3", seniority="junior", years_experience=1, languages=[]),
    ]

    response = client.post(
        "/match", json={"target": _target_payload(), "developers": developers}
    )

    assert response.status_code == 200
    body = response.json()
    assert set(body.keys()) == {"total_candidates", "results"}
    assert body["total_candidates"] == 3

    expected = MatchingEngine().score_and_rank(
        TargetCriteria(**_target_payload()),
        [DeveloperProfile(**payload) for payload in developers],
    )
    assert [item["developer"]["id"] for item in body["results"]] == [
        match.developer.id for match in expected
    ]
    assert [item["score"] for item in body["results"]] == [match.score for match in expected]
    first = body["results"][0]["breakdown"][0]
    assert first["earned"] == pytest.approx(expected[0].breakdown[0].earned)
    assert set(first.keys()) == {"category", "label", "matched", "total", "weight", "earned"}


def test_match_endpoint_honours_exclusions_and_limit() -> None:
    developers = [_developer_payload(f"dev-{index}") for index in range(5)]

    response = client.post(
        "/match",
        json={
            "target": {"languages": ["Python"]},
            "developers": developers,
            "exclude_ids": ["dev-0"],
            "limit": 2,
        },
    )

    assert response.status_code == 200
    ids = [item["developer"]["id"] for item in response.json()["results"]]
    assert ids == ["dev-1", "dev-2"]


def test_match_endpoint_without_criteria_returns_no_results() -> None:
    response = client.post(
        "/match", json={"target": {}, "developers": [_developer_payload()]}
    )

    assert response.status_code == 200
    assert response.json()["results"] == []


def test_match_endpoint_rejects_invalid_limit() -> None:
    response = client.post(
        "/match",
        json={"target": _target_payload(), "developers": [], "limit": 0},
    )

    assert response.status_code == 422


def test_engine_errors_map_to_422(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main.settings, "default_limit", 0)

    response = client.post(
        "/match", json={"target": _target_payload(), "developers": [_developer_payload()]}
    )

    assert response.status_code == 422
    assert "limit must be a positive integer" in response.json()["detail"]


def test_match_preview_endpoint_anonymises_developers() -> None:
    developers = [
        _developer_payload("dev-1"),
        _developer_payload("dev-2", seniority="junior"),
    ]

    response = client.post(
        "/match-preview", json={"target": _target_payload(), "developers": developers}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total_matches"] == 1
    assert body["samples"] == [
        {
            "descriptor": "Senior Backend Engineer",
            "experience": "6 years",
            "top_skills": ["Python", "Go", "FastAPI"],
            "seniority": "Senior",
        }
    ]
    assert "Jamie" not in response.text


def test_match_endpoint_tolerates_malformed_developer_fields() -> None:
    developers = [
        _developer_payload("dev-bad", languages=["Python", None], seniority=5, years_experience="7"),
        _developer_payload("dev-good"),
    ]

    response = client.post(
        "/match", json={"target": _target_payload(), "developers": developers}
    )

    assert response.status_code == 200
    results = {item["developer"]["id"]: item["score"] for item in response.json()["results"]}
    # Role Types 20 + Languages 7.5 of 60 for the malformed profile.
    assert results == {"dev-good": 88, "dev-bad": 46}
