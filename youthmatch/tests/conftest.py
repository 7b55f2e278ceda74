from __future__ import annotations

import copy
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from youthmatch.logic import Program, UserProfile

# Central Library, Seattle
LIBRARY = {"lat": 47.6067, "lng": -122.3325}
# Tacoma, roughly 25 miles south
TACOMA = {"lat": 47.2529, "lng": -122.4443}

BASE_PROGRAM: Dict[str, Any] = {
    "id": "p1",
    "title": "Teen Coding Lab",
    "description": "Learn Python basics and build a small web app.",
    "organization": "Seattle Public Library",
    "location": {
        "name": "Central Library",
        "address": "1000 4th Ave, Seattle, WA 98104",
        "coordinates": LIBRARY,
    },
    "age_range": {"min": 12, "max": 17},
    "categories": ["stem", "education"],
    "schedule": {
        "start_date": "2024-01-15",
        "days": ["Monday", "Wednesday"],
        "time": "3:00 PM - 5:00 PM",
        "frequency": "weekly",
    },
    "cost": {"amount": 0, "currency": "USD", "free": True},
    "capacity": {"current": 10, "max": 20},
    "requirements": ["Bring a laptop"],
    "contact": {"email": "teens@spl.org"},
    "images": [],
    "safety_rating": 4,
    "verified": True,
    "source": "partner",
}

BASE_USER: Dict[str, Any] = {
    "id": "u1",
    "name": "Sam",
    "age": 16,
    "interests": ["stem"],
    "location": {
        "neighborhood": "Downtown",
        "zip_code": "98104",
        "coordinates": LIBRARY,
    },
    "preferences": {
        "max_distance": 10,
        "time_of_day": "any",
        "days_available": ["Monday", "Wednesday"],
    },
    "safety_settings": {
        "require_parent_approval": True,
        "allow_unsupervised": False,
        "max_age_difference": 0,
    },
}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    # Nested dict overrides replace only the keys they name
    data = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(data.get(key), dict):
            data[key] = {**data[key], **value}
        else:
            data[key] = value
    return data


@pytest.fixture()
def program_data() -> Callable[..., Dict[str, Any]]:
    def _build(**overrides: Any) -> Dict[str, Any]:
        return _merge(BASE_PROGRAM, overrides)
    return _build


@pytest.fixture()
def user_data() -> Callable[..., Dict[str, Any]]:
    def _build(**overrides: Any) -> Dict[str, Any]:
        return _merge(BASE_USER, overrides)
    return _build


@pytest.fixture()
def make_program(program_data) -> Callable[..., Program]:
    def _build(**overrides: Any) -> Program:
        return Program.model_validate(program_data(**overrides))
    return _build


@pytest.fixture()
def make_user(user_data) -> Callable[..., UserProfile]:
    def _build(**overrides: Any) -> UserProfile:
        return UserProfile.model_validate(user_data(**overrides))
    return _build


@pytest.fixture()
def client() -> TestClient:
    from main import app
    return TestClient(app)
