"""Pytest configuration and fixtures."""

from __future__ import annotations

import random
from datetime import datetime, timezone

import pytest

from party_draw import create_app
from party_draw.config import EventSettings, TestingConfig
from party_draw.models.participant import ParticipantRecord
from party_draw.repositories.participant_repository import ParticipantStore
from party_draw.repositories.storage import InMemoryStorage
from party_draw.services.allocation_service import Allocator


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def store(storage):
    return ParticipantStore(storage)


@pytest.fixture
def settings():
    return EventSettings(team_count=9, members_per_team=10)


@pytest.fixture
def rng():
    return random.Random(20251219)


@pytest.fixture
def allocator(store, settings, rng):
    return Allocator(store, settings, rng=rng)


@pytest.fixture
def make_record():
    def _make(participant_id: str = "p-1", team_number: int = 1, lottery_number: int = 1) -> ParticipantRecord:
        return ParticipantRecord(
            id=participant_id,
            team_number=team_number,
            lottery_number=lottery_number,
            created_at=datetime(2025, 12, 19, 18, 30, tzinfo=timezone.utc),
        )

    return _make


@pytest.fixture
def app(storage):
    return create_app(TestingConfig, storage=storage)


@pytest.fixture
def client(app):
    return app.test_client()
