"""Service layer for participant use-cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from party_draw.errors import NotFoundError
from party_draw.models.participant import ParticipantRecord
from party_draw.repositories.participant_repository import ParticipantStore
from party_draw.services.allocation_service import Allocator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamStats:
    team_number: int
    current_count: int
    max_count: int
    available: int


@dataclass(frozen=True)
class UsageStats:
    total_assigned: int
    total_capacity: int
    available_slots: int
    completion_rate: float
    team_stats: list[TeamStats]


class ParticipantService:
    """Participant registration, lookup and admin operations."""

    def __init__(self, store: ParticipantStore, allocator: Allocator) -> None:
        self._store = store
        self._allocator = allocator

    @property
    def store(self) -> ParticipantStore:
        return self._store

    def register(self) -> ParticipantRecord:
        return self._allocator.allocate_and_save()

    def get_participant(self, participant_id: str | None) -> ParticipantRecord:
        if not participant_id or not participant_id.strip():
            raise NotFoundError(message="Invalid participant id")
        record = self._store.get(participant_id)
        if record is None:
            raise NotFoundError(
                message="Participant not found. Please check that the QR code is valid.",
                details={"id": participant_id},
            )
        return record

    def usage_stats(self) -> UsageStats:
        settings = self._allocator.settings
        records = self._store.list_all()
        capacity = settings.total_capacity

        team_stats = []
        for team_number in range(1, settings.team_count + 1):
            count = sum(1 for r in records if r.team_number == team_number)
            team_stats.append(
                TeamStats(
                    team_number=team_number,
                    current_count=count,
                    max_count=settings.members_per_team,
                    available=settings.members_per_team - count,
                )
            )

        return UsageStats(
            total_assigned=len(records),
            total_capacity=capacity,
            available_slots=capacity - len(records),
            completion_rate=round(len(records) / capacity * 100, 1),
            team_stats=team_stats,
        )

    def generate_test_participant(self) -> ParticipantRecord:
        record = self.register()
        logger.info("Generated test participant %s", record.id)
        return record

    def clear_all(self) -> int:
        removed = self._store.count()
        self._store.clear()
        logger.warning("Cleared all participant data (%d records)", removed)
        return removed

    def export_filename(self, today: date | None = None) -> str:
        day = today or date.today()
        return f"{self._store.key}-{day.isoformat()}.json"

    def export_document(self) -> str:
        return self._store.export_json()
