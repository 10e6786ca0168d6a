"""Team and lottery number allocation."""

from __future__ import annotations

import logging
import random
import uuid
from collections import Counter
from collections.abc import Callable
from datetime import datetime, timezone

from party_draw.config import EventSettings
from party_draw.errors import CapacityExhaustedError, NumberSpaceExhaustedError
from party_draw.models.participant import ParticipantRecord
from party_draw.repositories.participant_repository import ParticipantStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class Allocator:
    """Hand out a team slot and an event-wide unique lottery number.

    Teams are capped at ``members_per_team``; lottery numbers are drawn from
    ``1..team_count * members_per_team`` and are unique across all teams.
    """

    def __init__(
        self,
        store: ParticipantStore,
        settings: EventSettings,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._store = store
        self._settings = settings
        self._rng = rng or random.Random()
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id

    @property
    def settings(self) -> EventSettings:
        return self._settings

    def eligible_teams(self, records: list[ParticipantRecord]) -> list[int]:
        occupancy = Counter(r.team_number for r in records)
        first, last = self._settings.team_range
        return [
            team
            for team in range(first, last + 1)
            if occupancy[team] < self._settings.members_per_team
        ]

    def available_numbers(self, records: list[ParticipantRecord]) -> list[int]:
        used = {r.lottery_number for r in records}
        low, high = self._settings.lottery_range
        return [n for n in range(low, high + 1) if n not in used]

    def allocate(self) -> ParticipantRecord:
        """Pick a team and a lottery number. Nothing is persisted."""

        records = self._store.list_all()
        capacity = self._settings.total_capacity
        if len(records) >= capacity:
            logger.warning("Allocation refused: %d/%d seats taken", len(records), capacity)
            raise CapacityExhaustedError(details={"total_assigned": len(records), "total_capacity": capacity})

        teams = self.eligible_teams(records)
        if not teams:
            logger.warning("Allocation refused: every team is full")
            raise CapacityExhaustedError(details={"total_assigned": len(records), "total_capacity": capacity})
        team_number = self._rng.choice(teams)

        numbers = self.available_numbers(records)
        if not numbers:
            logger.warning("Allocation refused: no lottery number left in %s", self._settings.lottery_range)
            raise NumberSpaceExhaustedError(details={"lottery_range": list(self._settings.lottery_range)})
        lottery_number = self._rng.choice(numbers)

        return ParticipantRecord(
            id=self._id_factory(),
            team_number=team_number,
            lottery_number=lottery_number,
            created_at=self._clock(),
        )

    def allocate_and_save(self) -> ParticipantRecord:
        record = self.allocate()
        self._store.put(record)
        logger.info(
            "Allocated participant %s to team %d with lottery number %d",
            record.id,
            record.team_number,
            record.lottery_number,
        )
        return record
