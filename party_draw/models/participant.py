"""Participant record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ParticipantRecord:
    """Links a participant id to its team and lottery number.

    Created once on allocation and never mutated afterwards.
    """

    id: str
    team_number: int
    lottery_number: int
    created_at: datetime
