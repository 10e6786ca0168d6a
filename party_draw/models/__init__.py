"""Domain and ORM models."""

from party_draw.models.participant import ParticipantRecord
from party_draw.models.storage_entry import StorageEntry

__all__ = ["ParticipantRecord", "StorageEntry"]
