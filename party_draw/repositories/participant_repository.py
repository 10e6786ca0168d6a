"""Repository layer for participant persistence.

All participants live in one JSON object (id -> record) stored under a single
key. Every write rewrites the whole blob.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from marshmallow import ValidationError as MarshmallowValidationError

from party_draw.errors import StorageCorruptError
from party_draw.models.participant import ParticipantRecord
from party_draw.repositories.storage import KeyValueStorage
from party_draw.schemas.participant import ParticipantSchema

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "year-end-party-participants"

_schema = ParticipantSchema()


class ParticipantStore:
    """Flat id -> ParticipantRecord mapping on top of a key-value backend."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def _decode(self, raw: str) -> dict[str, ParticipantRecord]:
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise StorageCorruptError(details=str(exc) or type(exc).__name__) from exc
        if not isinstance(data, dict):
            raise StorageCorruptError(details=f"expected a JSON object, got {type(data).__name__}")

        records: dict[str, ParticipantRecord] = {}
        for participant_id, payload in data.items():
            try:
                record = _schema.load(payload)
            except MarshmallowValidationError as exc:
                # Drop only the unreadable entry.
                logger.warning("Skipping unreadable participant entry %r: %s", participant_id, exc)
                continue
            records[record.id] = record
        return records

    def _load(self) -> dict[str, ParticipantRecord]:
        raw = self._storage.get_item(self._key)
        if not raw:
            return {}
        try:
            return self._decode(raw)
        except StorageCorruptError as exc:
            logger.warning("Participant storage under %r is corrupt, treating as empty: %s", self._key, exc.details)
            return {}

    def _dump(self, records: dict[str, ParticipantRecord]) -> dict[str, Any]:
        return {participant_id: _schema.dump(record) for participant_id, record in records.items()}

    def put(self, record: ParticipantRecord) -> ParticipantRecord:
        records = self._load()
        records[record.id] = record
        self._storage.set_item(self._key, json.dumps(self._dump(records), ensure_ascii=False))
        return record

    def get(self, participant_id: str) -> ParticipantRecord | None:
        return self._load().get(participant_id)

    def list_all(self) -> list[ParticipantRecord]:
        return list(self._load().values())

    def count(self) -> int:
        return len(self._load())

    def clear(self) -> None:
        self._storage.remove_item(self._key)

    def export_json(self, indent: int = 2) -> str:
        """Full store as a pretty-printed JSON document."""

        return json.dumps(self._dump(self._load()), ensure_ascii=False, indent=indent)
