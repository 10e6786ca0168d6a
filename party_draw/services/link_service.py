"""Participant links and the JSON payload embedded in QR codes."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from marshmallow import ValidationError as MarshmallowValidationError

from party_draw.models.participant import ParticipantRecord
from party_draw.schemas.participant import QRCodePayloadSchema

logger = logging.getLogger(__name__)

_payload_schema = QRCodePayloadSchema()


@dataclass(frozen=True)
class QRCodePayload:
    participant_id: str
    team_number: int
    lottery_number: int


def participant_url(base_url: str, participant_id: str) -> str:
    return f"{base_url.rstrip('/')}/participant/{participant_id}"


def encode_qr_payload(record: ParticipantRecord) -> str:
    payload = QRCodePayload(
        participant_id=record.id,
        team_number=record.team_number,
        lottery_number=record.lottery_number,
    )
    return json.dumps(_payload_schema.dump(payload), separators=(",", ":"))


def decode_qr_payload(text: str) -> QRCodePayload | None:
    """Parse a scanned QR payload. Returns None for anything malformed."""

    try:
        raw = json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.info("Failed to decode QR data: %s", exc)
        return None
    if not isinstance(raw, dict):
        return None
    if isinstance(raw.get("teamNumber"), bool) or isinstance(raw.get("lotteryNumber"), bool):
        return None

    try:
        data = _payload_schema.load(raw)
    except MarshmallowValidationError as exc:
        logger.info("Rejected QR data: %s", exc.messages)
        return None
    return QRCodePayload(**data)
