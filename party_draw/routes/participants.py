"""Participant routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from party_draw.errors import ValidationError
from party_draw.extensions import get_participant_service
from party_draw.models.participant import ParticipantRecord
from party_draw.schemas.participant import ParticipantSchema, QRCodePayloadSchema, QRDecodeRequestSchema
from party_draw.services.link_service import decode_qr_payload, encode_qr_payload, participant_url
from party_draw.utils.responses import ok

participants_bp = Blueprint("participants", __name__)

_participant_schema = ParticipantSchema()
_payload_schema = QRCodePayloadSchema()
_decode_request_schema = QRDecodeRequestSchema()


def _present(record: ParticipantRecord) -> dict:
    return {
        "participant": _participant_schema.dump(record),
        "url": participant_url(str(current_app.config["BASE_URL"]), record.id),
        "qr_payload": encode_qr_payload(record),
    }


@participants_bp.post("/api/participants")
def register_participant():
    """Assign a team and lottery number to a new participant."""

    record = get_participant_service().register()
    return ok(_present(record), status_code=201)


@participants_bp.get("/api/participants/<participant_id>")
def get_participant(participant_id: str):
    record = get_participant_service().get_participant(participant_id)
    return ok(_present(record))


@participants_bp.get("/participant/<participant_id>")
def participant_page(participant_id: str):
    """Target of the QR code link."""

    record = get_participant_service().get_participant(participant_id)
    return ok({**_present(record), "title": current_app.config["APP_TITLE"]})


@participants_bp.post("/api/qr/decode")
def decode_qr():
    payload = request.get_json(silent=True) or {}
    data = _decode_request_schema.load(payload)

    decoded = decode_qr_payload(str(data["payload"]))
    if decoded is None:
        raise ValidationError(message="Invalid QR code data")
    return ok(_payload_schema.dump(decoded))
