"""Marshmallow schemas for participant records."""

from __future__ import annotations

from datetime import timezone

from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from party_draw.models.participant import ParticipantRecord


class ParticipantSchema(Schema):
    """(De)serialize ParticipantRecord in its persisted camelCase form."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Str(required=True, validate=validate.Length(min=1))
    team_number = fields.Int(required=True, data_key="teamNumber", strict=True, validate=validate.Range(min=1))
    lottery_number = fields.Int(required=True, data_key="lotteryNumber", strict=True, validate=validate.Range(min=1))
    created_at = fields.AwareDateTime(required=True, data_key="createdAt", default_timezone=timezone.utc)

    @post_load
    def _make_record(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return ParticipantRecord(**data)


class QRCodePayloadSchema(Schema):
    """Validate the JSON embedded in a participant QR code."""

    class Meta:
        unknown = EXCLUDE

    participant_id = fields.Str(required=True, data_key="participantId", validate=validate.Length(min=1))
    team_number = fields.Int(required=True, data_key="teamNumber", strict=True, validate=validate.Range(min=1))
    lottery_number = fields.Int(required=True, data_key="lotteryNumber", strict=True, validate=validate.Range(min=1))


class QRDecodeRequestSchema(Schema):
    payload = fields.Str(required=True)


class TeamStatsSchema(Schema):
    team_number = fields.Int()
    current_count = fields.Int()
    max_count = fields.Int()
    available = fields.Int()


class UsageStatsSchema(Schema):
    total_assigned = fields.Int()
    total_capacity = fields.Int()
    available_slots = fields.Int()
    completion_rate = fields.Float()
    team_stats = fields.List(fields.Nested(TeamStatsSchema))
