"""Admin routes (controllers). No business logic here."""

from __future__ import annotations

from dataclasses import asdict

from flask import Blueprint, current_app

from party_draw.extensions import get_event_settings, get_participant_service
from party_draw.schemas.participant import ParticipantSchema, UsageStatsSchema
from party_draw.utils.responses import attachment, ok

admin_bp = Blueprint("admin", __name__)

_participant_schema = ParticipantSchema()
_stats_schema = UsageStatsSchema()


@admin_bp.get("/stats")
def usage_stats():
    """Per-team occupancy plus event settings."""

    stats = get_participant_service().usage_stats()
    settings = get_event_settings()
    return ok(
        {
            **_stats_schema.dump(asdict(stats)),
            "settings": {
                "team_count": settings.team_count,
                "members_per_team": settings.members_per_team,
                "max_lottery_number": settings.total_capacity,
                "title": current_app.config["APP_TITLE"],
                "storage_backend": current_app.config["STORAGE_BACKEND"],
                "storage_key": current_app.config["STORAGE_KEY"],
            },
        }
    )


@admin_bp.post("/test-participant")
def generate_test_participant():
    record = get_participant_service().generate_test_participant()
    return ok(_participant_schema.dump(record), status_code=201)


@admin_bp.delete("/participants")
def clear_participants():
    removed = get_participant_service().clear_all()
    return ok({"cleared": removed})


@admin_bp.get("/export")
def export_participants():
    """Download the whole participant store as JSON."""

    service = get_participant_service()
    return attachment(service.export_document(), service.export_filename())
