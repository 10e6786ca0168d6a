"""Per-app wiring of storage, store, allocator and services."""

from __future__ import annotations

from flask import Flask, current_app

from party_draw.config import EventSettings
from party_draw.repositories.participant_repository import ParticipantStore
from party_draw.repositories.storage import KeyValueStorage, build_storage
from party_draw.services.allocation_service import Allocator
from party_draw.services.participant_service import ParticipantService


def init_services(app: Flask, storage: KeyValueStorage | None = None) -> ParticipantService:
    """Build the participant store and services once for this app."""

    if storage is None:
        session_factory = None
        if str(app.config.get("STORAGE_BACKEND", "sql")).lower().strip() == "sql":
            from party_draw.db import init_db

            session_factory = init_db(app)
        storage = build_storage(app.config, session_factory=session_factory)

    settings = EventSettings.from_mapping(app.config)
    store = ParticipantStore(storage, key=str(app.config["STORAGE_KEY"]))
    service = ParticipantService(store, Allocator(store, settings))

    app.extensions["event_settings"] = settings
    app.extensions["participant_store"] = store
    app.extensions["participant_service"] = service
    return service


def get_participant_service() -> ParticipantService:
    service: ParticipantService | None = current_app.extensions.get("participant_service")
    if service is None:
        raise RuntimeError("Participant services not initialized")
    return service


def get_event_settings() -> EventSettings:
    return current_app.extensions["event_settings"]
