"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from cali.adapters.json_record_store import JsonRecordStore
from cali.config import Settings
from cali.services.records import NutritionLogService, RecordStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    record_store: RecordStore
    log_service: NutritionLogService


def build_container(
    settings: Settings | None = None, data_file: Path | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    record_store = JsonRecordStore(data_file or resolved_settings.data_file)
    return AppContainer(
        settings=resolved_settings,
        record_store=record_store,
        log_service=NutritionLogService(),
    )
