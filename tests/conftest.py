"""Shared test fixtures."""

import io
from dataclasses import dataclass, field, replace
from datetime import date
from pathlib import Path

import pytest
from rich.console import Console

from cali.adapters.json_record_store import JsonRecordStore
from cali.config import Settings
from cali.containers import AppContainer
from cali.domain.records import DailyRecord
from cali.services.records import NutritionLogService, RecordStore

TODAY = date(2024, 1, 15)
TODAY_KEY = "2024-01-15"


@dataclass
class InMemoryRecordStore(RecordStore):
    """In-memory record store for tests."""

    records: list[DailyRecord] = field(default_factory=list)
    save_count: int = 0

    def load(self) -> list[DailyRecord]:
        return [replace(record) for record in self.records]

    def save(self, records: list[DailyRecord]) -> None:
        self.records = [replace(record) for record in records]
        self.save_count += 1


@dataclass
class FailingRecordStore(RecordStore):
    """Record store whose writes always fail."""

    def load(self) -> list[DailyRecord]:
        return []

    def save(self, records: list[DailyRecord]) -> None:
        raise PermissionError(13, "Permission denied", "cali_data.json")


def make_console() -> Console:
    return Console(file=io.StringIO(), color_system=None, width=120)


def console_output(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def log_service() -> NutritionLogService:
    return NutritionLogService(clock=lambda: TODAY)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def memory_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def container(
    settings: Settings, log_service: NutritionLogService
) -> AppContainer:
    return AppContainer(
        settings=settings,
        record_store=JsonRecordStore(settings.data_file),
        log_service=log_service,
    )
