"""JSON file repository for daily records."""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from cali.domain.records import DailyRecord
from cali.services.records import RecordStore

_logger = logging.getLogger(__name__)


class StoredRecord(BaseModel):
    """On-disk shape of a daily record."""

    model_config = ConfigDict(extra="ignore", ser_json_inf_nan="constants")

    date: str
    calories: float = 0.0
    water: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    @classmethod
    def from_record(cls, record: DailyRecord) -> "StoredRecord":
        """Build the stored shape from a domain record."""
        return cls(
            date=record.date,
            calories=record.calories,
            water=record.water,
            protein=record.protein,
            carbs=record.carbs,
            fat=record.fat,
        )

    def to_record(self) -> DailyRecord:
        """Convert back to a domain record."""
        return DailyRecord(
            date=self.date,
            calories=self.calories,
            water=self.water,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


_RECORDS = TypeAdapter(
    list[StoredRecord], config=ConfigDict(ser_json_inf_nan="constants")
)


@dataclass
class JsonRecordStore(RecordStore):
    """Stores the full record collection in a single JSON file."""

    path: Path

    def load(self) -> list[DailyRecord]:
        """Return stored records; unreadable content yields an empty list."""
        self._ensure_directory()
        if not self.path.exists():
            return []
        payload = self.path.read_bytes()
        try:
            stored = _RECORDS.validate_json(payload)
        except ValidationError:
            return []
        _logger.debug("Loaded records: path=%s count=%s", self.path, len(stored))
        return [entry.to_record() for entry in stored]

    def save(self, records: list[DailyRecord]) -> None:
        """Write all records to a temp file and swap it into place."""
        self._ensure_directory()
        payload = _RECORDS.dump_json(
            [StoredRecord.from_record(record) for record in records], indent=2
        )
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        _logger.debug("Saved records: path=%s count=%s", self.path, len(records))

    def _ensure_directory(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
