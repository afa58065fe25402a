"""Daily record logging service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from cali.domain.records import DailyRecord, LogEntry, NutritionCategory

DATE_FORMAT = "%Y-%m-%d"


class RecordStore(Protocol):
    """Persistence interface for daily records."""

    def load(self) -> list[DailyRecord]:
        """Return every stored record, or an empty list when none exist."""

    def save(self, records: list[DailyRecord]) -> None:
        """Replace the stored collection with the given records."""


@dataclass
class NutritionLogService:
    """Service that accumulates nutrition values into today's record."""

    clock: Callable[[], date] = field(default=date.today)

    def today_key(self) -> str:
        """Return today's date in the stored key format."""
        return self.clock().strftime(DATE_FORMAT)

    def find_or_create_today(self, records: list[DailyRecord]) -> DailyRecord:
        """Return today's record, appending a zeroed one when missing."""
        today = self.today_key()
        for record in records:
            if record.date == today:
                return record
        record = DailyRecord.empty(today)
        records.append(record)
        return record

    def apply(
        self, record: DailyRecord, category: NutritionCategory, amount: float
    ) -> float:
        """Add an amount to a category accumulator and return the new total."""
        if category is NutritionCategory.CALORIES:
            record.calories += amount
        elif category is NutritionCategory.WATER:
            record.water += amount
        elif category is NutritionCategory.PROTEIN:
            record.protein += amount
        elif category is NutritionCategory.CARBS:
            record.carbs += amount
        else:
            record.fat += amount
        return record.total(category)

    def log(
        self, records: list[DailyRecord], category: NutritionCategory, amount: float
    ) -> LogEntry:
        """Log an amount for today and describe the result."""
        record = self.find_or_create_today(records)
        total = self.apply(record, category, amount)
        return LogEntry(
            date=record.date, category=category, amount=amount, total=total
        )

    def reset_today(self, records: list[DailyRecord]) -> bool:
        """Zero today's record. Return False when there is nothing to reset."""
        today = self.today_key()
        for index, record in enumerate(records):
            if record.date == today:
                records[index] = DailyRecord.empty(today)
                return True
        return False
