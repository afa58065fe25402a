"""Tests for record reports."""

from cali.domain.records import DailyRecord, LogEntry, NutritionCategory
from cali.services.reports import (
    format_amount,
    format_history,
    format_logged,
    format_reset,
    format_summary,
)


def _record() -> DailyRecord:
    return DailyRecord(
        date="2024-01-15", calories=1800, water=64, protein=90, carbs=200, fat=60
    )


def test_format_summary_renders_five_lines() -> None:
    text = format_summary([_record()], "2024-01-15")

    assert text.plain == (
        "Nutrition Summary for 2024-01-15\n"
        "-------------------------\n"
        "Calories: 1800\n"
        "Water: 64.0 fl oz\n"
        "Protein: 90.0g\n"
        "Carbs: 200.0g\n"
        "Fat: 60.0g"
    )


def test_format_summary_rounds_to_one_decimal() -> None:
    record = DailyRecord(date="2024-01-15", calories=250.5, water=10.26, fat=3.04)

    plain = format_summary([record], "2024-01-15").plain

    assert "Calories: 250.5" in plain
    assert "Water: 10.3 fl oz" in plain
    assert "Fat: 3.0g" in plain


def test_format_summary_missing_date() -> None:
    records = [_record()]

    text = format_summary(records, "2023-12-31")

    assert text.plain == "No data found for 2023-12-31"
    assert records == [_record()]


def test_format_history_empty() -> None:
    assert format_history([]).plain == "No nutrition data found."


def test_format_history_sorts_newest_first() -> None:
    records = [
        DailyRecord(date="2024-01-10", calories=1500),
        DailyRecord(date="2024-01-15", calories=1800),
        DailyRecord(date="2023-12-31", calories=2100),
    ]

    plain = format_history(records).plain

    assert plain.startswith("All Nutrition Records\n===================\n\n")
    newest = plain.index("Date: 2024-01-15")
    middle = plain.index("Date: 2024-01-10")
    oldest = plain.index("Date: 2023-12-31")
    assert newest < middle < oldest
    assert plain.count("-------------------------") == 3
    assert "\n\nDate: 2024-01-10\n" in plain


def test_format_logged() -> None:
    entry = LogEntry(
        date="2024-01-15", category=NutritionCategory.WATER, amount=8, total=24.5
    )

    assert format_logged(entry).plain == (
        "Logged 8 fl oz of water. Total today: 24.5"
    )


def test_format_reset_messages() -> None:
    assert format_reset(True).plain == "Today's nutrition data has been reset."
    assert format_reset(False).plain == "No data for today to reset."


def test_format_amount_drops_trailing_zero() -> None:
    assert format_amount(800.0) == "800"
    assert format_amount(12.5) == "12.5"
    assert format_amount(-50) == "-50"
