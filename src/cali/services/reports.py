"""Text reports for daily nutrition records."""

from rich.text import Text

from cali.domain.records import DailyRecord, LogEntry, NutritionCategory

RULE = "-------------------------"
HISTORY_RULE = "==================="


def format_amount(value: float) -> str:
    """Format a number without a trailing ``.0`` for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _category_value(record: DailyRecord, category: NutritionCategory) -> str:
    value = record.total(category)
    if category is NutritionCategory.CALORIES:
        return format_amount(value)
    if category is NutritionCategory.WATER:
        return f"{value:.1f} fl oz"
    return f"{value:.1f}g"


def _append_record_lines(text: Text, record: DailyRecord) -> None:
    text.append(RULE, style="bold")
    for category in NutritionCategory:
        info = category.value
        text.append("\n")
        text.append(info.label, style=info.color)
        text.append(": ")
        text.append(_category_value(record, category), style=f"bold {info.color}")


def format_summary(records: list[DailyRecord], date: str) -> Text:
    """Render the record for a date, or a notice when there is none."""
    record = next((entry for entry in records if entry.date == date), None)
    if record is None:
        return Text(f"No data found for {date}")
    text = Text()
    text.append(f"Nutrition Summary for {record.date}\n", style="bold")
    _append_record_lines(text, record)
    return text


def format_history(records: list[DailyRecord]) -> Text:
    """Render every record, newest date first."""
    if not records:
        return Text("No nutrition data found.", style="bold")
    text = Text()
    text.append("All Nutrition Records\n", style="bold")
    text.append(HISTORY_RULE, style="bold")
    for record in sorted(records, key=lambda entry: entry.date, reverse=True):
        text.append("\n\n")
        text.append(f"Date: {record.date}\n", style="bold")
        _append_record_lines(text, record)
    return text


def format_logged(entry: LogEntry) -> Text:
    """Render the confirmation line for a logged amount."""
    color = entry.category.value.color
    return Text.assemble(
        ("Logged ", color),
        (format_amount(entry.amount), f"bold {color}"),
        (f" {entry.category.value.unit}. Total today: ", color),
        (format_amount(entry.total), f"bold {color}"),
    )


def format_reset(reset: bool) -> Text:
    """Render the outcome of a reset."""
    if reset:
        return Text("Today's nutrition data has been reset.", style="bold")
    return Text("No data for today to reset.", style="bold")
