"""Shareable plain-text summary of an attendance result."""

from typing import Optional

from bunkapp.config import Settings, get_settings
from bunkapp.display import is_at_threshold
from bunkapp.models import AttendanceInput, AttendanceStatus, EvaluationResult


def format_number(value: float) -> str:
    """Render 75.0 as '75' and 75.5 as '75.5'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _lectures(count: int) -> str:
    return f"{count} more lecture{'s' if count > 1 else ''}"


def get_footer(settings: Optional[Settings] = None) -> str:
    """Attribution line appended to every summary."""
    settings = settings or get_settings()
    return f"Generated with {settings.app_name} - {settings.app_tagline}"


def generate_share_text(
    result: EvaluationResult,
    data: AttendanceInput,
    settings: Optional[Settings] = None
) -> str:
    """
    Generate a plain-text summary suitable for pasting into a chat.

    Args:
        result: Evaluation result to summarise
        data: Input the result was evaluated from
        settings: Settings providing the attribution footer

    Returns:
        Newline-joined summary, always ending with the attribution footer
    """
    criteria = format_number(data.attendance_criteria)
    lines = [
        "📊 Attendance Summary",
        f"- Current Attendance: {result.current_attendance:.1f}%",
        f"- Attendance Criteria: {criteria}%",
    ]

    if result.can_bunk > 0:
        lines.append(f"- You can bunk {_lectures(result.can_bunk)}.")

    if result.must_attend > 0:
        lines.append(f"- You must attend {_lectures(result.must_attend)} to reach {criteria}%.")

    if result.status == AttendanceStatus.PERFECT:
        lines.append("- Status: Perfect Attendance 🎉")
    elif is_at_threshold(result):
        lines.append("- Status: At Threshold ⚖️")

    lines.extend(["", get_footer(settings)])

    return "\n".join(lines)
