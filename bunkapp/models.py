"""Data models for the BunkApp attendance calculator."""

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CRITERIA = 75.0


class AttendanceStatus(str, Enum):
    """Outcome of an attendance evaluation."""
    AWAITING = "awaiting"
    PERFECT = "perfect"
    SAFE = "safe"
    WARNING = "warning"
    CRITICAL = "critical"


class AttendanceInput(BaseModel):
    """
    Lecture counts and the required attendance percentage.

    Ranges are not enforced here; the evaluator maps out-of-range values
    to an ``awaiting`` result.
    """
    total_lectures: int
    attended_lectures: int
    attendance_criteria: float = DEFAULT_CRITERIA


class EvaluationResult(BaseModel):
    """Attendance evaluation result."""
    model_config = ConfigDict(frozen=True)

    current_attendance: float
    can_bunk: int
    must_attend: int
    status: AttendanceStatus
    message: str


class StoredInputs(BaseModel):
    """Raw form snapshot, kept exactly as typed by the student."""
    total_lectures: str = ""
    attended_lectures: str = ""
    attendance_criteria: List[float] = Field(default_factory=lambda: [DEFAULT_CRITERIA])


class ResultView(BaseModel):
    """Evaluation result prepared for display."""
    attendance_display: str
    status: AttendanceStatus
    status_label: str
    status_color: str
    is_at_threshold: bool = False
    can_bunk: int
    must_attend: int
    message: str


class ShareTextResponse(BaseModel):
    """Shareable plain-text summary."""
    text: str
    result: EvaluationResult


class HelperValue(BaseModel):
    """Single figure returned by the standalone helper endpoints."""
    value: Union[int, float]
