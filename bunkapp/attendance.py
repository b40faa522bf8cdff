"""Attendance calculations: current percentage, bunkable and required lectures."""

import math
from fractions import Fraction
from typing import Union

from bunkapp.models import AttendanceInput, AttendanceStatus, EvaluationResult

Number = Union[int, float]

# Percentage points above the criteria at which a student counts as safe
SAFE_MARGIN = 10

MESSAGE_EMPTY = "Enter your lecture details to see results"
MESSAGE_INVALID = "Please check your input values"
MESSAGE_PERFECT = "Perfect attendance! Impressive discipline."
MESSAGE_ON_TRACK = "On track! You can bunk responsibly."
MESSAGE_AT_THRESHOLD = "You're at the threshold. Attend carefully."
MESSAGE_BELOW = "Careful—you're below the threshold. Attend more lectures."


def _exact(value: Number) -> Fraction:
    """Exact rational value of a count or percentage (75.5 -> 151/2)."""
    if isinstance(value, float):
        return Fraction(str(value))
    return Fraction(value)


def _is_finite(*values: Number) -> bool:
    # Ints are always finite; math.isfinite overflows on very large ones
    return all(not isinstance(v, float) or math.isfinite(v) for v in values)


def _current_pct(attended: Number, total: Number) -> Fraction:
    return _exact(attended) * 100 / _exact(total)


def _bunk_count(attended: Number, total: Number, required_fraction: Fraction) -> int:
    """
    Largest n with attended / (total + n) >= required_fraction.

    Args:
        attended: Lectures attended
        total: Lectures held so far
        required_fraction: Required attendance as a fraction in (0, 1)

    Returns:
        Lectures that can be missed, never negative
    """
    n = (_exact(attended) - required_fraction * _exact(total)) / required_fraction
    return max(0, math.floor(n))


def _need_count(attended: Number, total: Number, required_fraction: Fraction) -> int:
    """
    Smallest n with (attended + n) / (total + n) >= required_fraction.

    Args:
        attended: Lectures attended
        total: Lectures held so far
        required_fraction: Required attendance as a fraction in [0, 1)

    Returns:
        Lectures that must be attended, never negative
    """
    n = (required_fraction * _exact(total) - _exact(attended)) / (1 - required_fraction)
    return max(0, math.ceil(n))


def _awaiting(message: str) -> EvaluationResult:
    return EvaluationResult(
        current_attendance=0.0,
        can_bunk=0,
        must_attend=0,
        status=AttendanceStatus.AWAITING,
        message=message,
    )


def evaluate(data: AttendanceInput) -> EvaluationResult:
    """
    Evaluate attendance against the required criteria.

    Never raises: an empty form and a contradictory form both produce an
    ``awaiting`` result, told apart only by the message.

    Args:
        data: Lecture counts and attendance criteria (0-100)

    Returns:
        EvaluationResult with the current percentage, status and the number
        of lectures the student can bunk or must attend
    """
    total = data.total_lectures
    attended = data.attended_lectures
    criteria = data.attendance_criteria

    if total == 0:
        return _awaiting(MESSAGE_EMPTY)

    if attended > total:
        return _awaiting(MESSAGE_INVALID)

    if (
        attended < 0
        or total < 0
        or not _is_finite(criteria)
        or criteria < 0
        or criteria > 100
    ):
        return _awaiting(MESSAGE_INVALID)

    current = _current_pct(attended, total)
    current_attendance = float(current)
    required_fraction = _exact(criteria) / 100

    # Compare counts, not the float percentage
    if attended == total:
        if criteria == 100:
            can_bunk = 0
        else:
            can_bunk = math.floor(_exact(total) * (1 - required_fraction))
        return EvaluationResult(
            current_attendance=current_attendance,
            can_bunk=can_bunk,
            must_attend=0,
            status=AttendanceStatus.PERFECT,
            message=MESSAGE_PERFECT,
        )

    if current >= _exact(criteria):
        can_bunk = 0
        # Zero criteria has no finite bound; 100 allows no misses
        if 0 < criteria < 100:
            can_bunk = _bunk_count(attended, total, required_fraction)

        if current >= _exact(criteria) + SAFE_MARGIN:
            status = AttendanceStatus.SAFE
        else:
            status = AttendanceStatus.WARNING

        return EvaluationResult(
            current_attendance=current_attendance,
            can_bunk=can_bunk,
            must_attend=0,
            status=status,
            message=MESSAGE_ON_TRACK if can_bunk > 0 else MESSAGE_AT_THRESHOLD,
        )

    # 100% is out of reach once a lecture has been missed
    must_attend = 0
    if criteria < 100:
        must_attend = _need_count(attended, total, required_fraction)

    return EvaluationResult(
        current_attendance=current_attendance,
        can_bunk=0,
        must_attend=must_attend,
        status=AttendanceStatus.CRITICAL,
        message=MESSAGE_BELOW,
    )


def percentage(attended: Number, total: Number) -> float:
    """
    Current attendance percentage.

    Args:
        attended: Lectures attended
        total: Lectures held so far

    Returns:
        Percentage (0-100), or 0 for invalid input
    """
    if not _is_finite(attended, total):
        return 0.0
    if total <= 0 or attended < 0 or attended > total:
        return 0.0
    return float(_current_pct(attended, total))


def bunkable(attended: Number, total: Number, required_pct: Number) -> int:
    """
    Lectures that can be missed while keeping attendance at required_pct.

    Args:
        attended: Lectures attended
        total: Lectures held so far
        required_pct: Required attendance percentage (0-100)

    Returns:
        Number of lectures that can be bunked, 0 for invalid input or when
        already below the requirement
    """
    if not _is_finite(attended, total, required_pct):
        return 0
    if total <= 0 or required_pct >= 100:
        return 0
    if attended < 0 or required_pct < 0 or attended > total:
        return 0
    # Zero criteria has no finite bound
    if required_pct == 0:
        return 0

    if _current_pct(attended, total) < _exact(required_pct):
        return 0

    return _bunk_count(attended, total, _exact(required_pct) / 100)


def required(attended: Number, total: Number, required_pct: Number) -> int:
    """
    Consecutive lectures that must be attended to reach required_pct.

    Args:
        attended: Lectures attended
        total: Lectures held so far
        required_pct: Required attendance percentage (0-100)

    Returns:
        Number of lectures to attend, 0 for invalid input, when the
        requirement is already met, or when it can no longer be reached
    """
    if not _is_finite(attended, total, required_pct):
        return 0
    if total <= 0 or required_pct <= 0 or required_pct > 100:
        return 0
    if attended < 0 or attended > total:
        return 0

    if _current_pct(attended, total) >= _exact(required_pct):
        return 0

    # 100% is out of reach once a lecture has been missed
    if required_pct == 100 and attended < total:
        return 0

    return _need_count(attended, total, _exact(required_pct) / 100)
