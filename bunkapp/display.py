"""Status labels and colours for rendering an evaluation result."""

from bunkapp.models import AttendanceStatus, EvaluationResult, ResultView

STATUS_COLORS = {
    AttendanceStatus.PERFECT: "green",
    AttendanceStatus.SAFE: "green",
    AttendanceStatus.WARNING: "yellow",
    AttendanceStatus.CRITICAL: "red",
    AttendanceStatus.AWAITING: "muted",
}

STATUS_LABELS = {
    AttendanceStatus.PERFECT: "Perfect Attendance",
    AttendanceStatus.SAFE: "Safe Zone",
    AttendanceStatus.WARNING: "Caution Zone",
    AttendanceStatus.CRITICAL: "Critical Zone",
    AttendanceStatus.AWAITING: "Awaiting Input",
}


def get_status_color(status: AttendanceStatus) -> str:
    """Get the display colour for a status."""
    return STATUS_COLORS.get(status, "muted")


def is_at_threshold(result: EvaluationResult) -> bool:
    """True when a result meeting the criteria leaves nothing to bunk."""
    if result.status not in (AttendanceStatus.SAFE, AttendanceStatus.WARNING):
        return False
    return result.can_bunk == 0 and result.must_attend == 0


def get_status_label(result: EvaluationResult) -> str:
    """Badge label for the result's status."""
    return STATUS_LABELS.get(result.status, STATUS_LABELS[AttendanceStatus.AWAITING])


def build_result_view(result: EvaluationResult) -> ResultView:
    """
    Prepare an evaluation result for display.

    The at-threshold tile is a separate flag next to the status badge; the
    badge label always reflects the status.
    """
    return ResultView(
        attendance_display=f"{result.current_attendance:.1f}%",
        status=result.status,
        status_label=get_status_label(result),
        status_color=get_status_color(result.status),
        is_at_threshold=is_at_threshold(result),
        can_bunk=result.can_bunk,
        must_attend=result.must_attend,
        message=result.message,
    )
