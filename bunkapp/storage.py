"""Key-value JSON store holding the last form inputs."""

import json
import logging
import os
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from bunkapp.exceptions import StorageError
from bunkapp.models import DEFAULT_CRITERIA, AttendanceInput, StoredInputs

logger = logging.getLogger(__name__)

INPUTS_KEY = "bunkapp-inputs"

_LEADING_INT = re.compile(r'^\s*([+-]?[0-9]+)')


def parse_count(value: Optional[str]) -> int:
    """
    Parse a lecture count the way the input form does.

    Leading digits are used ("12abc" -> 12); anything unparseable is 0.
    """
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


def to_attendance_input(
    snapshot: StoredInputs,
    default_criteria: float = DEFAULT_CRITERIA
) -> AttendanceInput:
    """Convert a raw form snapshot into evaluator input."""
    criteria = snapshot.attendance_criteria[0] if snapshot.attendance_criteria else 0
    return AttendanceInput(
        total_lectures=parse_count(snapshot.total_lectures),
        attended_lectures=parse_count(snapshot.attended_lectures),
        attendance_criteria=criteria or default_criteria,
    )


class InputStore:
    """
    Best-effort persistence of the last input snapshot.

    The file is a flat JSON object; the snapshot lives under ``INPUTS_KEY``
    and every save overwrites it.
    """

    def __init__(self, path: str, default_criteria: float = DEFAULT_CRITERIA):
        self.path = path
        self.default_criteria = default_criteria

    def default(self) -> StoredInputs:
        return StoredInputs(attendance_criteria=[self.default_criteria])

    def _read_all(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring non-object storage file %s", self.path)
            return {}
        return data

    def load(self) -> StoredInputs:
        """Return the stored snapshot, or the default when none is usable."""
        raw = self._read_all().get(INPUTS_KEY)
        if raw is None:
            return self.default()
        try:
            return StoredInputs.model_validate(raw)
        except ValidationError as e:
            logger.warning("Discarding malformed snapshot under %s: %s", INPUTS_KEY, e)
            return self.default()

    def save(self, snapshot: StoredInputs) -> StoredInputs:
        """
        Store the snapshot, replacing any previous one.

        Raises:
            StorageError: If the file cannot be written
        """
        data = self._read_all()
        data[INPUTS_KEY] = snapshot.model_dump()
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=4)
        except OSError as e:
            raise StorageError(f"Failed to save inputs: {e}", path=self.path) from e

        logger.debug("Saved inputs to %s", self.path)
        return snapshot

    def load_input(self) -> AttendanceInput:
        """Stored snapshot converted into evaluator input."""
        return to_attendance_input(self.load(), self.default_criteria)
