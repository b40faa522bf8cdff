"""BunkApp: lecture attendance calculator."""

__version__ = "1.0.0"
