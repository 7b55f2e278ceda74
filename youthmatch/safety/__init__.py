"""
Safety Validation Module

User-independent compliance checks over program records.
"""

from .validator import validate, validate_all, safety_status, hide_flagged

__all__ = [
    "validate",
    "validate_all",
    "safety_status",
    "hide_flagged",
]
