"""
Gearphase Calculator - Validation, reports and the browser bridge.

Builds on the pure functions in gearphase.core: collects structured findings
about a gear pair and renders alignment reports for people and programs.

Example:
    >>> from gearphase.core import get_alignment_info
    >>> from gearphase.calculator import validate_mesh, to_markdown
    >>>
    >>> report = get_alignment_info(20, 10, 0.0, 0.0, 0.0)
    >>> validation = validate_mesh(20, 10, 0.0, 0.0, 0.0)
    >>> validation.valid
    False
    >>> print(to_markdown(report, validation))
"""

from .validation import (
    validate_mesh,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

from .js_bridge import calculate


__all__ = [
    # Validation
    "validate_mesh",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",

    # Browser bridge
    "calculate",
]
