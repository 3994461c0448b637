"""Custom exceptions for the goplex formula library."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from goplex.validation import CaseResult


class GoplexError(Exception):
    """Base exception for goplex errors."""


class ConfigurationError(GoplexError):
    """Raised when a reference-check or logging configuration is invalid."""


class UnknownConstantError(GoplexError, KeyError):
    """Raised when a constant name is not part of the constants table."""


class ReferenceMismatchError(GoplexError):
    """Raised when formula outputs drift from their reference values.

    Args:
        failures: Results of the reference cases that did not pass.
    """

    def __init__(self, failures: Sequence[CaseResult]) -> None:
        """Store failing results and build a readable message.

        Args:
            failures: Results of the reference cases that did not pass.
        """
        self.failures: list[CaseResult] = list(failures)
        names = ", ".join(result.name for result in self.failures)
        super().__init__(f"Reference mismatch in: {names}")
