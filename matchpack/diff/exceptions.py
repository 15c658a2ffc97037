"""Diff subsystem exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from matchpack.core.exceptions import MatchError

if TYPE_CHECKING:
    from matchpack.diff.models import Difference


class DiffConfigError(MatchError, ValueError):
    """Invalid comparison policy combination or mode value."""


class JsonMismatchError(MatchError, AssertionError):
    """Raised by assertion helpers when the compared values differ."""

    def __init__(self, message: str, differences: Sequence["Difference"]) -> None:
        self.differences = list(differences)
        super().__init__(message)
