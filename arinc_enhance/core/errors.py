# -*- coding: utf-8 -*-
from typing import Optional


class EnhanceError(Exception):
    """Base error; line_number is filled in by the stream driver."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class DecodeFailure(EnhanceError):
    """Record bytes do not fit the expected shape."""


class MalformedCoordinate(EnhanceError, ValueError):
    """Latitude/longitude or bearing field could not be parsed."""


class IOFailure(EnhanceError):
    pass


class InternalConsistency(EnhanceError):
    pass


# ---------- recoverable, per localizer ----------
class LocalizerSkipped(EnhanceError):
    """Localizer is written through unmodified."""


class MissingApproachCorrelation(LocalizerSkipped):
    pass


class MissingFixPosition(LocalizerSkipped):
    pass


class LocalizerPositionError(LocalizerSkipped):
    pass
