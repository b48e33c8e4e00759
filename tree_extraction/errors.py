#!/usr/bin/env python
"""
Extraction Errors Module - The closed set of ways an extraction run can fail

Every pipeline stage returns a ``(value, error)`` pair, where ``error`` is either
None or an ExtractionError carrying one of the ErrorKind values below.
"""

import enum
from collections import namedtuple


class ErrorKind(enum.Enum):
    """Kinds of failure an extraction run can report."""

    USAGE = "usage error"
    PARSE = "parse error"
    NO_TREES = "no trees found"
    IO = "I/O error"


class ExtractionError(namedtuple('ExtractionError', ['kind', 'message'])):
    """A failure reported by one of the extraction stages."""

    __slots__ = ()

    def __str__(self):
        return self.message
