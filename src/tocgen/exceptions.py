"""Custom exceptions for tocgen."""


class TocgenError(Exception):
    """Base exception for tocgen operations."""


class TocFormatError(TocgenError, ValueError):
    """Outline JSON is unparseable or a node lacks a required field."""


class InvariantViolation(TocgenError, AssertionError):
    """Internal traversal bug, such as a negative nesting depth."""
