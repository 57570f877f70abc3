"""
Exception classes for informative-site selection.

Every error raised by the package derives from PurityMethylationError, and
also from the builtin the caller would otherwise expect (ValueError or
LookupError), so existing ``except ValueError`` handlers keep working.
"""


class PurityMethylationError(Exception):
    """Base class for all package errors."""


class InvalidInputError(PurityMethylationError, ValueError):
    """Beta values or AUC scores are non-numeric or outside [0, 1]."""


class DimensionMismatchError(PurityMethylationError, ValueError):
    """Beta matrix, AUC vector and annotation table disagree on row count."""


class InvalidParameterError(PurityMethylationError, ValueError):
    """A configuration parameter is malformed."""


class AnnotationSchemaError(PurityMethylationError, ValueError):
    """An annotation table lacks a chromosome or coordinate column."""


class AnnotationNotFoundError(PurityMethylationError, LookupError):
    """No annotation table is available for a platform/genome pair."""
