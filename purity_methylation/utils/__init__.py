"""
Error classes and parameter validation for informative-site selection.

Result helpers live in ``purity_methylation.utils.helpers``.
"""

from .exceptions import (
    PurityMethylationError,
    InvalidInputError,
    DimensionMismatchError,
    InvalidParameterError,
    AnnotationSchemaError,
    AnnotationNotFoundError
)
from .validation import (
    SUPPORTED_PLATFORMS,
    SUPPORTED_GENOMES,
    validate_max_sites,
    validate_min_distance,
    validate_range
)

__all__ = [
    'PurityMethylationError',
    'InvalidInputError',
    'DimensionMismatchError',
    'InvalidParameterError',
    'AnnotationSchemaError',
    'AnnotationNotFoundError',
    'SUPPORTED_PLATFORMS',
    'SUPPORTED_GENOMES',
    'validate_max_sites',
    'validate_min_distance',
    'validate_range'
]
