"""
Annotation tables, beta-matrix helpers and synthetic data.
"""

from .annotation import (
    AnnotationProvider,
    TableAnnotationProvider,
    normalize_annotation,
    resolve_coordinate_column
)
from .preprocessing import (
    as_beta_matrix,
    check_beta_range,
    compute_beta_range,
    calculate_missing_rate
)
from .loaders import create_sample_data

__all__ = [
    'AnnotationProvider',
    'TableAnnotationProvider',
    'normalize_annotation',
    'resolve_coordinate_column',
    'as_beta_matrix',
    'check_beta_range',
    'compute_beta_range',
    'calculate_missing_rate',
    'create_sample_data'
]
