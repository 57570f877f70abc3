"""
Purity Methylation Package

Selection of informative CpG sites from Illumina methylation arrays, used to
estimate the purity of tumor samples.
"""

__version__ = "0.1.0"
__author__ = "Purity Methylation Team"

# Core module imports
from .data.annotation import AnnotationProvider, TableAnnotationProvider, normalize_annotation
from .data.loaders import create_sample_data
from .features.clustering import cluster_reduction
from .features.proximity import is_too_close
from .features.selection import (
    InformativeSiteSelector,
    SiteSelectionConfig,
    select_informative_sites
)
from .utils.exceptions import (
    PurityMethylationError,
    InvalidInputError,
    DimensionMismatchError,
    InvalidParameterError,
    AnnotationSchemaError,
    AnnotationNotFoundError
)
from .utils.helpers import summarize_informative_sites

__all__ = [
    'AnnotationProvider',
    'TableAnnotationProvider',
    'normalize_annotation',
    'create_sample_data',
    'cluster_reduction',
    'is_too_close',
    'InformativeSiteSelector',
    'SiteSelectionConfig',
    'select_informative_sites',
    'PurityMethylationError',
    'InvalidInputError',
    'DimensionMismatchError',
    'InvalidParameterError',
    'AnnotationSchemaError',
    'AnnotationNotFoundError',
    'summarize_informative_sites'
]
