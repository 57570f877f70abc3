"""
Informative CpG site selection.

Key Components:
- InformativeSiteSelector: thresholds, ranks and thins candidate sites
- SiteSelectionConfig: default selection parameters
- cluster_reduction: greedy minimum-distance thinning of a ranked list
- is_too_close: proximity check used by the reduction

Example:
    >>> from purity_methylation.features import select_informative_sites
    >>> sites = select_informative_sites(tumor, auc, provider, platform="27k")
"""

from .proximity import Proximity, classify_proximity, is_too_close
from .clustering import cluster_reduction
from .selection import (
    InformativeSiteSelector,
    SiteSelectionConfig,
    select_informative_sites
)

__all__ = [
    'Proximity',
    'classify_proximity',
    'is_too_close',
    'cluster_reduction',
    'InformativeSiteSelector',
    'SiteSelectionConfig',
    'select_informative_sites'
]
