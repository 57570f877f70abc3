"""
Informative CpG site selection for tumor purity estimation.

Informative sites are CpG probes whose methylation separates tumor from
normal tissue. They fall into two groups:

- hyper-methylated: high AUC, low minimum and high maximum beta in tumors
- hypo-methylated: low AUC, low minimum and high maximum beta in tumors

Each group is ranked by AUC and thinned with greedy cluster reduction so no
two kept sites on one chromosome are closer than ``min_distance`` base pairs.
Half of ``max_sites`` is taken from each group.

Example:
    >>> from purity_methylation.data import TableAnnotationProvider
    >>> from purity_methylation.features import InformativeSiteSelector
    >>>
    >>> provider = TableAnnotationProvider({("450k", "hg19"): illumina450k_hg19})
    >>> selector = InformativeSiteSelector(provider)
    >>> sites = selector.select(tumor_betas, auc, max_sites=20)
    >>> sites["hyper"][:3]
    [10452, 88213, 3021]
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..data.annotation import AnnotationProvider, normalize_annotation
from ..data.preprocessing import (
    as_beta_matrix,
    as_score_vector,
    calculate_missing_rate,
    check_beta_range,
    compute_beta_range,
)
from ..utils.exceptions import DimensionMismatchError, InvalidParameterError
from ..utils.validation import (
    SUPPORTED_GENOMES,
    SUPPORTED_PLATFORMS,
    validate_choice,
    validate_max_sites,
    validate_min_distance,
    validate_range,
)
from .clustering import cluster_reduction

logger = logging.getLogger(__name__)

ProviderLike = Union[AnnotationProvider, Callable[[str, str], pd.DataFrame]]

HYPER = "hyper"
HYPO = "hypo"


@dataclass
class SiteSelectionConfig:
    """
    Default parameters for informative-site selection.

    Attributes:
        max_sites: Total number of sites to retrieve, half hyper- and half
            hypo-methylated. Must be even.
        min_distance: Minimum spacing in base pairs between two selected
            sites on the same chromosome.
        hyper_range: ``(low, high)``; a hyper-methylated site needs a minimum
            beta below ``low`` and a maximum beta above ``high``.
        hypo_range: Same as ``hyper_range`` for hypo-methylated sites.
        hyper_auc_threshold: AUC a hyper-methylated site must exceed.
        hypo_auc_threshold: AUC a hypo-methylated site must stay below.
        platform: Illumina platform, ``"450k"`` or ``"27k"``.
        genome: Genome build of the annotation, ``"hg19"`` or ``"hg38"``.

    Example:
        >>> config = SiteSelectionConfig(max_sites=10, genome="hg38")
        >>> config.hyper_range
        (0.4, 0.9)
    """

    max_sites: int = 20
    min_distance: int = 1_000_000
    hyper_range: Tuple[float, float] = (0.40, 0.90)
    hypo_range: Tuple[float, float] = (0.10, 0.60)
    hyper_auc_threshold: float = 0.80
    hypo_auc_threshold: float = 0.20
    platform: str = "450k"
    genome: str = "hg19"

    def __post_init__(self):
        """Validate and normalize every field."""
        self.max_sites = validate_max_sites(self.max_sites)
        self.min_distance = validate_min_distance(self.min_distance)
        self.hyper_range = validate_range(self.hyper_range, "hyper_range")
        self.hypo_range = validate_range(self.hypo_range, "hypo_range")
        for name in ("hyper_auc_threshold", "hypo_auc_threshold"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or not 0 <= value <= 1:
                raise InvalidParameterError(f"'{name}' must be a number in [0, 1], got {value!r}")
        validate_choice(self.platform, SUPPORTED_PLATFORMS, "platform")
        validate_choice(self.genome, SUPPORTED_GENOMES, "genome")

    @property
    def sites_per_pool(self) -> int:
        """Number of sites requested from each of the hyper and hypo pools."""
        return self.max_sites // 2


class InformativeSiteSelector:
    """
    Select hyper- and hypo-methylated informative CpG sites.

    The selector holds an annotation provider and a default configuration.
    Each call to select resolves the annotation table for the requested
    platform and genome once, validates all inputs, and returns positional
    row indices into the beta matrix.

    Attributes:
        annotation_provider: AnnotationProvider, or a callable mapping
            ``(platform, genome)`` to an annotation DataFrame.
        config: SiteSelectionConfig with default parameters.

    Example:
        >>> selector = InformativeSiteSelector(provider, SiteSelectionConfig(max_sites=10))
        >>> sites = selector.select(tumor_betas, auc, genome="hg38")
        >>> len(sites["hyper"]) <= 5
        True
    """

    def __init__(
        self,
        annotation_provider: ProviderLike,
        config: Optional[SiteSelectionConfig] = None
    ) -> None:
        if not callable(annotation_provider):
            raise InvalidParameterError(
                "'annotation_provider' must be an AnnotationProvider or a callable "
                "taking (platform, genome)"
            )
        self.annotation_provider = annotation_provider
        self.config = config if config is not None else SiteSelectionConfig()

    def _resolve_annotation(self, platform: str, genome: str) -> pd.DataFrame:
        return normalize_annotation(self.annotation_provider(platform, genome))

    def build_candidate_pools(
        self,
        beta: pd.DataFrame,
        auc: pd.Series,
        hyper_range: Tuple[float, float],
        hypo_range: Tuple[float, float]
    ) -> Dict[str, List[int]]:
        """
        Filter probes into hyper and hypo pools, ranked by AUC.

        The hyper pool is sorted by descending AUC and the hypo pool by
        ascending AUC. Ties keep their input order. Probes without any
        observed beta value join neither pool.

        Args:
            beta: Validated beta matrix, probes as rows.
            auc: Validated AUC scores aligned with ``beta`` rows.
            hyper_range: ``(low, high)`` beta thresholds for hyper sites.
            hypo_range: ``(low, high)`` beta thresholds for hypo sites.

        Returns:
            Dictionary with ``"hyper"`` and ``"hypo"`` ranked positional
            indices.
        """
        beta_range = compute_beta_range(beta)
        min_beta = beta_range['min_beta'].to_numpy(dtype=float)
        max_beta = beta_range['max_beta'].to_numpy(dtype=float)
        auc_values = auc.to_numpy(dtype=float)
        observed = ~np.isnan(min_beta)

        hyper_mask = (
            observed
            & (min_beta < hyper_range[0])
            & (max_beta > hyper_range[1])
            & (auc_values > self.config.hyper_auc_threshold)
        )
        hypo_mask = (
            observed
            & (min_beta < hypo_range[0])
            & (max_beta > hypo_range[1])
            & (auc_values < self.config.hypo_auc_threshold)
        )

        hyper_idx = np.flatnonzero(hyper_mask)
        hypo_idx = np.flatnonzero(hypo_mask)

        logger.info(f"Total hyper-methylated sites = {len(hyper_idx)}")
        logger.info(f"Total hypo-methylated sites = {len(hypo_idx)}")

        # negating keeps the stable sort's tie order for the descending case
        ordered_hyper = hyper_idx[np.argsort(-auc_values[hyper_idx], kind='stable')]
        ordered_hypo = hypo_idx[np.argsort(auc_values[hypo_idx], kind='stable')]

        return {
            HYPER: [int(i) for i in ordered_hyper],
            HYPO: [int(i) for i in ordered_hypo],
        }

    def select(
        self,
        tumor: Any,
        auc: Any,
        max_sites: Optional[int] = None,
        min_distance: Optional[float] = None,
        hyper_range: Optional[Any] = None,
        hypo_range: Optional[Any] = None,
        platform: Optional[str] = None,
        genome: Optional[str] = None
    ) -> Dict[str, List[int]]:
        """
        Select informative sites from a tumor beta matrix.

        Arguments left as None take their value from ``self.config``.
        Parameters are validated before the matrix is read.

        Args:
            tumor: Beta values, probes as rows and samples as columns, rows
                aligned with the platform annotation table.
            auc: One AUC score per probe, same order as ``tumor``.
            max_sites: Even total number of sites (half hyper, half hypo).
            min_distance: Minimum spacing in base pairs; truncated to int.
            hyper_range: Two beta thresholds for hyper-methylated sites.
            hypo_range: Two beta thresholds for hypo-methylated sites.
            platform: ``"450k"`` or ``"27k"``.
            genome: ``"hg19"`` or ``"hg38"``.

        Returns:
            Dictionary with ``"hyper"`` and ``"hypo"`` lists of 0-based row
            positions, each at most ``max_sites // 2`` long, ranked by AUC.

        Raises:
            InvalidParameterError: If a parameter is malformed.
            InvalidInputError: If beta or AUC values are non-numeric or
                outside [0, 1].
            DimensionMismatchError: If ``tumor``, ``auc`` and the annotation
                table have different row counts.
            AnnotationNotFoundError: If the provider has no table for the
                platform/genome pair.
        """
        cfg = self.config
        max_sites = validate_max_sites(cfg.max_sites if max_sites is None else max_sites)
        min_distance = validate_min_distance(
            cfg.min_distance if min_distance is None else min_distance
        )
        hyper_range = validate_range(
            cfg.hyper_range if hyper_range is None else hyper_range, "hyper_range"
        )
        hypo_range = validate_range(
            cfg.hypo_range if hypo_range is None else hypo_range, "hypo_range"
        )
        platform = validate_choice(
            cfg.platform if platform is None else platform, SUPPORTED_PLATFORMS, "platform"
        )
        genome = validate_choice(
            cfg.genome if genome is None else genome, SUPPORTED_GENOMES, "genome"
        )

        beta = as_beta_matrix(tumor)
        auc = as_score_vector(auc)
        check_beta_range(beta, "tumor")
        check_beta_range(auc, "auc")

        annotation = self._resolve_annotation(platform, genome)
        n_probes = len(annotation)
        if beta.shape[0] != len(auc) or beta.shape[0] != n_probes:
            raise DimensionMismatchError(
                f"'tumor' and 'auc' must have {n_probes} number of rows.\n"
                "Be sure to use every 'cg' probe and remove any 'non-cg' probe."
            )

        logger.info(f"Genome: {genome}")
        logger.info(f"Platform: {platform}")
        logger.info(f"Number of sites: {max_sites}")
        logger.info(f"Minimum distance between sites: {min_distance} bp")
        logger.info(f"Hyper-methylated sites range: {hyper_range[0]} - {hyper_range[1]}")
        logger.info(f"Hypo-methylated sites range: {hypo_range[0]} - {hypo_range[1]}")

        logger.info(f"Missing beta values: {calculate_missing_rate(beta):.2%}")
        n_unobserved = int(calculate_missing_rate(beta, axis=1).fillna(1.0).eq(1.0).sum())
        if n_unobserved > 0:
            logger.info(f"{n_unobserved} probes without any beta value are excluded")

        pools = self.build_candidate_pools(beta, auc, hyper_range, hypo_range)
        if not pools[HYPER] and not pools[HYPO]:
            logger.warning("No candidate informative sites passed the thresholds")

        target_count = max_sites // 2
        selected: Dict[str, List[int]] = {}
        for pool in (HYPER, HYPO):
            logger.info(f"{pool.capitalize()}-methylated sites cluster reduction...")
            selected[pool] = cluster_reduction(
                pools[pool], target_count, min_distance, annotation
            )

        return selected


def select_informative_sites(
    tumor: Any,
    auc: Any,
    annotation_provider: ProviderLike,
    max_sites: int = 20,
    min_distance: float = 1e6,
    hyper_range: Any = (0.40, 0.90),
    hypo_range: Any = (0.10, 0.60),
    platform: str = "450k",
    genome: str = "hg19"
) -> Dict[str, List[int]]:
    """
    Select informative CpG sites to estimate the purity of tumor samples.

    Convenience wrapper around InformativeSiteSelector with the default AUC
    cut-offs (above 0.80 for hyper, below 0.20 for hypo).

    Args:
        tumor: Beta values, probes as rows and samples as columns.
        auc: One AUC score per probe.
        annotation_provider: Source of the platform annotation table.
        max_sites: Even total number of sites (default 20).
        min_distance: Minimum spacing in base pairs (default 1e6).
        hyper_range: Beta thresholds for hyper sites (default 0.40 - 0.90).
        hypo_range: Beta thresholds for hypo sites (default 0.10 - 0.60).
        platform: ``"450k"`` (default) or ``"27k"``.
        genome: ``"hg19"`` (default) or ``"hg38"``.

    Returns:
        Dictionary with ``"hyper"`` and ``"hypo"`` lists of 0-based row
        positions.

    Example:
        >>> tumor, auc, annotation = create_sample_data(random_state=1)
        >>> provider = TableAnnotationProvider({("450k", "hg19"): annotation})
        >>> sites = select_informative_sites(tumor, auc, provider)
        >>> sorted(sites)
        ['hyper', 'hypo']
    """
    selector = InformativeSiteSelector(annotation_provider)
    return selector.select(
        tumor,
        auc,
        max_sites=max_sites,
        min_distance=min_distance,
        hyper_range=hyper_range,
        hypo_range=hypo_range,
        platform=platform,
        genome=genome,
    )
