"""
Greedy cluster reduction of ranked CpG sites.

Neighbouring CpG sites tend to be co-methylated, so several top-ranked sites
from one genomic cluster add little information. cluster_reduction walks a
ranked candidate list and keeps a site only when no previously kept site on
the same chromosome lies within ``min_distance`` base pairs.

The reduction is first-fit greedy: it keeps the input order, never looks
ahead and does not search for the largest spaced subset.

Example:
    >>> ranked = [12, 4, 7, 30]
    >>> cluster_reduction(ranked, target_count=2, min_distance=1_000_000,
    ...                   annotation=annotation)
    [12, 7]
"""

import logging
from typing import Iterable, List

import pandas as pd

from ..utils.validation import validate_target_count
from .proximity import is_too_close

logger = logging.getLogger(__name__)


def cluster_reduction(
    ordered_candidates: Iterable[int],
    target_count: int,
    min_distance: int,
    annotation: pd.DataFrame
) -> List[int]:
    """
    Keep at most ``target_count`` well-spaced sites, in priority order.

    Args:
        ordered_candidates: Positional probe indices, highest priority first.
        target_count: Maximum number of sites to keep.
        min_distance: Minimum spacing in base pairs between kept sites on the
            same chromosome.
        annotation: Annotation table with chromosome and coordinate columns.

    Returns:
        Kept indices as an order-preserving subsequence of the candidates.
        Fewer than ``target_count`` are returned when the candidates run out.

    Raises:
        InvalidParameterError: If ``target_count`` is not a non-negative
            integer.
    """
    target_count = validate_target_count(target_count)

    top_idx: List[int] = []
    if target_count > 0:
        for idx in ordered_candidates:
            if not is_too_close(idx, top_idx, min_distance, annotation):
                top_idx.append(int(idx))
                if len(top_idx) >= target_count:
                    break

    logger.info(f"{len(top_idx)} sites retrieved after cluster reduction.")

    return top_idx
