"""
Genomic proximity checks between CpG sites.

A candidate site is "too close" to a set of accepted sites when at least one
accepted site lies on the same chromosome AND less than ``min_distance`` base
pairs away. Each pairwise comparison has three possible outcomes:

- ``Proximity.NEAR``: same chromosome and within the distance
- ``Proximity.FAR``: different chromosome, or at least the distance apart
- ``Proximity.UNKNOWN``: a missing chromosome or coordinate leaves the
  comparison undecided

Only NEAR blocks a candidate. UNKNOWN never does.

Example:
    >>> is_too_close(3, [0, 1], min_distance=1_000_000, annotation=annotation)
    False
"""

import logging
from enum import IntEnum
from typing import List, Sequence

import numpy as np
import pandas as pd

from ..data.annotation import resolve_chromosome_column, resolve_coordinate_column

logger = logging.getLogger(__name__)


class Proximity(IntEnum):
    """Outcome of comparing two sites."""
    FAR = 0
    NEAR = 1
    UNKNOWN = 2


def _site_arrays(annotation: pd.DataFrame, positions: np.ndarray):
    """Chromosome labels and float coordinates of the probes at ``positions``."""
    chrom_col = resolve_chromosome_column(annotation)
    coord_col = resolve_coordinate_column(annotation)
    rows = annotation.iloc[positions]
    chromosomes = rows[chrom_col].to_numpy(dtype=object)
    coordinates = pd.to_numeric(rows[coord_col], errors="coerce").to_numpy(dtype=float)
    return chromosomes, coordinates


def classify_proximity(
    candidate_index: int,
    accepted_indices: Sequence[int],
    min_distance: int,
    annotation: pd.DataFrame
) -> List[Proximity]:
    """
    Compare one candidate site against each accepted site.

    The pairwise outcome combines two tests, chromosome equality and
    ``abs(coordinate difference) < min_distance``. If either test is
    definitely false the pair is FAR; if both are definitely true it is NEAR;
    otherwise it is UNKNOWN.

    Args:
        candidate_index: Positional index of the candidate probe.
        accepted_indices: Positional indices of already accepted probes.
        min_distance: Minimum spacing in base pairs.
        annotation: Annotation table with chromosome and coordinate columns
            (canonical, ``Start`` or ``Genomic_Coordinate`` naming).

    Returns:
        One Proximity per accepted index, in the same order.
    """
    accepted = np.asarray(accepted_indices, dtype=int)
    if accepted.size == 0:
        return []

    # last position is the candidate
    chromosomes, coordinates = _site_arrays(
        annotation, np.append(accepted, int(candidate_index))
    )

    chrom_candidate = chromosomes[-1]
    chrom_accepted = chromosomes[:-1]
    chrom_known = ~pd.isna(chrom_accepted) & (not pd.isna(chrom_candidate))
    same_chromosome = np.array(
        [known and chrom == chrom_candidate for known, chrom in zip(chrom_known, chrom_accepted)],
        dtype=bool,
    )

    distance = np.abs(coordinates[:-1] - coordinates[-1])
    distance_known = ~np.isnan(distance)
    within_distance = distance_known & (np.nan_to_num(distance, nan=np.inf) < min_distance)

    definitely_far = (chrom_known & ~same_chromosome) | (distance_known & ~within_distance)
    definitely_near = same_chromosome & within_distance

    states = np.where(
        definitely_far, Proximity.FAR,
        np.where(definitely_near, Proximity.NEAR, Proximity.UNKNOWN)
    )
    return [Proximity(int(state)) for state in states]


def is_too_close(
    candidate_index: int,
    accepted_indices: Sequence[int],
    min_distance: int,
    annotation: pd.DataFrame
) -> bool:
    """
    Check whether a candidate lies within ``min_distance`` of an accepted site.

    Args:
        candidate_index: Positional index of the candidate probe.
        accepted_indices: Positional indices of already accepted probes.
        min_distance: Minimum spacing in base pairs.
        annotation: Annotation table with chromosome and coordinate columns.

    Returns:
        True if any accepted site is on the same chromosome and closer than
        ``min_distance``; False otherwise, including when nothing has been
        accepted yet or every comparison is undecided.

    Example:
        >>> is_too_close(1, [], 1000, annotation)
        False
    """
    if len(accepted_indices) == 0:
        return False

    states = classify_proximity(candidate_index, accepted_indices, min_distance, annotation)
    return any(state is Proximity.NEAR for state in states)
