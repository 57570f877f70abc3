"""
Helper functions for inspecting selected informative sites.
"""

import numpy as np
import pandas as pd
from typing import Dict, List, Optional, Sequence

from ..data.annotation import normalize_annotation


def summarize_informative_sites(
    sites: Dict[str, List[int]],
    annotation: pd.DataFrame,
    auc: Optional[Sequence[float]] = None
) -> pd.DataFrame:
    """
    Tabulate selected sites with their genomic location.

    Parameters:
    -----------
    sites : Dict[str, List[int]]
        Selector output with "hyper" and "hypo" positional indices
    annotation : pd.DataFrame
        Platform annotation table the indices refer to
    auc : Sequence[float], optional
        AUC scores aligned with the annotation rows

    Returns:
    --------
    pd.DataFrame
        One row per site with columns pool, rank, site_index, probe_id,
        chromosome, coordinate and, when given, auc. Hyper sites come first.
    """

    annotation = normalize_annotation(annotation)
    auc_values = None if auc is None else np.asarray(auc, dtype=float)

    records = []
    for pool in ('hyper', 'hypo'):
        for rank, idx in enumerate(sites.get(pool, []), start=1):
            record = {
                'pool': pool,
                'rank': rank,
                'site_index': int(idx),
                'probe_id': annotation.index[idx],
                'chromosome': annotation['chromosome'].iloc[idx],
                'coordinate': annotation['coordinate'].iloc[idx],
            }
            if auc_values is not None:
                record['auc'] = float(auc_values[idx])
            records.append(record)

    columns = ['pool', 'rank', 'site_index', 'probe_id', 'chromosome', 'coordinate']
    if auc_values is not None:
        columns.append('auc')

    return pd.DataFrame.from_records(records, columns=columns)


def min_same_chromosome_distance(
    indices: Sequence[int],
    annotation: pd.DataFrame
) -> float:
    """
    Smallest distance between two listed sites sharing a chromosome.

    Parameters:
    -----------
    indices : Sequence[int]
        Positional site indices
    annotation : pd.DataFrame
        Platform annotation table

    Returns:
    --------
    float
        Minimum same-chromosome spacing in base pairs, or ``inf`` if no two
        sites with known coordinates share a chromosome
    """

    annotation = normalize_annotation(annotation)
    sites = annotation.iloc[list(indices)][['chromosome', 'coordinate']].dropna()

    smallest = np.inf
    for _, group in sites.groupby('chromosome'):
        if len(group) > 1:
            gaps = np.diff(np.sort(group['coordinate'].to_numpy(dtype=float)))
            smallest = min(smallest, float(gaps.min()))

    return smallest
