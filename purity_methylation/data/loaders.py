"""
Synthetic data for informative-site selection examples and tests.
"""

import numpy as np
import pandas as pd
from typing import Tuple, Optional


def create_sample_data(
    n_sites: int = 1000,
    n_samples: int = 30,
    n_chromosomes: int = 22,
    informative_fraction: float = 0.05,
    random_state: Optional[int] = 42
) -> Tuple[pd.DataFrame, pd.Series, pd.DataFrame]:
    """
    Create a synthetic tumor beta matrix with matching AUC and annotation.

    A fraction of the probes is planted as informative: half behave like
    hyper-methylated sites (AUC close to 1, betas spanning low to high) and
    half like hypo-methylated sites (AUC close to 0). The remaining probes
    have mid-range betas and AUC around 0.5.

    Parameters:
    -----------
    n_sites : int
        Number of CpG probes (rows)
    n_samples : int
        Number of tumor samples (columns)
    n_chromosomes : int
        Number of autosomes the probes are spread over
    informative_fraction : float
        Fraction of probes planted as informative
    random_state : int, optional
        Random seed for reproducibility

    Returns:
    --------
    Tuple[pd.DataFrame, pd.Series, pd.DataFrame]
        Tumor beta values, AUC scores, and an annotation table with
        ``Chromosome`` and ``Start`` columns, all indexed by probe ID
    """

    rng = np.random.default_rng(random_state)

    probe_ids = [f"cg{i:08d}" for i in range(n_sites)]
    sample_ids = [f"Tumor_{i:03d}" for i in range(n_samples)]

    # Background probes: intermediate methylation, uninformative AUC
    betas = rng.beta(5, 5, size=(n_sites, n_samples))
    auc = rng.uniform(0.3, 0.7, size=n_sites)

    n_informative = int(n_sites * informative_fraction)
    informative = rng.choice(n_sites, size=n_informative, replace=False)
    hyper_sites = informative[: n_informative // 2]
    hypo_sites = informative[n_informative // 2:]

    # Informative probes span the full beta range across tumors of varying purity
    for sites in (hyper_sites, hypo_sites):
        betas[sites] = rng.uniform(0.0, 1.0, size=(len(sites), n_samples))
        betas[sites, 0] = rng.uniform(0.0, 0.05, size=len(sites))
        betas[sites, -1] = rng.uniform(0.95, 1.0, size=len(sites))

    auc[hyper_sites] = rng.uniform(0.85, 1.0, size=len(hyper_sites))
    auc[hypo_sites] = rng.uniform(0.0, 0.15, size=len(hypo_sites))

    tumor_df = pd.DataFrame(betas, index=probe_ids, columns=sample_ids)
    auc_series = pd.Series(auc, index=probe_ids, name="auc")

    annotation_df = pd.DataFrame({
        'Chromosome': [f"chr{c}" for c in rng.integers(1, n_chromosomes + 1, size=n_sites)],
        'Start': rng.integers(10_000, 250_000_000, size=n_sites),
    }, index=probe_ids)

    return tumor_df, auc_series, annotation_df
