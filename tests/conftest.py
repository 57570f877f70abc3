"""Shared pytest fixtures for informative-site selection tests."""
import pytest
import numpy as np
import pandas as pd

from purity_methylation.data import TableAnnotationProvider, create_sample_data


@pytest.fixture
def toy_annotation():
    """Six probes on two chromosomes, raw 'Chromosome'/'Start' schema."""
    return pd.DataFrame(
        {
            "Chromosome": ["chr1", "chr1", "chr1", "chr2", "chr2", "chr3"],
            "Start": [100, 200, 5_000_000, 100, 3_000_000, 100],
        },
        index=[f"cg{i:08d}" for i in range(6)],
    )


@pytest.fixture
def scenario_tumor():
    """Five probes x three samples; probe 0 spans 0.05 to 0.95."""
    return pd.DataFrame(
        [
            [0.05, 0.95, 0.50],
            [0.50, 0.50, 0.50],
            [0.05, 0.70, 0.30],
            [0.45, 0.55, 0.50],
            [0.30, 0.60, 0.40],
        ],
        index=[f"cg{i:08d}" for i in range(5)],
        columns=["T1", "T2", "T3"],
    )


@pytest.fixture
def scenario_auc():
    """AUC scores matching scenario_tumor."""
    return pd.Series(
        [0.90, 0.50, 0.10, 0.50, 0.50],
        index=[f"cg{i:08d}" for i in range(5)],
    )


@pytest.fixture
def scenario_annotation():
    """Annotation for scenario_tumor; every probe on its own chromosome."""
    return pd.DataFrame(
        {
            "Chromosome": ["chr1", "chr2", "chr3", "chr4", "chr5"],
            "Start": [1_000, 2_000, 3_000, 4_000, 5_000],
        },
        index=[f"cg{i:08d}" for i in range(5)],
    )


@pytest.fixture
def scenario_provider(scenario_annotation):
    """Provider serving scenario_annotation for 450k/hg19."""
    return TableAnnotationProvider({("450k", "hg19"): scenario_annotation})


@pytest.fixture
def hyper_pair_factory():
    """
    Build a two-probe dataset where both probes qualify as hyper-methylated.

    Probe 0 has AUC 0.90 and probe 1 AUC 0.95, so probe 1 ranks first.
    """
    def _build(chromosomes, starts):
        tumor = pd.DataFrame([[0.05, 0.95], [0.05, 0.95]], columns=["T1", "T2"])
        auc = pd.Series([0.90, 0.95])
        annotation = pd.DataFrame({"Chromosome": chromosomes, "Start": starts})
        provider = TableAnnotationProvider({("450k", "hg19"): annotation})
        return tumor, auc, provider
    return _build


@pytest.fixture
def synthetic_data():
    """Synthetic tumor betas, AUC and annotation (400 probes x 12 samples)."""
    return create_sample_data(n_sites=400, n_samples=12, random_state=7)


@pytest.fixture
def synthetic_provider(synthetic_data):
    """Provider serving the synthetic annotation for 450k/hg19."""
    _, _, annotation = synthetic_data
    return TableAnnotationProvider({("450k", "hg19"): annotation})
