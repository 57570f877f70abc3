"""
Tests for the genomic proximity checks.

Tests cover:
- Empty accepted sets
- Same-chromosome distance threshold (strict inequality)
- Chromosome mismatch
- Missing chromosome/coordinate handling (UNKNOWN never blocks)
- Coordinate column resolution
"""

import numpy as np
import pandas as pd
import pytest

from purity_methylation.features.proximity import (
    Proximity,
    classify_proximity,
    is_too_close,
)
from purity_methylation.utils.exceptions import AnnotationSchemaError


class TestIsTooClose:
    """Tests for is_too_close."""

    def test_first_site_never_too_close(self, toy_annotation):
        """Nothing accepted yet means nothing can block."""
        assert is_too_close(0, [], 1_000_000, toy_annotation) is False

    def test_same_chromosome_within_distance(self, toy_annotation):
        """Probes 0 and 1 are 100 bp apart on chr1."""
        assert is_too_close(1, [0], 1_000, toy_annotation) is True

    def test_same_chromosome_beyond_distance(self, toy_annotation):
        """Probe 2 is ~5 Mb away from probe 0."""
        assert is_too_close(2, [0], 1_000_000, toy_annotation) is False

    def test_exact_distance_is_not_too_close(self, toy_annotation):
        """A gap equal to min_distance is allowed."""
        assert is_too_close(1, [0], 100, toy_annotation) is False
        assert is_too_close(1, [0], 101, toy_annotation) is True

    def test_different_chromosome_same_coordinate(self, toy_annotation):
        """Probes 0 (chr1) and 3 (chr2) share a coordinate but not a chromosome."""
        assert is_too_close(3, [0], 1_000_000, toy_annotation) is False

    def test_any_accepted_site_blocks(self, toy_annotation):
        """One near pair is enough, whatever the other pairs say."""
        assert is_too_close(1, [3, 5, 2, 0], 1_000, toy_annotation) is True

    def test_zero_distance_never_blocks(self, toy_annotation):
        """With min_distance 0 even identical positions are accepted."""
        assert is_too_close(1, [0, 3], 0, toy_annotation) is False

    def test_missing_coordinate_does_not_block(self):
        """An undecided comparison resolves to not too close."""
        annotation = pd.DataFrame({
            'Chromosome': ['chr1', 'chr1'],
            'Start': [100, np.nan],
        })
        assert is_too_close(1, [0], 1_000_000, annotation) is False

    def test_missing_chromosome_does_not_block(self):
        """A missing chromosome label with a close coordinate is undecided."""
        annotation = pd.DataFrame({
            'Chromosome': ['chr1', None],
            'Start': [100, 150],
        })
        assert is_too_close(1, [0], 1_000, annotation) is False

    def test_genomic_coordinate_column(self):
        """Tables using 'Genomic_Coordinate' are handled."""
        annotation = pd.DataFrame({
            'Chromosome': ['chr7', 'chr7'],
            'Genomic_Coordinate': [1_000, 1_500],
        })
        assert is_too_close(1, [0], 1_000, annotation) is True

    def test_canonical_columns(self):
        """Normalized tables with 'chromosome'/'coordinate' are handled."""
        annotation = pd.DataFrame({
            'chromosome': ['chrX', 'chrX'],
            'coordinate': [10, 20],
        })
        assert is_too_close(1, [0], 50, annotation) is True

    def test_missing_coordinate_column_raises(self):
        """A table without any coordinate column is rejected."""
        annotation = pd.DataFrame({'Chromosome': ['chr1', 'chr1'], 'End': [1, 2]})
        with pytest.raises(AnnotationSchemaError, match="coordinate"):
            is_too_close(1, [0], 10, annotation)


class TestClassifyProximity:
    """Tests for the per-pair tri-state classification."""

    def test_empty_accepted(self, toy_annotation):
        """No accepted sites means no pairs."""
        assert classify_proximity(0, [], 10, toy_annotation) == []

    def test_states_follow_accepted_order(self, toy_annotation):
        """One state per accepted index, in order."""
        states = classify_proximity(1, [0, 2, 3], 1_000, toy_annotation)
        assert states == [Proximity.NEAR, Proximity.FAR, Proximity.FAR]

    def test_unknown_when_coordinate_missing_on_same_chromosome(self):
        """Same chromosome but unknown distance is UNKNOWN."""
        annotation = pd.DataFrame({
            'Chromosome': ['chr1', 'chr1'],
            'Start': [np.nan, 500],
        })
        assert classify_proximity(1, [0], 1_000, annotation) == [Proximity.UNKNOWN]

    def test_far_when_chromosomes_differ_and_coordinate_missing(self):
        """A known chromosome mismatch decides the pair on its own."""
        annotation = pd.DataFrame({
            'Chromosome': ['chr1', 'chr2'],
            'Start': [np.nan, 500],
        })
        assert classify_proximity(1, [0], 1_000, annotation) == [Proximity.FAR]

    def test_far_when_chromosome_missing_but_distant(self):
        """A known large distance decides the pair on its own."""
        annotation = pd.DataFrame({
            'Chromosome': [None, 'chr2'],
            'Start': [100, 90_000_000],
        })
        assert classify_proximity(1, [0], 1_000, annotation) == [Proximity.FAR]

    def test_positional_indexing_ignores_labels(self):
        """Indices address rows by position, not by index label."""
        annotation = pd.DataFrame(
            {'Chromosome': ['chr1', 'chr1', 'chr2'], 'Start': [100, 150, 100]},
            index=[10, 0, 5],
        )
        assert classify_proximity(1, [0], 1_000, annotation) == [Proximity.NEAR]
        assert classify_proximity(2, [0], 1_000, annotation) == [Proximity.FAR]
