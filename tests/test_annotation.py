"""
Tests for annotation normalization and providers.
"""

import numpy as np
import pandas as pd
import pytest

from purity_methylation.data.annotation import (
    AnnotationProvider,
    TableAnnotationProvider,
    normalize_annotation,
    resolve_coordinate_column,
)
from purity_methylation.utils.exceptions import (
    AnnotationNotFoundError,
    AnnotationSchemaError,
    InvalidParameterError,
)


class TestNormalizeAnnotation:
    """Tests for normalize_annotation."""

    def test_start_schema(self, toy_annotation):
        """'Chromosome'/'Start' map to the canonical columns."""
        normalized = normalize_annotation(toy_annotation)

        assert list(normalized['chromosome']) == list(toy_annotation['Chromosome'])
        assert list(normalized['coordinate']) == list(toy_annotation['Start'])

    def test_genomic_coordinate_schema(self):
        """'Genomic_Coordinate' maps to 'coordinate'."""
        table = pd.DataFrame({'Chromosome': ['chr1'], 'Genomic_Coordinate': [12345]})
        assert normalize_annotation(table)['coordinate'].iloc[0] == 12345

    def test_start_preferred_over_genomic_coordinate(self):
        """When both source columns exist, 'Start' wins."""
        table = pd.DataFrame({
            'Chromosome': ['chr1'],
            'Start': [10],
            'Genomic_Coordinate': [99],
        })
        assert resolve_coordinate_column(table) == 'Start'
        assert normalize_annotation(table)['coordinate'].iloc[0] == 10

    def test_idempotent(self, toy_annotation):
        """Normalizing twice equals normalizing once."""
        once = normalize_annotation(toy_annotation)
        twice = normalize_annotation(once)
        pd.testing.assert_frame_equal(once, twice)

    def test_keeps_extra_columns_and_index(self, toy_annotation):
        """Source columns and probe IDs survive."""
        normalized = normalize_annotation(toy_annotation)
        assert 'Start' in normalized.columns
        assert list(normalized.index) == list(toy_annotation.index)

    def test_does_not_modify_input(self, toy_annotation):
        """The caller's table is left untouched."""
        original = toy_annotation.copy()
        normalize_annotation(toy_annotation)
        pd.testing.assert_frame_equal(toy_annotation, original)

    def test_invalid_coordinates_become_nan(self):
        """Unparseable coordinates are treated as missing."""
        table = pd.DataFrame({'Chromosome': ['chr1', 'chr1'], 'Start': ['100', 'n/a']})
        coords = normalize_annotation(table)['coordinate']
        assert coords.iloc[0] == 100
        assert np.isnan(coords.iloc[1])

    def test_missing_chromosome_column(self):
        """A chromosome column is required."""
        with pytest.raises(AnnotationSchemaError, match="chromosome"):
            normalize_annotation(pd.DataFrame({'Start': [1]}))

    def test_missing_coordinate_column(self):
        """A coordinate column is required."""
        with pytest.raises(AnnotationSchemaError, match="coordinate"):
            normalize_annotation(pd.DataFrame({'Chromosome': ['chr1']}))

    def test_not_a_dataframe(self):
        """Only DataFrames are accepted."""
        with pytest.raises(AnnotationSchemaError):
            normalize_annotation([('chr1', 100)])


class TestTableAnnotationProvider:
    """Tests for TableAnnotationProvider."""

    def test_register_and_get(self, toy_annotation):
        """Registered tables come back normalized."""
        provider = TableAnnotationProvider()
        provider.register("27k", "hg38", toy_annotation)

        table = provider.get_annotation("27k", "hg38")

        assert {'chromosome', 'coordinate'} <= set(table.columns)
        assert len(table) == len(toy_annotation)

    def test_constructor_tables(self, toy_annotation):
        """Tables can be passed at construction."""
        provider = TableAnnotationProvider({("450k", "hg19"): toy_annotation})
        assert provider.available() == [("450k", "hg19")]

    def test_callable(self, toy_annotation):
        """Providers can be called like plain functions."""
        provider = TableAnnotationProvider({("450k", "hg38"): toy_annotation})
        assert isinstance(provider, AnnotationProvider)
        pd.testing.assert_frame_equal(
            provider("450k", "hg38"), provider.get_annotation("450k", "hg38")
        )

    def test_missing_pair(self, toy_annotation):
        """Unregistered pairs raise AnnotationNotFoundError, a LookupError."""
        provider = TableAnnotationProvider({("450k", "hg19"): toy_annotation})

        with pytest.raises(AnnotationNotFoundError, match="hg38"):
            provider.get_annotation("450k", "hg38")
        with pytest.raises(LookupError):
            provider.get_annotation("27k", "hg19")

    def test_unsupported_platform(self, toy_annotation):
        """Only supported platforms can be registered."""
        with pytest.raises(InvalidParameterError):
            TableAnnotationProvider().register("EPIC", "hg19", toy_annotation)

    def test_invalid_table(self):
        """Tables without the required columns are rejected at registration."""
        with pytest.raises(AnnotationSchemaError):
            TableAnnotationProvider().register("27k", "hg19", pd.DataFrame({'x': [1]}))
