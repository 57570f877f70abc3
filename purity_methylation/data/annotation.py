"""
Platform annotation tables for Illumina methylation arrays.

The selector never looks annotation tables up by name. Instead it receives an
annotation provider, resolves the table for the requested platform and genome
once, and works on a normalized copy with two canonical columns:

- ``chromosome``: chromosome label of the probe
- ``coordinate``: genomic coordinate in base pairs (NaN when unknown)

Source tables name the coordinate either ``Start`` or ``Genomic_Coordinate``
and the chromosome ``Chromosome``; normalize_annotation maps both schemas.

Example:
    >>> provider = TableAnnotationProvider()
    >>> provider.register("27k", "hg19", illumina27k_hg19)
    >>> annotation = provider.get_annotation("27k", "hg19")
    >>> annotation[["chromosome", "coordinate"]].head()
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

import pandas as pd

from ..utils.exceptions import AnnotationNotFoundError, AnnotationSchemaError
from ..utils.validation import (
    SUPPORTED_GENOMES,
    SUPPORTED_PLATFORMS,
    validate_choice,
)

logger = logging.getLogger(__name__)

CHROMOSOME_COLUMN = "chromosome"
COORDINATE_COLUMN = "coordinate"

# Accepted source names, in order of preference
CHROMOSOME_ALIASES = (CHROMOSOME_COLUMN, "Chromosome")
COORDINATE_ALIASES = (COORDINATE_COLUMN, "Start", "Genomic_Coordinate")


def _first_present(table: pd.DataFrame, aliases: Tuple[str, ...], kind: str) -> str:
    for name in aliases:
        if name in table.columns:
            return name
    raise AnnotationSchemaError(
        f"Annotation table has no {kind} column; expected one of {list(aliases)}, "
        f"found {list(table.columns)}"
    )


def resolve_chromosome_column(table: pd.DataFrame) -> str:
    """Return the name of the chromosome column present in ``table``."""
    return _first_present(table, CHROMOSOME_ALIASES, "chromosome")


def resolve_coordinate_column(table: pd.DataFrame) -> str:
    """
    Return the name of the coordinate column present in ``table``.

    The canonical ``coordinate`` wins, then ``Start``, then
    ``Genomic_Coordinate``.

    Raises:
        AnnotationSchemaError: If none of the names is present.
    """
    return _first_present(table, COORDINATE_ALIASES, "coordinate")


def normalize_annotation(table: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy of ``table`` with canonical chromosome/coordinate columns.

    Extra columns are kept. Coordinates are coerced to numbers, with invalid
    entries becoming NaN. Applying the function twice gives the same result.

    Args:
        table: Platform annotation table, one row per probe, in probe order.

    Returns:
        Normalized annotation DataFrame.

    Raises:
        AnnotationSchemaError: If a chromosome or coordinate column is missing.
    """
    if not isinstance(table, pd.DataFrame):
        raise AnnotationSchemaError(
            f"Annotation table must be a pandas DataFrame, got {type(table).__name__}"
        )

    chrom_col = resolve_chromosome_column(table)
    coord_col = resolve_coordinate_column(table)

    normalized = table.copy()
    normalized[CHROMOSOME_COLUMN] = table[chrom_col]
    normalized[COORDINATE_COLUMN] = pd.to_numeric(table[coord_col], errors="coerce")

    invalid = normalized[COORDINATE_COLUMN].isna().sum()
    if invalid > 0:
        logger.debug(f"{invalid} probes have no usable genomic coordinate")

    return normalized


class AnnotationProvider(ABC):
    """
    Source of platform annotation tables.

    Subclasses return a normalized table (see normalize_annotation) for a
    platform/genome pair.
    """

    @abstractmethod
    def get_annotation(self, platform: str, genome: str) -> pd.DataFrame:
        """Return the normalized annotation table for ``platform``/``genome``."""

    def __call__(self, platform: str, genome: str) -> pd.DataFrame:
        return self.get_annotation(platform, genome)


class TableAnnotationProvider(AnnotationProvider):
    """
    In-memory annotation registry keyed by ``(platform, genome)``.

    Tables are normalized when registered, so lookups are cheap.

    Attributes:
        tables: Mapping of ``(platform, genome)`` to normalized tables.

    Example:
        >>> provider = TableAnnotationProvider({("450k", "hg38"): table})
        >>> provider.available()
        [('450k', 'hg38')]
    """

    def __init__(
        self,
        tables: Optional[Dict[Tuple[str, str], pd.DataFrame]] = None
    ) -> None:
        self.tables: Dict[Tuple[str, str], pd.DataFrame] = {}
        for (platform, genome), table in (tables or {}).items():
            self.register(platform, genome, table)

    def register(self, platform: str, genome: str, table: pd.DataFrame) -> None:
        """
        Add or replace the annotation table for a platform/genome pair.

        Raises:
            InvalidParameterError: If platform or genome is not supported.
            AnnotationSchemaError: If the table lacks required columns.
        """
        validate_choice(platform, SUPPORTED_PLATFORMS, "platform")
        validate_choice(genome, SUPPORTED_GENOMES, "genome")
        self.tables[(platform, genome)] = normalize_annotation(table)
        logger.debug(
            f"Registered {len(table)} probes for platform {platform}, genome {genome}"
        )

    def available(self):
        """List the registered ``(platform, genome)`` pairs."""
        return sorted(self.tables)

    def get_annotation(self, platform: str, genome: str) -> pd.DataFrame:
        try:
            return self.tables[(platform, genome)]
        except KeyError:
            raise AnnotationNotFoundError(
                f"No annotation table for platform '{platform}' and genome "
                f"'{genome}'. Available: {self.available()}"
            ) from None
