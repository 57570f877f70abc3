"""
Beta-value matrix helpers.

This module converts caller input to float DataFrames, checks that beta
values and AUC scores lie in [0, 1], and computes the per-site methylation
range used to build candidate pools. Matrices have probes as rows and
samples as columns.
"""

import logging
from typing import Any, Optional, Union

import numpy as np
import pandas as pd

from ..utils.exceptions import InvalidInputError, InvalidParameterError

logger = logging.getLogger(__name__)


def as_beta_matrix(matrix: Any) -> pd.DataFrame:
    """
    Convert a beta-value matrix to a float DataFrame.

    Args:
        matrix: DataFrame or array-like with probes as rows and samples as
            columns. Missing values may be NaN or None.

    Returns:
        DataFrame of floats. Row and column labels are kept for DataFrames.

    Raises:
        InvalidInputError: If the input is not two-dimensional or contains
            non-numeric entries.

    Example:
        >>> beta = as_beta_matrix([[0.1, 0.9], [0.5, None]])
        >>> beta.shape
        (2, 2)
    """
    try:
        if isinstance(matrix, pd.DataFrame):
            beta = matrix.astype(float)
        else:
            values = np.asarray(matrix, dtype=float)
            if values.ndim == 1:
                values = values.reshape(-1, 1)
            beta = pd.DataFrame(values)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            "'tumor' and 'auc' must be numeric matrixes."
        ) from exc

    return beta


def as_score_vector(scores: Any) -> pd.Series:
    """
    Convert AUC scores to a float Series.

    Raises:
        InvalidInputError: If the scores are non-numeric or not
            one-dimensional.
    """
    try:
        if isinstance(scores, pd.Series):
            auc = scores.astype(float)
        else:
            values = np.asarray(scores, dtype=float)
            if values.ndim == 2 and 1 in values.shape:
                values = values.ravel()
            auc = pd.Series(values)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            "'tumor' and 'auc' must be numeric matrixes."
        ) from exc

    return auc


def check_beta_range(
    values: Union[pd.DataFrame, pd.Series],
    name: str = "values"
) -> None:
    """
    Ensure every non-missing value lies in [0, 1].

    Args:
        values: Beta values or AUC scores.
        name: Label used in the error message.

    Raises:
        InvalidInputError: If any non-missing value is below 0 or above 1.
    """
    array = np.asarray(values, dtype=float)
    below = int(np.sum(array < 0))
    above = int(np.sum(array > 1))

    if below > 0 or above > 0:
        raise InvalidInputError(
            f"'{name}' must contain values between 0 and 1: found {below} "
            f"values below 0 and {above} values above 1."
        )


def compute_beta_range(matrix: pd.DataFrame) -> pd.DataFrame:
    """
    Compute the minimum and maximum beta value of each probe.

    Missing values are skipped. A probe with no observed value gets NaN for
    both statistics, which makes every threshold comparison false.

    Args:
        matrix: Beta values with probes as rows and samples as columns.

    Returns:
        DataFrame indexed like ``matrix`` with columns ``min_beta`` and
        ``max_beta``.

    Example:
        >>> compute_beta_range(pd.DataFrame([[0.05, 0.95, 0.5]]))
           min_beta  max_beta
        0      0.05      0.95
    """
    beta_range = pd.DataFrame({
        'min_beta': matrix.min(axis=1, skipna=True),
        'max_beta': matrix.max(axis=1, skipna=True),
    }, index=matrix.index)

    empty_rows = int(beta_range['min_beta'].isna().sum())
    if empty_rows > 0:
        logger.debug(f"{empty_rows} probes have no observed beta value")

    return beta_range


def calculate_missing_rate(
    matrix: pd.DataFrame,
    axis: Optional[int] = None
) -> Union[float, pd.Series]:
    """
    Fraction of missing beta values.

    Args:
        matrix: Beta values with probes as rows and samples as columns.
        axis: None for the whole matrix, 1 for one rate per probe, 0 for one
            rate per sample.

    Returns:
        A float for the whole matrix (0.0 when it is empty), otherwise a
        Series indexed by probe or sample.

    Raises:
        InvalidParameterError: If ``axis`` is not None, 0 or 1.

    Example:
        >>> probe_rates = calculate_missing_rate(beta, axis=1)
        >>> int((probe_rates == 1).sum())  # probes with no observed value
        3
    """
    missing = matrix.isna()

    if axis is None:
        if missing.size == 0:
            return 0.0
        return float(missing.to_numpy().mean())

    if axis not in (0, 1):
        raise InvalidParameterError(f"'axis' must be None, 0 or 1, got {axis!r}")

    return missing.mean(axis=axis)
