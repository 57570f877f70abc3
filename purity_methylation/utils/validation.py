"""
Parameter validation for informative-site selection.

All checks fail fast with InvalidParameterError and return the cleaned
value, so callers can write ``max_sites = validate_max_sites(max_sites)``.
"""

import math
import numbers
from collections.abc import Mapping
from typing import Any, Sequence, Tuple

import numpy as np
import pandas as pd

from .exceptions import InvalidParameterError

SUPPORTED_PLATFORMS: Tuple[str, ...] = ("450k", "27k")
SUPPORTED_GENOMES: Tuple[str, ...] = ("hg19", "hg38")


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def validate_max_sites(max_sites: Any) -> int:
    """
    Check that ``max_sites`` is a non-negative even integer.

    Integral floats (``20.0``) are accepted; booleans are not.

    Args:
        max_sites: Total number of sites to retrieve (half hyper, half hypo).

    Returns:
        ``max_sites`` as a Python int.

    Raises:
        InvalidParameterError: If the value is not a non-negative even integer.

    Example:
        >>> validate_max_sites(20)
        20
    """
    if not _is_number(max_sites) or not float(max_sites).is_integer():
        raise InvalidParameterError(
            f"'max_sites' must be an integer and even number, got {max_sites!r}"
        )
    max_sites = int(max_sites)
    if max_sites < 0 or max_sites % 2 != 0:
        raise InvalidParameterError(
            f"'max_sites' must be an integer and even number, got {max_sites}"
        )
    return max_sites


def validate_min_distance(min_distance: Any) -> int:
    """
    Truncate ``min_distance`` to an integer and check it is not negative.

    Truncation is toward zero, so ``-0.5`` becomes ``0`` and is accepted.

    Args:
        min_distance: Minimum spacing between selected sites, in base pairs.

    Returns:
        The truncated distance.

    Raises:
        InvalidParameterError: If the value is not a finite number or is
            negative after truncation.
    """
    if not _is_number(min_distance) or not math.isfinite(min_distance):
        raise InvalidParameterError(
            f"'min_distance' must be a finite number, got {min_distance!r}"
        )
    min_distance = int(min_distance)
    if min_distance < 0:
        raise InvalidParameterError("'min_distance' must be positive.")
    return min_distance


def validate_range(values: Any, name: str) -> Tuple[float, float]:
    """
    Check that a beta range holds exactly two numeric values.

    Args:
        values: Sequence, numpy array, pandas Series, or mapping (its values
            are used, e.g. ``{"min": 0.4, "max": 0.9}``).
        name: Parameter name used in the error message.

    Returns:
        ``(low, high)`` as floats, in the order given.

    Raises:
        InvalidParameterError: If the range is malformed.
    """
    if isinstance(values, Mapping):
        values = list(values.values())
    elif isinstance(values, pd.Series):
        values = values.tolist()
    elif isinstance(values, (str, bytes)) or not isinstance(values, (Sequence, np.ndarray)):
        raise InvalidParameterError(
            f"'{name}' must be a numeric vector of length 2, got {values!r}"
        )

    values = list(np.ravel(np.asarray(values, dtype=object)))
    if len(values) != 2 or not all(_is_number(v) for v in values):
        raise InvalidParameterError(
            f"'{name}' must be a numeric vector of length 2, got {values!r}"
        )
    return float(values[0]), float(values[1])


def validate_target_count(target_count: Any) -> int:
    """
    Check that a reducer target count is a non-negative integer.

    Raises:
        InvalidParameterError: If the value is negative or not integral.
    """
    if not _is_number(target_count) or not float(target_count).is_integer():
        raise InvalidParameterError(
            f"Target count must be a non-negative integer, got {target_count!r}"
        )
    target_count = int(target_count)
    if target_count < 0:
        raise InvalidParameterError(
            f"Target count must be a non-negative integer, got {target_count}"
        )
    return target_count


def validate_choice(value: Any, choices: Sequence[str], name: str) -> str:
    """
    Check that ``value`` is one of the supported ``choices``.

    Raises:
        InvalidParameterError: If ``value`` is not in ``choices``.
    """
    if not isinstance(value, str) or value not in choices:
        raise InvalidParameterError(
            f"Invalid {name} '{value}'. Valid options are: {list(choices)}"
        )
    return value
