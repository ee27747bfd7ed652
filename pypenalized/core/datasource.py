"""
Reading numeric matrices from disk.

The reader only knows how to turn a file into a 2D float array. It does
not know whether the array is a design matrix or a response; the caller
decides that.

Supported formats:
    .npy          NumPy binary
    .csv / .tsv   delimited text without a header row (pandas)
    anything else whitespace-separated text (numpy.loadtxt)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pypenalized.core.exceptions import ValidationError
from pypenalized.core.validation import check_array, check_finite

_DELIMITERS = {'.csv': ',', '.tsv': '\t'}


def read_matrix(path: str | Path) -> NDArray[np.floating[Any]]:
    """
    Load a numeric matrix from a file.

    A file with a single column (or a single value per line) is returned
    as an (n, 1) array so callers can check the column count.

    Args:
        path: File to read

    Returns:
        2D float64 array

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the contents are not a finite numeric matrix
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == '.npy':
            raw = np.load(path, allow_pickle=False)
        elif suffix in _DELIMITERS:
            raw = pd.read_csv(path, header=None, sep=_DELIMITERS[suffix]).to_numpy()
        else:
            raw = np.loadtxt(path, dtype=np.float64, ndmin=2)
    except (ValueError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ValidationError(f"{path}: cannot read numeric matrix: {e}") from e

    matrix = check_array(raw, str(path))
    if matrix.ndim == 1:
        matrix = matrix.reshape(-1, 1)
    if matrix.ndim != 2 or matrix.size == 0:
        raise ValidationError(
            f"{path}: expected a non-empty 2D matrix, got shape {matrix.shape}"
        )
    check_finite(matrix, str(path))

    return matrix.astype(np.float64, copy=False)
