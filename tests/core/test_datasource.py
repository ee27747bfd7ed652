"""
Tests for read_matrix.
"""

import numpy as np
import pytest

from pypenalized.core.datasource import read_matrix
from pypenalized.core.exceptions import ValidationError


class TestFormats:

    def test_whitespace_text(self, tmp_path):
        path = tmp_path / "X.txt"
        path.write_text("1 2\n3 4\n5 6\n")
        np.testing.assert_array_equal(read_matrix(path), [[1, 2], [3, 4], [5, 6]])

    def test_single_column_text(self, tmp_path):
        path = tmp_path / "y.dat"
        path.write_text("1.5\n2.5\n3.5\n")
        result = read_matrix(path)
        assert result.shape == (3, 1)

    def test_csv(self, tmp_path):
        path = tmp_path / "X.csv"
        path.write_text("1.0,2.0\n3.0,4.0\n")
        result = read_matrix(str(path))
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_tsv(self, tmp_path):
        path = tmp_path / "X.tsv"
        path.write_text("1\t2\n3\t4\n")
        assert read_matrix(path).shape == (2, 2)

    def test_npy_1d(self, tmp_path):
        path = tmp_path / "y.npy"
        np.save(path, np.arange(4.0))
        result = read_matrix(path)
        assert result.shape == (4, 1)


class TestErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_matrix(tmp_path / "absent.txt")

    def test_non_numeric(self, tmp_path):
        path = tmp_path / "X.txt"
        path.write_text("1 two\n3 4\n")
        with pytest.raises(ValidationError):
            read_matrix(path)

    def test_non_numeric_csv(self, tmp_path):
        path = tmp_path / "X.csv"
        path.write_text("a,b\n1,2\n")
        with pytest.raises(ValidationError):
            read_matrix(path)

    def test_ragged_rows(self, tmp_path):
        path = tmp_path / "X.txt"
        path.write_text("1 2\n3\n")
        with pytest.raises(ValidationError):
            read_matrix(path)

    def test_non_finite(self, tmp_path):
        path = tmp_path / "X.csv"
        path.write_text("1.0,nan\n3.0,4.0\n")
        with pytest.raises(ValidationError, match="non-finite"):
            read_matrix(path)

    def test_empty_csv(self, tmp_path):
        path = tmp_path / "X.csv"
        path.write_text("")
        with pytest.raises(ValidationError):
            read_matrix(path)
