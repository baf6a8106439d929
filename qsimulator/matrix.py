"""Dense square complex matrices used to describe quantum gates."""

from __future__ import annotations

from typing import Iterable

import numpy as np


class Matrix:
    """A square matrix of complex numbers."""

    def __init__(self, size: int = 0, fill: complex = 0) -> None:
        if size < 0:
            raise ValueError("matrix size must not be negative")
        self._data = np.full((size, size), fill, dtype=complex)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        result = cls()
        result._data = data
        return result

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._data.shape[0]

    def __getitem__(self, key: tuple[int, int]) -> complex:
        row, column = key
        return complex(self._data[row, column])

    def __setitem__(self, key: tuple[int, int], value: complex) -> None:
        row, column = key
        self._data[row, column] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: "Matrix") -> "Matrix":
        if self.size != other.size:
            raise ValueError("invalid addition: matrix sizes don't match")
        self._data += other._data
        return self

    def __matmul__(self, other: "Matrix | Iterable[complex]"):
        if isinstance(other, Matrix):
            if self.size != other.size:
                raise ValueError("multiplication of matrices with different sizes")
            return Matrix._wrap(self._data @ other._data)
        vector = np.asarray(list(other), dtype=complex)
        if vector.shape != (self.size,):
            raise ValueError("invalid multiplication: matrix size doesn't match vector size")
        return self._data @ vector

    def kron(self, other: "Matrix") -> None:
        """Replace this matrix with its Kronecker product with ``other``."""
        self._data = np.kron(self._data, other._data)

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._data.copy())

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"