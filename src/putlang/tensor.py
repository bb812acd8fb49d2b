"""A small n-dimensional tensor of floats.

Stands apart from the language pipeline; the CLI ``demo`` command is its
only caller. Storage is a flat numpy buffer in row-major order.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


class TensorError(ValueError):
    """Raised for shape mismatches and invalid multi-indices."""


class Tensor:
    """A flat float64 buffer viewed through a shape."""

    def __init__(self, data: Sequence[float], shape: Sequence[int]) -> None:
        buffer = np.array(data, dtype=np.float64).ravel()
        shape = tuple(int(d) for d in shape)
        if buffer.size != math.prod(shape):
            raise ValueError(
                f"buffer of length {buffer.size} does not fit shape {list(shape)}"
            )
        self._data = buffer
        self.shape = shape

    @classmethod
    def zeros(cls, shape: Sequence[int]) -> Tensor:
        return cls(np.zeros(math.prod(shape)), shape)

    @classmethod
    def _from_array(cls, array: np.ndarray) -> Tensor:
        return cls(array.ravel(), array.shape)

    @property
    def data(self) -> list[float]:
        return self._data.tolist()

    @property
    def ndim(self) -> int:
        return len(self.shape)

    def _array(self) -> np.ndarray:
        return self._data.reshape(self.shape)

    # ── Element access ───────────────────────────────────────────

    def _flat_index(self, indices: Sequence[int]) -> int | None:
        if len(indices) != len(self.shape):
            return None
        index = 0
        multiplier = 1
        for dim, idx in zip(reversed(self.shape), reversed(indices)):
            if not 0 <= idx < dim:
                return None
            index += idx * multiplier
            multiplier *= dim
        return index

    def get(self, indices: Sequence[int]) -> float | None:
        """Return the element at ``indices``, or None if they are invalid."""
        index = self._flat_index(indices)
        if index is None:
            return None
        return float(self._data[index])

    def set(self, indices: Sequence[int], value: float) -> None:
        index = self._flat_index(indices)
        if index is None:
            raise TensorError(f"invalid indices {list(indices)} for shape {list(self.shape)}")
        self._data[index] = value

    # ── Arithmetic ───────────────────────────────────────────────

    def _elementwise(self, other: Tensor, op, name: str) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        if self.shape != other.shape:
            raise TensorError(
                f"shapes must match for {name}: {list(self.shape)} vs {list(other.shape)}"
            )
        return Tensor(op(self._data, other._data), self.shape)

    def __add__(self, other: Tensor) -> Tensor:
        return self._elementwise(other, np.add, "addition")

    def __sub__(self, other: Tensor) -> Tensor:
        return self._elementwise(other, np.subtract, "subtraction")

    def __mul__(self, other: Tensor) -> Tensor:
        return self._elementwise(other, np.multiply, "multiplication")

    def __truediv__(self, other: Tensor) -> Tensor:
        return self._elementwise(other, np.divide, "division")

    def matmul(self, other: Tensor) -> Tensor:
        """Matrix product of two 2-D tensors."""
        if self.ndim != 2 or other.ndim != 2:
            raise TensorError("matmul requires two 2-D tensors")
        if self.shape[1] != other.shape[0]:
            raise TensorError(
                f"inner dimensions do not match: {list(self.shape)} @ {list(other.shape)}"
            )
        return Tensor._from_array(self._array() @ other._array())

    __matmul__ = matmul

    def transpose(self) -> Tensor:
        if self.ndim != 2:
            raise TensorError("transpose requires a 2-D tensor")
        return Tensor._from_array(self._array().T.copy())

    def exp(self) -> Tensor:
        return Tensor(np.exp(self._data), self.shape)

    def log(self) -> Tensor:
        # Non-positive elements yield -inf/nan, as with the natural log
        with np.errstate(divide="ignore", invalid="ignore"):
            return Tensor(np.log(self._data), self.shape)

    # ── Statistics ───────────────────────────────────────────────

    def mean(self) -> float:
        return float(self._data.mean()) if self._data.size else math.nan

    def variance(self) -> float:
        """Population variance."""
        return float(self._data.var()) if self._data.size else math.nan

    def std_dev(self) -> float:
        return math.sqrt(self.variance())

    # ── Comparison and display ───────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Tensor(shape={list(self.shape)}, data={self.data})"

    __str__ = __repr__
