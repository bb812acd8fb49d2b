"""Tests for the tensor collaborator."""

from __future__ import annotations

import math

import numpy as np
import pytest

from putlang.tensor import Tensor, TensorError


@pytest.fixture
def t1():
    return Tensor([1.0, 2.0, 3.0, 4.0], [2, 2])


@pytest.fixture
def t2():
    return Tensor([5.0, 6.0, 7.0, 8.0], [2, 2])


class TestTensorConstruction:
    def test_creation(self, t1):
        assert t1.shape == (2, 2)
        assert t1.data == [1.0, 2.0, 3.0, 4.0]

    def test_zeros(self):
        t = Tensor.zeros([2, 3])
        assert t.shape == (2, 3)
        assert t.data == [0.0] * 6

    def test_buffer_shape_mismatch(self):
        with pytest.raises(ValueError):
            Tensor([1.0, 2.0, 3.0], [2, 2])

    def test_str(self, t1):
        assert str(t1) == "Tensor(shape=[2, 2], data=[1.0, 2.0, 3.0, 4.0])"


class TestTensorIndexing:
    def test_get(self, t1):
        assert t1.get([0, 0]) == 1.0
        assert t1.get([0, 1]) == 2.0
        assert t1.get([1, 1]) == 4.0

    def test_get_out_of_bounds(self, t1):
        assert t1.get([2, 0]) is None
        assert t1.get([0, -1]) is None

    def test_get_wrong_rank(self, t1):
        assert t1.get([0]) is None
        assert t1.get([0, 0, 0]) is None

    def test_row_major_layout(self):
        t = Tensor(range(24), [2, 3, 4])
        assert t.get([1, 2, 3]) == 23.0
        assert t.get([1, 0, 0]) == 12.0
        assert t.get([0, 1, 0]) == 4.0

    def test_set(self, t1):
        t1.set([0, 1], 5.0)
        assert t1.get([0, 1]) == 5.0

    def test_set_out_of_bounds(self, t1):
        with pytest.raises(TensorError):
            t1.set([2, 0], 6.0)
        assert t1.data == [1.0, 2.0, 3.0, 4.0]

    def test_set_does_not_write_through_to_source_array(self):
        buf = np.array([1.0, 2.0, 3.0, 4.0])
        t = Tensor(buf, [2, 2])
        t.set([0, 0], 99.0)
        assert buf[0] == 1.0
        assert t.get([0, 0]) == 99.0


class TestTensorArithmetic:
    def test_add(self, t1, t2):
        assert (t1 + t2).data == [6.0, 8.0, 10.0, 12.0]

    def test_sub(self, t1, t2):
        assert (t1 - t2).data == [-4.0, -4.0, -4.0, -4.0]

    def test_mul(self, t1, t2):
        assert (t1 * t2).data == [5.0, 12.0, 21.0, 32.0]

    def test_div(self, t1, t2):
        assert (t2 / t1).data == [5.0, 3.0, 7.0 / 3.0, 2.0]

    def test_shape_mismatch(self, t1):
        with pytest.raises(TensorError):
            t1 + Tensor([1.0, 2.0], [2])

    def test_operands_unchanged(self, t1, t2):
        t1 + t2
        assert t1.data == [1.0, 2.0, 3.0, 4.0]

    def test_matmul(self, t1, t2):
        assert t1.matmul(t2) == Tensor([19.0, 22.0, 43.0, 50.0], [2, 2])
        assert (t1 @ t2).data == [19.0, 22.0, 43.0, 50.0]

    def test_matmul_rectangular(self):
        a = Tensor([1, 2, 3, 4, 5, 6], [2, 3])
        b = Tensor([1, 0, 0, 1, 1, 1], [3, 2])
        result = a.matmul(b)
        assert result.shape == (2, 2)
        assert result.data == [4.0, 5.0, 10.0, 11.0]

    def test_matmul_inner_mismatch(self, t1):
        with pytest.raises(TensorError):
            t1.matmul(Tensor([1, 2, 3], [3, 1]))

    def test_matmul_requires_2d(self, t1):
        with pytest.raises(TensorError):
            t1.matmul(Tensor([1, 2], [2]))

    def test_transpose(self):
        t = Tensor([1, 2, 3, 4, 5, 6], [2, 3]).transpose()
        assert t.shape == (3, 2)
        assert t.data == [1.0, 4.0, 2.0, 5.0, 3.0, 6.0]

    def test_exp_log_roundtrip(self, t1):
        assert t1.exp().log().data == pytest.approx(t1.data)

    def test_log_of_zero(self):
        assert Tensor.zeros([1]).log().data == [-math.inf]


class TestTensorStatistics:
    def test_mean(self, t1):
        assert t1.mean() == 2.5

    def test_variance(self, t1):
        assert t1.variance() == pytest.approx(1.25)

    def test_std_dev(self, t1):
        assert t1.std_dev() == pytest.approx(math.sqrt(1.25))

    def test_empty_mean_is_nan(self):
        assert math.isnan(Tensor([], [0]).mean())
