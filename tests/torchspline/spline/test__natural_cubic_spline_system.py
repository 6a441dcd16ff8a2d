"""Tests for the natural cubic spline constraint system."""

import pytest
import torch


class TestNaturalCubicSplineSystem:
    def test_single_segment(self):
        """Test the 4x4 system of two knots."""
        from torchspline.spline import natural_cubic_spline_system

        x = torch.tensor([1.0, 2.0], dtype=torch.float64)
        y = torch.tensor([3.0, 5.0], dtype=torch.float64)

        A, rhs = natural_cubic_spline_system(x, y)

        # Rows: value at x0, value at x1, S''(x0) = 0, S''(x1) = 0
        expected_A = torch.tensor(
            [
                [1.0, 1.0, 1.0, 1.0],
                [8.0, 4.0, 2.0, 1.0],
                [6.0, 2.0, 0.0, 0.0],
                [12.0, 2.0, 0.0, 0.0],
            ],
            dtype=torch.float64,
        )
        expected_rhs = torch.tensor([3.0, 5.0, 0.0, 0.0], dtype=torch.float64)

        torch.testing.assert_close(A, expected_A, atol=0, rtol=0)
        torch.testing.assert_close(rhs, expected_rhs, atol=0, rtol=0)

    def test_two_segments(self):
        """Test the block layout of the 8x8 system of three knots."""
        from torchspline.spline import natural_cubic_spline_system

        x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        y = torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64)

        A, rhs = natural_cubic_spline_system(x, y)

        expected_A = torch.tensor(
            [
                # segment 0: values, S_0' = S_1' and S_0'' = S_1'' at x = 1
                [0, 0, 0, 1, 0, 0, 0, 0],
                [1, 1, 1, 1, 0, 0, 0, 0],
                [3, 2, 1, 0, -3, -2, -1, 0],
                [6, 2, 0, 0, -6, -2, 0, 0],
                # segment 1: values, then the two natural boundary rows
                [0, 0, 0, 0, 1, 1, 1, 1],
                [0, 0, 0, 0, 8, 4, 2, 1],
                [0, 2, 0, 0, 0, 0, 0, 0],
                [0, 0, 0, 0, 12, 2, 0, 0],
            ],
            dtype=torch.float64,
        )
        expected_rhs = torch.tensor(
            [0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0], dtype=torch.float64
        )

        torch.testing.assert_close(A, expected_A, atol=0, rtol=0)
        torch.testing.assert_close(rhs, expected_rhs, atol=0, rtol=0)

    @pytest.mark.parametrize("n", [2, 3, 5, 10])
    def test_system_size(self, n):
        """Test that n knots give a square system of size 4 * (n - 1)."""
        from torchspline.spline import natural_cubic_spline_system

        x = torch.linspace(0, 1, n, dtype=torch.float64)
        y = torch.zeros(n, dtype=torch.float64)

        A, rhs = natural_cubic_spline_system(x, y)

        assert A.shape == (4 * (n - 1), 4 * (n - 1))
        assert rhs.shape == (4 * (n - 1),)

    def test_fit_solves_system(self):
        """Test that the fitted coefficients satisfy every constraint row."""
        from torchspline.spline import (
            natural_cubic_spline_fit,
            natural_cubic_spline_system,
        )

        x = torch.tensor([0.0, 0.5, 0.8, 1.0], dtype=torch.float64)
        y = torch.tensor([10.0, 8.0, 5.0, 6.0], dtype=torch.float64)

        A, rhs = natural_cubic_spline_system(x, y)
        spline = natural_cubic_spline_fit(x, y)

        coeffs = torch.stack(
            [spline.a, spline.b, spline.c, spline.d], dim=1
        ).flatten()

        torch.testing.assert_close(A @ coeffs, rhs, atol=1e-9, rtol=0)

    def test_system_follows_dtype(self):
        """Test that the system is built in the dtype of the knots."""
        from torchspline.spline import natural_cubic_spline_system

        x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float32)
        y = torch.tensor([1.0, 0.0, 1.0], dtype=torch.float32)

        A, rhs = natural_cubic_spline_system(x, y)

        assert A.dtype == torch.float32
        assert rhs.dtype == torch.float32
