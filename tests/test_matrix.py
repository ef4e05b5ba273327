"""
Unit tests for SSS SDK matrix module
"""

import pytest

from sss_sdk.errors import InsufficientPointsError, InvalidArgumentError, SingularMatrixError
from sss_sdk.finite_field import BitwiseGF256
from sss_sdk.matrix import GF256Matrix
from sss_sdk.polynomial import GF256Polynomial, Point


@pytest.fixture
def linear_system():
    """System for 5 + 3x sampled at x=1 and x=2"""
    return GF256Matrix([[1, 1, 6], [2, 1, 3]])


class TestConstruction:
    """Test cases for building matrices"""

    def test_shape(self, linear_system):
        assert linear_system.row_count == 2
        assert linear_system.column_count == 3

    def test_rejects_wrong_shape(self):
        with pytest.raises(InvalidArgumentError, match="NxN\\+1"):
            GF256Matrix([[1, 2], [3, 4]])

    def test_rejects_empty(self):
        with pytest.raises(InvalidArgumentError):
            GF256Matrix([])

    def test_copies_input(self):
        rows = [[1, 1, 6], [2, 1, 3]]
        matrix = GF256Matrix(rows)
        rows[0][0] = 99

        assert matrix.row(0) == [1, 1, 6]

    def test_from_points(self):
        matrix = GF256Matrix.from_points([Point(1, 10), Point(2, 20), Point(3, 30)])

        assert matrix.rows == [
            [1, 1, 1, 10],
            [4, 2, 1, 20],
            [5, 3, 1, 30],
        ]

    def test_from_points_rejects_empty(self):
        with pytest.raises(InvalidArgumentError):
            GF256Matrix.from_points([])

    def test_accessors(self, linear_system):
        assert linear_system.row(1) == [2, 1, 3]
        assert linear_system.column(0) == [1, 2]
        assert linear_system.last_column() == [6, 3]

        with pytest.raises(IndexError):
            linear_system.row(2)
        with pytest.raises(IndexError):
            linear_system.column(3)


class TestStages:
    """Test cases for each elimination stage on its own"""

    def test_eliminate_forward(self, linear_system):
        assert linear_system.eliminate_forward() == GF256Matrix([[1, 1, 6], [0, 3, 15]])

    def test_substitute_backward(self):
        upper = GF256Matrix([[1, 1, 6], [0, 3, 15]])
        assert upper.substitute_backward() == GF256Matrix([[1, 0, 3], [0, 3, 15]])

    def test_normalize(self):
        diagonal = GF256Matrix([[1, 0, 3], [0, 3, 15]])
        assert diagonal.normalize() == GF256Matrix([[1, 0, 3], [0, 1, 5]])

    def test_stages_do_not_mutate(self, linear_system):
        before = linear_system.rows

        linear_system.eliminate_forward()
        linear_system.substitute_backward()
        linear_system.normalize()
        linear_system.solve()

        assert linear_system.rows == before

    def test_forward_swaps_zero_pivot(self):
        matrix = GF256Matrix([[0, 1, 5], [1, 0, 7]])
        assert matrix.eliminate_forward() == GF256Matrix([[1, 0, 7], [0, 1, 5]])


class TestSolve:
    """Test cases for the full Gaussian elimination"""

    def test_solve_linear(self, linear_system):
        solved = linear_system.solve()

        assert solved == GF256Matrix([[1, 0, 3], [0, 1, 5]])
        # descending degree: 3x + 5
        assert solved.last_column() == [3, 5]

    def test_solve_recovers_polynomial(self):
        polynomial = GF256Polynomial([200, 13, 0, 77, 1])
        points = [Point(x, polynomial.evaluate(x)) for x in (1, 2, 3, 7, 254)]

        solution = GF256Matrix.from_points(points).solve().last_column()

        assert solution[::-1] == list(polynomial.coefficients)

    def test_solve_with_alternate_field(self):
        field = BitwiseGF256()
        polynomial = GF256Polynomial([9, 8, 7], field)
        points = [Point(x, polynomial.evaluate(x)) for x in (5, 6, 7)]

        solution = GF256Matrix.from_points(points, field).solve().last_column()

        assert solution == [7, 8, 9]

    def test_duplicate_points_are_singular(self):
        matrix = GF256Matrix.from_points([Point(1, 6), Point(1, 7)])

        with pytest.raises(SingularMatrixError):
            matrix.solve()

    def test_missing_pivot_raises(self):
        matrix = GF256Matrix([[0, 1, 1], [0, 2, 3]])

        with pytest.raises(SingularMatrixError, match="column 0") as exc_info:
            matrix.eliminate_forward()
        assert exc_info.value.details["column"] == 0

    def test_zero_last_diagonal_raises(self):
        matrix = GF256Matrix([[1, 1, 6], [1, 1, 7]])

        with pytest.raises(InsufficientPointsError):
            matrix.eliminate_forward()

    def test_normalize_zero_diagonal_raises(self):
        with pytest.raises(SingularMatrixError):
            GF256Matrix([[1, 0, 3], [0, 0, 5]]).normalize()
