"""Tests for pagematrix.stack module."""

import math

import pytest

from pagematrix.exceptions import EmptyStackError, InvalidArgumentError
from pagematrix.matrix import Matrix2D
from pagematrix.stack import MatrixStack


class TestPushPop:
    """Test saving and restoring the current matrix."""

    def test_pop_restores_exact_matrix(self):
        stack = MatrixStack()
        stack.translate(5, 5)
        stack.push()
        stack.rotate(1.0)
        stack.scale(2)
        stack.translate(3, 4)
        stack.pop()
        assert stack.current == Matrix2D(1, 0, 5, 0, 1, 5)

    def test_nested_push_pop(self):
        stack = MatrixStack()
        stack.push()
        stack.translate(1, 0)
        stack.push()
        stack.translate(0, 1)
        assert stack.depth == 2
        stack.pop()
        assert stack.current == Matrix2D.translation(1, 0)
        stack.pop()
        assert stack.current == Matrix2D()
        assert len(stack) == 0

    def test_snapshot_is_a_copy(self):
        stack = MatrixStack()
        stack.push()
        stack.current.elements[2] = 42
        stack.pop()
        assert stack.current.elements[2] == 0

    def test_empty_pop_raises_and_keeps_matrix(self):
        stack = MatrixStack()
        stack.translate(7, 8)
        before = stack.current.array()
        with pytest.raises(EmptyStackError, match="pushMatrix"):
            stack.pop()
        assert stack.current.array() == before


class TestMutators:
    """Test the accumulating convenience calls."""

    def test_two_quarter_turns_make_half_turn(self):
        stack = MatrixStack()
        stack.rotate(math.pi / 2)
        stack.rotate(math.pi / 2)
        assert stack.current.isclose(Matrix2D.rotation(math.pi))

    def test_translations_accumulate(self):
        stack = MatrixStack()
        stack.translate(1, 2)
        stack.translate(3, 4)
        assert stack.current == Matrix2D.translation(4, 6)

    def test_apply(self):
        stack = MatrixStack()
        stack.apply(Matrix2D.scaling(2))
        stack.apply(Matrix2D.translation(1, 1))
        assert stack.current.apply_to_point(0, 0) == (2, 2)


class TestResetAndMatrix:
    """Test reset and the matrix register."""

    def test_reset_clears_and_translates(self):
        stack = MatrixStack()
        stack.push()
        stack.push()
        stack.rotate(0.3)
        stack.reset((10, 20))
        assert stack.depth == 0
        assert stack.current == Matrix2D.translation(10, 20)

    def test_reset_default_is_identity(self):
        stack = MatrixStack()
        stack.scale(3)
        assert stack.reset() == Matrix2D()

    def test_matrix_get_and_set(self):
        stack = MatrixStack()
        replacement = Matrix2D.translation(1, 2)
        assert stack.matrix(replacement) is replacement
        assert stack.matrix() is replacement

    def test_matrix_rejects_non_matrix(self):
        with pytest.raises(InvalidArgumentError, match="Matrix2D"):
            MatrixStack().matrix([1, 0, 0, 0, 1, 0])
