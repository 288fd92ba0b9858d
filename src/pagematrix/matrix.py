"""2D affine matrix used by the matrix stack and the transform facade.

A ``Matrix2D`` stores six coefficients ``[a, b, c, d, e, f]`` of the
row-major 2x3 transform::

    x' = a*x + b*y + c
    y' = d*x + e*y + f

Mutating operations (``compose``, ``pre_compose``, ``translate``, ``scale``,
``rotate``) work in place and return the matrix so calls can be chained,
the same way pypdf's ``Transformation`` chains.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from pagematrix.constants import SINGULAR_TOLERANCE
from pagematrix.exceptions import InvalidArgumentError, SingularMatrixError

IDENTITY = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0)


def _coefficients(args: tuple) -> list[float]:
    """Normalize constructor/``set`` arguments to a list of six floats."""
    if len(args) == 1 and isinstance(args[0], Matrix2D):
        return args[0].array()
    if len(args) == 1 and isinstance(args[0], Sequence) and not isinstance(args[0], str):
        args = tuple(args[0])
    if len(args) != 6:
        raise InvalidArgumentError(
            "A matrix needs six coefficients [a, b, c, d, e, f]",
            context={"got": len(args)},
        )
    try:
        return [float(v) for v in args]
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Matrix coefficients must be numbers: {args!r}") from e


class Matrix2D:
    """An affine transform of the plane."""

    __slots__ = ("elements",)

    def __init__(self, *args):
        self.elements: list[float] = list(IDENTITY) if not args else _coefficients(args)

    # -- construction ------------------------------------------------------

    @classmethod
    def identity(cls) -> Matrix2D:
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> Matrix2D:
        return cls(1, 0, tx, 0, 1, ty)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> Matrix2D:
        return cls(sx, 0, 0, 0, sx if sy is None else sy, 0)

    @classmethod
    def rotation(cls, angle: float) -> Matrix2D:
        """Rotation by ``angle`` radians, ``[cos, sin, 0, -sin, cos, 0]``."""
        cos, sin = math.cos(angle), math.sin(angle)
        return cls(cos, sin, 0, -sin, cos, 0)

    def set(self, *args) -> Matrix2D:
        """Replace all coefficients (six numbers, a list, or another matrix)."""
        self.elements = _coefficients(args)
        return self

    def reset(self) -> Matrix2D:
        """Reset to the identity."""
        self.elements = list(IDENTITY)
        return self

    def copy(self) -> Matrix2D:
        return Matrix2D(self.elements)

    get = copy

    def array(self) -> list[float]:
        """Return a copy of the coefficients as a list."""
        return list(self.elements)

    # -- composition ---------------------------------------------------------

    def compose(self, other: Matrix2D | Sequence[float]) -> Matrix2D:
        """Post-multiply: the result maps ``p`` to ``self(other(p))``."""
        sa, sb, sc, sd, se, sf = _coefficients((other,))
        a, b, c, d, e, f = self.elements
        self.elements = [
            a * sa + b * sd,
            a * sb + b * se,
            a * sc + b * sf + c,
            d * sa + e * sd,
            d * sb + e * se,
            d * sc + e * sf + f,
        ]
        return self

    def pre_compose(self, other: Matrix2D | Sequence[float]) -> Matrix2D:
        """Pre-multiply: the result maps ``p`` to ``other(self(p))``."""
        result = Matrix2D(other).compose(self)
        self.elements = result.elements
        return self

    def translate(self, tx: float, ty: float) -> Matrix2D:
        a, b, c, d, e, f = self.elements
        self.elements[2] = tx * a + ty * b + c
        self.elements[5] = tx * d + ty * e + f
        return self

    def inv_translate(self, tx: float, ty: float) -> Matrix2D:
        return self.translate(-tx, -ty)

    def scale(self, sx: float, sy: float | None = None) -> Matrix2D:
        """Scale by ``sx`` horizontally and ``sy`` vertically (``sx`` if omitted)."""
        if sy is None:
            sy = sx
        self.elements[0] *= sx
        self.elements[1] *= sy
        self.elements[3] *= sx
        self.elements[4] *= sy
        return self

    def inv_scale(self, sx: float, sy: float | None = None) -> Matrix2D:
        if sy is None:
            sy = sx
        return self.scale(1 / sx, 1 / sy)

    def rotate(self, angle: float) -> Matrix2D:
        """Compose a rotation by ``angle`` radians."""
        return self.compose(Matrix2D.rotation(angle))

    # -- inversion -----------------------------------------------------------

    def determinant(self) -> float:
        a, b, _, d, e, _ = self.elements
        return a * e - b * d

    def invert(self) -> bool:
        """Invert in place.

        Returns:
            False (leaving the matrix untouched) if the matrix is singular,
            True otherwise.
        """
        det = self.determinant()
        if abs(det) <= SINGULAR_TOLERANCE:
            return False
        a, b, c, d, e, f = self.elements
        self.elements = [
            e / det,
            -b / det,
            (b * f - e * c) / det,
            -d / det,
            a / det,
            (d * c - a * f) / det,
        ]
        return True

    def inverted(self) -> Matrix2D:
        """Return the inverse as a new matrix.

        Raises:
            SingularMatrixError: If the determinant is (nearly) zero
        """
        result = self.copy()
        if not result.invert():
            raise SingularMatrixError(
                "Matrix is not invertible",
                context={"determinant": self.determinant()},
            )
        return result

    # -- application ---------------------------------------------------------

    def apply_to_point(self, x: float, y: float) -> tuple[float, float]:
        a, b, c, d, e, f = self.elements
        return a * x + b * y + c, d * x + e * y + f

    def apply_to_points(self, points: Iterable[tuple[float, float]]) -> list[tuple[float, float]]:
        return [self.apply_to_point(x, y) for x, y in points]

    def to_anchored_form(self, anchor_x: float, anchor_y: float) -> tuple[float, ...]:
        """Coefficients of this transform taken about an anchor point.

        Hosts apply matrices relative to the coordinate origin; the result
        moves the anchor to the origin, applies this matrix and moves the
        anchor back, so the anchor itself stays fixed.

        This is ``T(a)∘M∘T(-a)``. The older ``T(-a)∘M∘T(a)`` form keeps the
        point ``-a`` fixed instead, which only matches for an anchor at the
        origin.
        """
        anchored = self.copy()
        anchored.compose(Matrix2D.translation(-anchor_x, -anchor_y))
        anchored.pre_compose(Matrix2D.translation(anchor_x, anchor_y))
        return tuple(anchored.elements)

    # -- comparison & display ----------------------------------------------

    def isclose(self, other: Matrix2D, abs_tol: float = 1e-9) -> bool:
        return all(
            math.isclose(x, y, rel_tol=0.0, abs_tol=abs_tol)
            for x, y in zip(self.elements, other.elements)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix2D):
            return NotImplemented
        return self.elements == other.elements

    __hash__ = None

    def __iter__(self):
        return iter(self.elements)

    def __repr__(self) -> str:
        coeffs = ", ".join(f"{v:g}" for v in self.elements)
        return f"Matrix2D({coeffs})"

    def format(self, decimals: int = 4) -> str:
        """Render the two rows with the columns aligned."""
        largest = max(abs(v) for v in self.elements)
        int_digits = len(str(int(largest)))
        width = int_digits + decimals + 2  # sign and decimal point
        rows = (self.elements[:3], self.elements[3:])
        return "\n".join(
            " ".join(f"{v: {width}.{decimals}f}" for v in row) for row in rows
        )
