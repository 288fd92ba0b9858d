"""Current transformation matrix and the push/pop matrix stack."""

from pagematrix.exceptions import EmptyStackError, InvalidArgumentError
from pagematrix.logging_config import get_logger
from pagematrix.matrix import Matrix2D

logger = get_logger(__name__)


class MatrixStack:
    """Holds the current matrix and the snapshots saved by ``push``.

    Snapshots are copies, so mutating the current matrix after a push never
    changes what a later pop restores.
    """

    def __init__(self):
        self.current = Matrix2D()
        self._saved: list[list[float]] = []

    @property
    def depth(self) -> int:
        return len(self._saved)

    def __len__(self) -> int:
        return len(self._saved)

    def matrix(self, matrix: Matrix2D | None = None) -> Matrix2D:
        """Get the current matrix, replacing it first if one is given."""
        if matrix is not None:
            if not isinstance(matrix, Matrix2D):
                raise InvalidArgumentError(
                    f"matrix() expects a Matrix2D, got {type(matrix).__name__}"
                )
            self.current = matrix
        return self.current

    def push(self) -> None:
        self._saved.append(self.current.array())

    def pop(self) -> Matrix2D:
        """Restore the most recently pushed matrix.

        Raises:
            EmptyStackError: If there is no matching push
        """
        if not self._saved:
            raise EmptyStackError("popMatrix(), missing a pushMatrix() to go with that popMatrix()")
        self.current.set(self._saved.pop())
        return self.current

    def reset(self, origin: tuple[float, float] = (0.0, 0.0)) -> Matrix2D:
        """Clear the stack and start over from the origin offset."""
        self._saved.clear()
        self.current = Matrix2D()
        self.current.translate(*origin)
        logger.debug("Matrix reset, origin at %s", origin)
        return self.current

    def apply(self, matrix: Matrix2D) -> Matrix2D:
        return self.current.compose(matrix)

    def translate(self, tx: float, ty: float) -> Matrix2D:
        return self.current.translate(tx, ty)

    def rotate(self, angle: float) -> Matrix2D:
        return self.current.rotate(angle)

    def scale(self, sx: float, sy: float | None = None) -> Matrix2D:
        return self.current.scale(sx, sy)
