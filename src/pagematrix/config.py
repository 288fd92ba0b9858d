"""Session configuration loading and validation for pagematrix."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

import yaml

from pagematrix.canvas import CanvasMode
from pagematrix.exceptions import ConfigError, InvalidArgumentError
from pagematrix.matrix import Matrix2D
from pagematrix.reference import ReferencePoint
from pagematrix.units import Units, parse_dimension

if TYPE_CHECKING:
    from pagematrix.session import Session


class MatrixOp(str, Enum):
    """Steps a matrix program can contain."""

    TRANSLATE = "translate"
    ROTATE = "rotate"
    SCALE = "scale"
    PUSH = "push"
    POP = "pop"
    RESET = "reset"
    APPLY = "apply"


# Number of arguments each step takes; a tuple lists the allowed counts
_OP_ARITY: dict[MatrixOp, tuple[int, ...]] = {
    MatrixOp.TRANSLATE: (2,),
    MatrixOp.ROTATE: (1,),
    MatrixOp.SCALE: (1, 2),
    MatrixOp.PUSH: (0,),
    MatrixOp.POP: (0,),
    MatrixOp.RESET: (0,),
    MatrixOp.APPLY: (6,),
}


def _parse_enum(
    parser: Callable[[Any], Enum],
    enum_class: type[Enum],
    value: Any,
    field: str,
) -> Enum:
    """Parse a config value into an enum, converting errors to ConfigError."""
    try:
        return parser(value)
    except (ValueError, InvalidArgumentError):
        valid = ", ".join(str(e.value) for e in enum_class)
        raise ConfigError(
            f"Invalid value '{value}'",
            field=field,
            suggestion=f"Valid values are: {valid}",
        )


def _check_coordinate(value: Any, field: str) -> float | str:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ConfigError(
            f"Invalid coordinate '{value}'",
            field=field,
            suggestion="Use a number in the session units or a string like '10mm'",
        )
    if isinstance(value, str):
        try:
            parse_dimension(value)
        except InvalidArgumentError as e:
            raise ConfigError(str(e), field=field) from e
    return value


@dataclass
class MatrixStep:
    """One step of a matrix program, e.g. ``translate: [10, 20]``."""
    op: MatrixOp
    args: list[float] = field(default_factory=list)


@dataclass
class SessionConfig:
    """Initial session settings plus an optional matrix program.

    Origin coordinates are numbers in ``units`` or strings with their own
    unit (e.g. "10mm").
    """
    version: int = 1
    units: Units = Units.PT
    reference_point: ReferencePoint = ReferencePoint.TOP_LEFT
    canvas_mode: CanvasMode = CanvasMode.PAGE
    origin: tuple[float | str, float | str] = (0, 0)
    matrix: list[MatrixStep] = field(default_factory=list)


def parse_matrix_step(data: Any, index: int = 0) -> MatrixStep:
    """
    Parse a single matrix program step.

    A step is either a bare name (``push``) or a one-key mapping whose value
    is a number or a list of numbers (``rotate: 0.5``, ``scale: [2, 1]``).

    Args:
        data: Raw YAML value for the step
        index: Position of the step, for error messages

    Returns:
        Parsed MatrixStep

    Raises:
        ConfigError: If the step is malformed
    """
    step_field = f"matrix[{index}]"

    if isinstance(data, str):
        name, raw_args = data, []
    elif isinstance(data, dict) and len(data) == 1:
        name, raw_args = next(iter(data.items()))
    else:
        raise ConfigError(
            f"Invalid matrix step: {data!r}",
            field=step_field,
            suggestion="Use a step name such as 'push' or a mapping such as 'rotate: 0.5'",
        )

    op = _parse_enum(MatrixOp, MatrixOp, name, field=step_field)

    if raw_args is None:
        raw_args = []
    elif not isinstance(raw_args, list):
        raw_args = [raw_args]

    for arg in raw_args:
        if isinstance(arg, bool) or not isinstance(arg, (int, float)):
            raise ConfigError(f"Step '{op.value}' needs numeric arguments, got {arg!r}", field=step_field)

    if len(raw_args) not in _OP_ARITY[op]:
        counts = " or ".join(str(n) for n in _OP_ARITY[op])
        raise ConfigError(
            f"Step '{op.value}' takes {counts} argument(s), got {len(raw_args)}",
            field=step_field,
        )

    return MatrixStep(op=op, args=[float(a) for a in raw_args])


def parse_config(data: Any) -> SessionConfig:
    """Validate a loaded YAML document and build a SessionConfig."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML dictionary")

    version = data.get("version", 1)
    if version != 1:
        raise ConfigError(
            f"Unsupported configuration version: {version}",
            field="version",
            suggestion="Set 'version: 1'",
        )

    units = _parse_enum(Units.parse, Units, data.get("units", "pt"), field="units")
    reference_point = _parse_enum(
        ReferencePoint.parse, ReferencePoint, data.get("reference_point", "topLeft"),
        field="reference_point",
    )
    canvas_mode = _parse_enum(
        CanvasMode.parse, CanvasMode, data.get("canvas_mode", "page"), field="canvas_mode",
    )

    origin = data.get("origin", [0, 0])
    if not isinstance(origin, list) or len(origin) != 2:
        raise ConfigError(
            f"Invalid origin: {origin!r}",
            field="origin",
            suggestion="Use a two-item list such as [0, 0] or ['10mm', '5mm']",
        )
    origin = (_check_coordinate(origin[0], "origin[0]"), _check_coordinate(origin[1], "origin[1]"))

    steps = data.get("matrix") or []
    if not isinstance(steps, list):
        raise ConfigError("'matrix' must be a list of steps", field="matrix")

    return SessionConfig(
        version=version,
        units=units,
        reference_point=reference_point,
        canvas_mode=canvas_mode,
        origin=origin,
        matrix=[parse_matrix_step(step, i) for i, step in enumerate(steps)],
    )


def load_config(config_path: Path) -> SessionConfig:
    """Load and validate a session configuration file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return parse_config(data)


def run_matrix_program(session: "Session", steps: list[MatrixStep]) -> None:
    """Replay matrix steps on a session, in order.

    Raises:
        EmptyStackError: If a pop has no matching push
    """
    for step in steps:
        if step.op == MatrixOp.TRANSLATE:
            session.translate(*step.args)
        elif step.op == MatrixOp.ROTATE:
            session.rotate(step.args[0])
        elif step.op == MatrixOp.SCALE:
            session.scale(*step.args)
        elif step.op == MatrixOp.PUSH:
            session.push_matrix()
        elif step.op == MatrixOp.POP:
            session.pop_matrix()
        elif step.op == MatrixOp.RESET:
            session.reset_matrix()
        elif step.op == MatrixOp.APPLY:
            session.apply_matrix(Matrix2D(step.args))
