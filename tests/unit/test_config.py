"""Tests for pagematrix.config module."""

from pathlib import Path

import pytest

from pagematrix.canvas import CanvasMode
from pagematrix.config import (
    MatrixOp,
    MatrixStep,
    SessionConfig,
    load_config,
    parse_config,
    parse_matrix_step,
    run_matrix_program,
)
from pagematrix.exceptions import ConfigError, EmptyStackError
from pagematrix.matrix import Matrix2D
from pagematrix.reference import ReferencePoint
from pagematrix.session import Session
from pagematrix.units import Units


class TestConfigError:
    """Test ConfigError formatting."""

    def test_message_only(self):
        assert str(ConfigError("Something went wrong")) == "Something went wrong"

    def test_with_field_and_suggestion(self):
        error = ConfigError("Invalid value 'x'", field="units", suggestion="Use mm")
        text = str(error)
        assert "Invalid value 'x'" in text
        assert "field=units" in text
        assert text.endswith("Suggestion: Use mm")
        assert error.field == "units"


class TestParseMatrixStep:
    """Test matrix program step parsing."""

    def test_bare_name(self):
        assert parse_matrix_step("push") == MatrixStep(op=MatrixOp.PUSH, args=[])

    def test_scalar_argument(self):
        assert parse_matrix_step({"rotate": 0.5}) == MatrixStep(op=MatrixOp.ROTATE, args=[0.5])

    def test_list_argument(self):
        step = parse_matrix_step({"translate": [10, 20]})
        assert step.op is MatrixOp.TRANSLATE
        assert step.args == [10.0, 20.0]

    def test_scale_one_or_two(self):
        assert parse_matrix_step({"scale": 2}).args == [2.0]
        assert parse_matrix_step({"scale": [2, 3]}).args == [2.0, 3.0]

    def test_null_argument(self):
        assert parse_matrix_step({"reset": None}).args == []

    def test_unknown_op(self):
        with pytest.raises(ConfigError, match="Invalid value 'spin'") as exc_info:
            parse_matrix_step("spin", 3)
        assert exc_info.value.field == "matrix[3]"
        assert "translate" in exc_info.value.suggestion

    def test_wrong_arity(self):
        with pytest.raises(ConfigError, match="takes 2 argument"):
            parse_matrix_step({"translate": [1]})

    def test_non_numeric_argument(self):
        with pytest.raises(ConfigError, match="numeric"):
            parse_matrix_step({"rotate": "a"})

    @pytest.mark.parametrize("data", [42, {"push": None, "pop": None}, ["push"]])
    def test_malformed(self, data):
        with pytest.raises(ConfigError, match="Invalid matrix step"):
            parse_matrix_step(data)


class TestParseConfig:
    """Test whole-document validation."""

    def test_defaults(self, minimal_config_dict):
        assert parse_config(minimal_config_dict) == SessionConfig()

    def test_full(self, full_config_dict):
        config = parse_config(full_config_dict)
        assert config.units is Units.MM
        assert config.reference_point is ReferencePoint.CENTER
        assert config.canvas_mode is CanvasMode.FACING_PAGES
        assert config.origin == ("10mm", 0)
        assert [s.op for s in config.matrix] == [
            MatrixOp.TRANSLATE, MatrixOp.PUSH, MatrixOp.ROTATE, MatrixOp.SCALE, MatrixOp.POP,
        ]

    def test_not_a_dict(self):
        with pytest.raises(ConfigError, match="dictionary"):
            parse_config(["units", "mm"])

    def test_version(self):
        with pytest.raises(ConfigError, match="Unsupported configuration version"):
            parse_config({"version": 2})

    @pytest.mark.parametrize("field_name, value", [
        ("units", "furlong"),
        ("reference_point", "middle"),
        ("canvas_mode", "spread"),
    ])
    def test_invalid_enum(self, field_name, value):
        with pytest.raises(ConfigError, match="Valid values are") as exc_info:
            parse_config({field_name: value})
        assert exc_info.value.field == field_name

    @pytest.mark.parametrize("origin", [5, [1, 2, 3], ["abc", 0], [True, 0]])
    def test_invalid_origin(self, origin):
        with pytest.raises(ConfigError):
            parse_config({"origin": origin})

    def test_matrix_not_a_list(self):
        with pytest.raises(ConfigError, match="list of steps"):
            parse_config({"matrix": {"rotate": 1}})


class TestLoadConfig:
    """Test reading configuration files."""

    def test_load(self, full_config_file):
        config = load_config(full_config_file)
        assert config.units is Units.MM
        assert len(config.matrix) == 5

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "missing.yaml")

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("")
        with pytest.raises(ConfigError, match="dictionary"):
            load_config(path)

    def test_yaml_bare_steps(self, temp_dir):
        path = temp_dir / "steps.yaml"
        path.write_text("matrix:\n  - push\n  - translate: [1, 2]\n  - pop\n")
        config = load_config(Path(path))
        assert [s.op for s in config.matrix] == [MatrixOp.PUSH, MatrixOp.TRANSLATE, MatrixOp.POP]


class TestRunMatrixProgram:
    """Test replaying steps on a session."""

    def test_balanced_push_pop(self):
        session = Session()
        steps = parse_config({"matrix": [
            {"translate": [10, 20]}, "push", {"rotate": 0.5}, {"scale": 2}, "pop",
        ]}).matrix
        run_matrix_program(session, steps)
        assert session.matrix() == Matrix2D.translation(10, 20)

    def test_apply_and_reset(self):
        session = Session()
        run_matrix_program(session, [
            MatrixStep(MatrixOp.SCALE, [3.0]),
            MatrixStep(MatrixOp.RESET),
            MatrixStep(MatrixOp.APPLY, [1, 0, 5, 0, 1, 5]),
        ])
        assert session.matrix() == Matrix2D.translation(5, 5)

    def test_unbalanced_pop(self):
        with pytest.raises(EmptyStackError):
            run_matrix_program(Session(), [MatrixStep(MatrixOp.POP)])
