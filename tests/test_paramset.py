"""
Tests for the parameter bundle.
"""
import pytest

from rt3scene.errors import ParamTypeError
from rt3scene.model.paramset import ParamSet
from rt3scene.model.values import ParamType, Value


class TestParamSet:
    """Name-keyed storage of typed values."""

    def test_absent_key_returns_none(self):
        ps = ParamSet()
        assert ps.get("x_res") is None
        assert "x_res" not in ps
        assert len(ps) == 0

    def test_set_and_get(self):
        ps = ParamSet()
        ps.set("x_res", Value(ParamType.INT, 800))
        assert ps.get("x_res") == Value(ParamType.INT, 800)
        assert "x_res" in ps
        assert ps.names() == ["x_res"]

    def test_last_write_wins(self):
        ps = ParamSet()
        ps.set("type", Value(ParamType.STRING, "image"))
        ps.set("type", Value(ParamType.STRING, "other"))
        assert ps.retrieve("type", ParamType.STRING) == "other"
        assert len(ps) == 1

    def test_retrieve_default_when_absent(self):
        ps = ParamSet()
        assert ps.retrieve("fovy", ParamType.REAL, 30.0) == 30.0

    def test_retrieve_wrong_shape_raises(self):
        ps = ParamSet()
        ps.set("fovy", Value(ParamType.REAL, 45.0))
        with pytest.raises(ParamTypeError):
            ps.retrieve("fovy", ParamType.INT)

    @pytest.mark.parametrize("text,expected", [
        ("true", True), ("TRUE", True), ("yes", True), ("on", True), ("1", True),
        ("false", False), ("No", False), ("off", False), ("0", False),
    ])
    def test_retrieve_bool(self, text, expected):
        ps = ParamSet()
        ps.set("gamma_corrected", Value(ParamType.STRING, text))
        assert ps.retrieve_bool("gamma_corrected") is expected

    def test_retrieve_bool_default_and_garbage(self):
        ps = ParamSet()
        assert ps.retrieve_bool("backface_cull", default=True) is True
        ps.set("backface_cull", Value(ParamType.STRING, "maybe"))
        with pytest.raises(ValueError):
            ps.retrieve_bool("backface_cull")

    def test_to_dict_and_iteration(self):
        ps = ParamSet()
        ps.set("x_res", Value(ParamType.INT, 800))
        ps.set("y_res", Value(ParamType.INT, 600))
        assert ps.to_dict() == {"x_res": 800, "y_res": 600}
        assert sorted(ps) == ["x_res", "y_res"]
