"""
Tests for attribute text decoding.
"""
import pytest

from rt3scene.errors import DecodeError
from rt3scene.model.geometry_primitives import (
    Color, Normal3f, Point2i, Point3f, Spectrum, Vector3f, Vector3i
)
from rt3scene.model.values import ParamType, Value
from rt3scene.parser.decoders import decode


class TestScalars:
    """INT, UINT, REAL and STRING."""

    @pytest.mark.parametrize("param_type,payload", [
        (ParamType.INT, 800),
        (ParamType.INT, -42),
        (ParamType.UINT, 0),
        (ParamType.UINT, 4096),
        (ParamType.REAL, 0.25),
        (ParamType.REAL, -1.5e-3),
        (ParamType.STRING, "gamma corrected, maybe"),
    ])
    def test_canonical_text_round_trip(self, param_type, payload):
        text = Value(param_type, payload).to_text()
        assert decode(text, param_type) == payload

    def test_surrounding_whitespace_is_allowed(self):
        assert decode("  800 ", ParamType.INT) == 800

    def test_real_accepts_integer_text(self):
        value = decode("65", ParamType.REAL)
        assert value == 65.0
        assert isinstance(value, float)

    @pytest.mark.parametrize("text", ["", "abc", "800px", "8.0", "1_000", "0x10", "800 600", "٨٠٠", "８００"])
    def test_int_rejects(self, text):
        with pytest.raises(DecodeError):
            decode(text, ParamType.INT)

    @pytest.mark.parametrize("text", ["-1", "1.0", "+", "٨٠٠"])
    def test_uint_rejects(self, text):
        with pytest.raises(DecodeError):
            decode(text, ParamType.UINT)

    @pytest.mark.parametrize("text", ["nan", "inf", "1.0f", "1e", "1e999", ".", "1,5", "٠.٥", "1e٣"])
    def test_real_rejects(self, text):
        with pytest.raises(DecodeError):
            decode(text, ParamType.REAL)

    def test_string_is_verbatim(self):
        assert decode("  spaced out ", ParamType.STRING) == "  spaced out "
        assert decode("", ParamType.STRING) == ""


class TestComposites:
    """Fixed-arity shapes."""

    def test_three_component_shapes(self):
        assert decode("0 1 0", ParamType.VEC3F) == Vector3f(0.0, 1.0, 0.0)
        assert decode("1 -2 3", ParamType.VEC3I) == Vector3i(1, -2, 3)
        assert decode("0 0 -10", ParamType.POINT3F) == Point3f(0.0, 0.0, -10.0)
        assert decode("0 1 0", ParamType.NORMAL3F) == Normal3f(0.0, 1.0, 0.0)
        assert decode("1.0 0.0 0.0", ParamType.COLOR) == Color(1.0, 0.0, 0.0)

    def test_point2i(self):
        assert decode("640 480", ParamType.POINT2I) == Point2i(640, 480)

    @pytest.mark.parametrize("param_type", [
        ParamType.VEC3F, ParamType.VEC3I, ParamType.POINT3F, ParamType.NORMAL3F, ParamType.COLOR,
    ])
    @pytest.mark.parametrize("text", ["1 2", "1 2 3 4"])
    def test_three_component_shapes_need_exactly_three_tokens(self, param_type, text):
        with pytest.raises(DecodeError):
            decode(text, param_type)

    def test_component_must_be_numeric(self):
        with pytest.raises(DecodeError):
            decode("1 two 3", ParamType.VEC3F)
        with pytest.raises(DecodeError):
            decode("1 2.5 3", ParamType.VEC3I)

    def test_spectrum_single_token_is_uniform(self):
        assert decode("0.1", ParamType.SPECTRUM) == Spectrum(0.1, 0.1, 0.1)
        assert decode("0.9 0.8 0.7", ParamType.SPECTRUM) == Spectrum(0.9, 0.8, 0.7)
        with pytest.raises(DecodeError):
            decode("0.9 0.8", ParamType.SPECTRUM)

    def test_color_has_no_single_token_form(self):
        with pytest.raises(DecodeError):
            decode("0.5", ParamType.COLOR)


class TestArrays:
    """Whitespace separated sequences of any length."""

    def test_real_array(self):
        assert decode("-8 8 -6 6", ParamType.ARR_REAL) == (-8.0, 8.0, -6.0, 6.0)

    def test_int_array_length_is_token_count(self):
        assert decode("0 1 2 0 2 3", ParamType.ARR_INT) == (0, 1, 2, 0, 2, 3)
        assert decode("7", ParamType.ARR_INT) == (7,)

    def test_string_array(self):
        assert decode("a b  c", ParamType.ARR_STRING) == ("a", "b", "c")

    def test_composite_array_groups_tokens(self):
        points = decode("-3 -0.5 -3  3 -0.5 -3", ParamType.ARR_POINT3F)
        assert points == (Point3f(-3.0, -0.5, -3.0), Point3f(3.0, -0.5, -3.0))

    def test_composite_array_needs_whole_elements(self):
        with pytest.raises(DecodeError):
            decode("0 1 0  0 1", ParamType.ARR_NORMAL3F)

    def test_one_bad_token_fails_the_array(self):
        with pytest.raises(DecodeError):
            decode("0 1 x 3", ParamType.ARR_INT)

    def test_empty_array_fails(self):
        with pytest.raises(DecodeError):
            decode("   ", ParamType.ARR_REAL)
