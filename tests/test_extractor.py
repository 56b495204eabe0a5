"""
Tests for schema-driven attribute extraction.
"""
import logging

from rt3scene.model.geometry_primitives import Color
from rt3scene.model.paramset import ParamSet
from rt3scene.model.values import ParamType, Value
from rt3scene.parser.extractor import parse_parameters, parse_single_attribute
from rt3scene.parser.schemas import FILM_PARAMS

SCHEMA = (
    (ParamType.STRING, "type"),
    (ParamType.INT, "x_res"),
    (ParamType.INT, "y_res"),
    (ParamType.COLOR, "color"),
    (ParamType.ARR_REAL, "crop_window"),
)


class TestParseParameters:
    """Per-attribute extraction into a ParamSet."""

    def test_all_attributes_extracted(self, element):
        node = element('<film type="image" x_res="800" y_res="600" color="1 0 0" crop_window="0 1 0 1"/>')
        ps = parse_parameters(node, SCHEMA)

        assert ps.retrieve("type", ParamType.STRING) == "image"
        assert ps.retrieve("x_res", ParamType.INT) == 800
        assert ps.retrieve("y_res", ParamType.INT) == 600
        assert ps.retrieve("color", ParamType.COLOR) == Color(1.0, 0.0, 0.0)
        assert ps.retrieve("crop_window", ParamType.ARR_REAL) == (0.0, 1.0, 0.0, 1.0)

    def test_malformed_attribute_is_isolated(self, element, caplog):
        node = element('<film type="image" x_res="eight hundred" y_res="600" color="1 0 0" crop_window="0 1 0 1"/>')
        with caplog.at_level(logging.WARNING, logger="rt3scene"):
            ps = parse_parameters(node, SCHEMA)

        assert len(ps) == len(SCHEMA) - 1
        assert ps.get("x_res") is None
        assert ps.retrieve("y_res", ParamType.INT) == 600
        assert "x_res" in caplog.text

    def test_wrong_token_count_leaves_attribute_absent(self, element):
        node = element('<background color="1 0" tl="1 0 0 1" tr="0 0 1"/>')
        ps = parse_parameters(node, (
            (ParamType.COLOR, "color"), (ParamType.COLOR, "tl"), (ParamType.COLOR, "tr"),
        ))
        assert ps.names() == ["tr"]

    def test_absent_attributes_are_silent(self, element, caplog):
        node = element('<film x_res="800"/>')
        with caplog.at_level(logging.WARNING, logger="rt3scene"):
            ps = parse_parameters(node, SCHEMA)

        assert ps.names() == ["x_res"]
        assert ps.get("y_res") is None
        assert caplog.records == []

    def test_undeclared_attributes_are_ignored(self, element):
        node = element('<film x_res="800" exposure="2.0"/>')
        ps = parse_parameters(node, SCHEMA)
        assert "exposure" not in ps

    def test_booleans_stay_strings(self, element):
        node = element('<film gamma_corrected="true"/>')
        ps = parse_parameters(node, FILM_PARAMS)
        assert ps.get("gamma_corrected") == Value(ParamType.STRING, "true")

    def test_fills_given_bundle(self, element):
        ps = ParamSet()
        ps.set("extra", Value(ParamType.INT, 1))
        result = parse_parameters(element('<film x_res="800"/>'), SCHEMA, ps_out=ps)
        assert result is ps
        assert ps.names() == ["extra", "x_res"]


class TestParseSingleAttribute:
    """Success/absence reporting."""

    def test_reports_outcome(self, element):
        node = element('<camera fovy="65" lens_radius="wide"/>')
        ps = ParamSet()
        assert parse_single_attribute(node, ps, ParamType.REAL, "fovy") is True
        assert parse_single_attribute(node, ps, ParamType.REAL, "lens_radius") is False
        assert parse_single_attribute(node, ps, ParamType.REAL, "focal_distance") is False
        assert ps.names() == ["fovy"]
