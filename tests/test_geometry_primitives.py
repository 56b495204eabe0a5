"""
Tests for the geometric payload types.
"""
import numpy as np
import pytest

from rt3scene.model.geometry_primitives import Point2i, Point3f, Spectrum, Vector3i


class TestPayloads:

    def test_to_array_keeps_component_order(self):
        np.testing.assert_array_equal(Point3f(1.0, 2.0, 3.0).to_array(), [1.0, 2.0, 3.0])

    def test_integer_payloads_give_integer_arrays(self):
        assert Vector3i(1, 2, 3).to_array().dtype == np.int64
        assert Point2i(640, 480).to_array().tolist() == [640, 480]

    def test_uniform_spectrum(self):
        assert Spectrum.uniform(0.5) == Spectrum(0.5, 0.5, 0.5)

    def test_payloads_are_immutable(self):
        with pytest.raises(AttributeError):
            Point3f(0.0, 0.0, 0.0).x = 1.0
