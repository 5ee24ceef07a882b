"""
Tests for the generator registry.

These tests verify parameter resolution, presets and that every registered
builder produces a valid series at its defaults.
"""

import pytest

from timeseries_sim.generators.models import ARParams, generate_ar
from timeseries_sim.generators.registry import (
    GENERATORS,
    generate,
    get_generator,
    resolve_params,
)

GENERATOR_NAMES = {
    "white_noise", "trend", "seasonal", "ar", "ma", "arima",
    "stock_price", "retail_sales", "gdp",
}


class TestRegistryMetadata:
    """Tests for the registry entries themselves."""

    def test_expected_generators(self):
        assert set(GENERATORS) == GENERATOR_NAMES

    @pytest.mark.parametrize("name", list(GENERATORS))
    def test_defaults_within_range(self, name: str):
        for param_name, param_info in GENERATORS[name]["params"].items():
            assert param_info["min"] <= param_info["default"] <= param_info["max"], param_name
            assert param_info["type"] in ("int", "float")

    @pytest.mark.parametrize("name", list(GENERATORS))
    def test_presets_use_declared_params(self, name: str):
        info = GENERATORS[name]
        for preset in info["presets"].values():
            assert set(preset) <= set(info["params"])

    @pytest.mark.parametrize("name", list(GENERATORS))
    def test_default_generation(self, name: str):
        ts = generate(name, length=120, seed=42)
        assert len(ts) == 120
        assert [p.time for p in ts] == list(range(120))

    def test_unknown_generator(self):
        with pytest.raises(KeyError, match="Unknown generator"):
            get_generator("garch")


class TestResolveParams:
    """Tests for defaults, presets and overrides."""

    def test_defaults(self):
        assert resolve_params("ar") == {"phi1": 0.7, "phi2": 0.0, "phi3": 0.0, "sigma": 1.0}

    def test_preset_applied(self):
        params = resolve_params("ar", preset="oscillating")
        assert params["phi1"] == -0.6

    def test_override_beats_preset(self):
        params = resolve_params("ar", {"phi1": "0.25"}, preset="persistent")
        assert params["phi1"] == 0.25

    def test_int_coercion(self):
        params = resolve_params("arima", {"p": "2", "d": 0})
        assert params["p"] == 2
        assert isinstance(params["p"], int)
        assert params["d"] == 0

    def test_unknown_param(self):
        with pytest.raises(ValueError, match="Unknown parameter"):
            resolve_params("ma", {"phi1": 0.5})

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            resolve_params("trend", preset="persistent")

    def test_bad_value(self):
        with pytest.raises(ValueError, match="expects float"):
            resolve_params("ar", {"sigma": "wide"})


class TestBuilders:
    """Tests for the flat-keyword builders."""

    def test_ar_builder_matches_generator(self):
        ts = generate("ar", length=50, seed=3, overrides={"phi1": 0.4, "phi2": 0.2})
        expected = generate_ar(50, ARParams(phi=(0.4, 0.2, 0.0), sigma=1.0), seed=3)
        assert ts.points == expected.points

    def test_arima_builder_uses_first_p_coefficients(self):
        ts = generate("arima", length=30, seed=1, overrides={"p": 2, "d": 0, "q": 0})
        assert ts.parameters["phi"] == [0.5, 0.1]
        assert ts.parameters["theta"] == []
        assert ts.parameters["branch"] == "ar_differenced"

    def test_arima_default_is_mixed_fallback(self):
        ts = generate("arima", length=30, seed=1)
        assert ts.parameters["branch"] == "fallback_ar1"

    def test_arima_presets(self):
        assert generate("arima", 30, seed=1, preset="random_walk_with_drift").parameters["branch"] == "fallback_ar1"
        assert generate("arima", 30, seed=1, preset="ar_with_trend").parameters["branch"] == "ar_differenced"

    def test_seasonal_period_is_int(self):
        ts = generate("seasonal", length=24, seed=1, overrides={"period": "6"})
        assert ts.parameters["period"] == 6

    def test_reproducible(self):
        a = generate("ma", length=100, seed=42, preset="ma2")
        b = generate("ma", length=100, seed=42, preset="ma2")
        assert a.points == b.points

    @pytest.mark.parametrize("name", ["stock_price", "retail_sales", "gdp"])
    def test_case_study_preset_matches_defaults(self, name: str):
        assert resolve_params(name, preset="case_study") == resolve_params(name)
        assert GENERATORS[name]["category"] == "case_study"

    def test_gdp_growth_override(self):
        ts = generate("gdp", length=10, seed=5, overrides={"growth": "0", "sigma": 0.1})
        assert ts.parameters["growth"] == 0.0
        assert ts.generator_name == "gdp"
