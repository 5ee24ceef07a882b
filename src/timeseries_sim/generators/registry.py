"""
Generator registry with parameter metadata and presets.

The CLI and the web API look generators up here. Each entry exposes a
builder taking flat keyword parameters (``phi1``, ``theta2``, ``p``...)
together with the slider ranges and named presets a presentation layer
needs to drive it.
"""

from typing import Any, Callable

from timeseries_sim.generators.basic import (
    TimeSeries,
    generate_white_noise,
    generate_trending_series,
    generate_seasonal_series,
)
from timeseries_sim.generators.composite import stock_price, retail_sales, gdp
from timeseries_sim.generators.models import (
    ARParams,
    MAParams,
    ARIMAParams,
    generate_ar,
    generate_ma,
    generate_arima,
)


def build_white_noise(length: int, seed: int | None = None, sigma: float = 1.0) -> TimeSeries:
    """Gaussian white noise: independent N(0, sigma) draws."""
    return generate_white_noise(length, sigma=sigma, seed=seed)


def build_trend(
    length: int,
    seed: int | None = None,
    trend: float = 0.1,
    noise: float = 1.0,
) -> TimeSeries:
    """Linear trend plus uniform noise: S[i] = trend*i + U(-noise, noise)."""
    return generate_trending_series(length, trend=trend, noise=noise, seed=seed)


def build_seasonal(
    length: int,
    seed: int | None = None,
    amplitude: float = 2.0,
    period: int = 12,
    noise: float = 0.5,
) -> TimeSeries:
    """Sinusoidal season plus uniform noise: S[i] = A*sin(2*pi*i/period) + U(-noise, noise)."""
    return generate_seasonal_series(
        length, amplitude=amplitude, period=period, noise=noise, seed=seed
    )


def build_ar(
    length: int,
    seed: int | None = None,
    phi1: float = 0.7,
    phi2: float = 0.0,
    phi3: float = 0.0,
    sigma: float = 1.0,
) -> TimeSeries:
    """Autoregressive AR(3): X[t] = phi1*X[t-1] + phi2*X[t-2] + phi3*X[t-3] + e[t]."""
    return generate_ar(length, ARParams(phi=(phi1, phi2, phi3), sigma=sigma), seed=seed)


def build_ma(
    length: int,
    seed: int | None = None,
    theta1: float = 0.5,
    theta2: float = 0.0,
    theta3: float = 0.0,
    sigma: float = 1.0,
) -> TimeSeries:
    """Moving average MA(3): X[t] = e[t] + theta1*e[t-1] + theta2*e[t-2] + theta3*e[t-3]."""
    return generate_ma(length, MAParams(theta=(theta1, theta2, theta3), sigma=sigma), seed=seed)


def build_arima(
    length: int,
    seed: int | None = None,
    p: int = 1,
    d: int = 1,
    q: int = 1,
    phi1: float = 0.5,
    phi2: float = 0.1,
    phi3: float = 0.1,
    theta1: float = 0.3,
    theta2: float = 0.1,
    theta3: float = 0.1,
    sigma: float = 1.0,
) -> TimeSeries:
    """ARIMA(p,d,q) with up to 3 AR and MA coefficients; only the first p and q are used."""
    params = ARIMAParams(
        p=p,
        d=d,
        q=q,
        phi=(phi1, phi2, phi3)[: max(p, 0)],
        theta=(theta1, theta2, theta3)[: max(q, 0)],
        sigma=sigma,
    )
    return generate_arima(length, params, seed=seed)


def _coefficient(default: float, tooltip: str) -> dict[str, Any]:
    return {
        "type": "float", "default": default, "min": -0.99, "max": 0.99, "step": 0.01,
        "tooltip": tooltip,
    }


def _sigma() -> dict[str, Any]:
    return {
        "type": "float", "default": 1.0, "min": 0.1, "max": 3, "step": 0.1,
        "tooltip": "Standard deviation of the random innovations",
    }


GENERATORS: dict[str, dict[str, Any]] = {
    "white_noise": {
        "func": build_white_noise,
        "name": "White Noise",
        "description": "Independent draws: S ~ N(0, sigma)",
        "category": "basic",
        "params": {
            "sigma": _sigma(),
        },
        "presets": {},
    },
    "trend": {
        "func": build_trend,
        "name": "Trend",
        "description": "Linear trend: S = trend*t + noise",
        "category": "basic",
        "params": {
            "trend": {
                "type": "float", "default": 0.1, "min": -0.5, "max": 0.5, "step": 0.01,
                "tooltip": "Rate of change per time unit",
            },
            "noise": {
                "type": "float", "default": 1.0, "min": 0, "max": 3, "step": 0.1,
                "tooltip": "Random variation around trend",
            },
        },
        "presets": {},
    },
    "seasonal": {
        "func": build_seasonal,
        "name": "Seasonal",
        "description": "Repeating pattern: S = A*sin(2*pi*t/period) + noise",
        "category": "basic",
        "params": {
            "amplitude": {
                "type": "float", "default": 2.0, "min": 0.5, "max": 5, "step": 0.1,
                "tooltip": "Height of seasonal peaks",
            },
            "period": {
                "type": "int", "default": 12, "min": 4, "max": 24, "step": 1,
                "tooltip": "Length of one seasonal cycle",
            },
            "noise": {
                "type": "float", "default": 0.5, "min": 0, "max": 2, "step": 0.1,
                "tooltip": "Random variation around the seasonal pattern",
            },
        },
        "presets": {},
    },
    "ar": {
        "func": build_ar,
        "name": "AR(p)",
        "description": "Autoregressive: X[t] = sum(phi_i * X[t-i]) + e[t]",
        "category": "model",
        "params": {
            "phi1": _coefficient(0.7, "Weight on the previous value"),
            "phi2": _coefficient(0.0, "Weight on the value two steps back"),
            "phi3": _coefficient(0.0, "Weight on the value three steps back"),
            "sigma": _sigma(),
        },
        "presets": {
            "persistent": {"phi1": 0.8, "phi2": 0.0, "phi3": 0.0, "sigma": 1.0},
            "oscillating": {"phi1": -0.6, "phi2": 0.0, "phi3": 0.0, "sigma": 1.0},
            "near_random_walk": {"phi1": 0.99, "phi2": 0.0, "phi3": 0.0, "sigma": 1.0},
        },
    },
    "ma": {
        "func": build_ma,
        "name": "MA(q)",
        "description": "Moving average: X[t] = e[t] + sum(theta_i * e[t-i])",
        "category": "model",
        "params": {
            "theta1": _coefficient(0.5, "Weight on the previous innovation"),
            "theta2": _coefficient(0.0, "Weight on the innovation two steps back"),
            "theta3": _coefficient(0.0, "Weight on the innovation three steps back"),
            "sigma": _sigma(),
        },
        "presets": {
            "positive": {"theta1": 0.7, "theta2": 0.0, "theta3": 0.0, "sigma": 1.0},
            "negative": {"theta1": -0.7, "theta2": 0.0, "theta3": 0.0, "sigma": 1.0},
            "ma2": {"theta1": 0.5, "theta2": 0.3, "theta3": 0.0, "sigma": 1.0},
        },
    },
    "arima": {
        "func": build_arima,
        "name": "ARIMA(p,d,q)",
        "description": "AR and MA components with differencing",
        "category": "model",
        "params": {
            "p": {
                "type": "int", "default": 1, "min": 0, "max": 3, "step": 1,
                "tooltip": "AR order",
            },
            "d": {
                "type": "int", "default": 1, "min": 0, "max": 2, "step": 1,
                "tooltip": "Number of differencing passes",
            },
            "q": {
                "type": "int", "default": 1, "min": 0, "max": 3, "step": 1,
                "tooltip": "MA order",
            },
            "phi1": _coefficient(0.5, "AR coefficient 1"),
            "phi2": _coefficient(0.1, "AR coefficient 2"),
            "phi3": _coefficient(0.1, "AR coefficient 3"),
            "theta1": _coefficient(0.3, "MA coefficient 1"),
            "theta2": _coefficient(0.1, "MA coefficient 2"),
            "theta3": _coefficient(0.1, "MA coefficient 3"),
            "sigma": _sigma(),
        },
        "presets": {
            "random_walk_with_drift": {"p": 0, "d": 1, "q": 0, "sigma": 1.0},
            "ar_with_trend": {"p": 1, "d": 1, "q": 0, "phi1": 0.7, "sigma": 1.0},
            "arma_after_differencing": {
                "p": 1, "d": 1, "q": 1, "phi1": 0.5, "theta1": 0.3, "sigma": 1.0,
            },
        },
    },
    "stock_price": {
        "func": stock_price,
        "name": "Stock Price",
        "description": "Running sum of AR(1) returns: P[t] = P[t-1] + R[t]",
        "category": "case_study",
        "params": {
            "phi1": _coefficient(0.95, "Persistence of the daily returns"),
            "sigma": {
                "type": "float", "default": 2.0, "min": 0.1, "max": 3, "step": 0.1,
                "tooltip": "Volatility of the return innovations",
            },
            "start": {
                "type": "float", "default": 100.0, "min": 1, "max": 1000, "step": 1,
                "tooltip": "Opening price",
            },
        },
        "presets": {
            "case_study": {"phi1": 0.95, "sigma": 2.0, "start": 100.0},
        },
    },
    "retail_sales": {
        "func": retail_sales,
        "name": "Retail Sales",
        "description": "Seasonal sales on a rising baseline",
        "category": "case_study",
        "params": {
            "amplitude": {
                "type": "float", "default": 20.0, "min": 0, "max": 50, "step": 1,
                "tooltip": "Height of the seasonal swing",
            },
            "period": {
                "type": "int", "default": 12, "min": 4, "max": 24, "step": 1,
                "tooltip": "Months per season cycle",
            },
            "noise": {
                "type": "float", "default": 5.0, "min": 0, "max": 20, "step": 0.5,
                "tooltip": "Random variation in monthly sales",
            },
            "trend": {
                "type": "float", "default": 0.5, "min": -2, "max": 2, "step": 0.1,
                "tooltip": "Growth per month",
            },
            "baseline": {
                "type": "float", "default": 100.0, "min": 0, "max": 1000, "step": 1,
                "tooltip": "Sales level at the first month",
            },
        },
        "presets": {
            "case_study": {
                "amplitude": 20.0, "period": 12, "noise": 5.0, "trend": 0.5, "baseline": 100.0,
            },
        },
    },
    "gdp": {
        "func": gdp,
        "name": "GDP",
        "description": "Linear growth with AR(1) business cycles",
        "category": "case_study",
        "params": {
            "phi1": _coefficient(0.8, "Persistence of the business cycle"),
            "sigma": {
                "type": "float", "default": 0.5, "min": 0.1, "max": 3, "step": 0.1,
                "tooltip": "Size of the cyclical shocks",
            },
            "growth": {
                "type": "float", "default": 0.3, "min": -2, "max": 2, "step": 0.1,
                "tooltip": "Growth per quarter",
            },
            "baseline": {
                "type": "float", "default": 1000.0, "min": 0, "max": 5000, "step": 10,
                "tooltip": "GDP level at the first quarter",
            },
        },
        "presets": {
            "case_study": {"phi1": 0.8, "sigma": 0.5, "growth": 0.3, "baseline": 1000.0},
        },
    },
}


def get_generator(name: str) -> dict[str, Any]:
    """Look up a registry entry by name."""
    if name not in GENERATORS:
        raise KeyError(f"Unknown generator: {name}. Available: {', '.join(GENERATORS)}")
    return GENERATORS[name]


def _coerce(param_name: str, param_info: dict[str, Any], value: Any) -> int | float:
    try:
        if param_info["type"] == "int":
            return int(value)
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(
            f"Parameter '{param_name}' expects {param_info['type']}, got {value!r}"
        ) from None


def resolve_params(
    name: str,
    overrides: dict[str, Any] | None = None,
    preset: str | None = None,
) -> dict[str, int | float]:
    """
    Build the full keyword set for a generator.

    Declared defaults are applied first, then the named preset, then
    ``overrides``. Values are coerced to the declared parameter type.

    Raises:
        KeyError: Unknown generator.
        ValueError: Unknown preset or parameter, or a value of the wrong type.
    """
    info = get_generator(name)
    params = info["params"]
    kwargs = {param_name: param_info["default"] for param_name, param_info in params.items()}

    if preset is not None:
        if preset not in info["presets"]:
            available = ", ".join(info["presets"]) or "none"
            raise ValueError(f"Unknown preset for {name}: {preset}. Available: {available}")
        kwargs.update(info["presets"][preset])

    for param_name, value in (overrides or {}).items():
        if param_name not in params:
            raise ValueError(
                f"Unknown parameter for {name}: {param_name}. "
                f"Available: {', '.join(params)}"
            )
        kwargs[param_name] = value

    return {k: _coerce(k, params[k], v) for k, v in kwargs.items()}


def generate(
    name: str,
    length: int,
    seed: int | None = None,
    preset: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> TimeSeries:
    """Generate a series by registry name with defaults, preset and overrides applied."""
    func: Callable[..., TimeSeries] = get_generator(name)["func"]
    kwargs = resolve_params(name, overrides, preset=preset)
    return func(length=length, seed=seed, **kwargs)
