"""
Stochastic model generators: AR(p), MA(q) and ARIMA(p,d,q).

The recurrences work on fixed 3-slot coefficient vectors. Shorter
coefficient sequences are padded with zeros and longer ones truncated, so
orders above 3 are not representable.
"""

from dataclasses import dataclass
from typing import Sequence

from timeseries_sim.generators.basic import (
    SamplePoint,
    TimeSeries,
    round_value,
    to_points,
)
from timeseries_sim.generators.noise import GaussianSource, UniformSource, as_gaussian_source

MAX_LAGS = 3

# Coefficient used when an ARIMA order cannot be simulated as a pure AR or MA.
FALLBACK_PHI = 0.7


def pad_or_truncate(coeffs: Sequence[float], size: int = MAX_LAGS) -> tuple[float, ...]:
    """Return exactly ``size`` coefficients, zero-filling missing lags."""
    coeffs = tuple(float(c) for c in coeffs[:size])
    return coeffs + (0.0,) * (size - len(coeffs))


@dataclass(frozen=True)
class ARParams:
    """Autoregressive parameters. ``phi[0]`` is the lag-1 coefficient."""

    phi: tuple[float, ...] = ()
    sigma: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "phi", tuple(self.phi))

    def padded(self) -> tuple[float, ...]:
        return pad_or_truncate(self.phi)


@dataclass(frozen=True)
class MAParams:
    """Moving-average parameters. ``theta[0]`` weights the previous innovation."""

    theta: tuple[float, ...] = ()
    sigma: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "theta", tuple(self.theta))

    def padded(self) -> tuple[float, ...]:
        return pad_or_truncate(self.theta)


@dataclass(frozen=True)
class ARIMAParams:
    """
    ARIMA(p, d, q) parameters.

    By convention ``len(phi) == p`` and ``len(theta) == q``; shorter
    sequences are tolerated and read as zeros.
    """

    p: int = 0
    d: int = 0
    q: int = 0
    phi: tuple[float, ...] = ()
    theta: tuple[float, ...] = ()
    sigma: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "phi", tuple(self.phi))
        object.__setattr__(self, "theta", tuple(self.theta))

    @property
    def order(self) -> tuple[int, int, int]:
        return (self.p, self.d, self.q)


def generate_ar(
    length: int,
    params: ARParams,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Generate an AR(p) series, p <= 3.

    X[t] = phi1*X[t-1] + phi2*X[t-2] + phi3*X[t-3] + e[t],  e ~ N(0, sigma)

    The first three points are the zero seeds of the recursion and are part
    of the output; callers wanting a series without them must drop them.
    ``length`` innovations are drawn even though the first three are unused.
    Coefficients are not checked for stationarity.

    Args:
        length: Number of data points.
        params: Lag coefficients and innovation standard deviation.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries of ``length`` points.
    """
    gaussian = as_gaussian_source(source, seed)
    phi1, phi2, phi3 = params.padded()
    innovations = gaussian.sample_many(length, params.sigma)

    values = [0.0] * MAX_LAGS
    for t in range(MAX_LAGS, length):
        values.append(
            phi1 * values[t - 1] + phi2 * values[t - 2] + phi3 * values[t - 3] + innovations[t]
        )

    return TimeSeries(
        points=to_points(values[: max(length, 0)]),
        generator_name="ar",
        parameters={
            "length": length,
            "phi": list(params.phi),
            "sigma": params.sigma,
            "seed": seed,
        },
    )


def generate_ma(
    length: int,
    params: MAParams,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Generate an MA(q) series, q <= 3.

    X[t] = e[t] + theta1*e[t-1] + theta2*e[t-2] + theta3*e[t-3],  e ~ N(0, sigma)

    A finite filter over ``length + 3`` innovations with no feedback from
    past outputs, so the result is stationary for any ``theta``.

    Args:
        length: Number of data points.
        params: Lag coefficients and innovation standard deviation.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries of ``length`` points.
    """
    gaussian = as_gaussian_source(source, seed)
    theta1, theta2, theta3 = params.padded()
    innovations = gaussian.sample_many(max(length, 0) + MAX_LAGS, params.sigma)

    values = [
        innovations[t + 3]
        + theta1 * innovations[t + 2]
        + theta2 * innovations[t + 1]
        + theta3 * innovations[t]
        for t in range(max(length, 0))
    ]

    return TimeSeries(
        points=to_points(values),
        generator_name="ma",
        parameters={
            "length": length,
            "theta": list(params.theta),
            "sigma": params.sigma,
            "seed": seed,
        },
    )


def difference(series: TimeSeries) -> TimeSeries:
    """
    Apply one first-difference pass: Y[j] = X[j+1] - X[j].

    The result is one point shorter and renumbered from time 0.
    """
    points = [
        SamplePoint(time=j, value=round_value(series[j + 1].value - series[j].value))
        for j in range(len(series) - 1)
    ]
    return TimeSeries(
        points=points,
        generator_name=f"diff({series.generator_name})",
        parameters=dict(series.parameters),
    )


def generate_arima(
    length: int,
    params: ARIMAParams,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Generate an ARIMA(p, d, q) series.

    Only pure orders are simulated:

    - p > 0, q == 0: an AR series of ``length + d`` points is first-differenced
      ``d`` times. Note that ``d`` differences the AR output rather than
      integrating (cumulatively summing) it, so larger ``d`` makes the series
      rougher, not more persistent.
    - p == 0, q > 0: the MA generator is used directly and ``d`` is ignored.
    - anything else, including mixed p > 0 and q > 0: AR(1) with phi1 = 0.7
      and the given sigma; all other parameters are ignored.

    The branch taken is recorded as ``parameters["branch"]``. Negative orders
    are treated as 0.

    Args:
        length: Number of data points.
        params: Model orders, coefficients and innovation standard deviation.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries of ``length`` points.
    """
    gaussian = as_gaussian_source(source, seed)
    p, d, q = (max(int(k), 0) for k in params.order)

    if p > 0 and q == 0:
        branch = "ar_differenced"
        series = generate_ar(length + d, ARParams(phi=params.phi, sigma=params.sigma), source=gaussian)
        for _ in range(d):
            series = difference(series)
        points = series.points[: max(length, 0)]
    elif p == 0 and q > 0:
        branch = "ma"
        points = generate_ma(length, MAParams(theta=params.theta, sigma=params.sigma), source=gaussian).points
    else:
        branch = "fallback_ar1"
        points = generate_ar(length, ARParams(phi=(FALLBACK_PHI,), sigma=params.sigma), source=gaussian).points

    return TimeSeries(
        points=points,
        generator_name="arima",
        parameters={
            "length": length,
            "p": params.p,
            "d": params.d,
            "q": params.q,
            "phi": list(params.phi),
            "theta": list(params.theta),
            "sigma": params.sigma,
            "seed": seed,
            "branch": branch,
        },
    )
