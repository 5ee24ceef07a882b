"""
Composite series built from the basic and model generators.

Provides helpers to add, offset and accumulate series, and the case-study
series (stock price, retail sales, GDP) that show the models applied to
familiar economic data. Case-study values are rounded to 2 decimals.
"""

import numpy as np

from timeseries_sim.generators.basic import (
    SamplePoint,
    TimeSeries,
    generate_trending_series,
    generate_seasonal_series,
    round_value,
    to_points,
)
from timeseries_sim.generators.models import ARParams, generate_ar
from timeseries_sim.generators.noise import GaussianSource, UniformSource, as_gaussian_source

CASE_STUDY_DECIMALS = 2


def combine(
    *series_list: TimeSeries,
    offset: float = 0.0,
    decimals: int = CASE_STUDY_DECIMALS,
) -> TimeSeries:
    """
    Add series point by point, plus a constant offset.

    Args:
        *series_list: TimeSeries of equal length.
        offset: Constant added to every point.
        decimals: Rounding applied to the sums.

    Returns:
        Combined TimeSeries recording its components.
    """
    if not series_list:
        raise ValueError("At least one TimeSeries required for combining")

    lengths = [len(s) for s in series_list]
    if len(set(lengths)) > 1:
        raise ValueError(f"All TimeSeries must have same length. Got: {lengths}")

    data = np.sum([s.values for s in series_list], axis=0) + offset

    generator_names = [s.generator_name for s in series_list]
    return TimeSeries(
        points=to_points(data, decimals),
        generator_name=f"combine({', '.join(generator_names)})",
        parameters={
            "offset": offset,
            "components": [
                {"name": s.generator_name, "params": s.parameters}
                for s in series_list
            ],
        },
    )


def add_trend(
    series: TimeSeries,
    slope: float,
    offset: float = 0.0,
    decimals: int = CASE_STUDY_DECIMALS,
) -> TimeSeries:
    """Add a deterministic line ``offset + slope*t`` to a series."""
    data = series.values + slope * series.times + offset
    return TimeSeries(
        points=to_points(data, decimals),
        generator_name=f"{series.generator_name}+trend",
        parameters={
            "base": {"name": series.generator_name, "params": series.parameters},
            "slope": slope,
            "offset": offset,
        },
    )


def cumulate(
    series: TimeSeries,
    start: float,
    decimals: int = CASE_STUDY_DECIMALS,
) -> TimeSeries:
    """
    Running sum of a series anchored at ``start``.

    The first point is ``start`` itself and the first input value is
    skipped. Every partial sum is rounded before the next step.
    """
    points = []
    level = start
    for i, point in enumerate(series):
        if i > 0:
            level = round_value(level + point.value, decimals)
        points.append(SamplePoint(time=i, value=round_value(level, decimals)))

    return TimeSeries(
        points=points,
        generator_name=f"cumsum({series.generator_name})",
        parameters={
            "base": {"name": series.generator_name, "params": series.parameters},
            "start": start,
        },
    )


def stock_price(
    length: int = 250,
    phi1: float = 0.95,
    sigma: float = 2.0,
    start: float = 100.0,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Simulate a stock price as the running sum of persistent AR(1) returns.

    P[0] = start, P[t] = P[t-1] + R[t] with R an AR(1) series.

    Args:
        length: Number of trading days.
        phi1: Persistence of the daily returns.
        sigma: Volatility of the return innovations.
        start: Opening price.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries of prices rounded to cents.
    """
    returns = generate_ar(length, ARParams(phi=(phi1,), sigma=sigma), source=as_gaussian_source(source, seed))
    ts = cumulate(returns, start)
    ts.generator_name = "stock_price"
    ts.parameters = {
        "length": length,
        "phi1": phi1,
        "sigma": sigma,
        "start": start,
        "seed": seed,
    }
    return ts


def retail_sales(
    length: int = 48,
    amplitude: float = 20.0,
    period: int = 12,
    noise: float = 5.0,
    trend: float = 0.5,
    baseline: float = 100.0,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Simulate monthly retail sales: a yearly season on a rising baseline.

    S[t] = baseline + trend*t + amplitude*sin(2*pi*t/period) + U(-noise, noise)

    Args:
        length: Number of months.
        amplitude: Height of the seasonal swing.
        period: Months per season cycle.
        noise: Half-width of the uniform noise band.
        trend: Growth per month.
        baseline: Sales level at t = 0.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries of sales rounded to 2 decimals.
    """
    gaussian = as_gaussian_source(source, seed)
    seasonal = generate_seasonal_series(length, amplitude=amplitude, period=period, noise=noise, source=gaussian)
    growth = generate_trending_series(length, trend=trend, noise=0.0, source=gaussian)

    ts = combine(seasonal, growth, offset=baseline)
    ts.generator_name = "retail_sales"
    ts.parameters = {
        "length": length,
        "amplitude": amplitude,
        "period": period,
        "noise": noise,
        "trend": trend,
        "baseline": baseline,
        "seed": seed,
    }
    return ts


def gdp(
    length: int = 40,
    phi1: float = 0.8,
    sigma: float = 0.5,
    growth: float = 0.3,
    baseline: float = 1000.0,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Simulate quarterly GDP: a linear growth path with AR(1) business cycles.

    G[t] = baseline + growth*t + C[t] with C an AR(1) series.

    Args:
        length: Number of quarters.
        phi1: Persistence of the cyclical component.
        sigma: Size of the cyclical shocks.
        growth: Growth per quarter.
        baseline: GDP level at t = 0.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries of GDP rounded to 2 decimals.
    """
    cycle = generate_ar(length, ARParams(phi=(phi1,), sigma=sigma), source=as_gaussian_source(source, seed))
    ts = add_trend(cycle, growth, offset=baseline)
    ts.generator_name = "gdp"
    ts.parameters = {
        "length": length,
        "phi1": phi1,
        "sigma": sigma,
        "growth": growth,
        "baseline": baseline,
        "seed": seed,
    }
    return ts
