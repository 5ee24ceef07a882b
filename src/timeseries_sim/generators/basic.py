"""
Basic building block time series generators.

These generators create the simple series used to introduce time series
concepts: white noise, a linear trend and a seasonal sinusoid. Each generator
returns a TimeSeries of SamplePoints with values rounded to 3 decimals.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from timeseries_sim.generators.noise import GaussianSource, UniformSource, as_gaussian_source

DECIMALS = 3


@dataclass(frozen=True)
class SamplePoint:
    """One observation of a simulated series."""

    time: int
    """Zero-based position in the series."""

    value: float
    """Simulated value, rounded to 3 decimals."""


@dataclass
class TimeSeries:
    """
    Container for a simulated series and the parameters that produced it.

    Behaves as a read-only sequence of SamplePoints.

    Attributes:
        points: The samples, ordered by time starting at 0.
        generator_name: Name of the generator that created this series.
        parameters: Dictionary of parameters used to generate the series.
    """

    points: list[SamplePoint] = field(default_factory=list)
    generator_name: str = ""
    parameters: dict = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, idx: int) -> SamplePoint:
        return self.points[idx]

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self.points)

    @property
    def length(self) -> int:
        """Return the length of the time series."""
        return len(self.points)

    @property
    def times(self) -> NDArray[np.int64]:
        return np.array([p.time for p in self.points], dtype=np.int64)

    @property
    def values(self) -> NDArray[np.float64]:
        return np.array([p.value for p in self.points], dtype=np.float64)

    def to_records(self) -> list[dict]:
        """Return the points as ``{"time", "value"}`` dicts for JSON output."""
        return [{"time": p.time, "value": p.value} for p in self.points]

    def to_frame(self):
        """Return the series as a pandas DataFrame with time and value columns."""
        import pandas as pd

        return pd.DataFrame({
            "time": self.times,
            "value": self.values,
        })

    def to_csv(self, filename: str) -> None:
        """Export time series to CSV file."""
        self.to_frame().to_csv(filename, index=False)


def round_value(value: float, decimals: int = DECIMALS) -> float:
    """Round to the precision every emitted value carries, without a negative zero."""
    return round(float(value), decimals) + 0.0


def to_points(values: Iterable[float], decimals: int = DECIMALS) -> list[SamplePoint]:
    """Number raw values from 0 and round them."""
    return [SamplePoint(time=i, value=round_value(v, decimals)) for i, v in enumerate(values)]


def generate_white_noise(
    length: int,
    sigma: float = 1.0,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Generate Gaussian white noise: S = e1, e2, e3... where e ~ N(0, sigma).

    Independent draws with constant mean and variance, the simplest
    stationary process.

    Args:
        length: Number of data points.
        sigma: Standard deviation of each draw.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries of independent normal draws.
    """
    gaussian = as_gaussian_source(source, seed)
    data = gaussian.sample_many(length, sigma)

    return TimeSeries(
        points=to_points(data),
        generator_name="white_noise",
        parameters={"length": length, "sigma": sigma, "seed": seed},
    )


def generate_trending_series(
    length: int,
    trend: float = 0.1,
    noise: float = 1.0,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Generate a linear trend with uniform noise: S[i] = trend*i + U(-noise, noise).

    Args:
        length: Number of data points.
        trend: Slope, the change per time step.
        noise: Half-width of the uniform noise band.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries following the trend line.
    """
    gaussian = as_gaussian_source(source, seed)
    data = [trend * i + gaussian.uniform(-noise, noise) for i in range(max(length, 0))]

    return TimeSeries(
        points=to_points(data),
        generator_name="trend",
        parameters={"length": length, "trend": trend, "noise": noise, "seed": seed},
    )


def generate_seasonal_series(
    length: int,
    amplitude: float = 2.0,
    period: float = 12,
    noise: float = 0.5,
    source: GaussianSource | UniformSource | None = None,
    seed: int | None = None,
) -> TimeSeries:
    """
    Generate a seasonal sinusoid with uniform noise.

    S[i] = amplitude * sin(2*pi*i / period) + U(-noise, noise)

    Args:
        length: Number of data points.
        amplitude: Height of the seasonal peaks.
        period: Number of time steps in one cycle. A zero period leaves
            only the noise term.
        noise: Half-width of the uniform noise band.
        source: Random source. If None, a fresh one is seeded with ``seed``.
        seed: Random seed for reproducibility.

    Returns:
        TimeSeries with a repeating pattern.
    """
    gaussian = as_gaussian_source(source, seed)

    data = []
    for i in range(max(length, 0)):
        seasonal = amplitude * math.sin(2 * math.pi * i / period) if period else 0.0
        data.append(seasonal + gaussian.uniform(-noise, noise))

    return TimeSeries(
        points=to_points(data),
        generator_name="seasonal",
        parameters={
            "length": length,
            "amplitude": amplitude,
            "period": period,
            "noise": noise,
            "seed": seed,
        },
    )
