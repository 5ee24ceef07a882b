"""Time series simulators for white noise, trend, seasonal, AR, MA and ARIMA."""

from timeseries_sim.generators.noise import (
    UniformSource,
    NumpyUniformSource,
    GaussianSource,
)
from timeseries_sim.generators.basic import (
    SamplePoint,
    TimeSeries,
    generate_white_noise,
    generate_trending_series,
    generate_seasonal_series,
)
from timeseries_sim.generators.models import (
    ARParams,
    MAParams,
    ARIMAParams,
    generate_ar,
    generate_ma,
    generate_arima,
    difference,
)
from timeseries_sim.generators.composite import (
    combine,
    add_trend,
    cumulate,
    stock_price,
    retail_sales,
    gdp,
)

__all__ = [
    "UniformSource",
    "NumpyUniformSource",
    "GaussianSource",
    "SamplePoint",
    "TimeSeries",
    "generate_white_noise",
    "generate_trending_series",
    "generate_seasonal_series",
    "ARParams",
    "MAParams",
    "ARIMAParams",
    "generate_ar",
    "generate_ma",
    "generate_arima",
    "difference",
    "combine",
    "add_trend",
    "cumulate",
    "stock_price",
    "retail_sales",
    "gdp",
]
