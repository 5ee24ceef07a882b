"""
FastAPI application serving simulated series as JSON for charting.

Run with: uvicorn timeseries_sim.web.main:app --reload
Or: tssim-web
"""

from typing import Any

import numpy as np
from fastapi import FastAPI, Request, Query
from fastapi.responses import JSONResponse

from timeseries_sim.generators.basic import TimeSeries
from timeseries_sim.generators.registry import GENERATORS, get_generator, resolve_params
from timeseries_sim import __version__


def sanitize_for_json(obj: Any) -> Any:
    """Recursively convert numpy types to Python native types for JSON serialization."""
    if isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [sanitize_for_json(item) for item in obj]
    return obj


app = FastAPI(
    title="Timeseries Sim",
    description="Simulated white noise, trend, seasonal, AR, MA and ARIMA series for charting",
    version=__version__,
)


def timeseries_to_dict(ts: TimeSeries) -> dict[str, Any]:
    """Convert TimeSeries to JSON-serializable dict."""
    return {
        "generator": ts.generator_name,
        "length": len(ts),
        "parameters": sanitize_for_json(ts.parameters),
        "data": ts.to_records(),
    }


@app.get("/api/generators")
async def list_generators():
    """List all available generators with parameter metadata and presets."""
    return {
        name: {
            "name": info["name"],
            "description": info["description"],
            "category": info["category"],
            "params": info["params"],
            "presets": info["presets"],
        }
        for name, info in GENERATORS.items()
    }


@app.get("/api/generate/{generator_name}")
async def generate_data(
    generator_name: str,
    request: Request,
    length: int = Query(default=200, ge=1, le=2000),
    seed: int | None = Query(default=None),
    preset: str | None = Query(default=None, description="Named parameter preset"),
):
    """Generate one series; generator parameters are taken from the query string."""
    try:
        gen_info = get_generator(generator_name)
    except KeyError:
        return JSONResponse(
            status_code=404,
            content={"error": f"Unknown generator: {generator_name}"},
        )

    query_params = dict(request.query_params)
    overrides = {
        param_name: query_params[param_name]
        for param_name in gen_info["params"]
        if param_name in query_params
    }

    try:
        kwargs = resolve_params(generator_name, overrides, preset=preset)
        ts = gen_info["func"](length=length, seed=seed, **kwargs)
    except ValueError as e:
        return JSONResponse(
            status_code=400,
            content={"error": str(e)},
        )

    return timeseries_to_dict(ts)


@app.get("/api/generate-all")
async def generate_all(
    length: int = Query(default=200, ge=1, le=2000),
    seed: int | None = Query(default=None),
):
    """Generate every generator at its default parameters."""
    results = {}

    for name, info in GENERATORS.items():
        kwargs = resolve_params(name)
        results[name] = timeseries_to_dict(info["func"](length=length, seed=seed, **kwargs))

    return results


def run():
    """Run the web server."""
    import uvicorn
    uvicorn.run(
        "timeseries_sim.web.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    run()
