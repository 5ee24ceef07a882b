"""
Invoke tasks for timeseries-sim project.

Usage:
    inv --list          # List available tasks
    inv test            # Run tests
    inv lint            # Run linter
    inv docs-build      # Build documentation
    inv suite           # Generate a series suite
    inv web             # Run the JSON API server
"""

from invoke import task, Context


@task
def install(c: Context, dev: bool = True, web: bool = False):
    """Install the package and dependencies."""
    extras = ["dev", "docs"]
    if web:
        extras.append("web")

    if dev:
        c.run(f"uv pip install -e '.[{','.join(extras)}]'", pty=True)
    else:
        c.run("uv pip install -e .", pty=True)


@task
def test(c: Context, verbose: bool = False, coverage: bool = False, marker: str = ""):
    """Run the test suite."""
    cmd = "uv run pytest"

    if verbose:
        cmd += " -v"

    if coverage:
        cmd += " --cov=timeseries_sim --cov-report=term-missing"

    if marker:
        cmd += f" -m '{marker}'"

    cmd += " src/timeseries_sim/tests/"
    c.run(cmd, pty=True)


@task
def test_generators(c: Context):
    """Run only the generator tests (no web extra required)."""
    c.run("uv run pytest src/timeseries_sim/tests/test_generators.py -v", pty=True)


@task
def lint(c: Context, fix: bool = False):
    """Run the linter (ruff)."""
    cmd = "uv run ruff check src/"
    if fix:
        cmd += " --fix"
    c.run(cmd, pty=True)


@task
def format(c: Context, check: bool = False):
    """Format code with ruff."""
    cmd = "uv run ruff format src/"
    if check:
        cmd += " --check"
    c.run(cmd, pty=True)


@task
def suite(
    c: Context,
    output_dir: str = "./timeseries_sim_data",
    lengths: str = "100,200",
    seed: int = 42,
):
    """Generate every generator and preset as CSV files."""
    length_args = " ".join(lengths.split(","))
    c.run(
        f"uv run tssim suite "
        f"--output-dir {output_dir} --lengths {length_args} --seed {seed}",
        pty=True,
    )


@task
def docs_build(c: Context):
    """Build Sphinx documentation."""
    c.run("uv run sphinx-build -b html docs/ docs/_build/html", pty=True)


@task
def clean(c: Context):
    """Clean build artifacts."""
    patterns = [
        "build/",
        "dist/",
        "*.egg-info/",
        ".pytest_cache/",
        ".ruff_cache/",
        "docs/_build/",
        ".coverage",
        "htmlcov/",
    ]

    for pattern in patterns:
        c.run(f"rm -rf {pattern}", warn=True)
    c.run("find . -name __pycache__ -type d -prune -exec rm -rf {} +", warn=True)

    print("Cleaned build artifacts")


@task
def check(c: Context):
    """Run all checks (lint, format check, tests)."""
    print("Running lint...")
    c.run("uv run ruff check src/", warn=True, pty=True)

    print("\nRunning format check...")
    c.run("uv run ruff format src/ --check", warn=True, pty=True)

    print("\nRunning tests...")
    c.run("uv run pytest src/timeseries_sim/tests/ -v", pty=True)


@task
def web(c: Context, host: str = "127.0.0.1", port: int = 8000, reload: bool = True):
    """Run the JSON API server (foreground)."""
    reload_flag = "--reload" if reload else ""
    c.run(
        f"uv run uvicorn timeseries_sim.web.main:app "
        f"--host {host} --port {port} {reload_flag}",
        pty=True,
    )
