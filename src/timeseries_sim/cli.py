"""
Command-line interface for generating simulated time series.

Usage:
    tssim --help
    tssim list
    tssim info arima
    tssim generate ar --length 200 --seed 42 -p phi1=0.9 -o ar.csv
    tssim suite --output-dir ./series --lengths 100 200 --seed 42
"""

import argparse
import json
import sys
from pathlib import Path

from timeseries_sim.generators.registry import GENERATORS, generate, get_generator


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tssim",
        description="Simulate white noise, trend, seasonal, AR, MA and ARIMA time series",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate one series",
    )
    gen_parser.add_argument(
        "generator",
        type=str,
        help="Generator name (see 'tssim list')",
    )
    gen_parser.add_argument(
        "--length", "-l",
        type=int,
        default=200,
        help="Number of points (default: 200)",
    )
    gen_parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: unseeded)",
    )
    gen_parser.add_argument(
        "--preset",
        type=str,
        default=None,
        help="Named parameter preset (see 'tssim info')",
    )
    gen_parser.add_argument(
        "--param", "-p",
        type=str,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a generator parameter, may be repeated",
    )
    gen_parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file (default: print JSON to stdout)",
    )
    gen_parser.add_argument(
        "--format", "-f",
        choices=["csv", "json"],
        default=None,
        help="Output format (default: from the output file extension, else json)",
    )

    # Suite command
    suite_parser = subparsers.add_parser(
        "suite",
        help="Generate every generator and preset as CSV files",
    )
    suite_parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="./timeseries_sim_data",
        help="Output directory for CSV files (default: ./timeseries_sim_data)",
    )
    suite_parser.add_argument(
        "--lengths", "-l",
        type=int,
        nargs="+",
        default=[100, 200],
        help="Series lengths to generate (default: 100 200)",
    )
    suite_parser.add_argument(
        "--seed", "-s",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )

    # List command
    subparsers.add_parser(
        "list",
        help="List available generators",
    )

    # Info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show information about a generator",
    )
    info_parser.add_argument(
        "generator",
        type=str,
        help="Generator name",
    )

    return parser


def parse_overrides(pairs: list[str]) -> dict[str, str]:
    """Turn ``["phi1=0.5", "p=2"]`` into ``{"phi1": "0.5", "p": "2"}``."""
    overrides = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        overrides[key.strip()] = value.strip()
    return overrides


def series_to_json(ts) -> dict:
    return {
        "generator": ts.generator_name,
        "length": len(ts),
        "parameters": ts.parameters,
        "data": ts.to_records(),
    }


def cmd_generate(args: argparse.Namespace) -> int:
    """Execute the generate command."""
    try:
        overrides = parse_overrides(args.param)
        ts = generate(
            args.generator,
            length=args.length,
            seed=args.seed,
            preset=args.preset,
            overrides=overrides,
        )
    except KeyError as e:
        print(e.args[0])
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    fmt = args.format
    if fmt is None:
        fmt = "csv" if args.output and args.output.endswith(".csv") else "json"

    if args.output is None:
        if fmt == "csv":
            print(ts.to_frame().to_csv(index=False), end="")
        else:
            print(json.dumps(series_to_json(ts), indent=2))
        return 0

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "csv":
        ts.to_csv(str(output))
    else:
        with open(output, "w") as f:
            json.dump(series_to_json(ts), f, indent=2)

    print(f"Wrote {len(ts)} points of {ts.generator_name} to {output}")
    return 0


def cmd_suite(args: argparse.Namespace) -> int:
    """Execute the suite command."""
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Generating series in {output_dir}")
    print(f"  Lengths: {args.lengths}")
    print(f"  Seed: {args.seed}")

    manifest = []

    for name, info in GENERATORS.items():
        for preset in [None, *info["presets"]]:
            for length in args.lengths:
                ts = generate(name, length=length, seed=args.seed, preset=preset)

                label = name if preset is None else f"{name}_{preset}"
                filename = f"{len(manifest):04d}_{label}_L{length}.csv"
                ts.to_csv(str(output_dir / filename))

                manifest.append({
                    "id": len(manifest),
                    "filename": filename,
                    "generator": name,
                    "preset": preset,
                    "length": len(ts),
                    "parameters": ts.parameters,
                })

    manifest_path = output_dir / "manifest.json"
    with open(manifest_path, "w") as f:
        json.dump(manifest, f, indent=2)

    print(f"\nGenerated {len(manifest)} series")
    print(f"  Manifest: {manifest_path}")

    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Execute the list command."""
    print("Available generators:")
    print()
    for name, info in GENERATORS.items():
        doc = info["func"].__doc__ or "No description"
        first_line = doc.strip().split("\n")[0]
        print(f"  {name:15s} {first_line}")

    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Execute the info command."""
    try:
        info = get_generator(args.generator)
    except KeyError as e:
        print(e.args[0])
        return 1

    print(f"Generator: {args.generator} ({info['name']})")
    print(f"  {info['description']}")
    print()
    print("Parameters:")
    for param_name, param_info in info["params"].items():
        print(
            f"  {param_name:10s} {param_info['type']:6s} default={param_info['default']}"
            f" range=[{param_info['min']}, {param_info['max']}]  {param_info['tooltip']}"
        )

    if info["presets"]:
        print()
        print("Presets:")
        for preset_name, values in info["presets"].items():
            settings = ", ".join(f"{k}={v}" for k, v in values.items())
            print(f"  {preset_name:25s} {settings}")

    print()
    print(info["func"].__doc__ or "No documentation available")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "generate":
            return cmd_generate(args)
        elif args.command == "suite":
            return cmd_suite(args)
        elif args.command == "list":
            return cmd_list(args)
        elif args.command == "info":
            return cmd_info(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
