"""Command line interface for topology generation and export."""

from __future__ import annotations

import argparse
import sys
import time
from contextlib import contextmanager
from pathlib import Path

from netinsight.config import StudioConfig
from netinsight.errors import GenerationError, InvalidParameterError
from netinsight.log_config import get_logger

logger = get_logger(__name__)

FORMAT_KINDS = {
    "list": ("adjacency_list",),
    "matrix": ("adjacency_matrix",),
    "both": ("adjacency_list", "adjacency_matrix"),
}


@contextmanager
def Timer(description: str):
    """Context manager for timing operations with both print and log output.

    Args:
        description: Operation description for timing messages.

    Yields:
        None: Context manager yields nothing.
    """
    print(f"🔄 {description}...")
    logger.info(f"Starting {description}")
    start = time.time()
    try:
        yield
        elapsed = time.time() - start
        print(f"✅ {description} (completed in {elapsed:.2f}s)")
        logger.info(f"Completed {description} in {elapsed:.2f}s")
    except Exception as e:
        elapsed = time.time() - start
        print(f"❌ {description} (failed after {elapsed:.2f}s)")
        logger.error(f"Failed {description} after {elapsed:.2f}s: {e}")
        raise


def _load_config(config_path: Path | None) -> StudioConfig:
    """Load and validate configuration, or return defaults when no path given.

    Raises:
        SystemExit: If configuration loading or validation fails.
    """
    if config_path is None:
        return StudioConfig()
    try:
        config = StudioConfig.from_yaml(config_path)
        logger.info(f"Loaded configuration from {config_path}")
        return config
    except FileNotFoundError:
        print(f"❌ Configuration file not found: {config_path}")
        logger.error(f"Configuration file not found: {config_path}")
        sys.exit(2)  # Config problem
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"❌ Configuration error: {e}")
        print(f"💡 Check YAML syntax in: {config_path}")
        sys.exit(2)  # Config problem


def _parse_param_pairs(pairs: list[str] | None) -> dict[str, str]:
    """Turn ``key=value`` strings into a request bag."""
    bag: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise InvalidParameterError(f"Expected key=value, got '{pair}'")
        bag[key.strip()] = value.strip()
    return bag


def list_command(args: argparse.Namespace) -> None:
    """Print every registered topology with its parameters."""
    from netinsight.topologies import TOPOLOGIES

    print("Available topologies")
    print("=" * 30)
    for topology in TOPOLOGIES.values():
        print(f"{topology.name}  ({topology.label})")
        for p in topology.parameters:
            print(
                f"    {p.name}: {p.label} [{p.minimum:g}..{p.maximum:g}, "
                f"step {p.step:g}, default {p.default:g}]"
            )


def generate_command(args: argparse.Namespace) -> None:
    """Generate a topology and export it.

    Args:
        args: Parsed command line arguments.
    """
    from netinsight.degree import DegreeAnalyzer
    from netinsight.export import encode, write_csv
    from netinsight.graph_store import GraphStore
    from netinsight.random_source import NumpyRandomSource
    from netinsight.topologies import generate

    config_path = Path(args.config) if getattr(args, "config", None) else None
    config = _load_config(config_path)

    try:
        bag = _parse_param_pairs(args.param)
        seed = args.seed if args.seed is not None else config.generation.seed
        store = GraphStore()
        with Timer(f"Generate {args.topology}"):
            generate(
                store,
                args.topology,
                bag,
                rng=NumpyRandomSource(seed),
                canvas=config.canvas,
                max_attempts=config.generation.max_attempts,
                defaults=config.generation.defaults,
            )

        analyzer = DegreeAnalyzer(store)
        summary = analyzer.summary()
        print(f"📊 Graph: {summary.node_count:,} nodes, {summary.edge_count:,} edges")
        print(
            f"   Degree min/mean/max: {summary.min_degree}/"
            f"{summary.mean_degree:.2f}/{summary.max_degree}"
        )
        for degree, count in analyzer.histogram().items():
            print(f"   degree {degree}: {count}")

        kinds = FORMAT_KINDS[args.format]
        if args.print:
            for kind in kinds:
                print("\n" + "=" * 60)
                print(kind.replace("_", " ").upper())
                print("=" * 60)
                print(encode(store, kind), end="")
            return

        output_dir = Path(args.output) if args.output else Path.cwd()
        filenames = {
            "adjacency_list": config.export.adjacency_list_filename,
            "adjacency_matrix": config.export.adjacency_matrix_filename,
        }
        for kind in kinds:
            path = write_csv(store, output_dir / filenames[kind], kind)
            print(f"📄 Wrote {path}")

        if args.histogram:
            from netinsight.plotting import export_degree_histogram

            if store.node_count:
                path = export_degree_histogram(
                    analyzer.histogram(),
                    output_dir / config.export.histogram_filename,
                    title=f"Degree Distribution ({args.topology})",
                )
                print(f"📈 Wrote {path}")
            else:
                print("⚠️  Empty graph, skipping degree histogram")

    except (InvalidParameterError, GenerationError) as e:
        logger.error(f"Generation failed: {e}")
        print(f"❌ {e}")
        print("💡 Run 'netinsight list' for valid topologies and parameter ranges")
        sys.exit(3)  # Invalid parameters
    except Exception as e:
        logger.error(f"Generation failed: {e}")
        print(f"❌ ERROR: {e}")
        print("💡 Use -v for detailed error information")
        sys.exit(1)  # Runtime error


def info_command(args: argparse.Namespace) -> None:
    """Show configuration summary."""
    config_path = Path(args.config) if getattr(args, "config", None) else None
    config = _load_config(config_path)
    print(config.summary())


def main() -> None:
    """Parse command line arguments and execute the appropriate subcommand.

    Configures logging, parses CLI arguments, and dispatches to the correct
    command function (list, generate, or info).
    """
    parser = argparse.ArgumentParser(
        prog="netinsight",
        description="Generate canonical network topologies and export them as CSV.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress console output (logs only)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List available topologies")
    list_parser.set_defaults(func=list_command)

    generate_parser = subparsers.add_parser(
        "generate", help="Generate a topology and export it as CSV"
    )
    generate_parser.add_argument("topology", help="Topology identifier (see 'list')")
    generate_parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Optional YAML configuration file",
    )
    generate_parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Generation parameter, e.g. -p nodeCount=20 -p probability=0.1",
    )
    generate_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the random source"
    )
    generate_parser.add_argument(
        "-f",
        "--format",
        choices=sorted(FORMAT_KINDS),
        default="both",
        help="Which CSV encodings to write (default: both)",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory for CSV files. Defaults to CWD.",
    )
    generate_parser.add_argument(
        "--histogram",
        action="store_true",
        help="Also save a degree distribution chart (PNG)",
    )
    generate_parser.add_argument(
        "--print",
        action="store_true",
        help="Print CSV to stdout instead of writing files",
    )
    generate_parser.set_defaults(func=generate_command)

    info_parser = subparsers.add_parser("info", help="Show configuration summary")
    info_parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Configuration file path (defaults when omitted)",
    )
    info_parser.set_defaults(func=info_command)

    args = parser.parse_args()

    import logging

    from netinsight.log_config import set_global_log_level

    if args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    set_global_log_level(log_level)

    if args.quiet:
        import builtins

        builtins.print = lambda *args, **kwargs: None

    if not hasattr(args, "func") or args.func is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
