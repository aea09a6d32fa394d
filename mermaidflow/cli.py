"""
Command-line interface for mermaidflow.

Usage:
    mermaidflow ./examples/function_calls.py -o ./build/
    mermaidflow ./examples/function_calls.py -o ./build/ --friendly
    mermaidflow ./examples/function_calls.py --list
"""

import argparse
import importlib.util
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from mermaidflow.backend.mermaid import render_mermaid
from mermaidflow.core.errors import FlowchartError
from mermaidflow.core.ir import Flowchart
from mermaidflow.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def discover_flowcharts(filepath: Path) -> List[Tuple[str, Flowchart]]:
    """
    Load a Python file and discover all Flowchart instances at module level.

    Returns a list of (variable name, flowchart) tuples, sorted by name.
    """
    spec = importlib.util.spec_from_file_location("user_module", filepath)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load {filepath}")

    module = importlib.util.module_from_spec(spec)

    # Add the file's directory to sys.path so imports work
    file_dir = str(filepath.parent.resolve())
    if file_dir not in sys.path:
        sys.path.insert(0, file_dir)

    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise RuntimeError(f"Error executing {filepath}: {e}") from e

    flowcharts = []
    for name in sorted(vars(module)):
        obj = getattr(module, name)
        if isinstance(obj, Flowchart):
            flowcharts.append((name, obj))

    logger.debug("Discovered %d flowchart(s) in %s", len(flowcharts), filepath)
    return flowcharts


def export_flowchart(
    name: str,
    chart: Flowchart,
    output_path: Path,
    friendly: bool = False,
    anonymous: bool = False,
) -> Path:
    """Render a flowchart and write it to `<output_path>/<name>.mmd`."""
    content = render_mermaid(chart, friendly=friendly, allow_anonymous_subgraphs=anonymous)

    safe_name = "".join(c for c in name.lower() if c.isalnum() or c == "_") or "flowchart"
    output_file = output_path / f"{safe_name}.mmd"
    output_file.write_text(content)

    logger.info("Wrote %s (%d bytes)", output_file, len(content))
    return output_file


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="mermaidflow",
        description="Export flowcharts defined in Python files as Mermaid diagrams.",
        epilog="Example: mermaidflow ./examples/function_calls.py -o ./build/"
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Python file containing module-level Flowchart objects"
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("."),
        help="Output directory (default: current directory)"
    )

    parser.add_argument(
        "-l", "--list",
        action="store_true",
        help="List flowcharts in file without exporting"
    )

    parser.add_argument(
        "-n", "--name",
        type=str,
        help="Export only the flowchart with this variable name"
    )

    parser.add_argument(
        "--friendly",
        action="store_true",
        help="Flatten nested subgraphs and drop illegal names instead of failing"
    )

    parser.add_argument(
        "--anonymous",
        action="store_true",
        help="Render untitled subgraphs under generated identifiers"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: MERMAIDFLOW_LOG_LEVEL or WARNING)"
    )

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose and args.log_level is None else args.log_level)

    if not args.input.exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    if not args.input.is_file():
        print(f"Error: Not a file: {args.input}", file=sys.stderr)
        return 1

    try:
        flowcharts = discover_flowcharts(args.input)
    except (ImportError, RuntimeError) as e:
        print(f"Error loading file: {e}", file=sys.stderr)
        return 1

    if not flowcharts:
        print(f"No flowcharts found in {args.input}", file=sys.stderr)
        return 1

    if args.list:
        print(f"Flowcharts in {args.input}:")
        for name, chart in flowcharts:
            print(
                f"  {name}: \"{chart.title or ''}\" "
                f"({len(chart.all_names())} names, {len(chart.subgraphs)} subgraphs, {len(chart.links)} links)"
            )
        return 0

    if args.name:
        flowcharts = [(n, c) for n, c in flowcharts if n == args.name]
        if not flowcharts:
            print(f"Error: No flowchart named '{args.name}' found", file=sys.stderr)
            return 1

    args.output.mkdir(parents=True, exist_ok=True)

    for name, chart in flowcharts:
        try:
            output_file = export_flowchart(name, chart, args.output, args.friendly, args.anonymous)
        except FlowchartError as e:
            print(f"Error exporting {name}: {e}", file=sys.stderr)
            return 1
        if args.verbose:
            print(f"Exported '{name}' -> {output_file}")
        else:
            print(f"{output_file}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
