# cyclefinder/__main__.py
"""
Command-line entry point

-----------------------------
Features:
    1. Load and validate an adjacency file
    2. Build the dense graph
    3. Search for the shortest cycle
    4. Print the cycle length (and optionally the cycle and graph statistics)

Usage:
    python -m cyclefinder graph.txt [--workers N] [--deadline S] [--show-cycle] [--stats]
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from cyclefinder import config
from cyclefinder.errors import AdjacencyFormatError, DeadlineExceededError
from cyclefinder.graph.cycle_finder import find_shortest_cycle
from cyclefinder.graph.stats import graph_stats
from cyclefinder.parsing.adjacency_file import load_adjacency_file
from cyclefinder.report import format_result, format_stats

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

log = logging.getLogger("cyclefinder")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cyclefinder",
        description="Find the minimum-weight directed cycle in an adjacency file.",
    )
    parser.add_argument("filename", help="adjacency file, one 'u: v w v w ...' line per vertex")
    parser.add_argument("--workers", type=int, default=config.WORKERS,
                        help="threads used for the per-vertex searches")
    parser.add_argument("--deadline", type=float, default=config.DEADLINE,
                        help="give up after this many seconds")
    parser.add_argument("--strict", action="store_true", default=config.STRICT_EDGES,
                        help="reject edges whose endpoints fall outside the graph")
    parser.add_argument("--show-cycle", action="store_true",
                        help="print the vertices of the shortest cycle")
    parser.add_argument("--stats", action="store_true",
                        help="print graph statistics before searching")
    parser.add_argument("--log-level", type=str.upper, default=config.LOG_LEVEL,
                        choices=LOG_LEVELS,
                        help="logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the cycle search

    Returns
    -------
    int
        Process exit status
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    started = time.perf_counter()
    try:
        parsed = load_adjacency_file(args.filename)
        graph = parsed.to_graph(strict=args.strict)

        if args.stats:
            print(format_stats(graph_stats(graph)))

        result = find_shortest_cycle(graph, workers=args.workers, deadline=args.deadline)

    except FileNotFoundError as e:
        print(e, file=sys.stderr)
        return 1
    except AdjacencyFormatError as e:
        print(f"Input file is not in the correct format or contains invalid data: {e}",
              file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read {args.filename}: {e}", file=sys.stderr)
        return 1
    except DeadlineExceededError as e:
        log.error("Search aborted: %s", e)
        return 1

    print(format_result(result, show_cycle=args.show_cycle))
    log.info("Finished in %.0f ms", (time.perf_counter() - started) * 1000)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log.info("Stopped by user")
        sys.exit(130)
