# cyclefinder/parsing/adjacency_file.py
"""
Adjacency file reader

-----------------------------
Purpose:
    - Validate every line against ``u: v1 w1 v2 w2 ...``
    - Derive the vertex count from the largest index referenced
    - Produce (u, v, weight) edge triples for AdjacencyGraph

Example file::

    0: 1 4 2 1.5
    1: 2 1
    2: 0 3
    3:
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, NamedTuple, Tuple, Union

from cyclefinder.errors import AdjacencyFormatError
from cyclefinder.graph.store import AdjacencyGraph

LINE_PATTERN = re.compile(r"(\d+):( \d+ \d+(\.\d+)?)*", re.ASCII)

# Logger setup
log = logging.getLogger(__name__)


class AdjacencyInput(NamedTuple):
    """Validated file contents: vertex count plus directed edges"""
    vertex_count: int
    edges: List[Tuple[int, int, float]]

    def to_graph(self, strict: bool = False) -> AdjacencyGraph:
        return AdjacencyGraph.from_edges(self.vertex_count, self.edges, strict=strict)


def validate_lines(lines: Iterable[str]) -> List[str]:
    """
    Check that every line matches the adjacency format

    Trailing newlines are stripped; any other whitespace difference,
    including a blank line, is a format error.

    Returns
    -------
    List[str]
        The stripped lines

    Raises
    ------
    AdjacencyFormatError
        On the first line that does not match
    """
    checked = []
    for number, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not LINE_PATTERN.fullmatch(line):
            raise AdjacencyFormatError(f"expected 'u: v w ...', got {line!r}",
                                       line_number=number, line=line)
        checked.append(line)
    return checked


def parse_lines(lines: Iterable[str]) -> AdjacencyInput:
    """
    Parse adjacency lines into a vertex count and an edge list

    The vertex count is one more than the largest vertex index appearing
    anywhere, as a source or as a target. No lines means no vertices.
    """
    max_index = -1
    edges = []

    for line in validate_lines(lines):
        head, _, tail = line.partition(":")
        u = int(head)
        max_index = max(max_index, u)

        parts = tail.split()
        for i in range(0, len(parts), 2):
            v = int(parts[i])
            weight = float(parts[i + 1])
            max_index = max(max_index, v)
            edges.append((u, v, weight))

    return AdjacencyInput(max_index + 1, edges)


def load_adjacency_file(path: Union[str, Path]) -> AdjacencyInput:
    """
    Read and parse an adjacency file

    Raises
    ------
    FileNotFoundError
        When the file does not exist
    AdjacencyFormatError
        When a line is malformed or the file is not valid UTF-8
    OSError
        When the path cannot be read (a directory, no permission)
    """
    path = Path(path)
    if not path.exists():
        log.error("Adjacency file not found: %s", path)
        raise FileNotFoundError(f"Adjacency file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            parsed = parse_lines(f)
    except UnicodeDecodeError as e:
        log.error("Invalid adjacency file %s: %s", path, e)
        raise AdjacencyFormatError(f"not valid UTF-8 text ({e.reason})") from e
    except AdjacencyFormatError as e:
        log.error("Invalid adjacency file %s: %s", path, e)
        raise
    except OSError as e:
        log.error("Cannot read adjacency file %s: %s", path, e)
        raise

    log.info("Adjacency file loaded: %s (%d vertices, %d edges)",
             path, parsed.vertex_count, len(parsed.edges))
    return parsed
