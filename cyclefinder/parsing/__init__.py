from cyclefinder.parsing.adjacency_file import (
    AdjacencyInput,
    load_adjacency_file,
    parse_lines,
    validate_lines,
)

__all__ = ["AdjacencyInput", "load_adjacency_file", "parse_lines", "validate_lines"]
