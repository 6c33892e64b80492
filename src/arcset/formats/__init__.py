from .dot import to_dot
from .metis import (
    MetisInstance,
    MetisParser,
    graph_from_file,
    parse_metis_lines,
    read_metis,
    write_metis,
)

__all__ = [
    "MetisInstance",
    "MetisParser",
    "graph_from_file",
    "parse_metis_lines",
    "read_metis",
    "to_dot",
    "write_metis",
]
