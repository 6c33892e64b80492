from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from ..errors import MetisFormatError
from ..graph.digraph import DiGraph, Edge, VertexId

logger = logging.getLogger(__name__)


@dataclass
class MetisInstance:
    """
    Parsed PACE 2022 directed instance (https://pacechallenge.org/2022/tracks/).

    vertex_count / edge_count: values declared in the header line
    edges: (source, target) pairs with 1-based vertex ids
    """

    vertex_count: int = 0
    edge_count: int = 0
    edges: list[Edge] = field(default_factory=list)

    def to_graph(self) -> DiGraph:
        return DiGraph.from_vertices_and_edges(range(1, self.vertex_count + 1), self.edges)


def _parse_int(token: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise MetisFormatError(f"expected an integer, got {token!r}", line_no) from None


def parse_metis_lines(lines: Iterable[str], *, strict: bool = False) -> MetisInstance:
    """
    Parse METIS text lines.

    Header: `n m [t]`. Then one adjacency line per vertex 1..n listing its
    out-neighbours; an empty line is a vertex without out-edges. Lines
    starting with '%' are comments and never consume a vertex index.
    """
    inst = MetisInstance()
    header_seen = False
    vertex = 0

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line.lstrip().startswith("%"):
            continue

        if not header_seen:
            if not line.strip():
                continue
            parts = line.split()
            if len(parts) < 2:
                raise MetisFormatError("header must contain vertex and edge counts", line_no)
            inst.vertex_count = _parse_int(parts[0], line_no)
            inst.edge_count = _parse_int(parts[1], line_no)
            if inst.vertex_count < 0 or inst.edge_count < 0:
                raise MetisFormatError("header counts must be non-negative", line_no)
            header_seen = True
            continue

        vertex += 1
        if vertex > inst.vertex_count:
            if not line.strip():
                # trailing blank lines after the last vertex
                continue
            raise MetisFormatError(
                f"more adjacency lines than the {inst.vertex_count} declared vertices", line_no
            )

        for token in line.split():
            target = _parse_int(token, line_no)
            if not 1 <= target <= inst.vertex_count:
                raise MetisFormatError(
                    f"neighbour {target} outside 1..{inst.vertex_count}", line_no
                )
            inst.edges.append((vertex, target))

    if not header_seen:
        raise MetisFormatError("missing header line")

    if len(inst.edges) != inst.edge_count:
        msg = f"header declares {inst.edge_count} edges but {len(inst.edges)} were parsed"
        if strict:
            raise MetisFormatError(msg)
        logger.warning(msg)

    return inst


class MetisParser:
    def __init__(self, path: Path | str, *, strict: bool = False) -> None:
        self.path = Path(path)
        self.strict = strict

    def parse(self) -> MetisInstance:
        logger.debug("parsing METIS instance %s", self.path)
        with self.path.open("r", encoding="utf-8") as f:
            return parse_metis_lines(f, strict=self.strict)


def read_metis(path: Path | str, *, strict: bool = False) -> MetisInstance:
    return MetisParser(path, strict=strict).parse()


def graph_from_file(path: Path | str, *, strict: bool = False) -> DiGraph:
    return read_metis(path, strict=strict).to_graph()


def write_metis(graph: DiGraph, path: Path | str, comment: Optional[str] = None) -> dict[VertexId, int]:
    """
    Write graph in METIS format. Vertices are relabelled in ascending order
    to 1..n; the mapping old id -> written id is returned.
    """
    vertices = graph.vertices()
    mapping = {v: i for i, v in enumerate(vertices, start=1)}

    out_lines: list[str] = []
    if comment:
        out_lines.extend(f"% {c}" for c in comment.splitlines())
    out_lines.append(f"{graph.order()} {graph.edge_count()} 0")
    for v in vertices:
        out_lines.append(" ".join(str(mapping[w]) for w in graph.neighborhood(v)))

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(out_lines) + "\n", encoding="utf-8")
    return mapping
