from __future__ import annotations

from typing import Iterable, Optional

from ..graph.digraph import DiGraph, Edge


def to_dot(graph: DiGraph, name: str = "G", highlight: Optional[Iterable[Edge]] = None) -> str:
    """Render graph as Graphviz DOT; highlighted edges are drawn red and dashed."""
    marked = set(highlight or ())
    lines = [f"digraph {name} {{"]
    for v in graph.vertices():
        lines.append(f"  {v};")
    for u, v in graph.all_edges():
        if (u, v) in marked:
            lines.append(f'  {u} -> {v} [color="red", style="dashed"];')
        else:
            lines.append(f"  {u} -> {v};")
    lines.append("}")
    return "\n".join(lines) + "\n"
