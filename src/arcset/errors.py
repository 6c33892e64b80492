from __future__ import annotations


class ArcsetError(Exception):
    """Base class for errors raised by arcset."""


class GraphError(ArcsetError):
    """Raised when a graph operation cannot be carried out."""


class UnknownVertexError(GraphError, KeyError):
    """Raised when a vertex id is not part of the graph."""

    def __init__(self, vertex: int) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Unknown vertex id {self.vertex}"


class CyclicGraphError(GraphError):
    """Raised by operations that require a DAG."""


class MetisFormatError(ArcsetError, ValueError):
    """Raised when a METIS instance file violates the format."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class UnknownHeuristicError(ArcsetError, KeyError):
    """Raised when a heuristic name is not registered."""

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.known = known

    def __str__(self) -> str:
        return f"Unknown heuristic '{self.name}'. Available: {', '.join(self.known)}"


class SolutionVerificationError(ArcsetError):
    """Raised when a computed edge set does not break every cycle."""
