from __future__ import annotations

from typing import Dict, Type

from ..errors import UnknownHeuristicError
from ..models import HeuristicInfo
from .base import FeedbackArcSetHeuristic
from .divide_and_conquer import DivideAndConquerHeuristic
from .greedy import GreedyHeuristic


_REGISTRY: Dict[str, Type[FeedbackArcSetHeuristic]] = {
    GreedyHeuristic.name: GreedyHeuristic,
    DivideAndConquerHeuristic.name: DivideAndConquerHeuristic,
}


def list_heuristics() -> list[str]:
    return sorted(_REGISTRY)


def get_heuristic(name: str) -> FeedbackArcSetHeuristic:
    cls = _REGISTRY.get(name)
    if cls is None:
        raise UnknownHeuristicError(name, list_heuristics())
    return cls()


def describe_heuristic(name: str) -> dict[str, object]:
    h = get_heuristic(name)
    return HeuristicInfo(name=h.name, description=h.description, deterministic=h.deterministic).model_dump()
