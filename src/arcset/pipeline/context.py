from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..utils import new_id


@dataclass(frozen=True)
class RunContext:
    """Identifiers and standard artifact paths for one solve run."""

    runs_root: Path
    run_dir: Path
    instance_hash: str
    run_id: str

    @classmethod
    def create(
        cls,
        *,
        runs_root: Path,
        instance_hash: str,
        run_id: str | None = None,
    ) -> "RunContext":
        rid = run_id or new_id()
        return cls(
            runs_root=runs_root,
            run_dir=runs_root / rid,
            instance_hash=instance_hash,
            run_id=rid,
        )

    def path(self, filename: str) -> Path:
        return self.run_dir / filename

    def solution_path(self) -> Path:
        return self.path("solution.txt")

    def metrics_path(self) -> Path:
        return self.path("metrics.csv")

    def analysis_log_path(self) -> Path:
        return self.path("analysis_log.json")

    def report_path(self) -> Path:
        return self.path("report.md")

    def dot_path(self) -> Path:
        return self.path("graph.dot")

    def plots_dir(self) -> Path:
        return self.run_dir / "plots"
