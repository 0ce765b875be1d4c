"""Geometry grouping — rows, columns and grid regularity.

Rows are built by sorting on y and walking in order: an element joins the
current row while its y stays within ``grid_tolerance`` of the row's first
element, otherwise it starts a new row. Columns are the same walk on x.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from screensight.engine.config import EngineConfig
from screensight.models.layout import GridAnalysis, GridCell
from screensight.models.scene import Component
from screensight.utils import stats

logger = logging.getLogger(__name__)

Line = list[Component]


class GeometryGrouper:
    """Partitions components into rows / columns and scores grid regularity."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    # ── Partitioning ──

    def group_rows(self, components: Sequence[Component]) -> list[Line]:
        return self._walk(components, lambda c: c.position.y, lambda c: c.position.x)

    def group_columns(self, components: Sequence[Component]) -> list[Line]:
        return self._walk(components, lambda c: c.position.x, lambda c: c.position.y)

    def _walk(
        self,
        components: Sequence[Component],
        axis: Callable[[Component], float],
        cross: Callable[[Component], float],
    ) -> list[Line]:
        lines: list[Line] = []
        current: Line = []
        anchor = 0.0
        for comp in sorted(components, key=axis):
            if current and abs(axis(comp) - anchor) <= self.config.grid_tolerance:
                current.append(comp)
                continue
            if current:
                lines.append(sorted(current, key=cross))
            current = [comp]
            anchor = axis(comp)
        if current:
            lines.append(sorted(current, key=cross))
        return lines

    # ── Scores ──

    def is_regular_grid(self, rows: Sequence[Line], columns: Sequence[Line]) -> bool:
        """Near-uniform population: row sizes and column sizes each vary by less than the limit."""
        if not rows or not columns:
            return False
        limit = self.config.grid_population_variance_limit
        return (
            stats.variance([len(r) for r in rows]) < limit
            and stats.variance([len(c) for c in columns]) < limit
        )

    def regularity(self, rows: Sequence[Line], columns: Sequence[Line]) -> float:
        """Mean spacing consistency over every row and column with 2+ members."""
        scale = self.config.regularity_variance_scale
        scores: list[float] = []
        for row in rows:
            if len(row) > 1:
                gaps = [b.position.x - a.position.right for a, b in zip(row, row[1:])]
                scores.append(stats.inverse_variance(gaps, scale))
        for column in columns:
            if len(column) > 1:
                gaps = [b.position.y - a.position.bottom for a, b in zip(column, column[1:])]
                scores.append(stats.inverse_variance(gaps, scale))
        return stats.score(stats.mean(scores)) if scores else 0.0

    def alignment_score(self, components: Sequence[Component]) -> float:
        """Fraction of (pair, axis) checks where the two origins line up within tolerance."""
        n = len(components)
        if n < 2:
            return 0.0
        tol = self.config.alignment_tolerance
        hits = 0
        for i in range(n):
            a = components[i].position
            for j in range(i + 1, n):
                b = components[j].position
                if abs(a.y - b.y) <= tol:
                    hits += 1
                if abs(a.x - b.x) <= tol:
                    hits += 1
        checks = n * (n - 1)  # two axes per unordered pair
        return stats.score(hits / checks)

    def grid_score(self, components: Sequence[Component]) -> float:
        """Blend of regularity and alignment; 0 unless there are 2+ rows and 2+ columns."""
        rows = self.group_rows(components)
        columns = self.group_columns(components)
        if len(rows) < 2 or len(columns) < 2:
            return 0.0
        return stats.score((self.regularity(rows, columns) + self.alignment_score(components)) / 2)

    # ── Grid ──

    def analyze_grid(self, components: Sequence[Component]) -> GridAnalysis:
        if len(components) < self.config.min_grid_elements:
            return GridAnalysis()

        rows = self.group_rows(components)
        columns = self.group_columns(components)
        if len(rows) < 2 or len(columns) < 2 or not self.is_regular_grid(rows, columns):
            logger.debug("No grid: %d rows x %d columns", len(rows), len(columns))
            return GridAnalysis()

        return GridAnalysis(
            detected=True,
            rows=len(rows),
            columns=len(columns),
            cells=self._cells(rows, columns),
            regularity=self.regularity(rows, columns),
            alignment_score=self.alignment_score(components),
        )

    @staticmethod
    def _cells(rows: Sequence[Line], columns: Sequence[Line]) -> list[GridCell]:
        cells: list[GridCell] = []
        for r, row in enumerate(rows):
            for c, column in enumerate(columns):
                # A component sits in exactly one row and one column, so at most one match.
                occupant = next((comp for comp in row if any(comp is other for other in column)), None)
                cells.append(
                    GridCell(row=r, column=c, component_id=occupant.id if occupant else None)
                )
        return cells
