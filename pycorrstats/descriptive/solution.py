"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pycorrstats.core.result import Result

if TYPE_CHECKING:
    from pycorrstats.descriptive.design import DescriptiveDesign


SUMMARY_ROWS = ("Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max.")


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    All fields are optional (None if not computed). describe() populates
    most of them; cor() and summary() only their own.
    """
    # Per-column statistics: arrays of shape (p,)
    mean: NDArray[np.floating[Any]] | None = None
    total: NDArray[np.floating[Any]] | None = None
    minimum: NDArray[np.floating[Any]] | None = None
    maximum: NDArray[np.floating[Any]] | None = None
    sd: NDArray[np.floating[Any]] | None = None

    # Per-column order statistics: arrays of shape (p,)
    first_quartile: NDArray[np.floating[Any]] | None = None
    median: NDArray[np.floating[Any]] | None = None
    third_quartile: NDArray[np.floating[Any]] | None = None
    min_regular: NDArray[np.floating[Any]] | None = None
    max_regular: NDArray[np.floating[Any]] | None = None

    # Matrices: shape (p, p)
    correlation_pearson: NDArray[np.floating[Any]] | None = None
    correlation_spearman: NDArray[np.floating[Any]] | None = None
    correlation_kendall: NDArray[np.floating[Any]] | None = None

    # Summary table: shape (6, p), rows as in SUMMARY_ROWS
    summary_table: NDArray[np.floating[Any]] | None = None

    # Missing data bookkeeping
    n_complete: int | None = None
    pairwise_n: NDArray[np.integer[Any]] | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    # --- Per-column statistics ---

    @property
    def mean(self) -> NDArray[np.floating[Any]] | None:
        """Per-column means, shape (p,)."""
        return self._result.params.mean

    @property
    def total(self) -> NDArray[np.floating[Any]] | None:
        """Per-column sums, shape (p,)."""
        return self._result.params.total

    @property
    def minimum(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.maximum

    @property
    def sd(self) -> NDArray[np.floating[Any]] | None:
        """Per-column sample standard deviation (n-1), shape (p,)."""
        return self._result.params.sd

    # --- Order statistics ---

    @property
    def first_quartile(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.first_quartile

    @property
    def median(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.median

    @property
    def third_quartile(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.third_quartile

    @property
    def regular_range(self) -> tuple[NDArray, NDArray] | None:
        """Per-column (lower, upper) Tukey fences."""
        p = self._result.params
        if p.min_regular is None or p.max_regular is None:
            return None
        return p.min_regular, p.max_regular

    def outliers(self) -> NDArray[np.bool_] | None:
        """
        Boolean (n, p) mask of values outside their column's regular range.

        NaN entries are never outliers.
        """
        rr = self.regular_range
        if rr is None:
            return None
        lower, upper = rr
        data = self._design.data
        with np.errstate(invalid='ignore'):
            return (data < lower) | (data > upper)

    # --- Matrices ---

    @property
    def correlation_matrix(self) -> NDArray[np.floating[Any]] | None:
        """Returns whichever correlation matrix was computed (Pearson first)."""
        p = self._result.params
        if p.correlation_pearson is not None:
            return p.correlation_pearson
        if p.correlation_spearman is not None:
            return p.correlation_spearman
        if p.correlation_kendall is not None:
            return p.correlation_kendall
        return None

    @property
    def correlation_pearson(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.correlation_pearson

    @property
    def correlation_spearman(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.correlation_spearman

    @property
    def correlation_kendall(self) -> NDArray[np.floating[Any]] | None:
        """Kendall tau-b correlation matrix, shape (p, p)."""
        return self._result.params.correlation_kendall

    # --- Summary ---

    @property
    def summary_table(self) -> NDArray[np.floating[Any]] | None:
        """Six-number summary (6, p): Min, Q1, Median, Mean, Q3, Max."""
        return self._result.params.summary_table

    # --- Missing data ---

    @property
    def n_complete(self) -> int | None:
        """Number of complete (no-NaN) observations."""
        return self._result.params.n_complete

    @property
    def pairwise_n(self) -> NDArray[np.integer[Any]] | None:
        """Pairwise observation counts, shape (p, p)."""
        return self._result.params.pairwise_n

    # --- Metadata ---

    @property
    def columns(self) -> tuple[str, ...] | None:
        return self._design.columns

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, Any]:
        return self._result.provenance

    def _column_names(self, p: int) -> tuple[str, ...]:
        return self.columns or tuple(f"V{i+1}" for i in range(p))

    def summary(self) -> str:
        """Printable summary table."""
        lines = []

        if self.summary_table is not None:
            table = self.summary_table
            p = table.shape[1]
            cols = self._column_names(p)

            col_widths = [
                max(len(cols[j]), max(len(f"{table[i, j]:.6f}") for i in range(6)))
                for j in range(p)
            ]
            label_width = max(len(lbl) for lbl in SUMMARY_ROWS)

            header = " " * (label_width + 2)
            header += "  ".join(c.rjust(w) for c, w in zip(cols, col_widths))
            lines.append(header)

            for i, label in enumerate(SUMMARY_ROWS):
                row = label.ljust(label_width) + "  "
                row += "  ".join(
                    f"{table[i, j]:.6f}".rjust(w) for j, w in enumerate(col_widths)
                )
                lines.append(row)
        elif self.correlation_matrix is not None:
            C = self.correlation_matrix
            cols = self._column_names(C.shape[0])
            width = max(max(len(c) for c in cols), 9)
            lines.append(" " * width + "  " + "  ".join(c.rjust(width) for c in cols))
            for i, name in enumerate(cols):
                lines.append(
                    name.ljust(width) + "  "
                    + "  ".join(f"{C[i, j]:.6f}".rjust(width) for j in range(len(cols)))
                )

        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = self._result.info.get('computed', [])
        stats_str = ", ".join(computed) if computed else "none"
        return (
            f"DescriptiveSolution(n={self._design.n}, p={self._design.p}, "
            f"computed=[{stats_str}])"
        )
