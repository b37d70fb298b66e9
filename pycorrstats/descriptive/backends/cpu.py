"""
CPU backend for descriptive statistics.

Applies the scalar functions (mean, percentile, pearson, ...) column by
column or pair by pair, under the requested missing-data policy.
"""

from __future__ import annotations

from typing import Callable
import numpy as np
from numpy.typing import NDArray

from pycorrstats.core.result import Result, _default_provenance
from pycorrstats.core.compute.timing import Timer
from pycorrstats.descriptive.design import DescriptiveDesign
from pycorrstats.descriptive.solution import DescriptiveParams
from pycorrstats.descriptive._missing import apply_use_policy, pairwise_mask
from pycorrstats.descriptive import _general
from pycorrstats.descriptive._percentile import (
    FENCE_FACTOR, sorted_clean, _interpolate,
)
from pycorrstats.descriptive.correlation import pearson, spearman, kendall


COR_FUNCTIONS: dict[str, Callable[[NDArray, NDArray], float]] = {
    'cor_pearson': pearson,
    'cor_spearman': spearman,
    'cor_kendall': kendall,
}

VALID_COMPUTE = frozenset({
    'mean', 'sum', 'min', 'max', 'sd', 'quartiles', 'regular_range',
    'summary', *COR_FUNCTIONS,
})


class CPUDescriptiveBackend:
    """CPU backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: DescriptiveDesign,
        *,
        compute: set[str],
        use: str = 'everything',
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : DescriptiveDesign
        compute : set of str
            Which statistics to compute. Valid entries:
            'mean', 'sum', 'min', 'max', 'sd', 'quartiles',
            'regular_range', 'summary', 'cor_pearson', 'cor_spearman',
            'cor_kendall'
        use : str
            Missing data policy.
        """
        unknown = set(compute) - VALID_COMPUTE
        if unknown:
            raise ValueError(f"Unknown statistics requested: {sorted(unknown)}")

        timer = Timer()
        timer.start()

        warnings_list: list[str] = []
        fields: dict[str, object] = {}

        with timer.section('missing_data'):
            clean_data, n_complete = apply_use_policy(design.data, use)
        fields['n_complete'] = n_complete

        simple = (
            ('mean', 'mean', _general.mean),
            ('sum', 'total', _general.sum),
            ('min', 'minimum', _general.min),
            ('max', 'maximum', _general.max),
            ('sd', 'sd', _general.standard_deviation),
        )
        for key, field_name, func in simple:
            if key in compute:
                with timer.section(key):
                    fields[field_name] = self._per_column(clean_data, func)

        if compute & {'quartiles', 'regular_range', 'summary'}:
            with timer.section('order_statistics'):
                fields.update(self._order_statistics(clean_data, compute))

        labels = design.columns or tuple(f"V{i+1}" for i in range(design.p))
        for key, func in COR_FUNCTIONS.items():
            if key not in compute:
                continue
            with timer.section(key):
                if use == 'pairwise.complete.obs':
                    cor_mat, n_pairs = self._cor_pairwise(design.data, func)
                    fields['pairwise_n'] = n_pairs
                else:
                    cor_mat = self._cor_matrix(clean_data, func)
            fields[f'correlation_{key[4:]}'] = cor_mat
            warnings_list.extend(self._undefined_pairs(key, cor_mat, labels))

        timer.stop()

        return Result(
            params=DescriptiveParams(**fields),
            info={'use': use, 'computed': sorted(compute)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
            provenance={**_default_provenance(), 'algorithm': 'direct'},
        )

    # --- Column-wise statistics ---

    @staticmethod
    def _per_column(data: NDArray, func: Callable[[NDArray], float]) -> NDArray:
        return np.array([func(data[:, j]) for j in range(data.shape[1])])

    def _order_statistics(self, data: NDArray, compute: set[str]) -> dict[str, NDArray]:
        """
        Quartiles, Tukey fences and the six-number summary.

        Each column is cleaned and sorted once and shared by all of them.
        """
        p = data.shape[1]
        q = np.full((3, p), np.nan)
        summary = np.full((6, p), np.nan)

        for j in range(p):
            s = sorted_clean(data[:, j])
            if len(s) == 0:
                continue
            q[:, j] = [_interpolate(s, 25.0), _interpolate(s, 50.0), _interpolate(s, 75.0)]
            summary[:, j] = [s[0], q[0, j], q[1, j], np.mean(s), q[2, j], s[-1]]

        out: dict[str, NDArray] = {}
        if 'quartiles' in compute:
            out['first_quartile'] = q[0]
            out['median'] = q[1]
            out['third_quartile'] = q[2]
        if 'regular_range' in compute:
            iqr = q[2] - q[0]
            out['min_regular'] = q[0] - FENCE_FACTOR * iqr
            out['max_regular'] = q[2] + FENCE_FACTOR * iqr
        if 'summary' in compute:
            out['summary_table'] = summary
        return out

    # --- Bivariate statistics ---

    @staticmethod
    def _cor_matrix(data: NDArray, func: Callable[[NDArray, NDArray], float]) -> NDArray:
        """
        Correlation matrix over all rows of data.

        A pair with any NaN is NaN (the coefficient functions propagate it).
        """
        p = data.shape[1]
        cor_mat = np.eye(p, dtype=np.float64)
        for i in range(p):
            for j in range(i + 1, p):
                cor_mat[i, j] = cor_mat[j, i] = func(data[:, i], data[:, j])
        return cor_mat

    @staticmethod
    def _cor_pairwise(
        data: NDArray, func: Callable[[NDArray, NDArray], float],
    ) -> tuple[NDArray, NDArray]:
        """
        Pairwise-complete correlation matrix.

        For each (i, j) pair, uses only the rows where BOTH variables are
        non-NaN. Pairs left with fewer than 3 rows are NaN.
        """
        p = data.shape[1]
        cor_mat = np.eye(p, dtype=np.float64)
        n_pairs = np.empty((p, p), dtype=np.int64)

        for i in range(p):
            n_pairs[i, i] = int((~np.isnan(data[:, i])).sum())
            for j in range(i + 1, p):
                mask = pairwise_mask(data[:, i], data[:, j])
                n_pairs[i, j] = n_pairs[j, i] = int(mask.sum())
                cor_mat[i, j] = cor_mat[j, i] = func(data[mask, i], data[mask, j])

        return cor_mat, n_pairs

    @staticmethod
    def _undefined_pairs(key: str, cor_mat: NDArray, labels: tuple[str, ...]) -> list[str]:
        rows, cols = np.where(np.triu(np.isnan(cor_mat), k=1))
        return [
            f"{key}[{labels[i]}, {labels[j]}] is undefined "
            f"(fewer than 3 usable observations, missing values or zero variance)"
            for i, j in zip(rows, cols)
        ]
