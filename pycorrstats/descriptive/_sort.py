"""
Tandem and triplet sorting.

Sorts a primary sequence ascending while applying the identical
permutation to one (tandem) or two (triplet) companion sequences, so
that element k of every companion still belongs with element k of the
primary afterwards. Used by rank() to carry original positions through
the sort.

Ordering: ascending numeric, NaN after every valid number. numpy's sort
already places NaN last, so the permutation comes from np.argsort.
The sort is not stable; ties and NaNs end up in unspecified relative
order.

All sequences are modified in place. Pass copies to keep the originals.
Concurrent calls on aliased buffers race on the shared storage.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pycorrstats.core.exceptions import ValidationError
from pycorrstats.core.validation import check_1d, check_consistent_length


def _check_writable(seq: Any, name: str) -> None:
    """Reject a target that cannot be permuted in place."""
    if isinstance(seq, np.ndarray):
        check_1d(seq, name)
        if not seq.flags.writeable:
            raise ValidationError(f"{name}: array is read-only")
    elif not isinstance(seq, MutableSequence):
        raise ValidationError(
            f"{name}: expected a numpy array or mutable sequence, "
            f"got {type(seq).__name__}"
        )


def _permuted(seq: MutableSequence | NDArray, order: NDArray) -> NDArray | list:
    """Copy of seq in the given order. List elements keep their own types."""
    if isinstance(seq, np.ndarray):
        return seq[order]
    return [seq[k] for k in order]


def _co_sort(primary, companions: tuple, names: tuple[str, ...]) -> None:
    targets = (primary, *companions)

    # Every check runs before the first write, so a rejected call leaves
    # all sequences untouched and still paired.
    check_consistent_length(*targets, names=names)
    for seq, name in zip(targets, names):
        _check_writable(seq, name)

    order = np.argsort(np.asarray(primary, dtype=np.float64), kind='quicksort')

    # Gather all permuted copies first so no target is read after a write
    # when two arguments alias the same buffer.
    permuted = [_permuted(seq, order) for seq in targets]
    for target, values in zip(targets, permuted):
        if isinstance(target, np.ndarray):
            target[...] = values
        else:
            target[:] = values


def tandem_sort(primary, companion) -> None:
    """
    Sort primary ascending in place, permuting companion identically.

    Parameters
    ----------
    primary : 1D numpy array or list of float
        Sequence defining the order. NaN sorts last.
    companion : 1D numpy array or list
        Sequence of the same length carried along with primary. List
        elements are moved as they are, without type conversion.

    Raises
    ------
    DimensionError
        If the sequences differ in length or are not 1D.
    ValidationError
        If a sequence cannot be written in place (read-only array,
        tuple). Nothing is modified when either error is raised.
    """
    _co_sort(primary, (companion,), ('primary', 'companion'))


def triplet_sort(primary, companion, companion2) -> None:
    """
    Sort primary ascending in place, permuting two companions identically.

    Same contract as tandem_sort with a second companion sequence.
    """
    _co_sort(
        primary, (companion, companion2),
        ('primary', 'companion', 'companion2'),
    )
