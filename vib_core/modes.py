# vib_core/modes.py
from __future__ import annotations
from typing import Sequence

from .errors import InvalidInputError

AXIAL_ORDERS = (1, 2, 3)


def mode_pairs(radial_orders: Sequence[int],
               axial_orders: Sequence[int] = AXIAL_ORDERS) -> list[tuple[int, int]]:
    """
    Every (m, n) combination, grouped by axial order:
        (m0,1), (m1,1), ..., (m0,2), (m1,2), ..., (m0,3), ...
    """
    radial = [int(m) for m in radial_orders]
    axial = [int(n) for n in axial_orders]

    if any(m < 0 for m in radial):
        raise InvalidInputError(f"Radial orders must be >= 0, got {radial}")
    if any(n < 1 for n in axial):
        raise InvalidInputError(f"Axial orders must be >= 1, got {axial}")

    return [(m, n) for n in axial for m in radial]


def radial_orders_from_force_orders(force_orders: Sequence[int]) -> list[int]:
    """
    Radial orders 0, 1, ... below the lowest force order, followed by the
    force orders themselves (the lowest order and its multiples).

    The force order vector carries a leading entry (usually 0) that is not
    used: force_orders[1] is the lowest force order.

    >>> radial_orders_from_force_orders([0, 4, 8, 12])
    [0, 1, 2, 3, 4, 8, 12]
    """
    orders = [int(r) for r in force_orders]
    if len(orders) < 2:
        raise InvalidInputError(
            f"Force orders need a leading entry and at least one order, got {orders}")
    if orders[1] < 0:
        raise InvalidInputError(f"Force orders must be >= 0, got {orders}")

    return list(range(orders[1])) + orders[1:]
