def percent_change(current, previous):
    """Relative change from ``previous`` to ``current``, in percent.

    A zero baseline has no meaningful ratio, so it reports ``0`` when both
    values are zero and a flat ``100`` otherwise. A 0 -> 100 move and a
    0 -> 1,000,000 move therefore look the same to callers.

    No rounding is applied; works on ``int``, ``float`` and ``Decimal``.
    """
    if previous == 0:
        return 0 if current == 0 else 100
    return ((current - previous) / previous) * 100
