"""Pearson correlation between sparse rows."""

import math

from ..sparse import Row


DENOMINATOR_EPSILON = 1e-6


def pearson(a: Row, b: Row) -> float:
    """
    Pearson correlation over the columns present in both rows.

    Both rows must be sorted by column; the shared columns are found with a
    single two-pointer pass.

    Args:
        a: First row.
        b: Second row.

    Returns:
        Correlation in [-1, 1]. 0.0 when the rows share no column or when
        either side has (near) zero variance over the shared columns. NaN
        when a shared value is NaN or infinite.
    """
    n = 0
    sum_a = 0.0
    sum_squared_a = 0.0
    sum_b = 0.0
    sum_squared_b = 0.0
    product_sum = 0.0

    iter_a = iter(a)
    iter_b = iter(b)
    entry_a = next(iter_a, None)
    entry_b = next(iter_b, None)

    while entry_a is not None and entry_b is not None:
        if entry_a.column < entry_b.column:
            entry_a = next(iter_a, None)
        elif entry_a.column > entry_b.column:
            entry_b = next(iter_b, None)
        else:
            value_a = entry_a.value
            value_b = entry_b.value
            n += 1
            sum_a += value_a
            sum_squared_a += value_a * value_a
            sum_b += value_b
            sum_squared_b += value_b * value_b
            product_sum += value_a * value_b
            entry_a = next(iter_a, None)
            entry_b = next(iter_b, None)

    if n == 0:
        return 0.0

    numerator = product_sum - (sum_a * sum_b / n)
    variance_product = (
        (sum_squared_a - sum_a * sum_a / n) * (sum_squared_b - sum_b * sum_b / n)
    )
    if math.isnan(variance_product):
        return math.nan
    # Rounding can leave a tiny negative product for constant rows.
    if variance_product <= 0.0:
        return 0.0
    denominator = math.sqrt(variance_product)

    if denominator > DENOMINATOR_EPSILON:
        return numerator / denominator
    return 0.0


def pearson_distance(a: Row, b: Row) -> float:
    """Correlation distance, 1 - pearson(a, b)."""
    return 1.0 - pearson(a, b)
