"""Ordinary least squares over an evenly indexed series."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinearFit:
    """Slope, intercept and goodness of fit of a line."""

    slope: float
    intercept: float
    r_squared: float

    def predict(self, index: float) -> float:
        """Return the fitted value at an index."""
        return self.slope * index + self.intercept


def fit_linear(values: list[float]) -> LinearFit:
    """Fit ``values`` against their indices 0..n-1.

    Degenerate inputs (fewer than two points) yield a flat line through the
    mean. R² is 0 when the series has no variance.
    """
    n = len(values)
    if n == 0:
        return LinearFit(slope=0.0, intercept=0.0, r_squared=0.0)

    sum_x = n * (n - 1) / 2
    sum_y = sum(values)
    sum_xy = sum(index * value for index, value in enumerate(values))
    sum_xx = sum(index * index for index in range(n))

    denominator = n * sum_xx - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / denominator if denominator else 0.0
    intercept = (sum_y - slope * sum_x) / n

    mean_y = sum_y / n
    ss_res = sum(
        (value - (slope * index + intercept)) ** 2
        for index, value in enumerate(values)
    )
    ss_tot = sum((value - mean_y) ** 2 for value in values)
    r_squared = 1 - ss_res / ss_tot if ss_tot > 0 else 0.0
    return LinearFit(slope=slope, intercept=intercept, r_squared=r_squared)
