from __future__ import annotations

from .interpolator import InterpolatingMap
from .regression import LinearModel

SAMPLE_POINTS = ((1.0, 1.0), (3.0, 2.0), (5.0, 3.0), (7.0, 2.0))


# ===========================================================================
# Entry point
# ===========================================================================

def main() -> None:
    interpolating_map = (
        InterpolatingMap.builder()
        .regression_model(LinearModel())
        .data_points(*SAMPLE_POINTS)
        .build()
    )
    x = -1.0
    print(f"({x},  {interpolating_map.predict(x)})")
    print(interpolating_map.equation_string())
    print(f"R^2 = {interpolating_map.coefficient_of_determination():.4f}")


if __name__ == "__main__":
    main()
