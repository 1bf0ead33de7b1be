from __future__ import annotations

from dataclasses import dataclass

# Display precision of the plain-text equation string, per model family.
LINEAR_DECIMALS: int = 2
QUADRATIC_DECIMALS: int = 5


@dataclass(frozen=True, slots=True)
class EquationSettings:
    decimals: int = LINEAR_DECIMALS
    latex_approx: bool = True    # use decimal approximations in LaTeX output

    def __post_init__(self) -> None:
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ValueError(f"decimals must be an int, got {self.decimals!r}")
        if not (0 <= self.decimals <= 10):
            raise ValueError(f"decimals must be in [0, 10], got {self.decimals}")
