from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """
    Tolerances and iteration caps for the iterative parts of the library.

    Everything else is closed-form; only Kepler's equation, the light-time
    loop and the near-parabolic solver consult this.
    Derive variants with dataclasses.replace(DEFAULT_CONFIG, ...).
    """
    kepler_tolerance: float = 1e-12          # radians
    kepler_max_iter: int = 5000              # e = 0.99 needs ~3000
    light_time_tolerance: float = 1e-9       # days
    light_time_max_iter: int = 10
    near_parabolic_tolerance: float = 1e-9
    near_parabolic_max_iter: int = 50

    def __post_init__(self) -> None:
        if self.kepler_max_iter < 1 or self.light_time_max_iter < 1 or self.near_parabolic_max_iter < 1:
            raise ValueError("iteration caps must be >= 1")
        if self.kepler_tolerance <= 0 or self.light_time_tolerance <= 0 or self.near_parabolic_tolerance <= 0:
            raise ValueError("tolerances must be > 0")


DEFAULT_CONFIG = SolverConfig()


def resolve(config: SolverConfig | None) -> SolverConfig:
    return DEFAULT_CONFIG if config is None else config
