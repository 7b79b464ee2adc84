"""HorizonScaler - perspective compression of grid rows toward the horizon."""
from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate

from tick_wave.types import WaveConfigError

# Fraction of every later share pulled into the current one.
TRANSFER = 0.05
BUDGET = 100.0


@dataclass(frozen=True)
class PerspectiveCurve:
    """Cumulative depth fractions for rows 0..row_count.

    ``forward`` is indexed by row (horizon at 0, baseline at row_count) and
    ``reversed`` by distance from the baseline, which is how dots look up
    their own depth scale.
    """

    forward: tuple[float, ...]
    reversed: tuple[float, ...]

    @property
    def row_count(self) -> int:
        return len(self.forward) - 1


def horizon_shares(row_count: int) -> list[float]:
    """Split the budget into front-loaded shares, nearest row first."""
    if row_count < 1:
        raise WaveConfigError("row_count must be at least 1")
    shares = [BUDGET / row_count] * row_count
    for i in range(row_count - 1):
        for j in range(i + 1, row_count):
            moved = shares[j] * TRANSFER
            shares[i] += moved
            shares[j] -= moved
    return shares


def cumulative(shares: list[float]) -> list[float]:
    """Running totals of ``shares`` normalized from the budget into [0, 1]."""
    return [total / BUDGET for total in accumulate(shares)]


class HorizonScaler:
    def compute_curve(self, row_count: int) -> PerspectiveCurve:
        shares = horizon_shares(row_count)
        shares.reverse()
        curve = cumulative(shares)
        return PerspectiveCurve(
            forward=(0.0, *curve),
            reversed=(1.0, *reversed(curve)),
        )
