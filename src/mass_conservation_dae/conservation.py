"""Mass conservation relations of the Ras/MAPK cascade.

The total amounts of Raf, MEK and ERK (written Raf0, MEK0 and ERK0) are
constant. Each pool lists the species whose concentrations add up to its
total; any one of them can be replaced by the algebraic relation

    [s] = [pool] - (sum of the other members)

Which species belong to a pool depends on the kinetics: under the
quasi-steady-state assumption only free and phosphorylated forms are
tracked, while full mass action also tracks enzyme-substrate complexes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .network import ModelConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgebraicEquation:
    """``[species] = [pool] - [m1] - [m2] ...``"""

    species: str
    pool: str
    subtracted: Tuple[str, ...]

    def render(self) -> str:
        return f"[{self.species}] = [{self.pool}]" + "".join(f" - [{s}]" for s in self.subtracted)


class ConservationTable(Mapping[str, Tuple[str, ...]]):
    """Ordered mapping pool name -> member species.

    Member lists are kept exactly as given, duplicates across pools
    included; use `overlaps` to find them.
    """

    def __init__(self, pools: Iterable[Tuple[str, Sequence[str]]]) -> None:
        self._pools: Dict[str, Tuple[str, ...]] = {}
        for name, members in pools:
            if not name:
                raise ValueError("pool names must be non-empty")
            if name in self._pools:
                raise ValueError(f"duplicate pool '{name}'")
            members = tuple(members)
            if len(set(members)) != len(members):
                raise ValueError(f"pool '{name}' lists a species twice")
            self._pools[name] = members

    def __getitem__(self, pool: str) -> Tuple[str, ...]:
        return self._pools[pool]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pools)

    def __len__(self) -> int:
        return len(self._pools)

    def __repr__(self) -> str:
        return f"ConservationTable({self._pools!r})"

    def algebraic_equation(self, pool: str, species: str) -> AlgebraicEquation:
        """Conservation relation of `pool` solved for `species`."""
        members = self[pool]
        if species not in members:
            raise ValueError(f"'{species}' is not a member of pool '{pool}'")
        return AlgebraicEquation(species, pool, tuple(m for m in members if m != species))

    def overlaps(self) -> Dict[str, List[str]]:
        """Species listed in more than one pool, with the pools listing them."""
        seen: Dict[str, List[str]] = {}
        for pool, members in self._pools.items():
            for s in members:
                seen.setdefault(s, []).append(pool)
        return {s: pools for s, pools in seen.items() if len(pools) > 1}

    def missing_from(self, species: Iterable[str]) -> Dict[str, List[str]]:
        """Pool members absent from `species`, keyed by pool."""
        known = set(species)
        out: Dict[str, List[str]] = {}
        for pool, members in self._pools.items():
            absent = [s for s in members if s not in known]
            if absent:
                out[pool] = absent
        return out

    def n_combinations(self) -> int:
        n = 1
        for members in self._pools.values():
            n *= len(members)
        return n


def ras_mapk_conservation_table(config: Optional[ModelConfig] = None) -> ConservationTable:
    """Raf0, MEK0 and ERK0 pools for the given kinetics.

    Under QSS we assume the time-course Western blots measure either [MEK0]
    and [p-MEK] + [pp-MEK], or [ERK0] and [p-ERK] + [pp-ERK]. Without QSS the
    measured sums also contain every complex holding the protein.
    """
    cfg = config or ModelConfig()

    if cfg.michaelis_menten_for_all:
        pools = [
            ("Raf0", ["Raf", "Raf*"]),
            ("MEK0", ["MEK", "p-MEK", "pp-MEK"]),
            ("ERK0", ["ERK", "p-ERK", "pp-ERK"]),
        ]
    else:
        erk0 = ["ERK", "p-ERK", "pp-ERK", "pp-MEK-ERK", "pp-MEK-p-ERK"]
        if cfg.feedback:
            erk0 = ["ERK", "p-ERK", "pp-ERK", "pp-ERK-Raf*", "pp-MEK-ERK", "pp-MEK-p-ERK"]
        pools = [
            ("Raf0", ["Raf", "Raf*", "Raf*-MEK", "Raf*-p-MEK", "pp-ERK-Raf*"]),
            ("MEK0", ["MEK", "p-MEK", "pp-MEK", "pp-MEK-ERK", "pp-MEK-p-ERK", "Raf*-MEK", "Raf*-p-MEK"]),
            ("ERK0", erk0),
        ]

    table = ConservationTable(pools)
    logger.debug("conservation table (%s): %s", cfg.describe(), dict(table))
    return table
