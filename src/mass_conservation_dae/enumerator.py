from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .conservation import AlgebraicEquation, ConservationTable
from .network import RHS, EnzymaticNetwork
from .reaction import RateTerm

logger = logging.getLogger(__name__)


class ModelConsistencyError(ValueError):
    """A conservation pool names a species that has no ODE."""

    def __init__(self, missing: Mapping[str, Sequence[str]]) -> None:
        self.missing = {pool: list(species) for pool, species in missing.items()}
        details = "; ".join(f"{pool}: {', '.join(species)}" for pool, species in self.missing.items())
        super().__init__(f"pool members without an ODE ({details})")


@dataclass(frozen=True)
class Equation:
    """One line of a DAE system: the ODE of `species`, or the AE replacing it."""

    species: str
    terms: Tuple[RateTerm, ...] = ()
    algebraic: Optional[AlgebraicEquation] = None

    @property
    def is_algebraic(self) -> bool:
        return self.algebraic is not None

    @property
    def n_terms(self) -> int:
        """Right-side rate terms; algebraic equations count none."""
        return 0 if self.is_algebraic else len(self.terms)


@dataclass(frozen=True)
class DAESystem:
    """A complete choice of one ODE or AE per species.

    Attributes
    ----------
    index:
        1-based position in enumeration order.
    choices:
        Pool name -> species whose ODE the pool replaces.
    equations:
        One `Equation` per ODE species, in ODE order.
    """

    index: int
    choices: Dict[str, str]
    equations: Tuple[Equation, ...]

    @property
    def size(self) -> int:
        """Number of right-side terms left in the differential equations."""
        return sum(eq.n_terms for eq in self.equations)

    @property
    def algebraic_species(self) -> List[str]:
        return [eq.species for eq in self.equations if eq.is_algebraic]


class DAEEnumerator:
    """Lazily enumerate every DAE obtained by one substitution per pool.

    Parameters
    ----------
    source:
        An `EnzymaticNetwork`, or an already assembled right-hand side.
    table:
        The `ConservationTable` listing the pools.
    strict:
        Raise `ModelConsistencyError` before enumerating when a pool member
        has no ODE. Otherwise the mismatch is logged and such a choice
        replaces nothing.

    Notes
    -----
    Combinations run over the Cartesian product of the pool member lists,
    the first pool outermost. When one species is chosen by two pools, the
    earlier pool's relation is used. Iterating again restarts from the
    first system.
    """

    def __init__(
        self,
        source: Union[EnzymaticNetwork, RHS],
        table: ConservationTable,
        strict: bool = False,
    ) -> None:
        self.rhs: RHS = source.rhs() if isinstance(source, EnzymaticNetwork) else dict(source)
        self.table = table
        self.strict = strict

    def __len__(self) -> int:
        return self.table.n_combinations()

    def check_pools(self) -> None:
        """Raise `ModelConsistencyError` if a pool member has no ODE."""
        missing = self.table.missing_from(self.rhs)
        if missing:
            raise ModelConsistencyError(missing)

    def _report_inconsistencies(self) -> None:
        if self.strict:
            self.check_pools()
            return
        for pool, absent in self.table.missing_from(self.rhs).items():
            for s in absent:
                logger.warning("pool %s lists '%s', which has no ODE; choosing it replaces nothing", pool, s)
        for s, pools in self.table.overlaps().items():
            logger.warning("'%s' is listed in pools %s; the first listed pool takes precedence", s, ", ".join(pools))

    def system(self, index: int, choices: Mapping[str, str]) -> DAESystem:
        """Build the DAE system replacing, for each pool, the ODE of ``choices[pool]``."""
        substitutions: Dict[str, AlgebraicEquation] = {}
        for pool in self.table:
            ae = self.table.algebraic_equation(pool, choices[pool])
            substitutions.setdefault(ae.species, ae)

        equations = []
        for species, terms in self.rhs.items():
            equations.append(Equation(species, terms, substitutions.get(species)))
        return DAESystem(index, dict(choices), tuple(equations))

    def __iter__(self) -> Iterator[DAESystem]:
        self._report_inconsistencies()
        pools = list(self.table)
        logger.debug("enumerating %d DAE systems over pools %s", len(self), ", ".join(pools))
        combinations = itertools.product(*(self.table[p] for p in pools))
        for index, combo in enumerate(combinations, start=1):
            yield self.system(index, dict(zip(pools, combo)))
