from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Tuple

import sympy as sp

from .reaction import EnzymaticReaction, RateTerm, concentration_symbol

logger = logging.getLogger(__name__)

# Species name -> ordered rate terms of d[species]/dt.
RHS = Dict[str, Tuple[RateTerm, ...]]


@dataclass(frozen=True)
class ModelConfig:
    """Kinetic modelling choices, fixed for the lifetime of a run.

    Parameters
    ----------
    michaelis_menten_for_all:
        Eliminate every enzyme-substrate complex with the quasi-steady-state
        (Michaelis-Menten) approximation. When False, full mass action is used
        except for reactions catalysed by a constant enzyme.
    feedback:
        Add the inhibitory feedback of pp-ERK on Raf*.
    """

    michaelis_menten_for_all: bool = True
    feedback: bool = True

    def describe(self) -> str:
        kinetics = "Michaelis-Menten for all reactions" if self.michaelis_menten_for_all else "mass action"
        loop = "with" if self.feedback else "without"
        return f"{kinetics}, {loop} pp-ERK feedback"


@dataclass
class EnzymaticNetwork:
    """An ordered list of enzymatic reactions and its symbolic ODE system.

    Parameters
    ----------
    reactions:
        Reactions in order; reaction i (1-based) owns the constants
        k<i>, k-<i>, k<i>cat, kcat<i> and K<i>m.
    config:
        The `ModelConfig` selecting the kinetics.
    constant_enzymes:
        Enzymes treated as constants (small molecules, phosphatases). Their
        reactions always use the Michaelis-Menten rate and they get no ODE.

    Notes
    -----
    The right-hand side is assembled once, on first use, and cached.
    """

    reactions: List[EnzymaticReaction]
    config: ModelConfig = field(default_factory=ModelConfig)
    constant_enzymes: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        if not self.reactions:
            raise ValueError("a network needs at least one reaction")
        self.constant_enzymes = frozenset(self.constant_enzymes)
        self._rhs: RHS = {}

    def uses_michaelis_menten(self, reaction: EnzymaticReaction) -> bool:
        return self.config.michaelis_menten_for_all or reaction.enzyme in self.constant_enzymes

    def rhs(self) -> RHS:
        """Return the ODE right-hand sides, species in first-occurrence order."""
        if self._rhs:
            return self._rhs

        accumulated: Dict[str, List[RateTerm]] = {}
        for index, reaction in enumerate(self.reactions, start=1):
            if self.uses_michaelis_menten(reaction):
                contribution = reaction.michaelis_menten_terms(index)
            else:
                contribution = reaction.mass_action_terms(index)
            logger.debug("reaction %d (%s): %d species touched", index, reaction.to_string(), len(contribution))
            for species, terms in contribution:
                accumulated.setdefault(species, []).extend(terms)

        self._rhs = {species: tuple(terms) for species, terms in accumulated.items()}
        logger.debug("assembled %d ODEs with %d right-side terms", len(self._rhs), self.size())
        return self._rhs

    @property
    def species(self) -> List[str]:
        return list(self.rhs())

    @property
    def complexes(self) -> List[str]:
        """Enzyme-substrate complexes introduced by the mass action expansion."""
        return [r.complex for r in self.reactions if not self.uses_michaelis_menten(r)]

    def size(self) -> int:
        """Total number of right-side terms of the ODE system."""
        return sum(len(terms) for terms in self.rhs().values())

    def to_sympy(self) -> Dict[str, sp.Expr]:
        """Right-hand sides as unsimplified SymPy expressions."""
        return {
            species: sp.Add(*[t.to_sympy() for t in terms], evaluate=False)
            for species, terms in self.rhs().items()
        }

    def summary(self) -> str:
        """Human-readable summary."""
        lines = []
        lines.append(f"EnzymaticNetwork(n_reactions={len(self.reactions)}, n_species={len(self.species)})")
        lines.append("Kinetics: " + self.config.describe())
        lines.append("Species: " + ", ".join(self.species))
        complexes = self.complexes
        if complexes:
            lines.append("Complexes: " + ", ".join(complexes))
        return "\n".join(lines)

    def to_latex(self) -> str:
        """Export the ODE system to LaTeX.

        Returns an ``align`` environment with one line
            \\frac{d[X]}{dt} = F_X
        per species.
        """
        lines = []
        for species, expr in self.to_sympy().items():
            lhs = f"\\frac{{d{sp.latex(concentration_symbol(species))}}}{{dt}}"
            lines.append(f"{lhs} &= {sp.latex(expr)}")
        body = " \\\\\n".join(lines)
        return "\\begin{align}\n" + body + "\n\\end{align}"

    def reactions_to_latex(self) -> str:
        """Export the reaction scheme to LaTeX, one enzymatic reaction per line."""
        lines = []
        for index, r in enumerate(self.reactions, start=1):
            if self.uses_michaelis_menten(r):
                arrow = f"\\xrightarrow{{{r.enzyme}}}"
                lines.append(f"\\mathrm{{{r.substrate}}} &{arrow} \\mathrm{{{r.product}}}")
            else:
                lines.append(
                    f"\\mathrm{{{r.enzyme}}} + \\mathrm{{{r.substrate}}} "
                    f"&\\underset{{k_{{-{index}}}}}{{\\overset{{k_{{{index}}}}}{{\\rightleftharpoons}}}} "
                    f"\\mathrm{{{r.complex}}} \\xrightarrow{{k_{{{index}}}^{{cat}}}} "
                    f"\\mathrm{{{r.enzyme}}} + \\mathrm{{{r.product}}}"
                )
        body = " \\\\\n".join(lines)
        return "\\begin{align}\n" + body + "\n\\end{align}"
