from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import sympy as sp


def concentration_symbol(species: str) -> sp.Symbol:
    """SymPy symbol standing for the concentration ``[species]``."""
    return sp.Symbol(f"[{species}]", nonnegative=True)


def rate_symbol(name: str) -> sp.Symbol:
    """SymPy symbol for a rate or Michaelis constant (kept exactly as named)."""
    return sp.Symbol(name, positive=True)


@dataclass(frozen=True)
class RateTerm:
    """One signed term of an ODE right-hand side.

    Parameters
    ----------
    sign:
        +1 or -1.
    constant:
        Name of the rate constant, e.g. ``k3``, ``k-3``, ``k3cat`` or ``kcat1``.
    factors:
        Species whose concentrations multiply the constant, in order.
    michaelis:
        Optional ``(Km, substrate)`` pair. When given, the term is a
        Michaelis-Menten rate and is rendered as ``.../K<i>m+[S]``.

    Notes
    -----
    The rendered form keeps no space inside the rate expression, so a
    right-hand side is always a whitespace-separated sequence of
    ``sign expression`` pairs.
    """

    sign: int
    constant: str
    factors: Tuple[str, ...]
    michaelis: Optional[Tuple[str, str]] = None

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError("sign must be +1 or -1")
        if not self.constant:
            raise ValueError("rate constant name must be non-empty")

    @property
    def sign_symbol(self) -> str:
        return "+" if self.sign > 0 else "-"

    def expression(self) -> str:
        """Rate expression without its sign, e.g. ``k3[Raf*][MEK]``."""
        out = self.constant + "".join(f"[{s}]" for s in self.factors)
        if self.michaelis is not None:
            km, substrate = self.michaelis
            out += f"/{km}+[{substrate}]"
        return out

    def render(self) -> str:
        return f"{self.sign_symbol} {self.expression()}"

    def negated(self) -> "RateTerm":
        return RateTerm(-self.sign, self.constant, self.factors, self.michaelis)

    def to_sympy(self) -> sp.Expr:
        """Return the term as an (unsimplified) SymPy expression."""
        expr = rate_symbol(self.constant)
        for s in self.factors:
            expr = expr * concentration_symbol(s)
        if self.michaelis is not None:
            km, substrate = self.michaelis
            expr = expr / (rate_symbol(km) + concentration_symbol(substrate))
        return self.sign * expr


@dataclass(frozen=True)
class EnzymaticReaction:
    """An enzymatic conversion ``E + S -> P`` catalysed by E.

    Parameters
    ----------
    enzyme, substrate, product:
        Species names. The enzyme is recovered unchanged.

    Notes
    -----
    Under full mass action kinetics the reaction reads

        E + S  <->  E-S  ->  E + P

    with constants k<i>, k-<i> and k<i>cat. Eliminating the fast binding
    step gives the Michaelis-Menten rate kcat<i>[E][S]/(K<i>m+[S]).
    """

    enzyme: str
    substrate: str
    product: str

    def __post_init__(self) -> None:
        if not (self.enzyme and self.substrate and self.product):
            raise ValueError("enzyme, substrate and product must be non-empty")
        if self.enzyme == self.substrate:
            raise ValueError(f"enzyme '{self.enzyme}' cannot be its own substrate")

    @property
    def complex(self) -> str:
        """Name of the enzyme-substrate complex, ``<enzyme>-<substrate>``."""
        return f"{self.enzyme}-{self.substrate}"

    def michaelis_menten_terms(self, index: int) -> List[Tuple[str, Tuple[RateTerm, ...]]]:
        """Rate terms (per species) with the complex eliminated."""
        rate = RateTerm(
            1,
            f"kcat{index}",
            (self.enzyme, self.substrate),
            michaelis=(f"K{index}m", self.substrate),
        )
        return [
            (self.substrate, (rate.negated(),)),
            (self.product, (rate,)),
        ]

    def mass_action_terms(self, index: int) -> List[Tuple[str, Tuple[RateTerm, ...]]]:
        """Rate terms (per species) of the full three-step mechanism."""
        E, S, C = self.enzyme, self.substrate, self.complex
        binding = RateTerm(1, f"k{index}", (E, S))
        unbinding = RateTerm(1, f"k-{index}", (C,))
        catalysis = RateTerm(1, f"k{index}cat", (C,))

        # List order fixes the order in which new species are first seen.
        return [
            (E, (binding.negated(), unbinding, catalysis.negated())),
            (S, (binding.negated(), unbinding)),
            (C, (binding, unbinding.negated(), catalysis.negated())),
            (self.product, (catalysis,)),
        ]

    def to_string(self) -> str:
        return f"{self.enzyme} + {self.substrate} -> {self.product}"
