"""Plain-text reporting of ODE and DAE systems.

Every equation is written on its own line followed by a blank line; each
system ends with a one-line size summary and two blank lines:

    d[Raf]/dt = - kcat1[RasGTP][Raf]/K1m+[Raf] + kcat2[Pase1][Raf*]/K2m+[Raf*]

    [Raf*] = [Raf0] - [Raf]

    Size of DAE system 1: 20 right-side terms.

Nothing here makes modelling decisions; it is strictly presentation.
"""

from __future__ import annotations

import io
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from .conservation import ConservationTable
from .enumerator import DAEEnumerator, DAESystem, Equation
from .network import EnzymaticNetwork
from .reaction import RateTerm


def format_rhs(terms: Sequence[RateTerm]) -> str:
    """Right-hand side as space separated ``sign expression`` pairs."""
    return " ".join(t.render() for t in terms)


def format_ode(species: str, terms: Sequence[RateTerm]) -> str:
    rhs = format_rhs(terms)
    return f"d[{species}]/dt = {rhs}" if rhs else f"d[{species}]/dt ="


def format_equation(equation: Equation) -> str:
    if equation.algebraic is not None:
        return equation.algebraic.render()
    return format_ode(equation.species, equation.terms)


def _block(lines: Iterable[str], summary: str) -> str:
    out: List[str] = []
    for line in lines:
        out.append(line + "\n\n")
    out.append(summary + "\n\n\n")
    return "".join(out)


def format_original_system(network: EnzymaticNetwork) -> str:
    """The unsimplified ODE system and its size."""
    lines = [format_ode(s, terms) for s, terms in network.rhs().items()]
    return _block(lines, f"Size of the original ODE system: {network.size()} right-side terms.")


def format_dae_system(system: DAESystem) -> str:
    lines = [format_equation(eq) for eq in system.equations]
    return _block(lines, f"Size of DAE system {system.index}: {system.size} right-side terms.")


def write_report(
    network: EnzymaticNetwork,
    table: ConservationTable,
    stream: Optional[TextIO] = None,
    *,
    strict: bool = False,
) -> int:
    """Write the original system followed by every DAE system.

    Returns the number of DAE systems written.
    """
    out = stream if stream is not None else sys.stdout
    enumerator = DAEEnumerator(network, table, strict=strict)
    if strict:
        enumerator.check_pools()

    out.write(format_original_system(network))
    n = 0
    for system in enumerator:
        out.write(format_dae_system(system))
        n += 1
    return n


def format_report(network: EnzymaticNetwork, table: ConservationTable, *, strict: bool = False) -> str:
    """`write_report` into a string."""
    buf = io.StringIO()
    write_report(network, table, buf, strict=strict)
    return buf.getvalue()
