"""Top-level package API for mass_conservation_dae.

This package enumerates the Differential-Algebraic Equation (DAE) systems
obtained from the ODE model of the Ras/MAPK signaling pathway by replacing,
for each conserved protein pool (Raf0, MEK0, ERK0), one species' ODE with
the mass conservation relation of that pool, as described in

    M. S. Reis et al., "An interdisciplinary approach for designing kinetic
    models of the Ras/MAPK signaling pathway", Kinase Signaling Networks,
    Methods in Molecular Biology 1636, chap. 28 (2017).

Public API:
- EnzymaticReaction, RateTerm
- ModelConfig, EnzymaticNetwork
- ConservationTable, AlgebraicEquation
- DAEEnumerator, DAESystem, ModelConsistencyError
- Report formatting helpers
- The built-in Ras/MAPK model
"""

from .reaction import EnzymaticReaction, RateTerm
from .network import EnzymaticNetwork, ModelConfig
from .conservation import AlgebraicEquation, ConservationTable, ras_mapk_conservation_table
from .enumerator import DAEEnumerator, DAESystem, Equation, ModelConsistencyError
from .report import (
    format_dae_system,
    format_equation,
    format_ode,
    format_original_system,
    format_report,
    write_report,
)
from .examples import (
    SMALL_MOLECULE_ENZYMES,
    ras_mapk_network,
    ras_mapk_reactions,
)

__all__ = [
    "EnzymaticReaction",
    "RateTerm",
    "EnzymaticNetwork",
    "ModelConfig",
    "AlgebraicEquation",
    "ConservationTable",
    "ras_mapk_conservation_table",
    "DAEEnumerator",
    "DAESystem",
    "Equation",
    "ModelConsistencyError",
    "format_dae_system",
    "format_equation",
    "format_ode",
    "format_original_system",
    "format_report",
    "write_report",
    "SMALL_MOLECULE_ENZYMES",
    "ras_mapk_network",
    "ras_mapk_reactions",
]
