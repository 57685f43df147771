from __future__ import annotations

from typing import Optional, Tuple

from .reaction import EnzymaticReaction
from .network import EnzymaticNetwork, ModelConfig


# Enzymes whose concentration is not a dependent variable of the model.
SMALL_MOLECULE_ENZYMES = ("RasGTP", "Pase1", "Pase2", "Pase3")


def ras_mapk_reactions(config: Optional[ModelConfig] = None) -> Tuple[EnzymaticReaction, ...]:
    """Enzymatic reactions of the Ras/MAPK cascade, in model order.

    Reactions 1-2 cycle Raf, 3-6 doubly phosphorylate MEK and 7-10 ERK:

        RasGTP + Raf    -> Raf*        Pase1 + Raf*     -> Raf
        Raf*   + MEK    -> p-MEK       Raf*  + p-MEK    -> pp-MEK
        Pase2  + p-MEK  -> MEK         Pase2 + pp-MEK   -> p-MEK
        pp-MEK + ERK    -> p-ERK       pp-MEK + p-ERK   -> pp-ERK
        Pase3  + p-ERK  -> ERK         Pase3 + pp-ERK   -> p-ERK

    With ``config.feedback`` an 11th reaction, pp-ERK + Raf* -> Raf, closes
    the inhibitory loop.
    """
    cfg = config or ModelConfig()
    reactions = [
        EnzymaticReaction("RasGTP", "Raf", "Raf*"),
        EnzymaticReaction("Pase1", "Raf*", "Raf"),
        EnzymaticReaction("Raf*", "MEK", "p-MEK"),
        EnzymaticReaction("Raf*", "p-MEK", "pp-MEK"),
        EnzymaticReaction("Pase2", "p-MEK", "MEK"),
        EnzymaticReaction("Pase2", "pp-MEK", "p-MEK"),
        EnzymaticReaction("pp-MEK", "ERK", "p-ERK"),
        EnzymaticReaction("pp-MEK", "p-ERK", "pp-ERK"),
        EnzymaticReaction("Pase3", "p-ERK", "ERK"),
        EnzymaticReaction("Pase3", "pp-ERK", "p-ERK"),
    ]
    if cfg.feedback:
        reactions.append(EnzymaticReaction("pp-ERK", "Raf*", "Raf"))
    return tuple(reactions)


def ras_mapk_network(config: Optional[ModelConfig] = None) -> EnzymaticNetwork:
    """The Ras/MAPK cascade as an `EnzymaticNetwork`."""
    cfg = config or ModelConfig()
    return EnzymaticNetwork(
        reactions=list(ras_mapk_reactions(cfg)),
        config=cfg,
        constant_enzymes=frozenset(SMALL_MOLECULE_ENZYMES),
    )
