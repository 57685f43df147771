"""Print every DAE simplification of the Ras/MAPK model.

Run:
    python -m mass_conservation_dae [--no-michaelis-menten] [--no-feedback]
"""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import Optional, Sequence

from .conservation import ras_mapk_conservation_table
from .enumerator import ModelConsistencyError
from .examples import ras_mapk_network
from .network import ModelConfig
from .report import write_report

logger = logging.getLogger(__name__)


def make_parser() -> ArgumentParser:
    """Returns an ArgumentParser with all the default options."""
    parser = ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--no-michaelis-menten", dest="michaelis_menten_for_all",
                        action="store_false",
                        help="use full mass action kinetics except for the "
                             "small-molecule enzymes (RasGTP, Pase1-3)")
    parser.add_argument("--no-feedback", dest="feedback",
                        action="store_false",
                        help="leave out the pp-ERK feedback on Raf*")
    parser.add_argument("--strict", action="store_true",
                        help="fail when a conservation pool lists a species "
                             "that has no ODE")
    parser.add_argument("--latex", action="store_true",
                        help="print the ODE system as LaTeX and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debugging information to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    options = make_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING,
                        stream=sys.stderr)

    config = ModelConfig(michaelis_menten_for_all=options.michaelis_menten_for_all,
                         feedback=options.feedback)
    logger.info("model: %s", config.describe())
    network = ras_mapk_network(config)

    if options.latex:
        sys.stdout.write(network.reactions_to_latex() + "\n\n")
        sys.stdout.write(network.to_latex() + "\n")
        return 0

    table = ras_mapk_conservation_table(config)
    try:
        n = write_report(network, table, sys.stdout, strict=options.strict)
    except ModelConsistencyError as e:
        logger.error("%s", e)
        return 1
    logger.debug("wrote %d DAE systems", n)
    return 0


if __name__ == "__main__":
    sys.exit(main())
