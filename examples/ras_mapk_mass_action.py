"""Inspect the mass action Ras/MAPK model and its DAE simplifications.

This script illustrates the library workflow behind the command line tool:

- build the network with full mass action kinetics (complexes included),
- list the conservation pools and the species they share, and
- print the three smallest DAE systems.

Run:
    python examples/ras_mapk_mass_action.py
"""

from __future__ import annotations

from mass_conservation_dae import (
    DAEEnumerator,
    ModelConfig,
    format_dae_system,
    ras_mapk_conservation_table,
    ras_mapk_network,
)


def main() -> None:
    config = ModelConfig(michaelis_menten_for_all=False, feedback=True)
    net = ras_mapk_network(config)
    table = ras_mapk_conservation_table(config)

    print(net.summary())
    print(f"Original size: {net.size()} right-side terms")
    for pool, members in table.items():
        print(f"  {pool}: {', '.join(members)}")
    for species, pools in table.overlaps().items():
        print(f"  shared: {species} ({', '.join(pools)})")

    systems = sorted(DAEEnumerator(net, table), key=lambda s: (s.size, s.index))
    print()
    for system in systems[:3]:
        print(format_dae_system(system), end="")


if __name__ == "__main__":
    main()
