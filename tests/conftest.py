from __future__ import annotations

import sys
from pathlib import Path


# Allow `pytest` to import the package directly from the src layout
# without requiring an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from mass_conservation_dae import ModelConfig


@pytest.fixture(
    params=[(True, True), (True, False), (False, True), (False, False)],
    ids=["qss-feedback", "qss", "mass-action-feedback", "mass-action"],
)
def config(request) -> ModelConfig:
    mm, feedback = request.param
    return ModelConfig(michaelis_menten_for_all=mm, feedback=feedback)
