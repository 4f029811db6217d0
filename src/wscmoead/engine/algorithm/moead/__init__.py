"""
MOEA/D algorithm module.

This package provides the MOEA/D (Multi-Objective Evolutionary Algorithm based on
Decomposition) engine for web service composition:
- `moead.py`: main MOEAD class (generational loop, neighbour mating)
- `initialization.py`: config validation and run setup
- `context.py`: evolution context handed to individuals and operators
- `state.py`: MOEADState + result building
- `helpers.py`: aggregation functions, operator dispatch, representative assignment

References:
    Q. Zhang and H. Li, "MOEA/D: A Multiobjective Evolutionary Algorithm Based on
    Decomposition," IEEE Trans. Evolutionary Computation, vol. 11, no. 6, 2007.
"""

from .context import EvolutionContext
from .helpers import (
    DecompositionScalarizer,
    assign_representatives,
    build_aggregator,
    choose_operation,
    tchebycheff,
    weighted_sum,
)
from .initialization import finish_evaluating, initialize_moead_run, validate_moead_config
from .moead import MOEAD
from .state import MOEADState, build_moead_result

__all__ = [
    "MOEAD",
    # Helpers
    "DecompositionScalarizer",
    "assign_representatives",
    "build_aggregator",
    "choose_operation",
    "tchebycheff",
    "weighted_sum",
    # Setup
    "EvolutionContext",
    "finish_evaluating",
    "initialize_moead_run",
    "validate_moead_config",
    # State
    "MOEADState",
    "build_moead_result",
]
