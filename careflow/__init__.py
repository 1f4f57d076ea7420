from .economics import DOMINANT, IcerOutcome, calculate_economics, calculate_icer
from .interventions import AIInterventionSpec, UptakeConfig, apply_ai_interventions
from .parameters import ModelParameters, get_default_parameters, sanitize_parameters
from .presets import build_parameters
from .runner import (
    SimulationCancelled, SimulationConfig, SimulationResult, run_simulation,
)
from .state import CompartmentalState, initialize_state
from .week import step
