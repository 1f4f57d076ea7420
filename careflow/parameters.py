import dataclasses
from dataclasses import dataclass, field
from typing import Dict

from .utils import sanitize_value


def _default_per_diem_costs():
    # USD per patient-day, validated against recent LMIC public-sector data
    return {
        'I': 10,   # informal care (healers, pharmacies, self-medication)
        'F': 20,   # formal entry point (triage, registration)
        'L0': 15,  # community health workers
        'L1': 35,  # primary care facilities
        'L2': 100, # district hospitals
        'L3': 200, # tertiary hospitals
    }


@dataclass(frozen=True)
class ModelParameters:
    """
    Rate constants for one scenario. Weekly probabilities unless noted.

    Built once per scenario and never mutated; AI effects and presets
    produce new instances via dataclasses.replace.
    """
    # Disease characteristics
    incidence_rate: float = 0.20      # lambda, annual cases per person
    disability_weight: float = 0.20
    mean_age_of_infection: float = 30

    # Care seeking
    phi0: float = 0.45                # direct-to-formal on onset
    sigma_i: float = 0.20             # informal -> formal
    informal_care_ratio: float = 0.20 # share of non-formal seekers left strictly untreated

    # Resolution
    mu_u: float = 0.05
    mu_i: float = 0.30
    mu0: float = 0.50
    mu1: float = 0.60
    mu2: float = 0.70
    mu3: float = 0.80

    # Mortality
    delta_u: float = 0.015
    delta_i: float = 0.012
    delta0: float = 0.008
    delta1: float = 0.005
    delta2: float = 0.003
    delta3: float = 0.002

    # Referral to the next level up
    rho0: float = 0.75
    rho1: float = 0.25
    rho2: float = 0.15

    # Economics
    per_diem_costs: Dict[str, float] = field(default_factory=_default_per_diem_costs)
    discount_rate: float = 0.0
    regional_life_expectancy: float = 70

    # Capacity and queues
    system_congestion: float = 0.0
    capacity_share: float = 0.10
    competition_sensitivity: float = 1.0
    queue_abandonment_rate: float = 0.15
    queue_bypass_rate: float = 0.20
    queue_clearance_rate: float = 0.30
    queue_self_resolve_rate: float = 0.10

    # AI-derived (zero until apply_ai_interventions fills them in)
    ai_fixed_cost: float = 0.0
    ai_variable_cost: float = 0.0
    self_care_active: bool = False
    visit_reduction: float = 0.0
    direct_routing_improvement: float = 0.0
    smart_routing_rate: float = 0.0
    queue_prevention_rate: float = 0.0
    resolution_boost: float = 0.0
    point_of_care_resolution: float = 0.0
    length_of_stay_reduction: float = 0.0
    discharge_optimization: float = 0.0
    treatment_efficiency: float = 0.0
    resource_utilization: float = 0.0

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    def to_dict(self):
        return dataclasses.asdict(self)


def get_default_parameters():
    return ModelParameters()


def sanitize_parameters(params):
    """Replace NaN/infinite numeric fields (including per-diem costs) with finite values."""
    changes = {}
    for f in dataclasses.fields(params):
        value = getattr(params, f.name)
        if isinstance(value, bool):
            continue
        if isinstance(value, (int, float)):
            clean = sanitize_value(float(value), f.name)
            if clean != value:
                changes[f.name] = clean
        elif f.name == 'per_diem_costs':
            costs = {k: sanitize_value(float(v), f'per_diem_costs.{k}') for k, v in value.items()}
            if costs != value:
                changes[f.name] = costs
    return params.replace(**changes) if changes else params
