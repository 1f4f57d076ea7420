"""
Disease profiles and health-system presets.

Values are calibration data supplied by the modelling team; this module
only defines how they layer: defaults <- disease profile <- health-system
direct values, then health-system multipliers scale the disease rates.
"""
from .interventions import clamp_probabilities
from .parameters import get_default_parameters

# ---------------------------------------------------------
# 1. Disease Profiles (weekly rates)
# ---------------------------------------------------------
DISEASE_PROFILES = {
    'congestive_heart_failure': {
        'incidence_rate': 0.002, 'disability_weight': 0.42, 'mean_age_of_infection': 67,
        'mu_i': 0.01, 'mu_u': 0.004, 'mu0': 0.03, 'mu1': 0.35, 'mu2': 0.55, 'mu3': 0.75,
        'delta_i': 0.08, 'delta_u': 0.09, 'delta0': 0.04, 'delta1': 0.025, 'delta2': 0.015, 'delta3': 0.01,
        'rho0': 0.70, 'rho1': 0.55, 'rho2': 0.35,
        'capacity_share': 0.08, 'competition_sensitivity': 1.3,
        'queue_abandonment_rate': 0.02, 'queue_bypass_rate': 0.03, 'queue_clearance_rate': 0.20,
    },
    'tuberculosis': {
        'incidence_rate': 0.003, 'disability_weight': 0.333, 'mean_age_of_infection': 35,
        'mu_i': 0.02, 'mu_u': 0.005, 'mu0': 0.03, 'mu1': 0.04, 'mu2': 0.05, 'mu3': 0.06,
        'delta_i': 0.0035, 'delta_u': 0.004, 'delta0': 0.0025, 'delta1': 0.002, 'delta2': 0.0015, 'delta3': 0.001,
        'rho0': 0.85, 'rho1': 0.45, 'rho2': 0.30,
        'capacity_share': 0.05, 'competition_sensitivity': 0.9,
        'queue_abandonment_rate': 0.04, 'queue_bypass_rate': 0.05, 'queue_clearance_rate': 0.25,
    },
    'childhood_pneumonia': {
        'incidence_rate': 0.05, 'disability_weight': 0.28, 'mean_age_of_infection': 3,
        'mu_i': 0.10, 'mu_u': 0.06, 'mu0': 0.70, 'mu1': 0.80, 'mu2': 0.85, 'mu3': 0.90,
        'delta_i': 0.045, 'delta_u': 0.05, 'delta0': 0.02, 'delta1': 0.015, 'delta2': 0.01, 'delta3': 0.008,
        'rho0': 0.60, 'rho1': 0.30, 'rho2': 0.20,
        'capacity_share': 0.15, 'competition_sensitivity': 1.5,
        'queue_abandonment_rate': 0.03, 'queue_bypass_rate': 0.08, 'queue_clearance_rate': 0.25,
    },
    'malaria': {
        'incidence_rate': 0.20, 'disability_weight': 0.186, 'mean_age_of_infection': 7,
        'mu_i': 0.15, 'mu_u': 0.08, 'mu0': 0.75, 'mu1': 0.80, 'mu2': 0.90, 'mu3': 0.95,
        'delta_i': 0.025, 'delta_u': 0.03, 'delta0': 0.005, 'delta1': 0.003, 'delta2': 0.002, 'delta3': 0.0015,
        'rho0': 0.25, 'rho1': 0.20, 'rho2': 0.10,
        'capacity_share': 0.10, 'competition_sensitivity': 1.2,
        'queue_abandonment_rate': 0.06, 'queue_bypass_rate': 0.15, 'queue_clearance_rate': 0.40,
    },
    'fever': {
        'incidence_rate': 0.60, 'disability_weight': 0.10, 'mean_age_of_infection': 15,
        'mu_i': 0.30, 'mu_u': 0.25, 'mu0': 0.55, 'mu1': 0.70, 'mu2': 0.80, 'mu3': 0.90,
        'delta_i': 0.012, 'delta_u': 0.015, 'delta0': 0.008, 'delta1': 0.005, 'delta2': 0.003, 'delta3': 0.002,
        'rho0': 0.30, 'rho1': 0.20, 'rho2': 0.10,
        'capacity_share': 0.12, 'competition_sensitivity': 1.0,
        'queue_abandonment_rate': 0.12, 'queue_bypass_rate': 0.25, 'queue_clearance_rate': 0.45,
    },
    'diarrhea': {
        'incidence_rate': 0.30, 'disability_weight': 0.15, 'mean_age_of_infection': 2,
        'mu_i': 0.35, 'mu_u': 0.20, 'mu0': 0.85, 'mu1': 0.90, 'mu2': 0.80, 'mu3': 0.85,
        'delta_i': 0.02, 'delta_u': 0.025, 'delta0': 0.003, 'delta1': 0.002, 'delta2': 0.0015, 'delta3': 0.001,
        'rho0': 0.50, 'rho1': 0.30, 'rho2': 0.10,
        'capacity_share': 0.18, 'competition_sensitivity': 1.4,
        'queue_abandonment_rate': 0.08, 'queue_bypass_rate': 0.18, 'queue_clearance_rate': 0.40,
    },
}

# ---------------------------------------------------------
# 2. Health-system Presets
# 'direct': replaces the parameter outright
# 'multipliers': scales the disease baseline (1.0 = unchanged)
# ---------------------------------------------------------
HEALTH_SYSTEMS = {
    'moderate_urban_system': {
        'direct': {
            'phi0': 0.65, 'sigma_i': 0.25, 'informal_care_ratio': 0.15, 'regional_life_expectancy': 70,
            'per_diem_costs': {'I': 12, 'F': 25, 'L0': 20, 'L1': 40, 'L2': 120, 'L3': 250},
        },
        'multipliers': {},
    },
    'weak_rural_system': {
        'direct': {
            'phi0': 0.30, 'sigma_i': 0.10, 'informal_care_ratio': 0.40, 'regional_life_expectancy': 55,
            'per_diem_costs': {'I': 5, 'F': 10, 'L0': 8, 'L1': 20, 'L2': 80, 'L3': 200},
        },
        'multipliers': {
            'mu_i': 0.6, 'mu0': 0.5, 'mu1': 0.5, 'mu2': 0.6, 'mu3': 0.7,
            'delta_u': 1.5, 'delta_i': 1.8, 'delta0': 2.0, 'delta1': 2.0, 'delta2': 1.8, 'delta3': 1.5,
            'rho0': 0.7, 'rho1': 0.6, 'rho2': 0.5,
        },
    },
    'strong_urban_system_lmic': {
        'direct': {
            'phi0': 0.80, 'sigma_i': 0.35, 'informal_care_ratio': 0.10, 'regional_life_expectancy': 75,
            'per_diem_costs': {'I': 15, 'F': 30, 'L0': 25, 'L1': 50, 'L2': 180, 'L3': 350},
        },
        'multipliers': {
            'mu_i': 1.2, 'mu0': 1.3, 'mu1': 1.3, 'mu2': 1.2, 'mu3': 1.1,
            'delta_u': 0.8, 'delta_i': 0.7, 'delta0': 0.6, 'delta1': 0.6, 'delta2': 0.7, 'delta3': 0.8,
            'rho0': 1.1, 'rho1': 1.1, 'rho2': 1.1,
        },
    },
    'fragile_conflict_system': {
        'direct': {
            'phi0': 0.20, 'sigma_i': 0.08, 'informal_care_ratio': 0.60, 'regional_life_expectancy': 50,
            'per_diem_costs': {'I': 4, 'F': 15, 'L0': 20, 'L1': 40, 'L2': 150, 'L3': 400},
        },
        'multipliers': {
            'mu_i': 0.4, 'mu0': 0.3, 'mu1': 0.4, 'mu2': 0.5, 'mu3': 0.6,
            'delta_u': 2.5, 'delta_i': 2.3, 'delta0': 2.0, 'delta1': 2.0, 'delta2': 1.7, 'delta3': 1.5,
            'rho0': 0.4, 'rho1': 0.3, 'rho2': 0.2,
        },
    },
    'high_income_system': {
        'direct': {
            'phi0': 0.90, 'sigma_i': 0.70, 'informal_care_ratio': 0.05, 'regional_life_expectancy': 82,
            'per_diem_costs': {'I': 30, 'F': 80, 'L0': 100, 'L1': 250, 'L2': 1000, 'L3': 2500},
        },
        'multipliers': {
            'mu_i': 1.5, 'mu0': 1.6, 'mu1': 1.7, 'mu2': 1.6, 'mu3': 1.5,
            'delta_u': 0.5, 'delta_i': 0.4, 'delta0': 0.3, 'delta1': 0.3, 'delta2': 0.4, 'delta3': 0.5,
            'rho0': 1.2, 'rho1': 1.2, 'rho2': 1.2,
        },
    },
    'rwanda_health_system': {
        'direct': {
            'phi0': 0.92, 'sigma_i': 0.65, 'informal_care_ratio': 0.02, 'regional_life_expectancy': 68,
            'per_diem_costs': {'I': 8, 'F': 15, 'L0': 10, 'L1': 20, 'L2': 80, 'L3': 160},
        },
        'multipliers': {
            'mu_i': 0.8, 'mu0': 0.35, 'mu1': 0.3, 'mu2': 0.35, 'mu3': 0.6,
            'delta_u': 1.1, 'delta_i': 1.2, 'delta0': 1.4, 'delta1': 1.6, 'delta2': 1.5, 'delta3': 1.2,
            'rho0': 0.6, 'rho1': 0.5, 'rho2': 0.6,
        },
    },
}


def build_parameters(disease_id=None, health_system=None, base=None, system_congestion=None):
    """
    Assemble scenario parameters. Unknown disease or system ids fall back
    to the defaults for that layer.
    """
    params = base if base is not None else get_default_parameters()

    profile = DISEASE_PROFILES.get(disease_id, {})
    if profile:
        params = params.replace(**profile)

    system = HEALTH_SYSTEMS.get(health_system)
    if system:
        direct = dict(system['direct'])
        if 'per_diem_costs' in direct:
            direct['per_diem_costs'] = {**params.per_diem_costs, **direct['per_diem_costs']}
        params = params.replace(**direct)
        params = params.replace(**{
            name: getattr(params, name) * multiplier
            for name, multiplier in system['multipliers'].items()
        })

    if system_congestion is not None:
        params = params.replace(system_congestion=system_congestion)

    return clamp_probabilities(params)
