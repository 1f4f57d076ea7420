# Simulation Configuration

# ---------------------------------------------------------
# 1. Engine Constants
# ---------------------------------------------------------
WEEKS_PER_YEAR = 52
BURN_IN_WEEKS = 52 # Discarded warm-up year before measurement starts
DAYS_PER_YEAR = 365.25

# Care levels in referral order
LEVELS = ('L0', 'L1', 'L2', 'L3')

# Congestion feedback only kicks in above this threshold
CONGESTION_THRESHOLD = 0.5
ARRIVAL_SUPPRESSION_SLOPE = 0.5 # 25% fewer arrivals at congestion = 1.0
RESOLUTION_BOOST_SLOPE = 0.4 # +20% resolution at congestion = 1.0
REFERRAL_REDUCTION_SLOPE = 0.6 # -30% referrals at congestion = 1.0

# Admission degrades with congestion but never below this share of demand
CAPACITY_FLOOR = 0.2
CAPACITY_CONGESTION_SLOPE = 0.5

# Smart routing: share of bypassed F patients landing at L1 / L2
DIRECT_ROUTING_SPLIT = {'L1': 0.6, 'L2': 0.4}

# Time-to-resolution floor (1% weekly => at most 100 weeks)
MIN_RESOLUTION_RATE = 0.01

# ---------------------------------------------------------
# 2. Probability-typed Parameters
# Every field listed here is clamped into [0, 1] after AI effects.
# ---------------------------------------------------------
PROBABILITY_FIELDS = (
    'phi0', 'sigma_i', 'informal_care_ratio',
    'mu_u', 'mu_i', 'mu0', 'mu1', 'mu2', 'mu3',
    'delta_u', 'delta_i', 'delta0', 'delta1', 'delta2', 'delta3',
    'rho0', 'rho1', 'rho2',
    'queue_abandonment_rate', 'queue_bypass_rate',
    'queue_clearance_rate', 'queue_self_resolve_rate',
    'queue_prevention_rate', 'smart_routing_rate',
    'resolution_boost', 'point_of_care_resolution',
    'length_of_stay_reduction', 'discharge_optimization',
    'treatment_efficiency', 'resource_utilization',
)

# Derived after clamping (self-care), clamped again on their own
DERIVED_PROBABILITY_FIELDS = ('visit_reduction', 'direct_routing_improvement')

# ---------------------------------------------------------
# 3. AI Costs (USD)
# Fixed: charged once per active intervention
# Variable: per episode touched, scaled by effective uptake
# ---------------------------------------------------------
AI_COSTS = {
    'triage': {'fixed': 200000, 'variable': 2.5},
    'chw': {'fixed': 150000, 'variable': 1.5},
    'diagnostic': {'fixed': 300000, 'variable': 1.0},
    'bed_management': {'fixed': 250000, 'variable': 1.5},
    'hospital_decision': {'fixed': 400000, 'variable': 3.0},
    'self_care': {'fixed': 100000, 'variable': 0.5},
}

# ---------------------------------------------------------
# 4. AI Uptake
# Patient-facing tools (triage, self-care) see lower uptake than
# provider-facing ones.
# ---------------------------------------------------------
AI_UPTAKE = {
    'global_uptake': 1.0,
    'base': {
        'triage': 0.33,
        'self_care': 0.33,
        'chw': 0.66,
        'diagnostic': 0.66,
        'bed_management': 0.66,
        'hospital_decision': 0.66,
    },
    'urban_multiplier': 1.2,
    'rural_multiplier': 0.7,
}

# ---------------------------------------------------------
# 5. Effect -> Parameter Mapping
# (effect key, target field, kind)
# 'add'  : new = old + magnitude * effect * uptake
# 'mult' : new = old * ratio, deviation from 1 scaled by magnitude * uptake
# Magnitude override key is '<intervention>_<target field>'.
# ---------------------------------------------------------
ADD = 'add'
MULT = 'mult'

AI_EFFECT_TARGETS = {
    'triage': (
        ('phi0_effect', 'phi0', ADD),
        ('sigma_i_effect', 'sigma_i', MULT),
        ('queue_prevention_rate', 'queue_prevention_rate', ADD),
        ('smart_routing_rate', 'smart_routing_rate', ADD),
    ),
    'chw': (
        ('mu0_effect', 'mu0', ADD),
        ('delta0_effect', 'delta0', MULT),
        ('rho0_effect', 'rho0', MULT),
        ('resolution_boost', 'resolution_boost', ADD),
    ),
    'diagnostic': (
        ('mu1_effect', 'mu1', ADD),
        ('delta1_effect', 'delta1', MULT),
        ('rho1_effect', 'rho1', MULT),
        ('mu2_effect', 'mu2', ADD),
        ('delta2_effect', 'delta2', MULT),
        ('rho2_effect', 'rho2', MULT),
        ('point_of_care_resolution', 'point_of_care_resolution', ADD),
    ),
    'bed_management': (
        ('mu2_effect', 'mu2', ADD),
        ('mu3_effect', 'mu3', ADD),
        ('length_of_stay_reduction', 'length_of_stay_reduction', ADD),
        ('discharge_optimization', 'discharge_optimization', ADD),
    ),
    'hospital_decision': (
        ('delta2_effect', 'delta2', MULT),
        ('delta3_effect', 'delta3', MULT),
        ('treatment_efficiency', 'treatment_efficiency', ADD),
        ('resource_utilization', 'resource_utilization', ADD),
    ),
    'self_care': (
        ('phi0_effect', 'phi0', ADD),
        ('sigma_i_effect', 'sigma_i', MULT),
        ('queue_prevention_rate', 'queue_prevention_rate', ADD),
        ('smart_routing_rate', 'smart_routing_rate', ADD),
        ('mu_i_effect', 'mu_i', ADD),
        ('delta_i_effect', 'delta_i', MULT),
    ),
}

# Applied only after the clamp stage
SELF_CARE_DERIVED_TARGETS = (
    ('visit_reduction_effect', 'visit_reduction'),
    ('routing_improvement_effect', 'direct_routing_improvement'),
)

INTERVENTIONS = tuple(AI_EFFECT_TARGETS)

# ---------------------------------------------------------
# 6. Universal AI Effects
# ---------------------------------------------------------
AI_BASE_EFFECTS = {
    'triage': {
        'phi0_effect': 0.15,
        'sigma_i_effect': 1.25,
        'queue_prevention_rate': 0.35,
        'smart_routing_rate': 0.45,
    },
    'chw': {
        'mu0_effect': 0.15,
        'delta0_effect': 0.97,
        'rho0_effect': 0.70,
        'resolution_boost': 0.20,
    },
    'diagnostic': {
        'mu1_effect': 0.18,
        'delta1_effect': 0.97,
        'rho1_effect': 0.65,
        'mu2_effect': 0.12,
        'delta2_effect': 0.98,
        'rho2_effect': 0.75,
        'point_of_care_resolution': 0.35,
    },
    'bed_management': {
        'mu2_effect': 0.10,
        'mu3_effect': 0.10,
        'length_of_stay_reduction': 0.35,
        'discharge_optimization': 0.40,
    },
    'hospital_decision': {
        'delta2_effect': 0.97,
        'delta3_effect': 0.97,
        'treatment_efficiency': 0.30,
        'resource_utilization': 0.40,
    },
    'self_care': {
        'phi0_effect': 0.12,
        'sigma_i_effect': 1.20,
        'queue_prevention_rate': 0.40,
        'smart_routing_rate': 0.45,
        'mu_i_effect': 0.15,
        'delta_i_effect': 0.96,
        'visit_reduction_effect': 0.20,
        'routing_improvement_effect': 0.25,
    },
}

# ---------------------------------------------------------
# 7. Disease-specific AI Effects
# Sparse: merged key-by-key over AI_BASE_EFFECTS, override wins.
# Referral ratios > 1 are intentional (escalation of complex cases).
# ---------------------------------------------------------
DISEASE_AI_EFFECTS = {
    'childhood_pneumonia': {
        'diagnostic': {
            'mu1_effect': 0.30, 'delta1_effect': 0.85, 'rho1_effect': 0.75,
            'mu2_effect': 0.15, 'delta2_effect': 0.88, 'rho2_effect': 0.85,
        },
        'chw': {'mu0_effect': 0.20, 'delta0_effect': 0.85, 'rho0_effect': 0.80},
        'self_care': {'mu_i_effect': 0.02, 'delta_i_effect': 0.98},
    },
    'malaria': {
        'diagnostic': {
            'mu1_effect': 0.30, 'delta1_effect': 0.80, 'rho1_effect': 0.75,
            'mu2_effect': 0.12, 'delta2_effect': 0.85, 'rho2_effect': 0.90,
        },
        'chw': {'mu0_effect': 0.25, 'delta0_effect': 0.85, 'rho0_effect': 0.75},
        'self_care': {'mu_i_effect': 0.05, 'delta_i_effect': 0.95},
    },
    'diarrhea': {
        'self_care': {'mu_i_effect': 0.25, 'delta_i_effect': 0.92},
        'chw': {'mu0_effect': 0.20, 'delta0_effect': 0.80, 'rho0_effect': 0.80},
        'diagnostic': {
            'mu1_effect': 0.25, 'delta1_effect': 0.85, 'rho1_effect': 0.80,
            'mu2_effect': 0.10, 'delta2_effect': 0.90, 'rho2_effect': 0.92,
        },
        'triage': {'phi0_effect': 0.12, 'sigma_i_effect': 1.25},
    },
    'tuberculosis': {
        'chw': {'mu0_effect': 0.08, 'delta0_effect': 0.90, 'rho0_effect': 1.25},
        'diagnostic': {
            'mu1_effect': 0.35, 'delta1_effect': 0.75, 'rho1_effect': 0.75,
            'mu2_effect': 0.20, 'delta2_effect': 0.80, 'rho2_effect': 0.80,
        },
        'hospital_decision': {'delta2_effect': 0.85, 'delta3_effect': 0.85},
        'self_care': {'mu_i_effect': 0.20, 'delta_i_effect': 0.92},
    },
    'high_risk_pregnancy_low_anc': {
        'chw': {'mu0_effect': 0.08, 'delta0_effect': 0.90, 'rho0_effect': 1.30},
        'diagnostic': {
            'mu1_effect': 0.15, 'delta1_effect': 0.90, 'rho1_effect': 1.25,
            'mu2_effect': 0.12, 'delta2_effect': 0.92, 'rho2_effect': 1.15,
        },
        'triage': {'phi0_effect': 0.20, 'sigma_i_effect': 1.30},
        'hospital_decision': {'delta2_effect': 0.85, 'delta3_effect': 0.85},
        'self_care': {'mu_i_effect': 0.15, 'delta_i_effect': 0.90},
    },
    'congestive_heart_failure': {
        'self_care': {
            'mu_i_effect': 0.015, 'delta_i_effect': 0.996,
            'visit_reduction_effect': 0.02, 'routing_improvement_effect': 0.025,
        },
        'triage': {
            'queue_prevention_rate': 0.36, 'smart_routing_rate': 0.405,
            'phi0_effect': 0.108, 'sigma_i_effect': 1.18,
        },
        'chw': {'mu0_effect': 0.045, 'delta0_effect': 0.97, 'rho0_effect': 1.06},
        'diagnostic': {
            'mu1_effect': 0.14, 'delta1_effect': 0.91, 'rho1_effect': 0.86,
            'mu2_effect': 0.105, 'delta2_effect': 0.895, 'rho2_effect': 0.93,
        },
        'bed_management': {
            'length_of_stay_reduction': 0.18, 'discharge_optimization': 0.135,
        },
        'hospital_decision': {
            'treatment_efficiency': 0.225, 'resource_utilization': 0.27,
            'delta2_effect': 0.82, 'delta3_effect': 0.77,
        },
    },
    'hiv_management_chronic': {
        'self_care': {'mu_i_effect': 0.30, 'delta_i_effect': 0.92},
        'chw': {'mu0_effect': 0.15, 'delta0_effect': 0.85, 'rho0_effect': 1.05},
        'diagnostic': {
            'mu1_effect': 0.10, 'delta1_effect': 0.85, 'rho1_effect': 0.90,
            'mu2_effect': 0.12, 'delta2_effect': 0.82, 'rho2_effect': 0.88,
        },
    },
    'urti': {
        'chw': {'mu0_effect': 0.08, 'delta0_effect': 0.98, 'rho0_effect': 0.70},
        'diagnostic': {
            'mu1_effect': 0.05, 'delta1_effect': 0.98, 'rho1_effect': 0.70,
            'mu2_effect': 0.03, 'delta2_effect': 0.98, 'rho2_effect': 0.75,
        },
        'self_care': {'mu_i_effect': 0.08, 'delta_i_effect': 0.97},
    },
    'fever': {
        'chw': {'mu0_effect': 0.12, 'delta0_effect': 0.90, 'rho0_effect': 0.85},
        'diagnostic': {
            'mu1_effect': 0.15, 'delta1_effect': 0.88, 'rho1_effect': 0.85,
            'mu2_effect': 0.10, 'delta2_effect': 0.90, 'rho2_effect': 0.87,
        },
        'triage': {'phi0_effect': 0.10, 'sigma_i_effect': 1.20},
        'self_care': {'mu_i_effect': 0.10, 'delta_i_effect': 0.96},
    },
    'anemia': {
        'chw': {'mu0_effect': 0.15, 'delta0_effect': 0.95, 'rho0_effect': 0.80},
        'diagnostic': {
            'mu1_effect': 0.20, 'delta1_effect': 0.90, 'rho1_effect': 0.80,
            'mu2_effect': 0.15, 'delta2_effect': 0.85, 'rho2_effect': 0.82,
        },
        'self_care': {'mu_i_effect': 0.08, 'delta_i_effect': 0.99},
    },
    'hiv_opportunistic': {
        'chw': {'mu0_effect': 0.08, 'delta0_effect': 0.90, 'rho0_effect': 1.35},
        'diagnostic': {
            'mu1_effect': 0.30, 'delta1_effect': 0.85, 'rho1_effect': 1.20,
            'mu2_effect': 0.25, 'delta2_effect': 0.80, 'rho2_effect': 1.10,
        },
        'triage': {'phi0_effect': 0.15, 'sigma_i_effect': 1.30},
        'hospital_decision': {'delta2_effect': 0.85, 'delta3_effect': 0.80},
    },
}
