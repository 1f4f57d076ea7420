"""
AI intervention effects.

Turns baseline ModelParameters into AI-adjusted ModelParameters:
resolve each active intervention's effect table (universal defaults with
disease-specific entries merged over them), scale every effect by its
magnitude override and the intervention's effective uptake, clamp all
probabilities, then derive the self-care visit-reduction and routing
fields from the clamped values.
"""
import warnings
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .config import (
    ADD, AI_BASE_EFFECTS, AI_COSTS, AI_EFFECT_TARGETS, AI_UPTAKE,
    DERIVED_PROBABILITY_FIELDS, DISEASE_AI_EFFECTS, INTERVENTIONS,
    PROBABILITY_FIELDS, SELF_CARE_DERIVED_TARGETS,
)
from .utils import ParameterClampWarning, clamp


@dataclass(frozen=True)
class UptakeConfig:
    global_uptake: float = AI_UPTAKE['global_uptake']
    base: Mapping[str, float] = field(default_factory=lambda: dict(AI_UPTAKE['base']))
    urban_multiplier: float = AI_UPTAKE['urban_multiplier']
    rural_multiplier: float = AI_UPTAKE['rural_multiplier']

    @classmethod
    def from_mapping(cls, mapping):
        defaults = cls()
        return cls(
            global_uptake=mapping.get('global_uptake', defaults.global_uptake),
            base={**defaults.base, **mapping.get('base', {})},
            urban_multiplier=mapping.get('urban_multiplier', defaults.urban_multiplier),
            rural_multiplier=mapping.get('rural_multiplier', defaults.rural_multiplier),
        )

    def setting_multiplier(self, is_urban):
        return self.urban_multiplier if is_urban else self.rural_multiplier

    def effective(self, intervention, is_urban=True):
        """Share of eligible users actually using the tool, in [0, 1]."""
        raw = self.base.get(intervention, 0.0) * self.global_uptake * self.setting_multiplier(is_urban)
        return clamp(raw)


@dataclass(frozen=True)
class AIInterventionSpec:
    """Which AI tools are switched on, plus per-effect magnitudes and uptake."""
    triage: bool = False
    chw: bool = False
    diagnostic: bool = False
    bed_management: bool = False
    hospital_decision: bool = False
    self_care: bool = False
    magnitudes: Mapping[str, float] = field(default_factory=dict)
    uptake: UptakeConfig = field(default_factory=UptakeConfig)
    is_urban: bool = True

    @classmethod
    def from_flags(cls, flags, **kwargs):
        known = {k: bool(v) for k, v in flags.items() if k in INTERVENTIONS}
        return cls(**known, **kwargs)

    @property
    def active(self):
        return tuple(name for name in INTERVENTIONS if getattr(self, name))


def resolve_effects(intervention, disease_id=None, effect_table=None, disease_effect_table=None):
    """Universal effects for `intervention`, with any disease-specific keys winning."""
    effect_table = AI_BASE_EFFECTS if effect_table is None else effect_table
    disease_effect_table = DISEASE_AI_EFFECTS if disease_effect_table is None else disease_effect_table

    effects = dict(effect_table.get(intervention, {}))
    overrides = disease_effect_table.get(disease_id, {}).get(intervention, {}) if disease_id else {}
    for key, value in overrides.items():
        effects[key] = value
    return effects


def scale_effect(kind, base_effect, magnitude, uptake):
    """
    Additive effects scale linearly; ratios scale their deviation from 1,
    on whichever side of 1 they sit. Zero magnitude or uptake is a no-op.
    """
    if magnitude == 0 or uptake == 0:
        return 0.0 if kind == ADD else 1.0
    if kind == ADD:
        return base_effect * magnitude * uptake
    if base_effect < 1:
        return 1 - (1 - base_effect) * magnitude * uptake
    return 1 + (base_effect - 1) * magnitude * uptake


def clamp_probabilities(params, names=PROBABILITY_FIELDS):
    """Stage 1: pull every probability-typed field back into [0, 1]."""
    changes = {}
    for name in names:
        value = getattr(params, name)
        if value > 1 or value < 0:
            bounded = clamp(value)
            warnings.warn(
                f"{name} = {value} is outside [0, 1], clamping to {bounded}",
                ParameterClampWarning, stacklevel=2,
            )
            changes[name] = bounded
    return params.replace(**changes) if changes else params


def derive_self_care(params, effects, magnitudes, uptake):
    """
    Stage 2: visit reduction and direct-routing improvement.

    Runs on already-clamped parameters. A self-care tool can only prevent
    visits from people who actually use informal care, so the raw visit
    reduction is scaled by (1 - phi0) * (1 - informal_care_ratio).
    Routing improvement is not usage-scaled.
    """
    informal_usage = (1 - params.phi0) * (1 - params.informal_care_ratio)
    changes = {}
    for effect_key, target in SELF_CARE_DERIVED_TARGETS:
        if effect_key not in effects:
            continue
        base_effect = effects[effect_key]
        if target == 'visit_reduction':
            base_effect *= informal_usage
        magnitude = magnitudes.get(f'self_care_{target}', 1.0)
        changes[target] = getattr(params, target) + scale_effect(ADD, base_effect, magnitude, uptake)
    params = params.replace(**changes) if changes else params
    return clamp_probabilities(params, DERIVED_PROBABILITY_FIELDS)


def apply_ai_interventions(base_params, interventions, magnitudes=None, cost_table=None,
                           effect_table=None, disease_id=None, uptake=None, is_urban=None,
                           disease_effect_table=None):
    """
    Return a new ModelParameters with the active AI interventions applied.

    interventions: AIInterventionSpec or a mapping of intervention -> bool.
    magnitudes: '<intervention>_<field>' -> multiplier (default 1).
    uptake: UptakeConfig or a mapping shaped like config.AI_UPTAKE.
    Unknown interventions, diseases, override keys and cost entries are ignored.
    """
    if not isinstance(interventions, AIInterventionSpec):
        interventions = AIInterventionSpec.from_flags(interventions)
    if magnitudes is None:
        magnitudes = interventions.magnitudes
    if uptake is None:
        uptake = interventions.uptake
    elif not isinstance(uptake, UptakeConfig):
        uptake = UptakeConfig.from_mapping(uptake)
    if is_urban is None:
        is_urban = interventions.is_urban
    cost_table = AI_COSTS if cost_table is None else cost_table

    updates: Dict[str, float] = {}
    fixed_cost = 0.0
    variable_cost = 0.0
    self_care_effects: Optional[dict] = None

    for name in interventions.active:
        effects = resolve_effects(name, disease_id, effect_table, disease_effect_table)
        intervention_uptake = uptake.effective(name, is_urban)

        for effect_key, target, kind in AI_EFFECT_TARGETS[name]:
            if effect_key not in effects:
                continue
            magnitude = magnitudes.get(f'{name}_{target}', 1.0)
            scaled = scale_effect(kind, effects[effect_key], magnitude, intervention_uptake)
            current = updates.get(target, getattr(base_params, target))
            updates[target] = current + scaled if kind == ADD else current * scaled

        costs = cost_table.get(name, {})
        fixed_cost += costs.get('fixed', 0.0)
        variable_cost += costs.get('variable', 0.0) * intervention_uptake

        if name == 'self_care':
            self_care_effects = effects

    params = base_params.replace(
        **updates,
        ai_fixed_cost=fixed_cost,
        ai_variable_cost=variable_cost,
        self_care_active=interventions.self_care,
    )
    params = clamp_probabilities(params)

    if self_care_effects is not None:
        params = derive_self_care(
            params, self_care_effects, magnitudes, uptake.effective('self_care', is_urban))
    return params

