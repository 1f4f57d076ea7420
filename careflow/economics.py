"""
Cost and DALY outcomes, and incremental cost-effectiveness.

totalCost = sum(patient days x per diem) + AI fixed + AI variable x episodes
DALYs     = YLL (deaths x age-adjusted years lost) + YLD (disability-weighted
            time ill), both discounted by a single-period factor.
"""
import enum
import math

from .config import DAYS_PER_YEAR
from .state import PATIENT_DAY_COMPARTMENTS
from .utils import sanitize_value


class IcerOutcome(enum.Enum):
    # Cheaper and at least as healthy (or healthier and no dearer)
    DOMINANT = 'dominant'


DOMINANT = IcerOutcome.DOMINANT


def discount_factor(discount_rate):
    return 1 - discount_rate if discount_rate > 0 else 1.0


def calculate_economics(state, params):
    """Returns (total_cost, dalys) for a terminal state."""
    costs = params.per_diem_costs
    care_cost = sum(
        state.patient_days.get(compartment, 0.0) * costs.get(compartment, 0.0)
        for compartment in PATIENT_DAY_COMPARTMENTS
    )
    ai_cost = params.ai_fixed_cost + params.ai_variable_cost * state.episodes_touched
    total_cost = care_cost + ai_cost

    factor = discount_factor(params.discount_rate)
    years_lost = max(0.0, params.regional_life_expectancy - params.mean_age_of_infection)
    death_dalys = state.D * years_lost * factor

    # U contributes its cumulative patient-days here, not the terminal U stock
    ill_days = sum(state.patient_days.get(c, 0.0) for c in PATIENT_DAY_COMPARTMENTS)
    disability_dalys = ill_days * (params.disability_weight / DAYS_PER_YEAR) * factor

    return (
        sanitize_value(total_cost, 'total_cost'),
        sanitize_value(death_dalys + disability_dalys, 'dalys'),
    )


def calculate_icer(intervention, baseline):
    """
    Incremental cost per DALY averted of `intervention` over `baseline`.

    Returns DOMINANT when the intervention costs no more and causes no more
    DALYs (strictly better on at least one), +inf when DALYs are identical
    otherwise, and the plain ratio in every other case.
    """
    cost_diff = sanitize_value(intervention.total_cost - baseline.total_cost, 'icer cost difference')
    daly_diff = sanitize_value(baseline.dalys - intervention.dalys, 'icer DALY difference')

    if cost_diff <= 0 and daly_diff >= 0 and (cost_diff < 0 or daly_diff > 0):
        return DOMINANT
    if daly_diff == 0:
        return math.inf
    return sanitize_value(cost_diff / daly_diff, 'icer')
