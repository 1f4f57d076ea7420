"""One week of patient flow through the tiered care system.

All flows are computed from the incoming state snapshot; the function has
no hidden state and returns a fresh CompartmentalState.
"""
from .config import (
    ARRIVAL_SUPPRESSION_SLOPE, CONGESTION_THRESHOLD, DIRECT_ROUTING_SPLIT,
    LEVELS, REFERRAL_REDUCTION_SLOPE, RESOLUTION_BOOST_SLOPE, WEEKS_PER_YEAR,
)
from .queues import capacity_multiplier, process_queue, queue_rates_for_level
from .state import CompartmentalState
from .utils import clamp, competing_outflows


def congestion_feedback(congestion):
    """
    Returns (arrival multiplier, resolution boost, referral factor).
    Neutral up to the threshold, linear up to congestion = 1.0.
    """
    if congestion <= CONGESTION_THRESHOLD:
        return 1.0, 1.0, 1.0
    excess = congestion - CONGESTION_THRESHOLD
    return (
        1 - excess * ARRIVAL_SUPPRESSION_SLOPE,
        1 + excess * RESOLUTION_BOOST_SLOPE,
        1 - excess * REFERRAL_REDUCTION_SLOPE,
    )


def step(state, params, population):
    # 1. New cases
    weekly_incidence = params.incidence_rate * population / WEEKS_PER_YEAR
    avoided_visits = weekly_incidence * params.visit_reduction # resolve at home
    effective_incidence = weekly_incidence - avoided_visits

    congestion = clamp(params.system_congestion)
    arrival_multiplier, mu_boost, rho_factor = congestion_feedback(congestion)
    arrivals = effective_incidence * arrival_multiplier

    # 2. Entry split
    direct_to_formal = params.phi0 * arrivals
    non_formal = arrivals - direct_to_formal
    truly_untreated = params.informal_care_ratio * non_formal
    to_informal = non_formal - truly_untreated

    # 3. Untreated and informal care
    (u_deaths, u_resolved), u_remaining = competing_outflows(
        state.U, [params.delta_u, params.mu_u])
    (i_to_formal, i_resolved, i_deaths), i_remaining = competing_outflows(
        state.I, [params.sigma_i, params.mu_i, params.delta_i])

    # 4. Formal entry: everyone in F moves on; smart routing skips L0 when congested
    bypass_probability = 0.0
    if params.direct_routing_improvement > 0 and congestion > CONGESTION_THRESHOLD:
        bypass_probability = min(1.0, params.direct_routing_improvement * congestion)
    routed_past_l0 = state.F * bypass_probability
    formal_to_l0 = state.F - routed_past_l0
    direct_routed = {
        'L1': routed_past_l0 * DIRECT_ROUTING_SPLIT['L1'],
        'L2': routed_past_l0 * DIRECT_ROUTING_SPLIT['L2'],
    }

    # 5. Care levels: referral, resolution, death
    (l0_referred, l0_resolved, l0_deaths), l0_remaining = competing_outflows(
        state.L0, [params.rho0 * rho_factor, params.mu0 * mu_boost, params.delta0])
    (l1_referred, l1_resolved, l1_deaths), l1_remaining = competing_outflows(
        state.L1, [params.rho1 * rho_factor, params.mu1 * mu_boost, params.delta1])
    (l2_referred, l2_resolved, l2_deaths), l2_remaining = competing_outflows(
        state.L2, [params.rho2 * rho_factor, params.mu2 * mu_boost, params.delta2])
    (l3_resolved, l3_deaths), l3_remaining = competing_outflows(
        state.L3, [params.mu3 * mu_boost, params.delta3])

    remaining = {'L0': l0_remaining, 'L1': l1_remaining, 'L2': l2_remaining, 'L3': l3_remaining}

    # 6. Capacity-constrained admission; the unmet part queues
    admission_share = capacity_multiplier(congestion, params.competition_sensitivity)
    desired = {'L0': formal_to_l0, 'L1': l0_referred, 'L2': l1_referred, 'L3': l2_referred}

    new_levels = {}
    new_queues = {}
    abandoned = bypassed = self_resolved = queue_deaths = prevented = 0.0

    for level in LEVELS:
        admitted = desired[level] * admission_share
        unmet = desired[level] - admitted
        diverted = unmet * params.queue_prevention_rate # managed informally, never queue
        prevented += diverted

        # 7. Existing queue, one snapshot
        outflows, waiting = process_queue(
            state.queues.get(level, 0.0),
            queue_rates_for_level(params, level, admission_share),
        )
        new_queues[level] = max(0.0, waiting + unmet - diverted)

        abandoned += outflows.abandoned
        bypassed += outflows.bypassed
        self_resolved += outflows.self_resolved
        queue_deaths += outflows.deaths

        new_levels[level] = admitted + remaining[level] + outflows.cleared + direct_routed.get(level, 0.0)

    # 8. Accumulators
    resolved = (u_resolved + i_resolved + l0_resolved + l1_resolved + l2_resolved
                + l3_resolved + avoided_visits + self_resolved)
    deaths = u_deaths + i_deaths + l0_deaths + l1_deaths + l2_deaths + l3_deaths + queue_deaths

    days = state.patient_days
    patient_days = {
        'U': days.get('U', 0.0) + state.U,
        'I': days.get('I', 0.0) + state.I,
        'F': days.get('F', 0.0) + state.F,
        'L0': days.get('L0', 0.0) + state.L0 * (1 - params.resolution_boost * 0.5),
        'L1': days.get('L1', 0.0) + state.L1 * (1 - params.point_of_care_resolution * 0.5),
        'L2': days.get('L2', 0.0) + state.L2 * (1 - params.length_of_stay_reduction),
        'L3': days.get('L3', 0.0) + state.L3 * (1 - params.length_of_stay_reduction),
    }

    episodes_touched = state.episodes_touched + direct_to_formal + i_to_formal
    if params.self_care_active:
        episodes_touched += state.I

    return CompartmentalState(
        U=truly_untreated + u_remaining + abandoned,
        I=to_informal + i_remaining + bypassed + prevented,
        F=direct_to_formal + i_to_formal,
        L0=new_levels['L0'],
        L1=new_levels['L1'],
        L2=new_levels['L2'],
        L3=new_levels['L3'],
        R=state.R + resolved,
        D=state.D + deaths,
        patient_days=patient_days,
        queues=new_queues,
        queue_deaths=state.queue_deaths + queue_deaths,
        episodes_touched=episodes_touched,
        new_cases=weekly_incidence,
        cumulative_incidence=state.cumulative_incidence + arrivals + avoided_visits,
    )
