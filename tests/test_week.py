import pytest

from careflow.config import LEVELS, WEEKS_PER_YEAR
from careflow.queues import process_queue, queue_rates_for_level, capacity_multiplier
from careflow.state import CompartmentalState, initialize_state
from careflow.week import congestion_feedback, step

POPULATION = 100_000


def run_weeks(params, weeks, state=None):
    state = state or initialize_state(POPULATION, params.incidence_rate)
    seed = state.total_accounted
    for _ in range(weeks):
        state = step(state, params, POPULATION)
    return state, seed


def test_congestion_feedback_is_neutral_below_threshold():
    assert congestion_feedback(0.3) == (1.0, 1.0, 1.0)
    assert congestion_feedback(0.5) == (1.0, 1.0, 1.0)


def test_congestion_feedback_at_full_congestion():
    arrivals, mu_boost, rho_factor = congestion_feedback(1.0)
    assert arrivals == pytest.approx(0.75)
    assert mu_boost == pytest.approx(1.2)
    assert rho_factor == pytest.approx(0.7)


@pytest.mark.parametrize("congestion", [0.0, 0.4, 0.8, 1.0])
def test_population_is_conserved(params, congestion):
    params = params.replace(
        system_congestion=congestion, queue_prevention_rate=0.2,
        direct_routing_improvement=0.3, visit_reduction=0.05,
    )
    state, seed = run_weeks(params, 40)
    assert state.total_accounted == pytest.approx(seed + state.cumulative_incidence, rel=1e-9)


def test_no_resolution_or_death_keeps_everyone_in_the_system(params):
    frozen = {name: 0.0 for name in ('mu_u', 'mu_i', 'mu0', 'mu1', 'mu2', 'mu3',
                                     'delta_u', 'delta_i', 'delta0', 'delta1', 'delta2', 'delta3')}
    params = params.replace(system_congestion=0.9, queue_self_resolve_rate=0.0, **frozen)
    state, seed = run_weeks(params, 30)
    assert state.D == 0.0
    assert state.R == 0.0
    assert state.live_population + state.total_queued == pytest.approx(
        seed + state.cumulative_incidence, rel=1e-9)


def test_stocks_stay_non_negative(params):
    params = params.replace(system_congestion=1.0, competition_sensitivity=2.0)
    state, _ = run_weeks(params, 60)
    for name in ('U', 'I', 'F', 'L0', 'L1', 'L2', 'L3', 'R', 'D'):
        assert getattr(state, name) >= 0.0
    assert all(q >= 0.0 for q in state.queues.values())


@pytest.mark.parametrize("congestion", [0.0, 0.4, 0.8, 1.0])
@pytest.mark.parametrize("rate", ["delta_u", "delta_i", "delta0", "delta1", "delta2", "delta3"])
def test_higher_mortality_means_more_deaths(params, rate, congestion):
    params = params.replace(system_congestion=congestion)
    low, _ = run_weeks(params, 30)
    high, _ = run_weeks(params.replace(**{rate: getattr(params, rate) * 2}), 30)
    assert high.D > low.D


def test_queue_change_matches_inflow_minus_outflow(params):
    params = params.replace(system_congestion=0.8, incidence_rate=0.0)
    state = CompartmentalState(F=1000.0, L0=500.0, queues={'L0': 200.0, 'L1': 50.0, 'L2': 0.0, 'L3': 0.0})
    after = step(state, params, POPULATION)

    share = capacity_multiplier(0.8, params.competition_sensitivity)
    outflows, _ = process_queue(200.0, queue_rates_for_level(params, 'L0', share))
    unmet = 1000.0 * (1 - share)
    assert after.queues['L0'] - 200.0 == pytest.approx(unmet - outflows.total)


def test_queue_prevented_patients_move_to_informal_care(params):
    params = params.replace(system_congestion=1.0, incidence_rate=0.0, queue_prevention_rate=0.4)
    after = step(CompartmentalState(F=1000.0), params, POPULATION)
    assert after.I == pytest.approx(200.0)
    assert after.queues['L0'] == pytest.approx(300.0)


def test_smart_routing_sends_formal_entrants_past_l0(params):
    params = params.replace(system_congestion=0.8, incidence_rate=0.0)
    state = CompartmentalState(F=1000.0)
    plain = step(state, params, POPULATION)
    routed = step(state, params.replace(direct_routing_improvement=0.5), POPULATION)
    assert plain.L1 == 0.0
    assert routed.L1 == pytest.approx(240.0)
    assert routed.L2 == pytest.approx(160.0)


def test_smart_routing_needs_congestion(params):
    params = params.replace(system_congestion=0.4, incidence_rate=0.0, direct_routing_improvement=0.5)
    after = step(CompartmentalState(F=1000.0), params, POPULATION)
    assert after.L1 == 0.0


def test_avoided_visits_resolve_immediately(params):
    params = params.replace(visit_reduction=0.1)
    after = step(CompartmentalState(), params, POPULATION)
    weekly = params.incidence_rate * POPULATION / WEEKS_PER_YEAR
    assert after.R == pytest.approx(weekly * 0.1)
    assert after.new_cases == pytest.approx(weekly)


def test_self_care_counts_informal_episodes(params):
    state = CompartmentalState(I=500.0)
    plain = step(state, params.replace(incidence_rate=0.0), POPULATION)
    with_tool = step(state, params.replace(incidence_rate=0.0, self_care_active=True), POPULATION)
    assert with_tool.episodes_touched - plain.episodes_touched == pytest.approx(500.0)


def test_patient_days_accumulate_the_incoming_stock(params):
    state = CompartmentalState(U=10.0, L2=4.0)
    after = step(state, params.replace(length_of_stay_reduction=0.25), POPULATION)
    assert after.patient_days['U'] == pytest.approx(10.0)
    assert after.patient_days['L2'] == pytest.approx(3.0)


def test_step_does_not_mutate_input(params):
    state = initialize_state(POPULATION, params.incidence_rate)
    before = state.to_dict()
    step(state, params.replace(system_congestion=0.9), POPULATION)
    assert state.to_dict() == before
    assert set(state.queues) == set(LEVELS)
