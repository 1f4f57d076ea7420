import math

import pytest

from careflow.parameters import get_default_parameters, sanitize_parameters
from careflow.state import initialize_state
from careflow.utils import LARGE_FINITE, NumericSanitizationWarning


def test_defaults_are_fresh_instances():
    first = get_default_parameters()
    second = get_default_parameters()
    assert first == second
    assert first.per_diem_costs is not second.per_diem_costs


def test_replace_returns_new_instance(params):
    changed = params.replace(phi0=0.9)
    assert changed.phi0 == 0.9
    assert params.phi0 == 0.45


def test_sanitize_parameters_fixes_non_finite_fields(params):
    broken = params.replace(mu0=math.nan, incidence_rate=math.inf,
                            per_diem_costs={**params.per_diem_costs, 'L3': -math.inf})
    with pytest.warns(NumericSanitizationWarning):
        clean = sanitize_parameters(broken)
    assert clean.mu0 == 0.0
    assert clean.incidence_rate == LARGE_FINITE
    assert clean.per_diem_costs['L3'] == -LARGE_FINITE
    assert clean.per_diem_costs['L1'] == 35


def test_sanitize_parameters_leaves_clean_values_alone(params):
    assert sanitize_parameters(params) is params


def test_initial_state_seeds_one_week_of_incidence():
    state = initialize_state(52_000, 0.5)
    assert state.U == pytest.approx(500.0)
    assert state.new_cases == pytest.approx(500.0)
    assert state.total_accounted == pytest.approx(500.0)
    assert state.queues == {'L0': 0.0, 'L1': 0.0, 'L2': 0.0, 'L3': 0.0}
