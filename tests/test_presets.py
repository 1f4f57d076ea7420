import pytest

from careflow.config import PROBABILITY_FIELDS
from careflow.parameters import get_default_parameters
from careflow.presets import DISEASE_PROFILES, HEALTH_SYSTEMS, build_parameters


def test_no_presets_gives_defaults():
    assert build_parameters() == get_default_parameters()


def test_unknown_ids_fall_back_to_defaults():
    assert build_parameters('not_a_disease', 'not_a_system') == get_default_parameters()


def test_disease_profile_overlays_defaults():
    params = build_parameters('malaria')
    assert params.incidence_rate == DISEASE_PROFILES['malaria']['incidence_rate']
    assert params.mu0 == DISEASE_PROFILES['malaria']['mu0']
    assert params.phi0 == get_default_parameters().phi0


def test_health_system_sets_direct_values_and_scales_rates():
    params = build_parameters('tuberculosis', 'weak_rural_system')
    system = HEALTH_SYSTEMS['weak_rural_system']
    assert params.phi0 == system['direct']['phi0']
    assert params.per_diem_costs['L2'] == 80
    assert params.delta_u == pytest.approx(DISEASE_PROFILES['tuberculosis']['delta_u'] * 1.5)
    assert params.mu0 == pytest.approx(DISEASE_PROFILES['tuberculosis']['mu0'] * 0.5)


def test_congestion_override():
    assert build_parameters('fever', system_congestion=0.7).system_congestion == 0.7


@pytest.mark.parametrize("disease", sorted(DISEASE_PROFILES))
@pytest.mark.parametrize("system", sorted(HEALTH_SYSTEMS))
def test_every_combination_stays_in_bounds(disease, system):
    params = build_parameters(disease, system)
    for name in PROBABILITY_FIELDS:
        assert 0.0 <= getattr(params, name) <= 1.0
