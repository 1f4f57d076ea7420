import pytest

from careflow.queues import (
    QueueRates, capacity_multiplier, clearance_boost, process_queue, queue_rates_for_level,
)


def test_empty_queue_has_no_outflows():
    outflows, remaining = process_queue(0.0, QueueRates(0.1, 0.1, 0.1, 0.1, 0.1))
    assert outflows.total == 0.0
    assert remaining == 0.0


def test_outflows_share_one_snapshot():
    rates = QueueRates(mortality=0.01, abandonment=0.15, bypass=0.20, self_resolve=0.10, clearance=0.30)
    outflows, remaining = process_queue(1000.0, rates)
    assert outflows.deaths == pytest.approx(10.0)
    assert outflows.abandoned == pytest.approx(150.0)
    assert outflows.bypassed == pytest.approx(200.0)
    assert outflows.self_resolved == pytest.approx(100.0)
    assert outflows.cleared == pytest.approx(300.0)
    assert remaining == pytest.approx(240.0)


def test_oversubscribed_queue_never_goes_negative():
    rates = QueueRates(mortality=0.5, abandonment=0.5, bypass=0.5, self_resolve=0.5, clearance=0.5)
    outflows, remaining = process_queue(200.0, rates)
    assert outflows.total == pytest.approx(200.0)
    assert outflows.deaths == pytest.approx(50.0)
    assert outflows.cleared == pytest.approx(0.0, abs=1e-9)
    assert remaining >= 0.0


def test_clearance_only_takes_what_the_other_outflows_leave():
    rates = QueueRates(mortality=0.015, abandonment=0.15, bypass=0.20, self_resolve=0.10, clearance=0.9)
    outflows, remaining = process_queue(1000.0, rates)
    assert outflows.deaths == pytest.approx(15.0)
    assert outflows.abandoned == pytest.approx(150.0)
    assert outflows.self_resolved == pytest.approx(100.0)
    assert outflows.cleared == pytest.approx(535.0)
    assert remaining == 0.0
    assert outflows.total == pytest.approx(1000.0)


@pytest.mark.parametrize("congestion, sensitivity, expected", [
    (0.0, 1.0, 1.0),
    (0.5, 1.0, 0.75),
    (1.0, 1.0, 0.5),
    (1.0, 3.0, 0.2),
])
def test_capacity_multiplier(congestion, sensitivity, expected):
    assert capacity_multiplier(congestion, sensitivity) == pytest.approx(expected)


def test_clearance_boost_by_level(params):
    boosted = params.replace(
        resolution_boost=0.1, point_of_care_resolution=0.2, length_of_stay_reduction=0.05,
        discharge_optimization=0.05, treatment_efficiency=0.1, resource_utilization=0.3,
    )
    assert clearance_boost(boosted, 'L0') == pytest.approx(0.1)
    assert clearance_boost(boosted, 'L1') == pytest.approx(0.2)
    assert clearance_boost(boosted, 'L2') == pytest.approx(0.2)
    assert clearance_boost(boosted, 'L3') == pytest.approx(0.5)


def test_queue_rates_scale_clearance_with_admission_share(params):
    rates = queue_rates_for_level(params, 'L1', admission_share=0.5)
    assert rates.clearance == pytest.approx(0.15)
    assert rates.mortality == params.delta_u
    assert rates.self_resolve == params.queue_self_resolve_rate
