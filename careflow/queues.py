from dataclasses import dataclass

from .config import CAPACITY_CONGESTION_SLOPE, CAPACITY_FLOOR
from .utils import competing_outflows


@dataclass(frozen=True)
class QueueRates:
    """Weekly fractional outflows from a pending-admission queue."""
    mortality: float
    abandonment: float  # -> U
    bypass: float       # -> I
    self_resolve: float # -> R
    clearance: float    # -> the level's compartment


@dataclass(frozen=True)
class QueueOutflows:
    deaths: float = 0.0
    abandoned: float = 0.0
    bypassed: float = 0.0
    self_resolved: float = 0.0
    cleared: float = 0.0

    @property
    def total(self):
        return self.deaths + self.abandoned + self.bypassed + self.self_resolved + self.cleared


def process_queue(queue_length, rates):
    """
    Apply all five outflows to one snapshot of the queue.

    Mortality, abandonment, bypass and self-resolution leave at their full
    rates; clearance gets at most what they leave behind. Only if those
    four alone oversubscribe the queue are they scaled down together (and
    nothing clears). Returns (QueueOutflows, remaining length).
    """
    if queue_length <= 0:
        return QueueOutflows(), 0.0

    leaving_rates = [rates.mortality, rates.abandonment, rates.bypass, rates.self_resolve]
    amounts, waiting = competing_outflows(queue_length, leaving_rates)
    cleared = min(queue_length * rates.clearance, waiting)
    return QueueOutflows(*amounts, cleared=cleared), max(0.0, waiting - cleared)


def capacity_multiplier(congestion, competition_sensitivity):
    """Share of desired inbound flow a level can admit this week."""
    return max(CAPACITY_FLOOR, 1 - CAPACITY_CONGESTION_SLOPE * congestion * competition_sensitivity)


def clearance_boost(params, level):
    """AI throughput gains that widen queue clearance at each level."""
    hospital = params.length_of_stay_reduction + params.discharge_optimization + params.treatment_efficiency
    if level == 'L0':
        return params.resolution_boost # CHW AI
    if level == 'L1':
        return params.point_of_care_resolution # Diagnostic AI
    if level == 'L2':
        return hospital
    if level == 'L3':
        return hospital + params.resource_utilization
    return 0.0


def queue_rates_for_level(params, level, admission_share):
    clearance = max(0.0, admission_share * params.queue_clearance_rate) * (1 + clearance_boost(params, level))
    return QueueRates(
        mortality=params.delta_u, # waiting patients die at the untreated rate
        abandonment=params.queue_abandonment_rate,
        bypass=params.queue_bypass_rate,
        self_resolve=params.queue_self_resolve_rate,
        clearance=clearance,
    )
