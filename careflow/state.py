import dataclasses
from dataclasses import dataclass, field
from typing import Dict

from .config import LEVELS, WEEKS_PER_YEAR

COMPARTMENTS = ('U', 'I', 'F', 'L0', 'L1', 'L2', 'L3', 'R', 'D')
LIVE_COMPARTMENTS = ('U', 'I', 'F', 'L0', 'L1', 'L2', 'L3')
PATIENT_DAY_COMPARTMENTS = ('U', 'I', 'F', 'L0', 'L1', 'L2', 'L3')


def _zero_patient_days():
    return {c: 0.0 for c in PATIENT_DAY_COMPARTMENTS}


def _zero_queues():
    return {level: 0.0 for level in LEVELS}


@dataclass(frozen=True)
class CompartmentalState:
    """Snapshot of the system at a week boundary. Treat as immutable."""
    U: float = 0.0   # symptomatic, no care
    I: float = 0.0   # informal / self care
    F: float = 0.0   # formal care entry
    L0: float = 0.0  # community health workers
    L1: float = 0.0  # primary care
    L2: float = 0.0  # district hospital
    L3: float = 0.0  # tertiary hospital
    R: float = 0.0   # resolved
    D: float = 0.0   # dead
    patient_days: Dict[str, float] = field(default_factory=_zero_patient_days)
    queues: Dict[str, float] = field(default_factory=_zero_queues)
    queue_deaths: float = 0.0
    episodes_touched: float = 0.0
    new_cases: float = 0.0
    cumulative_incidence: float = 0.0

    @property
    def live_population(self):
        return sum(getattr(self, c) for c in LIVE_COMPARTMENTS)

    @property
    def total_queued(self):
        return sum(self.queues.values())

    @property
    def total_accounted(self):
        """Everyone the system has seen: live stocks, queues, resolved and dead."""
        return self.live_population + self.total_queued + self.R + self.D

    def to_dict(self):
        return dataclasses.asdict(self)


def initialize_state(population, incidence_rate, initial_state=None):
    """
    Seed week 0 with one week of incidence sitting in U.

    initial_state: optional partial mapping of CompartmentalState fields;
    patient_days / queues may themselves be partial.
    """
    weekly_incidence = incidence_rate * population / WEEKS_PER_YEAR
    values = {'U': weekly_incidence, 'new_cases': weekly_incidence}

    for key, value in (initial_state or {}).items():
        if key == 'patient_days':
            values[key] = {**_zero_patient_days(), **value}
        elif key == 'queues':
            values[key] = {**_zero_queues(), **value}
        elif key in CompartmentalState.__dataclass_fields__:
            values[key] = value
        # Unknown keys are ignored

    return CompartmentalState(**values)
