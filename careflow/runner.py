import simpy
import numpy as np
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import BURN_IN_WEEKS, LEVELS, MIN_RESOLUTION_RATE
from .economics import calculate_economics
from .parameters import sanitize_parameters
from .state import CompartmentalState, initialize_state
from .utils import sanitize_value
from .week import step


class SimulationCancelled(RuntimeError):
    """Raised when a cancel event is set between weeks."""


@dataclass(frozen=True)
class SimulationConfig:
    population: float
    num_weeks: int = 52
    initial_state: Optional[dict] = None


@dataclass(frozen=True)
class QueueSummary:
    average_length: Dict[str, float]
    peak_length: Dict[str, float]
    total_person_weeks: float
    queue_deaths: float


@dataclass(frozen=True)
class SimulationResult:
    weekly_states: List[CompartmentalState]
    cumulative_deaths: float
    cumulative_resolved: float
    average_time_to_resolution: float
    total_cost: float
    dalys: float
    queues: QueueSummary
    final_state: CompartmentalState = field(repr=False)


def calculate_time_to_resolution(params):
    """
    Expected weeks to resolution: inverse of the pathway-weighted
    resolution rate, floored so the answer stays bounded.
    """
    p_formal = params.phi0
    p_non_formal = 1 - params.phi0
    p_untreated = p_non_formal * params.informal_care_ratio
    p_informal = p_non_formal * (1 - params.informal_care_ratio)

    p_l0 = p_formal
    p_l1 = p_l0 * params.rho0
    p_l2 = p_l1 * params.rho1
    p_l3 = p_l2 * params.rho2

    weighted_rate = (
        p_untreated * params.mu_u
        + p_informal * params.mu_i
        + p_l0 * params.mu0
        + p_l1 * params.mu1
        + p_l2 * params.mu2
        + p_l3 * params.mu3
    )
    return sanitize_value(1 / max(weighted_rate, MIN_RESOLUTION_RATE), 'average_time_to_resolution')


def summarize_queues(weekly_states, final_state):
    if not weekly_states:
        zeros = {level: 0.0 for level in LEVELS}
        return QueueSummary(dict(zeros), dict(zeros), 0.0, final_state.queue_deaths)

    # rows: weeks, columns: levels
    lengths = np.array([[s.queues.get(level, 0.0) for level in LEVELS] for s in weekly_states])
    return QueueSummary(
        average_length=dict(zip(LEVELS, lengths.mean(axis=0).tolist())),
        peak_length=dict(zip(LEVELS, lengths.max(axis=0).tolist())),
        total_person_weeks=float(lengths.sum()),
        queue_deaths=final_state.queue_deaths,
    )


class HealthSystemSimulation:
    def __init__(self, params, config, cancel_event=None):
        """
        params: ModelParameters (already AI-adjusted if wanted); non-finite
                fields are sanitized before the first week
        config: SimulationConfig
        cancel_event: anything with is_set(), checked at each week boundary
        """
        if config.population <= 0:
            raise ValueError(f"population must be positive, got {config.population}")
        if config.num_weeks < 0:
            raise ValueError(f"num_weeks must be non-negative, got {config.num_weeks}")

        self.env = simpy.Environment()
        self.params = sanitize_parameters(params)
        self.config = config
        self.cancel_event = cancel_event
        self.burn_in_weeks = BURN_IN_WEEKS

        self.state = initialize_state(config.population, params.incidence_rate, config.initial_state)
        self.weekly_states = []

    def run(self):
        self.env.process(self.week_clock())
        self.env.run(until=self.burn_in_weeks + self.config.num_weeks)
        return self.build_result()

    def week_clock(self):
        """Advances the model one week per simulated time unit; records after burn-in."""
        total_weeks = self.burn_in_weeks + self.config.num_weeks
        for week in range(total_weeks):
            if self.cancel_event is not None and self.cancel_event.is_set():
                raise SimulationCancelled(f"cancelled at week {week}")
            self.state = step(self.state, self.params, self.config.population)
            if week >= self.burn_in_weeks:
                self.weekly_states.append(self.state)
            yield self.env.timeout(1)

    def build_result(self):
        final_state = self.state
        total_cost, dalys = calculate_economics(final_state, self.params)
        return SimulationResult(
            weekly_states=list(self.weekly_states),
            cumulative_deaths=sanitize_value(final_state.D, 'cumulative_deaths'),
            cumulative_resolved=sanitize_value(final_state.R, 'cumulative_resolved'),
            average_time_to_resolution=calculate_time_to_resolution(self.params),
            total_cost=total_cost,
            dalys=dalys,
            queues=summarize_queues(self.weekly_states, final_state),
            final_state=final_state,
        )


def run_simulation(params, config, cancel_event=None):
    return HealthSystemSimulation(params, config, cancel_event).run()
