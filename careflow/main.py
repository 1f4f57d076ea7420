import argparse
import time

from .config import INTERVENTIONS
from .economics import DOMINANT, calculate_icer
from .interventions import AIInterventionSpec, apply_ai_interventions
from .presets import DISEASE_PROFILES, HEALTH_SYSTEMS, build_parameters
from .runner import SimulationConfig, run_simulation


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Weekly patient-flow simulation with AI interventions")
    parser.add_argument('--disease', choices=sorted(DISEASE_PROFILES), default=None)
    parser.add_argument('--health-system', choices=sorted(HEALTH_SYSTEMS), default=None)
    parser.add_argument('--population', type=float, default=1_000_000)
    parser.add_argument('--weeks', type=int, default=52)
    parser.add_argument('--congestion', type=float, default=None, help="system congestion in [0, 1]")
    parser.add_argument('--rural', action='store_true', help="use rural AI uptake")
    for name in INTERVENTIONS:
        parser.add_argument(f"--{name.replace('_', '-')}", dest=name, action='store_true',
                            help=f"enable the {name.replace('_', ' ')} AI tool")
    return parser.parse_args(argv)


def format_icer(icer):
    if icer is DOMINANT:
        return "Dominant (cheaper and healthier)"
    if icer == float('inf'):
        return "Undefined (no DALY change)"
    return f"${icer:,.2f} per DALY averted"


def main(argv=None):
    args = parse_args(argv)
    print("=== Health System Patient-Flow Simulation ===")

    params = build_parameters(args.disease, args.health_system, system_congestion=args.congestion)
    config = SimulationConfig(population=args.population, num_weeks=args.weeks)

    # 1. Run Baseline
    print(f"\nRunning Baseline ({args.disease or 'default disease'}, "
          f"{args.health_system or 'default system'})...")
    start_time = time.time()
    baseline = run_simulation(params, config)
    print(f"Baseline complete in {time.time() - start_time:.2f} seconds")

    # 2. Run AI scenario
    flags = {name: getattr(args, name) for name in INTERVENTIONS}
    spec = AIInterventionSpec.from_flags(flags, is_urban=not args.rural)
    if not spec.active:
        print("\nNo AI interventions selected, reporting baseline only.")
        scenarios = [("Baseline", baseline)]
    else:
        print(f"\nRunning AI scenario ({', '.join(spec.active)})...")
        ai_params = apply_ai_interventions(params, spec, disease_id=args.disease)
        scenarios = [("Baseline", baseline), ("AI", run_simulation(ai_params, config))]

    # 3. detailed Output
    print("\n=== Outcomes ===")
    print(f"{'Scenario':<10} | {'Deaths':>12} {'Resolved':>14} | {'Cost':>16} {'DALYs':>12} | {'Queued':>10}")
    print("-" * 86)
    for label, result in scenarios:
        queued = result.final_state.total_queued
        print(f"{label:<10} | {result.cumulative_deaths:>12,.1f} {result.cumulative_resolved:>14,.1f} | "
              f"${result.total_cost:>15,.0f} {result.dalys:>12,.1f} | {queued:>10,.1f}")

    if len(scenarios) > 1:
        ai_result = scenarios[1][1]
        print(f"\nDeaths averted: {baseline.cumulative_deaths - ai_result.cumulative_deaths:,.1f}")
        print(f"DALYs averted: {baseline.dalys - ai_result.dalys:,.1f}")
        print(f"ICER: {format_icer(calculate_icer(ai_result, baseline))}")


if __name__ == "__main__":
    main()
