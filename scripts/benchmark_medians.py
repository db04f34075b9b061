import time

from tqdm import tqdm

from pointstats import NonConvergentError, arithmetic_centroid, distance_sum, geometric_median, scalar_eccentricity
from pointstats.data_generators import generate_points
from pointstats.script_utils import ArgsParser, BenchmarkConfig


def time_solver(name: str, solve, config: BenchmarkConfig):
    """Time one centrality measure over `repeats` random point sets.
    Returns total seconds, the summed distance sums, the mean residual eccentricity
    and the number of sets the solver failed to converge on.
    """
    total_time = 0.0
    total_distance = 0.0
    total_eccentricity = 0.0
    failures = 0
    for i in tqdm(range(1, config.repeats + 1), desc=name, leave=False):
        points = generate_points(config.dimensions, config.n_points, seed=config.seed + i)
        start_time = time.perf_counter()
        try:
            centre = solve(points)
        except NonConvergentError:
            failures += 1
            continue
        finally:
            total_time += time.perf_counter() - start_time
        total_distance += distance_sum(points, centre)
        total_eccentricity += scalar_eccentricity(points, centre)
    converged = config.repeats - failures
    mean_eccentricity = total_eccentricity / converged if converged else float("nan")
    return total_time, total_distance, mean_eccentricity, failures


def main():
    parser = ArgsParser(description="Time the geometric median schemes on random point sets")
    config_path, overrides = parser.parse_config_args()
    config = BenchmarkConfig.from_file(config_path, overrides)

    print(f"Run {config.run_id}: {config.repeats} sets of {config.n_points} points "
          f"in {config.dimensions} dimensions")

    solvers = [
        (method, lambda points, cfg=solver_config: geometric_median(points, config=cfg))
        for method, solver_config in config.solver_configs.items()
    ]
    if config.include_centroid:
        solvers.append(("centroid", arithmetic_centroid))

    print(f"{'measure':<12}{'seconds':>12}{'sum of distances':>22}{'mean eccentricity':>22}{'failed':>8}")
    for name, solve in solvers:
        seconds, distances, eccentricity, failures = time_solver(name, solve, config)
        print(f"{name:<12}{seconds:>12.4f}{distances:>22.6f}{eccentricity:>22.3e}{failures:>8}")


if __name__ == "__main__":
    main()
