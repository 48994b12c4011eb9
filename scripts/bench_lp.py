#!/usr/bin/env python3
import json
import time
from pathlib import Path

from mcp_numerics.lp.baseline import solve_with_highs
from mcp_numerics.lp.problem import LinearProblem
from mcp_numerics.lp.tableau import simplex_solve
from mcp_numerics.schemas import SolveOptions
from scripts.generate_instances import generate_random_lp


def load_example(name: str) -> LinearProblem:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return LinearProblem.model_validate(json.loads(path.read_text()))


def main() -> None:
    opts = SolveOptions()
    cases = [("examples/small_lp.json", load_example("small_lp.json"))]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_lp(3, 3, seed)))
    cases.append(("random-large", generate_random_lp(40, 30, 99)))

    print("name,solver,status,objective,iterations,time_ms")
    for name, problem in cases:
        for solver_name, solver in (("tableau", simplex_solve), ("highs", solve_with_highs)):
            start = time.perf_counter()
            solution = solver(problem, opts)
            elapsed_ms = (time.perf_counter() - start) * 1000
            print(
                f"{name},{solver_name},{solution.status},{solution.objective_value},"
                f"{solution.iterations},{elapsed_ms:.2f}"
            )


if __name__ == "__main__":
    main()
