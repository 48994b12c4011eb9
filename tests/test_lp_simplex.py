import json
from pathlib import Path

import pytest

from mcp_numerics.lp.problem import LinearProblem
from mcp_numerics.lp.tableau import simplex_solve
from mcp_numerics.schemas import SolveOptions


def load_example(name: str) -> LinearProblem:
    data = json.loads(Path(__file__).parent.parent.joinpath("examples", name).read_text())
    return LinearProblem.model_validate(data)


def test_simplex_solves_small_lp():
    problem = load_example("small_lp.json")
    solution = simplex_solve(problem, SolveOptions())

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(-10.0, rel=1e-9)
    assert solution.x == pytest.approx([2.0, 2.0])
    assert solution.slack == pytest.approx([0.0, 0.0])
    assert solution.iterations == 2
    assert [(p.row, p.column) for p in solution.pivots] == [(1, 0), (0, 1)]


def test_simplex_three_variable_lp():
    # max 5x + 4y + 3z  s.t.  2x + 3y + z <= 5, 4x + y + 2z <= 11, 3x + 4y + 2z <= 8
    problem = (
        LinearProblem.builder(3)
        .constraint([2.0, 3.0, 1.0], "<=", 5.0)
        .constraint([4.0, 1.0, 2.0], "<=", 11.0)
        .constraint([3.0, 4.0, 2.0], "<=", 8.0)
        .objective([-5.0, -4.0, -3.0])
        .build()
    )
    solution = simplex_solve(problem)

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(-13.0)
    assert solution.x == pytest.approx([2.0, 0.0, 1.0])
    assert solution.slack == pytest.approx([0.0, 1.0, 0.0])


def test_non_negative_costs_are_optimal_at_origin():
    problem = LinearProblem.builder(2).constraint([1.0, 1.0], "<=", 3.0).objective([1.0, 0.0]).build()
    solution = simplex_solve(problem)

    assert solution.status == "optimal"
    assert solution.iterations == 0
    assert solution.objective_value == 0.0
    assert solution.x == [0.0, 0.0]
    assert solution.slack == [3.0]


def test_unbounded_problem():
    problem = LinearProblem.builder(2).constraint([-1.0, 1.0], "<=", 1.0).objective([-1.0, 0.0]).build()
    solution = simplex_solve(problem)

    assert solution.status == "unbounded"
    assert solution.objective_value is None
    assert solution.x is None


def test_problem_without_constraints():
    assert simplex_solve(LinearProblem.builder(1).objective([-1.0]).build()).status == "unbounded"
    assert simplex_solve(LinearProblem.builder(1).objective([2.0]).build()).status == "optimal"


def test_iteration_limit():
    solution = simplex_solve(load_example("small_lp.json"), SolveOptions(max_iters=1))

    assert solution.status == "iteration_limit"
    assert solution.iterations == 1
    assert solution.objective_value is None


def test_iteration_limit_not_reported_when_already_optimal():
    solution = simplex_solve(load_example("small_lp.json"), SolveOptions(max_iters=2))

    assert solution.status == "optimal"


@pytest.mark.parametrize("rule", ["dantzig", "bland"])
def test_pivot_rules_agree_on_optimum(rule):
    problem = (
        LinearProblem.builder(2)
        .constraint([1.0, 1.0], "<=", 4.0)
        .constraint([1.0, 0.0], "<=", 2.0)
        .objective([-2.0, -3.0])
        .build()
    )
    solution = simplex_solve(problem, SolveOptions(pivot_rule=rule))

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(-12.0)
    assert solution.x == pytest.approx([0.0, 4.0])


def test_degenerate_problem_terminates():
    # Degenerate vertex at the origin: several rows with zero right-hand side.
    problem = (
        LinearProblem.builder(4)
        .constraint([0.5, -5.5, -2.5, 9.0], "<=", 0.0)
        .constraint([0.5, -1.5, -0.5, 1.0], "<=", 0.0)
        .constraint([1.0, 0.0, 0.0, 0.0], "<=", 1.0)
        .objective([-10.0, 57.0, 9.0, 24.0])
        .build()
    )
    solution = simplex_solve(problem, SolveOptions(pivot_rule="bland"))

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(-1.0)
