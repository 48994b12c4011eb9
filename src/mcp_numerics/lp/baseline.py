from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
from scipy.optimize import linprog

from ..schemas import LPSolution, SolveOptions
from .problem import LinearProblem


def solve_with_highs(problem: LinearProblem, options: Optional[SolveOptions] = None) -> LPSolution:
    """Reference solve through SciPy's HiGHS backend; accepts every constraint kind."""
    opts = options or SolveOptions()
    c = np.array(problem.objective.coefs, dtype=float)
    A_ub, b_ub, A_eq, b_eq = _build_constraint_matrices(problem)

    res = linprog(
        c,
        A_ub=A_ub if A_ub.size else None,
        b_ub=b_ub if b_ub.size else None,
        A_eq=A_eq if A_eq.size else None,
        b_eq=b_eq if b_eq.size else None,
        bounds=[(0.0, None)] * problem.n_variables,
        method="highs",
        options={"maxiter": opts.max_iters},
    )

    if not res.success:
        return LPSolution(
            status=_map_status(res.status),
            objective_value=None,
            x=None,
            iterations=int(res.nit),
            message=res.message,
        )

    duals = _extract_duals(problem, res) if opts.return_duals else None
    return LPSolution(
        status="optimal",
        objective_value=float(res.fun),
        x=[float(value) for value in res.x],
        duals=duals,
        iterations=int(res.nit),
        message=res.message or "",
    )


def _build_constraint_matrices(problem: LinearProblem) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    n = problem.n_variables
    A_ub: List[List[float]] = []
    b_ub: List[float] = []
    A_eq: List[List[float]] = []
    b_eq: List[float] = []

    for cons in problem.constraints:
        row = list(cons.coefs)
        if cons.kind == "<=":
            A_ub.append(row)
            b_ub.append(cons.rhs)
        elif cons.kind == ">=":
            A_ub.append([-value for value in row])
            b_ub.append(-cons.rhs)
        else:
            A_eq.append(row)
            b_eq.append(cons.rhs)

    return (
        np.array(A_ub, dtype=float) if A_ub else np.empty((0, n)),
        np.array(b_ub, dtype=float) if b_ub else np.empty(0),
        np.array(A_eq, dtype=float) if A_eq else np.empty((0, n)),
        np.array(b_eq, dtype=float) if b_eq else np.empty(0),
    )


def _extract_duals(problem: LinearProblem, res) -> List[float]:
    ineq = iter(res.ineqlin.marginals if res.ineqlin is not None else [])
    eq = iter(res.eqlin.marginals if res.eqlin is not None else [])
    duals: List[float] = []
    for cons in problem.constraints:
        if cons.kind == "==":
            duals.append(float(next(eq)))
        elif cons.kind == ">=":
            duals.append(-float(next(ineq)))
        else:
            duals.append(float(next(ineq)))
    return duals


def _map_status(code: int) -> str:
    mapping = {
        0: "optimal",
        1: "iteration_limit",
        2: "infeasible",
        3: "unbounded",
    }
    return mapping.get(code, "iteration_limit")
