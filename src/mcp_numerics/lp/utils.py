import numpy as np
from typing import List, Tuple

from ..errors import UnsupportedProblemError
from .problem import LinearProblem


def build_tableau(problem: LinearProblem) -> Tuple[np.ndarray, np.ndarray, np.ndarray, List[int]]:
    """
    Augment every "<=" row with its own slack column (identity block) and pad the
    objective with zero slack costs.
    Return A (m x (n + m)), b, c and the initial all-slack basis.
    """

    n = problem.n_variables
    m = problem.n_constraints()

    for idx, cons in enumerate(problem.constraints):
        if cons.kind != "<=":
            raise UnsupportedProblemError(
                f"Constraint {idx} is '{cons.kind}'; only '<=' rows have an all-slack starting basis."
            )
        if cons.rhs < 0:
            raise UnsupportedProblemError(
                f"Constraint {idx} has negative right-hand side {cons.rhs}; a phase-one procedure is required."
            )

    if m:
        structural = np.array([cons.coefs for cons in problem.constraints], dtype=float)
    else:
        structural = np.zeros((0, n), dtype=float)
    A = np.hstack([structural, np.eye(m, dtype=float)])
    b = np.array([cons.rhs for cons in problem.constraints], dtype=float)
    c = np.concatenate([np.array(problem.objective.coefs, dtype=float), np.zeros(m)])
    basis = [n + i for i in range(m)]
    return A, b, c, basis
