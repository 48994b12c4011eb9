import logging
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from ..errors import UnboundedError
from ..schemas import LPSolution, PivotRecord, SolveOptions, StepStatus, TableauStatus
from .problem import LinearProblem
from .utils import build_tableau

logger = logging.getLogger(__name__)


class Simplex:
    """
    Dense simplex tableau for `min c.x  s.t.  A x <= b, x >= 0` with b >= 0.

    The starting basis is the slack identity block, so no phase one is run.
    Each call to `step` performs one pivot; `solve` drives it to a terminal state.
    """

    def __init__(self, problem: LinearProblem, options: Optional[SolveOptions] = None) -> None:
        self.options = options or SolveOptions()
        A, b, c, basis = build_tableau(problem)
        self._rows = A
        self._rhs = b
        self._objective = c
        # Objective row right-hand side; the minimised value is its negation.
        self._objective_rhs = 0.0
        self._basis = basis
        self.n_variables = problem.n_variables
        self.n_constraints = problem.n_constraints()
        self.status: TableauStatus = "ready"
        self.iterations = 0
        self.history: List[PivotRecord] = []
        self._unbounded_column = -1

    @property
    def rows(self) -> np.ndarray:
        return self._rows.copy()

    @property
    def rhs(self) -> np.ndarray:
        return self._rhs.copy()

    @property
    def objective(self) -> np.ndarray:
        return self._objective.copy()

    @property
    def basis(self) -> List[int]:
        return list(self._basis)

    @property
    def objective_value(self) -> float:
        value = -self._objective_rhs
        return 0.0 if value == 0 else float(value)

    def select_pivot(self) -> Optional[Tuple[int, int]]:
        """Return (row, column) of the next pivot, or None when the tableau is optimal."""
        column = self._entering_column()
        if column is None:
            return None
        row = self._leaving_row(column)
        if row is None:
            raise UnboundedError(column)
        return row, column

    def step(self) -> StepStatus:
        if self.status != "ready":
            return self.status

        column = self._entering_column()
        if column is None:
            self.status = "optimal"
            logger.debug("Optimal after %d pivots, objective %g", self.iterations, self.objective_value)
            return "optimal"

        row = self._leaving_row(column)
        if row is None:
            self.status = "unbounded"
            self._unbounded_column = column
            logger.debug("Column %d has no limiting row; problem is unbounded", column)
            return "unbounded"

        ratio = float(self._rhs[row] / self._rows[row, column])
        self._pivot(row, column)
        self.iterations += 1
        self.history.append(
            PivotRecord(
                iteration=self.iterations,
                row=row,
                column=column,
                ratio=ratio,
                objective_value=self.objective_value,
            )
        )
        logger.debug(
            "Pivot %d: column %d enters, row %d leaves (ratio %g), objective %g",
            self.iterations,
            column,
            row,
            ratio,
            self.objective_value,
        )
        return "continuing"

    def solve(self, on_pivot: Optional[Callable[["Simplex"], None]] = None) -> LPSolution:
        pivots = 0
        while self.status == "ready":
            if pivots >= self.options.max_iters and self._entering_column() is not None:
                logger.info("Stopped after %d pivots without reaching optimality", self.iterations)
                return self._result("iteration_limit", message="Hit iteration limit.")
            if self.step() == "continuing":
                pivots += 1
                if on_pivot is not None:
                    on_pivot(self)
        if self.status == "unbounded":
            return self._result("unbounded", message="Unbounded.")
        return self._result("optimal")

    def solution(self) -> Dict[str, List[float]]:
        """Current basic solution split into structural and slack values."""
        if self.status == "unbounded":
            raise UnboundedError(self._unbounded_column)
        values = self._basic_values()
        return {
            "x": values[: self.n_variables].tolist(),
            "slack": values[self.n_variables :].tolist(),
        }

    def _entering_column(self) -> Optional[int]:
        tol = self.options.tol
        if self.options.pivot_rule == "bland":
            candidates = np.flatnonzero(self._objective < -tol)
            return int(candidates[0]) if candidates.size else None
        column = int(np.argmin(self._objective))
        if self._objective[column] >= -tol:
            return None
        return column

    def _leaving_row(self, column: int) -> Optional[int]:
        tol = self.options.tol
        best_row: Optional[int] = None
        best_ratio = np.inf
        for row in range(self.n_constraints):
            coef = self._rows[row, column]
            if coef <= tol:
                continue
            ratio = self._rhs[row] / coef
            if ratio < best_ratio:
                best_row, best_ratio = row, ratio
            elif (
                ratio == best_ratio
                and self.options.pivot_rule == "bland"
                and self._basis[row] < self._basis[best_row]
            ):
                best_row = row
        return best_row

    def _pivot(self, row: int, column: int) -> None:
        tol = self.options.tol
        pivot = self._rows[row, column]
        self._rows[row] /= pivot
        self._rhs[row] /= pivot

        factors = self._rows[:, column].copy()
        factors[row] = 0.0
        self._rows -= np.outer(factors, self._rows[row])
        self._rhs -= factors * self._rhs[row]

        factor = self._objective[column]
        self._objective -= factor * self._rows[row]
        self._objective_rhs -= factor * self._rhs[row]

        self._rows[np.abs(self._rows) < tol] = 0.0
        self._rhs[np.abs(self._rhs) < tol] = 0.0
        self._objective[np.abs(self._objective) < tol] = 0.0
        self._rows[:, column] = 0.0
        self._rows[row, column] = 1.0
        self._objective[column] = 0.0
        self._basis[row] = column

    def _basic_values(self) -> np.ndarray:
        values = np.zeros(self.n_variables + self.n_constraints)
        values[self._basis] = self._rhs
        return values

    def _result(self, status: str, message: str = "") -> LPSolution:
        pivots = list(self.history)
        if status != "optimal":
            return LPSolution(
                status=status,
                objective_value=None,
                x=None,
                iterations=self.iterations,
                message=message,
                pivots=pivots,
            )

        values = self._basic_values()
        n = self.n_variables
        duals = None
        if self.options.return_duals:
            duals = [0.0 if v == 0 else float(-v) for v in self._objective[n:]]
        return LPSolution(
            status="optimal",
            objective_value=self.objective_value,
            x=[float(v) for v in values[:n]],
            slack=[float(v) for v in values[n:]],
            reduced_costs=[float(v) for v in self._objective[:n]],
            duals=duals,
            iterations=self.iterations,
            message=message,
            pivots=pivots,
        )


def simplex_solve(problem: LinearProblem, opts: Optional[SolveOptions] = None) -> LPSolution:
    """Build a tableau for `problem` and pivot until optimal, unbounded or out of iterations."""
    return Simplex(problem, opts).solve()
