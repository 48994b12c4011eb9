from __future__ import annotations

from typing import Callable, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

Cmp = Literal["<=", ">=", "=="]
PivotRule = Literal["dantzig", "bland"]
LPStatus = Literal["optimal", "infeasible", "unbounded", "iteration_limit"]
TableauStatus = Literal["ready", "optimal", "unbounded"]
StepStatus = Literal["continuing", "optimal", "unbounded"]

RealFunction = Callable[[float], float]


class Constraint(BaseModel):
    model_config = ConfigDict(frozen=True)

    coefs: Tuple[float, ...]
    kind: Cmp = "<="
    rhs: float


class Objective(BaseModel):
    """Coefficients of the function to minimise."""

    model_config = ConfigDict(frozen=True)

    coefs: Tuple[float, ...]


class SolveOptions(BaseModel):
    max_iters: int = Field(default=10_000, ge=0)
    tol: float = Field(default=1e-9, ge=0.0)
    pivot_rule: PivotRule = "dantzig"
    return_duals: bool = True


class PivotRecord(BaseModel):
    iteration: int
    row: int
    column: int
    ratio: float
    objective_value: float


class LPSolution(BaseModel):
    status: LPStatus
    objective_value: Optional[float]
    x: List[float] | None
    slack: List[float] | None = None
    reduced_costs: List[float] | None = None
    duals: List[float] | None = None
    iterations: int
    message: str = ""
    pivots: List[PivotRecord] = Field(default_factory=list)
