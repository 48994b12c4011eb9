from __future__ import annotations

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..errors import ObjectiveRequiredError
from ..schemas import Cmp, Constraint, Objective


def _as_coefs(coefs: Sequence[float], n_variables: int, what: str) -> Tuple[float, ...]:
    values = tuple(float(value) for value in coefs)
    if len(values) != n_variables:
        raise ValueError(
            f"{what} has {len(values)} coefficients, expected {n_variables}."
        )
    return values


class LinearProblem(BaseModel):
    """
    Minimisation LP over `n_variables` non-negative variables.
    Every constraint row and the objective carry exactly `n_variables` coefficients.
    """

    model_config = ConfigDict(frozen=True)

    n_variables: int = Field(gt=0)
    constraints: Tuple[Constraint, ...] = ()
    objective: Objective

    @model_validator(mode="after")
    def _check_shape(self) -> "LinearProblem":
        _as_coefs(self.objective.coefs, self.n_variables, "Objective")
        for idx, cons in enumerate(self.constraints):
            _as_coefs(cons.coefs, self.n_variables, f"Constraint {idx}")
        return self

    @staticmethod
    def builder(n_variables: int) -> "LinearProblemBuilder":
        assert n_variables > 0, "variable count must be non-zero"
        return LinearProblemBuilder(n_variables=n_variables)

    def n_constraints(self) -> int:
        return len(self.constraints)


class LinearProblemBuilder:
    """Immutable fluent builder; every call returns a new builder."""

    __slots__ = ("_n_variables", "_constraints", "_objective")

    def __init__(
        self,
        n_variables: int,
        constraints: Tuple[Constraint, ...] = (),
        objective: Optional[Objective] = None,
    ) -> None:
        self._n_variables = n_variables
        self._constraints = constraints
        self._objective = objective

    @property
    def n_variables(self) -> int:
        return self._n_variables

    def constraint(self, coefs: Sequence[float], kind: Cmp, rhs: float) -> "LinearProblemBuilder":
        row = Constraint(
            coefs=_as_coefs(coefs, self._n_variables, "Constraint"),
            kind=kind,
            rhs=float(rhs),
        )
        return LinearProblemBuilder(self._n_variables, self._constraints + (row,), self._objective)

    def objective(self, coefs: Sequence[float]) -> "LinearProblemBuilder":
        objective = Objective(coefs=_as_coefs(coefs, self._n_variables, "Objective"))
        return LinearProblemBuilder(self._n_variables, self._constraints, objective)

    def build(self) -> LinearProblem:
        if self._objective is None:
            raise ObjectiveRequiredError()
        return LinearProblem(
            n_variables=self._n_variables,
            constraints=self._constraints,
            objective=self._objective,
        )
