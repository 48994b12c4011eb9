from mcp.server.fastmcp import FastMCP

from .errors import NumericsError
from .lp.baseline import solve_with_highs
from .lp.problem import LinearProblem
from .lp.tableau import Simplex
from .logging_config import configure_from_env
from .schemas import SolveOptions

mcp = FastMCP("MCP Numerics")


@mcp.tool()
def solve_lp(problem: LinearProblem, options: SolveOptions | None = None) -> dict:
    "Minimise a '<=' linear program with the simplex tableau method."
    opts = options or SolveOptions()
    try:
        return Simplex(problem, opts).solve().model_dump()
    except (NumericsError, ValueError) as exc:
        return {"status": "error", "message": str(exc)}


@mcp.tool()
def trace_simplex(problem: LinearProblem, options: SolveOptions | None = None) -> dict:
    "Pivot step by step and return the tableau after every iteration."
    opts = options or SolveOptions()
    try:
        simplex = Simplex(problem, opts)
    except (NumericsError, ValueError) as exc:
        return {"status": "error", "message": str(exc)}

    snapshots = [_snapshot(simplex)]
    solution = simplex.solve(on_pivot=lambda current: snapshots.append(_snapshot(current)))
    return {
        "status": solution.status,
        "objective_value": solution.objective_value,
        "tableaus": snapshots,
    }


@mcp.tool()
def solve_lp_highs(problem: LinearProblem, options: SolveOptions | None = None) -> dict:
    "Solve the same LP with SciPy's HiGHS solver as a reference."
    opts = options or SolveOptions()
    return solve_with_highs(problem, opts).model_dump()


def _snapshot(simplex: Simplex) -> dict:
    return {
        "iteration": simplex.iterations,
        "basis": simplex.basis,
        "rows": simplex.rows.tolist(),
        "rhs": simplex.rhs.tolist(),
        "objective": simplex.objective.tolist(),
        "objective_value": simplex.objective_value,
    }


if __name__ == "__main__":
    configure_from_env()
    mcp.run()
