from trackademic.solver.backends import ModelBackend, OpenRouterBackend, create_backend
from trackademic.solver.solve_math_flow import SolveMathFlow, solve_math

__all__ = ["ModelBackend", "OpenRouterBackend", "create_backend", "SolveMathFlow", "solve_math"]
