from conundrum.engine.solver.solver import SearchResult, Solver, possible_moves, resolve

__all__ = ["SearchResult", "Solver", "possible_moves", "resolve"]
