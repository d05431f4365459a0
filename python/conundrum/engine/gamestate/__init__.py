from conundrum.engine.gamestate.state import GameState

__all__ = ["GameState"]
