from conundrum.engine.codec.codec import blank_position, from_identifier, identifier

__all__ = ["blank_position", "from_identifier", "identifier"]
