"""Application lifecycle events."""

from cookbook.core.events.lifespan import lifespan


__all__ = ["lifespan"]
