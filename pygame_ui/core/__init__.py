"""Core systems for the War UI."""

from pygame_ui.core.engine_adapter import EngineAdapter, UICardInfo, GameSnapshot

__all__ = [
    "EngineAdapter",
    "UICardInfo",
    "GameSnapshot",
]
