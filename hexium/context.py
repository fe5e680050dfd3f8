"""Process-wide engine settings shared by all subsystems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional


@dataclass
class EngineContext:
    """Timing, window and projection settings; use :meth:`get`."""

    delta_time: float = 0.0
    total_time: float = 0.0
    window_width: int = 1280
    window_height: int = 720
    near_plane: float = 0.1
    far_plane: float = 1700.0
    fov: float = 45.0
    window: Any = None

    _instance: ClassVar[Optional[EngineContext]] = None

    @classmethod
    def get(cls) -> EngineContext:
        """Return the shared context, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance