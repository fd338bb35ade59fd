from __future__ import annotations


class Scene:
    """
    Base for all scenes driven by the SceneManager live loop.

    Scenes override the hooks they need. enter/exit bracket the time the
    scene is on top of the stack; the manager calls exit on every path out
    of the loop, so scoped resources belong there.
    """

    def enter(self, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Acquire per-scene resources. Called once before the first event."""
        return None

    def exit(self, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Release what enter() acquired."""
        return None

    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Process a single pygame event."""
        return None

    def handle_resize(self, width: int, height: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Window size changed."""
        return None

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Advance scene state by dt_ms."""
        return None

    def render(self, renderer, manager: "SceneManager") -> bool:  # type: ignore[name-defined]
        """Draw the scene; return True when something was painted."""
        return False
