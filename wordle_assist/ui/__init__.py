from .console import ConsoleDisplay, render_guess

__all__ = ["ConsoleDisplay", "render_guess"]
