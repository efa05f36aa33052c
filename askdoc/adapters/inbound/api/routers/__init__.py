from . import ask, health

__all__ = ["ask", "health"]
