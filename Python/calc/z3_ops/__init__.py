from .machine import divide

__all__ = ["divide"]
