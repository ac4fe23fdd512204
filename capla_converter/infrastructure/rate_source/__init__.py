from .client import RateSourceClient

__all__ = ["RateSourceClient"]
