"""Response envelope helpers shared by the routers."""

from .api_envelope import Envelope, error, error_from_exception, ok

__all__ = ["Envelope", "error", "error_from_exception", "ok"]
