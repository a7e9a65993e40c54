"""FastAPI integration helpers for response envelopes."""

from .responses import envelope_response
from .responses import install_exception_handlers

__all__ = ["envelope_response", "install_exception_handlers"]
