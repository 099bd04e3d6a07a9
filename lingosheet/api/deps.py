"""
FastAPI dependencies for API routes.
"""

from fastapi import Request

from lingosheet.controller import Controller
from lingosheet.exceptions import EngineNotReady


def get_controller(request: Request) -> Controller:
    """The session controller built at startup."""
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise EngineNotReady()
    return controller
