"""Dispatch module - Request handling on top of the route registry."""

from pageroutes_core.dispatch.request import Request, Response
from pageroutes_core.dispatch.handler import DispatchContext, RequestHandler

__all__ = [
    "Request",
    "Response",
    "RequestHandler",
    "DispatchContext",
]
