"""Application middleware."""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


class ActorMiddleware(BaseHTTPMiddleware):
    """Resolve the Authorization header to an Actor on every request.

    Never rejects a request; routes decide what an anonymous actor may do.
    """

    async def dispatch(self, request: Request, call_next):
        resolver = request.app.state.actor_resolver
        request.state.actor = await resolver.resolve(request.headers.get("Authorization"))
        return await call_next(request)
