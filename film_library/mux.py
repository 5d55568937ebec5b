"""Route table with scoped middleware groups.

A middleware is any FastAPI dependency callable. It may raise to reject the
request, and a generator middleware can run code after the handler::

    router = Mux(app.router)
    router.use(logger.new())
    router.handle("POST", "/api/login", login)

    authenticated = router.group()
    authenticated.use(auth.new(settings))
    authenticated.handle("GET", "/api/films", get_films)

Every route gets the middleware list of the scope it is registered on, in
registration order: the first middleware runs first on the way in and
finishes last on the way out. A group starts from a copy of its parent's
list, so later ``use`` calls on either side stay local to that side.
"""
from typing import Callable, Iterable, List, Optional, Tuple

from fastapi import APIRouter, Depends


class Mux:
    def __init__(self, router: Optional[APIRouter] = None, middlewares: Iterable[Callable] = ()):
        self.router = router if router is not None else APIRouter()
        self._middlewares: List[Callable] = list(middlewares)

    @property
    def middlewares(self) -> Tuple[Callable, ...]:
        return tuple(self._middlewares)

    def use(self, middleware: Callable) -> None:
        self._middlewares.append(middleware)

    def handle(self, method: str, path: str, endpoint: Callable, **kwargs) -> None:
        dependencies = [Depends(mw) for mw in self._middlewares]
        dependencies.extend(kwargs.pop("dependencies", None) or [])
        self.router.add_api_route(
            path,
            endpoint,
            methods=[method.upper()],
            dependencies=dependencies,
            **kwargs,
        )

    def route(self, method: str, path: str, **kwargs) -> Callable:
        def decorator(endpoint: Callable) -> Callable:
            self.handle(method, path, endpoint, **kwargs)
            return endpoint
        return decorator

    def group(self, fn: Optional[Callable[["Mux"], None]] = None) -> "Mux":
        child = Mux(self.router, self._middlewares)
        if fn is not None:
            fn(child)
        return child
