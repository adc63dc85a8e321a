"""
Dishka container wiring.

- AppProvider: session registry and command/query handlers
- PersistenceProvider: prisma client and repository implementations
"""

from dishka import AsyncContainer, make_async_container

from chat_service.setup.ioc.container import AppProvider


def make_container() -> AsyncContainer:
    """Production container. Imports prisma, so it needs a generated client."""
    from chat_service.setup.ioc.persistence import PersistenceProvider

    return make_async_container(AppProvider(), PersistenceProvider())


__all__ = ["AppProvider", "make_container"]
