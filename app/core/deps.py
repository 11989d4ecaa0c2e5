from fastapi import Request

from app.registry.registry import Registry


# every adapter gets the one registry built at startup, never a module global
def get_registry(request: Request) -> Registry:
    return request.app.state.registry
