# Standard library imports
from typing import Any, Callable, Type

# External package imports
from fastapi import Depends, Request

# Local application imports
from ...di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built at application startup
    
    Args:
        request: Incoming request (gives access to app.state)
        
    Returns:
        The application's DI container
    """
    return request.app.state.container


def provide(dependency_class: Type[Any]) -> Callable[..., Any]:
    """
    Build a FastAPI dependency resolving dependency_class from the container
    
    Args:
        dependency_class: Registered class, usually a use case
        
    Returns:
        Dependency callable for use with Depends()
    """
    def resolve(container: BaseContainer = Depends(get_container)) -> Any:
        return container.get(dependency_class)
    
    return resolve
