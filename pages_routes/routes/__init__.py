from pages_routes.routes.models import (
    BuildOutput,
    Placeholder,
    RoutesConfig,
    RoutesSpec,
)
from pages_routes.routes.resolver import resolve_routes

__all__ = [
    "BuildOutput",
    "Placeholder",
    "RoutesConfig",
    "RoutesSpec",
    "resolve_routes",
]
