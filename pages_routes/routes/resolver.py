"""Resolve the final include/exclude rules for ``_routes.json``."""

from __future__ import annotations

import logging
from typing import Optional

from pages_routes.routes.expansion import expand_placeholders
from pages_routes.routes.limits import WarnCallback, ensure_include, trim_to_limit
from pages_routes.routes.models import BuildOutput, RoutesConfig, RoutesSpec

logger = logging.getLogger(__name__)


def resolve_routes(
    build: BuildOutput,
    config: Optional[RoutesConfig] = None,
    warn: Optional[WarnCallback] = None,
) -> RoutesSpec:
    """Compute the _routes.json rules for one build.

    Never raises on oversized or empty rule sets: both are corrected in place
    and reported through ``warn`` (the module logger when omitted). The
    messages are also kept on ``RoutesSpec.warnings``.
    """
    config = config or RoutesConfig()
    warnings: list[str] = []

    def _warn(message: str) -> None:
        warnings.append(message)
        if warn is None:
            logger.warning(message)
        else:
            warn(message)

    exclude = expand_placeholders(config.exclude, build)
    include, exclude = trim_to_limit(list(config.include), exclude, _warn)
    include = ensure_include(include, _warn)

    return RoutesSpec(
        include=tuple(include),
        exclude=tuple(exclude),
        warnings=tuple(warnings),
    )
