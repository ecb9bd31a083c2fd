"""FastAPI dependency injection for configurator services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from tabletops.domain.services import ConfigConstraintResolver


@lru_cache(maxsize=1)
def get_resolver() -> ConfigConstraintResolver:
    """Get cached ConfigConstraintResolver instance."""
    return ConfigConstraintResolver()


# Type aliases for cleaner endpoint signatures
ResolverDep = Annotated[ConfigConstraintResolver, Depends(get_resolver)]
