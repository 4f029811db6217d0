from .registry import (
    CROSSOVERS,
    INDIVIDUALS,
    LOCAL_SEARCHES,
    MUTATIONS,
    STOPPING_CRITERIA,
    Components,
    resolve_components,
)

__all__ = [
    "INDIVIDUALS",
    "CROSSOVERS",
    "MUTATIONS",
    "LOCAL_SEARCHES",
    "STOPPING_CRITERIA",
    "Components",
    "resolve_components",
]
