"""
Kernel backend registry.

Maps engine names to kernel factories so the engine can resolve a backend
from configuration without if/elif chains.
"""

from __future__ import annotations

from collections.abc import Callable

from wscmoead.foundation.exceptions import ConfigurationError
from wscmoead.foundation.registry import suggest_names

from .backend import KernelBackend
from .numpy_backend import NumPyKernel

KERNELS: dict[str, Callable[[], KernelBackend]] = {
    "numpy": NumPyKernel,
}


def _format_unknown_engine(name: str, options: list[str]) -> str:
    parts = [f"Unknown engine '{name}'.", f"Available: {', '.join(options)}."]
    suggestions = suggest_names(name, options)
    if suggestions:
        if len(suggestions) == 1:
            parts.append(f"Did you mean '{suggestions[0]}'?")
        else:
            parts.append("Did you mean one of: " + ", ".join(f"'{item}'" for item in suggestions) + "?")
    return " ".join(parts)


def resolve_kernel(name: str) -> KernelBackend:
    key = name.lower()
    try:
        factory = KERNELS[key]
    except KeyError as exc:
        available = sorted(KERNELS)
        raise ConfigurationError(_format_unknown_engine(name, available)) from exc
    return factory()


__all__ = ["KERNELS", "resolve_kernel"]
