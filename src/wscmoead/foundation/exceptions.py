"""
wscmoead exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All wscmoead-specific exceptions inherit from WSCError for easy catching.

Every error raised here is fatal for a run: configuration and feasibility
problems are detected at initialisation (or during reachability analysis) and
abort immediately instead of being defaulted.

Example:
    try:
        result = MOEAD.from_config(config).run(taxonomy, services, task)
    except WSCError as e:
        print(f"Composition failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class WSCError(Exception):
    """
    Base exception for all wscmoead errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(WSCError, ValueError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidOperatorError(ConfigurationError):
    """Raised when a component name cannot be resolved through its registry."""

    def __init__(
        self,
        operator_type: str,
        operator_name: str,
        available: list[str] | None = None,
    ) -> None:
        message = f"Unknown {operator_type} '{operator_name}'."
        suggestion = f"Available {operator_type} names: {', '.join(available)}" if available else None
        super().__init__(
            message,
            suggestion,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class OperatorProbabilityError(ConfigurationError):
    """Raised when crossover, mutation and local search probabilities do not add up to 1."""

    def __init__(self, crossover: float, mutation: float, local_search: float) -> None:
        total = crossover + mutation + local_search
        message = f"The probabilities for crossover, mutation, and local search should add up to 1 (got {total!r})."
        suggestion = "Adjust crossover_prob, mutation_prob and local_search_prob so that they sum to 1.0"
        super().__init__(
            message,
            suggestion,
            {"crossover": crossover, "mutation": mutation, "local_search": local_search},
        )


class TournamentSizeError(ConfigurationError):
    """Raised when the tournament cannot be drawn from a neighbourhood."""

    def __init__(self, tournament_size: int, neighbor_size: int, message: str | None = None) -> None:
        message = message or (
            f"The tournament size ({tournament_size}) exceeds the size of the neighbourhood ({neighbor_size})."
        )
        suggestion = "Lower tournament_size or increase neighbor_size"
        super().__init__(
            message,
            suggestion,
            {"tournament_size": tournament_size, "neighbor_size": neighbor_size},
        )


class UnsupportedObjectivesError(ConfigurationError):
    """Raised when weight vectors are requested for an unsupported objective count."""

    def __init__(self, n_obj: int) -> None:
        message = f"Unsupported number of objectives ({n_obj}). Should be 2 or 3."
        super().__init__(message, "Set n_obj to 2 or 3", {"n_obj": n_obj})


class NeighborhoodSizeError(ConfigurationError):
    """Raised when the neighbourhood size does not fit the population."""

    def __init__(self, message: str, neighbor_size: int, pop_size: int) -> None:
        suggestion = "neighbor_size must lie between 1 and pop_size - 1"
        super().__init__(message, suggestion, {"neighbor_size": neighbor_size, "pop_size": pop_size})


# =============================================================================
# Composition Errors
# =============================================================================


class CompositionError(WSCError):
    """Base class for errors about the composition task itself."""

    pass


class InfeasibleCompositionError(CompositionError):
    """Raised when the task outputs cannot be reached from the task inputs."""

    def __init__(self, missing: list[str] | None = None, num_layers: int | None = None) -> None:
        message = "It is impossible to perform a composition using the services and settings provided."
        suggestion = "Check that the catalog contains services producing every requested output concept"
        super().__init__(message, suggestion, {"missing": missing or [], "num_layers": num_layers})


class UnknownConceptError(CompositionError, KeyError):
    """Raised when a concept or instance is not part of the taxonomy."""

    def __init__(self, concept: str) -> None:
        message = f"Concept '{concept}' is not present in the taxonomy."
        super().__init__(message, "Make sure the taxonomy was built from the same dataset", {"concept": concept})

    def __str__(self) -> str:
        return self._format_message()


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "WSCError",
    # Configuration
    "ConfigurationError",
    "InvalidOperatorError",
    "OperatorProbabilityError",
    "TournamentSizeError",
    "UnsupportedObjectivesError",
    "NeighborhoodSizeError",
    # Composition
    "CompositionError",
    "InfeasibleCompositionError",
    "UnknownConceptError",
]
