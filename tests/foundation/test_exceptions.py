"""Tests for the wscmoead exception hierarchy."""

from __future__ import annotations

import pytest


class TestWSCError:
    """Test base WSCError class."""

    def test_basic_error(self):
        """WSCError should work with just a message."""
        from wscmoead.foundation.exceptions import WSCError

        err = WSCError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None
        assert err.details == {}

    def test_error_with_suggestion(self):
        """WSCError should include suggestion in message."""
        from wscmoead.foundation.exceptions import WSCError

        err = WSCError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)
        assert err.suggestion == "Try this instead"


class TestConfigurationErrors:
    """Test configuration-related errors."""

    def test_configuration_error_is_value_error(self):
        from wscmoead.foundation.exceptions import ConfigurationError, WSCError

        err = ConfigurationError("bad")
        assert isinstance(err, ValueError)
        assert isinstance(err, WSCError)

    def test_invalid_operator_lists_available(self):
        from wscmoead.foundation.exceptions import InvalidOperatorError

        err = InvalidOperatorError("crossover operator", "bogus", available=["indirect", "graph"])
        assert "bogus" in str(err)
        assert "indirect" in str(err)
        assert err.details["operator_name"] == "bogus"

    def test_probability_error_reports_total(self):
        from wscmoead.foundation.exceptions import OperatorProbabilityError

        err = OperatorProbabilityError(0.5, 0.2, 0.1)
        assert "add up to 1" in str(err)
        assert err.details == {"crossover": 0.5, "mutation": 0.2, "local_search": 0.1}

    def test_tournament_error_default_message(self):
        from wscmoead.foundation.exceptions import TournamentSizeError

        err = TournamentSizeError(5, 3)
        assert "exceeds the size of the neighbourhood" in str(err)

    def test_unsupported_objectives(self):
        from wscmoead.foundation.exceptions import ConfigurationError, UnsupportedObjectivesError

        err = UnsupportedObjectivesError(4)
        assert isinstance(err, ConfigurationError)
        assert "Should be 2 or 3" in str(err)


class TestCompositionErrors:
    def test_infeasible_records_missing_concepts(self):
        from wscmoead.foundation.exceptions import CompositionError, InfeasibleCompositionError

        err = InfeasibleCompositionError(["Z"], 2)
        assert isinstance(err, CompositionError)
        assert err.details["missing"] == ["Z"]
        assert err.details["num_layers"] == 2

    def test_unknown_concept_is_key_error(self):
        from wscmoead.foundation.exceptions import UnknownConceptError

        with pytest.raises(KeyError):
            raise UnknownConceptError("Nope")

    def test_unknown_concept_message_is_readable(self):
        from wscmoead.foundation.exceptions import UnknownConceptError

        assert str(UnknownConceptError("Nope")).startswith("Concept 'Nope'")
