"""
Config loading utilities for programmatic entrypoints.

Three formats are accepted: YAML (``.yaml``/``.yml``), JSON (``.json``) and
plain parameter files made of whitespace separated ``key value`` pairs, e.g.::

    popSize 500
    numNeighbours 30
    crossoverProbability 0.8
    tchebycheff true

Parameter-file keys use camelCase names; YAML and JSON mappings may use either
those or the ``MOEADConfigData`` field names. Unknown keys are fatal.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Sequence

from wscmoead.foundation.exceptions import ConfigurationError
from wscmoead.foundation.registry import suggest_names

from .moead import CONFIG_FIELDS, MOEADConfig, MOEADConfigData

_logger = logging.getLogger(__name__)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


# camelCase parameter name -> (field name, converter)
PARAM_KEYS: Dict[str, tuple[str, Callable[[Any], Any]]] = {
    "seed": ("seed", int),
    "generations": ("generations", int),
    "popSize": ("pop_size", int),
    "numObjectives": ("n_obj", int),
    "numNeighbours": ("neighbor_size", int),
    "crossoverProbability": ("crossover_prob", float),
    "mutationProbability": ("mutation_prob", float),
    "localSearchProbability": ("local_search_prob", float),
    "stopCrit": ("stopping", str),
    "indType": ("individual", str),
    "mutOperator": ("mutation", str),
    "crossOperator": ("crossover", str),
    "localOperator": ("local_search", str),
    "numLocalSearchTries": ("num_local_search_tries", int),
    "tournamentSelection": ("tournament_selection", _parse_bool),
    "tournamentSize": ("tournament_size", int),
    "dynamicNormalisation": ("dynamic_normalisation", _parse_bool),
}

QOS_WEIGHT_KEYS = ("w1", "w2", "w3", "w4")

# Output and dataset locations; reading and writing files is left to callers.
IGNORED_KEYS = frozenset({"outFileName", "frontFileName", "serviceRepository", "serviceTaxonomy", "serviceTask"})


def read_params_file(path: str | Path) -> list[tuple[str, str]]:
    """Return the ``(key, value)`` pairs of a parameter file in file order."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    if len(tokens) % 2:
        raise ConfigurationError(f"Parameter file '{path}' has a key without a value ('{tokens[-1]}').")
    return list(zip(tokens[0::2], tokens[1::2]))


def _pairs_from_overrides(overrides: Mapping[str, Any] | Sequence[str] | None) -> list[tuple[str, Any]]:
    if overrides is None:
        return []
    if isinstance(overrides, Mapping):
        return list(overrides.items())
    tokens = list(overrides)
    if len(tokens) % 2:
        raise ConfigurationError("Overrides must come in key/value pairs.")
    return list(zip(tokens[0::2], tokens[1::2]))


def apply_params(values: Dict[str, Any], pairs: Sequence[tuple[str, Any]]) -> Dict[str, Any]:
    """
    Apply ``(key, value)`` pairs onto a field-name keyed dictionary.

    Later pairs win. ``tchebycheff`` selects the aggregation method and
    ``w1``..``w4`` set one QoS weight each.
    """
    qos_weights = list(values.get("qos_weights", (0.25, 0.25, 0.25, 0.25)))
    for key, raw in pairs:
        if key in IGNORED_KEYS:
            _logger.debug("Ignoring parameter '%s'", key)
        elif key in PARAM_KEYS:
            field, convert = PARAM_KEYS[key]
            values[field] = convert(raw)
        elif key == "tchebycheff":
            values["aggregation"] = "tchebycheff" if _parse_bool(raw) else "weighted_sum"
        elif key in QOS_WEIGHT_KEYS:
            qos_weights[QOS_WEIGHT_KEYS.index(key)] = float(raw)
            values["qos_weights"] = tuple(qos_weights)
        elif key in CONFIG_FIELDS:
            values[key] = raw
            if key == "qos_weights":
                qos_weights = list(raw)
        else:
            options = list(PARAM_KEYS) + list(QOS_WEIGHT_KEYS) + list(CONFIG_FIELDS) + ["tchebycheff"]
            hints = suggest_names(key, options)
            suggestion = f"Did you mean: {', '.join(hints)}?" if hints else None
            raise ConfigurationError(f"Invalid parameter: {key}", suggestion)
    return values


def load_moead_config(
    path: str | Path,
    overrides: Mapping[str, Any] | Sequence[str] | None = None,
) -> MOEADConfigData:
    """
    Load a MOEA/D configuration from a parameter, YAML or JSON file.

    Values missing from the file keep the defaults of ``MOEADConfig.default()``.
    ``overrides`` (a mapping, or a flat ``[key, value, key, value, ...]``
    sequence) are applied after the file.
    """
    cfg_path = Path(path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file '{cfg_path}' does not exist.")

    suffix = cfg_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise ImportError("YAML config requested but PyYAML is not installed. Install with 'pip install pyyaml'.") from exc
        with cfg_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        pairs: list[tuple[str, Any]] = list(_require_mapping(data, cfg_path).items())
    elif suffix == ".json":
        with cfg_path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        pairs = list(_require_mapping(data, cfg_path).items())
    else:
        pairs = list(read_params_file(cfg_path))

    values = MOEADConfig.default().to_dict()
    apply_params(values, pairs)
    apply_params(values, _pairs_from_overrides(overrides))
    _logger.info("Loaded MOEA/D configuration from %s", cfg_path)
    return MOEADConfig.from_dict(values)


def _require_mapping(data: Any, path: Path) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Config file '{path}' must contain a mapping at the top level.")
    return data


__all__ = ["PARAM_KEYS", "IGNORED_KEYS", "read_params_file", "apply_params", "load_moead_config"]
