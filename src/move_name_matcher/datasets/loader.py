# src/move_name_matcher/datasets/loader.py
from __future__ import annotations

"""
loader.py

Does: Supply named datasets to the matcher: newline-delimited creature/move lists
      registered in <data>/datasets.json, plus the exemption set in exemptions.json.
Returns: parse_lines/load_lines for raw files, load_dataset/load_datasets for the
         registry, load_exemptions for the configured exemption set.
Used by: The CLI and any caller that needs the bundled catalogs.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from rapidfuzz import process, utils as rf_utils

from move_name_matcher.matching.selection import validate_names
from move_name_matcher.utils.load_config import load_config, resolve_data_dir

__all__ = [
    "Dataset",
    "DatasetFileNotFound",
    "EmptyRegistryError",
    "UnknownDatasetError",
    "parse_lines",
    "load_lines",
    "dataset_names",
    "default_dataset_name",
    "load_dataset",
    "load_datasets",
    "load_exemptions",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

REGISTRY_FILE = "datasets"
EXEMPTIONS_FILE = "exemptions"
SUGGEST_CUTOFF = 60  # rapidfuzz WRatio floor for "did you mean"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DatasetFileNotFound(FileNotFoundError):
    """Raise when a registered creature/move list cannot be read."""


class EmptyRegistryError(LookupError):
    """Raise when datasets.json registers no dataset at all."""


class UnknownDatasetError(KeyError):
    """Raise when a dataset name is not in the registry."""

    def __init__(self, name: str, suggestion: Optional[str] = None):
        self.name = name
        self.suggestion = suggestion
        msg = f"Unknown dataset {name!r}"
        if suggestion:
            msg += f"; did you mean {suggestion!r}?"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


@dataclass(frozen=True)
class Dataset:
    name: str
    creatures: Tuple[str, ...]
    moves: Tuple[str, ...]


# ─────────────────────────────────────────────────────────────────────────────
# Raw text files
# ─────────────────────────────────────────────────────────────────────────────

def parse_lines(text: str) -> list[str]:
    """Does: Split on newlines, trim each entry, drop blanks, keep order."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def load_lines(path: str | os.PathLike[str], encoding: str = "utf-8") -> list[str]:
    """Does: Read a newline-delimited list from disk (see parse_lines)."""
    p = Path(path)
    try:
        text = p.read_text(encoding=encoding)
    except OSError as e:
        raise DatasetFileNotFound(f"Failed to load {p}: {e}") from e
    return parse_lines(text)


# ─────────────────────────────────────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────────────────────────────────────

def _validate_registry(data: Dict[str, Any]) -> Dict[str, Dict[str, str]]:
    """Does: Check every entry names a 'creatures' and a 'moves' file."""
    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise TypeError(f"dataset {name!r} must be an object")
        for key in ("creatures", "moves"):
            if not isinstance(entry.get(key), str) or not entry[key]:
                raise ValueError(f"dataset {name!r} is missing {key!r}")
    return data


def _registry(base_dir: Optional[Path]) -> Dict[str, Dict[str, str]]:
    return load_config(
        REGISTRY_FILE,
        mode="validated_dict",
        base_dir=base_dir,
        validator=_validate_registry,
    )


def _suggest(name: str, choices: list[str]) -> Optional[str]:
    hit = process.extractOne(
        name, choices, processor=rf_utils.default_process, score_cutoff=SUGGEST_CUTOFF
    )
    return hit[0] if hit else None


def dataset_names(*, base_dir: Optional[Path] = None) -> list[str]:
    """Does: Registered dataset names, in registry order."""
    return list(_registry(base_dir))


def default_dataset_name(*, base_dir: Optional[Path] = None) -> str:
    """Does: First registered dataset name; raises EmptyRegistryError if there is none."""
    names = dataset_names(base_dir=base_dir)
    if not names:
        raise EmptyRegistryError(f"No datasets registered in {REGISTRY_FILE}.json")
    return names[0]


def _data_file(data_dir: Path, file_name: str) -> Path:
    """Does: Resolve a registered file name, refusing paths outside data_dir."""
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise DatasetFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    return path


def load_dataset(name: str, *, base_dir: Optional[Path] = None) -> Dataset:
    """
    Does: Load and validate one registered dataset.
    Returns: Dataset with creatures/moves in file order.
    Raises: UnknownDatasetError, DatasetFileNotFound, InvalidInputError.
    """
    registry = _registry(base_dir)
    entry = registry.get(name)
    if entry is None:
        raise UnknownDatasetError(name, _suggest(name, list(registry)))

    data_dir = resolve_data_dir(base_dir)
    creatures = validate_names(load_lines(_data_file(data_dir, entry["creatures"])), "creature")
    moves = validate_names(load_lines(_data_file(data_dir, entry["moves"])), "move")
    log.debug(
        "Loaded dataset %s: %d creatures, %d moves", name, len(creatures), len(moves)
    )
    return Dataset(name, tuple(creatures), tuple(moves))


def load_datasets(*, base_dir: Optional[Path] = None) -> Dict[str, Dataset]:
    """Does: Load every registered dataset, keyed by name."""
    return {name: load_dataset(name, base_dir=base_dir) for name in dataset_names(base_dir=base_dir)}


def load_exemptions(*, base_dir: Optional[Path] = None) -> frozenset[str]:
    """Does: Load the configured exemption set (moves disfavored as a sole answer)."""
    return load_config(EXEMPTIONS_FILE, mode="set", base_dir=base_dir)
