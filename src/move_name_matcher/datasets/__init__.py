"""
datasets.

Bundled creature/move catalogs and the loaders that read them.
"""

from __future__ import annotations

from .loader import (
    Dataset,
    DatasetFileNotFound,
    EmptyRegistryError,
    UnknownDatasetError,
    dataset_names,
    default_dataset_name,
    load_dataset,
    load_datasets,
    load_exemptions,
    load_lines,
    parse_lines,
)

__all__ = [
    "Dataset",
    "DatasetFileNotFound",
    "EmptyRegistryError",
    "UnknownDatasetError",
    "dataset_names",
    "default_dataset_name",
    "load_dataset",
    "load_datasets",
    "load_exemptions",
    "load_lines",
    "parse_lines",
]
