"""DatasetLoader Protocol — structural interface for loading datasets."""

from typing import Protocol

from xiaoju_eval.config.domain.dataset import DatasetConfig
from xiaoju_eval.dataset.domain.dataset import Dataset


class DatasetLoader(Protocol):
    """Loads a Dataset described by DatasetConfig."""

    def load(self, config: DatasetConfig) -> Dataset: ...
