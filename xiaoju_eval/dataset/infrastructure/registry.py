"""Maps a DatasetConfig to the DatasetLoader that understands it."""

from xiaoju_eval.config.domain.dataset import DatasetConfig
from xiaoju_eval.dataset.domain.loader import DatasetLoader
from xiaoju_eval.dataset.domain.observer import DatasetObserver
from xiaoju_eval.dataset.infrastructure.builtin_loader import BuiltinDatasetLoader
from xiaoju_eval.dataset.infrastructure.jsonl_loader import JsonlDatasetLoader


def create_dataset_loader(
    config: DatasetConfig, observer: DatasetObserver
) -> DatasetLoader:
    """Return the loader for config's source: built-in name or JSONL path."""
    if config.builtin is not None:
        return BuiltinDatasetLoader(observer=observer)
    return JsonlDatasetLoader(observer=observer)
