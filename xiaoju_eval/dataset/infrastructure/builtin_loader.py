"""Loader for the datasets shipped with the harness."""

from xiaoju_eval.config.domain.dataset import DatasetConfig
from xiaoju_eval.dataset.domain.builder import create_dataset
from xiaoju_eval.dataset.domain.builtin import BUILTIN_DATASETS
from xiaoju_eval.dataset.domain.dataset import Dataset
from xiaoju_eval.dataset.domain.observer import DatasetObserver
from xiaoju_eval.dataset.infrastructure.errors import DatasetLoadError


class BuiltinDatasetLoader:
    """Satisfies the DatasetLoader protocol for ``dataset.builtin`` configs."""

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer

    def load(self, config: DatasetConfig) -> Dataset:
        source = f"builtin:{config.builtin}"
        self._observer.dataset_loading_started(source=source)

        factory = BUILTIN_DATASETS.get(config.builtin or "")
        if factory is None:
            known = ", ".join(sorted(BUILTIN_DATASETS))
            reason = f"unknown built-in dataset {config.builtin!r} (known: {known})"
            self._observer.dataset_loading_failed(source=source, reason=reason)
            raise DatasetLoadError(reason=reason)

        dataset = factory()
        if config.name is not None:
            # Rebuilt so sample ids follow the new name.
            dataset = create_dataset(
                name=config.name,
                samples=dataset.samples,
                description=dataset.description,
            )
        self._observer.dataset_loading_completed(
            source=source,
            total_samples=len(dataset.samples),
        )
        return dataset
