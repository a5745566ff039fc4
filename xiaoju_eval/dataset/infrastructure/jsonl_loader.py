"""JSONL dataset loader — reads one sample body per line and builds a Dataset."""

import json
from pathlib import Path

from pydantic import ValidationError

from xiaoju_eval.config.domain.dataset import DatasetConfig
from xiaoju_eval.dataset.domain.builder import create_dataset
from xiaoju_eval.dataset.domain.dataset import Dataset
from xiaoju_eval.dataset.domain.observer import DatasetObserver
from xiaoju_eval.dataset.domain.sample import SampleBody
from xiaoju_eval.dataset.infrastructure.errors import DatasetLoadError


class JsonlDatasetLoader:
    """Loads a JSONL file of sample bodies and returns a Dataset."""

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer

    def load(self, config: DatasetConfig) -> Dataset:
        """
        Load every sample body from the JSONL file described by config.

        The dataset is named after config.name, or the file stem when unset.
        Collects ALL per-line errors before raising a single DatasetLoadError.

        Raises:
            DatasetLoadError: if config has no path, the file is missing or
                not UTF-8 text, or any line is invalid JSON or not a valid
                sample body.
        """
        if config.path is None:
            raise DatasetLoadError(reason="no dataset path configured")
        source = str(config.path)
        self._observer.dataset_loading_started(source=source)

        try:
            lines = self._read_lines(path=config.path)
        except FileNotFoundError:
            reason = f"file not found: {source}"
            self._observer.dataset_loading_failed(source=source, reason=reason)
            raise DatasetLoadError(reason=reason)
        except UnicodeDecodeError as exc:
            reason = f"file is not valid UTF-8: {exc}"
            self._observer.dataset_loading_failed(source=source, reason=reason)
            raise DatasetLoadError(reason=reason) from exc
        except OSError as exc:
            reason = f"cannot read {source}: {exc}"
            self._observer.dataset_loading_failed(source=source, reason=reason)
            raise DatasetLoadError(reason=reason) from exc

        bodies, errors = self._parse_lines(lines=lines)
        if errors:
            reason = "; ".join(errors)
            self._observer.dataset_loading_failed(source=source, reason=reason)
            raise DatasetLoadError(reason=reason)

        dataset = create_dataset(
            name=config.name or config.path.stem,
            samples=bodies,
            description=f"Loaded from {source}",
        )
        for sample in dataset.samples:
            self._observer.dataset_sample_loaded(sample_id=sample.id)

        self._observer.dataset_loading_completed(
            source=source,
            total_samples=len(dataset.samples),
        )
        return dataset

    def _read_lines(self, path: Path) -> list[tuple[int, str]]:
        """Return (line_number, text) for every non-blank line, 1-based."""
        with open(path, encoding="utf-8") as fh:
            return [
                (number, line)
                for number, line in enumerate(fh, start=1)
                if line.strip()
            ]

    def _parse_lines(
        self, lines: list[tuple[int, str]]
    ) -> tuple[list[SampleBody], list[str]]:
        """Parse each line into a SampleBody, collecting errors without aborting early."""
        bodies: list[SampleBody] = []
        errors: list[str] = []

        for number, line in lines:
            result = self._parse_line(line=line, number=number)
            if isinstance(result, str):
                errors.append(result)
            else:
                bodies.append(result)

        return bodies, errors

    def _parse_line(self, line: str, number: int) -> SampleBody | str:
        """
        Parse a single JSONL line into a SampleBody.

        Returns a SampleBody on success, or an error string describing the problem.
        """
        try:
            data = json.loads(line.strip())
        except json.JSONDecodeError as exc:
            return f"line {number}: invalid JSON: {exc}"

        if not isinstance(data, dict):
            return f"line {number}: expected a JSON object"

        try:
            return SampleBody.model_validate(data)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) or "<root>"
                for err in exc.errors()
            )
            return f"line {number}: invalid sample ({fields})"
