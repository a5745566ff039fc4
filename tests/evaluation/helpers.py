"""Builders shared by the evaluation tests."""

from xiaoju_eval.dataset.domain.builder import create_dataset
from xiaoju_eval.dataset.domain.dataset import Dataset
from xiaoju_eval.dataset.domain.sample import EvalSample, SampleBody
from xiaoju_eval.evaluation.domain.result import EvalResult


def make_dataset(count: int, name: str = "test") -> Dataset:
    return create_dataset(
        name=name,
        samples=[
            SampleBody(
                input=f"question {i}",
                expected_intent="create",
                expected_tool_calls=["createActivityDraft"],
            )
            for i in range(count)
        ],
    )


def make_sample(**fields: object) -> EvalSample:
    return EvalSample.model_validate({"id": "test_0", "input": "帮我组个火锅局", **fields})


def make_result(
    sample_id: str = "test_0",
    scores: dict[str, float] | None = None,
    passed: bool = True,
    error: str | None = None,
) -> EvalResult:
    return EvalResult(
        sample_id=sample_id,
        actual_output="" if error else "ok",
        scores=scores or {},
        passed=passed,
        duration_ms=1,
        error=error,
    )
