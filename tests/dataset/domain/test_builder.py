"""Tests for dataset construction and the built-in dataset."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from xiaoju_eval.dataset.domain.builder import create_dataset
from xiaoju_eval.dataset.domain.builtin import BUILTIN_DATASETS, xiaoju_basic_dataset
from xiaoju_eval.dataset.domain.dataset import Dataset
from xiaoju_eval.dataset.domain.sample import EvalSample, SampleBody


class TestCreateDataset:
    def test_assigns_ids_from_name_and_position(self) -> None:
        dataset = create_dataset(
            name="demo",
            samples=[SampleBody(input="a"), SampleBody(input="b"), SampleBody(input="c")],
        )

        assert [s.id for s in dataset.samples] == ["demo_0", "demo_1", "demo_2"]

    def test_preserves_order_and_fields(self) -> None:
        dataset = create_dataset(
            name="demo",
            samples=[
                SampleBody(input="first", expected_intent="create", tags=["x"]),
                SampleBody(input="second", context={"nickname": "Ming"}),
            ],
        )

        assert [s.input for s in dataset.samples] == ["first", "second"]
        assert dataset.samples[0].expected_intent == "create"
        assert dataset.samples[0].tags == ["x"]
        assert dataset.samples[1].context == {"nickname": "Ming"}

    def test_accepts_camel_case_mappings(self) -> None:
        dataset = create_dataset(
            name="demo",
            samples=[
                {
                    "input": "帮我组个火锅局",
                    "expectedIntent": "create",
                    "expectedToolCalls": ["createActivityDraft"],
                }
            ],
        )

        sample = dataset.samples[0]
        assert sample.expected_intent == "create"
        assert sample.expected_tool_calls == ["createActivityDraft"]

    def test_sets_metadata(self) -> None:
        before = datetime.now(UTC)

        dataset = create_dataset(name="demo", samples=[], description="hand-built")

        assert dataset.name == "demo"
        assert dataset.description == "hand-built"
        assert dataset.created_at >= before

    def test_empty_input_list_gives_empty_dataset(self) -> None:
        assert create_dataset(name="demo", samples=[]).samples == []

    def test_invalid_mapping_raises(self) -> None:
        with pytest.raises(ValidationError):
            create_dataset(name="demo", samples=[{"expectedIntent": "create"}])


class TestDataset:
    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate sample ids: s_0"):
            Dataset(
                name="demo",
                samples=[EvalSample(id="s_0", input="a"), EvalSample(id="s_0", input="b")],
                created_at=datetime.now(UTC),
            )

    def test_is_frozen(self) -> None:
        dataset = create_dataset(name="demo", samples=[])

        with pytest.raises(ValidationError):
            dataset.name = "other"  # type: ignore[misc]


class TestSampleDefaults:
    def test_optional_fields_default_to_none(self) -> None:
        sample = EvalSample(id="s_0", input="hi")

        assert sample.expected_output is None
        assert sample.expected_intent is None
        assert sample.expected_tool_calls is None
        assert sample.context is None
        assert sample.tags == []

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EvalSample(id="", input="hi")


class TestBuiltinDataset:
    def test_registered_by_name(self) -> None:
        assert BUILTIN_DATASETS["xiaoju_basic"] is xiaoju_basic_dataset

    def test_has_five_samples_with_stable_ids(self) -> None:
        dataset = xiaoju_basic_dataset()

        assert dataset.name == "xiaoju_basic"
        assert [s.id for s in dataset.samples] == [f"xiaoju_basic_{i}" for i in range(5)]

    def test_covers_each_intent(self) -> None:
        intents = [s.expected_intent for s in xiaoju_basic_dataset().samples]

        assert intents == ["create", "explore", "partner", "manage", "chitchat"]

    def test_chitchat_expects_no_tools(self) -> None:
        chitchat = xiaoju_basic_dataset().samples[4]

        assert chitchat.input == "你好"
        assert chitchat.expected_tool_calls == []
