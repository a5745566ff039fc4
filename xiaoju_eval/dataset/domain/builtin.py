"""Built-in datasets shipped with the harness."""

from collections.abc import Callable

from xiaoju_eval.dataset.domain.builder import create_dataset
from xiaoju_eval.dataset.domain.dataset import Dataset
from xiaoju_eval.dataset.domain.sample import SampleBody


def xiaoju_basic_dataset() -> Dataset:
    """One sample per top-level intent of the Xiaoju assistant."""
    return create_dataset(
        name="xiaoju_basic",
        description="Smoke set covering every top-level intent",
        samples=[
            SampleBody(
                input="帮我组个火锅局",
                expected_intent="create",
                expected_tool_calls=["createActivityDraft"],
                tags=["create", "food"],
            ),
            SampleBody(
                input="附近有什么活动",
                expected_intent="explore",
                expected_tool_calls=["exploreNearby"],
                tags=["explore"],
            ),
            SampleBody(
                input="我想找人一起打羽毛球",
                expected_intent="partner",
                expected_tool_calls=["createPartnerIntent"],
                tags=["partner", "sports"],
            ),
            SampleBody(
                input="取消我的活动",
                expected_intent="manage",
                expected_tool_calls=["getMyActivities"],
                tags=["manage"],
            ),
            SampleBody(
                input="你好",
                expected_intent="chitchat",
                expected_tool_calls=[],
                tags=["chitchat"],
            ),
        ],
    )


BUILTIN_DATASETS: dict[str, Callable[[], Dataset]] = {
    "xiaoju_basic": xiaoju_basic_dataset,
}
