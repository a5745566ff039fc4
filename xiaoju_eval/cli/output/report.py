"""Human-readable and JSON renderings of an EvalRunResult."""

from typing import Any

from xiaoju_eval.evaluation.domain.result import PASS_THRESHOLD
from xiaoju_eval.evaluation.domain.summary import EvalRunResult

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"

_RULE_WIDTH = 40


def _paint(text: str, *styles: str, color: bool) -> str:
    if not color:
        return text
    return f"{''.join(styles)}{text}{_RESET}"


def _score_style(score: float) -> str:
    if score >= 0.8:
        return _GREEN
    if score >= PASS_THRESHOLD:
        return _YELLOW
    return _RED


def _percent(numerator: int, denominator: int) -> str:
    if denominator == 0:
        return "0.0%"
    return f"{numerator / denominator * 100:.1f}%"


def format_report(result: EvalRunResult, color: bool = False) -> str:
    """Render a run summary as text.

    Failed (bad answer) and errored (no answer) counts are listed separately.
    Pure: returns the text and never prints.
    """
    rule = _paint("=" * _RULE_WIDTH, _CYAN, color=color)
    label_w = 10

    def row(label: str, value: str) -> str:
        return f"{_paint(f'{label:<{label_w}}', _DIM, color=color)}{value}"

    lines = [
        rule,
        _paint("Evaluation report", _BOLD, _CYAN, color=color),
        rule,
        row("Run ID", result.run_id),
        row("Dataset", result.dataset_name),
        row("Elapsed", f"{result.elapsed_ms}ms"),
        "",
        row("Total", str(result.total_samples)),
        row(
            "Passed",
            _paint(
                f"{result.passed_count} "
                f"({_percent(result.passed_count, result.total_samples)})",
                _GREEN,
                color=color,
            ),
        ),
        row("Failed", _paint(str(result.failed_count), _YELLOW, color=color)),
        row("Errored", _paint(str(result.error_count), _RED, color=color)),
        "",
        "Average scores:",
    ]

    if not result.average_scores:
        lines.append(_paint("  (no scored samples)", _DIM, color=color))
    else:
        name_w = max(len(name) for name in result.average_scores)
        for name, score in result.average_scores.items():
            value = _paint(f"{score * 100:.1f}%", _score_style(score), color=color)
            lines.append(f"  {name:<{name_w}}  {value}")

    lines.append(rule)
    return "\n".join(lines)


def build_report_json(result: EvalRunResult) -> dict[str, Any]:
    """Return a JSON-serialisable view of result, with derived totals added."""
    data = result.model_dump(mode="json")
    data["elapsed_ms"] = result.elapsed_ms
    data["pass_rate"] = result.pass_rate
    return data
