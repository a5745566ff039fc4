"""CLI entrypoint for xiaoju-eval — typer app with `run` and `scorers` commands."""

import asyncio
import json
import sys
from pathlib import Path

import structlog
import typer

from xiaoju_eval.cli.output.report import build_report_json, format_report
from xiaoju_eval.config.domain.config import HarnessConfig
from xiaoju_eval.config.infrastructure.observer import StructlogConfigObserver
from xiaoju_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from xiaoju_eval.core.errors import XiaojuEvalError
from xiaoju_eval.dataset.infrastructure.observer import StructlogDatasetObserver
from xiaoju_eval.dataset.infrastructure.registry import create_dataset_loader
from xiaoju_eval.evaluation.application.runner import run_eval
from xiaoju_eval.evaluation.domain.observer import EvaluationObserver
from xiaoju_eval.evaluation.domain.run_config import EvalRunConfig
from xiaoju_eval.evaluation.domain.summary import EvalRunResult
from xiaoju_eval.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from xiaoju_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from xiaoju_eval.evaluation.infrastructure.progress_observer import (
    ProgressEvaluationObserver,
)
from xiaoju_eval.execution.infrastructure.importer import load_executor
from xiaoju_eval.scoring.domain.registry import (
    all_scorers,
    default_scorers,
    get_scorer_names,
    resolve_scorers,
)

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog to write to stderr in the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        sys.exit(1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _build_run_config(config: HarnessConfig) -> EvalRunConfig:
    """Resolve the dataset and scorers named by config into an EvalRunConfig."""
    dataset_loader = create_dataset_loader(
        config=config.dataset,
        observer=StructlogDatasetObserver(),
    )
    dataset = dataset_loader.load(config=config.dataset)
    scorers = (
        resolve_scorers(config.scorers) if config.scorers else default_scorers()
    )
    return EvalRunConfig(
        dataset=dataset,
        scorers=scorers,
        concurrency=config.execution.concurrency,
        timeout_ms=config.execution.timeout_ms,
    )


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to run config YAML"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the full run result as JSON instead of the text report",
    ),
) -> None:
    """Run one evaluation described by a YAML config file."""
    _configure_structlog(log_format=log_format)
    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )
        run_config = _build_run_config(config=config)
        executor = load_executor(config.executor.target)

        observers: list[EvaluationObserver] = [StructlogEvaluationObserver()]
        if log_format != "json" and not as_json:
            observers.append(ProgressEvaluationObserver())

        result: EvalRunResult = asyncio.run(
            run_eval(
                config=run_config,
                executor=executor,
                observer=CompositeEvaluationObserver(observers=observers),
            )
        )
    except KeyboardInterrupt:
        typer.echo("Evaluation interrupted.", err=True)
        sys.exit(1)
    except XiaojuEvalError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)

    if as_json:
        typer.echo(json.dumps(build_report_json(result), indent=2, ensure_ascii=False))
    else:
        typer.echo(format_report(result, color=sys.stdout.isatty()))


@app.command()
def scorers() -> None:
    """List every available scorer; '*' marks the default set."""
    defaults = set(get_scorer_names())
    known = all_scorers()
    name_w = max(len(s.name) for s in known)
    for scorer in known:
        marker = "*" if scorer.name in defaults else " "
        typer.echo(
            f"{marker} {scorer.name:<{name_w}}  weight={scorer.weight:<4}"
            f"  {scorer.description}"
        )


if __name__ == "__main__":
    app()
