"""Command line harness for inspecting linear/exponential slider mappings."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "slider_logs" / "latest_table.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from expo_slider import Bounds, InvalidConfiguration, LinearConfig, use_exponential_slider
from expo_slider.logging_config import setup_logging

logger = logging.getLogger("expo_slider.scripts.slider_table")


def _parse_percent(value: str) -> float:
    """Accept `75` or `75%` for the linear share of steps."""

    try:
        percent = float(value.strip().rstrip("%"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected a percentage such as 75 or 75%, received '{value}'."
        ) from exc

    return percent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Map slider steps to model values on a linear/exponential scale"
    )
    parser.add_argument("--steps", type=int, default=1000, help="Number of slider steps")
    parser.add_argument("--min", dest="minimum", type=float, default=0.0, help="Lowest model value")
    parser.add_argument("--max", dest="maximum", type=float, required=True, help="Highest model value")
    parser.add_argument(
        "--max-linear",
        dest="max_linear",
        type=float,
        help="Absolute model value where the linear region ends",
    )
    parser.add_argument(
        "--linear-percent",
        dest="linear_percent",
        type=_parse_percent,
        help="Share of steps (0-100) spent in the linear region",
    )
    parser.add_argument(
        "--step",
        dest="step_values",
        action="append",
        type=float,
        default=[],
        help="Step to convert into a model value (repeatable)",
    )
    parser.add_argument(
        "--model",
        dest="model_values",
        action="append",
        type=float,
        default=[],
        help="Model value to convert into a step (repeatable)",
    )
    parser.add_argument("--table", action="store_true", help="Include the model value for every step")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject malformed configurations instead of clamping through them",
    )
    parser.add_argument("--verbose", action="store_true", help="Log config resolution at DEBUG level")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "slider_logs/latest_table.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    if (args.max_linear is None) != (args.linear_percent is None):
        parser.error("--max-linear and --linear-percent must be given together")

    linear = None
    if args.max_linear is not None:
        linear = LinearConfig(max_linear=args.max_linear, linear_percent=args.linear_percent)

    try:
        slider = use_exponential_slider(
            args.steps,
            Bounds(minimum=args.minimum, maximum=args.maximum),
            linear,
            strict=args.strict,
        )
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    result = {
        "config": slider.config.as_dict(),
        "steps": [
            {"step": step, "model": slider.step_to_model(step)} for step in args.step_values
        ],
        "models": [
            {"model": model, "step": slider.model_to_step(model)} for model in args.model_values
        ],
    }
    if args.table:
        result["table"] = [{"step": step, "model": model} for step, model in slider.table()]

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("Wrote slider report to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
