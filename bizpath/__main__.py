"""Main entry point for bizpath."""

import argparse
import json
import sys
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from bizpath import __version__
from bizpath.config.settings import Settings
from bizpath.utils.logging import configure_logging, get_logger


def _limit(value: str) -> int:
    limit = int(value)
    if limit < 1:
        raise argparse.ArgumentTypeError("--limit must be at least 1")
    return limit


def _timestamp_run_id(prefix: str) -> str:
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}"


def _resolve_run_dir(
    settings: Settings, *, prefix: str, out_run_dir: Path | None
) -> Path:
    if out_run_dir is not None:
        run_dir = out_run_dir
    else:
        run_dir = settings.output_dir / "runs" / _timestamp_run_id(prefix)
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def _write_json(path: Path, payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    path.write_text(
        json.dumps(payload, indent=2, default=_default),
        encoding="utf-8",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bizpath",
        description="bizpath: rank business paths against quiz responses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m bizpath rank responses/response.yaml
  python -m bizpath explain responses/response.yaml freelancing
  python -m bizpath top responses/response.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    rank_parser = subparsers.add_parser(
        "rank",
        help="Rank every business path for a quiz response",
    )
    rank_parser.add_argument(
        "response",
        type=Path,
        nargs="?",
        default=None,
        help="Path to quiz response (YAML or JSON); defaults to SCORING_RESPONSE_PATH",
    )
    rank_parser.add_argument(
        "--limit",
        type=_limit,
        default=None,
        help="Only show the first N paths",
    )
    rank_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the ranking as JSON",
    )
    rank_parser.add_argument(
        "--save",
        action="store_true",
        help="Also write ranking.json to a run directory",
    )
    rank_parser.add_argument(
        "--out-run-dir",
        type=Path,
        default=None,
        help="Optional output run directory (defaults under artifacts/runs/)",
    )

    score_parser = subparsers.add_parser(
        "score",
        help="Print the fit score of one business path",
    )
    score_parser.add_argument(
        "response",
        type=Path,
        help="Path to quiz response (YAML or JSON)",
    )
    score_parser.add_argument("path_id", help="Business path id, e.g. freelancing")

    explain_parser = subparsers.add_parser(
        "explain",
        help="Show which rules produced a path's fit score",
    )
    explain_parser.add_argument(
        "response",
        type=Path,
        help="Path to quiz response (YAML or JSON)",
    )
    explain_parser.add_argument("path_id", help="Business path id, e.g. freelancing")

    top_parser = subparsers.add_parser(
        "top",
        help="Show the best-matching paths (count from SCORING_TOP_PATHS)",
    )
    top_parser.add_argument(
        "response",
        type=Path,
        nargs="?",
        default=None,
        help="Path to quiz response (YAML or JSON); defaults to SCORING_RESPONSE_PATH",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    configure_logging(level=log_level)
    logger = get_logger("cli")

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.debug("bizpath v%s running %s", __version__, parsed.mode)

    from bizpath.catalog.paths import get_business_path
    from bizpath.scoring.responses import ResponseService
    from bizpath.scoring.service import FitScoringService

    response_service = ResponseService()
    try:
        response = response_service.load_response(parsed.response)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error("Could not load quiz response: %s", e)
        return 1

    for warning in response_service.validate_response(response):
        logger.info(warning)

    scoring_service = FitScoringService()

    if parsed.mode in {"score", "explain"}:
        try:
            get_business_path(parsed.path_id)
        except KeyError as e:
            logger.error("%s", e.args[0])
            return 1

        if parsed.mode == "score":
            print(scoring_service.score(parsed.path_id, response))
        else:
            breakdown = scoring_service.explain(parsed.path_id, response)
            print(scoring_service.format_breakdown(breakdown))
        return 0

    if parsed.mode == "rank":
        ranked = scoring_service.rank(response, limit=parsed.limit)
        payload = [path.to_dict() for path in ranked]

        if parsed.json:
            print(json.dumps(payload, indent=2))
        else:
            print(scoring_service.format_ranking(ranked))

        if parsed.save or parsed.out_run_dir is not None:
            run_dir = _resolve_run_dir(
                settings, prefix="rank", out_run_dir=parsed.out_run_dir
            )
            _write_json(
                run_dir / "ranking.json",
                {"response": response.to_dict(), "ranking": payload},
            )
            print(f"Wrote: {run_dir / 'ranking.json'}", file=sys.stderr)
        return 0

    if parsed.mode == "top":
        print(scoring_service.format_ranking(scoring_service.top_paths(response)))
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
