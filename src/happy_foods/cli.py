"""Command line entrypoint: analyze a food or score a nutrient map."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Callable, Sequence

import httpx

from happy_foods.app_logging import configure_logging
from happy_foods.containers import AppContainer, build_container
from happy_foods.domain.errors import EmptyQueryError, ProductNotFoundError
from happy_foods.services.neurochemistry import predict_neurochemistry

_logger = logging.getLogger(__name__)

_EPILOG = """examples:
  happy-foods analyze "matcha latte"
  happy-foods analyze dark chocolate
  happy-foods predict '{"protein_g": 20}'
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the happy-foods command."""
    parser = argparse.ArgumentParser(
        prog="happy-foods",
        description="Estimate how a food may support mood-related neurotransmitters.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser(
        "analyze", help="Look up a food and predict its neurochemistry profile"
    )
    analyze.add_argument(
        "query", nargs="+", help="Food to analyze, e.g. 'chicken salad'"
    )

    predict = subparsers.add_parser(
        "predict", help="Predict a neurochemistry profile from nutrient JSON"
    )
    predict.add_argument(
        "nutrients", type=_json_object, help='Nutrient JSON, e.g. \'{"protein_g": 20}\''
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    container_factory: Callable[[], AppContainer] = build_container,
) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)

    if args.command == "predict":
        configure_logging(logging.WARNING)
        profile = predict_neurochemistry(args.nutrients)
        _print_json(profile.as_dict())
        return 0

    query = " ".join(args.query)
    container = container_factory()
    configure_logging(logging.INFO if container.settings.debug else logging.WARNING)
    try:
        payload = asyncio.run(_analyze(container, query))
    except EmptyQueryError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except ProductNotFoundError as exc:
        print(f"{exc}: {exc.query}", file=sys.stderr)
        return 1
    except (httpx.HTTPError, json.JSONDecodeError) as exc:
        _logger.exception("Open Food Facts request failed")
        print(f"Failed to analyze meal: {exc}", file=sys.stderr)
        return 1
    _print_json(payload)
    return 0


async def _analyze(container: AppContainer, query: str) -> dict[str, object]:
    service = container.meal_analysis_service
    try:
        analysis = await service.analyze(query)
    finally:
        await container.close_resources()
    profile = service.predict(analysis.nutrients)
    return {"analysis": analysis.as_dict(), "profile": profile.as_dict()}


def _json_object(raw: str) -> dict[str, object]:
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError("invalid JSON for nutrients") from exc
    if not isinstance(value, dict):
        raise argparse.ArgumentTypeError("nutrients must be a JSON object")
    return value


def _print_json(payload: dict[str, object]) -> None:
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    sys.exit(main())
