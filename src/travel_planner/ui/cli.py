"""CLI entry point for the travel planner."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from travel_planner.adapters.io.exports import serialize_destination, serialize_recommendation
from travel_planner.adapters.storage.repositories import read_json, write_json
from travel_planner.api.schemas import parse_profile
from travel_planner.core.config import resolve_log_level
from travel_planner.core.errors import ValidationError
from travel_planner.core.normalization import build_meta
from travel_planner.pipeline.orchestrator import Orchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Travel Planner CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan = subparsers.add_parser("plan", help="Rank destinations for a traveler profile JSON file")
    plan.add_argument("--profile", type=str, required=True, help="Path to the traveler profile JSON")
    plan.add_argument("--output", type=str, default=None, help="Output JSON path (default: stdout)")

    subparsers.add_parser("destinations", help="List the destination catalog")

    serve = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Bind host")
    serve.add_argument("--port", type=int, default=8000, help="Bind port")
    return parser


def _emit(payload: object, output: Optional[str]) -> int:
    if output:
        try:
            write_json(Path(output), payload)
        except OSError as exc:
            print(f"could not write output: {exc}", file=sys.stderr)
            return 1
        return 0
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


def _run_plan(args: argparse.Namespace) -> int:
    try:
        profile = parse_profile(read_json(Path(args.profile)))
    except (OSError, ValueError) as exc:
        print(f"could not read profile: {exc}", file=sys.stderr)
        return 2
    except ValidationError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    result = Orchestrator().run(profile)
    payload = serialize_recommendation(result)
    payload["meta"] = build_meta()
    return _emit(payload, args.output)


def _run_destinations() -> int:
    catalog = Orchestrator().catalog
    return _emit({"items": [serialize_destination(d) for d in catalog]}, None)


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("travel_planner.api.app:app", host=args.host, port=args.port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else resolve_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "plan":
        return _run_plan(args)
    if args.command == "destinations":
        return _run_destinations()
    return _run_serve(args)


if __name__ == "__main__":
    raise SystemExit(main())
