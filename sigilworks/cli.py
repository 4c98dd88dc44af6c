"""Command line: generate sigils offline or run the HTTP service.

Usage:
  sigilworks generate "I am successful" --paradigm hermetic
  sigilworks generate "I am successful" --svg sigil.svg --features
  sigilworks steps "I am successful"
  sigilworks serve --port 8000
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from sigilworks.engine.config import DEFAULT_CONFIG
from sigilworks.engine.features import extract
from sigilworks.engine.registry import Paradigm
from sigilworks.engine.steps import transformation_steps
from sigilworks.engine.synthesizer import synthesize
from sigilworks.svg.serializer import serialize_svg


def _cmd_generate(args: argparse.Namespace) -> int:
    features = extract(args.statement)
    path_data = synthesize(features, args.paradigm)

    if args.svg:
        svg = serialize_svg(path_data, canvas_size=DEFAULT_CONFIG.canvas_size, title=args.statement)
        Path(args.svg).write_text(svg, encoding="utf-8")
        print(f"Wrote {args.svg}")
    else:
        print(path_data)

    if args.features:
        print(json.dumps(features.to_dict(), indent=2))
    return 0


def _cmd_steps(args: argparse.Namespace) -> int:
    for i, step in enumerate(transformation_steps(args.statement, args.paradigm), start=1):
        print(f"{i}. {step.label}: {step.content}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("sigilworks.main:app", host=args.host, port=args.port, reload=False, log_level="info")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sigilworks", description="Statement-to-sigil generator")
    sub = parser.add_subparsers(dest="command", required=True)

    paradigms = [p.value for p in Paradigm]

    gen = sub.add_parser("generate", help="Print path data for a statement")
    gen.add_argument("statement")
    gen.add_argument("--paradigm", choices=paradigms, default=Paradigm.CHAOS.value)
    gen.add_argument("--svg", help="Write a standalone SVG document instead of printing path data")
    gen.add_argument("--features", action="store_true", help="Also print the feature set as JSON")
    gen.set_defaults(func=_cmd_generate)

    steps = sub.add_parser("steps", help="Show the transformation steps for a statement")
    steps.add_argument("statement")
    steps.add_argument("--paradigm", choices=paradigms, default=Paradigm.CHAOS.value)
    steps.set_defaults(func=_cmd_steps)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if getattr(args, "statement", None) is not None and not args.statement.strip():
        print("error: no statement supplied", file=sys.stderr)
        return 2
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
