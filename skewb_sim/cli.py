"""CLI entrypoint for the Skewb simulator."""

from __future__ import annotations

import argparse
import json

from .actions import DEFAULT_COLORS
from .engine import Skewb
from .generator import add_generation_arguments, run_generation
from .notation import reverse_moves
from .state_codec import SkewbError, payload_to_stickers

COMPARE_MODES = ("exact", "equal", "full-mirror", "one-layer")


def _build_state(colors: list[str] | None, state_json: str | None, moves: str, notation: str) -> Skewb:
    if state_json:
        skewb = Skewb.from_stickers(payload_to_stickers(json.loads(state_json)))
    else:
        skewb = Skewb(*(colors or DEFAULT_COLORS))
    if moves:
        skewb.apply_moves(moves, notation=notation)
    return skewb


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Skewb simulator")
    sub = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--notation", choices=["wca", "rubiskewb"], default="wca")
    common.add_argument(
        "--colors",
        nargs=6,
        metavar=("UP", "FRONT", "RIGHT", "BACK", "LEFT", "DOWN"),
        default=None,
    )
    common.add_argument("--state-json", type=str, default=None)

    apply = sub.add_parser("apply", parents=[common], help="Apply moves and print the state as JSON")
    apply.add_argument("moves", nargs="?", default="")

    draw = sub.add_parser("draw", parents=[common], help="Apply moves and render the state to a PNG")
    draw.add_argument("moves", nargs="?", default="")
    draw.add_argument("--output", default="skewb")

    reverse = sub.add_parser("reverse", help="Print the sequence undoing the given moves")
    reverse.add_argument("moves")

    compare = sub.add_parser("compare", parents=[common], help="Compare the states reached by two sequences")
    compare.add_argument("first")
    compare.add_argument("second")
    compare.add_argument("--how", choices=COMPARE_MODES, default="equal")
    compare.add_argument("--layer-color", default=None)

    generate = sub.add_parser("generate", help="Enumerate canonical premoves and solve moves into a zip")
    add_generation_arguments(generate)

    return parser


def run(args: argparse.Namespace) -> dict:
    if args.mode == "reverse":
        return {"reverse": reverse_moves(args.moves)}

    if args.mode == "generate":
        out = run_generation(args)
        return {"archive": str(out["archive"])}

    if args.mode in ("apply", "draw"):
        skewb = _build_state(args.colors, args.state_json, args.moves, args.notation)
        if args.mode == "draw":
            return {"path": str(skewb.draw(args.output))}
        return skewb.state_payload()

    if args.mode == "compare":
        first = _build_state(args.colors, args.state_json, args.first, args.notation)
        second = _build_state(args.colors, args.state_json, args.second, args.notation)
        if args.how == "exact":
            result = first.exact_equal(second)
        elif args.how == "equal":
            result = first.equal(second)
        elif args.how == "full-mirror":
            result = first.full_mirror(second)
        else:
            if args.layer_color is None:
                raise SkewbError("--layer-color is required with --how one-layer")
            result = first.one_layer_mirror(second, args.layer_color)
        return {"how": args.how, "result": result}

    raise ValueError(f"Unsupported mode: {args.mode}")


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        out = run(args)
    except ValueError as exc:
        parser.error(str(exc))
    print(json.dumps(out, indent=2), flush=True)


if __name__ == "__main__":
    main()
