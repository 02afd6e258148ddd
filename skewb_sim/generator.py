"""Enumeration of canonical premove and solve-move sequences, written to a zip archive."""

from __future__ import annotations

import argparse
import json
import time
import zipfile
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Any

import yaml
from tqdm import tqdm

from .actions import ROTATION_NAMES
from .engine import Skewb
from .equivalence import canonical_key
from .notation import join_moves, same_layer

PREMOVE_TOKENS = ROTATION_NAMES
SOLVE_MOVES = ("F", "F'", "f", "f'", "R", "R'", "r", "r'", "b", "b'")

PREMOVES_FILE = "allPreMoves.json"
SOLVE_MOVES_FILE = "allSolveMoves.json"

DEFAULTS = {
    "premove_depth": 3,
    "solve_depth": 8,
    "solve_moves": list(SOLVE_MOVES),
    "workers": 1,
    "chunk_size": 256,
    "output": "algorithms/moves.zip",
    "progress": "on",
}


def load_config(path: str | Path) -> dict:
    """Load YAML config. Returns a dict of generation settings."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _state_after(sequence: str) -> Skewb:
    skewb = Skewb()
    skewb.apply_rubiskewb_moves(sequence)
    return skewb


def _children(parent: str, tokens) -> list[str]:
    return [join_moves([parent, token]) for token in tokens if not same_layer(parent, token)]


def generate_premoves(max_depth: int = 3) -> list[str]:
    """Whole-puzzle rotation sequences, one per distinct orientation, shortest first.

    Consecutive tokens never share an axis. Starts with the empty sequence.
    """
    premoves = [""]
    seen = {tuple(Skewb().get_stickers())}
    frontier = [""]

    for _depth in range(1, max_depth + 1):
        next_frontier: list[str] = []
        for parent in frontier:
            for sequence in _children(parent, PREMOVE_TOKENS):
                key = tuple(_state_after(sequence).get_stickers())
                if key in seen:
                    continue
                seen.add(key)
                premoves.append(sequence)
                next_frontier.append(sequence)
        frontier = next_frontier

    return premoves


def _expand_chunk(task: dict) -> list[tuple[str, tuple]]:
    """Extend each parent sequence by every allowed move; return (sequence, canonical key) pairs."""
    out: list[tuple[str, tuple]] = []
    for parent in task["parents"]:
        base = _state_after(parent)
        for token in task["moves"]:
            if same_layer(parent, token):
                continue
            child = base.copy()
            child.apply_rubiskewb_moves(token)
            out.append((join_moves([parent, token]), canonical_key(child)))
    return out


def _chunked(items: list[str], size: int) -> list[list[str]]:
    return [items[i : i + size] for i in range(0, len(items), size)]


def generate_solve_moves(
    max_depth: int = 8,
    moves=SOLVE_MOVES,
    workers: int = 1,
    chunk_size: int = 256,
    progress: bool = False,
) -> dict[int, list[str]]:
    """Breadth-first enumeration of move sequences distinct up to whole-puzzle rotation.

    Depth ``d`` extends every sequence accepted at depth ``d - 1`` by each move
    on a different layer than its last token. A child is accepted when no state
    reachable at a shallower depth, nor an earlier child at this depth, is a
    rotation of it. Depth 0 holds the empty sequence, so sequences that only
    rotate the solved puzzle are never accepted.
    """
    moves = list(moves)
    seen = {canonical_key(Skewb())}
    result: dict[int, list[str]] = {0: [""]}
    frontier = [""]

    pool = ProcessPoolExecutor(max_workers=workers) if workers > 1 else None
    try:
        for depth in range(1, max_depth + 1):
            t0 = time.perf_counter()
            tasks = [{"parents": chunk, "moves": moves} for chunk in _chunked(frontier, max(1, chunk_size))]
            batches = pool.map(_expand_chunk, tasks) if pool is not None else map(_expand_chunk, tasks)
            if progress:
                batches = tqdm(batches, total=len(tasks), desc=f"depth={depth}", unit="chunk", mininterval=1.0, leave=False)

            accepted: list[str] = []
            for batch in batches:
                for sequence, key in batch:
                    if key in seen:
                        continue
                    seen.add(key)
                    accepted.append(sequence)

            result[depth] = accepted
            frontier = accepted
            if progress:
                print(
                    f"solve_depth_done depth={depth} count={len(accepted)} "
                    f"elapsed_sec={time.perf_counter() - t0:.2f}",
                    flush=True,
                )
    finally:
        if pool is not None:
            pool.shutdown()

    return result


def write_archive(path: str | Path, premoves: list[str], solve_moves: dict[int, list[str]]) -> Path:
    """Write ``allPreMoves.json`` (array) and ``allSolveMoves.json`` (depth -> array) into a zip."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    by_depth = {str(depth): list(solve_moves[depth]) for depth in sorted(solve_moves)}
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(PREMOVES_FILE, json.dumps(premoves, indent="\t"))
        archive.writestr(SOLVE_MOVES_FILE, json.dumps(by_depth, indent="\t"))
    return path


def load_archive(path: str | Path) -> tuple[list[str], dict[int, list[str]]]:
    with zipfile.ZipFile(path, "r") as archive:
        premoves = json.loads(archive.read(PREMOVES_FILE).decode("utf-8"))
        by_depth = json.loads(archive.read(SOLVE_MOVES_FILE).decode("utf-8"))
    return premoves, {int(depth): sequences for depth, sequences in by_depth.items()}


def add_generation_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument("--config", type=str, default=None, help="YAML file with generation settings")
    parser.add_argument("--premove-depth", type=int, default=None)
    parser.add_argument("--solve-depth", type=int, default=None)
    parser.add_argument("--solve-moves", type=str, default=None, help="Space-separated Rubiskewb tokens")
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--chunk-size", type=int, default=None)
    parser.add_argument("--output", type=str, default=None, help="Zip archive path")
    parser.add_argument("--progress", choices=["on", "off"], default=None)
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate canonical Skewb premoves and solve moves")
    return add_generation_arguments(parser)


def resolve_settings(args: argparse.Namespace) -> dict[str, Any]:
    """Merge built-in defaults, the YAML config and explicit flags (in that priority order)."""
    settings = dict(DEFAULTS)
    if getattr(args, "config", None):
        settings.update(load_config(args.config))

    overrides = {
        "premove_depth": args.premove_depth,
        "solve_depth": args.solve_depth,
        "solve_moves": args.solve_moves.split() if args.solve_moves else None,
        "workers": args.workers,
        "chunk_size": args.chunk_size,
        "output": args.output,
        "progress": args.progress,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})

    if isinstance(settings["progress"], bool):
        settings["progress"] = "on" if settings["progress"] else "off"
    if isinstance(settings["solve_moves"], str):
        settings["solve_moves"] = settings["solve_moves"].split()
    for key in ("premove_depth", "solve_depth", "workers", "chunk_size"):
        if not isinstance(settings[key], int) or settings[key] < 0:
            raise ValueError(f"{key} must be a non-negative integer, got {settings[key]!r}")
    if settings["progress"] not in ("on", "off"):
        raise ValueError("progress must be 'on' or 'off'")
    return settings


def run_generation(args: argparse.Namespace) -> dict[str, Any]:
    settings = resolve_settings(args)
    progress = settings["progress"] == "on"

    # Reject unknown tokens before the search starts.
    Skewb().apply_rubiskewb_moves(" ".join(settings["solve_moves"]))

    print(
        "generation_init "
        f"premove_depth={settings['premove_depth']} solve_depth={settings['solve_depth']} "
        f"solve_moves={','.join(settings['solve_moves'])} workers={settings['workers']} "
        f"output={settings['output']}",
        flush=True,
    )

    t0 = time.perf_counter()
    premoves = generate_premoves(settings["premove_depth"])
    print(f"premoves_done count={len(premoves)} elapsed_sec={time.perf_counter() - t0:.2f}", flush=True)

    t0 = time.perf_counter()
    solve_moves = generate_solve_moves(
        max_depth=settings["solve_depth"],
        moves=settings["solve_moves"],
        workers=settings["workers"],
        chunk_size=settings["chunk_size"],
        progress=progress,
    )
    total = sum(len(v) for v in solve_moves.values())
    print(f"solve_moves_done count={total} elapsed_sec={time.perf_counter() - t0:.2f}", flush=True)

    archive = write_archive(settings["output"], premoves, solve_moves)
    print(f"archive_written path={archive}", flush=True)

    return {"premoves": premoves, "solve_moves": solve_moves, "archive": archive}


def main() -> None:
    args = build_parser().parse_args()
    run_generation(args)


if __name__ == "__main__":
    main()
