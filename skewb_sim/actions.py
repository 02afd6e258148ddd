"""Move and geometry tables for the Skewb simulator."""

from __future__ import annotations

from collections import deque

import numpy as np

FACE_ORDER = ("U", "F", "R", "B", "L", "D")
FACE_INDEX = {face: i for i, face in enumerate(FACE_ORDER)}
N_FACES = 6

CORNER_SLOTS = ("UFR", "URB", "ULF", "UBL", "DRF", "DBR", "DFL", "DLB")
CORNER_INDEX = {slot: i for i, slot in enumerate(CORNER_SLOTS)}
N_CORNERS = 8
STICKERS_PER_CORNER = 3

CENTER_OFFSET = N_CORNERS * STICKERS_PER_CORNER
STATE_SIZE = CENTER_OFFSET + N_FACES

# Face owning each sticker of a corner slot in the solved state, in triple order.
CORNER_FACES = {
    "UFR": ("U", "F", "R"),
    "URB": ("U", "R", "B"),
    "ULF": ("U", "L", "F"),
    "UBL": ("U", "B", "L"),
    "DRF": ("D", "R", "F"),
    "DBR": ("D", "B", "R"),
    "DFL": ("D", "F", "L"),
    "DLB": ("D", "L", "B"),
}

# Face turn -> (pivot corner, three cycled corners, three cycled centers).
WCA_TURNS = {
    "U": ("UBL", ("DLB", "URB", "ULF"), ("U", "L", "B")),
    "R": ("DBR", ("DRF", "URB", "DLB"), ("R", "B", "D")),
    "B": ("DLB", ("DBR", "UBL", "DFL"), ("B", "L", "D")),
    "L": ("DFL", ("DLB", "ULF", "DRF"), ("F", "D", "L")),
}

RUBISKEWB_TURNS = {
    "R": ("URB", ("UFR", "UBL", "DBR"), ("R", "U", "B")),
    "r": WCA_TURNS["R"],
    "B": WCA_TURNS["U"],
    "b": WCA_TURNS["B"],
    "L": ("ULF", ("UBL", "UFR", "DFL"), ("U", "F", "L")),
    "l": WCA_TURNS["L"],
    "F": ("UFR", ("ULF", "URB", "DRF"), ("F", "U", "R")),
    "f": ("DRF", ("DFL", "UFR", "DBR"), ("F", "R", "D")),
}

# Axis rotation -> (first ring, second ring, center ring, twists corners).
# The y axis runs through single-sticker centers so corners keep their orientation.
AXIS_ROTATIONS = {
    "x": (("UFR", "URB", "DBR", "DRF"), ("ULF", "UBL", "DLB", "DFL"), ("F", "U", "B", "D"), True),
    "y": (("UFR", "ULF", "UBL", "URB"), ("DRF", "DFL", "DLB", "DBR"), ("F", "L", "B", "R"), False),
    "z": (("ULF", "UFR", "DRF", "DFL"), ("UBL", "URB", "DBR", "DLB"), ("U", "R", "D", "L"), True),
}

ROTATION_NAMES = ("x", "x'", "x2", "y", "y'", "y2", "z", "z'", "z2")
WCA_NAMES = ("U", "U'", "R", "R'", "B", "B'", "L", "L'") + ROTATION_NAMES
RUBISKEWB_NAMES = (
    "R", "R'", "r", "r'", "B", "B'", "b", "b'", "L", "L'", "l", "l'", "F", "F'", "f", "f'",
) + ROTATION_NAMES

# Slot the given center color must be moved from -> rotation bringing it down.
CENTER_DOWN_ROTATIONS = (("U", "x2"), ("F", "x'"), ("R", "z"), ("B", "x"), ("L", "z'"), ("D", ""))

# Trial rotations of the mirror checks; together they span the 24 orientations.
SPIN_ROTATIONS = ("y", "y'", "y2")
MIRROR_ROTATIONS = (
    "",
    "x", "x'", "x2", "y", "y'", "y2", "z", "z'", "z2",
    "x y", "x y'", "x y2", "x z", "x z'", "x z2",
    "x' y", "x' y'", "x' z", "x' z'",
    "x2 y", "x2 y'", "x2 z", "x2 z'",
)

DEFAULT_COLORS = ("#FFFFFFFF", "#00FF00FF", "#FF0000FF", "#0000FFFF", "#D67200FF", "#FBFF00FF")


def corner_sticker(slot: str, position: int) -> int:
    return CORNER_INDEX[slot] * STICKERS_PER_CORNER + position


def center_sticker(face: str) -> int:
    return CENTER_OFFSET + FACE_INDEX[face]


def solved_stickers(colors: tuple | list = DEFAULT_COLORS) -> np.ndarray:
    """Return the flat solved sticker array (length 30) for the given face colors."""
    by_face = dict(zip(FACE_ORDER, colors))
    stickers = np.empty(STATE_SIZE, dtype=object)
    for slot in CORNER_SLOTS:
        for position, face in enumerate(CORNER_FACES[slot]):
            stickers[corner_sticker(slot, position)] = by_face[face]
    for face in FACE_ORDER:
        stickers[center_sticker(face)] = by_face[face]
    return stickers


def _twist(labels: list[int], slot: str, clockwise: bool) -> None:
    i = corner_sticker(slot, 0)
    a, b, c = labels[i : i + 3]
    labels[i : i + 3] = [b, c, a] if clockwise else [c, a, b]


def _cycle(labels: list[int], groups: list[list[int]], clockwise: bool) -> None:
    """Cycle sticker groups; clockwise hands the last group's contents to the first."""
    values = [[labels[k] for k in group] for group in groups]
    shifted = values[-1:] + values[:-1] if clockwise else values[1:] + values[:1]
    for group, vals in zip(groups, shifted):
        for k, v in zip(group, vals):
            labels[k] = v


def _corner_groups(slots) -> list[list[int]]:
    return [[corner_sticker(slot, p) for p in range(STICKERS_PER_CORNER)] for slot in slots]


def _center_groups(faces) -> list[list[int]]:
    return [[center_sticker(face)] for face in faces]


def _apply_face_turn(labels: list[int], turn, clockwise: bool) -> None:
    pivot, corners, centers = turn
    _twist(labels, pivot, clockwise)
    for slot in corners:
        _twist(labels, slot, not clockwise)
    _cycle(labels, _center_groups(centers), clockwise)
    _cycle(labels, _corner_groups(corners), clockwise)


def _apply_axis_rotation(labels: list[int], rotation, clockwise: bool) -> None:
    first_ring, second_ring, centers, twists = rotation
    _cycle(labels, _center_groups(centers), clockwise)
    _cycle(labels, _corner_groups(first_ring), clockwise)
    _cycle(labels, _corner_groups(second_ring), clockwise)
    if not twists:
        return
    for i, slot in enumerate(first_ring):
        _twist(labels, slot, i % 2 == 1)
    for i, slot in enumerate(second_ring):
        _twist(labels, slot, i % 2 == 0)


def _labels_to_perm(labels: list[int]) -> np.ndarray:
    return np.asarray(labels, dtype=np.int32)


def _face_turn_permutations(turns: dict) -> dict[str, np.ndarray]:
    perms: dict[str, np.ndarray] = {}
    for name, turn in turns.items():
        for suffix, clockwise in (("", True), ("'", False)):
            labels = list(range(STATE_SIZE))
            _apply_face_turn(labels, turn, clockwise)
            perms[name + suffix] = _labels_to_perm(labels)
    return perms


def _axis_rotation_permutations() -> dict[str, np.ndarray]:
    perms: dict[str, np.ndarray] = {}
    for name, rotation in AXIS_ROTATIONS.items():
        for suffix, clockwise, repeats in (("", True, 1), ("'", False, 1), ("2", True, 2)):
            labels = list(range(STATE_SIZE))
            for _ in range(repeats):
                _apply_axis_rotation(labels, rotation, clockwise)
            perms[name + suffix] = _labels_to_perm(labels)
    return perms


def compose(*perms: np.ndarray) -> np.ndarray:
    """Return the single permutation equivalent to applying ``perms`` left to right."""
    result = np.arange(STATE_SIZE, dtype=np.int32)
    for perm in perms:
        result = result[perm]
    return result


def _generate_orientation_permutations() -> np.ndarray:
    gens = [ROTATION_PERMUTATIONS["x"], ROTATION_PERMUTATIONS["y"], ROTATION_PERMUTATIONS["z"]]
    identity = np.arange(STATE_SIZE, dtype=np.int32)

    perms: list[np.ndarray] = []
    seen: set[tuple[int, ...]] = set()
    q: deque[np.ndarray] = deque([identity])

    while q:
        perm = q.popleft()
        key = tuple(int(v) for v in perm)
        if key in seen:
            continue
        seen.add(key)
        perms.append(perm)
        for g in gens:
            q.append(compose(perm, g))

    if len(perms) != 24:
        raise RuntimeError(f"Expected 24 orientation permutations, got {len(perms)}")
    return np.stack(perms)


ROTATION_PERMUTATIONS = _axis_rotation_permutations()
WCA_PERMUTATIONS = {**_face_turn_permutations(WCA_TURNS), **ROTATION_PERMUTATIONS}
RUBISKEWB_PERMUTATIONS = {**_face_turn_permutations(RUBISKEWB_TURNS), **ROTATION_PERMUTATIONS}
ORIENTATION_PERMUTATIONS = _generate_orientation_permutations()

NOTATIONS = {
    "wca": (WCA_NAMES, WCA_PERMUTATIONS),
    "rubiskewb": (RUBISKEWB_NAMES, RUBISKEWB_PERMUTATIONS),
}

# Full-mirror signature: (face row, column) cell filled by each corner sticker.
# Column 0 of every row holds the face's own index.
SIGNATURE_SHAPE = (N_FACES, 5)
SIGNATURE_CELLS = {
    "UFR": (("U", 1), ("F", 1), ("R", 1)),
    "URB": (("U", 2), ("R", 2), ("B", 1)),
    "ULF": (("U", 3), ("L", 1), ("F", 2)),
    "UBL": (("U", 4), ("B", 2), ("L", 2)),
    "DRF": (("D", 1), ("R", 3), ("F", 3)),
    "DBR": (("D", 2), ("B", 3), ("R", 4)),
    "DFL": (("D", 3), ("F", 4), ("L", 3)),
    "DLB": (("D", 4), ("L", 4), ("B", 4)),
}
