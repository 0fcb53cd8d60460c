"""Saved player progress: apples, best game, high score and equipped colour."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

PROFILE_PATH = Path("assets/save/dataProfile.txt")
BOUGHT_PATH = Path("assets/save/Bought.txt")


@dataclass(frozen=True)
class ProfileData:
    """The three numbers kept in the profile file, one per line.

    ``apples`` is the running total, which is also the shop currency;
    ``best_apples`` is the most eaten in one game.
    """

    apples: int = 0
    best_apples: int = 0
    high_score: int = 0


def _read_ints(path: Path | str) -> list[int]:
    """Read leading whitespace-separated integers; stop at the first bad token."""
    try:
        text = Path(path).read_text()
    except OSError:
        return []
    values: list[int] = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def _write_profile(path: Path | str, data: ProfileData) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(f"{data.apples}\n{data.best_apples}\n{data.high_score}\n")


def read_profile(path: Path | str) -> ProfileData:
    """Load the profile; missing or unreadable fields count as zero."""
    values = (_read_ints(path) + [0, 0, 0])[:3]
    return ProfileData(*values)


def record_game(path: Path | str, apples_eaten: int, score: int) -> ProfileData:
    """Fold a finished game into the saved profile and return the new profile."""
    old = read_profile(path)
    new = ProfileData(
        apples=old.apples + apples_eaten,
        best_apples=max(old.best_apples, apples_eaten),
        high_score=max(old.high_score, score),
    )
    _write_profile(path, new)
    return new


def read_currency(path: Path | str) -> int:
    """Apples available to spend in the shop."""
    return read_profile(path).apples


def write_currency(path: Path | str, currency: int) -> None:
    """Store a new apple balance, keeping the other saved numbers."""
    _write_profile(path, replace(read_profile(path), apples=currency))


def read_equipped(path: Path | str) -> int:
    """Index of the equipped snake colour, 0 when nothing is saved."""
    values = _read_ints(path)
    return values[0] if values else 0


def write_equipped(path: Path | str, index: int) -> None:
    """Save the index of the equipped snake colour."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(f"{index}\n")