"""Checks on the declared and installed dependency versions."""

from importlib.metadata import version
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _release(dist: str) -> tuple[int, ...]:
    return tuple(int(part) for part in version(dist).split(".")[:3])


def test_sqlmodel_range_is_bounded():
    # Later sqlmodel releases reject the naive UTC timestamps the models store
    assert '"sqlmodel>=0.0.16,<0.0.30"' in PYPROJECT.read_text(encoding="utf-8")


def test_installed_sqlmodel_accepts_naive_timestamps():
    assert _release("sqlmodel") < (0, 0, 30)
