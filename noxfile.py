# topmark:header:start
#
#   project      : LineScan
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nox sessions for LineScan.

``nox`` runs ``qa`` once per Python version advertised in the ``pyproject.toml``
classifiers. ``nox -s property_test`` runs the slow hypothesis suite on the
current interpreter only.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Any

import nox

if sys.version_info >= (3, 11):
    import tomllib as _toml
else:
    import tomlkit as _toml

HERE: Path = Path(__file__).resolve().parent
RUNNING_PYTHON: str = "{}.{}".format(*sys.version_info[:2])

_CLASSIFIER_RE = re.compile(r"^Programming Language :: Python :: (\d+)\.(\d+)$")


def python_versions(pyproject: Path = HERE / "pyproject.toml") -> list[str]:
    """``X.Y`` versions listed as classifiers, oldest first.

    Falls back to the running interpreter when the file or the classifiers are
    missing, so ``nox -l`` still works in a stripped checkout.
    """
    try:
        document: dict[str, Any] = dict(_toml.loads(pyproject.read_text(encoding="utf-8")))
    except (OSError, ValueError):
        return [RUNNING_PYTHON]

    classifiers = document.get("project", {}).get("classifiers", [])
    found: set[tuple[int, int]] = set()
    for classifier in classifiers:
        match = _CLASSIFIER_RE.match(str(classifier))
        if match:
            found.add((int(match[1]), int(match[2])))
    return [f"{major}.{minor}" for major, minor in sorted(found)] or [RUNNING_PYTHON]


nox.options.sessions = ["qa"]


def _pytest(session: nox.Session, marker: str) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", marker, *session.posargs)


@nox.session(python=python_versions())
def qa(session: nox.Session) -> None:
    """Fast suite: everything except the slow property tests."""
    _pytest(session, "not hypothesis_slow")


@nox.session(python=RUNNING_PYTHON)
def property_test(session: nox.Session) -> None:
    """Slow hypothesis property tests."""
    _pytest(session, "hypothesis_slow")
