"""Flag broad exception handlers that swallow errors in package code.

Hashing and verification must surface every operational failure to the caller,
so a handler that catches ``Exception``/``BaseException`` (or a bare
``except:``) is only allowed when its body re-raises on some path.

Test files are excluded (they often use try/except to assert exception behaviour).
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

SOURCE_DIRS = (Path("argon2_interop"),)
_BROAD_NAMES = frozenset({"Exception", "BaseException"})


def _handler_has_reraise(handler: ast.ExceptHandler) -> bool:
    """Return True if the handler body contains a raise statement."""
    return any(
        isinstance(node, ast.Raise)
        for stmt in handler.body
        for node in ast.walk(stmt)
    )


def _catches_broad_exception(handler: ast.ExceptHandler) -> bool:
    """Return True if the handler catches Exception, BaseException or everything."""
    typ = handler.type
    if typ is None:
        # bare `except:` catches everything
        return True
    if isinstance(typ, ast.Name) and typ.id in _BROAD_NAMES:
        return True
    # except (A, Exception, B)
    if isinstance(typ, ast.Tuple):
        return any(
            isinstance(elt, ast.Name) and elt.id in _BROAD_NAMES for elt in typ.elts
        )
    return False


def check_source(source: str, *, filename: str) -> list[str]:
    """Return one error line per swallowing broad handler in ``source``."""
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as exc:
        return [f"{filename}: syntax error during parse: {exc}"]

    errors: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Try | ast.TryStar):
            continue
        for handler in node.handlers:
            if not _catches_broad_exception(handler):
                continue
            if _handler_has_reraise(handler):
                continue
            errors.append(
                f"{filename}:{handler.lineno}: broad exception handler "
                "with no re-raise. Catch the specific error or add `raise`.",
            )
    return errors


def main() -> int:
    """Check package sources for broad exception handlers that swallow errors."""
    errors: list[str] = []
    checked = 0

    for source_dir in SOURCE_DIRS:
        if not source_dir.exists():
            continue
        for path in sorted(source_dir.rglob("*.py")):
            if path.name.startswith("test_") or "tests" in path.parts:
                continue
            checked += 1
            errors.extend(
                check_source(path.read_text(encoding="utf-8"), filename=str(path)),
            )

    if errors:
        for error in errors:
            _write_stderr(f"{error}\n")
        return 1

    _write_stdout(
        f"Validated exception handling: {checked} source file(s) checked.\n",
    )
    return 0


def _write_stdout(message: str) -> None:
    """Write message to stdout without using print."""
    _ = sys.stdout.write(message)


def _write_stderr(message: str) -> None:
    """Write message to stderr without using print."""
    _ = sys.stderr.write(message)


if __name__ == "__main__":
    raise SystemExit(main())
