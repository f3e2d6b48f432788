from __future__ import annotations

import ast
from pathlib import Path

ALLOWED_PREFIXES = ("src/monkeysearch/experiment/cli/",)


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _allowed_path(rel_path: str) -> bool:
    return rel_path.startswith(ALLOWED_PREFIXES)


def _call_name(node: ast.Call) -> str | None:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        return f"{func.value.id}.{func.attr}"
    return None


def test_no_prints_in_library() -> None:
    repo_root = _repo_root()
    src_root = repo_root / "src" / "monkeysearch"
    violations: list[str] = []

    for path in src_root.rglob("*.py"):
        rel_path = path.relative_to(repo_root).as_posix()
        if _allowed_path(rel_path):
            continue

        tree = ast.parse(path.read_text(encoding="utf-8-sig"))
        for node in ast.walk(tree):
            if not isinstance(node, ast.Call):
                continue
            name = _call_name(node)
            if name in {"print", "pprint", "pprint.pprint"}:
                violations.append(f"{rel_path}:{getattr(node, 'lineno', '?')}: {name}()")

    if violations:
        msg = ["print() is forbidden outside the CLI:"]
        msg.extend(f"- {item}" for item in sorted(violations))
        raise AssertionError("\n".join(msg))
