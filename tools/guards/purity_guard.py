from __future__ import annotations

import ast
import sys
from collections.abc import Iterable
from pathlib import Path

FORBIDDEN_MODULES = frozenset(
    {
        "fastapi",
        "httpx",
        "io",
        "logging",
        "os",
        "pathlib",
        "requests",
        "shapeguard_http",
        "socket",
        "subprocess",
        "sys",
    }
)


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if not base.exists():
            continue
        yield from base.rglob("*.py")


def _top_level(module: str) -> str:
    return module.split(".", 1)[0]


def check_tree(path: Path, tree: ast.AST) -> list[str]:
    errors: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            errors.extend(
                f"{path}:{node.lineno} forbidden import '{alias.name}' in pure core"
                for alias in node.names
                if _top_level(alias.name) in FORBIDDEN_MODULES
            )
        elif isinstance(node, ast.ImportFrom):
            if node.module and _top_level(node.module) in FORBIDDEN_MODULES:
                errors.append(
                    f"{path}:{node.lineno} forbidden import '{node.module}' in pure core"
                )
        elif (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == "print"
        ):
            errors.append(f"{path}:{node.lineno} 'print' is forbidden in pure core")
    return errors


def run(roots: list[str]) -> int:
    errors: list[str] = []
    for path in iter_python_files(roots):
        text = path.read_text(encoding="utf-8")
        try:
            tree = ast.parse(text, filename=str(path))
        except SyntaxError as exc:  # pragma: no cover
            sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
            raise
        errors.extend(check_tree(path, tree))
    if errors:
        sys.stderr.write("\n".join(errors) + "\n")
        return 1
    return 0


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
