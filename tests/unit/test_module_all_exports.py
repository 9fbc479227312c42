from __future__ import annotations

import ast
from pathlib import Path


def _has_dunder_all(source: str) -> bool:
    module = ast.parse(source)
    for node in module.body:
        if not isinstance(node, ast.Assign | ast.AnnAssign):
            continue
        targets: list[ast.expr]
        if isinstance(node, ast.Assign):
            targets = list(node.targets)
        else:
            targets = [node.target]
        for target in targets:
            if isinstance(target, ast.Name) and target.id == "__all__":
                return True
    return False


def test_all_source_modules_define_dunder_all() -> None:
    root = Path(__file__).resolve().parents[2] / "src" / "mvno_api_client"
    missing: list[str] = []
    for path in sorted(root.rglob("*.py")):
        source = path.read_text(encoding="utf-8")
        if not _has_dunder_all(source):
            missing.append(path.as_posix())
    assert missing == []


def test_source_tree_contains_only_response_modules() -> None:
    root = Path(__file__).resolve().parents[2] / "src" / "mvno_api_client"
    modules = {path.relative_to(root).as_posix() for path in root.rglob("*.py")}
    assert modules == {
        "__init__.py",
        "config.py",
        "core/errors.py",
        "core/models.py",
        "core/response.py",
        "core/response_parsing.py",
    }


def test_public_names_are_importable_from_package() -> None:
    import mvno_api_client

    for name in mvno_api_client.__all__:
        assert hasattr(mvno_api_client, name), name
