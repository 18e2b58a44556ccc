"""Repository-wide docstring contract, checked on the AST."""

from __future__ import annotations

import ast
import unittest
from collections.abc import Iterator
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
SCAN_ROOTS = ("src", "examples", "tests")
IMPLICIT_PARAMS = {"self", "cls"}
FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


def _sections(docstring: str) -> set[str]:
    """Collect Google-style section headers of a docstring.

    Args:
        docstring: Cleaned docstring text.

    Returns:
        Header names such as ``"Args"``, without the trailing colon.
    """
    headers = set()
    for line in docstring.splitlines():
        stripped = line.strip()
        if stripped.endswith(":") and stripped[:-1].isalpha():
            headers.add(stripped[:-1])
    return headers


def _explicit_params(node: FunctionNode) -> list[str]:
    """List parameter names a caller has to pass.

    Args:
        node: Function node.

    Returns:
        Parameter names other than ``self`` and ``cls``.
    """
    args = node.args
    names = [arg.arg for arg in (*args.posonlyargs, *args.args, *args.kwonlyargs)]
    names.extend(arg.arg for arg in (args.vararg, args.kwarg) if arg is not None)
    return [name for name in names if name not in IMPLICIT_PARAMS]


def _returns_value(node: FunctionNode) -> bool:
    """Check for a return annotation other than ``None``.

    Args:
        node: Function node.

    Returns:
        ``True`` when the annotation promises a value.
    """
    annotation = node.returns
    if annotation is None:
        return False
    if isinstance(annotation, ast.Constant):
        return annotation.value is not None and annotation.value != "None"
    return not (isinstance(annotation, ast.Name) and annotation.id == "None")


def _own_statements(node: FunctionNode) -> Iterator[ast.AST]:
    """Walk a function body without entering nested scopes.

    Args:
        node: Function node.

    Yields:
        AST nodes belonging to ``node`` itself.
    """
    pending: list[ast.AST] = list(node.body)
    while pending:
        current = pending.pop()
        yield current
        for child in ast.iter_child_nodes(current):
            if not isinstance(child, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef, ast.Lambda)):
                pending.append(child)


def _raises_directly(node: FunctionNode) -> bool:
    """Check whether a function raises a new exception itself.

    Args:
        node: Function node.

    Returns:
        ``True`` for any ``raise X`` outside nested scopes; bare re-raises
        do not count.
    """
    return any(isinstance(item, ast.Raise) and item.exc is not None for item in _own_statements(node))


class ContractVisitor(ast.NodeVisitor):
    """Collect docstring contract violations of top-level code and methods."""

    def __init__(self, path: Path) -> None:
        """Start collecting for one module.

        Args:
            path: Repository-relative module path used in messages.
        """
        self.path = path
        self.violations: list[str] = []
        self._owner: str | None = None

    def _report(self, node: ast.AST, message: str) -> None:
        """Record one violation.

        Args:
            node: Offending node.
            message: Violation description.
        """
        self.violations.append(f"{self.path}:{getattr(node, 'lineno', 0)} {message}")

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        """Check a class and its methods.

        Args:
            node: Class node.
        """
        if ast.get_docstring(node) is None:
            self._report(node, f"missing class docstring for `{node.name}`")
        self._owner = node.name
        for member in node.body:
            if isinstance(member, (ast.FunctionDef, ast.AsyncFunctionDef)):
                self._check_function(member)
        self._owner = None

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        """Check a module-level function.

        Args:
            node: Function node.
        """
        self._check_function(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        """Check a module-level coroutine function.

        Args:
            node: Function node.
        """
        self._check_function(node)

    def _check_function(self, node: FunctionNode) -> None:
        """Check summary and sections against the signature and body.

        Args:
            node: Function or method node.
        """
        name = node.name if self._owner is None else f"{self._owner}.{node.name}"
        doc = ast.get_docstring(node)
        if doc is None:
            self._report(node, f"missing docstring for `{name}`")
            return
        sections = _sections(doc)
        if _explicit_params(node) and "Args" not in sections:
            self._report(node, f"missing Args for `{name}`")
        if _returns_value(node) and not sections & {"Returns", "Yields"}:
            self._report(node, f"missing Returns for `{name}`")
        if _raises_directly(node) and "Raises" not in sections:
            self._report(node, f"missing Raises for `{name}`")


class DocstringContractTests(unittest.TestCase):
    """Docstring presence and section checks over the whole repository."""

    def test_docstring_contracts(self) -> None:
        """Require Args, Returns and Raises wherever the code calls for them."""
        violations: list[str] = []
        for root_name in SCAN_ROOTS:
            root = REPO_ROOT / root_name
            if not root.is_dir():
                continue
            for path in sorted(root.rglob("*.py")):
                visitor = ContractVisitor(path.relative_to(REPO_ROOT))
                module = ast.parse(path.read_text(encoding="utf-8"))
                for node in module.body:
                    visitor.visit(node)
                violations.extend(visitor.violations)

        if violations:
            listing = "\n".join(f"- {item}" for item in violations)
            self.fail(f"Docstring contract violations:\n{listing}")


if __name__ == "__main__":
    unittest.main()
