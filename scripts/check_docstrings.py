"""Check that all code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import optionchain as oc

SRC_DIR = Path().joinpath("src", "optionchain")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "abstractmethod", "no_doctest", "wraps"})


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    error_line_no: int
    errors: list[str]


def _is_documentable(node: ast.AST) -> TypeIs[ast.FunctionDef | ast.AsyncFunctionDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return not node.name.startswith("_")


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check if function has a decorator that should skip docstring check."""
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        for d in node.decorator_list
    )


def _overridden_methods(tree: ast.Module) -> set[int]:
    """Line numbers of variant methods whose documentation lives on `Option`."""
    documented = {
        node.name
        for cls in ast.walk(tree)
        if isinstance(cls, ast.ClassDef) and cls.name == "Option"
        for node in cls.body
        if _is_documentable(node)
    }
    return {
        node.lineno
        for cls in ast.walk(tree)
        if isinstance(cls, ast.ClassDef) and cls.name != "Option"
        for node in cls.body
        if _is_documentable(node) and node.name in documented
    }


def _check_code_blocks(docstring: str, start_line: int) -> list[ErrorDetail]:
    """Check that code blocks are closed and that at least one python block exists."""
    errors: list[ErrorDetail] = []
    stack: list[tuple[int, str]] = []
    marker = "```"
    lines = docstring.split("\n")
    for line_num, line in enumerate(lines):
        match = CODE_BLOCK_PATTERN.search(line.strip())
        if not match:
            continue
        if line.strip() == marker:
            if stack:
                stack.pop()
            else:
                errors.append(
                    ErrorDetail(
                        start_line + line_num,
                        "Closing block ``` without matching opening",
                    )
                )
            continue
        stack.append((line_num + 1, match.group(1) or "plaintext"))
    errors.extend(
        ErrorDetail(start_line + idx - 1, f"Unclosed ```{lang} block")
        for idx, lang in stack
    )
    has_python = any(
        CODE_BLOCK_PATTERN.search(line.strip()) and "python" in line for line in lines
    )
    if not has_python and "@no_doctest" not in docstring:
        errors.append(
            ErrorDetail(
                start_line, "Missing doctest: No ```python block found in docstring"
            )
        )
    return errors


def _process_node(
    file_path: Path,
    node: ast.FunctionDef | ast.AsyncFunctionDef,
    skipped: set[int],
) -> oc.Option[DocstringError]:
    docstring = oc.from_nullable(ast.get_docstring(node))
    if docstring.is_none():
        if _is_public(node) and node.lineno not in skipped:
            return oc.Some(
                DocstringError(file_path, node.name, node.lineno, ["Missing docstring"])
            )
        return oc.NONE

    return (
        docstring.map(lambda doc: _check_code_blocks(doc, node.lineno))
        .filter(lambda errors: len(errors) > 0)
        .map(
            lambda errors: DocstringError(
                file_path=file_path,
                func_name=node.name,
                error_line_no=errors[0].line_no,
                errors=[e.message for e in errors],
            )
        )
    )


def _check_file(file_path: Path) -> list[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []

    skipped = _overridden_methods(tree)
    found: list[DocstringError] = []
    for node in ast.walk(tree):
        if not _is_documentable(node) or not _is_public(node):
            continue
        if _has_skip_decorator(node):
            continue
        _process_node(file_path, node, skipped).if_some(found.append)
    return found


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for file in files for error in _check_file(file)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path.relative_to(Path())}:{error.error_line_no}",
            error.func_name,
            "\n".join(error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )


if __name__ == "__main__":
    main()
