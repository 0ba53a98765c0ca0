"""Check that all code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import pyoption as po

SRC_DIR = Path().joinpath("src", "pyoption")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "no_doctest", "wraps"})


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    errors: list[ErrorDetail]


def _is_documentable(node: ast.AST) -> TypeIs[ast.FunctionDef | ast.AsyncFunctionDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return not node.name.startswith("_") and not node.name.istitle()


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check if function has a decorator that should skip docstring check."""
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        for d in node.decorator_list
    )


def _overridden_lines(tree: ast.Module) -> set[int]:
    """Line numbers of variant methods whose contract is documented on `Option`."""
    return {
        func.lineno
        for cls in ast.walk(tree)
        if isinstance(cls, ast.ClassDef) and cls.name in {"Some", "NoneOption"}
        for func in cls.body
        if _is_documentable(func)
    }


def _unbalanced_blocks(docstring: str, start_line: int) -> list[ErrorDetail]:
    """Report closing fences without an opening one, and openings left unclosed."""
    errors: list[ErrorDetail] = []
    stack: list[tuple[int, str]] = []
    for idx, line in enumerate(docstring.split("\n")):
        match = CODE_BLOCK_PATTERN.search(line.strip())
        if match is None:
            continue
        if line.strip() != "```":
            stack.append((idx, match.group(1) or "plaintext"))
        elif stack:
            stack.pop()
        else:
            errors.append(
                ErrorDetail(
                    start_line + idx, "Closing block ``` without matching opening"
                )
            )
    errors.extend(
        ErrorDetail(start_line + idx, f"Unclosed ```{lang} block") for idx, lang in stack
    )
    return errors


def _missing_example(
    docstring: str, node: ast.FunctionDef | ast.AsyncFunctionDef
) -> po.Option[ErrorDetail]:
    has_python_block = any(
        CODE_BLOCK_PATTERN.search(line) and "python" in line
        for line in docstring.split("\n")
    )
    skip = (
        not _is_public(node)
        or _has_skip_decorator(node)
        or "@no_doctest" in docstring
        or has_python_block
    )
    if skip:
        return po.NONE
    return po.some(
        ErrorDetail(
            node.lineno, "Missing doctest: No ```python block found in docstring"
        )
    )


def _process_node(
    file_path: Path,
    node: ast.FunctionDef | ast.AsyncFunctionDef,
    exempt: set[int],
) -> po.Option[DocstringError]:
    def _error(errors: list[ErrorDetail]) -> DocstringError:
        return DocstringError(file_path, node.name, node.lineno, errors)

    match po.from_nullable(ast.get_docstring(node)):
        case po.Some(docstring):
            errors = _unbalanced_blocks(docstring, node.lineno)
            errors.extend(po.values([_missing_example(docstring, node)]))
            return po.some(errors).filter(bool).map(_error)
        case _:
            missing = (
                _is_public(node)
                and not _has_skip_decorator(node)
                and node.lineno not in exempt
            )
            return (
                po.some([ErrorDetail(node.lineno, "Missing docstring")])
                .filter(lambda _: missing)
                .map(_error)
            )


def _check_file(file_path: Path) -> list[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []
    exempt = _overridden_lines(tree)
    return list(
        po.values(
            _process_node(file_path, node, exempt) for node in _definitions(tree)
        )
    )


def _definitions(tree: ast.Module) -> list[ast.FunctionDef | ast.AsyncFunctionDef]:
    """Module-level functions and the methods of module-level classes, nested helpers excluded."""
    scopes = [tree.body] + [c.body for c in tree.body if isinstance(c, ast.ClassDef)]
    return [node for body in scopes for node in body if _is_documentable(node)]


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for path in files for error in _check_file(path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path.relative_to(Path())}:{error.errors[0].line_no}",
            error.func_name,
            "\n".join(e.message for e in error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )
    raise SystemExit(1)


if __name__ == "__main__":
    main()
