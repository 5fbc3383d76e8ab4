"""CST visitors that find behaviour selected by runtime type."""

from dataclasses import dataclass
from typing import Union

import libcst as cst
from libcst import metadata

TYPE_CHECK_FUNCTION = "isinstance"
TYPE_FUNCTION = "type"

# type(x) <op> T compares against a single type, type(x) <op> (A, B) against a collection
SINGLE_TYPE_OPERATORS = (cst.Is, cst.IsNot, cst.Equal, cst.NotEqual)
MEMBERSHIP_OPERATORS = (cst.In, cst.NotIn)


@dataclass(frozen=True)
class TypeCheckFinding:
    """An if/elif chain that dispatches on the type of a value.

    Attributes:
        line: Line of the opening ``if``
        scope: Names of the enclosing classes and functions, outermost first
        subjects: Source of the expressions whose type is checked
        checked_types: Source of the types they are checked against, in order
    """

    line: int
    scope: tuple[str, ...]
    subjects: tuple[str, ...]
    checked_types: tuple[str, ...]

    @property
    def owner(self) -> str:
        """Qualified name of the code containing the chain."""
        return ".".join(self.scope) or "<module>"


def code_for(node: cst.CSTNode) -> str:
    """Render a CST node back to source code."""
    return cst.Module(body=[]).code_for_node(node)


def _names_in(type_expr: cst.BaseExpression) -> list[str]:
    if isinstance(type_expr, (cst.Tuple, cst.List, cst.Set)):
        return [code_for(element.value) for element in type_expr.elements]
    return [code_for(type_expr)]


def _is_call_to(node: cst.BaseExpression, function_name: str) -> bool:
    return (
        isinstance(node, cst.Call)
        and isinstance(node.func, cst.Name)
        and node.func.value == function_name
    )


def type_tests(test: cst.BaseExpression) -> list[tuple[str, list[str]]]:
    """Extract the type checks contained in a condition.

    Recognizes ``isinstance(x, T)`` and ``isinstance(x, (T, U))``, comparisons
    of ``type(x)`` with ``is``, ``is not``, ``==`` and ``!=``, and membership
    tests such as ``type(x) in (T, U)``. Checks nested inside ``and``, ``or``
    and ``not`` are found as well. Calls through other names (an aliased
    ``isinstance``, ``x.__class__``) are not recognized.

    Args:
        test: The condition expression of an ``if`` or ``elif``

    Returns:
        List of (subject source, [type source, ...]) pairs
    """
    if isinstance(test, cst.BooleanOperation):
        return type_tests(test.left) + type_tests(test.right)

    if isinstance(test, cst.UnaryOperation) and isinstance(test.operator, cst.Not):
        return type_tests(test.expression)

    if _is_call_to(test, TYPE_CHECK_FUNCTION) and len(test.args) >= 2:  # type: ignore[attr-defined]
        args = test.args  # type: ignore[attr-defined]
        return [(code_for(args[0].value), _names_in(args[1].value))]

    if isinstance(test, cst.Comparison) and _is_call_to(test.left, TYPE_FUNCTION):
        type_call = test.left
        if len(type_call.args) != 1:  # type: ignore[attr-defined]
            return []
        subject = code_for(type_call.args[0].value)  # type: ignore[attr-defined]
        checked: list[str] = []
        for target in test.comparisons:
            if isinstance(target.operator, SINGLE_TYPE_OPERATORS):
                checked.append(code_for(target.comparator))
            if isinstance(target.operator, MEMBERSHIP_OPERATORS):
                checked.extend(_names_in(target.comparator))
        return [(subject, checked)] if checked else []

    return []


class TypeCheckCollector(cst.CSTVisitor):
    """Collects if/elif chains whose branches test the type of a value.

    Each chain is reported once, at its opening ``if``; its ``elif`` branches
    are folded into the same finding. Findings carry the full scope, so a
    chain in a function nested in a method is owned by ``Class.method.inner``.

    Example:
        collector = TypeCheckCollector(min_branches=2)
        metadata.MetadataWrapper(module).visit(collector)
        for finding in collector.findings:
            print(finding.line, finding.checked_types)
    """

    METADATA_DEPENDENCIES = (metadata.PositionProvider,)

    def __init__(self, min_branches: int = 1) -> None:
        """Initialize the collector.

        Args:
            min_branches: Fewest type-checking branches a chain needs to be reported
        """
        self.min_branches = min_branches
        self.findings: list[TypeCheckFinding] = []
        self._scope: list[str] = []
        self._elif_ids: set[int] = set()

    def visit_ClassDef(self, node: cst.ClassDef) -> None:  # noqa: N802
        """Track entry into a class."""
        self._scope.append(node.name.value)

    def leave_ClassDef(self, original_node: cst.ClassDef) -> None:  # noqa: N802
        """Track exit from a class."""
        self._scope.pop()

    def visit_FunctionDef(self, node: cst.FunctionDef) -> None:  # noqa: N802
        """Track entry into a function."""
        self._scope.append(node.name.value)

    def leave_FunctionDef(self, original_node: cst.FunctionDef) -> None:  # noqa: N802
        """Track exit from a function."""
        self._scope.pop()

    def visit_If(self, node: cst.If) -> None:  # noqa: N802
        """Record the chain starting at this ``if`` when it dispatches on type."""
        if id(node) in self._elif_ids:
            return

        subjects: list[str] = []
        checked_types: list[str] = []
        branches = 0
        branch: cst.If | cst.Else | None = node
        while isinstance(branch, cst.If):
            tests = type_tests(branch.test)
            if tests:
                branches += 1
            for subject, types in tests:
                if subject not in subjects:
                    subjects.append(subject)
                checked_types.extend(t for t in types if t not in checked_types)
            if isinstance(branch.orelse, cst.If):
                self._elif_ids.add(id(branch.orelse))
            branch = branch.orelse

        if branches == 0 or branches < self.min_branches:
            return

        position = self.get_metadata(metadata.PositionProvider, node)
        self.findings.append(
            TypeCheckFinding(
                line=position.start.line,
                scope=tuple(self._scope),
                subjects=tuple(subjects),
                checked_types=tuple(checked_types),
            )
        )


def collect_type_checks(
    source: Union[str, cst.Module], min_branches: int = 1
) -> list[TypeCheckFinding]:
    """Find type-dispatching if/elif chains in Python source.

    Args:
        source: Python source code, or a module already parsed with libCST
        min_branches: Fewest type-checking branches a chain needs to be reported

    Returns:
        Findings in source order

    Raises:
        libcst.ParserSyntaxError: If the source cannot be parsed
    """
    module = cst.parse_module(source) if isinstance(source, str) else source
    collector = TypeCheckCollector(min_branches=min_branches)
    metadata.MetadataWrapper(module).visit(collector)
    return collector.findings
