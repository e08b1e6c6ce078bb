"""
Syntax Tree Pretty Printer
==========================

Renders a syntax node as an indented tree, one node per line:

    └──BinaryExpression
        ├──NumberExpression
        │   └──NumberToken 1
        ├──PlusToken
        └──NumberExpression
            └──NumberToken 2

Tokens carrying a value print it after the kind.
"""

from minicalc.syntax.nodes import SyntaxNode

LAST_CHILD_MARKER = "└──"
CHILD_MARKER = "├──"
LAST_CHILD_INDENT = "    "
CHILD_INDENT = "│   "


class TreePrinter:
    """
    Pretty printer for syntax trees.

    Usage:
        printer = TreePrinter()
        output = printer.print(tree.root)
        print(output)
    """

    def __init__(self):
        self.output: list[str] = []

    def print(self, node: SyntaxNode) -> str:
        """
        Print the tree and return it as a string.

        Nodes are visited with an explicit stack, so arbitrarily deep
        trees print without hitting the recursion limit.
        """
        self.output = []
        stack: list[tuple[SyntaxNode, str, bool]] = [(node, "", True)]

        while stack:
            current, indent, is_last = stack.pop()
            self._print_line(current, indent, is_last)

            indent += LAST_CHILD_INDENT if is_last else CHILD_INDENT
            children = list(current.children())
            # Pushed in reverse so the first child is printed first
            for index in range(len(children) - 1, -1, -1):
                stack.append((children[index], indent, index == len(children) - 1))

        return "\n".join(self.output)

    def _print_line(self, node: SyntaxNode, indent: str, is_last: bool) -> None:
        marker = LAST_CHILD_MARKER if is_last else CHILD_MARKER
        line = f"{indent}{marker}{node.kind}"
        if node.kind.is_token and node.value is not None:
            line += f" {node.value}"
        self.output.append(line)


def format_tree(node: SyntaxNode) -> str:
    """Render ``node`` and its descendants as tree text."""
    return TreePrinter().print(node)
