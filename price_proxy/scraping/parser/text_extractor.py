from price_proxy.config.constants import NBSP
from price_proxy.scraping.parser.dom import Element, Node, Text


def extract_text(node: Node) -> str:
    """Flatten a subtree into trimmed text.

    Child fragments are joined without a separator, so ``<b>10</b><i>pcs</i>``
    becomes ``10pcs``. Each text node is trimmed on its own, which makes the
    result the concatenation of the trimmed text nodes in document order.
    """
    if isinstance(node, Text):
        return node.data.replace(NBSP, " ").strip()
    if not isinstance(node, Element):
        return ""

    parts: list[str] = []
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Text):
            parts.append(current.data.replace(NBSP, " ").strip())
        else:
            stack.extend(reversed(current.children))
    return "".join(parts).strip()
