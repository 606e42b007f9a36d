"""Read-only document tree the price extraction walks over.

The tree is produced once from raw markup by selectolax and never mutated
afterwards. Every walk over it uses an explicit stack, so page nesting depth
is not limited by the interpreter's recursion limit.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from selectolax.parser import HTMLParser
from selectolax.parser import Node as SelectolaxNode

DOCUMENT_TAG = "#document"
_TEXT_TAG = "-text"


@dataclass(frozen=True, slots=True)
class Text:
    data: str


@dataclass(frozen=True, slots=True)
class Element:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: tuple["Node", ...] = ()

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.attrs.get(key, default)

    def iter_elements(self):
        """Yield direct element children in document order."""
        for child in self.children:
            if isinstance(child, Element):
                yield child

    def iter_descendants(self):
        """Yield this element and every element below it in depth-first pre-order."""
        stack: list[Element] = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed([c for c in element.children if isinstance(c, Element)]))


Node = Element | Text


@dataclass
class _Frame:
    tag: str
    attrs: dict[str, str]
    pending: Iterator[SelectolaxNode]
    children: list[Node] = field(default_factory=list)


def parse_document(html: str) -> Element:
    """Parse raw HTML into a document tree rooted at a synthetic document node."""
    tree = HTMLParser(html)
    root = tree.root
    converted = _convert(root) if root is not None else None
    children = (converted,) if isinstance(converted, Element) else ()
    return Element(DOCUMENT_TAG, children=children)


def _is_skipped(tag: str | None) -> bool:
    # Comments, doctypes and processing instructions carry no text
    return not tag or tag.startswith(("_", "!", "-"))


def _open(node: SelectolaxNode) -> _Frame:
    attrs = {key: value or "" for key, value in node.attributes.items()}
    return _Frame(node.tag.lower(), attrs, node.iter(include_text=True))


def _convert(root: SelectolaxNode) -> Element | None:
    if _is_skipped(root.tag):
        return None

    stack = [_open(root)]
    while True:
        frame = stack[-1]
        child = next(frame.pending, None)
        if child is None:
            stack.pop()
            element = Element(frame.tag, frame.attrs, tuple(frame.children))
            if not stack:
                return element
            stack[-1].children.append(element)
        elif child.tag == _TEXT_TAG:
            frame.children.append(Text(child.text(deep=False) or ""))
        elif not _is_skipped(child.tag):
            stack.append(_open(child))
