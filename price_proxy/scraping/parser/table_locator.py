from collections.abc import Callable

from price_proxy.config.constants import DEFAULT_PRICE_TABLE_CLASS
from price_proxy.scraping.parser.dom import Element

TablePredicate = Callable[[Element], bool]


def class_contains(marker: str = DEFAULT_PRICE_TABLE_CLASS) -> TablePredicate:
    """Match ``<table>`` elements whose class attribute contains ``marker``.

    This is a plain substring test, so ``class="widget priceTable dark"``
    and ``class="priceTableV2"`` both qualify.
    """

    def predicate(element: Element) -> bool:
        return element.tag == "table" and marker in (element.get("class") or "")

    return predicate


def find_price_table(root: Element, predicate: TablePredicate | None = None) -> Element | None:
    """Return the first matching table in depth-first pre-order."""
    predicate = predicate or class_contains()
    for element in root.iter_descendants():
        if predicate(element):
            return element
    return None
