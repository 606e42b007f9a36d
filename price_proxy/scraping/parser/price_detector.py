"""Resolves the unit price held in a single pricing-table cell."""

import re
from collections.abc import Callable
from string import digits

from price_proxy.config.constants import CURRENCY_MARKER, PRUNED_TAGS
from price_proxy.scraping.parser.diagnostics import DiagnosticLog
from price_proxy.scraping.parser.dom import Element, Node, Text
from price_proxy.scraping.parser.text_extractor import extract_text

# Picks one price out of two or more candidates, in discovery order
PriceStrategy = Callable[[list[str]], str]

# Plain non-negative decimal, ASCII digits only
DECIMAL_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def last_price(candidates: list[str]) -> str:
    # Sites list the struck-through list price before the discounted one
    return candidates[-1]


def first_price(candidates: list[str]) -> str:
    return candidates[0]


def lowest_price(candidates: list[str]) -> str:
    return min(candidates, key=float)


PRICE_STRATEGIES: dict[str, PriceStrategy] = {
    "last": last_price,
    "first": first_price,
    "lowest": lowest_price,
}


def get_price_strategy(name: str) -> PriceStrategy:
    try:
        return PRICE_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown price strategy {name!r}, expected one of {sorted(PRICE_STRATEGIES)}"
        ) from None


def parse_price_candidate(text: str) -> str | None:
    """Return the numeric part of a ``$``-prefixed token, or None."""
    text = text.strip()
    if not text.startswith(CURRENCY_MARKER) or not any(ch in digits for ch in text):
        return None
    cleaned = text.removeprefix(CURRENCY_MARKER).strip()
    if DECIMAL_PATTERN.fullmatch(cleaned) is None:
        return None
    return cleaned


class PriceDetector:
    """Scans a table cell for price candidates and picks the effective one."""

    def __init__(self, strategy: PriceStrategy = last_price):
        self.strategy = strategy

    def detect(self, cell: Element, diagnostics: DiagnosticLog | None = None) -> str | None:
        candidates = self.scan(cell)

        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        price = self.strategy(candidates)
        if diagnostics is not None:
            diagnostics.info(
                "multiple_prices_found",
                candidates=list(candidates),
                chosen=price,
                strategy=getattr(self.strategy, "__name__", repr(self.strategy)),
            )
        return price

    def scan(self, cell: Element) -> list[str]:
        """Collect price candidates in depth-first, left-to-right order.

        A span is checked as a whole when it is reached; text children of any
        element are checked one by one. Nested table, tr and td elements are
        not entered.
        """
        candidates: list[str] = []
        stack: list[Node] = [cell]
        while stack:
            node = stack.pop()
            if isinstance(node, Text):
                price = parse_price_candidate(node.data)
            elif node.tag == "span":
                price = parse_price_candidate(extract_text(node))
            else:
                price = None
            if price is not None:
                candidates.append(price)

            if isinstance(node, Element):
                stack.extend(
                    reversed([
                        child
                        for child in node.children
                        if isinstance(child, Text) or child.tag not in PRUNED_TAGS
                    ])
                )
        return candidates
