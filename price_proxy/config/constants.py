# Output grammar consumed by the spreadsheet macro
OUTPUT_CURRENCY_TOKEN = "US$"
TIER_SUFFIX = "+"

CURRENCY_MARKER = "$"
NBSP = "\u00a0"
STANDARD_PACKAGING_PHRASE = "Standard Packaging"
THOUSANDS_SEPARATOR = ","

# Price scanning never descends into these
PRUNED_TAGS: frozenset[str] = frozenset({"table", "tr", "td"})

DEFAULT_PRICE_TABLE_CLASS = "priceTable"
DEFAULT_PRICE_STRATEGY = "last"
DEFAULT_FETCH_TIMEOUT = 30000  # ms
