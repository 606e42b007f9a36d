from price_proxy.config.constants import OUTPUT_CURRENCY_TOKEN
from price_proxy.models.pricing import ExtractionResult, PriceTier


def format_tiers(tiers: list[PriceTier]) -> str:
    """Render tiers as ``10+US$ 0.1234 100+US$ 0.0987``.

    The spreadsheet macro looks for ``US`` and reads the number after it, so
    spacing and marker placement must not change.
    """
    return "".join(
        f"{tier.tier}{OUTPUT_CURRENCY_TOKEN} {tier.price} " for tier in tiers
    ).strip()


def export_to_text(result: ExtractionResult) -> str:
    """Format a result; anything other than a found table renders as ""."""
    if not result.found:
        return ""
    return format_tiers(result.tiers)
