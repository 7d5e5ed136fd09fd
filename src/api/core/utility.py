from datetime import datetime, timezone
import re


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


# category_slug("Masala Blends") -> "masala-blends"
def category_slug(name: str) -> str:
    """
    Slug used for auto-created categories.
    Lowercases and turns every whitespace run into a single hyphen; any other
    punctuation is kept as-is so existing storefront URLs keep working.
    """
    if not name:
        return ""
    return re.sub(r"\s+", "-", name.lower()).strip()


def split_list(value: str | None) -> list[str]:
    """Split a comma separated cell into trimmed, non-empty items"""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]
