from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Sequence

from skillbloom.models.listing import Listing


ALL_CATEGORIES = "All Categories"

# Marketplace browse categories, in display order.
LISTING_CATEGORIES: tuple[str, ...] = (
    ALL_CATEGORIES,
    "Cooking & Baking",
    "Crafts & Handmade",
    "Tutoring",
    "Home Services",
    "Beauty & Wellness",
    "Music & Performance",
    "Art & Design",
    "Language & Translation",
)


def _norm(value: str | None) -> str:
    return (value or "").strip().lower()


def _is_unset(category: str | None) -> bool:
    return not _norm(category) or _norm(category) == _norm(ALL_CATEGORIES)


def _matches_query(listing: Listing, query: str) -> bool:
    haystack = [listing.title or "", listing.description or ""] + [str(t) for t in (listing.tags or [])]
    return any(query in _norm(h) for h in haystack)


def _sort_key_newest(listing: Listing) -> tuple[datetime, int]:
    created = listing.created_at or datetime.min
    if created.tzinfo is not None:
        created = created.astimezone(timezone.utc).replace(tzinfo=None)
    return created, listing.id or 0


def filter_listings(
    listings: Iterable[Listing],
    *,
    category: str | None = None,
    subcategory: str | None = None,
    listing_type: str | None = None,
    min_price: int | None = None,
    max_price: int | None = None,
    query: str | None = None,
    tags: Sequence[str] | None = None,
) -> list[Listing]:
    """Linear predicate filter; "All Categories" (or nothing) disables the category check."""

    q = _norm(query)
    wanted_tags = {_norm(t) for t in (tags or []) if _norm(t)}
    out: list[Listing] = []
    for listing in listings:
        if not _is_unset(category) and _norm(listing.category) != _norm(category):
            continue
        if _norm(subcategory) and _norm(listing.subcategory) != _norm(subcategory):
            continue
        if listing_type and listing.type != listing_type:
            continue
        if min_price is not None and listing.price < min_price:
            continue
        if max_price is not None and listing.price > max_price:
            continue
        if q and not _matches_query(listing, q):
            continue
        if wanted_tags and not wanted_tags.issubset({_norm(str(t)) for t in (listing.tags or [])}):
            continue
        out.append(listing)
    return out


def sort_listings(listings: Sequence[Listing], sort: str = "featured") -> list[Listing]:
    items = list(listings)
    if sort == "price_low":
        return sorted(items, key=lambda l: (l.price, l.id or 0))
    if sort == "price_high":
        return sorted(items, key=lambda l: (-l.price, l.id or 0))
    if sort == "newest":
        return sorted(items, key=_sort_key_newest, reverse=True)
    # featured: featured first, then newest
    newest = sorted(items, key=_sort_key_newest, reverse=True)
    return sorted(newest, key=lambda l: not l.is_featured)
