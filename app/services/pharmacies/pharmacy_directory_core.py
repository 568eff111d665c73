from typing import Any, Iterable

from app.constants.catalog import (
    ADDRESS_NOT_PROVIDED,
    DEFAULT_OPERATING_HOURS,
    DEFAULT_PHARMACY_RATING,
    PHONE_NOT_PROVIDED,
)
from app.constants.order_tracking import UNKNOWN_PHARMACY
from app.schemas.pharmacies.pharmacy_schemas import PharmacyListing
from app.services.orders.order_tracking_core import pharmacy_display_name
from app.utils.decimal_utils import coerce_decimal


def to_listing(profile: Any) -> PharmacyListing:
    rating = coerce_decimal(profile.pharmacy_rating)
    return PharmacyListing(
        id=profile.id,
        name=pharmacy_display_name(profile),
        address=profile.address or ADDRESS_NOT_PROVIDED,
        phone=profile.phone or PHONE_NOT_PROVIDED,
        rating=rating or DEFAULT_PHARMACY_RATING,
        operating_hours=profile.operating_hours or DEFAULT_OPERATING_HOURS,
    )


def filter_pharmacies(listings: Iterable[PharmacyListing], search: str | None) -> list[PharmacyListing]:
    """Case-insensitive match on pharmacy name or address."""
    term = (search or "").strip().lower()
    if not term:
        return list(listings)

    return [
        p for p in listings
        if term in p.name.lower() or term in p.address.lower()
    ]


def sort_listings(listings: Iterable[PharmacyListing]) -> list[PharmacyListing]:
    # unnamed pharmacies go last
    return sorted(listings, key=lambda p: (p.name == UNKNOWN_PHARMACY, p.name.lower()))
