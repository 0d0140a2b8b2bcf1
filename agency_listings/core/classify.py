import re
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Set

from agency_listings.models import Listing

AVAILABLE_RENTALS = "availableRentals"
LEASED_UNITS = "leasedUnits"
FOR_SALE_HOUSES = "forSaleHouses"
SOLD_HOUSES = "soldHouses"

BUCKETS = (AVAILABLE_RENTALS, LEASED_UNITS, FOR_SALE_HOUSES, SOLD_HOUSES)

LEASED_STATUS_RE = re.compile(r"leased|closed|rented", re.IGNORECASE)
RENTED_STATUS_RE = re.compile(r"leased|rented", re.IGNORECASE)
RENTED_BANNER_RE = re.compile(r"rented", re.IGNORECASE)
ACTIVE_RE = re.compile(r"^active", re.IGNORECASE)
FOR_SALE_RE = re.compile(r"^(active|coming soon|pending)", re.IGNORECASE)

# Feeds each bucket is drawn from
LISTED_FEEDS = ("current", "comingSoon", "pending")
LEASED_FEEDS = ("current", "past", "sold", "pastLeased")


def is_rented(li: Listing) -> bool:
    return bool(RENTED_STATUS_RE.search(li.status) or RENTED_BANNER_RE.search(li.banner))


def is_leased(li: Listing) -> bool:
    return bool(LEASED_STATUS_RE.search(li.status)) or is_rented(li)


def is_leased_from_sold(li: Listing) -> bool:
    # "Closed" on the sold feed is a closed sale unless the listing is a rental
    return is_rented(li) or (li.is_rental and is_leased(li))


def is_available_rental(li: Listing) -> bool:
    return li.is_rental and bool(ACTIVE_RE.match(li.status))


def is_for_sale(li: Listing) -> bool:
    return not li.is_rental and bool(FOR_SALE_RE.match(li.status))


def is_sold(li: Listing) -> bool:
    # only meaningful for items of the sold feed
    return not li.is_rental and not is_rented(li)


def _listings(feeds: Mapping[str, Sequence[Mapping[str, Any]]], names: Iterable[str]) -> List[Listing]:
    out: List[Listing] = []
    for name in names:
        out.extend(Listing.from_item(it) for it in feeds.get(name) or [])
    return out


def _leased_candidates(feeds: Mapping[str, Sequence[Mapping[str, Any]]]) -> Iterable[Listing]:
    sold_keys = {li.key for li in _listings(feeds, ["sold"])}
    for li in _listings(feeds, LEASED_FEEDS):
        rule = is_leased_from_sold if li.key in sold_keys else is_leased
        if rule(li):
            yield li


def _pick(candidates: Iterable[Listing], exclude: Set[str]) -> List[Listing]:
    """Keep candidates in order, first occurrence per key, skipping `exclude`."""
    picked: List[Listing] = []
    seen = set(exclude)
    for li in candidates:
        if li.key in seen:
            continue
        seen.add(li.key)
        picked.append(li)
    return picked


def classify(feeds: Mapping[str, Sequence[Mapping[str, Any]]]) -> Dict[str, List[Mapping[str, Any]]]:
    """Partition feed items into the four output buckets.

    Overlaps are resolved in priority order: leased, then sold, then
    for-sale and available rentals. An identifying number ends up in at
    most one bucket; items matching no rule are dropped.
    """
    leased = _pick(_leased_candidates(feeds), set())
    leased_ids = {li.key for li in leased}

    past_leased_ids = {li.key for li in _listings(feeds, ["pastLeased"])}
    sold = _pick(
        (li for li in _listings(feeds, ["sold"]) if is_sold(li)),
        leased_ids | past_leased_ids,
    )
    sold_ids = {li.key for li in sold}

    listed = _listings(feeds, LISTED_FEEDS)
    for_sale = _pick((li for li in listed if is_for_sale(li)), leased_ids | sold_ids)
    rentals = _pick((li for li in listed if is_available_rental(li)), leased_ids)

    return {
        AVAILABLE_RENTALS: [li.raw for li in rentals],
        LEASED_UNITS: [li.raw for li in leased],
        FOR_SALE_HOUSES: [li.raw for li in for_sale],
        SOLD_HOUSES: [li.raw for li in sold],
    }
