from dataclasses import dataclass
from typing import Any, Mapping


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value not in (None, ""):
            return value
    return None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "y")
    return bool(value)


@dataclass(frozen=True)
class Listing:
    listing_id: str | None     # "ListingID" on the agency feed
    status: str                # "Active", "Active Under Contract", "Leased", ...
    is_rental: bool
    banner: str                # "Rented", "Just Sold", ...
    raw: Mapping[str, Any]     # untouched API record

    @classmethod
    def from_item(cls, raw: Mapping[str, Any]) -> "Listing":
        listing_id = _first(raw, "ListingID", "ID", "MLSNumber")
        return cls(
            listing_id=str(listing_id) if listing_id is not None else None,
            status=str(raw.get("Status") or "").strip(),
            is_rental=_as_bool(raw.get("IsRental")),
            banner=str(_first(raw, "BannerText", "Label") or "").strip(),
            raw=raw,
        )

    @property
    def key(self) -> str:
        # records without a number are never merged with each other
        if self.listing_id is None:
            return f"anon:{id(self.raw)}"
        return self.listing_id
