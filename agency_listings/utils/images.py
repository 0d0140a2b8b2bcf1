from typing import Any, Dict, Mapping, Sequence


def ensure_image(listing: Mapping[str, Any]) -> Mapping[str, Any]:
    if listing.get("ImageURL"):
        return listing

    photos = listing.get("Photos")
    if not isinstance(photos, Sequence) or isinstance(photos, str):
        photos = []
    first_photo = photos[0] if photos and isinstance(photos[0], Mapping) else {}
    fallback = (
        listing.get("LargePhotoURL")
        or listing.get("PhotoUrl")
        or first_photo.get("Uri")
        or None
    )
    out: Dict[str, Any] = dict(listing)
    out["ImageURL"] = fallback
    return out
