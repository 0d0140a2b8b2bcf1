from agency_listings.core.classify import (AVAILABLE_RENTALS, FOR_SALE_HOUSES, LEASED_UNITS,
                                           SOLD_HOUSES, classify, is_leased)
from agency_listings.models import Listing


def item(lid, status, rental=False, **extra):
    return {"ListingID": lid, "Status": status, "IsRental": rental, **extra}


def ids(bucket):
    return [it["ListingID"] for it in bucket]


def test_active_rental_only_in_available_rentals():
    out = classify({"current": [item(1, "Active", rental=True)]})
    assert ids(out[AVAILABLE_RENTALS]) == [1]
    assert out[FOR_SALE_HOUSES] == []
    assert out[SOLD_HOUSES] == []
    assert out[LEASED_UNITS] == []


def test_active_under_contract_matches_prefix_case_insensitively():
    out = classify({"current": [
        item(1, "active under contract", rental=True),
        item(2, "ACTIVE"),
        item(3, "Coming Soon"),
        item(4, "Pending Sale"),
    ]})
    assert ids(out[AVAILABLE_RENTALS]) == [1]
    assert ids(out[FOR_SALE_HOUSES]) == [2, 3, 4]


def test_for_sale_drawn_from_coming_soon_and_pending_feeds():
    out = classify({
        "current": [item(1, "Active")],
        "comingSoon": [item(2, "Coming Soon")],
        "pending": [item(3, "Pending"), item(1, "Active")],
    })
    assert ids(out[FOR_SALE_HOUSES]) == [1, 2, 3]


def test_leased_by_status_or_banner():
    out = classify({
        "current": [item(1, "Active", rental=True, BannerText="Rented!")],
        "past": [item(2, "Closed"), item(3, "Leased")],
        "pastLeased": [item(4, "Previously Rented")],
    })
    assert ids(out[LEASED_UNITS]) == [1, 2, 3, 4]
    # a rented banner wins over the active status
    assert out[AVAILABLE_RENTALS] == []


def test_leased_deduplicates_across_feeds():
    out = classify({
        "past": [item(1, "Leased")],
        "pastLeased": [item(1, "Leased")],
    })
    assert ids(out[LEASED_UNITS]) == [1]


def test_sold_excludes_past_leased_ids():
    out = classify({
        "sold": [item(1, "Sold"), item(2, "Sold")],
        "pastLeased": [item(2, "Expired")],
    })
    assert ids(out[SOLD_HOUSES]) == [1]


def test_sold_excludes_rentals_and_leased_status():
    out = classify({"sold": [
        item(1, "Sold", rental=True),
        item(2, "Leased"),
        item(3, "Sold", Label="Rented"),
        item(4, "Sold"),
    ]})
    assert ids(out[SOLD_HOUSES]) == [4]
    assert ids(out[LEASED_UNITS]) == [2, 3]


def test_sold_listing_not_repeated_in_for_sale():
    out = classify({"current": [item(1, "Pending")], "sold": [item(1, "Sold")]})
    assert ids(out[SOLD_HOUSES]) == [1]
    assert out[FOR_SALE_HOUSES] == []


def test_unmatched_listing_is_dropped():
    out = classify({"current": [item(1, "Withdrawn"), item(2, "Expired", rental=True)]})
    assert all(bucket == [] for bucket in out.values())


def test_string_rental_flag_and_raw_record_kept():
    raw = item("A1", "Active", rental="true", ImageURL="x.jpg")
    out = classify({"current": [raw]})
    assert out[AVAILABLE_RENTALS] == [raw]


def test_is_leased_on_listing():
    assert is_leased(Listing.from_item({"Status": "Rented"}))
    assert not is_leased(Listing.from_item({"Status": "Active"}))


def test_closed_sale_on_sold_feed_is_sold_not_leased():
    out = classify({"sold": [item(9, "Closed")]})
    assert ids(out[SOLD_HOUSES]) == [9]
    assert out[LEASED_UNITS] == []


def test_closed_sale_also_in_past_feed_stays_sold():
    out = classify({"past": [item(9, "Closed")], "sold": [item(9, "Closed")]})
    assert ids(out[SOLD_HOUSES]) == [9]
    assert out[LEASED_UNITS] == []


def test_closed_rental_on_sold_feed_is_leased():
    out = classify({"sold": [item(9, "Closed", rental=True)]})
    assert ids(out[LEASED_UNITS]) == [9]
    assert out[SOLD_HOUSES] == []
