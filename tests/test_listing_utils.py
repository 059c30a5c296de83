# tests/test_listing_utils.py
import re
import pytest
from campus_market import listing_utils as lu
from campus_market.models import Listing
from campus_market.schemas import ListingFilter
from conftest import make_listing

def ids(listings):
    return [l.id for l in listings]

def test_absent_views_and_deleted_are_normalized():
    listing = make_listing("x", views=None, deleted=None)
    assert listing.views == 0
    assert listing.deleted is False
    assert lu.is_listing_active(listing)

def test_camel_case_and_snake_case_both_accepted():
    common = {"title": "Lamp", "price": 5, "seller": "Sam"}
    a = Listing(id="a", sellerId="u9", postedTime="2024-01-01", **common)
    b = Listing(id="b", seller_id="u9", posted_time="2024-01-01", **common)
    assert a.seller_id == b.seller_id == "u9"
    assert a.model_dump(by_alias=True)["sellerId"] == "u9"

def test_robarts_scenario(robarts_listings):
    assert ids(lu.filter_active_listings(robarts_listings)) == ["1", "3"]
    assert ids(lu.sort_listings_by_views(robarts_listings, 1)) == ["1"]
    assert ids(lu.filter_listings_by_location(robarts_listings, "robarts")) == ["1"]
    assert ids(lu.filter_listings_by_user_id(robarts_listings, "u1")) == ["1"]

def test_filter_active_is_idempotent_and_keeps_order():
    listings = [make_listing(str(i), deleted=(i % 3 == 0)) for i in range(10)]
    once = lu.filter_active_listings(listings)
    assert ids(once) == [str(i) for i in range(10) if i % 3 != 0]
    assert lu.filter_active_listings(once) == once

def test_filter_active_does_not_mutate_input(robarts_listings):
    before = list(robarts_listings)
    result = lu.filter_active_listings(robarts_listings)
    assert robarts_listings == before
    assert result is not robarts_listings

def test_empty_input_gives_empty_results():
    assert lu.filter_active_listings([]) == []
    assert lu.sort_listings_by_views([], 4) == []
    assert lu.filter_listings_by_location([], "robarts") == []
    assert lu.filter_listings_by_location([], "") == []
    assert lu.filter_listings_by_seller([], "Maya T") == []
    assert lu.filter_listings_by_user_id([], "u1") == []

def test_top_by_views_sorted_and_stable():
    listings = [
        make_listing("a", views=None),
        make_listing("b", views=7),
        make_listing("c"),
        make_listing("d", views=7),
        make_listing("e", views=0),
        make_listing("f", views=50, deleted=True),
    ]
    assert ids(lu.sort_listings_by_views(listings, 10)) == ["b", "d", "a", "c", "e"]
    assert ids(lu.sort_listings_by_views(listings)) == ["b", "d", "a", "c"]

@pytest.mark.parametrize("count,expected", [(0, 0), (1, 1), (2, 2), (99, 2)])
def test_top_by_views_length(robarts_listings, count, expected):
    assert len(lu.sort_listings_by_views(robarts_listings, count)) == expected

@pytest.mark.parametrize("count", [-1, 1.5, True])
def test_top_by_views_rejects_bad_count(robarts_listings, count):
    with pytest.raises(ValueError):
        lu.sort_listings_by_views(robarts_listings, count)

@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_location_is_no_filter(robarts_listings, query):
    assert lu.filter_listings_by_location(robarts_listings, query) == lu.filter_active_listings(robarts_listings)

def test_location_needs_a_location_value():
    listings = [make_listing("1"), make_listing("2", location="Robarts Library")]
    assert ids(lu.filter_listings_by_location(listings, "LIBRARY")) == ["2"]
    assert ids(lu.filter_listings_by_location(listings, "campus")) == []

def test_seller_match_is_exact():
    listings = [
        make_listing("1", seller="Maya T"),
        make_listing("2", seller="maya t"),
        make_listing("3", seller="Maya T", deleted=True),
    ]
    assert ids(lu.filter_listings_by_seller(listings, "Maya T")) == ["1"]

def test_user_id_match_is_case_sensitive(robarts_listings):
    assert lu.filter_listings_by_user_id(robarts_listings, "U1") == []
    assert ids(lu.filter_listings_by_user_id(robarts_listings, "u2")) == ["3"]

def test_generate_listing_id_format():
    listing_id = lu.generate_listing_id()
    m = re.fullmatch(r"listing-(\d+)-(\d+)", listing_id)
    assert m
    assert 0 <= int(m.group(2)) <= 999

def test_search_and_category_filters():
    listings = [
        make_listing("1", title="MacBook Pro", category="Electronics", price=1200),
        make_listing("2", title="Desk", description="Fits a macbook", category="furniture", price=120),
        make_listing("3", title="Calculus textbook", category=None, price=85),
    ]
    assert ids(lu.apply_filters(listings, ListingFilter(search="MACBOOK", sort_by="price-low"))) == ["2", "1"]
    assert ids(lu.apply_filters(listings, ListingFilter(category="electronics"))) == ["1"]
    assert ids(lu.apply_filters(listings, ListingFilter(min_price=85, max_price=120, sort_by="price-high"))) == ["2", "3"]

def test_sort_by_posted_time():
    listings = [
        make_listing("old", postedTime="2023-05-01T10:00:00Z"),
        make_listing("bad", postedTime="not a date"),
        make_listing("new", postedTime="2024-05-01T10:00:00+00:00"),
    ]
    assert ids(lu.sort_listings(listings, "newest")) == ["new", "old", "bad"]
    assert ids(lu.sort_listings(listings, "oldest")) == ["bad", "old", "new"]
    assert ids(lu.sort_listings(listings, "whatever")) == ["new", "old", "bad"]

def test_apply_filters_without_filters_drops_deleted(robarts_listings):
    assert sorted(ids(lu.apply_filters(robarts_listings))) == ["1", "3"]

def test_ranking_and_location_do_not_mutate_input():
    listings = [make_listing("a", views=1, location="Robarts"), make_listing("b", views=9),
                make_listing("c", views=5, location="robarts hall", deleted=True)]
    before = list(listings)
    assert ids(lu.sort_listings_by_views(listings, 3)) == ["b", "a"]
    assert listings == before
    assert ids(lu.filter_listings_by_location(listings, "ROBARTS")) == ["a"]
    assert ids(lu.filter_listings_by_location(listings, "")) == ["a", "b"]
    assert listings == before

def test_fractional_views_rank_between_integers():
    listings = [make_listing("a", views=2), make_listing("b", views=2.5), make_listing("c", views=3)]
    assert ids(lu.sort_listings_by_views(listings)) == ["c", "b", "a"]
