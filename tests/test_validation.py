from decimal import Decimal

import pytest

from listings.models import DEFAULT_IMAGE_URL
from listings.serializers import ListingSerializer
from reviews.serializers import ReviewSerializer


def test_listing_payload_valid(listing_payload):
    ser = ListingSerializer(data=listing_payload)
    assert ser.is_valid(), ser.errors
    assert ser.validated_data["price"] == Decimal("120.50")
    assert ser.validated_data["image"] == ""


def test_listing_reports_every_violated_constraint():
    ser = ListingSerializer(data={
        "title": "ab",
        "description": "too short",
        "price": "-1",
        "location": "x",
        "country": "y",
    })
    assert not ser.is_valid()
    assert set(ser.errors) == {"title", "description", "price", "location", "country"}


def test_listing_missing_fields_are_required():
    ser = ListingSerializer(data={})
    assert not ser.is_valid()
    assert set(ser.errors) == {"title", "description", "price", "location", "country"}


@pytest.mark.parametrize("field,value", [
    ("title", "x" * 101),
    ("description", "x" * 1001),
    ("location", "x" * 101),
    ("country", "x" * 101),
    ("price", "abc"),
    ("price", "12345678901"),
])
def test_listing_field_bounds(listing_payload, field, value):
    listing_payload[field] = value
    ser = ListingSerializer(data=listing_payload)
    assert not ser.is_valid()
    assert field in ser.errors


def test_listing_price_zero_allowed_and_rounded(listing_payload):
    listing_payload["price"] = "0"
    assert ListingSerializer(data=listing_payload).is_valid()
    listing_payload["price"] = "10.555"
    ser = ListingSerializer(data=listing_payload)
    assert ser.is_valid(), ser.errors
    assert ser.validated_data["price"] == Decimal("10.56")


@pytest.mark.parametrize("image", [None, "", "https://example.com/a.jpg"])
def test_listing_image_optional(listing_payload, image):
    listing_payload["image"] = image
    ser = ListingSerializer(data=listing_payload)
    assert ser.is_valid(), ser.errors


def test_listing_image_can_be_omitted(listing_payload):
    listing_payload.pop("image")
    assert ListingSerializer(data=listing_payload).is_valid()


@pytest.mark.django_db
def test_listing_save_uses_default_image(listing_payload):
    ser = ListingSerializer(data=listing_payload)
    assert ser.is_valid()
    listing = ser.save()
    assert listing.image_url == DEFAULT_IMAGE_URL
    data = ListingSerializer(listing).data
    assert data["image"]["url"] == DEFAULT_IMAGE_URL
    assert data["reviews"] == []


def _review(**overrides):
    data = {"comment": "Great host and a lovely view.", "rating": 5, "author": "Maria"}
    data.update(overrides)
    return data


def test_review_valid():
    ser = ReviewSerializer(data=_review())
    assert ser.is_valid(), ser.errors
    assert ser.validated_data == {"comment": "Great host and a lovely view.", "rating": 5, "author": "Maria"}


def test_review_short_comment_rejected():
    ser = ReviewSerializer(data=_review(comment="short"))
    assert not ser.is_valid()
    assert list(ser.errors) == ["comment"]
    assert "at least 10 characters" in str(ser.errors["comment"][0])


def test_review_long_comment_rejected():
    ser = ReviewSerializer(data=_review(comment="x" * 501))
    assert not ser.is_valid()
    assert "comment" in ser.errors


@pytest.mark.parametrize("rating", [0, 6, "4.5", "five", None])
def test_review_rating_must_be_integer_1_to_5(rating):
    ser = ReviewSerializer(data=_review(rating=rating))
    assert not ser.is_valid()
    assert "rating" in ser.errors


@pytest.mark.parametrize("rating", [1, "3", 5])
def test_review_rating_bounds_inclusive(rating):
    assert ReviewSerializer(data=_review(rating=rating)).is_valid()


@pytest.mark.parametrize("author", ["A", "x" * 51])
def test_review_author_length(author):
    ser = ReviewSerializer(data=_review(author=author))
    assert not ser.is_valid()
    assert "author" in ser.errors


@pytest.mark.parametrize("author", ["", "   ", None])
def test_review_blank_author_defaults_to_anonymous(author):
    ser = ReviewSerializer(data=_review(author=author))
    assert ser.is_valid(), ser.errors
    assert ser.validated_data["author"] == "Anonymous"


def test_review_missing_author_defaults_to_anonymous():
    data = _review()
    data.pop("author")
    ser = ReviewSerializer(data=data)
    assert ser.is_valid(), ser.errors
    assert ser.validated_data["author"] == "Anonymous"


def test_review_reports_all_errors():
    ser = ReviewSerializer(data={"comment": "bad", "rating": 9, "author": "Z"})
    assert not ser.is_valid()
    assert set(ser.errors) == {"comment", "rating", "author"}
