import pytest
from django.db import IntegrityError, transaction

from listings.models import Listing, ListingReview, DEFAULT_IMAGE_URL, DEFAULT_IMAGE_FILENAME
from reviews.models import Review


@pytest.mark.django_db
def test_listing_str(listing_factory):
    listing = listing_factory(title="Nice Flat", price="123.50", location="Rome", country="Italy")
    assert str(listing) == "Nice Flat (Rome, Italy) - $123.50/night"


@pytest.mark.django_db
def test_listing_image_defaults_when_missing(listing_factory):
    listing = listing_factory()
    assert listing.image == {"url": DEFAULT_IMAGE_URL, "filename": DEFAULT_IMAGE_FILENAME}


@pytest.mark.django_db
@pytest.mark.parametrize("url", ["", "   "])
def test_listing_blank_image_falls_back_to_default(listing_factory, url):
    listing = listing_factory(image_url=url, image_filename="")
    listing.refresh_from_db()
    assert listing.image_url == DEFAULT_IMAGE_URL
    assert listing.image_filename == DEFAULT_IMAGE_FILENAME


@pytest.mark.django_db
def test_listing_custom_image_kept(listing_factory):
    listing = listing_factory(image_url="https://example.com/house.jpg")
    listing.refresh_from_db()
    assert listing.image["url"] == "https://example.com/house.jpg"
    assert listing.image["filename"] == DEFAULT_IMAGE_FILENAME


@pytest.mark.django_db
def test_listing_negative_price_rejected_by_db(listing_factory):
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            listing_factory(price="-1.00")


@pytest.mark.django_db
def test_ordered_reviews_follow_attach_order(listing_factory, review_factory):
    listing = listing_factory()
    first = review_factory(listing, rating=1, author="First")
    second = review_factory(listing, rating=5, author="Second")
    third = review_factory(listing, rating=3, author="Third")
    assert [r.id for r in listing.ordered_reviews()] == [first.id, second.id, third.id]


@pytest.mark.django_db
def test_review_defaults_and_str():
    review = Review.objects.create(comment="A perfectly fine stay.", rating=4)
    assert review.author == "Anonymous"
    assert str(review) == "Review 4/5 by Anonymous"


@pytest.mark.django_db
@pytest.mark.parametrize("rating", [0, 6])
def test_review_rating_out_of_range_rejected_by_db(rating):
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            Review.objects.create(comment="A perfectly fine stay.", rating=rating)


@pytest.mark.django_db
def test_review_belongs_to_one_listing(listing_factory, review_factory):
    first = listing_factory(title="First")
    second = listing_factory(title="Second")
    review = review_factory(first)
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            ListingReview.objects.create(listing=second, review=review)


@pytest.mark.django_db
def test_deleting_listing_row_keeps_reviews_without_service(listing_factory, review_factory):
    # the cascade to reviews is done by listings.services.delete_listing, not by the DB
    listing = listing_factory()
    review = review_factory(listing)
    Listing.objects.filter(pk=listing.pk).delete()
    assert Review.objects.filter(pk=review.pk).exists()
    assert not ListingReview.objects.filter(review=review).exists()
