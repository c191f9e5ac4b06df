"""
Listing store operations. Cross-entity rules (review cascade, review
attach/detach) live here instead of in model signals.
"""
import logging

from django.db import transaction

from reviews.models import Review
from reviews.services import create_review, delete_reviews_by_ids
from wanderlust.exceptions import ReviewNotFound
from .models import Listing, ListingReview

logger = logging.getLogger(__name__)

LISTING_FIELDS = (
    "title", "description", "image_url", "image_filename",
    "price", "location", "country",
)


def create_listing(data) -> Listing:
    listing = Listing.objects.create(**{k: data[k] for k in LISTING_FIELDS if k in data})
    logger.info("Listing created listing_id=%s title=%r", listing.id, listing.title)
    return listing


def update_listing(listing: Listing, data) -> Listing:
    """Full replace: every editable field is overwritten."""
    for field in LISTING_FIELDS:
        setattr(listing, field, data.get(field, ""))
    listing.save()
    logger.info("Listing updated listing_id=%s", listing.id)
    return listing


def delete_listing(listing: Listing) -> int:
    """Delete the listing and every review it references. Returns deleted review count."""
    listing_id = listing.id
    with transaction.atomic():
        review_ids = list(listing.review_links.values_list("review_id", flat=True))
        listing.delete()
        deleted = delete_reviews_by_ids(review_ids)
    logger.info("Listing deleted listing_id=%s reviews_deleted=%s", listing_id, deleted)
    return deleted


def add_review(listing: Listing, validated_data) -> Review:
    """Create the review and append its reference to the listing in one transaction."""
    with transaction.atomic():
        review = create_review(validated_data)
        ListingReview.objects.create(listing=listing, review=review)
    logger.info("Review attached listing_id=%s review_id=%s", listing.id, review.id)
    return review


def remove_review(listing: Listing, review_id) -> None:
    with transaction.atomic():
        # lookup by the review pk, so ids outside the column range are a plain miss
        try:
            review = Review.objects.filter(listing_link__listing=listing).get(pk=review_id)
        except Review.DoesNotExist:
            logger.warning("Review not attached listing_id=%s review_id=%s", listing.id, review_id)
            raise ReviewNotFound()
        review.delete()  # cascades the link row
    logger.info("Review removed listing_id=%s review_id=%s", listing.id, review_id)
