import logging

from .models import Review

logger = logging.getLogger(__name__)


def create_review(validated_data) -> Review:
    review = Review.objects.create(**validated_data)
    logger.info("Review created review_id=%s rating=%s", review.id, review.rating)
    return review


def delete_reviews_by_ids(review_ids) -> int:
    """Delete the given reviews; returns how many rows were removed."""
    review_ids = list(review_ids)
    if not review_ids:
        return 0
    _, per_model = Review.objects.filter(id__in=review_ids).delete()
    # the total also counts cascaded link rows
    deleted = per_model.get(Review._meta.label, 0)
    logger.info("Reviews deleted count=%s ids=%s", deleted, review_ids)
    return deleted
