from django.core.validators import MaxLengthValidator, MinLengthValidator, MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Q

DEFAULT_AUTHOR = "Anonymous"

COMMENT_MIN_LEN = 10
COMMENT_MAX_LEN = 500
AUTHOR_MIN_LEN = 2
AUTHOR_MAX_LEN = 50
RATING_MIN = 1
RATING_MAX = 5


class Review(models.Model):
    """
    A rated comment. The owning listing keeps the reference
    (listings.ListingReview), the review itself has no listing field.
    """
    comment = models.TextField(
        validators=[MinLengthValidator(COMMENT_MIN_LEN), MaxLengthValidator(COMMENT_MAX_LEN)]
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)]
    )
    author = models.CharField(max_length=AUTHOR_MAX_LEN, default=DEFAULT_AUTHOR)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(rating__gte=RATING_MIN) & Q(rating__lte=RATING_MAX),
                name="review_rating_between_1_5",
            )
        ]

    def __str__(self):
        return f"Review {self.rating}/5 by {self.author}"
