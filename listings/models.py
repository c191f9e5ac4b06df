from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q

from reviews.models import Review

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1506744038136-46273834b3fb"
    "?auto=format&fit=crop&w=800&q=80"
)
DEFAULT_IMAGE_FILENAME = "listingimage"


class Listing(models.Model):
    title = models.CharField(max_length=100)
    description = models.TextField()
    image_url = models.CharField(max_length=2048, blank=True, default=DEFAULT_IMAGE_URL)
    image_filename = models.CharField(max_length=255, blank=True, default=DEFAULT_IMAGE_FILENAME)
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    location = models.CharField(max_length=100)
    country = models.CharField(max_length=100)
    reviews = models.ManyToManyField(Review, through="ListingReview", related_name="listings")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["price"], name="listings_li_price_6f3a1c_idx"),
            models.Index(fields=["created_at"], name="listings_li_created_9b2e4d_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=Q(price__gte=0), name="listing_price_non_negative"),
        ]

    def __str__(self):
        return f"{self.title} ({self.location}, {self.country}) - ${self.price}/night"

    def save(self, *args, **kwargs):
        # every listing keeps a usable image
        if not (self.image_url or "").strip():
            self.image_url = DEFAULT_IMAGE_URL
            self.image_filename = DEFAULT_IMAGE_FILENAME
        if not self.image_filename:
            self.image_filename = DEFAULT_IMAGE_FILENAME
        super().save(*args, **kwargs)

    @property
    def image(self):
        return {"url": self.image_url, "filename": self.image_filename}

    def ordered_reviews(self):
        """Reviews in the order they were attached"""
        return Review.objects.filter(listing_link__listing=self).order_by("listing_link__id")


class ListingReview(models.Model):
    """Ordered reference from a listing to one of its reviews."""

    listing = models.ForeignKey(Listing, on_delete=models.CASCADE, related_name="review_links")
    review = models.OneToOneField(Review, on_delete=models.CASCADE, related_name="listing_link")
    attached_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["listing", "id"], name="listings_li_listing_4c8d2a_idx"),
        ]

    def __str__(self):
        return f"Review {self.review_id} on listing {self.listing_id}"
