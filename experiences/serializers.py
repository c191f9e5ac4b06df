from rest_framework import serializers

from listings.models import Listing


class ExperienceSerializer(serializers.ModelSerializer):
    """Presentation allowlist for ranked listings."""
    image = serializers.ReadOnlyField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    review_count = serializers.IntegerField(read_only=True)
    average_rating = serializers.FloatField(read_only=True)
    reviews = serializers.SerializerMethodField()

    class Meta:
        model = Listing
        fields = [
            "id", "title", "description", "image", "price",
            "location", "country", "review_count", "average_rating", "reviews",
        ]

    def get_reviews(self, obj):
        return [link.review_id for link in obj.review_links.all()]
