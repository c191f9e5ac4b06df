from decimal import Decimal, ROUND_HALF_UP

from rest_framework import serializers

from reviews.serializers import ReviewSerializer
from .models import Listing, DEFAULT_IMAGE_FILENAME
from . import services

CENT = Decimal("0.01")
MAX_PRICE_DIGITS = 12


class ListingSerializer(serializers.ModelSerializer):
    """
    Validation for create/update (full replace) and the read representation
    used by the listing pages.
    """
    title = serializers.CharField(min_length=3, max_length=100)
    description = serializers.CharField(min_length=10, max_length=1000)
    # any non-negative number; stored with 2 decimal places
    price = serializers.DecimalField(max_digits=None, decimal_places=None, min_value=0)
    location = serializers.CharField(min_length=2, max_length=100)
    country = serializers.CharField(min_length=2, max_length=100)
    # Plain URL string on input, {url, filename} on output
    image = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=2048, write_only=True
    )
    reviews = serializers.SerializerMethodField()

    class Meta:
        model = Listing
        fields = [
            "id", "title", "description", "image", "price",
            "location", "country", "reviews", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def get_reviews(self, obj):
        if not self.context.get("with_reviews"):
            return []
        return ReviewSerializer(obj.ordered_reviews(), many=True).data

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["image"] = instance.image
        return data

    def validate_price(self, value):
        if value.adjusted() >= MAX_PRICE_DIGITS - 2:
            raise serializers.ValidationError(
                f"Ensure that there are no more than {MAX_PRICE_DIGITS - 2} digits before the decimal point."
            )
        return value.quantize(CENT, rounding=ROUND_HALF_UP)

    def validate_image(self, value):
        return (value or "").strip()

    def to_listing_fields(self, validated_data):
        data = dict(validated_data)
        data["image_url"] = data.pop("image", "") or ""
        data["image_filename"] = DEFAULT_IMAGE_FILENAME
        return data

    def create(self, validated_data):
        return services.create_listing(self.to_listing_fields(validated_data))

    def update(self, instance, validated_data):
        return services.update_listing(instance, self.to_listing_fields(validated_data))
