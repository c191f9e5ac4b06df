from rest_framework import serializers

from .models import (
    Review,
    DEFAULT_AUTHOR,
    COMMENT_MIN_LEN,
    COMMENT_MAX_LEN,
    AUTHOR_MIN_LEN,
    AUTHOR_MAX_LEN,
    RATING_MIN,
    RATING_MAX,
)


class ReviewSerializer(serializers.ModelSerializer):
    comment = serializers.CharField(min_length=COMMENT_MIN_LEN, max_length=COMMENT_MAX_LEN)
    rating = serializers.IntegerField(min_value=RATING_MIN, max_value=RATING_MAX)
    author = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=AUTHOR_MAX_LEN,
    )

    class Meta:
        model = Review
        fields = ["id", "comment", "rating", "author", "created_at"]
        read_only_fields = ["id", "created_at"]

    def validate_comment(self, value: str):
        value = value.strip()
        # Simple "text" check - filter out controls except standard whitespace
        for ch in value:
            if ord(ch) < 32 and ch not in ("\n", "\r", "\t"):
                raise serializers.ValidationError("The comment contains invalid control characters.")
        return value

    def validate_author(self, value):
        value = (value or "").strip()
        if not value:
            return DEFAULT_AUTHOR
        if len(value) < AUTHOR_MIN_LEN:
            raise serializers.ValidationError(
                f"Ensure this field has at least {AUTHOR_MIN_LEN} characters."
            )
        return value

    def validate(self, attrs):
        # omitted author
        attrs.setdefault("author", DEFAULT_AUTHOR)
        return attrs
