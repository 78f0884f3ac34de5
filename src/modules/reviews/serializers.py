"""Review serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.restaurants.serializers import ReviewerSerializer, RestaurantSummarySerializer
from modules.reviews.models import MAX_COMMENT_LENGTH, MAX_STAR, MIN_STAR, Review

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateReviewSerializer(serializers.Serializer):
    order_number = serializers.CharField(max_length=40)
    restaurant_id = serializers.UUIDField()
    star = serializers.IntegerField(min_value=MIN_STAR, max_value=MAX_STAR)
    comment = serializers.CharField(
        max_length=MAX_COMMENT_LENGTH, required=False, allow_blank=True, default=""
    )


class RestaurantReviewQuerySerializer(serializers.Serializer):
    star = serializers.IntegerField(required=False, min_value=MIN_STAR, max_value=MAX_STAR)


class UpdateReviewSerializer(serializers.Serializer):
    star = serializers.IntegerField(min_value=MIN_STAR, max_value=MAX_STAR, required=False)
    comment = serializers.CharField(
        max_length=MAX_COMMENT_LENGTH, required=False, allow_blank=True
    )

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide a star or a comment to update.")
        return attrs


# ---------------------------------------------------------------------------
# Output Serializers
# ---------------------------------------------------------------------------


class ReviewSerializer(serializers.ModelSerializer):
    user = ReviewerSerializer(read_only=True)
    restaurant = RestaurantSummarySerializer(read_only=True)
    order_number = serializers.CharField(
        source="order.order_number", read_only=True, default=None
    )

    class Meta:
        model = Review
        fields = [
            "id",
            "user",
            "restaurant",
            "order_number",
            "star",
            "comment",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class MyReviewSerializer(serializers.ModelSerializer):
    restaurant = RestaurantSummarySerializer(read_only=True)

    class Meta:
        model = Review
        fields = ["id", "restaurant", "star", "comment", "created_at", "updated_at"]
        read_only_fields = fields


class RestaurantReviewItemSerializer(serializers.ModelSerializer):
    user = ReviewerSerializer(read_only=True)

    class Meta:
        model = Review
        fields = ["id", "user", "star", "comment", "created_at"]
        read_only_fields = fields


class ReviewStatisticsSerializer(serializers.Serializer):
    total_reviews = serializers.IntegerField()
    average_rating = serializers.DecimalField(max_digits=2, decimal_places=1)
    rating_distribution = serializers.DictField(child=serializers.IntegerField())
