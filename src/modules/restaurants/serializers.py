"""Restaurant serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.restaurants.models import Menu, Restaurant

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class LocationSearchSerializer(serializers.Serializer):
    location = serializers.CharField(required=False, allow_blank=False)
    range = serializers.FloatField(required=False, min_value=0)


class DetailQuerySerializer(serializers.Serializer):
    limit_menu = serializers.IntegerField(required=False, min_value=1, max_value=50)
    limit_review = serializers.IntegerField(required=False, min_value=1, max_value=50)


# ---------------------------------------------------------------------------
# Output Serializers
# ---------------------------------------------------------------------------


class MenuSerializer(serializers.ModelSerializer):
    class Meta:
        model = Menu
        fields = ["id", "food_name", "price", "type", "image"]
        read_only_fields = fields


class RestaurantSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Restaurant
        fields = ["id", "name", "logo"]
        read_only_fields = fields


class RestaurantListSerializer(serializers.ModelSerializer):
    review_count = serializers.IntegerField(read_only=True)
    menu_count = serializers.IntegerField(read_only=True)
    price_range = serializers.SerializerMethodField()

    class Meta:
        model = Restaurant
        fields = [
            "id",
            "name",
            "rating",
            "place",
            "logo",
            "images",
            "review_count",
            "menu_count",
            "price_range",
        ]
        read_only_fields = fields

    def get_price_range(self, obj: Restaurant):
        if obj.min_price is None:
            return None
        return {"min": obj.min_price, "max": obj.max_price}

    def to_representation(self, instance):
        data = super().to_representation(instance)
        distance = getattr(instance, "distance", None)
        if distance is not None:
            data["distance"] = distance
        return data


class ReviewerSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()


class RestaurantReviewSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    star = serializers.IntegerField()
    comment = serializers.CharField()
    created_at = serializers.DateTimeField()
    user = ReviewerSerializer()


class RestaurantDetailSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="restaurant.id")
    name = serializers.CharField(source="restaurant.name")
    rating = serializers.DecimalField(
        source="restaurant.rating", max_digits=2, decimal_places=1
    )
    average_rating = serializers.DecimalField(max_digits=2, decimal_places=1)
    place = serializers.CharField(source="restaurant.place")
    coordinates = serializers.SerializerMethodField()
    logo = serializers.CharField(source="restaurant.logo")
    images = serializers.JSONField(source="restaurant.images")
    total_menus = serializers.IntegerField()
    total_reviews = serializers.IntegerField()
    menus = MenuSerializer(many=True)
    reviews = RestaurantReviewSerializer(many=True)

    def get_coordinates(self, obj):
        return {"lat": obj.restaurant.latitude, "long": obj.restaurant.longitude}


class RecommendationSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="restaurant.id")
    name = serializers.CharField(source="restaurant.name")
    rating = serializers.DecimalField(
        source="restaurant.rating", max_digits=2, decimal_places=1
    )
    place = serializers.CharField(source="restaurant.place")
    logo = serializers.CharField(source="restaurant.logo")
    images = serializers.JSONField(source="restaurant.images")
    review_count = serializers.IntegerField(source="restaurant.review_count")
    previously_ordered = serializers.BooleanField()
    sample_menus = MenuSerializer(many=True)
