"""Cart serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.cart.models import CartEntry
from modules.restaurants.serializers import MenuSerializer, RestaurantSummarySerializer

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class AddCartItemSerializer(serializers.Serializer):
    restaurant_id = serializers.UUIDField()
    menu_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class UpdateQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)


# ---------------------------------------------------------------------------
# Output Serializers
# ---------------------------------------------------------------------------


class CartEntrySerializer(serializers.ModelSerializer):
    menu = MenuSerializer(read_only=True)
    item_total = serializers.IntegerField(read_only=True)

    class Meta:
        model = CartEntry
        fields = ["id", "restaurant_id", "menu", "quantity", "item_total", "created_at"]
        read_only_fields = fields


class CartGroupSerializer(serializers.Serializer):
    restaurant = RestaurantSummarySerializer()
    items = CartEntrySerializer(many=True)
    subtotal = serializers.IntegerField()


class CartSummarySerializer(serializers.Serializer):
    total_items = serializers.IntegerField()
    total_price = serializers.IntegerField()
    restaurant_count = serializers.IntegerField()


class CartViewSerializer(serializers.Serializer):
    cart = CartGroupSerializer(source="groups", many=True)
    summary = CartSummarySerializer()
