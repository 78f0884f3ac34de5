"""Order DRF serializers for API input/output.

Business logic lives in the service layer, which receives Pydantic DTOs
from ``dtos.py``; these serializers only validate HTTP payloads and shape
responses.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order, OrderItem, OrderStatusHistory
from shared.domain.money import group_by_restaurant

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CheckoutSerializer(serializers.Serializer):
    payment_method = serializers.CharField(max_length=50)
    delivery_address = serializers.CharField(required=False, default="", allow_blank=True)
    notes = serializers.CharField(required=False, default="", allow_blank=True)


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField(allow_blank=True)
    notes = serializers.CharField(required=False, default="", allow_blank=True)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.ModelSerializer):
    price = serializers.IntegerField(source="unit_price", read_only=True)

    class Meta:
        model = OrderItem
        fields = ["menu_id", "menu_name", "price", "quantity", "item_total"]
        read_only_fields = fields


class StatusHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderStatusHistory
        fields = ["id", "old_status", "new_status", "notes", "created_at"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Order with its pricing breakdown and lines grouped by restaurant."""

    pricing = serializers.SerializerMethodField()
    restaurants = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "status",
            "payment_method",
            "delivery_address",
            "notes",
            "pricing",
            "restaurants",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_pricing(self, obj: Order) -> dict:
        return obj.pricing.as_dict()

    def get_restaurants(self, obj: Order) -> list:
        items = list(obj.items.all())
        groups = group_by_restaurant(
            items,
            restaurant_of=lambda item: item.restaurant_id,
            total_of=lambda item: item.item_total,
        )
        return [
            {
                "restaurant_id": group.restaurant_id,
                "restaurant_name": group.items[0].restaurant_name,
                "items": OrderItemSerializer(group.items, many=True).data,
                "subtotal": group.subtotal,
            }
            for group in groups
        ]


class OrderDetailSerializer(OrderSerializer):
    status_history = StatusHistorySerializer(many=True, read_only=True)

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ["status_history"]
        read_only_fields = fields
