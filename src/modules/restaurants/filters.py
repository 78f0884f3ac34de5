import django_filters

from modules.restaurants.models import Restaurant


class RestaurantFilter(django_filters.FilterSet):
    """Rating and menu-price filters.

    Expects the queryset annotated with ``min_price`` / ``max_price``.  A
    restaurant matches a price window when its menu price range overlaps it;
    restaurants without menus have no range and never match.
    """

    rating = django_filters.NumberFilter(field_name="rating", lookup_expr="gte")
    price_min = django_filters.NumberFilter(field_name="max_price", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="min_price", lookup_expr="lte")

    class Meta:
        model = Restaurant
        fields = ["rating", "price_min", "price_max"]
