"""Restaurant repositories package."""

from modules.restaurants.repositories.django_repository import RestaurantDjangoRepository
from modules.restaurants.repositories.interfaces import IRestaurantRepository

__all__ = ["IRestaurantRepository", "RestaurantDjangoRepository"]
