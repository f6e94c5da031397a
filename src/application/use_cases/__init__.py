"""Application use cases package."""

from .calculate_trip_balances import CalculateTripBalancesUseCase

__all__ = ["CalculateTripBalancesUseCase"]
