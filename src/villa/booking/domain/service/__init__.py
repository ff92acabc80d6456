from .price_calculator import PriceBreakdown, calculate_price, count_nights

__all__ = ["PriceBreakdown", "calculate_price", "count_nights"]
