# Services Module
from .money import parse_price_text, round_money, to_decimal, to_float

__all__ = ["parse_price_text", "round_money", "to_decimal", "to_float"]
