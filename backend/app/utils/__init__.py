"""Utility functions and helpers."""

from app.utils.datetime_utils import SHOP_TIMEZONE, shop_date, to_shop_timezone, to_utc

__all__ = [
    "SHOP_TIMEZONE",
    "shop_date",
    "to_shop_timezone",
    "to_utc",
]
