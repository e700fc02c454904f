"""
Market: currencies, money, directional exchange rates and prices.
"""

from measura.market.currency import Currency, CurrencyInfo
from measura.market.exchange_rate import ExchangeRate
from measura.market.money import Money
from measura.market.price import Price

__all__ = [
    "Currency",
    "CurrencyInfo",
    "ExchangeRate",
    "Money",
    "Price",
]
