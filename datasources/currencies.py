"""
Shared currency table: display names, flag country codes and the hardcoded USD-relative rates used by the static rate backend.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    country_code: str
    # units of this currency per 1 USD
    usd_rate: Optional[float] = None


_TABLE: List[Currency] = [
    Currency("USD", "US Dollar", "us", 1.0),
    Currency("EUR", "Euro", "eu", 0.92),
    Currency("GBP", "British Pound", "gb", 0.79),
    Currency("JPY", "Japanese Yen", "jp", 151.2),
    Currency("AUD", "Australian Dollar", "au", 1.52),
    Currency("CAD", "Canadian Dollar", "ca", 1.36),
    Currency("CHF", "Swiss Franc", "ch", 0.90),
    Currency("CNY", "Chinese Yuan", "cn", 7.23),
    Currency("HKD", "Hong Kong Dollar", "hk", 7.82),
    Currency("NZD", "New Zealand Dollar", "nz", 1.66),
    Currency("SEK", "Swedish Krona", "se", 10.68),
    Currency("KRW", "South Korean Won", "kr", 1345.0),
    Currency("SGD", "Singapore Dollar", "sg", 1.35),
    Currency("NOK", "Norwegian Krone", "no", 10.72),
    Currency("MXN", "Mexican Peso", "mx", 16.85),
    Currency("INR", "Indian Rupee", "in", 83.3),
    Currency("RUB", "Russian Ruble", "ru", 92.5),
    Currency("ZAR", "South African Rand", "za", 18.7),
    Currency("TRY", "Turkish Lira", "tr", 32.2),
    Currency("BRL", "Brazilian Real", "br", 5.05),
    Currency("TWD", "Taiwan Dollar", "tw", 32.0),
    Currency("DKK", "Danish Krone", "dk", 6.87),
    Currency("PLN", "Polish Zloty", "pl", 3.95),
    Currency("THB", "Thai Baht", "th", 36.5),
    Currency("IDR", "Indonesian Rupiah", "id", 15900.0),
    Currency("HUF", "Hungarian Forint", "hu", 362.0),
    Currency("CZK", "Czech Koruna", "cz", 23.3),
    Currency("ILS", "Israeli Shekel", "il", 3.72),
    Currency("CLP", "Chilean Peso", "cl", 945.0),
    Currency("PHP", "Philippine Peso", "ph", 56.4),
    Currency("AED", "UAE Dirham", "ae", 3.6725),
    Currency("COP", "Colombian Peso", "co", 3880.0),
    Currency("SAR", "Saudi Riyal", "sa", 3.75),
    Currency("MYR", "Malaysian Ringgit", "my", 4.74),
    Currency("RON", "Romanian Leu", "ro", 4.58),
    Currency("BTC", "Bitcoin", "btc", 0.000015),
]

CURRENCIES: Dict[str, Currency] = {c.code: c for c in _TABLE}


def normalize_code(code: str) -> str:
    return str(code or "").strip().upper()


def get_currency(code: str) -> Optional[Currency]:
    return CURRENCIES.get(normalize_code(code))


def currency_name(code: str) -> str:
    currency = get_currency(code)
    return currency.name if currency else "Unknown Currency"


def country_code(code: str) -> str:
    currency = get_currency(code)
    if currency:
        return currency.country_code
    return normalize_code(code).lower()[:2]


def cross_rate(base: str, target: str) -> Optional[float]:
    """Units of ``target`` per 1 ``base`` from the USD-relative table."""
    b, t = get_currency(base), get_currency(target)
    if b is None or t is None or not b.usd_rate or t.usd_rate is None:
        return None
    return t.usd_rate / b.usd_rate


def all_currencies() -> List[Currency]:
    return list(_TABLE)
