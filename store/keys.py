"""
Key layout for rate and conversion records.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations


def rates(base_currency: str, target_currency: str) -> str:
    return f"rc:rates:{base_currency.upper()}:{target_currency.upper()}"


def rate_ids() -> str:
    return "rc:rates:seq"


def conversions() -> str:
    return "rc:conversions"


def conversion_ids() -> str:
    return "rc:conversions:seq"
