"""
Postal code to address lookup.

Queries the zipcloud address API and falls back to a small built-in table of
well-known codes when the service is unreachable or returns nothing usable.
Lookup never raises for network or payload problems; it returns None when no
address is found.
"""

import os
import re
from dataclasses import dataclass
from typing import Dict, Optional

import requests
from dotenv import load_dotenv

from rireki.contexts.intake.logger import _log_debug, _log_warning

load_dotenv()
POSTAL_LOOKUP_URL = os.getenv("POSTAL_LOOKUP_URL", "https://zipcloud.ibsnet.co.jp/api/search")
POSTAL_LOOKUP_TIMEOUT_S = float(os.getenv("POSTAL_LOOKUP_TIMEOUT_S", "5"))

POSTAL_CODE_LENGTH = 7


@dataclass(frozen=True)
class Address:
    """
    Address parts for one postal code.

    Attributes:
        postal_code: Seven digits, no hyphen
        prefecture: 都道府県 (e.g., "東京都")
        city: 市区町村 (e.g., "千代田区")
        address: 町域 (e.g., "千代田")
    """

    postal_code: str
    prefecture: str
    city: str
    address: str


def _fallback(postal_code: str, prefecture: str, city: str, address: str) -> Address:
    return Address(postal_code, prefecture, city, address)


FALLBACK_ADDRESSES: Dict[str, Address] = {
    entry.postal_code: entry
    for entry in (
        _fallback("1000001", "東京都", "千代田区", "千代田"),
        _fallback("1000002", "東京都", "千代田区", "皇居外苑"),
        _fallback("1000003", "東京都", "千代田区", "一ツ橋"),
        _fallback("1000004", "東京都", "千代田区", "大手町"),
        _fallback("1000005", "東京都", "千代田区", "丸の内"),
        _fallback("1000006", "東京都", "千代田区", "有楽町"),
        _fallback("1500001", "東京都", "渋谷区", "神宮前"),
        _fallback("1500002", "東京都", "渋谷区", "渋谷"),
        _fallback("1600023", "東京都", "新宿区", "西新宿"),
        _fallback("5300001", "大阪府", "大阪市北区", "梅田"),
        _fallback("6000001", "京都府", "京都市下京区", "四条通"),
        _fallback("0600001", "北海道", "札幌市中央区", "北一条西"),
        _fallback("8100001", "福岡県", "福岡市中央区", "天神"),
        _fallback("9800001", "宮城県", "仙台市青葉区", "一番町"),
        _fallback("2310001", "神奈川県", "横浜市中区", "新港"),
        _fallback("4600001", "愛知県", "名古屋市中区", "三の丸"),
    )
}


def normalize_postal_code(postal_code: str) -> Optional[str]:
    """Strip hyphens; return the code only if exactly seven digits remain."""
    clean = postal_code.replace("-", "").strip()
    if len(clean) != POSTAL_CODE_LENGTH or not clean.isdigit():
        return None
    return clean


def format_postal_code(postal_code: str) -> str:
    """
    Format as XXX-XXXX, dropping non-digits.

    Codes with fewer than four digits are returned as bare digits.

    Examples:
        format_postal_code("1000001")   # "100-0001"
        format_postal_code("100")       # "100"
    """
    digits = re.sub(r"[^0-9]", "", postal_code)
    if len(digits) >= 4:
        return f"{digits[:3]}-{digits[3:7]}"
    return digits


def _query_service(postal_code: str, timeout: float) -> Optional[Address]:
    response = requests.get(POSTAL_LOOKUP_URL, params={"zipcode": postal_code}, timeout=timeout)
    response.raise_for_status()
    payload = response.json()

    if not isinstance(payload, dict) or payload.get("status") != 200 or not payload.get("results"):
        _log_debug(f"No service result for {postal_code}")
        return None

    first = payload["results"][0]
    return Address(
        postal_code=postal_code,
        prefecture=first["address1"],
        city=first["address2"],
        address=first["address3"],
    )


def lookup_address(postal_code: str, timeout: Optional[float] = None) -> Optional[Address]:
    """
    Look up the address for a postal code.

    Args:
        postal_code: Seven digits, with or without a hyphen
        timeout: Request timeout in seconds (defaults to POSTAL_LOOKUP_TIMEOUT_S)

    Returns:
        Address, or None if the code is malformed or unknown to both the
        service and the fallback table

    Example:
        >>> lookup_address("100-0001")
        Address(postal_code='1000001', prefecture='東京都', city='千代田区', address='千代田')
    """
    clean = normalize_postal_code(postal_code)
    if clean is None:
        return None

    try:
        found = _query_service(clean, timeout or POSTAL_LOOKUP_TIMEOUT_S)
        if found:
            return found
    except (requests.RequestException, ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
        _log_warning(f"Postal code lookup failed for {clean}, using fallback table: {e}")

    return FALLBACK_ADDRESSES.get(clean)
