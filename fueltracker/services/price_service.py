"""
Price Service

Current pump prices per region. There is no live feed behind this: every
region publishes the same reference table, stamped with the time of the
request.
"""

import logging
from typing import Dict, List, Optional

from fueltracker.config import Config
from fueltracker.exceptions import RegionNotFoundError
from fueltracker.models import FuelType
from fueltracker.utils.formatting import format_currency
from fueltracker.utils.time_utils import utc_now

logger = logging.getLogger(__name__)

REGIONS = ("Istanbul", "Ankara", "Izmir", "Antalya", "Bursa")

# Price per liter in local currency
REFERENCE_PRICES = {
    FuelType.BENZIN_95: 38.76,
    FuelType.BENZIN_97: 41.85,
    FuelType.DIZEL: 37.94,
    FuelType.EURO_DIZEL: 38.52,
    FuelType.LPG: 16.28,
}

PRICE_TABLE: Dict[str, Dict[FuelType, float]] = {region: dict(REFERENCE_PRICES) for region in REGIONS}


def resolve_region(region: Optional[str] = None) -> str:
    """
    Canonical region name, matched case-insensitively.

    Raises:
        RegionNotFoundError: the region has no price table
    """
    region = (region or Config.DEFAULT_PRICE_REGION).strip()
    for known in REGIONS:
        if known.casefold() == region.casefold():
            return known
    raise RegionNotFoundError(f"No fuel prices for region '{region}'", region=region)


def get_current_prices(region: Optional[str] = None, locale: Optional[str] = None) -> List[Dict]:
    """
    Current price of every fuel type sold in a region.

    Returns:
        One dict per fuel type with date, fuel_type, price, region and
        formatted_price (e.g. "38.76 ₺/L"), in FuelType order
    """
    region = resolve_region(region)
    now = utc_now()
    table = PRICE_TABLE[region]

    prices = [
        {
            "date": now.isoformat(),
            "fuel_type": fuel_type.value,
            "price": price,
            "region": region,
            "formatted_price": f"{format_currency(price, locale)}/L",
        }
        for fuel_type, price in table.items()
    ]

    logger.debug(f"Served {len(prices)} fuel prices for {region}")
    return prices

