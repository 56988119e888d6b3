"""
Presentation formatting for reports and chart labels.

Locale tables keep every user-facing string out of the analytics code:
labels, month names, decimal separator and date format. The currency
symbol is configured separately since no conversion ever happens.
"""

import logging
from datetime import datetime
from typing import Optional

from fueltracker.config import Config

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

REPORT_LOCALES = {
    "en": {
        "decimal_separator": ".",
        "date_format": "%Y-%m-%d %H:%M",
        "volume_unit": "L",
        "consumption_unit": "L/100km",
        "month_names": [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ],
        "timeframes": {"month": "Monthly", "year": "Yearly", "all": "All"},
        "no_records": "No records found.",
        "report": {
            "total_amount": "Total spend",
            "average_amount": "Average spend",
            "total_liters": "Total liters",
            "average_consumption": "Average consumption",
            "max_consumption": "Maximum consumption",
            "min_consumption": "Minimum consumption",
        },
        "issues": {
            "liters": "Date: {date} - Liters missing or invalid.",
            "price_per_liter": "Date: {date} - Price per liter missing or invalid.",
            "odometer": "Date: {date} - Odometer missing or invalid.",
            "distance": "Date: {date} - Distance cannot be negative.",
            "outlier": "Date: {date} - Unusual consumption detected.",
        },
    },
    "tr": {
        "decimal_separator": ",",
        "date_format": "%d.%m.%Y %H:%M",
        "volume_unit": "L",
        "consumption_unit": "L/100km",
        "month_names": [
            "Ocak", "Şubat", "Mart", "Nisan", "Mayıs", "Haziran",
            "Temmuz", "Ağustos", "Eylül", "Ekim", "Kasım", "Aralık",
        ],
        "timeframes": {"month": "Aylık", "year": "Yıllık", "all": "Tümü"},
        "no_records": "Kayıt bulunamadı.",
        "report": {
            "total_amount": "Toplam Harcama",
            "average_amount": "Ortalama Harcama",
            "total_liters": "Toplam Litre",
            "average_consumption": "Ortalama Tüketim",
            "max_consumption": "Maksimum Tüketim",
            "min_consumption": "Minimum Tüketim",
        },
        "issues": {
            "liters": "Tarih: {date} - Litre bilgisi eksik veya hatalı.",
            "price_per_liter": "Tarih: {date} - Litre fiyatı eksik veya hatalı.",
            "odometer": "Tarih: {date} - Kilometre bilgisi eksik veya hatalı.",
            "distance": "Tarih: {date} - Mesafe negatif olamaz.",
            "outlier": "Tarih: {date} - Olağan dışı tüketim değeri tespit edildi.",
        },
    },
}


def get_locale(code: Optional[str] = None) -> dict:
    """
    Look up a locale table, falling back to the default for unknown codes.

    Args:
        code: Locale code ("en", "tr"); None uses Config.REPORT_LOCALE
    """
    code = code or Config.REPORT_LOCALE
    table = REPORT_LOCALES.get(code)
    if table is None:
        logger.warning(f"Unknown report locale '{code}', using '{DEFAULT_LOCALE}'")
        table = REPORT_LOCALES[DEFAULT_LOCALE]
    return table


def format_amount(value: float, locale: Optional[str] = None, decimals: int = 2) -> str:
    """
    Format a number with fixed decimals and the locale's separator.

    Examples:
        >>> format_amount(20, "en")
        '20.00'
        >>> format_amount(1234.5, "tr")
        '1234,50'
    """
    text = f"{value:.{decimals}f}"
    separator = get_locale(locale)["decimal_separator"]
    if separator != ".":
        text = text.replace(".", separator)
    return text


def format_currency(value: float, locale: Optional[str] = None, symbol: Optional[str] = None) -> str:
    """Format a monetary value, e.g. '20.00 ₺'."""
    symbol = Config.CURRENCY_SYMBOL if symbol is None else symbol
    return f"{format_amount(value, locale)} {symbol}".rstrip()


def format_entry_date(date: Optional[datetime], locale: Optional[str] = None) -> str:
    if date is None:
        return "-"
    return date.strftime(get_locale(locale)["date_format"])


def month_name(month: int, locale: Optional[str] = None) -> str:
    """Calendar month name (1-12) in the given locale."""
    return get_locale(locale)["month_names"][month - 1]


def format_period_title(year: int, month: int, locale: Optional[str] = None) -> str:
    """
    Chart title for a monthly aggregate.

    Examples:
        >>> format_period_title(2024, 1, "tr")
        'Ocak 2024'
    """
    return f"{month_name(month, locale)} {year}"


def timeframe_name(time_frame, locale: Optional[str] = None) -> str:
    key = getattr(time_frame, "value", time_frame)
    return get_locale(locale)["timeframes"][key]
