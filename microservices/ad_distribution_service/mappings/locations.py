"""
Location Mappings

Maps human-readable location names to platform-specific location ids so
one location list can target the same place everywhere.
"""

from typing import Dict, Optional

from ..models import LocationType, UnifiedLocation

FACEBOOK_CITY_KEYS: Dict[str, str] = {
    "New York": "2490299",
    "Los Angeles": "2442047",
    "Chicago": "2379574",
    "London": "2418046",
    "Paris": "2988507",
    "Toronto": "293912",
    "Sydney": "1105779",
}

# Geo target constants
GOOGLE_LOCATION_IDS: Dict[str, int] = {
    "United States": 2840,
    "United Kingdom": 2826,
    "Canada": 2124,
    "Australia": 2036,
    "Germany": 2276,
    "France": 2250,
    "New York": 1023191,
    "Los Angeles": 1013962,
    "Chicago": 1014044,
    "London": 1006886,
    "Paris": 1006094,
    "Toronto": 9062410,
    "Sydney": 1007849,
}

LINKEDIN_LOCATION_URNS: Dict[str, str] = {
    "United States": "urn:li:geo:103644278",
    "United Kingdom": "urn:li:geo:101165590",
    "Canada": "urn:li:geo:101174742",
    "Australia": "urn:li:geo:101452733",
    "Germany": "urn:li:geo:101282230",
    "France": "urn:li:geo:105015875",
    "New York": "urn:li:geo:102571732",
    "Los Angeles": "urn:li:geo:102448103",
    "Chicago": "urn:li:geo:103112676",
    "London": "urn:li:geo:90009496",
    "Paris": "urn:li:geo:105117694",
    "Toronto": "urn:li:geo:100436921",
    "Sydney": "urn:li:geo:104769905",
}

TIKTOK_LOCATION_IDS: Dict[str, int] = {
    "United States": 6252001,
    "United Kingdom": 2635167,
    "Canada": 6251999,
    "Australia": 2077456,
    "Germany": 2921044,
    "France": 3017382,
    "New York": 5128581,
    "Los Angeles": 5368361,
    "Chicago": 4887398,
    "London": 2643743,
    "Paris": 2988507,
    "Toronto": 6167865,
    "Sydney": 2147714,
}

COUNTRY_CODES: Dict[str, str] = {
    "United States": "US",
    "United Kingdom": "GB",
    "Canada": "CA",
    "Australia": "AU",
    "Germany": "DE",
    "France": "FR",
    "Spain": "ES",
    "Italy": "IT",
    "Japan": "JP",
    "China": "CN",
    "India": "IN",
    "Brazil": "BR",
    "Mexico": "MX",
}


def get_country_code(location: UnifiedLocation) -> Optional[str]:
    if location.code:
        return location.code.upper()
    return COUNTRY_CODES.get(location.name)


def get_facebook_location_key(location: UnifiedLocation) -> Optional[str]:
    """Country code, "<country>:<zip>" for zips, or a city key from the table"""
    if location.type == LocationType.COUNTRY:
        return get_country_code(location)
    if location.type == LocationType.ZIP:
        return f"{get_country_code(location) or 'US'}:{location.name}"
    # code is the ISO country code, never a city or region key
    return FACEBOOK_CITY_KEYS.get(location.name)


def get_google_location_id(location: UnifiedLocation) -> Optional[int]:
    return GOOGLE_LOCATION_IDS.get(location.name)


def get_linkedin_location_urn(location: UnifiedLocation) -> Optional[str]:
    return LINKEDIN_LOCATION_URNS.get(location.name)


def get_tiktok_location_id(location: UnifiedLocation) -> Optional[int]:
    return TIKTOK_LOCATION_IDS.get(location.name)
