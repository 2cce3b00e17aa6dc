"""
Call-to-Action Mappings

Normalizes call-to-action labels ("Learn More") to enum-style keys
("LEARN_MORE") and translates them into each platform's allowed values.
"""

from typing import Dict, Optional

from ..models import Platform

FACEBOOK_CTAS: Dict[str, str] = {
    "LEARN_MORE": "LEARN_MORE",
    "SHOP_NOW": "SHOP_NOW",
    "SIGN_UP": "SIGN_UP",
    "DOWNLOAD": "DOWNLOAD",
    "CONTACT_US": "CONTACT_US",
    "BOOK_NOW": "BOOK_TRAVEL",
    "APPLY_NOW": "APPLY_NOW",
    "GET_QUOTE": "GET_QUOTE",
    "SUBSCRIBE": "SUBSCRIBE",
    "WATCH_MORE": "WATCH_MORE",
}

GOOGLE_CTAS: Dict[str, str] = {
    "LEARN_MORE": "LEARN_MORE",
    "SHOP_NOW": "SHOP_NOW",
    "SIGN_UP": "SIGN_UP",
    "DOWNLOAD": "DOWNLOAD",
    "CONTACT_US": "CONTACT_US",
    "BOOK_NOW": "BOOK_NOW",
    "APPLY_NOW": "APPLY_NOW",
    "GET_QUOTE": "GET_QUOTE",
    "SUBSCRIBE": "SUBSCRIBE",
}

TIKTOK_CTAS: Dict[str, str] = {
    "LEARN_MORE": "LEARN_MORE",
    "SHOP_NOW": "SHOP_NOW",
    "SIGN_UP": "SIGN_UP",
    "DOWNLOAD": "DOWNLOAD_NOW",
    "CONTACT_US": "CONTACT_US",
    "BOOK_NOW": "BOOK_NOW",
    "APPLY_NOW": "APPLY_NOW",
    "WATCH_MORE": "WATCH_NOW",
}

LINKEDIN_CTAS: Dict[str, str] = {
    "LEARN_MORE": "LEARN_MORE",
    "SIGN_UP": "SIGN_UP",
    "DOWNLOAD": "DOWNLOAD",
    "APPLY_NOW": "APPLY",
    "GET_QUOTE": "REQUEST_DEMO",
    "SUBSCRIBE": "SUBSCRIBE",
    "CONTACT_US": "REGISTER",
}

CTA_MAPPINGS: Dict[Platform, Dict[str, str]] = {
    Platform.FACEBOOK: FACEBOOK_CTAS,
    Platform.GOOGLE: GOOGLE_CTAS,
    Platform.TIKTOK: TIKTOK_CTAS,
    Platform.LINKEDIN: LINKEDIN_CTAS,
}


def normalize_cta(label: str) -> str:
    return "_".join(label.strip().upper().replace("-", " ").split())


def map_call_to_action(platform: Platform, label: str) -> Optional[str]:
    """Native call-to-action value, or None when the platform has no equivalent"""
    return CTA_MAPPINGS.get(platform, {}).get(normalize_cta(label))
