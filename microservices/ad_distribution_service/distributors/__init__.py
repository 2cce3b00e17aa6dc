"""
Per-platform distributors

One implementation per advertising platform, all sharing the
BaseDistributor contract.
"""

from .base import BaseDistributor, ClientFactory
from .facebook import FacebookDistributor
from .google import GoogleDistributor
from .linkedin import LinkedInDistributor
from .registry import DistributorRegistry
from .tiktok import TikTokDistributor

__all__ = [
    "BaseDistributor",
    "ClientFactory",
    "DistributorRegistry",
    "FacebookDistributor",
    "GoogleDistributor",
    "LinkedInDistributor",
    "TikTokDistributor",
]
