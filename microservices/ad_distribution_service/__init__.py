"""
Ad Distribution Service

Pushes one unified advertising campaign to several ad platforms:
- Unified campaign, targeting and creative model
- Per-platform validation and creation (Google Ads, Facebook/Instagram, TikTok, LinkedIn)
- Concurrent, failure-isolated distribution with aggregated results
- Platform connection status from the credential store

Port: 8260
"""

__version__ = "1.0.0"
__service__ = "ad_distribution_service"
