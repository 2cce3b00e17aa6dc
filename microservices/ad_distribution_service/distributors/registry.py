"""
Distributor Registry

Maps platform tags to distributor implementations so the orchestrator can
treat every platform through the same contract.
"""

from typing import Dict, Iterator, List

from ..models import Platform
from ..protocols import DistributorProtocol, UnsupportedPlatformError


class DistributorRegistry:
    """Platform -> distributor lookup"""

    def __init__(self):
        self._distributors: Dict[Platform, DistributorProtocol] = {}

    def register(self, distributor: DistributorProtocol) -> None:
        self._distributors[distributor.platform] = distributor

    def get(self, platform: Platform) -> DistributorProtocol:
        """
        Raises:
            UnsupportedPlatformError: nothing registered for the platform
        """
        try:
            return self._distributors[platform]
        except KeyError:
            raise UnsupportedPlatformError(platform) from None

    @property
    def platforms(self) -> List[Platform]:
        return list(self._distributors)

    def __contains__(self, platform: object) -> bool:
        return platform in self._distributors

    def __iter__(self) -> Iterator[DistributorProtocol]:
        return iter(self._distributors.values())

    def __len__(self) -> int:
        return len(self._distributors)
