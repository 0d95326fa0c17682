"""
Endpoint groups returning raw API data
"""

from .account import AccountModule
from .contract import ContractModule
from .nft import NFTModule
from .statistics import StatisticsModule
from .utils import UtilsModule

__all__ = [
    "AccountModule",
    "ContractModule",
    "NFTModule",
    "StatisticsModule",
    "UtilsModule",
]
