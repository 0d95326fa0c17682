"""
Endpoint groups returning raw and formatted data side by side
"""

from .account import AccountWrapper
from .contract import ContractWrapper
from .nft import NFTWrapper
from .statistics import StatisticsWrapper
from .utils import UtilsWrapper

__all__ = [
    "AccountWrapper",
    "ContractWrapper",
    "NFTWrapper",
    "StatisticsWrapper",
    "UtilsWrapper",
]
