"""
Data models for ConfluxScan SDK
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Literal, Optional, TypedDict, TypeVar, Union

RawT = TypeVar('RawT')
FormattedT = TypeVar('FormattedT')

Scalar = Union[str, int, float, bool, None]
Params = Dict[str, Scalar]

StatsPeriod = Literal['24h', '3d', '7d']
IntervalType = Literal['min', 'hour', 'day']


@dataclass(frozen=True)
class ResponseEnvelope(Generic[RawT, FormattedT]):
    """Untouched API payload paired with its display-ready counterpart"""
    raw: RawT
    formatted: FormattedT


@dataclass(frozen=True)
class ListQuery:
    """Filters shared by the account and transfer listings"""
    skip: Optional[int] = None
    limit: Optional[int] = None
    from_address: Optional[str] = None
    to_address: Optional[str] = None
    start_block: Optional[int] = None
    end_block: Optional[int] = None
    min_timestamp: Optional[int] = None
    max_timestamp: Optional[int] = None
    sort: Optional[str] = None

    def to_params(self) -> Params:
        return {
            'skip': self.skip,
            'limit': self.limit,
            'from': self.from_address,
            'to': self.to_address,
            'startBlock': self.start_block,
            'endBlock': self.end_block,
            'minTimestamp': self.min_timestamp,
            'maxTimestamp': self.max_timestamp,
            'sort': self.sort.upper() if self.sort else None,
        }


@dataclass(frozen=True)
class StatsQuery:
    """Time window and paging for the statistics endpoints"""
    min_timestamp: Optional[int] = None
    max_timestamp: Optional[int] = None
    sort: Optional[str] = None
    skip: Optional[int] = None
    limit: Optional[int] = None
    interval_type: Optional[IntervalType] = None

    def to_params(self) -> Params:
        return {
            'minTimestamp': self.min_timestamp,
            'maxTimestamp': self.max_timestamp,
            'sort': self.sort.upper() if self.sort else None,
            'skip': self.skip,
            'limit': self.limit,
            'intervalType': self.interval_type,
        }


class ListResponse(TypedDict, total=False):
    """Paginated listing; ``addressInfo`` carries token metadata by contract"""
    total: Union[int, str]
    list: List[Dict[str, Any]]
    addressInfo: Dict[str, Dict[str, Any]]


class TokenData(TypedDict, total=False):
    """Token held by an account"""
    address: str
    name: str
    symbol: str
    decimals: int
    type: str
    amount: str
    contract: str
    priceInUSDT: str
    iconUrl: str


class StatItem(TypedDict, total=False):
    """One point of a statistics series"""
    statTime: Union[str, int]
    timestamp: Union[str, int]
    count: Union[str, int]
    total: Union[str, int]
    tps: Union[str, float]


class TopStatsItem(TypedDict, total=False):
    """One leaderboard entry"""
    address: str
    gas: str
    value: Union[str, int]
    transferCntr: Union[str, int]
    count: Union[str, int]


class MinerItem(TypedDict, total=False):
    """Top miner entry"""
    address: str
    blockCntr: Union[str, int]
    hashRate: Union[str, int]
    rewardSum: Union[str, int]
    txFeeSum: Union[str, int]


class TopStatsResponse(TypedDict, total=False):
    """Leaderboard for a span"""
    list: List[Union[TopStatsItem, MinerItem]]
    gasTotal: str
    valueTotal: Union[str, int]
    maxTime: Union[str, int]
    total: Union[str, int]


class SupplyResponse(TypedDict, total=False):
    """Supply snapshot, every amount in drip"""
    totalSupply: str
    totalCirculating: str
    totalStaking: str
    totalCollateral: str
    totalEspaceTokens: str
    totalIssued: str
    nullAddressBalance: str
    twoYearUnlockBalance: str
    fourYearUnlockBalance: str
