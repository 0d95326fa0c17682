"""
Response formatting

Each response shape has a rule table mapping field names to formatters.
Only fields named in a table are rewritten; everything else, including
absent and null fields, passes through untouched. Formatting never
mutates the raw payload.
"""

from functools import partial
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ..models import ResponseEnvelope, StatItem, TokenData, TopStatsResponse
from .dates import format_timestamp
from .numbers import (
    format_cfx,
    format_gas_price,
    format_number,
    format_token_amount,
)
from .units import CFX_DECIMALS

FieldFormatter = Callable[[Any], str]
FieldRules = Mapping[str, FieldFormatter]
ItemRules = Union[FieldRules, Callable[[Dict[str, Any]], FieldRules]]


def format_record(record: Any, rules: FieldRules) -> Any:
    """
    Apply a rule table to one record.

    Args:
        record: Record from the API (anything that is not a dict is returned as is)
        rules: Field name to formatter mapping

    Returns:
        New dict with the listed fields formatted
    """
    if not isinstance(record, dict):
        return record
    formatted = dict(record)
    for field, formatter in rules.items():
        value = formatted.get(field)
        if value is not None and value != "":
            formatted[field] = formatter(value)
    return formatted


def format_list_response(
    payload: Any,
    item_rules: ItemRules,
    top_rules: Optional[FieldRules] = None
) -> Any:
    """
    Format a paginated ``{list, total, ...}`` payload.

    Args:
        payload: Response data
        item_rules: Rule table for the items, or a callable returning the
            table for a given item
        top_rules: Rule table for the fields next to ``list``

    Returns:
        New payload with formatted items; other keys are shared with the input
    """
    if not isinstance(payload, dict):
        return payload
    formatted = format_record(payload, top_rules or {})
    items = payload.get('list')
    if isinstance(items, list):
        formatted['list'] = [
            format_record(item, item_rules(item) if callable(item_rules) else item_rules)
            for item in items
        ]
    return formatted


def resolve_decimals(address_info: Any, contract: Optional[str],
                     default: int = CFX_DECIMALS) -> int:
    """
    Look up ``address_info[contract]["token"]["decimals"]``.

    Returns the default (18) when the contract, its token entry or the
    decimals are missing or malformed.
    """
    if not contract or not isinstance(address_info, dict):
        return default
    entry = address_info.get(contract)
    token = entry.get('token') if isinstance(entry, dict) else None
    decimals = token.get('decimals') if isinstance(token, dict) else None
    if decimals is None:
        return default
    try:
        return int(decimals)
    except (TypeError, ValueError):
        return default


def wrap_response(raw: Any, formatted: Any) -> ResponseEnvelope:
    """Pair a raw payload with its formatted counterpart"""
    return ResponseEnvelope(raw=raw, formatted=formatted)


# Account

TIMESTAMP_RULES: FieldRules = {
    'timestamp': format_timestamp,
}

TRANSACTION_RULES: FieldRules = {
    'timestamp': format_timestamp,
    'gasPrice': format_gas_price,
    'gasFee': format_cfx,
    'value': format_cfx,
}

CFX_TRANSFER_RULES: FieldRules = {
    'timestamp': format_timestamp,
    'amount': format_cfx,
}


def token_transfer_rules(address_info: Any) -> Callable[[Dict[str, Any]], FieldRules]:
    """Rules for transfers whose amount is scaled by the token's decimals"""
    def rules_for(item: Dict[str, Any]) -> FieldRules:
        decimals = resolve_decimals(address_info, item.get('contract'))
        return {
            'timestamp': format_timestamp,
            'amount': partial(format_token_amount, decimals=decimals),
        }
    return rules_for


def account_token_rules(item: Dict[str, Any]) -> FieldRules:
    """Rules for a held token, scaled by its own decimals"""
    decimals = item.get('decimals')
    return {
        'amount': partial(
            format_token_amount,
            decimals=CFX_DECIMALS if decimals is None else decimals,
        ),
    }


# Statistics

STAT_LIST_RULES: FieldRules = {
    'total': format_number,
}

STAT_RULES: FieldRules = {
    'statTime': format_timestamp,
    'timestamp': format_timestamp,
    'count': format_number,
    'total': format_number,
    'tps': format_number,
    'holderCount': format_number,
    'transferCount': format_number,
    'userCount': format_number,
    'txCount': format_number,
    'uniqueSenderCount': format_number,
    'uniqueReceiverCount': format_number,
    'uniqueParticipantCount': format_number,
}

CFX_TRANSFER_STAT_RULES: FieldRules = {
    **STAT_RULES,
    'amount': format_cfx,
}

MINING_RULES: FieldRules = {
    'statTime': format_timestamp,
    'hashRate': format_number,
    'hashrate': format_number,
    'difficulty': format_number,
    'blockTime': format_number,
}

REWARD_RULES: FieldRules = {
    **STAT_RULES,
    'reward': format_cfx,
    'rewardSum': format_cfx,
    'totalReward': format_cfx,
}

BLOCK_FEE_RULES: FieldRules = {
    'timestamp': format_timestamp,
    'baseFee': format_gas_price,
    'avgPriorityFee': format_gas_price,
    'gasUsed': format_number,
}

TOP_GAS_RULES: FieldRules = {
    'gas': format_gas_price,
}

TOP_GAS_LIST_RULES: FieldRules = {
    'gasTotal': format_gas_price,
    'maxTime': format_timestamp,
}

TOP_CFX_RULES: FieldRules = {
    'value': format_cfx,
}

TOP_CFX_LIST_RULES: FieldRules = {
    'valueTotal': format_cfx,
    'maxTime': format_timestamp,
}

TOP_COUNT_RULES: FieldRules = {
    'value': format_number,
    'count': format_number,
    'transferCntr': format_number,
}

TOP_COUNT_LIST_RULES: FieldRules = {
    'valueTotal': format_number,
    'maxTime': format_timestamp,
}

MINER_RULES: FieldRules = {
    'blockCntr': format_number,
    'hashRate': format_number,
    'rewardSum': format_cfx,
    'txFeeSum': format_cfx,
}

MINER_LIST_RULES: FieldRules = {
    'maxTime': format_timestamp,
}

SUPPLY_RULES: FieldRules = {
    field: format_cfx
    for field in (
        'totalSupply',
        'totalCirculating',
        'totalStaking',
        'totalCollateral',
        'totalEspaceTokens',
        'totalIssued',
        'nullAddressBalance',
        'twoYearUnlockBalance',
        'fourYearUnlockBalance',
    )
}

# NFT

NFT_BALANCE_RULES: FieldRules = {
    'balance': format_number,
}


# Plain-text renderers

def render_token(token: TokenData) -> str:
    """
    Describe a held token on a few lines.

    Example:
        >>> print(render_token({"name": "Test", "symbol": "TST", "amount": "10", "decimals": 1}))
        Token: Test (TST)
        Type: Unknown
        Amount: 1 TST
        Contract: Unknown
    """
    symbol = token.get('symbol') or ""
    lines = [
        f"Token: {token.get('name') or 'Unknown'} ({symbol or 'Unknown'})",
        f"Type: {token.get('type') or 'Unknown'}",
        "Amount: {} {}".format(
            format_token_amount(
                token.get('amount') or "0",
                token.get('decimals') if token.get('decimals') is not None else CFX_DECIMALS,
            ),
            symbol,
        ).rstrip(),
        f"Contract: {token.get('contract') or 'Unknown'}",
    ]
    if token.get('priceInUSDT'):
        lines.append(f"Price: ${float(token['priceInUSDT']):.4f}")
    return "\n".join(lines)


def render_stat_item(item: StatItem) -> str:
    """Describe a statistics point, time first"""
    lines = [f"Time: {format_timestamp(item.get('statTime'))}"]
    lines.extend(
        f"{key}: {format_number(value)}"
        for key, value in item.items()
        if key != 'statTime'
    )
    return "\n".join(lines)


def render_top_stats(data: Optional[TopStatsResponse]) -> str:
    """Describe a leaderboard, one block per entry"""
    if not data or not data.get('list'):
        return "No data available"

    lines = []
    if data.get('gasTotal'):
        lines.append(f"Total Gas Used: {format_gas_price(data['gasTotal'])}")
    if data.get('valueTotal'):
        lines.append(f"Total Value: {format_number(data['valueTotal'])}")

    for rank, item in enumerate(data['list'], start=1):
        lines.append(f"#{rank} {item.get('address')}")
        if item.get('gas'):
            lines.append(f"Gas Used: {format_gas_price(item['gas'])}")
        if item.get('value'):
            lines.append(f"Value: {format_number(item['value'])}")
        if item.get('transferCntr'):
            lines.append(f"Transfers: {format_number(item['transferCntr'])}")
        if item.get('blockCntr'):
            lines.append(f"Blocks: {format_number(item['blockCntr'])}")

    return "\n".join(lines)
