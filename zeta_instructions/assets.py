from __future__ import annotations
import typing
from enum import Enum
from . import types
from .errors import InvalidInput, InvalidVariant


class Asset(str, Enum):
    SOL = "SOL"
    BTC = "BTC"
    ETH = "ETH"
    APT = "APT"
    ARB = "ARB"


_ORDER = (Asset.SOL, Asset.BTC, Asset.ETH, Asset.APT, Asset.ARB)

_TO_PROGRAM: dict[Asset, types.asset.AssetKind] = {
    Asset.SOL: types.asset.SOL(),
    Asset.BTC: types.asset.BTC(),
    Asset.ETH: types.asset.ETH(),
    Asset.APT: types.asset.APT(),
    Asset.ARB: types.asset.ARB(),
}


def all_assets() -> list[Asset]:
    return list(_ORDER)


def asset_to_index(asset: Asset) -> int:
    return _ORDER.index(Asset(asset))


def index_to_asset(index: int) -> Asset:
    if not 0 <= index < len(_ORDER):
        raise InvalidInput(f"Invalid asset index: {index}")
    return _ORDER[index]


def parse_asset(value: typing.Union[Asset, str]) -> Asset:
    try:
        return Asset(value.upper() if isinstance(value, str) else value)
    except ValueError:
        raise InvalidInput(f"Unknown asset: {value!r}") from None


def to_program_asset(asset: Asset) -> types.asset.AssetKind:
    return _TO_PROGRAM[Asset(asset)]


def from_program_asset(
    asset: typing.Union[types.asset.AssetKind, dict]
) -> Asset:
    if isinstance(asset, dict):
        asset = types.asset.from_decoded(asset)
    for key, value in _TO_PROGRAM.items():
        if value.kind == asset.kind:
            return key
    raise InvalidVariant(f"Invalid program asset: {asset.kind}")
