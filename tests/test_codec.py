import pytest

from zeta_instructions import codec, types
from zeta_instructions.assets import (
    Asset,
    all_assets,
    asset_to_index,
    from_program_asset,
    index_to_asset,
    parse_asset,
    to_program_asset,
)
from zeta_instructions.codec import (
    Kind,
    MovementType,
    OrderType,
    Side,
    TreasuryMovementType,
    TriggerDirection,
)
from zeta_instructions.errors import InvalidInput, InvalidVariant

PAIRS = [
    (Side, codec.to_program_side, codec.from_program_side),
    (OrderType, codec.to_program_order_type, codec.from_program_order_type),
    (
        TriggerDirection,
        codec.to_program_trigger_direction,
        codec.from_program_trigger_direction,
    ),
    (MovementType, codec.to_program_movement_type, codec.from_program_movement_type),
    (
        TreasuryMovementType,
        codec.to_program_treasury_movement_type,
        codec.from_program_treasury_movement_type,
    ),
]


@pytest.mark.parametrize("enum, encode, decode", PAIRS)
def test_every_value_maps_back(enum, encode, decode):
    for value in enum:
        assert decode(encode(value)) == value
        # decoded dict form, as produced by the account decoder
        assert decode(encode(value).to_encodable()) == value


def test_side_wire_form():
    assert codec.to_program_side(Side.BID).to_encodable() == {"Bid": {}}
    assert codec.to_program_side(Side.ASK).to_encodable() == {"Ask": {}}


def test_uninitialized_side_is_rejected():
    with pytest.raises(InvalidVariant):
        codec.from_program_side(types.side.Uninitialized())


def test_unknown_tag_is_rejected():
    with pytest.raises(InvalidVariant):
        codec.from_program_order_type({"Market": {}})
    with pytest.raises(InvalidVariant):
        codec.from_program_side(object())


def test_unknown_value_is_rejected():
    with pytest.raises(InvalidVariant):
        codec.to_program_side(7)


def test_invalid_variant_is_invalid_input():
    assert issubclass(InvalidVariant, InvalidInput)


def test_product_kind():
    assert codec.to_product_kind({"perp": {}}) == Kind.PERP
    assert codec.to_product_kind({"Call": {}}) == Kind.CALL
    with pytest.raises(InvalidVariant):
        codec.to_product_kind({"swap": {}})


def test_asset_indexes():
    assert [asset_to_index(asset) for asset in all_assets()] == list(
        range(len(all_assets()))
    )
    assert index_to_asset(1) == Asset.BTC
    with pytest.raises(InvalidInput):
        index_to_asset(len(all_assets()))


def test_asset_program_form():
    for asset in all_assets():
        assert from_program_asset(to_program_asset(asset)) == asset
    assert from_program_asset({"ETH": {}}) == Asset.ETH


def test_parse_asset():
    assert parse_asset("sol") == Asset.SOL
    with pytest.raises(InvalidInput):
        parse_asset("DOGE")
