"""Mapping between the client-facing enums and their on-chain variants.

Every ``to_program_*`` function returns the generated variant object from
``zeta_instructions.types``; every ``from_program_*`` function accepts either
that object or the decoded dict form (``{"Bid": {}}``) and raises
``InvalidVariant`` for anything it does not recognise.
"""
from __future__ import annotations
import typing
from enum import Enum, IntEnum
from . import types
from .errors import InvalidVariant


class Side(IntEnum):
    BID = 0
    ASK = 1


class OrderType(IntEnum):
    LIMIT = 0
    POSTONLY = 1
    FILLORKILL = 2
    IMMEDIATEORCANCEL = 3
    POSTONLYSLIDE = 4


class TriggerDirection(IntEnum):
    UNINITIALIZED = 0
    LESSTHANOREQUAL = 1
    GREATERTHANOREQUAL = 2


class MovementType(IntEnum):
    LOCK = 1
    UNLOCK = 2


class TreasuryMovementType(IntEnum):
    TO_TREASURY_FROM_INSURANCE = 1
    TO_INSURANCE_FROM_TREASURY = 2
    TO_TREASURY_FROM_REFERRALS_REWARDS = 3
    TO_REFERRALS_REWARDS_FROM_TREASURY = 4


class Kind(str, Enum):
    UNINITIALIZED = "uninitialized"
    CALL = "call"
    PUT = "put"
    FUTURE = "future"
    PERP = "perp"


_SIDES = {
    Side.BID: types.side.Bid(),
    Side.ASK: types.side.Ask(),
}

_ORDER_TYPES = {
    OrderType.LIMIT: types.order_type.Limit(),
    OrderType.POSTONLY: types.order_type.PostOnly(),
    OrderType.FILLORKILL: types.order_type.FillOrKill(),
    OrderType.IMMEDIATEORCANCEL: types.order_type.ImmediateOrCancel(),
    OrderType.POSTONLYSLIDE: types.order_type.PostOnlySlide(),
}

_TRIGGER_DIRECTIONS = {
    TriggerDirection.UNINITIALIZED: types.trigger_direction.Uninitialized(),
    TriggerDirection.LESSTHANOREQUAL: types.trigger_direction.LessThanOrEqual(),
    TriggerDirection.GREATERTHANOREQUAL: types.trigger_direction.GreaterThanOrEqual(),
}

_MOVEMENT_TYPES = {
    MovementType.LOCK: types.movement_type.Lock(),
    MovementType.UNLOCK: types.movement_type.Unlock(),
}

_TREASURY_MOVEMENT_TYPES = {
    TreasuryMovementType.TO_TREASURY_FROM_INSURANCE: (
        types.treasury_movement_type.ToTreasuryFromInsurance()
    ),
    TreasuryMovementType.TO_INSURANCE_FROM_TREASURY: (
        types.treasury_movement_type.ToInsuranceFromTreasury()
    ),
    TreasuryMovementType.TO_TREASURY_FROM_REFERRALS_REWARDS: (
        types.treasury_movement_type.ToTreasuryFromReferralsRewards()
    ),
    TreasuryMovementType.TO_REFERRALS_REWARDS_FROM_TREASURY: (
        types.treasury_movement_type.ToReferralsRewardsFromTreasury()
    ),
}

E = typing.TypeVar("E", bound=Enum)


def _encode(table: typing.Mapping[E, typing.Any], value: E, name: str) -> typing.Any:
    try:
        return table[value]
    except KeyError:
        raise InvalidVariant(f"Invalid {name}: {value!r}") from None


def _decode(
    table: typing.Mapping[E, typing.Any],
    module: typing.Any,
    obj: typing.Any,
    name: str,
) -> E:
    if isinstance(obj, dict):
        obj = module.from_decoded(obj)
    kind = getattr(obj, "kind", None)
    for key, variant in table.items():
        if variant.kind == kind:
            return key
    raise InvalidVariant(f"Invalid program {name}: {kind!r}")


def to_program_side(side: Side) -> types.side.SideKind:
    return _encode(_SIDES, side, "side")


def from_program_side(obj: typing.Any) -> Side:
    return _decode(_SIDES, types.side, obj, "side")


def to_program_order_type(order_type: OrderType) -> types.order_type.OrderTypeKind:
    return _encode(_ORDER_TYPES, order_type, "order type")


def from_program_order_type(obj: typing.Any) -> OrderType:
    return _decode(_ORDER_TYPES, types.order_type, obj, "order type")


def to_program_trigger_direction(
    trigger_direction: TriggerDirection,
) -> types.trigger_direction.TriggerDirectionKind:
    return _encode(_TRIGGER_DIRECTIONS, trigger_direction, "trigger direction")


def from_program_trigger_direction(obj: typing.Any) -> TriggerDirection:
    return _decode(
        _TRIGGER_DIRECTIONS, types.trigger_direction, obj, "trigger direction"
    )


def to_program_movement_type(
    movement_type: MovementType,
) -> types.movement_type.MovementTypeKind:
    return _encode(_MOVEMENT_TYPES, movement_type, "movement type")


def from_program_movement_type(obj: typing.Any) -> MovementType:
    return _decode(_MOVEMENT_TYPES, types.movement_type, obj, "movement type")


def to_program_treasury_movement_type(
    treasury_movement_type: TreasuryMovementType,
) -> types.treasury_movement_type.TreasuryMovementTypeKind:
    return _encode(
        _TREASURY_MOVEMENT_TYPES, treasury_movement_type, "treasury movement type"
    )


def from_program_treasury_movement_type(obj: typing.Any) -> TreasuryMovementType:
    return _decode(
        _TREASURY_MOVEMENT_TYPES,
        types.treasury_movement_type,
        obj,
        "treasury movement type",
    )


def to_product_kind(obj: typing.Mapping[str, typing.Any]) -> Kind:
    """Map a decoded product kind (``{"call": {}}``, ``{"Perp": {}}``) to ``Kind``."""
    keys = {str(key).lower() for key in obj}
    for kind in (Kind.CALL, Kind.PUT, Kind.FUTURE, Kind.PERP):
        if kind.value in keys:
            return kind
    raise InvalidVariant(f"Invalid product kind: {sorted(keys)}")
