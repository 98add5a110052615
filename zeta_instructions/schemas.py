"""Closed sets of schema variants for actions deployed in more than one layout.

Each variant is a frozen dataclass carrying its ``kind`` and the
``generation`` of the deployment it targets, with a ``build`` method that
emits the instruction for that exact layout. Callers pick a variant
explicitly, or ask an ``infer_*`` helper for the newest variant the snapshot
supports; an explicitly chosen variant is always built as-is.
"""
from __future__ import annotations
import typing
from dataclasses import dataclass
from solders.instruction import Instruction
from solders.pubkey import Pubkey
from . import types
from .actions import collateral, maintenance, trading
from .actions import admin as admin_actions
from .assets import Asset
from .codec import Side
from .constants import PERP_INDEX
from .snapshot import ExchangeSnapshot, SchemaGeneration


@dataclass(frozen=True)
class PlaceOrderV3:
    kind: typing.ClassVar[str] = "place_order_v3"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    market_index: int
    params: trading.OrderParams
    margin_account: Pubkey
    authority: Pubkey
    open_orders: Pubkey
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.place_order_v3(
            snapshot,
            self.asset,
            self.market_index,
            self.params,
            self.margin_account,
            self.authority,
            self.open_orders,
            self.whitelist_trading_fees_account,
        )


@dataclass(frozen=True)
class PlaceOrderV4:
    kind: typing.ClassVar[str] = "place_order_v4"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    market_index: int
    params: trading.OrderParams
    margin_account: Pubkey
    authority: Pubkey
    open_orders: Pubkey
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.place_order_v4(
            snapshot,
            self.asset,
            self.market_index,
            self.params,
            self.margin_account,
            self.authority,
            self.open_orders,
            self.whitelist_trading_fees_account,
        )


@dataclass(frozen=True)
class PlacePerpOrder:
    kind: typing.ClassVar[str] = "place_perp_order"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    params: trading.OrderParams
    margin_account: Pubkey
    authority: Pubkey
    open_orders: Pubkey
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.place_perp_order(
            snapshot,
            self.asset,
            self.params,
            self.margin_account,
            self.authority,
            self.open_orders,
            self.whitelist_trading_fees_account,
        )


@dataclass(frozen=True)
class PlacePerpOrderV2:
    kind: typing.ClassVar[str] = "place_perp_order_v2"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    params: trading.OrderParams
    margin_account: Pubkey
    authority: Pubkey
    open_orders: Pubkey
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.place_perp_order_v2(
            snapshot,
            self.asset,
            self.params,
            self.margin_account,
            self.authority,
            self.open_orders,
            self.whitelist_trading_fees_account,
        )


@dataclass(frozen=True)
class PlacePerpOrderV3:
    kind: typing.ClassVar[str] = "place_perp_order_v3"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    asset: Asset
    params: trading.OrderParams
    margin_account: Pubkey
    authority: Pubkey
    open_orders: Pubkey
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.place_perp_order_v3(
            snapshot,
            self.asset,
            self.params,
            self.margin_account,
            self.authority,
            self.open_orders,
            self.whitelist_trading_fees_account,
        )


PlaceOrder = typing.Union[
    PlaceOrderV3, PlaceOrderV4, PlacePerpOrder, PlacePerpOrderV2, PlacePerpOrderV3
]


@dataclass(frozen=True)
class Deposit:
    kind: typing.ClassVar[str] = "deposit"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    amount: int
    margin_account: Pubkey
    user_token_account: Pubkey
    authority: Pubkey
    whitelist_deposit_account: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return collateral.deposit(
            snapshot,
            self.asset,
            self.amount,
            self.margin_account,
            self.user_token_account,
            self.authority,
            self.whitelist_deposit_account,
        )


@dataclass(frozen=True)
class DepositV2:
    kind: typing.ClassVar[str] = "deposit_v2"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    amount: int
    margin_account: Pubkey
    user_token_account: Pubkey
    authority: Pubkey
    whitelist_deposit_account: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return collateral.deposit_v2(
            snapshot,
            self.amount,
            self.margin_account,
            self.user_token_account,
            self.authority,
            self.whitelist_deposit_account,
        )


DepositVariant = typing.Union[Deposit, DepositV2]


@dataclass(frozen=True)
class Withdraw:
    kind: typing.ClassVar[str] = "withdraw"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    amount: int
    margin_account: Pubkey
    user_token_account: Pubkey
    authority: Pubkey

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return collateral.withdraw(
            snapshot,
            self.asset,
            self.amount,
            self.margin_account,
            self.user_token_account,
            self.authority,
        )


@dataclass(frozen=True)
class WithdrawV2:
    kind: typing.ClassVar[str] = "withdraw_v2"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    asset: Asset
    amount: int
    margin_account: Pubkey
    user_token_account: Pubkey
    authority: Pubkey

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return collateral.withdraw_v2(
            snapshot,
            self.asset,
            self.amount,
            self.margin_account,
            self.user_token_account,
            self.authority,
        )


WithdrawVariant = typing.Union[Withdraw, WithdrawV2]


@dataclass(frozen=True)
class CancelOrder:
    kind: typing.ClassVar[str] = "cancel_order"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    market_index: int
    authority: Pubkey
    margin_account: Pubkey
    open_orders: Pubkey
    order_id: int
    side: Side

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.cancel_order(
            snapshot,
            self.asset,
            self.market_index,
            self.authority,
            self.margin_account,
            self.open_orders,
            self.order_id,
            self.side,
        )


@dataclass(frozen=True)
class CancelOrderV2:
    kind: typing.ClassVar[str] = "cancel_order_v2"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    asset: Asset
    market_index: int
    authority: Pubkey
    margin_account: Pubkey
    open_orders: Pubkey
    order_id: int
    side: Side

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.cancel_order_v2(
            snapshot,
            self.asset,
            self.market_index,
            self.authority,
            self.margin_account,
            self.open_orders,
            self.order_id,
            self.side,
        )


CancelOrderVariant = typing.Union[CancelOrder, CancelOrderV2]


@dataclass(frozen=True)
class Liquidate:
    kind: typing.ClassVar[str] = "liquidate"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    liquidator: Pubkey
    liquidator_margin_account: Pubkey
    market: Pubkey
    liquidated_margin_account: Pubkey
    size: int

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.liquidate(
            snapshot,
            self.asset,
            self.liquidator,
            self.liquidator_margin_account,
            self.market,
            self.liquidated_margin_account,
            self.size,
        )


@dataclass(frozen=True)
class LiquidateV2:
    kind: typing.ClassVar[str] = "liquidate_v2"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    asset: Asset
    liquidator: Pubkey
    liquidator_margin_account: Pubkey
    market: Pubkey
    liquidated_margin_account: Pubkey
    size: int

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return trading.liquidate_v2(
            snapshot,
            self.asset,
            self.liquidator,
            self.liquidator_margin_account,
            self.market,
            self.liquidated_margin_account,
            self.size,
        )


LiquidateVariant = typing.Union[Liquidate, LiquidateV2]


@dataclass(frozen=True)
class UpdatePricing:
    kind: typing.ClassVar[str] = "update_pricing"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    expiry_index: typing.Optional[int] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return maintenance.update_pricing(snapshot, self.asset, self.expiry_index)


@dataclass(frozen=True)
class UpdatePricingV2:
    kind: typing.ClassVar[str] = "update_pricing_v2"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    asset: Asset

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return maintenance.update_pricing_v2(snapshot, self.asset)


UpdatePricingVariant = typing.Union[UpdatePricing, UpdatePricingV2]


@dataclass(frozen=True)
class RebalanceInsuranceVault:
    kind: typing.ClassVar[str] = "rebalance_insurance_vault"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    margin_accounts: typing.Tuple[Pubkey, ...]

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return maintenance.rebalance_insurance_vault(
            snapshot, self.asset, self.margin_accounts
        )


@dataclass(frozen=True)
class RebalanceInsuranceVaultV2:
    kind: typing.ClassVar[str] = "rebalance_insurance_vault_v2"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    margin_accounts: typing.Tuple[Pubkey, ...]

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return maintenance.rebalance_insurance_vault_v2(
            snapshot, self.margin_accounts
        )


RebalanceInsuranceVaultVariant = typing.Union[
    RebalanceInsuranceVault, RebalanceInsuranceVaultV2
]


@dataclass(frozen=True)
class SettlePositionsHalted:
    kind: typing.ClassVar[str] = "settle_positions_halted"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    margin_accounts: typing.Tuple[Pubkey, ...]
    admin: Pubkey

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return maintenance.settle_positions_halted(
            snapshot, self.asset, self.margin_accounts, self.admin
        )


@dataclass(frozen=True)
class SettlePositionsHaltedV2:
    kind: typing.ClassVar[str] = "settle_positions_halted_v2"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    margin_accounts: typing.Tuple[Pubkey, ...]
    admin: Pubkey

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return maintenance.settle_positions_halted_v2(
            snapshot, self.margin_accounts, self.admin
        )


SettlePositionsHaltedVariant = typing.Union[
    SettlePositionsHalted, SettlePositionsHaltedV2
]


@dataclass(frozen=True)
class UpdateZetaGroupMarginParameters:
    kind: typing.ClassVar[str] = "update_zeta_group_margin_parameters"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    args: types.UpdateMarginParametersArgs
    admin: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return admin_actions.update_zeta_group_margin_parameters(
            snapshot, self.asset, self.args, self.admin
        )


@dataclass(frozen=True)
class UpdateMarginParameters:
    kind: typing.ClassVar[str] = "update_margin_parameters"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    asset: Asset
    args: types.UpdateMarginParametersArgs
    admin: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return admin_actions.update_margin_parameters(
            snapshot, self.asset, self.args, self.admin
        )


UpdateMarginParametersVariant = typing.Union[
    UpdateZetaGroupMarginParameters, UpdateMarginParameters
]


@dataclass(frozen=True)
class UpdateZetaGroupPerpParameters:
    kind: typing.ClassVar[str] = "update_zeta_group_perp_parameters"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.ZETA_GROUP
    asset: Asset
    args: types.UpdatePerpParametersArgs
    admin: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return admin_actions.update_zeta_group_perp_parameters(
            snapshot, self.asset, self.args, self.admin
        )


@dataclass(frozen=True)
class UpdatePerpParameters:
    kind: typing.ClassVar[str] = "update_perp_parameters"
    generation: typing.ClassVar[SchemaGeneration] = SchemaGeneration.PRICING
    asset: Asset
    args: types.UpdatePerpParametersArgs
    admin: typing.Optional[Pubkey] = None

    def build(self, snapshot: ExchangeSnapshot) -> Instruction:
        return admin_actions.update_perp_parameters(
            snapshot, self.asset, self.args, self.admin
        )


UpdatePerpParametersVariant = typing.Union[
    UpdateZetaGroupPerpParameters, UpdatePerpParameters
]


def _supports_pricing(snapshot: ExchangeSnapshot) -> bool:
    return (
        snapshot.generation >= SchemaGeneration.PRICING
        and snapshot.pricing is not None
    )


def infer_place_order(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    params: trading.OrderParams,
    margin_account: Pubkey,
    authority: Pubkey,
    open_orders: Pubkey,
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None,
) -> PlaceOrder:
    """Newest place variant for the market kind and the snapshot's generation."""
    if market_index != PERP_INDEX:
        return PlaceOrderV4(
            asset,
            market_index,
            params,
            margin_account,
            authority,
            open_orders,
            whitelist_trading_fees_account,
        )
    perp_variant: typing.Type[typing.Union[PlacePerpOrderV2, PlacePerpOrderV3]]
    perp_variant = PlacePerpOrderV3 if _supports_pricing(snapshot) else PlacePerpOrderV2
    return perp_variant(
        asset,
        params,
        margin_account,
        authority,
        open_orders,
        whitelist_trading_fees_account,
    )


def infer_deposit(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    amount: int,
    margin_account: Pubkey,
    user_token_account: Pubkey,
    authority: Pubkey,
    whitelist_deposit_account: typing.Optional[Pubkey] = None,
) -> DepositVariant:
    if _supports_pricing(snapshot):
        return DepositV2(
            amount,
            margin_account,
            user_token_account,
            authority,
            whitelist_deposit_account,
        )
    return Deposit(
        asset,
        amount,
        margin_account,
        user_token_account,
        authority,
        whitelist_deposit_account,
    )


def infer_withdraw(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    amount: int,
    margin_account: Pubkey,
    user_token_account: Pubkey,
    authority: Pubkey,
) -> WithdrawVariant:
    variant: typing.Type[typing.Union[Withdraw, WithdrawV2]]
    variant = WithdrawV2 if _supports_pricing(snapshot) else Withdraw
    return variant(asset, amount, margin_account, user_token_account, authority)


def infer_cancel_order(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    authority: Pubkey,
    margin_account: Pubkey,
    open_orders: Pubkey,
    order_id: int,
    side: Side,
) -> CancelOrderVariant:
    variant: typing.Type[typing.Union[CancelOrder, CancelOrderV2]]
    variant = CancelOrderV2 if _supports_pricing(snapshot) else CancelOrder
    return variant(
        asset, market_index, authority, margin_account, open_orders, order_id, side
    )


def infer_liquidate(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    liquidator: Pubkey,
    liquidator_margin_account: Pubkey,
    market: Pubkey,
    liquidated_margin_account: Pubkey,
    size: int,
) -> LiquidateVariant:
    variant: typing.Type[typing.Union[Liquidate, LiquidateV2]]
    variant = LiquidateV2 if _supports_pricing(snapshot) else Liquidate
    return variant(
        asset,
        liquidator,
        liquidator_margin_account,
        market,
        liquidated_margin_account,
        size,
    )


def infer_update_pricing(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    expiry_index: typing.Optional[int] = None,
) -> UpdatePricingVariant:
    if _supports_pricing(snapshot):
        return UpdatePricingV2(asset)
    return UpdatePricing(asset, expiry_index)


def infer_rebalance_insurance_vault(
    snapshot: ExchangeSnapshot, asset: Asset, margin_accounts: typing.Sequence[Pubkey]
) -> RebalanceInsuranceVaultVariant:
    if _supports_pricing(snapshot):
        return RebalanceInsuranceVaultV2(tuple(margin_accounts))
    return RebalanceInsuranceVault(asset, tuple(margin_accounts))


def infer_settle_positions_halted(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_accounts: typing.Sequence[Pubkey],
    admin: Pubkey,
) -> SettlePositionsHaltedVariant:
    if _supports_pricing(snapshot):
        return SettlePositionsHaltedV2(tuple(margin_accounts), admin)
    return SettlePositionsHalted(asset, tuple(margin_accounts), admin)


def infer_update_margin_parameters(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdateMarginParametersArgs,
    admin: typing.Optional[Pubkey] = None,
) -> UpdateMarginParametersVariant:
    if _supports_pricing(snapshot):
        return UpdateMarginParameters(asset, args, admin)
    return UpdateZetaGroupMarginParameters(asset, args, admin)


def infer_update_perp_parameters(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdatePerpParametersArgs,
    admin: typing.Optional[Pubkey] = None,
) -> UpdatePerpParametersVariant:
    if _supports_pricing(snapshot):
        return UpdatePerpParameters(asset, args, admin)
    return UpdateZetaGroupPerpParameters(asset, args, admin)
