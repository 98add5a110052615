from .initialize_combined_insurance_vault import (
    initialize_combined_insurance_vault,
    InitializeCombinedInsuranceVaultArgs,
    InitializeCombinedInsuranceVaultAccounts,
)
from .initialize_combined_vault import (
    initialize_combined_vault,
    InitializeCombinedVaultArgs,
    InitializeCombinedVaultAccounts,
)
from .initialize_combined_socialized_loss_account import (
    initialize_combined_socialized_loss_account,
    InitializeCombinedSocializedLossAccountArgs,
    InitializeCombinedSocializedLossAccountAccounts,
)
from .initialize_margin_account import (
    initialize_margin_account,
    InitializeMarginAccountAccounts,
)
from .close_margin_account import close_margin_account, CloseMarginAccountAccounts
from .initialize_insurance_deposit_account import (
    initialize_insurance_deposit_account,
    InitializeInsuranceDepositAccountArgs,
    InitializeInsuranceDepositAccountAccounts,
)
from .deposit import deposit, DepositArgs, DepositAccounts
from .deposit_v2 import deposit_v2, DepositV2Args, DepositV2Accounts
from .deposit_insurance_vault import (
    deposit_insurance_vault,
    DepositInsuranceVaultArgs,
    DepositInsuranceVaultAccounts,
)
from .withdraw_insurance_vault import (
    withdraw_insurance_vault,
    WithdrawInsuranceVaultArgs,
    WithdrawInsuranceVaultAccounts,
)
from .withdraw import withdraw, WithdrawArgs, WithdrawAccounts
from .withdraw_v2 import withdraw_v2, WithdrawV2Args, WithdrawV2Accounts
from .initialize_open_orders import initialize_open_orders, InitializeOpenOrdersAccounts
from .close_open_orders import (
    close_open_orders,
    CloseOpenOrdersArgs,
    CloseOpenOrdersAccounts,
)
from .place_order_v3 import place_order_v3, PlaceOrderV3Args, PlaceOrderV3Accounts
from .place_order_v4 import place_order_v4, PlaceOrderV4Args, PlaceOrderV4Accounts
from .place_perp_order import (
    place_perp_order,
    PlacePerpOrderArgs,
    PlacePerpOrderAccounts,
)
from .place_perp_order_v2 import (
    place_perp_order_v2,
    PlacePerpOrderV2Args,
    PlacePerpOrderV2Accounts,
)
from .place_perp_order_v3 import (
    place_perp_order_v3,
    PlacePerpOrderV3Args,
    PlacePerpOrderV3Accounts,
)
from .cancel_order import cancel_order, CancelOrderArgs, CancelOrderAccounts
from .cancel_order_v2 import cancel_order_v2, CancelOrderV2Args, CancelOrderV2Accounts
from .cancel_order_no_error import (
    cancel_order_no_error,
    CancelOrderNoErrorArgs,
    CancelOrderNoErrorAccounts,
)
from .prune_expired_tif_orders import (
    prune_expired_tif_orders,
    PruneExpiredTifOrdersAccounts,
)
from .cancel_all_market_orders import (
    cancel_all_market_orders,
    CancelAllMarketOrdersAccounts,
)
from .cancel_order_by_client_order_id import (
    cancel_order_by_client_order_id,
    CancelOrderByClientOrderIdArgs,
    CancelOrderByClientOrderIdAccounts,
)
from .cancel_order_by_client_order_id_no_error import (
    cancel_order_by_client_order_id_no_error,
    CancelOrderByClientOrderIdNoErrorArgs,
    CancelOrderByClientOrderIdNoErrorAccounts,
)
from .cancel_expired_order import (
    cancel_expired_order,
    CancelExpiredOrderArgs,
    CancelExpiredOrderAccounts,
)
from .force_cancel_order_by_order_id import (
    force_cancel_order_by_order_id,
    ForceCancelOrderByOrderIdArgs,
    ForceCancelOrderByOrderIdAccounts,
)
from .force_cancel_orders import force_cancel_orders, ForceCancelOrdersAccounts
from .initialize_market_tif_epoch_cycle import (
    initialize_market_tif_epoch_cycle,
    InitializeMarketTifEpochCycleArgs,
    InitializeMarketTifEpochCycleAccounts,
)
from .initialize_zeta_market import (
    initialize_zeta_market,
    InitializeZetaMarketArgs,
    InitializeZetaMarketAccounts,
)
from .initialize_perp_sync_queue import (
    initialize_perp_sync_queue,
    InitializePerpSyncQueueArgs,
    InitializePerpSyncQueueAccounts,
)
from .modify_asset import modify_asset, ModifyAssetArgs, ModifyAssetAccounts
from .initialize_zeta_group import (
    initialize_zeta_group,
    InitializeZetaGroupArgs,
    InitializeZetaGroupAccounts,
)
from .collect_treasury_funds import (
    collect_treasury_funds,
    CollectTreasuryFundsArgs,
    CollectTreasuryFundsAccounts,
)
from .treasury_movement import (
    treasury_movement,
    TreasuryMovementArgs,
    TreasuryMovementAccounts,
)
from .rebalance_insurance_vault import (
    rebalance_insurance_vault,
    RebalanceInsuranceVaultAccounts,
)
from .rebalance_insurance_vault_v2 import (
    rebalance_insurance_vault_v2,
    RebalanceInsuranceVaultV2Accounts,
)
from .liquidate import liquidate, LiquidateArgs, LiquidateAccounts
from .liquidate_v2 import liquidate_v2, LiquidateV2Args, LiquidateV2Accounts
from .crank_event_queue import crank_event_queue, CrankEventQueueAccounts
from .initialize_market_node import (
    initialize_market_node,
    InitializeMarketNodeArgs,
    InitializeMarketNodeAccounts,
)
from .retreat_market_nodes import (
    retreat_market_nodes,
    RetreatMarketNodesArgs,
    RetreatMarketNodesAccounts,
)
from .update_pricing import update_pricing, UpdatePricingArgs, UpdatePricingAccounts
from .update_pricing_v2 import (
    update_pricing_v2,
    UpdatePricingV2Args,
    UpdatePricingV2Accounts,
)
from .apply_perp_funding import apply_perp_funding, ApplyPerpFundingAccounts
from .update_pricing_parameters import (
    update_pricing_parameters,
    UpdatePricingParametersArgs,
    UpdatePricingParametersAccounts,
)
from .update_margin_parameters import (
    update_margin_parameters,
    UpdateMarginParametersArgs,
    UpdateMarginParametersAccounts,
)
from .update_perp_parameters import (
    update_perp_parameters,
    UpdatePerpParametersArgs,
    UpdatePerpParametersAccounts,
)
from .update_zeta_group_margin_parameters import (
    update_zeta_group_margin_parameters,
    UpdateZetaGroupMarginParametersArgs,
    UpdateZetaGroupMarginParametersAccounts,
)
from .update_zeta_group_perp_parameters import (
    update_zeta_group_perp_parameters,
    UpdateZetaGroupPerpParametersArgs,
    UpdateZetaGroupPerpParametersAccounts,
)
from .update_zeta_group_expiry_parameters import (
    update_zeta_group_expiry_parameters,
    UpdateZetaGroupExpiryParametersArgs,
    UpdateZetaGroupExpiryParametersAccounts,
)
from .toggle_zeta_group_perps_only import (
    toggle_zeta_group_perps_only,
    ToggleZetaGroupPerpsOnlyAccounts,
)
from .update_volatility_nodes import (
    update_volatility_nodes,
    UpdateVolatilityNodesArgs,
    UpdateVolatilityNodesAccounts,
)
from .initialize_zeta_pricing import (
    initialize_zeta_pricing,
    InitializeZetaPricingArgs,
    InitializeZetaPricingAccounts,
)
from .update_zeta_pricing_pubkeys import (
    update_zeta_pricing_pubkeys,
    UpdateZetaPricingPubkeysArgs,
    UpdateZetaPricingPubkeysAccounts,
)
from .initialize_zeta_state import (
    initialize_zeta_state,
    InitializeZetaStateArgs,
    InitializeZetaStateAccounts,
)
from .initialize_zeta_treasury_wallet import (
    initialize_zeta_treasury_wallet,
    InitializeZetaTreasuryWalletAccounts,
)
from .initialize_zeta_referrals_rewards_wallet import (
    initialize_zeta_referrals_rewards_wallet,
    InitializeZetaReferralsRewardsWalletAccounts,
)
from .update_zeta_state import (
    update_zeta_state,
    UpdateZetaStateArgs,
    UpdateZetaStateAccounts,
)
from .initialize_market_indexes import (
    initialize_market_indexes,
    InitializeMarketIndexesArgs,
    InitializeMarketIndexesAccounts,
)
from .add_market_indexes import add_market_indexes, AddMarketIndexesAccounts
from .initialize_market_strikes import (
    initialize_market_strikes,
    InitializeMarketStrikesAccounts,
)
from .initialize_whitelist_deposit_account import (
    initialize_whitelist_deposit_account,
    InitializeWhitelistDepositAccountArgs,
    InitializeWhitelistDepositAccountAccounts,
)
from .initialize_whitelist_insurance_account import (
    initialize_whitelist_insurance_account,
    InitializeWhitelistInsuranceAccountArgs,
    InitializeWhitelistInsuranceAccountAccounts,
)
from .initialize_whitelist_trading_fees_account import (
    initialize_whitelist_trading_fees_account,
    InitializeWhitelistTradingFeesAccountArgs,
    InitializeWhitelistTradingFeesAccountAccounts,
)
from .refer_user import refer_user, ReferUserAccounts
from .initialize_referrer_account import (
    initialize_referrer_account,
    InitializeReferrerAccountAccounts,
)
from .initialize_referrer_alias import (
    initialize_referrer_alias,
    InitializeReferrerAliasArgs,
    InitializeReferrerAliasAccounts,
)
from .set_referrals_rewards import (
    set_referrals_rewards,
    SetReferralsRewardsArgs,
    SetReferralsRewardsAccounts,
)
from .claim_referrals_rewards import (
    claim_referrals_rewards,
    ClaimReferralsRewardsAccounts,
)
from .settle_positions import (
    settle_positions,
    SettlePositionsArgs,
    SettlePositionsAccounts,
)
from .settle_spread_positions import (
    settle_spread_positions,
    SettleSpreadPositionsArgs,
    SettleSpreadPositionsAccounts,
)
from .settle_positions_halted import (
    settle_positions_halted,
    SettlePositionsHaltedAccounts,
)
from .settle_positions_halted_v2 import (
    settle_positions_halted_v2,
    SettlePositionsHaltedV2Accounts,
)
from .settle_spread_positions_halted import (
    settle_spread_positions_halted,
    SettleSpreadPositionsHaltedAccounts,
)
from .clean_zeta_markets import clean_zeta_markets, CleanZetaMarketsAccounts
from .clean_zeta_markets_halted import (
    clean_zeta_markets_halted,
    CleanZetaMarketsHaltedAccounts,
)
from .update_pricing_halted import (
    update_pricing_halted,
    UpdatePricingHaltedArgs,
    UpdatePricingHaltedAccounts,
)
from .clean_market_nodes import (
    clean_market_nodes,
    CleanMarketNodesArgs,
    CleanMarketNodesAccounts,
)
from .cancel_order_halted import (
    cancel_order_halted,
    CancelOrderHaltedArgs,
    CancelOrderHaltedAccounts,
)
from .halt_zeta_group import halt_zeta_group, HaltZetaGroupAccounts
from .unhalt_zeta_group import unhalt_zeta_group, UnhaltZetaGroupAccounts
from .update_halt_state import (
    update_halt_state,
    UpdateHaltStateArgs,
    UpdateHaltStateAccounts,
)
from .update_volatility import (
    update_volatility,
    UpdateVolatilityArgs,
    UpdateVolatilityAccounts,
)
from .update_interest_rate import (
    update_interest_rate,
    UpdateInterestRateArgs,
    UpdateInterestRateAccounts,
)
from .update_admin import update_admin, UpdateAdminAccounts
from .update_secondary_admin import update_secondary_admin, UpdateSecondaryAdminAccounts
from .update_referrals_admin import update_referrals_admin, UpdateReferralsAdminAccounts
from .expire_series_override import (
    expire_series_override,
    ExpireSeriesOverrideArgs,
    ExpireSeriesOverrideAccounts,
)
from .initialize_spread_account import (
    initialize_spread_account,
    InitializeSpreadAccountAccounts,
)
from .close_spread_account import close_spread_account, CloseSpreadAccountAccounts
from .position_movement import (
    position_movement,
    PositionMovementArgs,
    PositionMovementAccounts,
)
from .transfer_excess_spread_balance import (
    transfer_excess_spread_balance,
    TransferExcessSpreadBalanceAccounts,
)
from .settle_dex_funds import settle_dex_funds, SettleDexFundsAccounts
from .burn_vault_tokens import burn_vault_tokens, BurnVaultTokensAccounts
from .override_expiry import override_expiry, OverrideExpiryArgs, OverrideExpiryAccounts
from .toggle_market_maker import (
    toggle_market_maker,
    ToggleMarketMakerArgs,
    ToggleMarketMakerAccounts,
)
from .edit_delegated_pubkey import (
    edit_delegated_pubkey,
    EditDelegatedPubkeyArgs,
    EditDelegatedPubkeyAccounts,
)
