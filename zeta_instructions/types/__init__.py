import typing
from . import side
from .side import SideKind, SideJSON
from . import order_type
from .order_type import OrderTypeKind, OrderTypeJSON
from . import trigger_direction
from .trigger_direction import TriggerDirectionKind, TriggerDirectionJSON
from . import movement_type
from .movement_type import MovementTypeKind, MovementTypeJSON
from . import treasury_movement_type
from .treasury_movement_type import TreasuryMovementTypeKind, TreasuryMovementTypeJSON
from . import asset
from .asset import AssetKind, AssetJSON
from . import state_params
from .state_params import StateParams, StateParamsJSON
from . import initialize_state_args
from .initialize_state_args import InitializeStateArgs, InitializeStateArgsJSON
from . import update_pricing_parameters_args
from .update_pricing_parameters_args import UpdatePricingParametersArgs, UpdatePricingParametersArgsJSON
from . import update_margin_parameters_args
from .update_margin_parameters_args import UpdateMarginParametersArgs, UpdateMarginParametersArgsJSON
from . import update_perp_parameters_args
from .update_perp_parameters_args import UpdatePerpParametersArgs, UpdatePerpParametersArgsJSON
from . import update_zeta_group_expiry_args
from .update_zeta_group_expiry_args import UpdateZetaGroupExpiryArgs, UpdateZetaGroupExpiryArgsJSON
from . import initialize_zeta_group_args
from .initialize_zeta_group_args import InitializeZetaGroupArgs, InitializeZetaGroupArgsJSON
from . import initialize_zeta_pricing_args
from .initialize_zeta_pricing_args import InitializeZetaPricingArgs, InitializeZetaPricingArgsJSON
from . import update_zeta_pricing_pubkeys_args
from .update_zeta_pricing_pubkeys_args import UpdateZetaPricingPubkeysArgs, UpdateZetaPricingPubkeysArgsJSON
from . import initialize_market_args
from .initialize_market_args import InitializeMarketArgs, InitializeMarketArgsJSON
from . import initialize_market_node_args
from .initialize_market_node_args import InitializeMarketNodeArgs, InitializeMarketNodeArgsJSON
from . import update_halt_state_args
from .update_halt_state_args import UpdateHaltStateArgs, UpdateHaltStateArgsJSON
from . import update_volatility_args
from .update_volatility_args import UpdateVolatilityArgs, UpdateVolatilityArgsJSON
from . import update_interest_rate_args
from .update_interest_rate_args import UpdateInterestRateArgs, UpdateInterestRateArgsJSON
from . import expire_series_override_args
from .expire_series_override_args import ExpireSeriesOverrideArgs, ExpireSeriesOverrideArgsJSON
from . import position_movement_arg
from .position_movement_arg import PositionMovementArg, PositionMovementArgJSON
from . import override_expiry_args
from .override_expiry_args import OverrideExpiryArgs, OverrideExpiryArgsJSON
from . import set_referrals_rewards_args
from .set_referrals_rewards_args import SetReferralsRewardsArgs, SetReferralsRewardsArgsJSON
