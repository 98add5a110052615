from __future__ import annotations
import os
import typing
from dataclasses import dataclass
from solders.pubkey import Pubkey
from . import constants
from .constants import Network
from .errors import InvalidInput

NETWORK_ENV = "ZETA_NETWORK"
PROGRAM_ID_ENV = "ZETA_PROGRAM_ID"
DEX_PROGRAM_ID_ENV = "ZETA_DEX_PROGRAM_ID"


@dataclass(frozen=True)
class NetworkConfig:
    network: Network
    program_id: Pubkey
    dex_program_id: Pubkey
    oracle_backup_program_id: Pubkey = constants.CHAINLINK_PID

    @classmethod
    def for_network(cls, network: Network) -> "NetworkConfig":
        return cls(
            network=network,
            program_id=constants.PROGRAM_IDS[network],
            dex_program_id=constants.DEX_PID[network],
        )


def parse_network(value: typing.Union[Network, str]) -> Network:
    if isinstance(value, Network):
        return value
    try:
        return Network(value.strip().lower())
    except ValueError:
        raise InvalidInput(f"Unknown network: {value!r}") from None


def _pubkey_override(
    environ: typing.Mapping[str, str], key: str
) -> typing.Optional[Pubkey]:
    raw = environ.get(key)
    if not raw:
        return None
    try:
        return Pubkey.from_string(raw)
    except ValueError:
        raise InvalidInput(f"{key} is not a valid base58 address: {raw!r}") from None


def load_network_config(
    network: typing.Optional[typing.Union[Network, str]] = None,
    environ: typing.Optional[typing.Mapping[str, str]] = None,
) -> NetworkConfig:
    """Resolve the per-deployment program ids.

    The network comes from the argument, then ``ZETA_NETWORK``, then devnet.
    ``ZETA_PROGRAM_ID`` and ``ZETA_DEX_PROGRAM_ID`` override the built-in ids,
    which is how localnet deployments with freshly generated keys are targeted.
    """
    if environ is None:
        environ = os.environ
    if network is None:
        network = environ.get(NETWORK_ENV, Network.DEVNET.value)
    config = NetworkConfig.for_network(parse_network(network))
    program_id = _pubkey_override(environ, PROGRAM_ID_ENV)
    dex_program_id = _pubkey_override(environ, DEX_PROGRAM_ID_ENV)
    return NetworkConfig(
        network=config.network,
        program_id=program_id or config.program_id,
        dex_program_id=dex_program_id or config.dex_program_id,
        oracle_backup_program_id=config.oracle_backup_program_id,
    )
