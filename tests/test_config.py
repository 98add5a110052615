import pytest
from solders.pubkey import Pubkey

from zeta_instructions.config import load_network_config, parse_network
from zeta_instructions.constants import DEX_PID, PROGRAM_IDS, Network
from zeta_instructions.errors import InvalidInput


def test_defaults_to_devnet():
    config = load_network_config(environ={})
    assert config.network == Network.DEVNET
    assert config.program_id == PROGRAM_IDS[Network.DEVNET]
    assert config.dex_program_id == DEX_PID[Network.DEVNET]


def test_network_from_environment():
    config = load_network_config(environ={"ZETA_NETWORK": "Mainnet"})
    assert config.program_id == PROGRAM_IDS[Network.MAINNET]


def test_argument_beats_environment():
    config = load_network_config("localnet", environ={"ZETA_NETWORK": "mainnet"})
    assert config.network == Network.LOCALNET


def test_program_id_overrides():
    program_id = Pubkey.new_unique()
    dex_program_id = Pubkey.new_unique()
    config = load_network_config(
        Network.LOCALNET,
        environ={
            "ZETA_PROGRAM_ID": str(program_id),
            "ZETA_DEX_PROGRAM_ID": str(dex_program_id),
        },
    )
    assert config.program_id == program_id
    assert config.dex_program_id == dex_program_id


def test_invalid_override():
    with pytest.raises(InvalidInput):
        load_network_config(environ={"ZETA_PROGRAM_ID": "not-a-key"})


def test_unknown_network():
    with pytest.raises(InvalidInput):
        parse_network("testnet")
