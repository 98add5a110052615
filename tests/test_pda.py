import pytest
from solders.pubkey import Pubkey

from zeta_instructions import pda
from zeta_instructions.constants import MAX_SEED_LENGTH, MAX_SEEDS, PROGRAM_IDS, Network
from zeta_instructions.errors import InvalidSeed

PROGRAM_ID = PROGRAM_IDS[Network.DEVNET]


def test_derive_is_deterministic():
    mint = Pubkey.new_unique()
    first = pda.get_zeta_group(PROGRAM_ID, mint)
    second = pda.get_zeta_group(PROGRAM_ID, mint)
    assert first == second
    assert 0 <= first[1] <= 255


def test_derive_matches_find_program_address():
    user = Pubkey.new_unique()
    zeta_group = Pubkey.new_unique()
    expected = Pubkey.find_program_address(
        [b"margin", bytes(zeta_group), bytes(user)], PROGRAM_ID
    )
    assert pda.get_margin_account(PROGRAM_ID, zeta_group, user) == expected


def test_distinct_seeds_give_distinct_addresses():
    zeta_group = Pubkey.new_unique()
    first, _ = pda.get_market_node(PROGRAM_ID, zeta_group, 0)
    second, _ = pda.get_market_node(PROGRAM_ID, zeta_group, 1)
    assert first != second


def test_program_id_is_part_of_the_derivation():
    mainnet = PROGRAM_IDS[Network.MAINNET]
    assert pda.get_state(PROGRAM_ID) != pda.get_state(mainnet)


def test_integer_seeds_are_little_endian():
    assert pda.u8(5) == b"\x05"
    assert pda.u64(1) == b"\x01" + b"\x00" * 7
    settlement = pda.get_settlement(PROGRAM_ID, Pubkey.default(), 1_700_000_000)
    expected = Pubkey.find_program_address(
        [b"settlement", bytes(Pubkey.default()), (1_700_000_000).to_bytes(8, "little")],
        PROGRAM_ID,
    )
    assert settlement == expected


def test_integer_seed_overflow():
    with pytest.raises(InvalidSeed):
        pda.get_market_node(PROGRAM_ID, Pubkey.new_unique(), 256)


def test_string_seed_is_utf8():
    assert pda.get_referrer_alias_address(PROGRAM_ID, "zeta") == pda.derive(
        PROGRAM_ID, [b"referrer-alias", b"zeta"]
    )


def test_seed_too_long():
    with pytest.raises(InvalidSeed):
        pda.derive(PROGRAM_ID, [b"x" * (MAX_SEED_LENGTH + 1)])


def test_alias_longer_than_a_seed():
    with pytest.raises(InvalidSeed):
        pda.get_referrer_alias_address(PROGRAM_ID, "a" * (MAX_SEED_LENGTH + 1))


def test_too_many_seeds():
    with pytest.raises(InvalidSeed):
        pda.derive(PROGRAM_ID, [b"a"] * (MAX_SEEDS + 1))
    # no room left for the bump seed
    with pytest.raises(InvalidSeed):
        pda.derive(PROGRAM_ID, [b"a"] * MAX_SEEDS)


def test_vault_owner_is_off_curve_and_stable():
    market = Pubkey.new_unique()
    dex = Pubkey.new_unique()
    owner, nonce = pda.get_serum_vault_owner_and_nonce(market, dex)
    assert not owner.is_on_curve()
    assert pda.get_serum_vault_owner_and_nonce(market, dex) == (owner, nonce)


def test_vault_owner_uses_u64_nonce_seed():
    market = Pubkey.new_unique()
    dex = Pubkey.new_unique()
    owner, nonce = pda.get_serum_vault_owner_and_nonce(market, dex)
    expected = Pubkey.create_program_address(
        [bytes(market), nonce.to_bytes(8, "little")], dex
    )
    assert owner == expected
