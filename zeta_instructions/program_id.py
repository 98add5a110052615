from solders.pubkey import Pubkey

PROGRAM_ID = Pubkey.from_string("ZETAxsqBRek56DhiGXrn75yj2NHU3aYUnxvHXpkf3aD")
