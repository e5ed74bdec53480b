"""Marketplace algorithm table and calculator constants."""
from models.catalog import Algorithm

# WhatToMine tags entries that are marketplace aggregates rather than coins
NICEHASH_TAG = "NICEHASH"

DISCLAIMER = (
    "This program [bold]**estimates**[/bold] the profitability of buying hashing power on NiceHash\n"
    "Estimations are based on the NiceHash and WhatToMine APIs and have no guarantee of accuracy.\n"
    "Only spend what you can afford to lose."
)

# Indices follow the NiceHash legacy API numbering and must never be renumbered:
# the global price table is indexed by them.
ALGORITHMS = (
    Algorithm(0, "Scrypt", ("scrypt", "Scrypt"), "TH", "scrypt", 1_000_000),
    Algorithm(1, "SHA256", ("sha256", "SHA256", "SHA-256"), "PH", "sha256", 1_000),
    Algorithm(3, "X11", ("x11", "X11"), "TH", "x11", 1_000_000),
    Algorithm(4, "X13", ("x13", "X13"), "TH", "x13", 1_000_000),
    Algorithm(5, "Keccak", ("keccak", "Keccak"), "TH", "kec", 1_000_000),
    Algorithm(7, "Nist5", ("nist5", "Nist5", "NIST5"), "TH", "n5", 1_000_000),
    Algorithm(8, "NeoScrypt", ("neoscrypt", "NeoScrypt"), "GH", "ns", 1_000_000),
    Algorithm(11, "Qubit", ("qubit", "Qubit"), "TH", "qk", 1_000_000),
    Algorithm(12, "Quark", ("quark", "Quark"), "TH", "qrk", 1_000_000),
    Algorithm(14, "Lyra2REv2", ("lyra2rev2", "Lyra2REv2"), "TH", "lrev2", 1_000_000),
    Algorithm(16, "Blake256r8", ("blake256r8", "Blake256r8"), "TH", "blk8", 1_000),
    Algorithm(17, "Blake256r14", ("blake256r14", "Blake256r14", "Blake (14r)", "decred"), "TH", "bk14", 1_000),
    Algorithm(20, "DaggerHashimoto", ("daggerhashimoto", "DaggerHashimoto", "ethash", "Ethash"), "GH", "eth", 1_000),
    Algorithm(22, "CryptoNight", ("cryptonight", "CryptoNight"), "MH", "cn", 1_000_000),
    Algorithm(23, "Lbry", ("lbry", "Lbry", "LBRY"), "TH", "lbry", 1_000_000),
    Algorithm(24, "Equihash", ("equihash", "Equihash"), "MSol", "eq", 1_000_000),
    Algorithm(25, "Pascal", ("pascal", "Pascal"), "TH", "pas", 1_000_000),
    Algorithm(26, "X11Gost", ("x11gost", "X11Gost"), "GH", "x11g", 1_000),
    Algorithm(27, "Sia", ("sia", "Sia", "Blake (2b)"), "TH", "bk2b", 1_000),
    Algorithm(28, "Blake2s", ("blake2s", "Blake2s", "Blake (2s)"), "TH", "b2s", 1_000),
    Algorithm(29, "Skunk", ("skunk", "Skunk", "Skunkhash"), "GH", "skh", 1_000),
    Algorithm(30, "CryptoNightV7", ("cryptonightv7", "CryptoNightV7", "CryptoNight-V7"), "MH", "cn7", 1_000_000),
    Algorithm(31, "CryptoNightHeavy", ("cryptonightheavy", "CryptoNightHeavy"), "MH", "cnh", 1_000_000),
    Algorithm(32, "Lyra2Z", ("lyra2z", "Lyra2Z"), "TH", "lyra2z", 1_000_000),
    Algorithm(33, "X16R", ("x16r", "X16R", "X16Rv2"), "GH", "x16r", 1_000),
)


def find_algorithm(name):
    """Match a WhatToMine algorithm string to a marketplace algorithm, ignoring case."""
    if not name:
        return None
    wanted = name.lower()
    for algo in ALGORITHMS:
        if any(alias.lower() == wanted for alias in algo.names):
            return algo
    return None
