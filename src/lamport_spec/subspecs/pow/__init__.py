"""Proof-of-work nonce search over the shared SHA-256 digest."""

from .constants import PROD_CONFIG, TARGET_CONFIG, TEST_CONFIG, PowConfig
from .containers import MiningResult
from .miner import PROD_MINER, TARGET_MINER, TEST_MINER, Miner

__all__ = [
    "Miner",
    "MiningResult",
    "PowConfig",
    "PROD_CONFIG",
    "TEST_CONFIG",
    "TARGET_CONFIG",
    "PROD_MINER",
    "TEST_MINER",
    "TARGET_MINER",
]
