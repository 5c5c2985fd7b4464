"""
Storage backends that receive sealed records.
"""

from chain_seal.keeper.memory import MemoryKeeper
from chain_seal.keeper.protocol import Keeper, write_to

__all__ = [
    "Keeper",
    "MemoryKeeper",
    "write_to",
]
