"""
Request builders for sealing and sharing records.
"""

from chain_seal.requests.create import BuiltRequest, CreateRequest
from chain_seal.requests.share import PendingShare, ShareRequest

__all__ = [
    "BuiltRequest",
    "CreateRequest",
    "PendingShare",
    "ShareRequest",
]
