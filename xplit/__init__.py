"""xplit: 2-of-2 XOR secret sharing with CRC32-checked shares."""

from .xplit import split_secret, recover_secret, verify_shares, SharePair
from .share import encode_share, verify_and_extract, CHECKSUM_SIZE
from .share import (
    ShareError, EmptyInput, ShareTooShort, InvalidChecksum, ShareLengthMismatch,
)
from .encoding import share_to_text, share_from_text, describe_secret
from .encoding import pair_to_dict, pair_to_json

__all__ = [
    'split_secret', 'recover_secret', 'verify_shares', 'SharePair',
    'encode_share', 'verify_and_extract', 'CHECKSUM_SIZE',
    'ShareError', 'EmptyInput', 'ShareTooShort', 'InvalidChecksum', 'ShareLengthMismatch',
    'share_to_text', 'share_from_text', 'describe_secret',
    'pair_to_dict', 'pair_to_json',
]
