"""
xplit: core split/recover logic.

A secret is split into exactly two shares:

    share2 = mask || crc32(mask)
    share1 = (secret XOR mask) || crc32(secret XOR mask)

where mask is fresh random bytes of the same length as the secret. Either share
alone is indistinguishable from random bytes. Both together give back the secret.

The secrecy rests entirely on the mask: it must be uniform, drawn fresh for
every split, and never reused. Reusing a mask across two secrets lets anyone
holding one share of each recover both by XOR.
"""

import secrets

from .share import (
    encode_share, verify_and_extract, ShareError, EmptyInput, ShareLengthMismatch,
)


class SharePair:
    """The two shares produced together by one split."""

    def __init__(self, share1: bytes, share2: bytes):
        self.share1 = share1
        self.share2 = share2

    def __iter__(self):
        return iter((self.share1, self.share2))

    def __eq__(self, other):
        if not isinstance(other, SharePair):
            return NotImplemented
        return (self.share1, self.share2) == (other.share1, other.share2)


def split_secret(secret: bytes, rng=None) -> SharePair:
    """
    Split a secret into two shares, both required for recovery.

    Args:
        secret: The bytes to protect (any length > 0, no structure assumed)
        rng: Random byte provider, called as ``rng(n)`` and returning n bytes.
             Defaults to ``secrets.token_bytes``. Only substitute a
             deterministic provider in tests.

    Returns:
        SharePair with share1 = secret XOR mask, share2 = mask (each + CRC32)

    Raises:
        EmptyInput: If the secret is empty
    """
    if len(secret) == 0:
        raise EmptyInput()

    secret = bytes(secret)
    rng = rng or secrets.token_bytes

    mask = bytes(rng(len(secret)))
    if len(mask) != len(secret):
        raise RuntimeError(
            f"Random provider returned {len(mask)} bytes, expected {len(secret)}"
        )

    masked = _xor(secret, mask)

    return SharePair(encode_share(masked), encode_share(mask))


def recover_secret(share1: bytes, share2: bytes) -> bytes:
    """
    Recover the secret from both shares, verifying checksums first.

    share1 is checked before share2, so when both are bad the error reported
    is always share1's.

    Raises:
        EmptyInput: If either share is empty
        ShareTooShort: If either share is shorter than 4 bytes
        InvalidChecksum: If either share is corrupted or tampered with
        ShareLengthMismatch: If the shares were not split from the same secret length
    """
    data1 = verify_and_extract(share1)
    data2 = verify_and_extract(share2)

    if len(data1) != len(data2):
        raise ShareLengthMismatch(
            f"Share payloads differ in length ({len(data1)} vs {len(data2)} bytes). "
            "Cannot combine shares from different splits."
        )

    return _xor(data1, data2)


def verify_shares(share1: bytes, share2: bytes) -> dict:
    """
    Verify a pair of shares without recovering the secret.

    Unlike recover_secret, both shares are always checked.

    Returns dict with:
        - valid: bool (both checksums match and the lengths agree)
        - payload_sizes: payload length per share (None where invalid)
        - errors: list of error messages for invalid shares
    """
    result = {
        'valid': True,
        'payload_sizes': [],
        'errors': [],
    }

    for i, share in enumerate((share1, share2), 1):
        try:
            payload = verify_and_extract(share)
            result['payload_sizes'].append(len(payload))
        except ShareError as e:
            result['payload_sizes'].append(None)
            result['errors'].append(f"Share {i}: {e}")
            result['valid'] = False

    if result['valid']:
        size1, size2 = result['payload_sizes']
        if size1 != size2:
            result['errors'].append(
                f"Payload length mismatch ({size1} vs {size2} bytes)"
            )
            result['valid'] = False

    return result


def _xor(a: bytes, b: bytes) -> bytes:
    """Bytewise XOR of two equal-length byte strings."""
    return bytes(x ^ y for x, y in zip(a, b))
