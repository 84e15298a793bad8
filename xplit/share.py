"""
Share codec: the binary layout of a single share.

    share := payload (L bytes) || crc32(payload) (4 bytes, big-endian)

The checksum is the IEEE 802.3 CRC-32, the same one binascii/zlib compute,
so shares interoperate bit-for-bit with any other implementation of the format.

CRC-32 detects corruption. It is NOT a MAC: someone who controls a share can
forge a different payload with a matching checksum. Changing the integrity
primitive would change the wire format.
"""

import binascii
import struct


CHECKSUM_SIZE = 4


class ShareError(ValueError):
    """Base class for every error raised while splitting or recovering."""

    code = 'share_error'
    message = 'Share error'

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class EmptyInput(ShareError):
    code = 'empty_input'
    message = 'Input is empty - cannot process empty secrets or shares'


class ShareTooShort(ShareError):
    code = 'share_too_short'
    message = 'Share is too short to contain valid data'


class InvalidChecksum(ShareError):
    code = 'invalid_checksum'
    message = 'Invalid checksum - share data may be corrupted'


class ShareLengthMismatch(ShareError):
    """Two individually valid shares carry payloads of different lengths."""

    code = 'share_length_mismatch'
    message = 'Shares have different payload lengths - they were not split together'


def encode_share(payload: bytes) -> bytes:
    """Append the big-endian CRC-32 of ``payload``."""
    payload = bytes(payload)
    return payload + struct.pack('>I', _crc32(payload))


def verify_and_extract(share: bytes) -> bytes:
    """
    Verify a share's checksum trailer and return its payload.

    Raises:
        EmptyInput: share has zero length
        ShareTooShort: share is shorter than the 4-byte checksum
        InvalidChecksum: stored checksum does not match the payload
    """
    if len(share) == 0:
        raise EmptyInput()
    if len(share) < CHECKSUM_SIZE:
        raise ShareTooShort()

    share = bytes(share)
    payload = share[:-CHECKSUM_SIZE]
    (stored_crc,) = struct.unpack('>I', share[-CHECKSUM_SIZE:])

    if _crc32(payload) != stored_crc:
        raise InvalidChecksum()

    return payload


def _crc32(data: bytes) -> int:
    """CRC32 checksum (unsigned)."""
    return binascii.crc32(data) & 0xFFFFFFFF
