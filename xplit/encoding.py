"""
Text encoding for shares and recovered secrets.

The core deals only in raw bytes. These helpers turn shares into something a
human can copy, paste, or put in a JSON body (standard base64 with padding).
"""

import base64
import binascii
import json


def share_to_text(share: bytes) -> str:
    """Encode a share as standard base64."""
    return base64.b64encode(share).decode('ascii')


def share_from_text(text: str) -> bytes:
    """
    Decode a base64 share.

    Raises ValueError if the text is not valid base64.
    """
    try:
        return base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 share: {e}")


def pair_to_dict(pair) -> dict:
    """Both shares of a pair as base64 strings, keyed share1/share2."""
    share1, share2 = pair
    return {
        'share1': share_to_text(share1),
        'share2': share_to_text(share2),
    }


def pair_to_json(pair) -> str:
    return json.dumps(pair_to_dict(pair))


def describe_secret(secret: bytes) -> str:
    """Show a recovered secret as text when it is UTF-8, else as hex."""
    try:
        return secret.decode('utf-8')
    except UnicodeDecodeError:
        return f"Binary data (hex): {secret.hex()}"
