"""
xplit Web API: JSON endpoints over the split/recover core.

Shares cross the wire as base64 strings. Core errors come back as
{"ok": false, "error": <message>, "code": <error code>} with HTTP 400.
"""

import base64
import binascii
import os
import sys
from pathlib import Path

from aiohttp import web

# Ensure xplit is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import xplit


# ---------------------------------------------------------------------------
# API handlers
# ---------------------------------------------------------------------------

async def api_split(request: web.Request) -> web.Response:
    """
    POST /api/split
    Body JSON: { secret: str } or { secret_b64: str }

    If secret_b64 is provided, it's decoded as raw bytes.
    Otherwise secret is treated as UTF-8 text.

    Returns: { share1, share2 }
    """
    try:
        data = await request.json()
    except web.HTTPException:
        raise
    except Exception:
        return _err("Invalid JSON body", 400)
    if not isinstance(data, dict):
        return _err("JSON body must be an object", 400)

    secret_text = data.get("secret")
    secret_b64 = data.get("secret_b64")

    if secret_b64:
        try:
            secret = base64.b64decode(secret_b64, validate=True)
        except (binascii.Error, ValueError, TypeError):
            return _err("Invalid base64 secret", 400)
    else:
        if secret_text is None:
            secret_text = ""
        if not isinstance(secret_text, str):
            return _err("secret must be a string", 400)
        secret = secret_text.encode("utf-8")

    try:
        pair = xplit.split_secret(secret)
    except xplit.ShareError as exc:
        return _share_err("Split failed", exc)

    result = xplit.pair_to_dict(pair)
    result["ok"] = True
    return web.json_response(result)


async def api_recover(request: web.Request) -> web.Response:
    """
    POST /api/recover
    Body JSON: { share1: str, share2: str }

    Returns: { secret: str|null, secret_b64: str, secret_size: int }
    """
    try:
        data = await request.json()
    except web.HTTPException:
        raise
    except Exception:
        return _err("Invalid JSON body", 400)
    if not isinstance(data, dict):
        return _err("JSON body must be an object", 400)

    try:
        share1, share2 = _decode_pair(data)
    except ValueError as exc:
        return _err(str(exc), 400)

    try:
        secret = xplit.recover_secret(share1, share2)
    except xplit.ShareError as exc:
        return _share_err("Recovery failed", exc)

    # Try to decode as UTF-8 text; fall back to base64 only
    try:
        secret_text = secret.decode("utf-8")
    except UnicodeDecodeError:
        secret_text = None

    return web.json_response({
        "ok": True,
        "secret": secret_text,
        "secret_b64": base64.b64encode(secret).decode("ascii"),
        "secret_size": len(secret),
    })


async def api_verify(request: web.Request) -> web.Response:
    """
    POST /api/verify
    Body JSON: { share1: str, share2: str }

    Returns verification result dict.
    """
    try:
        data = await request.json()
    except web.HTTPException:
        raise
    except Exception:
        return _err("Invalid JSON body", 400)
    if not isinstance(data, dict):
        return _err("JSON body must be an object", 400)

    try:
        share1, share2 = _decode_pair(data)
    except ValueError as exc:
        return _err(str(exc), 400)

    result = xplit.verify_shares(share1, share2)
    result["ok"] = True
    return web.json_response(result)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _decode_pair(data: dict) -> tuple:
    share1 = data.get("share1")
    share2 = data.get("share2")
    if not isinstance(share1, str) or not isinstance(share2, str):
        raise ValueError("Missing share1 or share2")
    return xplit.share_from_text(share1), xplit.share_from_text(share2)


def _err(msg: str, status: int = 400) -> web.Response:
    return web.json_response({"ok": False, "error": msg}, status=status)


def _share_err(prefix: str, exc: xplit.ShareError) -> web.Response:
    return web.json_response(
        {"ok": False, "error": f"{prefix}: {exc}", "code": exc.code},
        status=400,
    )


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app() -> web.Application:
    app = web.Application(client_max_size=1024 * 1024)  # 1 MB bodies

    app.router.add_post("/api/split", api_split)
    app.router.add_post("/api/recover", api_recover)
    app.router.add_post("/api/verify", api_verify)

    return app


if __name__ == "__main__":
    host = os.environ.get("XPLIT_HOST", "0.0.0.0")
    port = int(os.environ.get("XPLIT_PORT", "8787"))
    app = create_app()
    print(f"xplit Web API: http://{host}:{port}")
    web.run_app(app, host=host, port=port)
