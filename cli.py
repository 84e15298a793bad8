#!/usr/bin/env python3
"""
xplit CLI: split and recover secrets using 2-of-2 secret sharing.

Usage:
    cli.py split "my secret"
    echo -n "my secret" | cli.py split
    cli.py recover <share1_b64> <share2_b64>
    cli.py verify <share1_b64> <share2_b64>
"""

import argparse
import sys

import xplit


def cmd_split(args):
    """Split a secret into two shares."""
    if args.secret is not None:
        secret = args.secret.encode('utf-8')
    else:
        # Read from stdin
        secret = sys.stdin.buffer.read()

    try:
        pair = xplit.split_secret(secret)
    except ValueError as e:
        print(f"Split FAILED: {e}", file=sys.stderr)
        return 1

    print(f"Share 1: {xplit.share_to_text(pair.share1)}")
    print(f"Share 2: {xplit.share_to_text(pair.share2)}")
    return 0


def cmd_recover(args):
    """Recover a secret from two base64 shares."""
    try:
        share1 = xplit.share_from_text(args.share1)
        share2 = xplit.share_from_text(args.share2)
        secret = xplit.recover_secret(share1, share2)
    except ValueError as e:
        print(f"Recovery FAILED: {e}", file=sys.stderr)
        return 1

    print(xplit.describe_secret(secret))
    return 0


def cmd_verify(args):
    """Verify two shares without recovering the secret."""
    try:
        share1 = xplit.share_from_text(args.share1)
        share2 = xplit.share_from_text(args.share2)
    except ValueError as e:
        print(f"Verify FAILED: {e}", file=sys.stderr)
        return 1

    result = xplit.verify_shares(share1, share2)

    print(f"Valid:       {result['valid']}")
    print(f"Payloads:    {result['payload_sizes']}")

    if result['errors']:
        print("\nErrors:")
        for e in result['errors']:
            print(f"  {e}")

    return 0 if result['valid'] else 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='xplit',
        description='Split and recover secrets using 2-of-2 secret sharing.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split a secret given on the command line
  %(prog)s split "Hello, World!"

  # Split a file (raw bytes from stdin)
  %(prog)s split < id_ed25519

  # Recover from both shares
  %(prog)s recover ZiTjk3OD6puSVM/JV3CYopI= LkGP/xyvysz9JqOtdpOmJ8A=
        """
    )

    sub = parser.add_subparsers(dest='command', help='Command')

    p_split = sub.add_parser('split', help='Split a secret into two shares')
    p_split.add_argument('secret', nargs='?', help='Secret to split (default: read stdin)')

    p_recover = sub.add_parser('recover', help='Recover a secret from two shares')
    p_recover.add_argument('share1', help='First share (base64)')
    p_recover.add_argument('share2', help='Second share (base64)')

    p_verify = sub.add_parser('verify', help='Check both shares without recovering')
    p_verify.add_argument('share1', help='First share (base64)')
    p_verify.add_argument('share2', help='Second share (base64)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    handlers = {
        'split': cmd_split,
        'recover': cmd_recover,
        'verify': cmd_verify,
    }

    return handlers[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
