"""
Issue a bearer token for a caller address.

The token only proves which address is calling; privileged routes still
check that address against the ledger's stored privileged identity.

Usage (from backend/):
    python -m scripts.issue_token 0xabc... --minutes 60
"""
import argparse

from app.config import get_settings
from app.middleware.auth import create_access_token


def main(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Sign an access token for a caller address")
    parser.add_argument("address", help="caller address to put in the token subject")
    parser.add_argument(
        "--minutes",
        type=int,
        default=settings.access_token_expire_minutes,
        help="token lifetime in minutes",
    )
    args = parser.parse_args(argv)
    print(create_access_token(args.address, expires_minutes=args.minutes))


if __name__ == "__main__":
    main()
