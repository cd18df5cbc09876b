#!/usr/bin/env python3
"""
Print a bearer token for a caller of the Blog Service API.

The token's ``sub`` claim becomes the caller identity used for blog
ownership.  It is signed with ``SECRET_KEY`` from the environment, so
run this with the same settings as the server.

Usage:
    python create_token.py --caller alice --days 30
"""

import argparse

from blog_service_api.app.core.security import create_access_token


def main():
    ap = argparse.ArgumentParser(description="Create a bearer token for the blog API.")
    ap.add_argument("--caller", required=True, help="Caller identity to embed as the token subject")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days (default: 365)")
    args = ap.parse_args()

    print(create_access_token({"sub": args.caller}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
