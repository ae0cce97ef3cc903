"""Print a bearer token for a caller principal.

Usage:
    python create_token.py <principal> [--days N]
"""
import argparse

from wisewords_api.app.core.security import create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Issue an API token for a principal")
    parser.add_argument("principal", help="caller identity stored as the contributor owner")
    parser.add_argument("--days", type=int, default=365, help="token lifetime in days")
    args = parser.parse_args()
    print(create_access_token({"sub": args.principal}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
