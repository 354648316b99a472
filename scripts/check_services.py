# scripts/check_services.py
"""
Check that the backend and the web front ends accept connections.

Any HTTP response counts as "up" (a 401 from a protected route is fine);
only a connection failure counts as "down".
"""
import argparse
import logging
import sys

import requests

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = [
    ("Backend", "http://localhost:3001/"),
    ("Admin Panel", "http://localhost:3000"),
    ("Frontend Storefront", "http://localhost:3002"),
]


def check(name: str, url: str, timeout: float = 5.0) -> bool:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.error("%s is DOWN. Error: %s", name, e)
        return False
    logger.info("%s is UP. Status: %s", name, response.status_code)
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "--service",
        action="append",
        metavar="NAME=URL",
        help="service to check (repeatable); defaults to the local dev ports",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    services = DEFAULT_SERVICES
    if args.service:
        services = [tuple(s.split("=", 1)) for s in args.service]

    logger.info("Verifying services...")
    results = [check(name, url) for name, url in services]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
