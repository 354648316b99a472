# scripts/export_company_whitelist.py
"""
Export every company as an approval whitelist CSV, through the HTTP API.

Usage:
    ADMIN_EMAIL=... ADMIN_PASSWORD=... python -m scripts.export_company_whitelist
    ADMIN_TOKEN=... python -m scripts.export_company_whitelist --out whitelist.csv
"""
import argparse
import csv
import logging
import os
import sys
from pathlib import Path

from wholesale.core.errors import WholesaleError
from wholesale.storefront.api import StorefrontApi
from wholesale.storefront.auth_store import AuthStore
from wholesale.storefront.http import build_client
from wholesale.storefront.storage import MemoryStorage

logger = logging.getLogger(__name__)

HEADER = ["companyId", "companyName", "contactEmail", "salesRepEmail", "targetStatus"]


def whitelist_rows(companies: list[dict]) -> list[list[str]]:
    rows = []
    for c in companies:
        rep = c.get("sales_rep") or {}
        rows.append(
            [
                c.get("id") or "",
                c.get("name") or "",
                c.get("contact_email") or "",
                rep.get("email") or "",
                "APPROVED",
            ]
        )
    return rows


def export_whitelist(api: StorefrontApi, out_path: str | Path) -> int:
    """Write the CSV and return the number of companies exported."""
    companies = api.list_companies()
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        writer.writerows(whitelist_rows(companies))
    return len(companies)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export the company whitelist CSV.")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://localhost:3001"))
    parser.add_argument("--out", default=os.getenv("OUT_CSV", "company_whitelist.csv"))
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    auth = AuthStore(MemoryStorage())
    api = StorefrontApi(build_client(args.base_url, auth), auth)
    try:
        token = os.getenv("ADMIN_TOKEN")
        if token:
            auth.set_auth(token, {"id": "", "email": "", "role": "PLATFORM_ADMIN"})
        else:
            email, password = os.getenv("ADMIN_EMAIL"), os.getenv("ADMIN_PASSWORD")
            if not email or not password:
                logger.error("Missing ADMIN_EMAIL or ADMIN_PASSWORD (or ADMIN_TOKEN)")
                return 1
            api.login(email, password)
        count = export_whitelist(api, args.out)
    except WholesaleError as e:
        logger.error("Export failed: %s", e.detail)
        return 1

    logger.info("Exported %d companies -> %s", count, args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
