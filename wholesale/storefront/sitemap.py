# wholesale/storefront/sitemap.py
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from xml.etree import ElementTree as ET

from wholesale.core.errors import WholesaleError
from wholesale.storefront.api import StorefrontApi

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, change frequency, priority)
STATIC_PAGES = [
    ("/en", "daily", 1.0),
    ("/en/login", "monthly", 0.5),
    ("/en/register", "monthly", 0.5),
]


@dataclass
class SitemapEntry:
    url: str
    last_modified: datetime
    change_frequency: str
    priority: float


def _parse_timestamp(value, default: datetime) -> datetime:
    if not value:
        return default
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return default


def _fetch_products(api: StorefrontApi) -> list[dict]:
    try:
        data = api.list_products(limit=1000)
    except (WholesaleError, ValueError) as e:
        logger.error("Failed to fetch products for sitemap: %s", e)
        return []
    # accept either a bare list or {"items": [...]}
    if isinstance(data, dict):
        data = data.get("items")
    return data if isinstance(data, list) else []


def build_sitemap(api: StorefrontApi, app_url: str, now: datetime | None = None) -> list[SitemapEntry]:
    """
    Static pages plus one entry per product. If the product list cannot be
    fetched, only the static pages are returned.
    """
    now = now or datetime.now(timezone.utc)
    base = app_url.rstrip("/")

    entries = [
        SitemapEntry(f"{base}{path}", now, freq, priority)
        for path, freq, priority in STATIC_PAGES
    ]
    for product in _fetch_products(api):
        entries.append(
            SitemapEntry(
                url=f"{base}/en/product/{product['id']}",
                last_modified=_parse_timestamp(product.get("updated_at"), now),
                change_frequency="weekly",
                priority=0.8,
            )
        )
    return entries


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        node = ET.SubElement(urlset, "url")
        ET.SubElement(node, "loc").text = entry.url
        ET.SubElement(node, "lastmod").text = entry.last_modified.isoformat()
        ET.SubElement(node, "changefreq").text = entry.change_frequency
        ET.SubElement(node, "priority").text = f"{entry.priority:.1f}"
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(urlset, encoding="unicode")
