"""Catalogue rules for brand products: link cleanup, cover images, filtering and sorting."""

from datetime import datetime
from typing import Literal, get_args

Brand = Literal["Maikalian", "Xmas Curtain", "Tshirt", "Other"]
BRANDS = get_args(Brand)

SortOrder = Literal["name-asc", "name-desc", "date-new", "date-old"]
SORT_ORDERS = get_args(SortOrder)
DEFAULT_SORT = "date-new"


def normalize_shop_link(link: str | None) -> str:
    """Shop links are often pasted without a scheme ("shopee.ph/item"); assume https."""
    link = (link or "").strip()
    if link and not link.startswith("http"):
        return f"https://{link}"
    return link


def cover_image(image_url: str | None, images: list[str] | None) -> str:
    """The explicit cover image, else the first gallery image, else empty."""
    if image_url:
        return image_url
    return images[0] if images else ""


def filter_products(products: list, brand: str | None = None, term: str | None = None) -> list:
    """Keep products of ``brand`` (None or "All" keeps every brand) whose name contains ``term``."""
    needle = (term or "").strip().lower()
    selected = []
    for product in products:
        if brand and brand != "All" and product.brand != brand:
            continue
        if needle and needle not in (product.name or "").lower():
            continue
        selected.append(product)
    return selected


def _date_key(product) -> datetime:
    return product.last_updated or datetime.min


def sort_products(products: list, order: str = DEFAULT_SORT) -> list:
    if order == "name-asc":
        return sorted(products, key=lambda p: (p.name or "").lower())
    if order == "name-desc":
        return sorted(products, key=lambda p: (p.name or "").lower(), reverse=True)
    if order == "date-old":
        return sorted(products, key=_date_key)
    if order == "date-new":
        return sorted(products, key=_date_key, reverse=True)
    raise ValueError(f"Unknown sort order: {order}")
