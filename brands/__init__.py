"""Brand catalogue: products per brand, with shop links and image galleries."""

from brands.catalog import BRANDS, SORT_ORDERS, cover_image, filter_products, normalize_shop_link, sort_products

__all__ = ["BRANDS", "SORT_ORDERS", "cover_image", "filter_products", "normalize_shop_link", "sort_products"]
