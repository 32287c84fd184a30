"""FastAPI routes for the vault, creator roster, brand catalogue and collage APIs."""

import logging
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Query
from pydantic import BaseModel, Field

from activity import list_logs
from brands.catalog import BRANDS, DEFAULT_SORT, SORT_ORDERS, Brand, SortOrder, filter_products, sort_products
from brands.store import delete_product, get_product, list_products, save_product
from collage.layout import LAYOUT_SLOTS, CANVAS_SIZES, canvas_size, cover_fit, layout_cells
from creators.roster import creator_stats, filter_creators, summarize_roster
from creators.store import delete_creator, get_creator, list_creators, save_creator
from render_hints import build_device_board_hint, build_vault_dashboard_hints
from vault.device_groups import CredentialRecord, group_by_device, is_excluded
from vault.search import filter_records
from vault.store import delete_account, get_account, list_accounts, save_account
from vault.totp import current_code

logger = logging.getLogger(__name__)
router = APIRouter()


# ── Pydantic models ─────────────────────────────────────

class AccountCreate(BaseModel):
    platform: str = ""  # handle
    username: str  # login email
    password: str = ""
    email_password: str = ""
    secret_key: str = ""
    notes: str = ""


class AccountUpdate(BaseModel):
    platform: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    email_password: Optional[str] = None
    secret_key: Optional[str] = None
    notes: Optional[str] = None


class CreatorCreate(BaseModel):
    name: str = Field(min_length=1)
    username: str = ""  # handle
    niche: str = ""
    product_category: Brand = "Other"
    email: str = ""
    phone: str = ""
    video_link: Optional[str] = None
    avg_views: int = Field(default=0, ge=0)
    avg_likes: int = Field(default=0, ge=0)
    avg_comments: int = Field(default=0, ge=0)
    avg_shares: int = Field(default=0, ge=0)
    videos_count: int = Field(default=0, ge=0)


class CreatorUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    username: Optional[str] = None
    niche: Optional[str] = None
    product_category: Optional[Brand] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    video_link: Optional[str] = None
    avg_views: Optional[int] = Field(default=None, ge=0)
    avg_likes: Optional[int] = Field(default=None, ge=0)
    avg_comments: Optional[int] = Field(default=None, ge=0)
    avg_shares: Optional[int] = Field(default=None, ge=0)
    videos_count: Optional[int] = Field(default=None, ge=0)


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    brand: Brand = "Other"
    description: str = ""
    shop_link: str = ""
    image_url: str = ""
    images: list[str] = []


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    brand: Optional[Brand] = None
    description: Optional[str] = None
    shop_link: Optional[str] = None
    image_url: Optional[str] = None
    images: Optional[list[str]] = None


# ── Helpers ─────────────────────────────────────────────

def _account_dict(account) -> dict:
    return {
        "id": account.id,
        "platform": account.platform,
        "username": account.username,
        "password": account.password,
        "email_password": account.email_password,
        "secret_key": account.secret_key,
        "notes": account.notes,
        "has_2fa": bool(account.secret_key),
        "created_at": account.created_at.isoformat() if account.created_at else None,
        "updated_at": account.updated_at.isoformat() if account.updated_at else None,
    }


def _log_dict(log) -> dict:
    return {
        "id": log.id,
        "action": log.action,
        "target": log.target,
        "user": log.user,
        "timestamp": log.timestamp.isoformat() if log.timestamp else None,
    }


def _group_dict(group) -> dict:
    return {
        "key": group.key,
        "display_name": group.display_name,
        "kind": group.kind.value,
        "sort_order": group.sort_order,
        "members": [
            {
                "id": m.id,
                "platform": m.platform_handle,
                "username": m.username,
                "notes": m.notes,
            }
            for m in group.members
        ],
    }


async def _search_records(q: str | None) -> list[CredentialRecord]:
    accounts = await list_accounts()
    return filter_records([CredentialRecord.from_account(a) for a in accounts], q)


def _creator_dict(creator) -> dict:
    return {
        "id": creator.id,
        "name": creator.name,
        "username": creator.username,
        "niche": creator.niche,
        "product_category": creator.product_category,
        "email": creator.email,
        "phone": creator.phone,
        "video_link": creator.video_link,
        "avg_views": creator.avg_views,
        "avg_likes": creator.avg_likes,
        "avg_comments": creator.avg_comments,
        "avg_shares": creator.avg_shares,
        "videos_count": creator.videos_count,
        "engagement_rate": creator_stats(creator).engagement_rate,
        "last_updated": creator.last_updated.isoformat() if creator.last_updated else None,
    }


def _product_dict(product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "brand": product.brand,
        "description": product.description,
        "shop_link": product.shop_link,
        "image_url": product.image_url,
        "images": list(product.images or []),
        "last_updated": product.last_updated.isoformat() if product.last_updated else None,
    }


# ── Vault accounts ──────────────────────────────────────

@router.get("/vault/accounts")
async def get_accounts(q: str | None = None):
    accounts = filter_records(await list_accounts(), q)
    return {"accounts": [_account_dict(a) for a in accounts], "total": len(accounts)}


@router.post("/vault/accounts", status_code=201)
async def create_account(data: AccountCreate, x_operator: str | None = Header(default=None)):
    account = await save_account(data.model_dump(), user=x_operator)
    logger.info("Created vault account %s", account.id)
    return _account_dict(account)


@router.get("/vault/accounts/{account_id}")
async def get_account_detail(account_id: str):
    account = await get_account(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    return _account_dict(account)


@router.put("/vault/accounts/{account_id}")
async def update_account(account_id: str, data: AccountUpdate, x_operator: str | None = Header(default=None)):
    account = await save_account(data.model_dump(exclude_none=True), account_id=account_id, user=x_operator)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    return _account_dict(account)


@router.delete("/vault/accounts/{account_id}")
async def remove_account(account_id: str, x_operator: str | None = Header(default=None)):
    if not await delete_account(account_id, user=x_operator):
        raise HTTPException(status_code=404, detail="Account not found")
    return {"status": "deleted", "id": account_id}


@router.get("/vault/accounts/{account_id}/totp")
async def get_account_totp(account_id: str):
    account = await get_account(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    if not account.secret_key:
        return {"configured": False, "valid": False}

    code = current_code(account.secret_key)
    if code is None:
        return {"configured": True, "valid": False}
    return {
        "configured": True,
        "valid": True,
        "token": code.token,
        "remaining": code.remaining,
        "progress": code.progress,
    }


# ── Devices ─────────────────────────────────────────────

@router.get("/vault/devices")
async def get_devices(q: str | None = None):
    groups = group_by_device(await _search_records(q))
    return {
        "devices": [_group_dict(g) for g in groups],
        "total": len(groups),
        "render_hint": build_device_board_hint(groups),
    }


@router.get("/vault/summary")
async def get_vault_summary():
    accounts = await list_accounts()
    records = [CredentialRecord.from_account(a) for a in accounts]
    groups = group_by_device(records)
    logs = [_log_dict(log) for log in await list_logs(limit=20)]

    summary = {
        "accounts": len(records),
        "with_2fa": sum(1 for a in accounts if a.secret_key),
        "devices": len(groups),
        "unassigned": sum(1 for r in records if is_excluded(r.notes)),
    }
    return {
        "summary": summary,
        "render_hints": build_vault_dashboard_hints(summary=summary, groups=groups, logs=logs),
    }


# ── Creators ────────────────────────────────────────────

@router.get("/creators")
async def get_creators(q: str | None = None, category: Brand | None = None):
    creators = filter_creators(await list_creators(), q, category)
    return {"creators": [_creator_dict(c) for c in creators], "total": len(creators)}


@router.get("/creators/stats")
async def get_creator_stats():
    return asdict(summarize_roster(await list_creators()))


@router.post("/creators", status_code=201)
async def create_creator(data: CreatorCreate, x_operator: str | None = Header(default=None)):
    creator = await save_creator(data.model_dump(), user=x_operator)
    logger.info("Created creator %s", creator.id)
    return _creator_dict(creator)


@router.get("/creators/{creator_id}")
async def get_creator_detail(creator_id: str):
    creator = await get_creator(creator_id)
    if not creator:
        raise HTTPException(status_code=404, detail="Creator not found")
    return _creator_dict(creator)


@router.put("/creators/{creator_id}")
async def update_creator(creator_id: str, data: CreatorUpdate, x_operator: str | None = Header(default=None)):
    creator = await save_creator(data.model_dump(exclude_none=True), creator_id=creator_id, user=x_operator)
    if not creator:
        raise HTTPException(status_code=404, detail="Creator not found")
    return _creator_dict(creator)


@router.delete("/creators/{creator_id}")
async def remove_creator(creator_id: str, x_operator: str | None = Header(default=None)):
    if not await delete_creator(creator_id, user=x_operator):
        raise HTTPException(status_code=404, detail="Creator not found")
    return {"status": "deleted", "id": creator_id}


# ── Brand products ──────────────────────────────────────

@router.get("/brands")
async def get_brands():
    return {"brands": list(BRANDS), "sort_orders": list(SORT_ORDERS)}


@router.get("/brands/products")
async def get_products(
    brand: str | None = None,
    q: str | None = None,
    sort: SortOrder = DEFAULT_SORT,
):
    products = sort_products(filter_products(await list_products(), brand, q), sort)
    return {"products": [_product_dict(p) for p in products], "total": len(products)}


@router.post("/brands/products", status_code=201)
async def create_product(data: ProductCreate, x_operator: str | None = Header(default=None)):
    product = await save_product(data.model_dump(), user=x_operator)
    logger.info("Created brand product %s", product.id)
    return _product_dict(product)


@router.get("/brands/products/{product_id}")
async def get_product_detail(product_id: str):
    product = await get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return _product_dict(product)


@router.put("/brands/products/{product_id}")
async def update_product(product_id: str, data: ProductUpdate, x_operator: str | None = Header(default=None)):
    product = await save_product(data.model_dump(exclude_none=True), product_id=product_id, user=x_operator)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return _product_dict(product)


@router.delete("/brands/products/{product_id}")
async def remove_product(product_id: str, x_operator: str | None = Header(default=None)):
    if not await delete_product(product_id, user=x_operator):
        raise HTTPException(status_code=404, detail="Product not found")
    return {"status": "deleted", "id": product_id}


# ── Activity log ────────────────────────────────────────

@router.get("/logs")
async def get_logs(limit: int = Query(default=100, ge=1, le=1000)):
    return {"logs": [_log_dict(log) for log in await list_logs(limit=limit)]}


# ── Collage ─────────────────────────────────────────────

@router.get("/collage/layouts")
async def get_collage_layouts():
    return {
        "layouts": [{"name": name, "slots": slots} for name, slots in LAYOUT_SLOTS.items()],
        "aspect_ratios": list(CANVAS_SIZES),
    }


@router.get("/collage/layouts/{layout}")
async def get_collage_layout(
    layout: str,
    aspect_ratio: str = "1:1",
    image_width: float | None = Query(default=None, gt=0),
    image_height: float | None = Query(default=None, gt=0),
):
    """Cell rectangles for a layout; with an image size, also the cover-fit draw rect per cell."""
    if layout not in LAYOUT_SLOTS:
        raise HTTPException(status_code=404, detail=f"Unknown layout: {layout}")

    width, height = canvas_size(aspect_ratio)
    cells = []
    for cell in layout_cells(layout, aspect_ratio):
        entry = {"x": cell.x, "y": cell.y, "w": cell.w, "h": cell.h}
        if image_width and image_height:
            fit = cover_fit(image_width, image_height, cell)
            entry["draw"] = {"x": fit.x, "y": fit.y, "w": fit.w, "h": fit.h}
        cells.append(entry)

    return {"layout": layout, "width": width, "height": height, "cells": cells}
