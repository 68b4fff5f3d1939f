"""API routes for templatebind."""

import logging
from typing import Any, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from .. import __version__
from ..bindings import BindingStore
from ..config import settings
from ..template.template import substitute_variables

logger = logging.getLogger(__name__)

router = APIRouter()


class BindingFieldsRequest(BaseModel):
    """Request carrying a template's identifiers or a three-part document."""

    source: Union[list[str], dict[str, Any]]


class BindingFillRequest(BindingFieldsRequest):
    """Request to fill bindings with data."""

    data: dict[str, Any] = Field(default_factory=dict)
    full_path: bool = False


class BindingPopulateRequest(BindingFillRequest):
    """Request to populate a string with scalar values."""

    text: str


def build_store(source: Union[list[str], dict[str, Any]]) -> BindingStore:
    """Build a fresh store for a request, enforcing the identifier cap."""
    if len(source) > settings.max_identifiers_per_request:
        logger.warning(f"Rejected request with {len(source)} identifiers")
        raise HTTPException(
            status_code=413,
            detail=(
                f"Too many identifiers: {len(source)} "
                f"(limit {settings.max_identifiers_per_request})"
            ),
        )

    return BindingStore.init(source)


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@router.post("/bindings/parse")
async def parse_bindings(request: BindingFieldsRequest):
    """
    Parse identifiers into a binding schema.

    Returns:
    - Scalar names, table columns and block fields
    - The anchor identifier of every table and block
    """
    store = build_store(request.source)

    return {
        "names": store.names(),
        "anchors": {
            "tables": {table: store.table_id_for(table) for table in store.table_schemas},
            "blocks": {block: store.block_id_for(block) for block in store.block_schemas},
        },
    }


@router.post("/bindings/blank")
async def blank_bindings(request: BindingFieldsRequest):
    """Return the all-None skeleton of a binding schema."""
    return build_store(request.source).blank()


@router.post("/bindings/fill")
async def fill_bindings(request: BindingFillRequest):
    """
    Fill a binding schema with data.

    Unknown values, tables, blocks, columns and fields are dropped.
    With ``full_path`` the table and block cells are keyed by their
    fully-qualified identifiers.
    """
    store = build_store(request.source)

    store.fill(request.data)

    return {
        "values": store.values(),
        "tables": store.tables(full_path=request.full_path),
        "blocks": store.blocks(full_path=request.full_path),
    }


@router.post("/bindings/populate")
async def populate_text(request: BindingPopulateRequest):
    """Substitute ``${key}`` placeholders of a string with filled scalar values."""
    store = build_store(request.source)

    store.fill(request.data)

    return {"text": substitute_variables(request.text, store.values())}
