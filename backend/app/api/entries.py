"""Entry routes: owner-scoped CRUD plus the PDF invoice download."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backend.app.core.settings import Settings
from backend.app.crud.crud_entry import entry_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.dependencies.resources import get_app_settings, get_invoice_renderer
from backend.app.models.entry import Entry
from backend.app.models.user import User
from backend.app.schemas.entry import EntryCreate, EntryRead, EntryUpdate, MessageResponse
from backend.app.schemas.invoice_document import Branding
from backend.app.services.invoice_document import build_invoice_document
from backend.app.services.invoice_renderer import InvoicePdfRenderer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/entries", tags=["entries"])


def _get_owned_entry(db: Session, entry_id: int, owner_id: int) -> Entry:
    # Missing and foreign entries look the same to the caller
    entry = entry_crud.get(db, entry_id=entry_id, owner_id=owner_id)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found")
    return entry


@router.get("", response_model=List[EntryRead])
def list_entries(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return entry_crud.get_multi(db, owner_id=current_user.id)


@router.post("", response_model=EntryRead, status_code=status.HTTP_201_CREATED)
def create_entry(
    payload: EntryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return entry_crud.create(db, obj_in=payload, owner_id=current_user.id)


@router.get("/{entry_id}", response_model=EntryRead)
def get_entry(entry_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return _get_owned_entry(db, entry_id, current_user.id)


@router.put("/{entry_id}", response_model=EntryRead)
def update_entry(
    entry_id: int,
    payload: EntryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    entry = entry_crud.update(db, entry_id=entry_id, owner_id=current_user.id, obj_in=payload)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found")
    return entry


@router.delete("/{entry_id}", response_model=MessageResponse)
def delete_entry(entry_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    if not entry_crud.remove(db, entry_id=entry_id, owner_id=current_user.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found")
    return {"message": "Entry deleted"}


@router.get("/{entry_id}/pdf")
def download_entry_pdf(
    entry_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_app_settings),
    renderer: InvoicePdfRenderer = Depends(get_invoice_renderer),
):
    entry = _get_owned_entry(db, entry_id, current_user.id)
    document = build_invoice_document(entry, Branding.from_settings(settings))
    content = renderer.render(document)
    logger.info("Rendered invoice for entry %s (%d bytes)", entry.id, len(content))
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=bill_{entry.id}.pdf"},
    )
