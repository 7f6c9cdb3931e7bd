"""CRUD operations for entries, always scoped to the owning user."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from backend.app.models.entry import Entry, EntryItem
from backend.app.schemas.entry import EntryCreate, EntryUpdate
from backend.app.services.billing import compute_total

logger = logging.getLogger(__name__)


def _build_items(obj_in: EntryCreate) -> List[EntryItem]:
    return [
        EntryItem(position=position, name=item.name, price=item.price, quantity=item.quantity)
        for position, item in enumerate(obj_in.items)
    ]


class CRUDEntry:
    def _owned(self, db: Session, owner_id: int):
        return db.query(Entry).options(selectinload(Entry.items)).filter(Entry.owner_id == owner_id)

    def get_multi(self, db: Session, *, owner_id: int) -> List[Entry]:
        return self._owned(db, owner_id).order_by(Entry.booking_date.desc(), Entry.id.desc()).all()

    def get(self, db: Session, *, entry_id: int, owner_id: int) -> Optional[Entry]:
        return self._owned(db, owner_id).filter(Entry.id == entry_id).first()

    def create(self, db: Session, *, obj_in: EntryCreate, owner_id: int) -> Entry:
        entry = Entry(
            owner_id=owner_id,
            customer_name=obj_in.customer_name,
            booking_date=obj_in.booking_date,
            items=_build_items(obj_in),
            total=compute_total(obj_in.items),
        )
        db.add(entry)
        db.commit()
        db.refresh(entry)
        logger.info("Created entry %s for owner %s (total %s)", entry.id, owner_id, entry.total)
        return entry

    def update(self, db: Session, *, entry_id: int, owner_id: int, obj_in: EntryUpdate) -> Optional[Entry]:
        entry = self.get(db, entry_id=entry_id, owner_id=owner_id)
        if entry is None:
            return None
        entry.customer_name = obj_in.customer_name
        entry.booking_date = obj_in.booking_date
        # Replace the whole list, orphaned rows are deleted by the cascade
        entry.items = _build_items(obj_in)
        entry.total = compute_total(obj_in.items)
        db.commit()
        db.refresh(entry)
        logger.info("Updated entry %s for owner %s (total %s)", entry.id, owner_id, entry.total)
        return entry

    def remove(self, db: Session, *, entry_id: int, owner_id: int) -> bool:
        entry = self.get(db, entry_id=entry_id, owner_id=owner_id)
        if entry is None:
            return False
        db.delete(entry)
        db.commit()
        logger.info("Deleted entry %s for owner %s", entry_id, owner_id)
        return True


entry_crud = CRUDEntry()
