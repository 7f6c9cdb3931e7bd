from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all
from backend.app.models.user import User  # noqa: F401
from backend.app.models.entry import Entry, EntryItem  # noqa: F401
