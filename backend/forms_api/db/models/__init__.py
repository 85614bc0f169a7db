"""
Models package — re-exports Base and all models.

Import models here so `Base.metadata.create_all()` picks up every
table automatically.

When adding a new model:
    1. Create `forms_api/db/models/<table_name>.py`
    2. Import it here
"""

from forms_api.db.models.base import Base
from forms_api.db.models.submission import Submission

__all__ = [
    "Base",
    "Submission",
]
