# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Alembic environment – runs migrations on the application's own engine.

The database URL comes from the application's Settings class (etc/app.conf
or DATABASE_URL), so there is a single source of truth for the connection
string.
"""

import sys
import os

# ---------------------------------------------------------------------------
# Path setup – ``backend/`` must be importable so that ``core.config``,
# ``database`` and the models resolve the same way they do under uvicorn.
# ---------------------------------------------------------------------------
_BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from alembic import context

from core.config import settings
from database import Base, engine

# Every ORM model must be imported so that Base.metadata knows its table;
# ``alembic revision --autogenerate`` only diffs what it can see.
import models.user            # noqa: F401, E402
import models.password_entry  # noqa: F401, E402
import models.activity_log    # noqa: F401, E402


def run_migrations_online():
    with engine.connect() as conn:
        context.configure(
            connection=conn,
            target_metadata=Base.metadata,
            render_as_batch=conn.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


def run_migrations_offline():
    """Emit SQL to stdout instead of executing it (``alembic upgrade --sql``)."""
    context.configure(
        url=settings.database_url,
        target_metadata=Base.metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
