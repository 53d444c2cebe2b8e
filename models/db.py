import uuid

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def new_id() -> str:
    # Supabase tables key rows by UUID
    return str(uuid.uuid4())
