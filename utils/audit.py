import json

from flask import current_app, has_request_context, request

from models import db
from models.audit_log import AuditLog


def log_event(action: str, user_id=None, entity=None, entity_id=None, metadata=None, commit=True):
    """
    Record a business event in audit_logs and echo it to the app logger.

    With commit=False the row joins the caller's transaction, so it is only
    persisted alongside the change it describes.
    """
    ip = user_agent = None
    if has_request_context():
        ip = request.headers.get("X-Forwarded-For", request.remote_addr)
        user_agent = (request.headers.get("User-Agent") or "")[:255] or None

    # dates and Decimals in metadata are stored as strings
    details = json.loads(json.dumps(metadata, default=str)) if metadata else None

    db.session.add(AuditLog(
        action=action,
        entity=entity,
        entity_id=str(entity_id) if entity_id is not None else None,
        user_id=user_id,
        ip=ip,
        user_agent=user_agent,
        details=details,
    ))
    if commit:
        db.session.commit()

    current_app.logger.info("%s %s=%s %s", action, entity or "-", entity_id or "-", details or "")
