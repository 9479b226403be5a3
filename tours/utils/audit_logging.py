from flask import request, has_request_context


class AuditLogger:
    """Log important actions for audit trail"""

    @staticmethod
    def log_action(
        user_id: str,
        action: str,
        entity_type: str = None,
        entity_id: str = None,
        description: str = None,
        changes: dict = None,
        ip_address: str = None,
        user_agent: str = None,
        commit: bool = False
    ):
        """
        Log an action to audit trail

        The entry is only added to the session so it is written together
        with the change it describes. Pass commit=True to write it at once.
        """
        from tours.models import AuditLog
        from tours.extensions import db

        if has_request_context():
            ip_address = ip_address or request.remote_addr
            user_agent = user_agent or request.headers.get('User-Agent')

        log = AuditLog(
            user_id=user_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            description=description,
            changes=changes,
            ip_address=ip_address,
            user_agent=user_agent
        )

        db.session.add(log)
        if commit:
            db.session.commit()
        return log
