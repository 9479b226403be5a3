from tours.models import AuditLog
from tours.utils.audit_logging import AuditLogger


def test_entry_is_not_committed_by_default(db, admin_user):
    AuditLogger.log_action(user_id=admin_user.id, action='package_created', entity_type='package')
    db.session.rollback()

    assert AuditLog.query.count() == 0


def test_commit_writes_entry_immediately(db, admin_user):
    AuditLogger.log_action(user_id=admin_user.id, action='package_created', entity_type='package', commit=True)
    db.session.rollback()

    assert AuditLog.query.filter_by(action='package_created').count() == 1
