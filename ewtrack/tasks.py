"""
Celery Background Tasks for ewtrack
"""
import sys
from ewtrack.celery_app import celery
from ewtrack.extensions import db
from ewtrack import create_app


def log_task(msg):
    """Helper function for task logging"""
    print(f"[CELERY_TASK] {msg}", file=sys.stderr, flush=True)


@celery.task(bind=True, name='ewtrack.tasks.close_expired_auctions')
def close_expired_auctions(self):
    """
    Close open auctions whose bidding end date has passed.

    Returns:
        dict with the ids of the closed items
    """
    # Create Flask app context (required for DB access)
    app = create_app()

    with app.app_context():
        from ewtrack.helpers.auctions import close_expired_auctions as close_expired

        log_task(f"=== Closing expired auctions (task {self.request.id}) ===")
        try:
            closed = close_expired(db.session)
        except Exception as exc:
            db.session.rollback()
            log_task(f"ERROR closing expired auctions: {exc}")
            raise

        log_task(f"Closed {len(closed)} auctions")
        return {"closed": closed}
