# pos/services/notification_service.py
from pos.celery_worker import celery_app
from pos.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia o zapisanej sprzedazy.
    Celery, zeby nie blokowac odpowiedzi kasy.
    """

    @staticmethod
    def send_sale_notification(sale_id: str):
        send_sale_notification_task.delay(sale_id)


@celery_app.task(name="pos.services.notification_service.send_sale_notification_task")
def send_sale_notification_task(sale_id: str):
    """Na razie tylko loguje (tu bylby paragon mailem / webhook)."""
    logger.info(f"[NOTIFICATION] Sale {sale_id} completed")

    return {"sale_id": sale_id, "status": "sent"}
