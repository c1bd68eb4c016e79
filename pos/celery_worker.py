# pos/celery_worker.py
from celery import Celery

from pos.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND, CELERY_TASK_ALWAYS_EAGER

celery_app = Celery(
    "pos",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# WAZNE: explicite importuj taski, zeby Celery je zarejestrowal
celery_app.conf.imports = (
    "pos.services.notification_service",
)

celery_app.conf.timezone = "UTC"
# testy i dev bez brokera
celery_app.conf.task_always_eager = CELERY_TASK_ALWAYS_EAGER
