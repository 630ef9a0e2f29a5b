from celery import Celery

from quickestimate.config import settings

NOTIFICATIONS_QUEUE = "notifications"

app = Celery("quickestimate", broker=settings.REDIS_URL, backend=settings.REDIS_URL)

app.conf.update(
    include=["quickestimate.tasks.notification_tasks"],
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    enable_utc=True,
    timezone="UTC",
    # Hard stop for a hung SendGrid call
    task_soft_time_limit=60,
    task_time_limit=90,
    task_acks_late=True,
    worker_prefetch_multiplier=1,
    result_expires=24 * 60 * 60,
    task_default_queue=NOTIFICATIONS_QUEUE,
    task_routes={"quickestimate.tasks.notification_tasks.*": {"queue": NOTIFICATIONS_QUEUE}},
)
