import os
from dotenv import load_dotenv
load_dotenv()
from celery import Celery

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'taskhub.settings')

app = Celery('taskhub')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
# - namespace='CELERY' means all celery-related configuration keys
#   should have a `CELERY_` prefix.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Workers live in suggestions/celery_tasks.py rather than the default tasks.py
app.autodiscover_tasks(['suggestions'], related_name='celery_tasks')
