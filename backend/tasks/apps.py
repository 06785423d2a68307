from django.apps import AppConfig


class TasksConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'tasks'

    def ready(self):
        # Register the post_save hook that enqueues background prioritization
        from . import signals  # noqa: F401
