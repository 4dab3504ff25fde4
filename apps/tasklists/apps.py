from django.apps import AppConfig


class TaskListsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tasklists'
    verbose_name = 'Task Lists'
