"""
URL configuration for the todolist service.
"""
from django.contrib import admin
from django.urls import path
from ninja import NinjaAPI

api = NinjaAPI(
    title="Todolist API",
    version="1.0.0",
    description="Task and label management API",
    docs_url="/docs",
)

from apps.tasks.api import router as tasks_router

api.add_router("/task", tasks_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
]
