from django.contrib import admin
from .models import Task, Label


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'task_list', 'status', 'priority', 'due_date', 'updated_at']
    list_filter = ['status', 'priority', 'task_list']
    search_fields = ['title', 'description']
    filter_horizontal = ['labels']


@admin.register(Label)
class LabelAdmin(admin.ModelAdmin):
    list_display = ['name', 'color', 'created_at']
    search_fields = ['name', 'color']
