from django.db import models


class TaskList(models.Model):
    """
    A named collection that groups tasks.
    Tasks reference it by id; its lifecycle is managed through admin and seeding.
    """
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']
        verbose_name = "Task List"
        verbose_name_plural = "Task Lists"

    def __str__(self):
        return self.name
