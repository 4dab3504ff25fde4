from django.db import models
from django.utils import timezone


class TaskStatus(models.TextChoices):
    TODO = 'TODO', 'To Do'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    DONE = 'DONE', 'Done'


class TaskPriority(models.TextChoices):
    LOW = 'LOW', 'Low'
    MEDIUM = 'MEDIUM', 'Medium'
    HIGH = 'HIGH', 'High'


class Label(models.Model):
    """
    Tag attachable to any number of tasks.
    Name and color are each unique; labels are not edited after creation.
    """
    name = models.CharField(max_length=50, unique=True)
    color = models.CharField(max_length=20, unique=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.name} ({self.color})"


class Task(models.Model):
    title = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    due_date = models.DateField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=TaskStatus.choices,
        default=TaskStatus.TODO
    )
    priority = models.CharField(
        max_length=20,
        choices=TaskPriority.choices,
        default=TaskPriority.MEDIUM
    )

    updated_at = models.DateTimeField(null=True, blank=True)

    task_list = models.ForeignKey(
        'tasklists.TaskList',
        on_delete=models.CASCADE,
        related_name='tasks'
    )
    labels = models.ManyToManyField(Label, related_name='tasks', blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.title
