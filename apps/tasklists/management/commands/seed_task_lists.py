"""
Management command to seed default task lists and, optionally, a starter label set.
"""
from django.core.management.base import BaseCommand

from apps.tasklists.models import TaskList
from apps.tasks.models import Label


DEFAULT_TASK_LISTS = [
    {'name': 'Inbox', 'description': 'Unsorted tasks'},
    {'name': 'Personal', 'description': 'Errands and chores'},
    {'name': 'Work', 'description': 'Work items'},
]

DEFAULT_LABELS = [
    {'name': 'urgent', 'color': '#ff0000'},
    {'name': 'waiting', 'color': '#ffa500'},
    {'name': 'someday', 'color': '#808080'},
]


class Command(BaseCommand):
    help = 'Seeds default task lists (and optionally labels)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing task lists (and their tasks) before seeding',
        )
        parser.add_argument(
            '--labels',
            action='store_true',
            help='Also seed the starter label set',
        )

    def handle(self, *args, **options):
        if options['clean']:
            deleted, _ = TaskList.objects.all().delete()
            self.stdout.write(self.style.WARNING(f'Deleted {deleted} rows'))

        list_count = 0
        for entry in DEFAULT_TASK_LISTS:
            _, created = TaskList.objects.get_or_create(
                name=entry['name'],
                defaults={'description': entry['description']},
            )
            if created:
                list_count += 1

        label_count = 0
        if options['labels']:
            label_count = self._seed_labels()

        self.stdout.write(self.style.SUCCESS(
            f'Created: {list_count} task lists, {label_count} labels'
        ))

    def _seed_labels(self) -> int:
        """Seed labels, skipping any whose name or color is already taken."""
        created = 0
        for entry in DEFAULT_LABELS:
            if Label.objects.filter(name=entry['name']).exists():
                continue
            if Label.objects.filter(color=entry['color']).exists():
                self.stdout.write(f"  Skipping label {entry['name']}: color {entry['color']} in use")
                continue
            Label.objects.create(name=entry['name'], color=entry['color'])
            created += 1
        return created
