from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.tasks.models import Label
from .dtos import TaskListDTO
from .models import TaskList
from .services import get_task_list, get_task_list_dto


class TaskListServicesTest(TestCase):
    def setUp(self):
        self.inbox = TaskList.objects.create(name="Inbox", description="Unsorted tasks")

    def test_get_task_list(self):
        self.assertEqual(get_task_list(self.inbox.id), self.inbox)
        self.assertIsNone(get_task_list(self.inbox.id + 1))

    def test_get_task_list_dto(self):
        dto = get_task_list_dto(self.inbox.id)
        self.assertEqual(dto, TaskListDTO(id=self.inbox.id, name="Inbox", description="Unsorted tasks"))
        self.assertIsNone(get_task_list_dto(self.inbox.id + 1))

    def test_ref_carries_only_id(self):
        ref = TaskListDTO.ref(7)
        self.assertEqual(ref.id, 7)
        self.assertIsNone(ref.name)


class SeedTaskListsCommandTest(TestCase):
    def test_seed_is_idempotent(self):
        out = StringIO()
        call_command('seed_task_lists', stdout=out)
        call_command('seed_task_lists', stdout=out)

        self.assertEqual(
            list(TaskList.objects.values_list('name', flat=True)),
            ['Inbox', 'Personal', 'Work'],
        )
        self.assertEqual(Label.objects.count(), 0)

    def test_seed_labels(self):
        call_command('seed_task_lists', '--labels', stdout=StringIO())
        self.assertEqual(
            set(Label.objects.values_list('name', flat=True)),
            {'urgent', 'waiting', 'someday'},
        )

    def test_seed_labels_skips_taken_color(self):
        Label.objects.create(name="alarm", color="#ff0000")
        call_command('seed_task_lists', '--labels', stdout=StringIO())
        self.assertFalse(Label.objects.filter(name='urgent').exists())
        self.assertTrue(Label.objects.filter(name='waiting').exists())

    def test_clean_removes_existing_lists(self):
        TaskList.objects.create(name="Old")
        call_command('seed_task_lists', '--clean', stdout=StringIO())
        self.assertFalse(TaskList.objects.filter(name='Old').exists())
        self.assertEqual(TaskList.objects.count(), 3)
