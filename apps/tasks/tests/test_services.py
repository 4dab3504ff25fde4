"""
Unit tests for the task service.
Runs against the in-memory store so business rules are tested without the ORM.
"""
from datetime import date

from django.test import SimpleTestCase, override_settings

from apps.core.exceptions import AlreadyExists, NotFound
from apps.tasklists.dtos import TaskListDTO
from apps.tasks.dtos import LabelDTO, TaskDTO
from apps.tasks import services


def make_task(title="Buy milk", task_list_id=1, labels=(), **overrides):
    fields = dict(
        id=None,
        title=title,
        description="2 litres",
        due_date=date(2026, 11, 1),
        status="TODO",
        priority="MEDIUM",
        task_list=TaskListDTO.ref(task_list_id),
        labels=tuple(LabelDTO(name=name) for name in labels),
    )
    fields.update(overrides)
    return TaskDTO(**fields)


class ServiceTestCase(SimpleTestCase):

    def setUp(self):
        self.service = services.build_memory_service([
            TaskListDTO(id=1, name="Inbox"),
            TaskListDTO(id=2, name="Work"),
        ])


class CreateTaskTest(ServiceTestCase):

    def test_create_assigns_id_and_resolves_list(self):
        task = self.service.create_task(make_task())
        self.assertEqual(task.id, 1)
        self.assertEqual(task.task_list, TaskListDTO(id=1, name="Inbox"))
        self.assertIsNotNone(task.updated_at)

    def test_create_then_get_round_trips(self):
        self.service.create_label(LabelDTO(name="home", color="#00ff00"))
        created = self.service.create_task(make_task(labels=["home"]))

        fetched = self.service.get_task(created.id)
        self.assertEqual(fetched, created)
        self.assertEqual(fetched.title, "Buy milk")
        self.assertEqual(fetched.description, "2 litres")
        self.assertEqual(fetched.due_date, date(2026, 11, 1))
        self.assertEqual(fetched.labels, (LabelDTO(name="home", color="#00ff00"),))

    def test_duplicate_title_rejected(self):
        self.service.create_task(make_task())

        with self.assertRaises(AlreadyExists) as ctx:
            self.service.create_task(make_task(description="again"))

        self.assertEqual(ctx.exception.field, "title")
        self.assertEqual(len(self.service.get_all_tasks()), 1)

    def test_unknown_label_rejected(self):
        with self.assertRaises(NotFound) as ctx:
            self.service.create_task(make_task(labels=["ghost"]))
        self.assertIn("ghost", str(ctx.exception))
        self.assertEqual(self.service.get_all_tasks(), [])

    def test_unknown_task_list_rejected(self):
        with self.assertRaises(NotFound):
            self.service.create_task(make_task(task_list_id=99))

    def test_get_all_in_creation_order(self):
        self.service.create_task(make_task(title="first"))
        self.service.create_task(make_task(title="second"))
        titles = [t.title for t in self.service.get_all_tasks()]
        self.assertEqual(titles, ["first", "second"])

    def test_get_missing_task(self):
        with self.assertRaises(NotFound):
            self.service.get_task(42)


class UpdateTaskTest(ServiceTestCase):

    def setUp(self):
        super().setUp()
        self.service.create_label(LabelDTO(name="urgent", color="#ff0000"))
        self.service.create_label(LabelDTO(name="home", color="#00ff00"))
        self.task = self.service.create_task(make_task(labels=["urgent"]))

    def test_update_replaces_fields_and_labels(self):
        self.service.update_task(self.task.id, make_task(
            title="Buy oat milk",
            description="",
            due_date=None,
            status="DONE",
            priority="HIGH",
            labels=["home"],
        ))

        task = self.service.get_task(self.task.id)
        self.assertEqual(task.title, "Buy oat milk")
        self.assertEqual(task.description, "")
        self.assertIsNone(task.due_date)
        self.assertEqual(task.status, "DONE")
        self.assertEqual(task.priority, "HIGH")
        self.assertEqual(task.label_names, ("home",))

    def test_update_advances_updated_at(self):
        self.service.update_task(self.task.id, make_task(status="IN_PROGRESS"))
        task = self.service.get_task(self.task.id)
        self.assertGreater(task.updated_at, self.task.updated_at)

    def test_update_keeps_id_and_task_list(self):
        self.service.update_task(self.task.id, make_task(task_list_id=2, id=77))
        task = self.service.get_task(self.task.id)
        self.assertEqual(task.id, self.task.id)
        self.assertEqual(task.task_list.id, 1)

    def test_update_missing_task(self):
        with self.assertRaises(NotFound):
            self.service.update_task(999, make_task())

    def test_update_with_unknown_label_leaves_task_unchanged(self):
        with self.assertRaises(NotFound):
            self.service.update_task(self.task.id, make_task(title="changed", labels=["ghost"]))
        self.assertEqual(self.service.get_task(self.task.id), self.task)

    def test_update_onto_other_title_rejected(self):
        self.service.create_task(make_task(title="Walk dog"))
        with self.assertRaises(AlreadyExists):
            self.service.update_task(self.task.id, make_task(title="Walk dog"))

    def test_update_keeping_own_title_allowed(self):
        self.service.update_task(self.task.id, make_task(priority="LOW"))
        self.assertEqual(self.service.get_task(self.task.id).priority, "LOW")


class DeleteTaskTest(ServiceTestCase):

    def test_delete_then_get_not_found(self):
        task = self.service.create_task(make_task())
        self.service.delete_task(task.id)
        with self.assertRaises(NotFound):
            self.service.get_task(task.id)

    def test_delete_missing_is_noop(self):
        self.service.delete_task(123)
        self.assertEqual(self.service.get_all_tasks(), [])


class LabelTest(ServiceTestCase):

    def test_create_label(self):
        label = self.service.create_label(LabelDTO(name="urgent", color="#ff0000"))
        self.assertEqual(label, LabelDTO(name="urgent", color="#ff0000"))
        self.assertEqual(self.service.get_all_labels(), [label])

    def test_duplicate_name_rejected(self):
        self.service.create_label(LabelDTO(name="urgent", color="#ff0000"))
        with self.assertRaises(AlreadyExists) as ctx:
            self.service.create_label(LabelDTO(name="urgent", color="#00ff00"))
        self.assertEqual(ctx.exception.field, "name")
        self.assertEqual(len(self.service.get_all_labels()), 1)

    def test_duplicate_color_rejected(self):
        self.service.create_label(LabelDTO(name="urgent", color="#ff0000"))
        with self.assertRaises(AlreadyExists) as ctx:
            self.service.create_label(LabelDTO(name="calm", color="#ff0000"))
        self.assertEqual(ctx.exception.field, "color")
        self.assertEqual(len(self.service.get_all_labels()), 1)


class AddLabelToTaskTest(ServiceTestCase):

    def setUp(self):
        super().setUp()
        self.service.create_label(LabelDTO(name="urgent", color="#ff0000"))
        self.task = self.service.create_task(make_task())

    def test_add_label(self):
        self.service.add_label_to_task(self.task.id, "urgent")
        task = self.service.get_task(self.task.id)
        self.assertIn("urgent", task.label_names)

    def test_add_label_twice_is_idempotent(self):
        self.service.add_label_to_task(self.task.id, "urgent")
        self.service.add_label_to_task(self.task.id, "urgent")
        self.assertEqual(self.service.get_task(self.task.id).label_names, ("urgent",))

    def test_add_label_does_not_touch_updated_at(self):
        self.service.add_label_to_task(self.task.id, "urgent")
        self.assertEqual(self.service.get_task(self.task.id).updated_at, self.task.updated_at)

    def test_add_unknown_label(self):
        with self.assertRaises(NotFound):
            self.service.add_label_to_task(self.task.id, "ghost")

    def test_add_label_to_missing_task(self):
        with self.assertRaises(NotFound):
            self.service.add_label_to_task(999, "urgent")


class BackendSelectionTest(SimpleTestCase):

    def tearDown(self):
        services._memory_service = None

    @override_settings(TASK_STORE_BACKEND='memory')
    def test_memory_backend_is_shared_across_calls(self):
        first = services.get_task_service()
        first.create_task(make_task())
        self.assertEqual(len(services.get_task_service().get_all_tasks()), 1)

    @override_settings(TASK_STORE_BACKEND='redis')
    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            services.get_task_service()
