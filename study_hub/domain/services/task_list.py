"""Task list model: ordered to-do items with add, toggle and delete."""

import logging
from collections.abc import Iterable

from study_hub.domain.constants import NoticeMessages
from study_hub.domain.entities.task import Task
from study_hub.domain.exceptions import ValidationError
from study_hub.domain.services.change_notifier import ChangeNotifier
from study_hub.domain.services.id_generator import TimestampIdGenerator

logger = logging.getLogger(__name__)


class TaskList:
    """In-memory task collection, newest first.

    Every operation that actually changes the collection publishes the new
    snapshot on ``changed``. Operations on unknown ids are silent no-ops and
    publish nothing.
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        id_generator: TimestampIdGenerator | None = None,
    ):
        """Initialize task list.

        Args:
            tasks: Initial tasks, already in display order
            id_generator: Source of new task ids (default: wall clock)
        """
        self._tasks: list[Task] = list(tasks)
        self._ids = id_generator or TimestampIdGenerator()
        self._ids.observe(t.id for t in self._tasks)
        self.changed: ChangeNotifier[tuple[Task, ...]] = ChangeNotifier()

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the tasks in display order."""
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task | None:
        """Get task by id or None."""
        return next((t for t in self._tasks if t.id == task_id), None)

    def add_task(self, text: str) -> Task:
        """Create a task at the top of the list.

        Args:
            text: Task description (surrounding whitespace is dropped)

        Returns:
            The new task

        Raises:
            ValidationError: If text is empty after trimming
        """
        text = text.strip()
        if not text:
            raise ValidationError("task text is empty", NoticeMessages.EMPTY_TASK)

        task = Task(id=self._ids.next_id(), text=text)
        self._tasks.insert(0, task)
        logger.debug(f"Added task {task.id}")
        self._publish()
        return task

    def toggle_task(self, task_id: int) -> None:
        """Flip completion of the task with the given id."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                self._tasks[i] = task.toggled()
                self._publish()
                return

    def delete_task(self, task_id: int) -> None:
        """Remove the task with the given id."""
        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) == len(self._tasks):
            return
        self._tasks = remaining
        logger.debug(f"Deleted task {task_id}")
        self._publish()

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Swap in a whole collection (used when loading from the store)."""
        self._tasks = list(tasks)
        self._ids.observe(t.id for t in self._tasks)
        self._publish()

    def _publish(self) -> None:
        self.changed.notify(self.tasks)
