"""Background task with generation tagging and ignore-on-supersede semantics."""

import logging
from typing import Callable, Any, Optional, Tuple
from PyQt6.QtCore import QThread, pyqtSignal

logger = logging.getLogger(__name__)

# --- Module-level constants ---
CLEANUP_WAIT_MS = 200     # Wait time during shutdown cleanup


class BackgroundTask(QThread):
    """
    Background task whose results carry the generation it was started for.

    Usage:
        task = BackgroundTask(target=load_image, args=(ref,), generation=7)
        task.result_ready.connect(on_success)   # (generation, result)
        task.error_occurred.connect(on_error)   # (generation, Exception)
        task.start()

    Superseding a task does not abort the thread. The receiver compares the
    generation against its own counter and drops stale results.
    """

    result_ready = pyqtSignal(int, object)
    error_occurred = pyqtSignal(int, Exception)  # Full exception, caller decides

    def __init__(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        generation: int = 0,
        parent=None
    ):
        super().__init__(parent)
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}
        self.generation = generation

    def run(self):
        """Execute target in background."""
        try:
            result = self._target(*self._args, **self._kwargs)
            self.result_ready.emit(self.generation, result)
        except Exception as e:
            self.error_occurred.emit(self.generation, e)


class BackgroundTaskManager:
    """
    Starts generation-tagged tasks and keeps every started thread referenced
    until it finishes, so superseded tasks are never garbage collected while
    still running.

    Usage:
        self._task_manager = BackgroundTaskManager()

        def refresh(self):
            self._generation += 1
            self._task_manager.run(
                target=load_image,
                args=(ref,),
                generation=self._generation,
                on_success=self._on_loaded,   # (generation, result)
                on_error=self._on_failed,     # (generation, Exception)
            )
    """

    def __init__(self):
        self._current_task: Optional[BackgroundTask] = None
        self._running: set = set()

    @property
    def current_task(self) -> Optional[BackgroundTask]:
        return self._current_task

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        generation: int = 0,
        on_success: Callable[[int, Any], None] = None,
        on_error: Callable[[int, Exception], None] = None,
    ) -> BackgroundTask:
        """
        Start a background task. The previous task keeps running; its
        results still reach the callbacks tagged with the old generation.

        Returns:
            The started BackgroundTask
        """
        task = BackgroundTask(target=target, args=args, kwargs=kwargs, generation=generation)
        if on_success:
            task.result_ready.connect(on_success)
        if on_error:
            task.error_occurred.connect(on_error)

        self._running.add(task)
        task.finished.connect(lambda: self._running.discard(task))

        self._current_task = task
        task.start()
        logger.debug(f"Started background task generation={generation}")
        return task

    def cleanup(self):
        """Wait briefly for running tasks. Call on shutdown."""
        for task in list(self._running):
            if task.isRunning():
                task.wait(CLEANUP_WAIT_MS)
        self._running.clear()
        self._current_task = None
