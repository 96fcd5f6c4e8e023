"""
Image Load Sequencer.

One authoritative image load at a time, tied to the most recent navigation.

State machine per request:
    IDLE -> LOADING -> LOADED | FAILED

Every request bumps a generation counter and tags its background task with
it. Results whose generation is not the current one are dropped, so a slow
load for a record the user already left can never overwrite the display of
the record now on screen. In-flight threads are not aborted.
"""

import logging
from typing import Any, Callable, Optional

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from product_slides.core import BackgroundTaskManager
from product_slides.io import load_image
from product_slides.protocols import ImageDisplay, ImageLoadState, get_app_config
from product_slides.services.status_notifier import StatusNotifier

logger = logging.getLogger(__name__)

# --- Module-level constants ---
IMAGE_FAILED_MESSAGE = "Image failed to load!"
PLACEHOLDER_IMAGE = (
    'data:image/svg+xml;utf8,<svg xmlns="http://www.w3.org/2000/svg" width="100" '
    'height="100" viewBox="0 0 24 24"><path fill="gray" d="M21 19V5c0-1.1-.9-2-2-2H5c-1.1 '
    '0-2 .9-2 2v14c0 1.1.9 2 2 2h14c1.1 0 2-.9 2-2zM8.5 15.5l2.5 3.01L14.5 14l4.5 6H5l3.5-4.5z"/></svg>'
)


class ImageLoadSequencer(QObject):
    """
    Loads the current record's image in the background.

    Usage:
        sequencer = ImageLoadSequencer(notifier=notifier)
        sequencer.display_changed.connect(view.show_image)
        sequencer.request(record.image, alt_text=record.title)
    """

    display_changed = pyqtSignal(object)  # ImageDisplay
    state_changed = pyqtSignal(object)    # ImageLoadState

    def __init__(
        self,
        notifier: Optional[StatusNotifier] = None,
        loader: Callable[..., Any] = load_image,
        task_manager: Optional[BackgroundTaskManager] = None,
        parent=None
    ):
        super().__init__(parent)
        self._notifier = notifier
        self._loader = loader
        self._task_manager = task_manager or BackgroundTaskManager()
        self._generation = 0
        self._state = ImageLoadState.IDLE
        self._source = ""
        self._alt_text = ""
        self._display = ImageDisplay(state=ImageLoadState.IDLE)

    # ========== STATE ==========

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def state(self) -> ImageLoadState:
        return self._state

    @property
    def display(self) -> ImageDisplay:
        """The display state most recently emitted."""
        return self._display

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    # ========== REQUESTS ==========

    def request(self, source: str, alt_text: str = "") -> int:
        """
        Start loading source, superseding any load in flight.

        Returns:
            The generation assigned to this load.
        """
        self._generation += 1
        generation = self._generation
        self._source = source
        self._alt_text = alt_text

        self._transition(ImageDisplay(
            state=ImageLoadState.LOADING,
            source=source,
            alt_text=alt_text,
            loading=True,
            opacity=0.0,
        ))

        self._task_manager.run(
            target=self._loader,
            args=(source,),
            kwargs={"timeout": get_app_config().image_timeout_s},
            generation=generation,
            on_success=self.handle_result,
            on_error=self.handle_error,
        )
        logger.debug(f"Image load #{generation} started for {source}")
        return generation

    def reset(self) -> None:
        """Invalidate any in-flight load and return to IDLE."""
        self._generation += 1
        self._source = ""
        self._alt_text = ""
        self._transition(ImageDisplay(state=ImageLoadState.IDLE))

    def shutdown(self) -> None:
        """Invalidate pending loads and wait briefly for worker threads."""
        self._generation += 1
        self._task_manager.cleanup()

    # ========== COMPLETION ==========

    @pyqtSlot(int, object)
    def handle_result(self, generation: int, image: Any) -> None:
        """Completion slot for background loads."""
        if not self.is_current(generation):
            logger.debug(f"Dropping stale image result #{generation} (current #{self._generation})")
            return
        self._transition(ImageDisplay(
            state=ImageLoadState.LOADED,
            source=self._source,
            alt_text=self._alt_text,
            image=image,
            loading=False,
            opacity=1.0,
        ))

    @pyqtSlot(int, Exception)
    def handle_error(self, generation: int, error: Exception) -> None:
        """Failure slot for background loads."""
        if not self.is_current(generation):
            logger.debug(f"Dropping stale image failure #{generation}: {error}")
            return
        logger.error(f"Image failed to load ({self._source}): {error}")
        self._transition(ImageDisplay(
            state=ImageLoadState.FAILED,
            source=PLACEHOLDER_IMAGE,
            alt_text=self._alt_text,
            loading=False,
            opacity=1.0,
        ))
        if self._notifier is not None:
            self._notifier.show(IMAGE_FAILED_MESSAGE, get_app_config().image_error_status_ms)

    def _transition(self, display: ImageDisplay) -> None:
        self._display = display
        if display.state != self._state:
            self._state = display.state
            self.state_changed.emit(display.state)
        self.display_changed.emit(display)
