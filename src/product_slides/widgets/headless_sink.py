"""RenderSink that records state instead of drawing it."""

from typing import List

from product_slides.models import EditValues
from product_slides.protocols import ImageDisplay, ImageLoadState, RenderSink


class HeadlessRenderSink(RenderSink):
    """
    In-memory render sink for scripting and tests.

    The editable values live here exactly as they would in widgets, so
    set_edit_values() followed by a session command behaves like typing.
    """

    def __init__(self):
        self.title = ""
        self.position = ""
        self.message = ""
        self.status = ""
        self.values = EditValues()
        self.image = ImageDisplay(state=ImageLoadState.IDLE)
        self.images: List[ImageDisplay] = []
        self.statuses: List[str] = []

    def show_product(self, title: str, values: EditValues, position: str) -> None:
        self.title = title
        self.values = values
        self.position = position
        self.message = ""

    def show_image(self, display: ImageDisplay) -> None:
        self.image = display
        self.images.append(display)

    def show_message(self, text: str) -> None:
        self.message = text
        self.title = ""
        self.position = ""
        self.values = EditValues()

    def set_status(self, text: str) -> None:
        self.status = text
        self.statuses.append(text)

    def read_edit_values(self) -> EditValues:
        return self.values

    def set_edit_values(self, values: EditValues) -> None:
        self.values = values
