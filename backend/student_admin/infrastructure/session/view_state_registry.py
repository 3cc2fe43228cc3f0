"""Per-session view state — one EditSessionController per browser session."""

import logging
from collections.abc import Callable

from student_admin.application.services import EditSessionController

logger = logging.getLogger(__name__)


class ViewStateRegistry:
    """Holds the student management view's controller for each session.

    A controller is created the first time a session opens the view and
    dropped when the session logs out, just as leaving the page would.
    """

    def __init__(self) -> None:
        self._controllers: dict[str, EditSessionController] = {}

    def get_or_create(
        self,
        session_id: str,
        factory: Callable[[], EditSessionController],
    ) -> EditSessionController:
        controller = self._controllers.get(session_id)
        if controller is None:
            controller = factory()
            self._controllers[session_id] = controller
            logger.debug("Created student view state for session %s", session_id)
        return controller

    def discard(self, session_id: str) -> None:
        if self._controllers.pop(session_id, None) is not None:
            logger.debug("Discarded student view state for session %s", session_id)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._controllers
