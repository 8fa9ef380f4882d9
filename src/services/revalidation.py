import logging
from typing import Callable

logger = logging.getLogger(__name__)

CAUSES_PATH = "/dashboard/causes"
ADMIN_CAUSES_PATH = "/dashboard/admin/causes"

Listener = Callable[[str], None]


def cause_detail_path(cause_id: str) -> str:
    return f"{CAUSES_PATH}/{cause_id}"


class PathRevalidator:
    """Рассылает сигналы о том, что закешированные страницы по пути устарели.

    Сигнал отправляется по принципу "отправил и забыл": ошибка слушателя
    логируется и не доходит до вызывающего кода.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def revalidate_path(self, path: str) -> None:
        logger.debug("Revalidating path %s", path)

        for listener in list(self._listeners):
            try:
                listener(path)
            except Exception:
                logger.exception("Revalidation listener failed for path %s", path)
