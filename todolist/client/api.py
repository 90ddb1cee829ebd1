import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3002/api/tasks"


class ApiError(Exception):
    """A request to the tasks API failed (transport error or non-2xx status)."""


class TaskApiClient:
    """Thin wrapper over the four Task endpoints.

    Tasks travel as the plain JSON dicts the server returns.
    """

    def __init__(self, base_url: str = DEFAULT_API_URL, session=None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str = "", key: Optional[str] = None, **kwargs) -> Any:
        """Send one request; return ``body[key]``, or nothing when ``key`` is None.

        With no key the body is not decoded, so an empty 2xx (e.g. 204) is a success.
        """
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
            if key is None:
                return None
            return resp.json()[key]
        except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
            logger.warning("%s %s failed: %r", method, url, exc)
            raise ApiError(str(exc)) from exc

    def list_tasks(self) -> List[Dict[str, Any]]:
        return self._request("GET", key="tasks")

    def create_task(self, title: str) -> Dict[str, Any]:
        return self._request("POST", key="task", json={"title": title})

    def update_task(self, task_id: str, **changes) -> Dict[str, Any]:
        return self._request("PUT", f"/{task_id}", key="task", json=changes)

    def delete_task(self, task_id: str) -> None:
        # Any 2xx counts; the body is not read
        self._request("DELETE", f"/{task_id}")
