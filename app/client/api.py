from collections.abc import Mapping
from typing import Any

import httpx

from app.client.auth import DEFAULT_TOKEN_COOKIE, User, get_token, get_user


class MemoriesClient:
    """Calls the memories API on behalf of the user whose token is in ``cookies``.

    ``http`` is any ``httpx.Client`` already pointed at the API (a FastAPI
    ``TestClient`` works too). Error responses raise ``httpx.HTTPStatusError``.
    """

    def __init__(
        self,
        http: httpx.Client,
        cookies: Mapping[str, str],
        cookie_name: str = DEFAULT_TOKEN_COOKIE,
        prefix: str = '',
    ) -> None:
        self._http = http
        self._prefix = prefix.rstrip('/')
        self._headers = {'Authorization': f"Bearer {get_token(cookies, cookie_name)}"}
        self.user: User = get_user(cookies, cookie_name)

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = self._http.request(method, f"{self._prefix}{path}", headers=self._headers, **kwargs)
        response.raise_for_status()
        return response

    def list_memories(self) -> list[dict]:
        return self._request('GET', '/memories').json()

    def get_memory(self, memory_id: str) -> dict:
        return self._request('GET', f"/memories/{memory_id}").json()

    def create_memory(self, content: str, cover_url: str, is_public: bool = False) -> dict:
        body = {'content': content, 'coverUrl': cover_url, 'isPublic': is_public}
        return self._request('POST', '/memories', json=body).json()

    def update_memory(self, memory_id: str, content: str, cover_url: str, is_public: bool = False) -> dict:
        body = {'content': content, 'coverUrl': cover_url, 'isPublic': is_public}
        return self._request('PUT', f"/memories/{memory_id}", json=body).json()

    def delete_memory(self, memory_id: str) -> None:
        self._request('DELETE', f"/memories/{memory_id}")
