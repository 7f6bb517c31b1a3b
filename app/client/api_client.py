"""HTTP-Client für die Helferplaner-API"""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Union

import httpx

logger = logging.getLogger(__name__)

JsonDict = Dict[str, Any]


class ApiError(Exception):
    """Antwort der API mit Status außerhalb von 2xx"""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class VolunteerApiClient:
    """
    Synchroner Client für alle /api Endpunkte.

    Antworten werden als JSON (camelCase-Keys) zurückgegeben. Für Tests kann
    ein vorhandener httpx.Client übergeben werden, z.B. FastAPIs TestClient.

    Usage:
        with VolunteerApiClient("http://127.0.0.1:8000") as api:
            event = api.create_event({"name": "Food Drive", ...})
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        client: Optional[httpx.Client] = None,
        timeout: float = 10.0
    ):
        self._owns_client = client is None
        self.http = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self.http.close()

    def __enter__(self) -> "VolunteerApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self.http.request(method, path, **kwargs)

        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            logger.warning(f"{method} {path} failed with {response.status_code}: {detail}")
            raise ApiError(response.status_code, detail)

        if response.status_code == 204 or not response.content:
            return None
        if response.headers.get("content-type", "").startswith("application/json"):
            return response.json()
        return response.content

    # ===== Auth =====
    def login(self, username: str, password: str) -> JsonDict:
        return self._request("POST", "/api/login", json={"username": username, "password": password})

    def logout(self) -> None:
        self._request("GET", "/api/logout")

    def get_current_user(self) -> JsonDict:
        return self._request("GET", "/api/auth/user")

    def update_current_user(self, data: JsonDict) -> JsonDict:
        return self._request("PATCH", "/api/auth/user", json=data)

    # ===== Events =====
    def list_events(self) -> List[JsonDict]:
        return self._request("GET", "/api/events")

    def get_event(self, event_id: int) -> JsonDict:
        return self._request("GET", f"/api/events/{event_id}")

    def create_event(self, data: JsonDict) -> JsonDict:
        return self._request("POST", "/api/events", json=data)

    def update_event(self, event_id: int, data: JsonDict) -> JsonDict:
        return self._request("PATCH", f"/api/events/{event_id}", json=data)

    def get_event_stats(self, event_id: int) -> JsonDict:
        return self._request("GET", f"/api/events/{event_id}/stats")

    # ===== Volunteers =====
    def list_volunteers(self, event_id: int, search: Optional[str] = None) -> List[JsonDict]:
        params = {"search": search} if search else None
        return self._request("GET", f"/api/events/{event_id}/volunteers", params=params)

    def create_volunteer(self, event_id: int, data: JsonDict) -> JsonDict:
        return self._request("POST", f"/api/events/{event_id}/volunteers", json=data)

    def get_volunteer(self, volunteer_id: int) -> JsonDict:
        return self._request("GET", f"/api/volunteers/{volunteer_id}")

    def update_volunteer(self, volunteer_id: int, data: JsonDict) -> JsonDict:
        return self._request("PATCH", f"/api/volunteers/{volunteer_id}", json=data)

    def delete_volunteer(self, volunteer_id: int) -> None:
        self._request("DELETE", f"/api/volunteers/{volunteer_id}")

    def check_in(self, volunteer_id: int, checked_in_by: Optional[str] = None) -> JsonDict:
        return self._request("POST", f"/api/volunteers/{volunteer_id}/check-in", json={"checkedInBy": checked_in_by})

    def check_in_by_qr_code(self, code: str, checked_in_by: Optional[str] = None) -> JsonDict:
        return self._request("POST", "/api/check-in/qr", json={"code": code, "checkedInBy": checked_in_by})

    def get_volunteer_qr_code(self, volunteer_id: int) -> bytes:
        return self._request("GET", f"/api/volunteers/{volunteer_id}/qr-code")

    # ===== Shifts =====
    def list_shifts(self, event_id: int) -> List[JsonDict]:
        return self._request("GET", f"/api/events/{event_id}/shifts")

    def list_shifts_by_date(self, event_id: int, shift_date: Union[date, str]) -> List[JsonDict]:
        day = shift_date.isoformat() if isinstance(shift_date, date) else shift_date
        return self._request("GET", f"/api/events/{event_id}/shifts/date/{day}")

    def create_shift(self, event_id: int, data: JsonDict) -> JsonDict:
        return self._request("POST", f"/api/events/{event_id}/shifts", json=data)

    def get_shift(self, shift_id: int) -> JsonDict:
        return self._request("GET", f"/api/shifts/{shift_id}")

    def update_shift(self, shift_id: int, data: JsonDict) -> JsonDict:
        return self._request("PUT", f"/api/shifts/{shift_id}", json=data)

    def delete_shift(self, shift_id: int) -> None:
        self._request("DELETE", f"/api/shifts/{shift_id}")

    # ===== Roles =====
    def list_roles(self, event_id: int) -> List[JsonDict]:
        return self._request("GET", f"/api/events/{event_id}/roles")

    def create_role(self, event_id: int, data: JsonDict) -> JsonDict:
        return self._request("POST", f"/api/events/{event_id}/roles", json=data)

    def get_role(self, role_id: int) -> JsonDict:
        return self._request("GET", f"/api/roles/{role_id}")

    def update_role(self, role_id: int, data: JsonDict) -> JsonDict:
        return self._request("PATCH", f"/api/roles/{role_id}", json=data)

    def delete_role(self, role_id: int) -> None:
        self._request("DELETE", f"/api/roles/{role_id}")

    # ===== Shift-Roles =====
    def get_shift_roles(self, shift_id: int) -> List[JsonDict]:
        return self._request("GET", f"/api/shifts/{shift_id}/roles")

    def assign_role(self, shift_id: int, role_id: int) -> JsonDict:
        return self._request("POST", "/api/shift-roles", json={"shiftId": shift_id, "roleId": role_id})

    def replace_shift_roles(self, shift_id: int, role_ids: Iterable[int]) -> List[JsonDict]:
        return self._request("PUT", f"/api/shifts/{shift_id}/roles", json={"roleIds": sorted(role_ids)})

    def remove_role(self, shift_id: int, role_id: int) -> None:
        self._request("DELETE", f"/api/shifts/{shift_id}/roles/{role_id}")
