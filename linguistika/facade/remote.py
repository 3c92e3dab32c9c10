import asyncio
import logging
from datetime import date
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel

from linguistika import schemas
from linguistika.config.settings import settings
from linguistika.core.exceptions import TransportError, error_from_response
from linguistika.facade.base import (
    ENTITIES,
    AcademyApi,
    DashboardFacade,
    EntityDefinition,
    EntityFacade,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class HttpClient:
    """Cliente JSON mínimo sobre la API REST; las llamadas bloqueantes van a un hilo."""

    def __init__(self, base_url: str = None, session: Any = None, timeout: float = None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or settings.request_timeout

    async def request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await asyncio.to_thread(self.send, method, path, payload, params)

    def send(self, method, path, payload=None, params=None) -> Any:
        url = f"{self.base_url}{API_PREFIX}{path}"
        try:
            response = self.session.request(
                method, url, json=payload, params=params, timeout=self.timeout
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.warning("%s %s sin respuesta: %s", method, url, e)
            raise TransportError(f"No se pudo contactar {url}", transient=True) from e
        except requests.RequestException as e:
            raise TransportError(f"Petición inválida a {url}: {e}", transient=False) from e

        if response.status_code == 204:
            return None
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = None
            raise error_from_response(response.status_code, body)
        return response.json()


class HttpEntityFacade(EntityFacade):
    def __init__(self, definition: EntityDefinition, client: HttpClient):
        super().__init__(definition)
        self.client = client

    def _view(self, item):
        return self.definition.view_schema.model_validate(item)

    async def get_all(self):
        items = await self.client.request("GET", f"/{self.name}/")
        return [self._view(item) for item in items]

    async def create(self, data: BaseModel):
        item = await self.client.request("POST", f"/{self.name}/", data.model_dump(mode="json"))
        return self._view(item)

    async def update(self, id: int, data: BaseModel):
        payload = data.model_dump(mode="json", exclude_unset=True)
        item = await self.client.request("PUT", f"/{self.name}/{id}", payload)
        return self._view(item)

    async def delete(self, id: int) -> None:
        await self.client.request("DELETE", f"/{self.name}/{id}")


class HttpDashboardFacade(DashboardFacade):
    def __init__(self, client: HttpClient):
        self.client = client

    async def get_stats(self) -> schemas.Stats:
        return schemas.Stats.model_validate(
            await self.client.request("GET", "/dashboard/stats")
        )

    async def get_agenda(self, fecha: date) -> List[schemas.Clase]:
        items = await self.client.request(
            "GET", "/dashboard/agenda", params={"fecha": fecha.isoformat()}
        )
        return [schemas.Clase.model_validate(item) for item in items]

    async def get_resumen_tutores(self, fecha: date) -> List[schemas.ResumenTutor]:
        items = await self.client.request(
            "GET", "/dashboard/resumen-tutores", params={"fecha": fecha.isoformat()}
        )
        return [schemas.ResumenTutor.model_validate(item) for item in items]


def build_http_api(base_url: str = None, session: Any = None, timeout: float = None) -> AcademyApi:
    client = HttpClient(base_url, session, timeout)
    facades = {
        name: HttpEntityFacade(definition, client) for name, definition in ENTITIES.items()
    }
    return AcademyApi(dashboard=HttpDashboardFacade(client), **facades)
