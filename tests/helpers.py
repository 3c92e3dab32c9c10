import asyncio
from datetime import date, time

from linguistika import schemas
from linguistika.core.exceptions import TransportError
from linguistika.facade.base import EntityFacade


class SpyFacade(EntityFacade):
    """Registra cada llamada y delega en el facade real."""

    def __init__(self, inner, log=None):
        super().__init__(inner.definition)
        self.inner = inner
        self.calls = log if log is not None else []

    async def get_all(self):
        self.calls.append((self.name, "get_all"))
        return await self.inner.get_all()

    async def create(self, data):
        self.calls.append((self.name, "create"))
        return await self.inner.create(data)

    async def update(self, id, data):
        self.calls.append((self.name, "update"))
        return await self.inner.update(id, data)

    async def delete(self, id):
        self.calls.append((self.name, "delete"))
        return await self.inner.delete(id)

    def count(self, operation):
        return sum(1 for _, op in self.calls if op == operation)


class FlakyFacade(SpyFacade):
    """Falla `failures` veces con un error transitorio antes de responder."""

    def __init__(self, inner, failures, transient=True):
        super().__init__(inner)
        self.failures = failures
        self.transient = transient

    async def get_all(self):
        self.calls.append((self.name, "get_all"))
        if self.failures:
            self.failures -= 1
            raise TransportError("Servicio caído", transient=self.transient)
        return await self.inner.get_all()


class GatedFacade(SpyFacade):
    """
    La primera lectura espera a `gate` y devuelve una lista vacía.

    Con `write_gate`, cada `create` espera también a que se abra.
    """

    def __init__(self, inner, gate_writes=False):
        super().__init__(inner)
        self.gate = asyncio.Event()
        self.write_gate = asyncio.Event() if gate_writes else None
        self.reads = 0

    async def create(self, data):
        self.calls.append((self.name, "create"))
        if self.write_gate is not None:
            await self.write_gate.wait()
        return await self.inner.create(data)

    async def get_all(self):
        self.reads += 1
        if self.reads == 1:
            await self.gate.wait()
            return []
        return await self.inner.get_all()


class SlowFacade(SpyFacade):
    async def get_all(self):
        await asyncio.sleep(1)
        return await self.inner.get_all()


HOY = date(2025, 3, 10)


def nueva_clase(matricula_id, fecha=HOY, inicio=9, fin=10, **extra):
    return schemas.ClaseCreate(
        matricula_id=matricula_id,
        fecha=fecha,
        hora_inicio=time(inicio, 0),
        hora_fin=time(fin, 0),
        **extra,
    )
