import asyncio
import time
from dataclasses import replace
from datetime import timedelta

from linguistika.core.exceptions import TransportError
from linguistika.crud.dashboard import dashboard as crud_dashboard
from linguistika.facade.base import DashboardFacade
from linguistika.views import DashboardView
from linguistika.views.base import ErrorKind, ViewState

from helpers import HOY, nueva_clase


def run(coro):
    return asyncio.run(coro)


class TrackingDashboard(DashboardFacade):
    """Delega en el dashboard real y anota cuántas consultas hay en vuelo."""

    def __init__(self, inner, delay=0.01):
        self.inner = inner
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0
        self.fail = set()
        self.gates = {}

    async def _track(self, name, factory, fecha=None):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if fecha in self.gates:
                await self.gates[fecha].wait()
            if name in self.fail:
                raise TransportError(f"{name} no disponible", transient=False)
            return await factory()
        finally:
            self.in_flight -= 1

    async def get_stats(self):
        return await self._track("stats", self.inner.get_stats)

    async def get_agenda(self, fecha):
        return await self._track("agenda", lambda: self.inner.get_agenda(fecha), fecha)

    async def get_resumen_tutores(self, fecha):
        return await self._track("resumen", lambda: self.inner.get_resumen_tutores(fecha), fecha)


def test_dashboard_loads_all_sections_in_parallel(api, academy):
    run(api.clases.create(nueva_clase(academy["m1"].id)))
    run(api.clases.create(nueva_clase(academy["m2"].id, inicio=12, fin=13)))
    tracking = TrackingDashboard(api.dashboard)
    view = DashboardView(replace(api, dashboard=tracking), selected_date=HOY, retry_delay=0)

    assert run(view.load()) is True
    assert tracking.max_in_flight == 3
    assert view.state is ViewState.LOADED
    assert view.stats.total_clases == 2
    assert len(view.agenda) == 2
    assert [r.tutor_nombre for r in view.resumen] == ["Ana García", "Pierre Martin"]


def test_blocking_queries_run_in_parallel(api, academy, monkeypatch):
    run(api.clases.create(nueva_clase(academy["m1"].id)))

    def blocking(query):
        def wrapper(*args):
            time.sleep(0.3)
            return query(*args)

        return wrapper

    for name in ("get_stats", "get_agenda", "get_resumen_tutores"):
        monkeypatch.setattr(crud_dashboard, name, blocking(getattr(crud_dashboard, name)))

    view = DashboardView(api, selected_date=HOY)
    started = time.perf_counter()
    assert run(view.load()) is True
    assert time.perf_counter() - started < 0.75
    assert len(view.agenda) == 1
    assert view.resumen[0].total_clases == 1


def test_set_date_reloads_for_new_day(api, academy):
    run(api.clases.create(nueva_clase(academy["m1"].id)))
    view = DashboardView(api, selected_date=HOY)
    run(view.load())
    assert len(view.agenda) == 1

    assert run(view.set_date(HOY + timedelta(days=1))) is True
    assert view.agenda == []
    assert view.resumen == []
    assert view.stats.total_clases == 1


def test_partial_failure_applies_nothing(api, academy):
    run(api.clases.create(nueva_clase(academy["m1"].id)))
    tracking = TrackingDashboard(api.dashboard, delay=0)
    errors = []
    view = DashboardView(
        replace(api, dashboard=tracking), selected_date=HOY, notify=errors.append, max_retries=0
    )
    run(view.load())
    previous = (view.stats, view.agenda, view.resumen)

    run(api.clases.create(nueva_clase(academy["m2"].id, inicio=12, fin=13)))
    tracking.fail.add("resumen")
    assert run(view.load()) is False

    assert (view.stats, view.agenda, view.resumen) == previous
    assert view.stale is True
    assert view.state is ViewState.LOADED
    assert view.error.kind is ErrorKind.TRANSPORT
    assert len(errors) == 1


def test_first_load_failure_leaves_view_failed(api, academy):
    tracking = TrackingDashboard(api.dashboard, delay=0)
    tracking.fail.add("stats")
    view = DashboardView(replace(api, dashboard=tracking), selected_date=HOY, max_retries=0)

    assert run(view.load()) is False
    assert view.state is ViewState.FAILED
    assert view.stats is None
    assert view.agenda == []


def test_response_for_previous_date_is_discarded(api, academy):
    run(api.clases.create(nueva_clase(academy["m1"].id)))
    manana = HOY + timedelta(days=1)

    async def scenario():
        tracking = TrackingDashboard(api.dashboard, delay=0)
        tracking.gates[HOY] = asyncio.Event()
        view = DashboardView(replace(api, dashboard=tracking), selected_date=HOY)

        first = asyncio.create_task(view.load())
        while tracking.in_flight == 0:
            await asyncio.sleep(0)

        assert await view.set_date(manana) is True
        tracking.gates[HOY].set()
        assert await first is False
        return view

    view = run(scenario())
    assert view.selected_date == manana
    assert view.agenda == []
    assert view.state is ViewState.LOADED
