import asyncio
import time
from dataclasses import replace

from linguistika import schemas
from linguistika.crud.tutor import tutor as crud_tutor
from linguistika.models.enums import EstadoClase, EstadoPago
from linguistika.views import (
    ClasesView,
    CursosView,
    MatriculasView,
    PagosView,
    TutoresView,
)
from linguistika.views.base import ErrorKind, ViewState

from helpers import HOY, FlakyFacade, GatedFacade, SlowFacade, SpyFacade


def run(coro):
    return asyncio.run(coro)


def fast(**kwargs):
    kwargs.setdefault("retry_delay", 0)
    kwargs.setdefault("timeout", 5)
    return kwargs


# ==========================================
# CARGA
# ==========================================

def test_load_fills_items_and_options(api, academy):
    view = MatriculasView(api, **fast())
    assert view.state is ViewState.IDLE

    assert run(view.load()) is True
    assert view.state is ViewState.LOADED
    assert [m.id for m in view.items] == [academy["m1"].id, academy["m2"].id]
    assert len(view.options["tutores"]) == 2
    assert len(view.options["cursos"]) == 2
    assert len(view.options["estudiantes"]) == 2
    assert view.error is None


def test_transient_failures_are_retried(api, academy):
    flaky = FlakyFacade(api.tutores, failures=2)
    view = TutoresView(replace(api, tutores=flaky), **fast(max_retries=2))

    assert run(view.load()) is True
    assert flaky.count("get_all") == 3
    assert len(view.items) == 2


def test_permanent_failure_is_not_retried(api, academy):
    flaky = FlakyFacade(api.tutores, failures=1, transient=False)
    errors = []
    view = TutoresView(replace(api, tutores=flaky), notify=errors.append, **fast(max_retries=3))

    assert run(view.load()) is False
    assert flaky.count("get_all") == 1
    assert view.state is ViewState.FAILED
    assert view.error.kind is ErrorKind.TRANSPORT
    assert view.error.recovery == "report"
    assert errors == [view.error]


def test_failed_reload_keeps_previous_items(api, academy):
    flaky = FlakyFacade(api.tutores, failures=0)
    view = TutoresView(replace(api, tutores=flaky), **fast(max_retries=0))
    run(view.load())

    flaky.failures = 1
    assert run(view.load()) is False
    assert len(view.items) == 2
    assert view.stale is True
    assert view.state is ViewState.LOADED
    assert view.error.retryable is True
    assert view.error.recovery == "retry"


def test_slow_facade_times_out(api, academy):
    view = TutoresView(replace(api, tutores=SlowFacade(api.tutores)), timeout=0.01, max_retries=0)

    assert run(view.load()) is False
    assert view.state is ViewState.FAILED
    assert view.error.kind is ErrorKind.TRANSPORT
    assert view.error.retryable is True


def test_blocking_query_is_bounded_by_timeout(api, academy, monkeypatch):
    get_multi = crud_tutor.get_multi

    def blocking_get_multi(db, **kwargs):
        time.sleep(0.5)
        return get_multi(db, **kwargs)

    monkeypatch.setattr(crud_tutor, "get_multi", blocking_get_multi)
    view = TutoresView(api, timeout=0.05, max_retries=0)

    started = time.perf_counter()
    assert run(view.load()) is False
    assert view.state is ViewState.FAILED
    assert view.error.kind is ErrorKind.TRANSPORT
    assert view.error.retryable is True
    assert time.perf_counter() - started < 1.0


def test_outdated_response_is_discarded(api, academy):
    async def scenario():
        gated = GatedFacade(api.tutores)
        view = TutoresView(replace(api, tutores=gated), **fast())

        first = asyncio.create_task(view.load())
        while gated.reads == 0:
            await asyncio.sleep(0)

        assert await view.load() is True
        gated.gate.set()
        assert await first is False
        return view

    view = run(scenario())
    assert len(view.items) == 2
    assert view.state is ViewState.LOADED


# ==========================================
# BORRADOR Y ESCRITURA
# ==========================================

def test_open_edit_only_copies_editable_fields(api, academy):
    view = MatriculasView(api, **fast())
    run(view.load())

    draft = view.open_edit(view.items[0])
    assert set(draft) == set(schemas.MatriculaCreate.model_fields)
    assert "tutor_nombre" not in draft
    assert view.editing_id == academy["m1"].id


def test_create_then_reload(api, academy):
    spy = SpyFacade(api.cursos)
    view = CursosView(replace(api, cursos=spy), **fast())
    run(view.load())

    draft = view.open_create()
    draft.update(nombre="Alemán A2", nivel="A2", max_estudiantes=6)
    assert run(view.submit()) is True

    assert spy.calls[-2:] == [("cursos", "create"), ("cursos", "get_all")]
    assert view.draft is None
    assert [c.nombre for c in view.items][-1] == "Alemán A2"


def test_edit_submits_update(api, academy):
    view = TutoresView(api, **fast())
    run(view.load())

    draft = view.open_edit(view.items[0])
    draft["tarifa_por_hora"] = 25.0
    assert run(view.submit()) is True
    assert view.items[0].tarifa_por_hora == 25.0
    assert view.editing_id is None


def test_enrollment_without_selection_never_reaches_facade(api, academy):
    spy = SpyFacade(api.matriculas)
    view = MatriculasView(replace(api, matriculas=spy), **fast())
    run(view.load())

    view.open_create()
    assert run(view.submit()) is False
    assert spy.count("create") == 0
    assert view.error.kind is ErrorKind.VALIDATION
    assert view.error.field == "estudiante_id"
    assert view.error.recovery == "fix_form"
    assert view.draft is not None


def test_payment_requires_positive_amount(api, academy):
    spy = SpyFacade(api.pagos)
    view = PagosView(replace(api, pagos=spy), **fast())
    run(view.load())

    view.open_create()
    assert run(view.submit({"tutor_id": academy["ana"].id, "monto": 0})) is False
    assert spy.count("create") == 0
    assert view.error.field == "monto"


def test_inverted_schedule_is_rejected_locally(api, academy):
    spy = SpyFacade(api.clases)
    view = ClasesView(replace(api, clases=spy), **fast())
    run(view.load())

    draft = view.open_create()
    draft.update(
        matricula_id=academy["m1"].id,
        fecha=HOY,
        hora_inicio=draft["hora_fin"],
        hora_fin=draft["hora_inicio"],
    )
    assert run(view.submit()) is False
    assert spy.count("create") == 0
    assert view.error.kind is ErrorKind.VALIDATION


def test_create_clase_shows_joined_names(api, academy):
    view = ClasesView(api, **fast())
    run(view.load())
    assert len(view.options["matriculas"]) == 2

    draft = view.open_create()
    draft.update(matricula_id=academy["m2"].id, fecha=HOY)
    assert run(view.submit()) is True

    clase = view.items[0]
    assert clase.estado is EstadoClase.PROGRAMADA
    assert clase.estudiante_nombre == "Gabriel Fernández"
    assert clase.tutor_nombre == "Pierre Martin"


def test_referential_error_is_reported(api, academy):
    errors = []
    view = MatriculasView(api, notify=errors.append, **fast())
    run(view.load())

    view.open_create()
    ok = run(
        view.submit({"estudiante_id": academy["lucia"].id, "curso_id": 999, "tutor_id": academy["ana"].id})
    )
    assert ok is False
    assert view.error.kind is ErrorKind.REFERENTIAL
    assert view.error.recovery == "fix_references"
    assert view.state is ViewState.LOADED
    assert view.draft is not None
    assert len(errors) == 1


def test_update_of_deleted_record_suggests_reload(api, academy):
    view = CursosView(api, **fast())
    run(view.load())
    nuevo = run(api.cursos.create(schemas.CursoCreate(nombre="Italiano A1")))
    run(view.load())

    view.open_edit(view.items[-1])
    run(api.cursos.delete(nuevo.id))

    assert run(view.submit()) is False
    assert view.error.kind is ErrorKind.NOT_FOUND
    assert view.error.recovery == "reload"


# ==========================================
# BORRADO
# ==========================================

def test_delete_waits_for_confirmation(api, academy):
    spy = SpyFacade(api.matriculas)
    view = MatriculasView(replace(api, matriculas=spy), **fast())
    run(view.load())

    view.request_delete(academy["m2"].id)
    assert spy.count("delete") == 0

    view.cancel_delete()
    assert run(view.confirm_delete()) is False
    assert spy.count("delete") == 0

    view.request_delete(academy["m2"].id)
    assert run(view.confirm_delete()) is True
    assert spy.count("delete") == 1
    assert [m.id for m in view.items] == [academy["m1"].id]
    assert view.pending_delete is None


def test_delete_of_referenced_tutor_fails(api, academy):
    view = TutoresView(api, **fast())
    run(view.load())

    view.request_delete(academy["ana"].id)
    assert run(view.confirm_delete()) is False
    assert view.error.kind is ErrorKind.REFERENTIAL
    assert len(view.items) == 2


# ==========================================
# PAGOS
# ==========================================

def test_pagos_filter_and_total(api, academy):
    ana, pierre = academy["ana"].id, academy["pierre"].id
    for tutor_id, monto in ((ana, 40.0), (ana, 22.5), (pierre, 100.0)):
        run(api.pagos.create(schemas.PagoCreate(tutor_id=tutor_id, monto=monto)))

    view = PagosView(api, **fast())
    run(view.load())
    assert view.total_filtrado == 162.5

    view.filter_tutor = ana
    assert len(view.filtered_items) == 2
    assert view.total_filtrado == 62.5
    assert all(p.tutor_nombre == "Ana García" for p in view.filtered_items)


def test_mark_paid(api, academy):
    pago = run(api.pagos.create(schemas.PagoCreate(tutor_id=academy["ana"].id, monto=40.0)))
    view = PagosView(api, **fast())
    run(view.load())

    assert run(view.mark_paid(pago.id)) is True
    assert view.items[0].estado is EstadoPago.PAGADO
    assert run(api.dashboard.get_stats()).ingresos_pendientes == 0.0


# ==========================================
# ESCRITURAS CONCURRENTES
# ==========================================

def test_second_submit_is_ignored_while_writing(api, academy):
    async def scenario():
        gated = GatedFacade(api.cursos, gate_writes=True)
        gated.gate.set()
        view = CursosView(replace(api, cursos=gated), **fast())
        await view.load()

        view.open_create()
        view.draft.update(nombre="Alemán A2")
        first = asyncio.create_task(view.submit())
        while gated.count("create") == 0:
            await asyncio.sleep(0)

        assert view.state is ViewState.SUBMITTING
        assert await view.submit() is False
        gated.write_gate.set()
        assert await first is True
        return view, gated

    view, gated = run(scenario())
    assert gated.count("create") == 1
    assert [c.nombre for c in view.items].count("Alemán A2") == 1


def test_load_in_flight_does_not_interrupt_write(api, academy):
    async def scenario():
        gated = GatedFacade(api.cursos, gate_writes=True)
        view = CursosView(replace(api, cursos=gated), **fast())

        loading = asyncio.create_task(view.load())
        while gated.reads == 0:
            await asyncio.sleep(0)

        view.open_create()
        view.draft.update(nombre="Alemán A2")
        writing = asyncio.create_task(view.submit())
        while gated.count("create") == 0:
            await asyncio.sleep(0)

        gated.gate.set()
        assert await loading is False
        assert view.state is ViewState.SUBMITTING

        gated.write_gate.set()
        assert await writing is True
        return view

    view = run(scenario())
    assert view.state is ViewState.LOADED
    assert "Alemán A2" in [c.nombre for c in view.items]
