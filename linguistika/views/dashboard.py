import logging
from datetime import date
from typing import List, Optional

from linguistika.facade.base import AcademyApi
from linguistika.schemas import Clase, ResumenTutor, Stats
from linguistika.views.base import BaseView, ViewState

logger = logging.getLogger(__name__)


class DashboardView(BaseView):
    """
    Estadísticas globales, agenda del día y resumen por tutor.

    Las tres consultas salen en paralelo bajo un único estado de carga y se
    aplican todas o ninguna. Cambiar la fecha invalida cualquier carga en curso.
    """

    def __init__(self, api: AcademyApi, selected_date: date = None, **kwargs):
        super().__init__(**kwargs)
        self.facade = api.dashboard
        self.selected_date = selected_date or date.today()
        self.stats: Optional[Stats] = None
        self.agenda: List[Clase] = []
        self.resumen: List[ResumenTutor] = []

    async def load(self) -> bool:
        token = self._next_token()
        fecha = self.selected_date
        self.state = ViewState.LOADING

        results, failures = await self._gather(
            self.facade.get_stats,
            lambda: self.facade.get_agenda(fecha),
            lambda: self.facade.get_resumen_tutores(fecha),
        )

        if not self._is_current(token):
            logger.debug("Dashboard: respuesta para %s descartada", fecha)
            return False

        if failures:
            for failure in failures:
                logger.error("Dashboard: fallo cargando %s: %s", fecha, failure)
            self._report(failures[0])
            self.stale = self._loaded_once
            self._settle()
            return False

        self.stats, self.agenda, self.resumen = results
        self._loaded_once = True
        self.stale = False
        self.error = None
        self.state = ViewState.LOADED
        return True

    async def set_date(self, fecha: date) -> bool:
        self.selected_date = fecha
        return await self.load()
