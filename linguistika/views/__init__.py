from .base import CollectionView, ErrorKind, ViewError, ViewState
from .entities import (
    ClasesView,
    CursosView,
    EstudiantesView,
    MatriculasView,
    PagosView,
    TutoresView,
)
from .dashboard import DashboardView
