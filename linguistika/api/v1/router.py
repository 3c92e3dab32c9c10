from fastapi import APIRouter

from linguistika.api.v1 import tutores, cursos, estudiantes, matriculas, clases, pagos, dashboard

api_router = APIRouter()

api_router.include_router(tutores.router, prefix="/tutores", tags=["tutores"])
api_router.include_router(cursos.router, prefix="/cursos", tags=["cursos"])
api_router.include_router(
    estudiantes.router, prefix="/estudiantes", tags=["estudiantes"]
)
api_router.include_router(matriculas.router, prefix="/matriculas", tags=["matriculas"])
api_router.include_router(clases.router, prefix="/clases", tags=["clases"])
api_router.include_router(pagos.router, prefix="/pagos", tags=["pagos"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
