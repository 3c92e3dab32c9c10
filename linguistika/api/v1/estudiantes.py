from linguistika.api.v1.crud_router import build_crud_router
from linguistika.crud.estudiante import estudiante as crud_estudiante
from linguistika.schemas.estudiante import Estudiante, EstudianteCreate, EstudianteUpdate

router = build_crud_router(crud_estudiante, Estudiante, EstudianteCreate, EstudianteUpdate)
