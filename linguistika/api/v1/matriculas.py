from linguistika.api.v1.crud_router import build_crud_router
from linguistika.crud.matricula import matricula as crud_matricula
from linguistika.schemas.matricula import Matricula, MatriculaCreate, MatriculaUpdate

router = build_crud_router(crud_matricula, Matricula, MatriculaCreate, MatriculaUpdate)
