from linguistika.api.v1.crud_router import build_crud_router
from linguistika.crud.curso import curso as crud_curso
from linguistika.schemas.curso import Curso, CursoCreate, CursoUpdate

router = build_crud_router(crud_curso, Curso, CursoCreate, CursoUpdate)
