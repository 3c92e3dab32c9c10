from linguistika.api.v1.crud_router import build_crud_router
from linguistika.crud.clase import clase as crud_clase
from linguistika.schemas.clase import Clase, ClaseCreate, ClaseUpdate

router = build_crud_router(crud_clase, Clase, ClaseCreate, ClaseUpdate)
