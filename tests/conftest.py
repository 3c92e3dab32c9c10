import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from linguistika import models  # noqa: F401
from linguistika import schemas
from linguistika.config.database import Base, get_db
from linguistika.facade import build_sql_api
from linguistika.main import app


@pytest.fixture
def engine(tmp_path):
    # Fichero y no memoria: el facade SQL abre una sesión por hilo
    engine = create_engine(
        f"sqlite:///{tmp_path / 'linguistika.db'}", connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=True, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def api(session_factory):
    return build_sql_api(session_factory)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def academy(api):
    """Dos tutores, dos cursos, dos estudiantes y dos matrículas."""

    async def build():
        ana = await api.tutores.create(
            schemas.TutorCreate(nombre="Ana García", email="ana@x.com", especialidad="Inglés", tarifa_por_hora=20.0)
        )
        pierre = await api.tutores.create(
            schemas.TutorCreate(nombre="Pierre Martin", especialidad="Francés", tarifa_por_hora=25.0)
        )
        ingles = await api.cursos.create(schemas.CursoCreate(nombre="Inglés B1", nivel="B1", max_estudiantes=2))
        frances = await api.cursos.create(schemas.CursoCreate(nombre="Francés A1", nivel="A1"))
        lucia = await api.estudiantes.create(schemas.EstudianteCreate(nombre="Lucía Soto"))
        gabriel = await api.estudiantes.create(schemas.EstudianteCreate(nombre="Gabriel Fernández"))
        m1 = await api.matriculas.create(
            schemas.MatriculaCreate(estudiante_id=lucia.id, curso_id=ingles.id, tutor_id=ana.id)
        )
        m2 = await api.matriculas.create(
            schemas.MatriculaCreate(estudiante_id=gabriel.id, curso_id=frances.id, tutor_id=pierre.id)
        )
        return {
            "ana": ana,
            "pierre": pierre,
            "ingles": ingles,
            "frances": frances,
            "lucia": lucia,
            "gabriel": gabriel,
            "m1": m1,
            "m2": m2,
        }

    return asyncio.run(build())
