import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from linguistika.api.v1.router import api_router
from linguistika.config.database import close_db, init_db
from linguistika.config.logging_config import setup_logging
from linguistika.config.settings import settings
from linguistika.core.exceptions import LinguistikaError, error_from_integrity
from linguistika.core.seeder import run_seeder

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def initialize_app():
    """Inicializar base de datos y datos de demostración"""
    logger.info("🚀 Iniciando Linguistika back office v%s...", VERSION)

    logger.info("📊 Inicializando base de datos...")
    init_db()

    if settings.seed_on_startup:
        logger.info("🌱 Ejecutando seeding...")
        if run_seeder():
            logger.info("✅ Datos iniciales creados")
        else:
            logger.info("ℹ️ Base de datos ya contiene datos")

    logger.info("🎉 Linguistika listo!")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    initialize_app()
    yield
    close_db()


app = FastAPI(
    title="Linguistika API",
    description="""
    ## Back office de la academia de idiomas

    - `/api/v1/tutores`, `/api/v1/cursos`, `/api/v1/estudiantes`
    - `/api/v1/matriculas`, `/api/v1/clases`, `/api/v1/pagos`
    - `/api/v1/dashboard` - estadísticas, agenda diaria y resumen por tutor
    """,
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_hosts,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LinguistikaError)
async def linguistika_error_handler(request: Request, exc: LinguistikaError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    error = error_from_integrity(str(exc.orig))
    logger.warning("%s %s: %s", request.method, request.url.path, error.message)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


app.include_router(api_router, prefix="/api/v1")


@app.get("/", tags=["General"])
def root():
    """Información general"""
    return {
        "message": f"Linguistika API v{VERSION}",
        "status": "running",
        "docs": "/docs",
        "environment": settings.environment,
    }


@app.get("/health", tags=["General"])
def health_check():
    """Verificación de salud"""
    return {"status": "healthy", "service": "linguistika-api", "version": VERSION}
