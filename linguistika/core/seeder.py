import logging
from datetime import date, time, timedelta

from sqlalchemy.orm import Session, sessionmaker

from linguistika.config.database import SessionLocal
from linguistika.models.clase import Clase
from linguistika.models.curso import Curso
from linguistika.models.enums import EstadoClase, EstadoPago, Nivel
from linguistika.models.estudiante import Estudiante
from linguistika.models.matricula import Matricula
from linguistika.models.pago import Pago
from linguistika.models.tutor import Tutor

logger = logging.getLogger(__name__)


def seed_database(db: Session) -> None:
    """Poblar la base de datos con datos de demostración"""
    logger.info("🌱 Iniciando seeding de la base de datos...")

    logger.info("👩‍🏫 Creando tutores...")
    tutores = [
        Tutor(nombre="Ana García", email="ana.garcia@linguistika.com", telefono="600111222",
              especialidad="Inglés", tarifa_por_hora=22.0),
        Tutor(nombre="Pierre Martin", email="pierre.martin@linguistika.com", telefono="600333444",
              especialidad="Francés", tarifa_por_hora=25.0),
        Tutor(nombre="Lukas Schmidt", email="lukas.schmidt@linguistika.com", telefono="600555666",
              especialidad="Alemán", tarifa_por_hora=24.5),
    ]
    db.add_all(tutores)

    logger.info("📚 Creando cursos...")
    cursos = [
        Curso(nombre="Inglés General", descripcion="Comunicación oral y escrita",
              nivel=Nivel.B1, max_estudiantes=8),
        Curso(nombre="Francés Inicial", descripcion="Primeros pasos en francés",
              nivel=Nivel.A1, max_estudiantes=10),
        Curso(nombre="Business English", descripcion="Inglés para el entorno laboral",
              nivel=Nivel.C1, max_estudiantes=6),
    ]
    db.add_all(cursos)

    logger.info("👨‍🎓 Creando estudiantes...")
    estudiantes = [
        Estudiante(nombre="Lucía Soto", email="lucia.soto@correo.com", telefono="611000001"),
        Estudiante(nombre="Gabriel Fernández", email="gabriel.f@correo.com", telefono="611000002"),
        Estudiante(nombre="Tatiana Cuéllar", email="tatiana.c@correo.com", telefono="611000003"),
    ]
    db.add_all(estudiantes)
    db.flush()

    logger.info("📝 Creando matrículas...")
    matriculas = [
        Matricula(estudiante=estudiantes[0], curso=cursos[0], tutor=tutores[0]),
        Matricula(estudiante=estudiantes[1], curso=cursos[1], tutor=tutores[1]),
        Matricula(estudiante=estudiantes[2], curso=cursos[2], tutor=tutores[0]),
    ]
    db.add_all(matriculas)
    db.flush()

    logger.info("⏰ Creando clases...")
    hoy = date.today()
    clases = [
        Clase(matricula=matriculas[0], fecha=hoy, hora_inicio=time(9, 0), hora_fin=time(10, 0)),
        Clase(matricula=matriculas[2], fecha=hoy, hora_inicio=time(11, 0), hora_fin=time(12, 0)),
        Clase(matricula=matriculas[1], fecha=hoy, hora_inicio=time(16, 0), hora_fin=time(17, 30)),
        Clase(matricula=matriculas[0], fecha=hoy - timedelta(days=1), hora_inicio=time(9, 0),
              hora_fin=time(10, 0), estado=EstadoClase.COMPLETADA),
    ]
    db.add_all(clases)
    db.flush()

    logger.info("💶 Creando pagos...")
    db.add_all([
        Pago(tutor=tutores[0], clase=clases[3], monto=22.0, estado=EstadoPago.PAGADO,
             descripcion="Clase de ayer"),
        Pago(tutor=tutores[1], cantidad_clases=4, monto=100.0, estado=EstadoPago.PENDIENTE,
             descripcion="Liquidación quincena"),
    ])
    db.commit()

    logger.info(
        "✅ Seeding completado: %s tutores, %s cursos, %s estudiantes, %s matrículas, %s clases",
        len(tutores), len(cursos), len(estudiantes), len(matriculas), len(clases),
    )


def check_if_seeded(db: Session) -> bool:
    return db.query(Tutor).first() is not None


def run_seeder(session_factory: sessionmaker = SessionLocal) -> bool:
    with session_factory() as db:
        if check_if_seeded(db):
            logger.info("📊 Base de datos ya tiene datos, saltando seeding...")
            return False
        try:
            seed_database(db)
        except Exception:
            db.rollback()
            logger.exception("❌ Error durante seeding")
            raise
        return True
