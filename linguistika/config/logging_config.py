"""
Configuración de logging para Linguistika.
"""

import logging

from .settings import settings


def setup_logging(level: str = None) -> None:
    """Configura el logger raíz según la configuración activa."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=settings.log_format,
    )
    # El eco de SQL ya se controla con settings.debug
    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
