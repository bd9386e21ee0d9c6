from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db, logger
from app import models  # noqa: F401  registra Alimento y Venta en los metadatos


def inicializar_esquema():
    """Crea las tablas Alimentos y Ventas si no existen.

    Debe llamarse dentro de un contexto de aplicación. Un fallo aquí es
    fatal: el servicio no puede funcionar sin su esquema.
    """
    try:
        db.create_all()
    except SQLAlchemyError as e:
        logger.error(f"[inicializar_esquema] No se pudo crear el esquema: {e}")
        raise
    logger.info("[inicializar_esquema] Tablas Alimentos y Ventas listas")
