"""
Carga inicial de ventas desde el CSV de supermercados.

El CSV trae una columna ``indice_tiempo`` y una columna por categoría de
alimento. Cada celda no vacía se convierte en una fila de ``Ventas``.
La carga solo ocurre si la tabla ``Ventas`` está vacía y se hace en una
única transacción: o entra todo o no entra nada.
"""
import csv
from decimal import Decimal, InvalidOperation

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.extensions import logger
from app.models.alimento import Alimento
from app.models.venta import Venta

COLUMNA_FECHA = "indice_tiempo"

# Rango de INTEGER en SQLite (entero con signo de 64 bits)
ENTERO_MIN = -2 ** 63
ENTERO_MAX = 2 ** 63 - 1

# Cada cuántas ventas se envían las pendientes a la base dentro de la transacción
TAMANO_LOTE = 1000

# Categorías esperadas como columnas en el CSV
CATEGORIAS_ALIMENTOS = [
    "Carnes", "Verduras", "Frutas", "Bebidas", "Lacteos",
    "Panificados", "Limpieza", "Perfumeria", "Alimentos Secos",
    "Congelados", "Fiambres",
]


def parsear_cantidad(valor):
    """Convierte el texto de una celda en entero, truncando decimales.

    Devuelve None si el texto no es numérico o no entra en un INTEGER.
    """
    try:
        cantidad = int(Decimal(valor.strip()))
    except (InvalidOperation, ValueError, OverflowError):
        return None
    if not ENTERO_MIN <= cantidad <= ENTERO_MAX:
        return None
    return cantidad


def registrar_categorias(session, categorias):
    """Inserta las categorías que todavía no existen (insert-if-absent)."""
    existentes = set(session.scalars(select(Alimento.nombre)).all())
    nuevas = [
        Alimento(nombre=nombre, descripcion=f"Categoría: {nombre}")
        for nombre in dict.fromkeys(categorias)
        if nombre not in existentes
    ]
    session.add_all(nuevas)
    session.flush()
    return len(nuevas)


def mapa_alimentos(session):
    """Devuelve un dict ordenado nombre -> id_alimento con todas las categorías."""
    mapa = {}
    for id_alimento, nombre in session.execute(
        select(Alimento.id_alimento, Alimento.nombre).order_by(Alimento.id_alimento)
    ):
        mapa.setdefault(nombre, id_alimento)
    return mapa


def leer_ventas_csv(archivo, mapa):
    """Recorre el CSV fila por fila y genera una Venta por celda con datos."""
    for numero, fila in enumerate(csv.DictReader(archivo), start=2):
        fecha = (fila.get(COLUMNA_FECHA) or "").strip()
        if not fecha:
            logger.warning(f"[leer_ventas_csv] Fila {numero} sin {COLUMNA_FECHA}, se omite")
            continue

        for nombre, id_alimento in mapa.items():
            valor = (fila.get(nombre) or "").strip()
            if not valor:
                continue
            cantidad = parsear_cantidad(valor)
            if cantidad is None:
                logger.warning(
                    f"[leer_ventas_csv] Fila {numero}, columna {nombre!r}: "
                    f"cantidad inválida {valor!r}, se omite"
                )
                continue
            yield Venta(fecha=fecha, id_alimento=id_alimento, cantidad=cantidad)


def cargar_datos_csv(session, ruta_csv, categorias=CATEGORIAS_ALIMENTOS):
    """Carga el CSV en Alimentos/Ventas si Ventas está vacía.

    Devuelve la cantidad de ventas insertadas (0 si se omitió o falló).
    Los errores se registran en el log y no se propagan.
    """
    try:
        total = session.scalar(select(func.count()).select_from(Venta))
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"[cargar_datos_csv] No se pudo contar las ventas: {e}")
        return 0

    if total > 0:
        logger.info(f"[cargar_datos_csv] Ventas ya tiene {total} registros, no se carga el CSV")
        return 0

    logger.info(f"[cargar_datos_csv] Cargando y transformando datos desde {ruta_csv}")
    try:
        nuevas = registrar_categorias(session, categorias)
        mapa = mapa_alimentos(session)
        logger.debug(f"[cargar_datos_csv] {nuevas} categorías nuevas, {len(mapa)} en total")

        insertadas = 0
        with open(ruta_csv, encoding="utf-8-sig", newline="") as archivo:
            for venta in leer_ventas_csv(archivo, mapa):
                session.add(venta)
                insertadas += 1
                if insertadas % TAMANO_LOTE == 0:
                    session.flush()

        session.commit()
    except (SQLAlchemyError, OSError, csv.Error, UnicodeDecodeError, OverflowError) as e:
        session.rollback()
        logger.error(f"[cargar_datos_csv] Carga cancelada, se revierte la transacción: {e}")
        return 0

    logger.info(f"[cargar_datos_csv] Carga de datos completada: {insertadas} ventas")
    return insertadas
