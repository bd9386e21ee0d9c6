"""Consultas y comandos sobre Alimentos y Ventas.

Todas las funciones reciben la sesión de SQLAlchemy como primer argumento.
Los errores del motor se propagan como ``SQLAlchemyError`` (o ``OverflowError``
si un entero no entra en la columna); las funciones de escritura revierten
la sesión antes de propagarlos.
"""
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from app.models.alimento import Alimento
from app.models.venta import Venta


def _consulta_ventas():
    return (
        select(
            Venta.id_venta,
            Venta.fecha,
            Alimento.nombre.label("producto"),
            Venta.cantidad,
        )
        .join(Alimento, Venta.id_alimento == Alimento.id_alimento)
    )


def _a_dicts(resultado):
    return [dict(fila) for fila in resultado.mappings()]


def listar_alimentos(session):
    return session.scalars(select(Alimento).order_by(Alimento.nombre)).all()


def listar_ventas(session):
    consulta = _consulta_ventas().order_by(Venta.fecha, Alimento.nombre)
    return _a_dicts(session.execute(consulta))


def ventas_por_fecha(session, fecha):
    consulta = (
        _consulta_ventas()
        .where(Venta.fecha == fecha)
        .order_by(Alimento.nombre)
    )
    return _a_dicts(session.execute(consulta))


def ventas_por_rango(session, desde, hasta):
    """Ventas con ``desde <= fecha <= hasta`` (comparación de texto)."""
    consulta = (
        _consulta_ventas()
        .where(Venta.fecha.between(desde, hasta))
        .order_by(Venta.fecha, Alimento.nombre)
    )
    return _a_dicts(session.execute(consulta))


def crear_venta(session, fecha, id_alimento, cantidad):
    venta = Venta(fecha=fecha, id_alimento=id_alimento, cantidad=cantidad)
    try:
        session.add(venta)
        session.commit()
    except (SQLAlchemyError, OverflowError):
        session.rollback()
        raise
    return venta


def actualizar_cantidad(session, id_venta, cantidad):
    """Cambia solo la cantidad de una venta. Devuelve las filas modificadas."""
    sentencia = (
        update(Venta)
        .where(Venta.id_venta == id_venta)
        .values(cantidad=cantidad)
        .execution_options(synchronize_session=False)
    )
    try:
        cambios = session.execute(sentencia).rowcount
        session.commit()
    except (SQLAlchemyError, OverflowError):
        session.rollback()
        raise
    return cambios


def eliminar_venta(session, id_venta):
    sentencia = (
        delete(Venta)
        .where(Venta.id_venta == id_venta)
        .execution_options(synchronize_session=False)
    )
    try:
        cambios = session.execute(sentencia).rowcount
        session.commit()
    except (SQLAlchemyError, OverflowError):
        session.rollback()
        raise
    return cambios
