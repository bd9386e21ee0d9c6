from flask import Blueprint, request, jsonify
from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db, logger
from app.services import ventas_service

ventas_bp = Blueprint("ventas", __name__)


def error_de_base(funcion, mensaje, e):
    db.session.rollback()
    logger.error(f"[{funcion}] {mensaje}: {e}")
    return jsonify({"error": mensaje}), 500


@ventas_bp.route("/ventas", methods=["GET"])
def listar_ventas():
    try:
        ventas = ventas_service.listar_ventas(db.session)
    except SQLAlchemyError as e:
        return error_de_base("listar_ventas", "Error al consultar ventas", e)
    logger.info(f"[listar_ventas] {len(ventas)} ventas")
    return jsonify({"data": ventas}), 200


@ventas_bp.route("/ventas/fecha/<fecha>", methods=["GET"])
def ventas_por_fecha(fecha):
    try:
        ventas = ventas_service.ventas_por_fecha(db.session, fecha)
    except SQLAlchemyError as e:
        return error_de_base("ventas_por_fecha", "Error al consultar ventas por fecha", e)

    if not ventas:
        logger.warning(f"[ventas_por_fecha] Sin ventas para {fecha}")
        return jsonify({"mensaje": "No se encontraron ventas para esa fecha."}), 404
    return jsonify({"data": ventas}), 200


# Ejemplo: /api/ventas/rango_fecha?desde=2023-01-01&hasta=2023-02-01
@ventas_bp.route("/ventas/rango_fecha", methods=["GET"])
def ventas_por_rango():
    desde = request.args.get("desde", "")
    hasta = request.args.get("hasta", "")
    if not desde or not hasta:
        logger.warning("[ventas_por_rango] Faltan parámetros desde/hasta")
        return jsonify({"error": 'Se requieren fechas "desde" y "hasta".'}), 400

    try:
        ventas = ventas_service.ventas_por_rango(db.session, desde, hasta)
    except SQLAlchemyError as e:
        return error_de_base("ventas_por_rango", "Error al consultar ventas por rango de fecha", e)
    logger.info(f"[ventas_por_rango] {len(ventas)} ventas entre {desde} y {hasta}")
    return jsonify({"data": ventas}), 200


@ventas_bp.route("/ventas", methods=["POST"])
def crear_venta():
    data = request.get_json(silent=True) or {}
    fecha = data.get("fecha")
    id_alimento = data.get("id_alimento")
    cantidad = data.get("cantidad")

    if not fecha or not id_alimento or cantidad is None:
        logger.warning(f"[crear_venta] Datos incompletos: {data}")
        return jsonify({"error": "Faltan datos."}), 400

    try:
        venta = ventas_service.crear_venta(db.session, fecha, id_alimento, cantidad)
    except (SQLAlchemyError, OverflowError) as e:
        return error_de_base("crear_venta", "Error al crear la venta", e)

    logger.info(f"[crear_venta] Venta creada con ID: {venta.id_venta}")
    return jsonify({
        "mensaje": "Venta agregada",
        "id_venta": venta.id_venta,
        "fecha": fecha,
        "id_alimento": id_alimento,
        "cantidad": cantidad,
    }), 201


@ventas_bp.route("/ventas/<int:id>", methods=["PUT"])
def actualizar_venta(id):
    data = request.get_json(silent=True) or {}
    cantidad = data.get("cantidad")
    if cantidad is None:
        logger.warning(f"[actualizar_venta] Falta la cantidad para la venta {id}")
        return jsonify({"error": "Se requiere la nueva cantidad."}), 400

    try:
        cambios = ventas_service.actualizar_cantidad(db.session, id, cantidad)
    except (SQLAlchemyError, OverflowError) as e:
        return error_de_base("actualizar_venta", f"Error al actualizar la venta {id}", e)

    if cambios == 0:
        logger.warning(f"[actualizar_venta] Venta {id} no encontrada")
        return jsonify({"error": f"Venta con ID {id} no encontrada."}), 404

    logger.info(f"[actualizar_venta] Venta {id} actualizada a cantidad {cantidad}")
    return jsonify({"mensaje": "Venta actualizada", "cambios": cambios}), 200


@ventas_bp.route("/ventas/<int:id>", methods=["DELETE"])
def eliminar_venta(id):
    try:
        cambios = ventas_service.eliminar_venta(db.session, id)
    except (SQLAlchemyError, OverflowError) as e:
        return error_de_base("eliminar_venta", f"Error al eliminar la venta {id}", e)

    if cambios == 0:
        logger.warning(f"[eliminar_venta] Venta {id} no encontrada")
        return jsonify({"error": f"Venta con ID {id} no encontrada."}), 404

    logger.info(f"[eliminar_venta] Venta {id} eliminada")
    return jsonify({"mensaje": "Venta eliminada", "cambios": cambios}), 200
