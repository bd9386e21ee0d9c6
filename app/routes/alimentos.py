from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db, logger
from app.services import ventas_service

alimentos_bp = Blueprint("alimentos", __name__)


# Listar todas las categorías de alimentos
@alimentos_bp.route("/alimentos", methods=["GET"])
def listar_alimentos():
    try:
        alimentos = ventas_service.listar_alimentos(db.session)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"[listar_alimentos] Error de base de datos: {e}")
        return jsonify({"error": "Error al consultar alimentos"}), 500

    logger.info(f"[listar_alimentos] {len(alimentos)} alimentos")
    return jsonify({"data": [a.to_dict() for a in alimentos]}), 200
