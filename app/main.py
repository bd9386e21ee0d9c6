import os
from pathlib import Path

import click
from flask import Flask, jsonify
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from app.extensions import db, logger
from app.esquema import inicializar_esquema
from app.importador import cargar_datos_csv
from app.routes.alimentos import alimentos_bp
from app.routes.ventas import ventas_bp

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"


def _es_verdadero(valor):
    return str(valor).strip().lower() in ("1", "true", "si", "sí", "yes", "on")


def _crear_directorio_sqlite(app):
    # sqlite:///ruta/archivo.db -> crea la carpeta de "ruta" si falta.
    # Flask-SQLAlchemy abre las rutas relativas dentro de app.instance_path
    uri = app.config["SQLALCHEMY_DATABASE_URI"]
    if uri.startswith("sqlite:///") and ":memory:" not in uri:
        ruta = Path(uri[len("sqlite:///"):].split("?", 1)[0])
        if not ruta.is_absolute():
            ruta = Path(app.instance_path) / ruta
        ruta.parent.mkdir(parents=True, exist_ok=True)


def create_app(testing=False, config=None):
    app = Flask(__name__)

    if testing:
        app.config.update(
            SQLALCHEMY_DATABASE_URI="sqlite:///:memory:",
            SQLALCHEMY_TRACK_MODIFICATIONS=False,
            TESTING=True,
            CSV_VENTAS=str(DATA_DIR / "VentasProductosSupermercados.csv"),
            CARGAR_CSV_AL_INICIAR=False,
            PORT=7050
        )
    else:
        app.config.update(
            SQLALCHEMY_DATABASE_URI=os.getenv('DATABASE_URL', f"sqlite:///{DATA_DIR / 'ventas.db'}"),
            SQLALCHEMY_TRACK_MODIFICATIONS=False,
            CSV_VENTAS=os.getenv('CSV_VENTAS', str(DATA_DIR / "VentasProductosSupermercados.csv")),
            CARGAR_CSV_AL_INICIAR=_es_verdadero(os.getenv('CARGAR_CSV_AL_INICIAR', 'true')),
            PORT=int(os.getenv('PORT', '7050'))
        )

    if config:
        app.config.update(config)

    _crear_directorio_sqlite(app)

    # Inicializar extensiones
    db.init_app(app)

    # Registrar blueprints
    app.register_blueprint(alimentos_bp, url_prefix='/api')
    app.register_blueprint(ventas_bp, url_prefix='/api')

    @app.route('/')
    def index():
        return app.send_static_file('index.html')

    # La API responde siempre JSON, también en errores HTTP
    @app.errorhandler(HTTPException)
    def error_http(e):
        logger.warning(f"[error_http] {e.code} {e.name}")
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(500)
    def error_interno(e):
        logger.error(f"[error_interno] {e}")
        return jsonify({"error": "Error interno del servidor"}), 500

    @app.cli.command("crear-db")
    def crear_db():
        inicializar_esquema()
        click.echo("✅ Base de datos creada correctamente.")

    @app.cli.command("cargar-csv")
    @click.argument("ruta", required=False)
    def cargar_csv(ruta):
        inicializar_esquema()
        insertadas = cargar_datos_csv(db.session, ruta or app.config["CSV_VENTAS"])
        click.echo(f"Ventas insertadas: {insertadas}")

    # El esquema y la carga inicial terminan antes de devolver la app
    with app.app_context():
        inicializar_esquema()
        if app.config["CARGAR_CSV_AL_INICIAR"]:
            cargar_datos_csv(db.session, app.config["CSV_VENTAS"])

    return app


if __name__ == '__main__':
    app = create_app()
    logger.info(f"Servidor corriendo en http://localhost:{app.config['PORT']}")
    app.run(port=app.config['PORT'], debug=True)
