import csv
import pytest
from app import main
from app.extensions import db
from app.models.alimento import Alimento


# App completa con SQLite en memoria, sin carga automática del CSV
@pytest.fixture
def app():
    app = main.create_app(testing=True)
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


# Categorías de prueba: Bebidas, Carnes y Frutas
@pytest.fixture
def alimentos(app):
    registros = [Alimento(nombre=n, descripcion=f"Categoría: {n}") for n in ("Carnes", "Bebidas", "Frutas")]
    db.session.add_all(registros)
    db.session.commit()
    return {a.nombre: a.id_alimento for a in registros}


# Escribe un CSV con la columna indice_tiempo y una columna por categoría
@pytest.fixture
def escribir_csv(tmp_path):
    def _escribir(columnas, filas, nombre="ventas.csv"):
        ruta = tmp_path / nombre
        with open(ruta, "w", encoding="utf-8", newline="") as archivo:
            writer = csv.DictWriter(archivo, fieldnames=["indice_tiempo", *columnas])
            writer.writeheader()
            writer.writerows(filas)
        return ruta
    return _escribir
