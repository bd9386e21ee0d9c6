# Definición del modelo Alimento (categoría de productos vendidos)
from app.extensions import db

class Alimento(db.Model):
    __tablename__ = "Alimentos"

    # Columnas de la tabla
    id_alimento = db.Column(db.Integer, primary_key=True, autoincrement=True)
    nombre = db.Column(db.Text, unique=True, nullable=False)
    descripcion = db.Column(db.Text)

    # Relación con ventas
    ventas = db.relationship("Venta", back_populates="alimento", lazy="dynamic")

    # Representación en formato diccionario
    def to_dict(self):
        return {
            "id_alimento": self.id_alimento,
            "nombre": self.nombre,
            "descripcion": self.descripcion
        }

    def __repr__(self):
        return f"<Alimento id_alimento={self.id_alimento} nombre={self.nombre!r}>"
