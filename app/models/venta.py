# Modelo Venta: una cantidad vendida de un alimento en una fecha
from app.extensions import db

class Venta(db.Model):
    __tablename__ = "Ventas"

    # Columnas principales
    id_venta = db.Column(db.Integer, primary_key=True, autoincrement=True)
    fecha = db.Column(db.Text, nullable=False)
    id_alimento = db.Column(db.Integer, db.ForeignKey("Alimentos.id_alimento"), nullable=False)
    cantidad = db.Column(db.Integer, nullable=False)

    # Relaciones
    alimento = db.relationship("Alimento", back_populates="ventas")

    # Conversión a diccionario
    def to_dict(self):
        return {
            "id_venta": self.id_venta,
            "fecha": self.fecha,
            "id_alimento": self.id_alimento,
            "cantidad": self.cantidad,
        }

    # Representación legible
    def __repr__(self):
        return (
            f"<Venta(id_venta={self.id_venta}, fecha={self.fecha!r}, "
            f"id_alimento={self.id_alimento}, cantidad={self.cantidad})>"
        )
