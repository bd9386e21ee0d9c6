from .alimento import Alimento
from .venta import Venta

__all__ = [
    "Alimento",
    "Venta"
]
