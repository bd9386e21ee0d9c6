"""Servicio de ventas de supermercado: API Flask sobre Alimentos y Ventas."""
