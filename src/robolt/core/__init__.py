"""Núcleo: configuración, errores, dominio y pipeline de peticiones."""
