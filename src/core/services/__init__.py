"""Servicios del Core.

- `password_generator`: generación aleatoria + codificación.
- `batch_driver`: recorre la configuración y publica los resultados.
"""
