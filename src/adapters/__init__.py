"""Adaptadores de infraestructura (entorno del proceso, colectores, ficheros)."""
