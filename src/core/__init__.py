"""Core: dominio, configuración y servicios de generación."""
