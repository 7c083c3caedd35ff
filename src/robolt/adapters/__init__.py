"""Adaptadores de I/O: transporte httpx, endpoints y exportación."""
