"""Errores propios de la generación de datos semilla."""


class SeedError(Exception):
    pass


class SerializationError(SeedError, ValueError):
    """El lote de registros no puede representarse como CSV."""


class EmptyBatchError(SerializationError):
    """Se intentó serializar un lote vacío; las columnas salen del primer registro."""
