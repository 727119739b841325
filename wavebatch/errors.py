# wavebatch/errors.py
"""
Errores tipados del planificador.

- ConfigError: caps o pesos de costo inválidos.
- InstanceFormatError: documento de entrada mal formado (frontera de IO).
- DomainValidationError y subclases: el modelo no es consistente
  (artículo sin ubicación/volumen, pedido u ola desconocidos, ...).
"""
from typing import Optional


class WaveBatchError(Exception):
    """Raíz de todos los errores del paquete."""


class ConfigError(WaveBatchError, ValueError):
    pass


class InstanceFormatError(WaveBatchError, ValueError):
    pass


class DomainValidationError(WaveBatchError):
    pass


class UnknownArticleError(DomainValidationError):
    def __init__(self, article_id, order_id: Optional[int] = None):
        self.article_id = article_id
        self.order_id = order_id
        if order_id is None:
            msg = f"Artículo {article_id} no existe en el catálogo"
        else:
            msg = f"Pedido {order_id} referencia el artículo {article_id}, que no existe en el catálogo"
        super().__init__(msg)


class UnknownOrderError(DomainValidationError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Pedido desconocido: {order_id}")


class UnknownWarehouseError(DomainValidationError):
    def __init__(self, warehouse):
        self.warehouse = warehouse
        super().__init__(f"Almacén desconocido: {warehouse}")


class UnknownWaveError(DomainValidationError):
    def __init__(self, wave_id):
        self.wave_id = wave_id
        super().__init__(f"Ola desconocida: {wave_id}")


class InconsistentCatalogError(DomainValidationError):
    def __init__(self, article_id, reason: str):
        self.article_id = article_id
        self.reason = reason
        super().__init__(f"Artículo {article_id}: {reason}")


class EmptyOrderError(DomainValidationError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Pedido {order_id} no tiene líneas de artículo")


class DuplicateOrderError(DomainValidationError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Pedido {order_id} aparece más de una vez en la entrada")
