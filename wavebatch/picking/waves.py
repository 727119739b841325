# wavebatch/picking/waves.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import logging

from wavebatch.demand.orders import Order
from wavebatch.errors import UnknownWarehouseError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Wave:
    id: int
    order_ids: Tuple[int, ...]
    batch_ids: Tuple[int, ...]
    size: int   # suma de líneas de artículo de sus pedidos

@dataclass
class WaveDraft:
    """Ola en construcción: solo admite agregar pedidos y batches."""
    id: int
    order_ids: List[int] = field(default_factory=list)
    batch_ids: List[int] = field(default_factory=list)
    size: int = 0

    def push_order(self, order: Order) -> None:
        self.order_ids.append(order.id)
        self.size += order.article_count

    def freeze(self) -> Wave:
        return Wave(id=self.id, order_ids=tuple(self.order_ids),
                    batch_ids=tuple(self.batch_ids), size=self.size)

class WavePlanner:
    """
    Asigna pedidos a olas con a lo sumo una ola "abierta" por almacén.

    - Sin ola abierta para el almacén: se crea una nueva (id siguiente) y queda abierta.
    - Con ola abierta: si size + líneas del pedido supera el cap, se cierra y se
      abre otra; si no, el pedido entra en la abierta.

    Una ola cerrada no se reabre. Un pedido que por sí solo supera el cap
    queda solo en su ola.
    """

    def __init__(self, builder):
        self.builder = builder
        self._open: Dict[int, int] = {}   # almacén -> id de ola abierta

    @property
    def max_wave_size(self) -> int:
        return self.builder.config.max_wave_size

    def open_wave_for(self, warehouse: int):
        return self._open.get(warehouse)

    def assign_order_to_wave(self, order_id: int, warehouse: int) -> int:
        order = self.builder.order(order_id)
        if not self.builder.catalog.has_warehouse(warehouse):
            raise UnknownWarehouseError(warehouse)

        wave = None
        wid = self._open.get(warehouse)
        if wid is not None:
            wave = self.builder.wave(wid)
            if wave.size + order.article_count > self.max_wave_size:
                logger.debug("Ola %d cerrada (size=%d, +%d > %d)",
                             wid, wave.size, order.article_count, self.max_wave_size)
                wave = None

        if wave is None:
            wave = self.builder.new_wave()
            self._open[warehouse] = wave.id
            logger.debug("Ola %d abierta para almacén %d", wave.id, warehouse)

        wave.push_order(order)
        return wave.id

    def plan_waves(self, primary: Dict[int, Tuple[int, ...]]) -> None:
        """Recorre tier(0): almacenes ascendentes, pedidos en orden de lista."""
        for warehouse in sorted(primary):
            for order_id in primary[warehouse]:
                self.assign_order_to_wave(order_id, warehouse)
