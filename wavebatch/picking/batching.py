# wavebatch/picking/batching.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Set, Tuple
import logging

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Item:
    order_id: int
    article_id: int

@dataclass(frozen=True)
class Batch:
    id: int
    items: Tuple[Item, ...]
    volume: int
    # ((almacén, pasillos), ...) ordenado por almacén; solo para costos, no se persiste
    warehouse_aisles: Tuple[Tuple[int, FrozenSet[int]], ...] = ()

    def aisles_by_warehouse(self) -> Dict[int, FrozenSet[int]]:
        return dict(self.warehouse_aisles)

@dataclass
class BatchDraft:
    id: int
    items: List[Item] = field(default_factory=list)
    volume: int = 0
    warehouse_aisles: Dict[int, Set[int]] = field(default_factory=dict)

    def push(self, order_id: int, article_id: int, warehouse: int, aisle: int, volume: int) -> None:
        self.items.append(Item(order_id, article_id))
        self.volume += volume
        self.warehouse_aisles.setdefault(warehouse, set()).add(aisle)

    def freeze(self) -> Batch:
        wa = tuple((w, frozenset(a)) for w, a in sorted(self.warehouse_aisles.items()))
        return Batch(id=self.id, items=tuple(self.items), volume=self.volume, warehouse_aisles=wa)

class BatchPacker:
    """
    Empaca líneas (pedido, artículo) de cada ola en batches, con a lo sumo
    un batch abierto por par (ola, almacén).

    Caso especial: si todavía no existe ningún batch en toda la solución,
    el batch 0 se crea siempre, sin mirar el mapeo (ola, almacén).
    """

    def __init__(self, builder):
        self.builder = builder
        self._open: Dict[Tuple[int, int], int] = {}   # (ola, almacén) -> id de batch abierto

    @property
    def max_batch_volume(self) -> int:
        return self.builder.config.max_batch_volume

    def open_batch_for(self, wave_id: int, warehouse: int):
        return self._open.get((wave_id, warehouse))

    def assign_line_to_batch(self, order_id: int, article_id: int, wave_id: int) -> int:
        catalog = self.builder.catalog
        wave = self.builder.wave(wave_id)
        location = catalog.location_of(article_id)
        volume = catalog.volume_of(article_id)
        key = (wave_id, location.warehouse)

        if not self.builder.has_batches():
            batch = self.builder.new_batch(wave)
        elif key in self._open:
            batch = self.builder.batch(self._open[key])
            if batch.volume + volume > self.max_batch_volume:
                logger.debug("Batch %d cerrado (volume=%d, +%d > %d)",
                             batch.id, batch.volume, volume, self.max_batch_volume)
                batch = self.builder.new_batch(wave)
        else:
            batch = self.builder.new_batch(wave)

        batch.push(order_id, article_id, location.warehouse, location.aisle, volume)
        self._open[key] = batch.id
        return batch.id

    def pack_batches(self) -> None:
        """Olas en orden de creación -> pedidos en orden de la ola -> líneas del pedido."""
        for wave in self.builder.wave_drafts():
            # la lista de pedidos de la ola no cambia durante el empaque
            for order_id in list(wave.order_ids):
                order = self.builder.order(order_id)
                for article_id in order.article_ids:
                    self.assign_line_to_batch(order_id, article_id, wave.id)
