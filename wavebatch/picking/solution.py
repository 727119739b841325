# wavebatch/picking/solution.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from wavebatch.demand.orders import Order
from wavebatch.errors import (
    UnknownOrderError, UnknownWaveError, EmptyOrderError, DuplicateOrderError,
)
from wavebatch.spec.planner_config import PlannerConfig
from wavebatch.warehouse.affinity import AffinityIndex
from wavebatch.warehouse.catalog import Catalog
from .waves import Wave, WaveDraft, WavePlanner
from .batching import Batch, BatchDraft, BatchPacker

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Solution:
    """Resultado inmutable: olas y batches en orden de creación."""
    waves: Tuple[Wave, ...] = ()
    batches: Tuple[Batch, ...] = ()

    @staticmethod
    def empty() -> "Solution":
        return Solution()

    def batch(self, batch_id: int) -> Batch:
        return self.batches[batch_id]

    def wave_of_order(self, order_id: int) -> Optional[Wave]:
        for w in self.waves:
            if order_id in w.order_ids:
                return w
        return None

    def item_count(self) -> int:
        return sum(len(b.items) for b in self.batches)

class SolutionBuilder:
    """
    Estado mutable de la fase de planificación. Solo el planificador y el
    empacador lo tocan; `build()` entrega la Solution inmutable.
    """

    def __init__(self, catalog: Catalog, orders: Iterable[Order], config: PlannerConfig):
        self.catalog = catalog
        self.config = config
        self._orders: Dict[int, Order] = {o.id: o for o in orders}
        self._waves: List[WaveDraft] = []
        self._batches: List[BatchDraft] = []

    # --------- pedidos ---------
    def order(self, order_id: int) -> Order:
        try:
            return self._orders[order_id]
        except KeyError:
            raise UnknownOrderError(order_id) from None

    # --------- olas ---------
    def new_wave(self) -> WaveDraft:
        wave = WaveDraft(id=len(self._waves))
        self._waves.append(wave)
        return wave

    def wave(self, wave_id: int) -> WaveDraft:
        if not 0 <= wave_id < len(self._waves):
            raise UnknownWaveError(wave_id)
        return self._waves[wave_id]

    def wave_drafts(self) -> List[WaveDraft]:
        return list(self._waves)

    # --------- batches ---------
    def has_batches(self) -> bool:
        return bool(self._batches)

    def new_batch(self, wave: WaveDraft) -> BatchDraft:
        batch = BatchDraft(id=len(self._batches))
        self._batches.append(batch)
        wave.batch_ids.append(batch.id)
        return batch

    def batch(self, batch_id: int) -> BatchDraft:
        return self._batches[batch_id]

    def build(self) -> Solution:
        return Solution(
            waves=tuple(w.freeze() for w in self._waves),
            batches=tuple(b.freeze() for b in self._batches),
        )

def check_orders(orders: Iterable[Order]) -> None:
    seen = set()
    for o in orders:
        if o.id in seen:
            raise DuplicateOrderError(o.id)
        seen.add(o.id)
        if o.article_count == 0:
            raise EmptyOrderError(o.id)

def plan(instance, config: Optional[PlannerConfig] = None) -> Solution:
    """
    Pasada greedy completa:
      1) catálogo + índice de afinidad
      2) olas desde tier(0)
      3) batches por ola -> pedido -> línea
    Valida todo antes de construir; ante un error no hay solución parcial.
    """
    config = config or PlannerConfig.default()
    config.validate()
    check_orders(instance.orders)
    catalog = Catalog.from_instance(instance)
    affinity = AffinityIndex.build(instance.orders, catalog)

    builder = SolutionBuilder(catalog, instance.orders, config)
    WavePlanner(builder).plan_waves(affinity.tier(0))
    BatchPacker(builder).pack_batches()
    solution = builder.build()

    logger.info("Plan: %d pedidos, %d líneas -> %d olas, %d batches",
                len(instance.orders), instance.total_lines(),
                len(solution.waves), len(solution.batches))
    return solution
