# wavebatch/warehouse/affinity.py
from __future__ import annotations
from typing import Dict, Iterable, List, Tuple
import logging

from wavebatch.demand.orders import Order
from wavebatch.errors import UnknownOrderError, EmptyOrderError
from .catalog import Catalog

logger = logging.getLogger(__name__)

Ranking = Tuple[Tuple[int, int], ...]  # ((almacén, n_líneas), ...)

def rank_warehouses(order: Order, catalog: Catalog, depth: int = 3) -> Ranking:
    """
    Cuenta líneas por almacén y devuelve los `depth` primeros:
    cantidad descendente, empate por id de almacén ascendente.
    """
    counts: Dict[int, int] = {}
    for article_id in order.article_ids:
        w = catalog.warehouse_of(article_id)
        counts[w] = counts.get(w, 0) + 1
    ranked = sorted(counts.items(), key=lambda wc: (-wc[1], wc[0]))
    return tuple(ranked[:depth])

class AffinityIndex:
    """
    Afinidad pedido -> almacén, en tres niveles de prioridad:

        tier(0): almacén -> pedidos cuyo almacén principal es ese
        tier(1): ... segundo mejor
        tier(2): ... tercer mejor

    Cada almacén del catálogo tiene entrada (posiblemente vacía) en cada nivel.
    Dentro de cada lista se respeta el orden de la lista de pedidos.
    Solo tier(0) alimenta al planificador; 1 y 2 quedan disponibles.
    """

    def __init__(self, rankings: Dict[int, Ranking], tiers: List[Dict[int, Tuple[int, ...]]]):
        self._rankings = rankings
        self._tiers = tiers

    @staticmethod
    def build(orders: Iterable[Order], catalog: Catalog, depth: int = 3) -> "AffinityIndex":
        buckets: List[Dict[int, List[int]]] = [
            {w: [] for w in catalog.warehouses()} for _ in range(depth)
        ]
        rankings: Dict[int, Ranking] = {}
        for order in orders:
            ranking = rank_warehouses(order, catalog, depth)
            rankings[order.id] = ranking
            for priority, (warehouse, _) in enumerate(ranking):
                buckets[priority][warehouse].append(order.id)

        tiers = [{w: tuple(ids) for w, ids in b.items()} for b in buckets]
        logger.debug(
            "Afinidad: %d pedidos, tier0 con %d almacenes no vacíos",
            len(rankings), sum(1 for ids in tiers[0].values() if ids) if tiers else 0,
        )
        return AffinityIndex(rankings, tiers)

    def tier(self, priority: int) -> Dict[int, Tuple[int, ...]]:
        # copia superficial: las listas internas son tuplas
        return dict(self._tiers[priority])

    def ranking(self, order_id: int) -> Ranking:
        try:
            return self._rankings[order_id]
        except KeyError:
            raise UnknownOrderError(order_id) from None

    def top_warehouse(self, order_id: int) -> int:
        ranking = self.ranking(order_id)
        if not ranking:
            raise EmptyOrderError(order_id)
        return ranking[0][0]
