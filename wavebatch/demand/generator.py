# wavebatch/demand/generator.py
from dataclasses import dataclass
from typing import List

from .instance import Instance
from .orders import Order
from .rng import RNG
from wavebatch.warehouse.catalog import Article, ArticleLocation

@dataclass
class InstanceSpec:
    """Parámetros de una instancia sintética."""
    n_warehouses: int = 3
    aisles_per_warehouse: int = 8
    positions_per_aisle: int = 20
    n_articles: int = 200
    min_volume: int = 50
    max_volume: int = 1500
    n_orders: int = 100
    min_lines: int = 1
    max_lines: int = 12
    home_share: float = 0.8   # prob. de que una línea salga del almacén "de casa" del pedido

    def validate(self) -> None:
        assert self.n_warehouses >= 1
        assert self.aisles_per_warehouse >= 1 and self.positions_per_aisle >= 1
        assert self.n_articles >= self.n_warehouses, "al menos un artículo por almacén"
        assert 0 <= self.min_volume <= self.max_volume
        assert 1 <= self.min_lines <= self.max_lines
        assert 0.0 <= self.home_share <= 1.0

def make_instance(seed: int, spec: InstanceSpec = None) -> Instance:
    """
    Artículos repartidos round-robin entre almacenes, con pasillo/posición
    al azar. Cada pedido elige un almacén "de casa" y saca de ahí la mayoría
    de sus líneas (así la afinidad tiene sentido).
    """
    spec = spec or InstanceSpec()
    spec.validate()
    rng = RNG(seed=seed)

    locations: List[ArticleLocation] = []
    articles: List[Article] = []
    by_warehouse: List[List[int]] = [[] for _ in range(spec.n_warehouses)]
    for a in range(spec.n_articles):
        w = a % spec.n_warehouses
        locations.append(ArticleLocation(
            article_id=a,
            warehouse=w,
            aisle=int(rng.integers(0, spec.aisles_per_warehouse)),
            position=int(rng.integers(0, spec.positions_per_aisle)),
        ))
        articles.append(Article(id=a, volume=int(rng.integers(spec.min_volume, spec.max_volume + 1))))
        by_warehouse[w].append(a)

    orders: List[Order] = []
    for o in range(spec.n_orders):
        home = int(rng.integers(0, spec.n_warehouses))
        k = int(rng.integers(spec.min_lines, spec.max_lines + 1))
        ids: List[int] = []
        for _ in range(k):
            if rng.random() < spec.home_share:
                pool = by_warehouse[home]
            else:
                pool = by_warehouse[int(rng.integers(0, spec.n_warehouses))]
            ids.append(int(rng.choice(pool)))
        orders.append(Order(id=o, article_ids=tuple(ids)))

    return Instance(article_locations=locations, articles=articles, orders=orders)
