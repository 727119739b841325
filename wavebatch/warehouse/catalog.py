# wavebatch/warehouse/catalog.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple
import logging

from wavebatch.errors import UnknownArticleError, InconsistentCatalogError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Article:
    id: int
    volume: int

@dataclass(frozen=True)
class ArticleLocation:
    article_id: int
    warehouse: int
    aisle: int
    position: int

class Catalog:
    """
    Tablas estáticas de consulta:
      artículo -> ubicación (almacén, pasillo, posición)
      artículo -> volumen
    Se construye una vez; no se modifica después.
    """

    def __init__(self, locations: Dict[int, ArticleLocation], volumes: Dict[int, int]):
        self._locations = dict(locations)
        self._volumes = dict(volumes)
        self._warehouses: Tuple[int, ...] = tuple(sorted({loc.warehouse for loc in self._locations.values()}))

    # --------- constructores ---------
    @staticmethod
    def build(locations: Iterable[ArticleLocation], articles: Iterable[Article]) -> "Catalog":
        loc_map: Dict[int, ArticleLocation] = {}
        for loc in locations:
            prev = loc_map.get(loc.article_id)
            if prev is not None and (prev.warehouse, prev.aisle) != (loc.warehouse, loc.aisle):
                raise InconsistentCatalogError(
                    loc.article_id,
                    f"ubicado en ({prev.warehouse}, {prev.aisle}) y en ({loc.warehouse}, {loc.aisle})",
                )
            loc_map[loc.article_id] = loc

        vol_map: Dict[int, int] = {}
        for art in articles:
            if art.volume < 0:
                raise InconsistentCatalogError(art.id, f"volumen negativo ({art.volume})")
            prev_vol = vol_map.get(art.id)
            if prev_vol is not None and prev_vol != art.volume:
                raise InconsistentCatalogError(art.id, f"volúmenes distintos ({prev_vol} y {art.volume})")
            vol_map[art.id] = art.volume

        logger.debug("Catálogo: %d ubicaciones, %d volúmenes", len(loc_map), len(vol_map))
        return Catalog(loc_map, vol_map)

    @staticmethod
    def from_instance(instance) -> "Catalog":
        """Catálogo + chequeo de que todo artículo pedido existe."""
        catalog = Catalog.build(instance.article_locations, instance.articles)
        catalog.check_orders(instance.orders)
        return catalog

    # --------- consultas ---------
    def has(self, article_id: int) -> bool:
        return article_id in self._locations and article_id in self._volumes

    def location_of(self, article_id: int) -> ArticleLocation:
        try:
            return self._locations[article_id]
        except KeyError:
            raise UnknownArticleError(article_id) from None

    def volume_of(self, article_id: int) -> int:
        try:
            return self._volumes[article_id]
        except KeyError:
            raise UnknownArticleError(article_id) from None

    def warehouse_of(self, article_id: int) -> int:
        return self.location_of(article_id).warehouse

    def warehouses(self) -> List[int]:
        return list(self._warehouses)

    def has_warehouse(self, warehouse: int) -> bool:
        return warehouse in self._warehouses

    def check_orders(self, orders) -> None:
        """Falla con el primer (pedido, artículo) sin ubicación o sin volumen."""
        for order in orders:
            for article_id in order.article_ids:
                if not self.has(article_id):
                    raise UnknownArticleError(article_id, order_id=order.id)
