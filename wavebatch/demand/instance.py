from dataclasses import dataclass, field
from typing import List

from wavebatch.demand.orders import Order
from wavebatch.warehouse.catalog import Article, ArticleLocation

@dataclass
class Instance:
    """Las tres listas del documento de entrada, sin índices."""
    article_locations: List[ArticleLocation] = field(default_factory=list)
    articles: List[Article] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)

    def total_lines(self) -> int:
        return sum(o.article_count for o in self.orders)
