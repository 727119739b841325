from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Order:
    id: int
    article_ids: Tuple[int, ...]   # con posibles repetidos: cada ocurrencia es una línea

    @property
    def article_count(self) -> int:
        return len(self.article_ids)
