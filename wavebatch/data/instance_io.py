# wavebatch/data/instance_io.py
"""
Lectura del documento de instancia (JSON):

    {"ArticleLocations": [{"ArticleId", "Warehouse", "Aisle", "Position"}, ...],
     "Articles":         [{"ArticleId", "Volume"}, ...],
     "Orders":           [{"OrderId", "ArticleIds": [...]}, ...]}

Las claves se comparan sin mayúsculas y sin '_' (ArticleId == article_id == articleid).
"""
from pathlib import Path
from typing import Any, Dict, List, Sequence
import json

from wavebatch.demand.instance import Instance
from wavebatch.demand.orders import Order
from wavebatch.errors import InstanceFormatError
from wavebatch.warehouse.catalog import Article, ArticleLocation

def _norm(key: str) -> str:
    return key.replace("_", "").lower()

def _normalized(record: Any, where: str) -> Dict[str, Any]:
    if not isinstance(record, dict):
        raise InstanceFormatError(f"{where}: se esperaba un objeto, no {type(record).__name__}")
    return {_norm(k): v for k, v in record.items()}

def _field(record: Dict[str, Any], aliases: Sequence[str], where: str) -> Any:
    for a in aliases:
        if a in record:
            return record[a]
    raise InstanceFormatError(f"{where}: falta el campo {aliases[0]}")

def _int(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InstanceFormatError(f"{where}: se esperaba entero, no {value!r}")
    return value

def _list(doc: Dict[str, Any], key: str) -> List[Any]:
    if key not in doc:
        raise InstanceFormatError(f"Falta la lista {key}")
    value = doc[key]
    if not isinstance(value, list):
        raise InstanceFormatError(f"{key} debe ser una lista")
    return value

def parse_instance(doc: Any) -> Instance:
    top = _normalized(doc, "documento")

    locations: List[ArticleLocation] = []
    for i, raw in enumerate(_list(top, "articlelocations")):
        where = f"ArticleLocations[{i}]"
        r = _normalized(raw, where)
        locations.append(ArticleLocation(
            article_id=_int(_field(r, ("articleid",), where), where),
            warehouse=_int(_field(r, ("warehouse",), where), where),
            aisle=_int(_field(r, ("aisle",), where), where),
            position=_int(_field(r, ("position",), where), where),
        ))

    articles: List[Article] = []
    for i, raw in enumerate(_list(top, "articles")):
        where = f"Articles[{i}]"
        r = _normalized(raw, where)
        articles.append(Article(
            id=_int(_field(r, ("articleid", "id"), where), where),
            volume=_int(_field(r, ("volume",), where), where),
        ))

    orders: List[Order] = []
    for i, raw in enumerate(_list(top, "orders")):
        where = f"Orders[{i}]"
        r = _normalized(raw, where)
        ids = _field(r, ("articleids",), where)
        if not isinstance(ids, list):
            raise InstanceFormatError(f"{where}: ArticleIds debe ser una lista")
        orders.append(Order(
            id=_int(_field(r, ("orderid", "id"), where), where),
            article_ids=tuple(_int(a, where) for a in ids),
        ))

    return Instance(article_locations=locations, articles=articles, orders=orders)

def load_instance(path: Path) -> Instance:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InstanceFormatError(f"No se pudo leer {path}: {e}") from e
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise InstanceFormatError(f"JSON inválido en {path}: {e}") from e
    return parse_instance(doc)

def instance_to_dict(instance: Instance) -> Dict[str, Any]:
    return {
        "ArticleLocations": [
            {"ArticleId": l.article_id, "Warehouse": l.warehouse, "Aisle": l.aisle, "Position": l.position}
            for l in instance.article_locations
        ],
        "Articles": [{"ArticleId": a.id, "Volume": a.volume} for a in instance.articles],
        "Orders": [{"OrderId": o.id, "ArticleIds": list(o.article_ids)} for o in instance.orders],
    }

def dump_instance(instance: Instance, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(instance_to_dict(instance), f, indent=2)
    return path
