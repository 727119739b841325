# wavebatch/data/solution_io.py
"""
Documento de salida:

    {"Waves":   [{"WaveId", "BatchIds", "OrderIds", "WaveSize"}, ...],
     "Batches": [{"BatchId", "Items": [{"OrderId", "ArticleId"}], "BatchVolume"}, ...]}

No se escriben los pasillos por batch ni los índices de planificación.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple
import json

from wavebatch.errors import InstanceFormatError
from wavebatch.picking.solution import Solution

def solution_to_dict(solution: Solution) -> Dict[str, Any]:
    return {
        "Waves": [
            {
                "WaveId": w.id,
                "BatchIds": list(w.batch_ids),
                "OrderIds": list(w.order_ids),
                "WaveSize": w.size,
            }
            for w in solution.waves
        ],
        "Batches": [
            {
                "BatchId": b.id,
                "Items": [{"OrderId": it.order_id, "ArticleId": it.article_id} for it in b.items],
                "BatchVolume": b.volume,
            }
            for b in solution.batches
        ],
    }

def dumps_solution(solution: Solution) -> str:
    return json.dumps(solution_to_dict(solution), indent=2)

def dump_solution(solution: Solution, path: Path) -> Path:
    path = Path(path)
    text = dumps_solution(solution)  # serializar antes de tocar el archivo
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path

# -------------------- Lectura (para el verificador) --------------------

@dataclass(frozen=True)
class WaveRecord:
    id: int
    batch_ids: Tuple[int, ...]
    order_ids: Tuple[int, ...]
    size: int

@dataclass(frozen=True)
class BatchRecord:
    id: int
    items: Tuple[Tuple[int, int], ...]   # (order_id, article_id)
    volume: int

@dataclass(frozen=True)
class SolutionDocument:
    waves: Tuple[WaveRecord, ...]
    batches: Tuple[BatchRecord, ...]

def _get(d: Any, key: str, where: str) -> Any:
    if not isinstance(d, dict) or key not in d:
        raise InstanceFormatError(f"{where}: falta {key}")
    return d[key]

def parse_solution_document(doc: Any) -> SolutionDocument:
    waves: List[WaveRecord] = []
    for i, w in enumerate(_get(doc, "Waves", "documento")):
        where = f"Waves[{i}]"
        waves.append(WaveRecord(
            id=_get(w, "WaveId", where),
            batch_ids=tuple(_get(w, "BatchIds", where)),
            order_ids=tuple(_get(w, "OrderIds", where)),
            size=_get(w, "WaveSize", where),
        ))
    batches: List[BatchRecord] = []
    for i, b in enumerate(_get(doc, "Batches", "documento")):
        where = f"Batches[{i}]"
        items = tuple(
            (_get(it, "OrderId", where), _get(it, "ArticleId", where))
            for it in _get(b, "Items", where)
        )
        batches.append(BatchRecord(
            id=_get(b, "BatchId", where),
            items=items,
            volume=_get(b, "BatchVolume", where),
        ))
    return SolutionDocument(waves=tuple(waves), batches=tuple(batches))

def document_from_solution(solution: Solution) -> SolutionDocument:
    return parse_solution_document(solution_to_dict(solution))

def load_solution_document(path: Path) -> SolutionDocument:
    try:
        doc = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise InstanceFormatError(f"No se pudo leer {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InstanceFormatError(f"JSON inválido en {path}: {e}") from e
    return parse_solution_document(doc)
