# wavebatch/experiments/checker.py
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from wavebatch.data.solution_io import SolutionDocument
from wavebatch.experiments.kpis import CostBreakdown
from wavebatch.spec.planner_config import PlannerConfig
from wavebatch.warehouse.catalog import Catalog

@dataclass
class CheckReport:
    violations: List[str] = field(default_factory=list)
    costs: Optional[CostBreakdown] = None
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.violations

def recompute_costs(doc: SolutionDocument, catalog: Catalog, config: PlannerConfig) -> CostBreakdown:
    """Costo recalculado desde las ubicaciones de los artículos de cada batch."""
    w = config.costs
    tour = 0
    for batch in doc.batches:
        warehouses: Set[int] = set()
        aisles: Set[Tuple[int, int]] = set()
        for _, article_id in batch.items:
            if not catalog.has(article_id):
                continue
            loc = catalog.location_of(article_id)
            warehouses.add(loc.warehouse)
            aisles.add((loc.warehouse, loc.aisle))
        tour += w.per_warehouse * len(warehouses) + w.per_aisle * len(aisles)
    rest = w.per_wave * len(doc.waves) + w.per_batch * len(doc.batches)
    return CostBreakdown(tour_cost=tour, rest_cost=rest, total_cost=tour + rest)

def verify_solution(instance, doc: SolutionDocument, config: Optional[PlannerConfig] = None) -> CheckReport:
    """
    Verifica una solución contra su instancia:
      - ids de olas y batches consecutivos desde 0
      - cada batch pertenece a exactamente una ola
      - cada pedido está en exactamente una ola
      - las líneas de cada pedido están en batches de su ola (ni más ni menos)
      - WaveSize / BatchVolume coinciden y respetan los caps (salvo elemento único)
    y recalcula los costos.
    """
    config = config or PlannerConfig.default()
    report = CheckReport()
    v = report.violations
    catalog = Catalog.build(instance.article_locations, instance.articles)
    orders = {o.id: o for o in instance.orders}

    # 1) ids
    if [w.id for w in doc.waves] != list(range(len(doc.waves))):
        v.append("Los ids de ola no son consecutivos desde 0")
    if [b.id for b in doc.batches] != list(range(len(doc.batches))):
        v.append("Los ids de batch no son consecutivos desde 0")
    batches = {b.id: b for b in doc.batches}

    # 2) batch -> ola
    owner: Dict[int, int] = {}
    for wave in doc.waves:
        for bid in wave.batch_ids:
            if bid not in batches:
                v.append(f"Ola {wave.id} referencia el batch inexistente {bid}")
            elif bid in owner:
                v.append(f"Batch {bid} está en las olas {owner[bid]} y {wave.id}")
            else:
                owner[bid] = wave.id
    for bid in batches:
        if bid not in owner:
            v.append(f"Batch {bid} no pertenece a ninguna ola")

    # 3) pedido -> ola
    order_wave: Dict[int, int] = {}
    for wave in doc.waves:
        for oid in wave.order_ids:
            if oid not in orders:
                v.append(f"Ola {wave.id} contiene el pedido desconocido {oid}")
            elif oid in order_wave:
                v.append(f"Pedido {oid} está en las olas {order_wave[oid]} y {wave.id}")
            else:
                order_wave[oid] = wave.id
    for oid in orders:
        if oid not in order_wave:
            v.append(f"Pedido {oid} no está en ninguna ola")

    # 4) cobertura de líneas por ola
    for wave in doc.waves:
        placed: Counter = Counter()
        for bid in wave.batch_ids:
            if bid in batches:
                placed.update(batches[bid].items)
        expected: Counter = Counter()
        for oid in wave.order_ids:
            if oid in orders:
                expected.update((oid, a) for a in orders[oid].article_ids)
        if placed != expected:
            missing = expected - placed
            extra = placed - expected
            if missing:
                v.append(f"Ola {wave.id}: faltan líneas {sorted(missing.elements())}")
            if extra:
                v.append(f"Ola {wave.id}: líneas sobrantes {sorted(extra.elements())}")

    # 5) tamaños y volúmenes
    for wave in doc.waves:
        size = sum(orders[oid].article_count for oid in wave.order_ids if oid in orders)
        if size != wave.size:
            v.append(f"Ola {wave.id}: WaveSize={wave.size} pero sus pedidos suman {size}")
        if size > config.max_wave_size and len(wave.order_ids) > 1:
            v.append(f"Ola {wave.id} tiene {size} líneas (> {config.max_wave_size})")
    for batch in doc.batches:
        volume = 0
        for _, article_id in batch.items:
            if not catalog.has(article_id):
                v.append(f"Batch {batch.id} contiene el artículo desconocido {article_id}")
                continue
            volume += catalog.volume_of(article_id)
        if volume != batch.volume:
            v.append(f"Batch {batch.id}: BatchVolume={batch.volume} pero sus artículos suman {volume}")
        if volume > config.max_batch_volume and len(batch.items) > 1:
            v.append(f"Batch {batch.id} tiene volumen {volume} (> {config.max_batch_volume})")

    report.costs = recompute_costs(doc, catalog, config)
    report.stats = {
        "orders": len(orders),
        "waves": len(doc.waves),
        "batches": len(doc.batches),
        "items": sum(len(b.items) for b in doc.batches),
        "lines": instance.total_lines(),
    }
    return report
