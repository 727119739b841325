from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional
from statistics import mean

from wavebatch.picking.solution import Solution
from wavebatch.spec.planner_config import CostWeights

# -------------------- Costos --------------------

def tour_cost(solution: Solution, weights: Optional[CostWeights] = None) -> int:
    """Almacenes distintos y pares (almacén, pasillo) tocados, sumados por batch."""
    w = weights or CostWeights()
    warehouses = 0
    aisles = 0
    for batch in solution.batches:
        warehouses += len(batch.warehouse_aisles)
        aisles += sum(len(a) for _, a in batch.warehouse_aisles)
    return w.per_warehouse * warehouses + w.per_aisle * aisles

def rest_cost(solution: Solution, weights: Optional[CostWeights] = None) -> int:
    w = weights or CostWeights()
    return w.per_wave * len(solution.waves) + w.per_batch * len(solution.batches)

def total_cost(solution: Solution, weights: Optional[CostWeights] = None) -> int:
    return tour_cost(solution, weights) + rest_cost(solution, weights)

@dataclass(frozen=True)
class CostBreakdown:
    tour_cost: int
    rest_cost: int
    total_cost: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

def evaluate(solution: Solution, weights: Optional[CostWeights] = None) -> CostBreakdown:
    t = tour_cost(solution, weights)
    r = rest_cost(solution, weights)
    return CostBreakdown(tour_cost=t, rest_cost=r, total_cost=t + r)

# -------------------- Fila de KPIs por corrida --------------------

@dataclass
class RowKPIs:
    max_wave_size: int
    max_batch_volume: int

    orders_total: int
    lines_total: int
    waves: int
    batches: int
    avg_wave_size: float
    max_wave_size_seen: int
    avg_batch_volume: float
    avg_warehouses_per_batch: float
    tour_cost: int
    rest_cost: int
    total_cost: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

def to_row(max_wave_size: int, max_batch_volume: int, orders_total: int,
           solution: Solution, weights: Optional[CostWeights] = None) -> RowKPIs:
    costs = evaluate(solution, weights)
    sizes = [w.size for w in solution.waves]
    volumes = [b.volume for b in solution.batches]
    wh_per_batch = [len(b.warehouse_aisles) for b in solution.batches]
    return RowKPIs(
        max_wave_size=max_wave_size,
        max_batch_volume=max_batch_volume,
        orders_total=orders_total,
        lines_total=solution.item_count(),
        waves=len(solution.waves),
        batches=len(solution.batches),
        avg_wave_size=mean(sizes) if sizes else 0.0,
        max_wave_size_seen=max(sizes) if sizes else 0,
        avg_batch_volume=mean(volumes) if volumes else 0.0,
        avg_warehouses_per_batch=mean(wh_per_batch) if wh_per_batch else 0.0,
        tour_cost=costs.tour_cost,
        rest_cost=costs.rest_cost,
        total_cost=costs.total_cost,
    )
