from pathlib import Path
from typing import List, Optional
import csv
import logging

from wavebatch.demand.instance import Instance
from wavebatch.picking.solution import plan
from wavebatch.spec.planner_config import PlannerConfig
from wavebatch.experiments.kpis import to_row

logger = logging.getLogger(__name__)

FIELDNAMES = [
    "max_wave_size", "max_batch_volume",
    "orders_total", "lines_total", "waves", "batches",
    "avg_wave_size", "max_wave_size_seen", "avg_batch_volume", "avg_warehouses_per_batch",
    "tour_cost", "rest_cost", "total_cost",
]

def run_grid(
    instance: Instance,
    out_csv: Path,
    # dominio de escenarios
    wave_sizes: List[int] = (50, 100, 250),
    batch_volumes: List[int] = (2500, 5000, 10000),
    base: Optional[PlannerConfig] = None,
) -> Path:
    """Una pasada de planificación por combinación de caps; una fila por corrida."""
    base = base or PlannerConfig.default()
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()

        for wave_size in wave_sizes:
            for batch_volume in batch_volumes:
                cfg = base.with_caps(max_wave_size=wave_size, max_batch_volume=batch_volume)
                solution = plan(instance, cfg)
                row = to_row(wave_size, batch_volume, len(instance.orders), solution, cfg.costs)
                logger.info("caps=(%d, %d) -> total_cost=%d", wave_size, batch_volume, row.total_cost)
                w.writerow(row.to_dict())
    return out_csv
