import argparse
import logging
import sys
from pathlib import Path

from wavebatch.data.instance_io import load_instance
from wavebatch.data.solution_io import dump_solution
from wavebatch.errors import WaveBatchError
from wavebatch.experiments.kpis import evaluate
from wavebatch.picking.solution import plan
from wavebatch.spec.config_loader import load_planner_config

logger = logging.getLogger("wavebatch.cli.plan")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Asignar pedidos a olas y líneas a batches.")
    parser.add_argument("input", type=Path, help="Instancia JSON")
    parser.add_argument("output", type=Path, help="Destino de la solución JSON")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML (opcional)")
    parser.add_argument("--max-wave-size", type=int, help="Sobrescribe el cap de ola")
    parser.add_argument("--max-batch-volume", type=int, help="Sobrescribe el cap de batch")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log de depuración")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        cfg = load_planner_config(args.config).with_caps(args.max_wave_size, args.max_batch_volume)
        instance = load_instance(args.input)
        solution = plan(instance, cfg)
        dump_solution(solution, args.output)
    except WaveBatchError as e:
        logger.error("%s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    costs = evaluate(solution, cfg.costs)
    print(f"Olas: {len(solution.waves)}  Batches: {len(solution.batches)}  Líneas: {solution.item_count()}")
    print(f"tour_cost={costs.tour_cost}  rest_cost={costs.rest_cost}  total_cost={costs.total_cost}")
    print(f"[OK] Solución → {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
