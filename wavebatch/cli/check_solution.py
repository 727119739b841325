import argparse
import sys
from pathlib import Path

from wavebatch.data.instance_io import load_instance
from wavebatch.data.solution_io import load_solution_document
from wavebatch.errors import WaveBatchError
from wavebatch.experiments.checker import verify_solution
from wavebatch.spec.config_loader import load_planner_config

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Verificar una solución y recalcular su costo.")
    parser.add_argument("input", type=Path, help="Instancia JSON")
    parser.add_argument("output", type=Path, help="Solución JSON a verificar")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML (opcional)")
    args = parser.parse_args(argv)

    try:
        cfg = load_planner_config(args.config)
        cfg.validate()
        report = verify_solution(load_instance(args.input), load_solution_document(args.output), cfg)
    except WaveBatchError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if not report.is_valid:
        print("SOLUCIÓN INVÁLIDA")
        for msg in report.violations:
            print(f"  - {msg}")
        return 1

    print("SOLUCIÓN VÁLIDA")
    print(f"  {report.stats}")
    c = report.costs
    print(f"tour_cost={c.tour_cost}  rest_cost={c.rest_cost}  total_cost={c.total_cost}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
