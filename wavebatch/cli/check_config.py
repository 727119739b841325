import argparse
from pathlib import Path
from wavebatch.spec.config_loader import load_planner_config

def main(argv=None):
    parser = argparse.ArgumentParser(description="Validar e imprimir la configuración del planificador.")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML (opcional)")
    args = parser.parse_args(argv)

    cfg = load_planner_config(args.config)
    cfg.validate()
    print(cfg.summary())

if __name__ == "__main__":
    main()
