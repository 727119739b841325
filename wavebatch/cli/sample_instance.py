import argparse
from pathlib import Path

from wavebatch.data.instance_io import dump_instance
from wavebatch.demand.generator import InstanceSpec, make_instance

def main(argv=None):
    parser = argparse.ArgumentParser(description="Generar una instancia sintética.")
    parser.add_argument("output", type=Path)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--orders", type=int, default=100)
    parser.add_argument("--articles", type=int, default=200)
    parser.add_argument("--warehouses", type=int, default=3)
    parser.add_argument("--home-share", type=float, default=0.8)
    args = parser.parse_args(argv)

    spec = InstanceSpec(n_orders=args.orders, n_articles=args.articles,
                        n_warehouses=args.warehouses, home_share=args.home_share)
    instance = make_instance(args.seed, spec)
    path = dump_instance(instance, args.output)
    print(f"Pedidos: {len(instance.orders)}  Líneas: {instance.total_lines()}  Artículos: {len(instance.articles)}")
    print(f"[OK] Instancia → {path}")

if __name__ == "__main__":
    main()
