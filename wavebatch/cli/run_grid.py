import argparse
import logging
from pathlib import Path

from wavebatch.data.instance_io import load_instance
from wavebatch.experiments.runner import run_grid
from wavebatch.experiments.plots import plot_cost_by_caps, plot_cost_split

def main(argv=None):
    parser = argparse.ArgumentParser(description="Barrido de caps de ola/batch sobre una instancia.")
    parser.add_argument("input", type=Path)
    parser.add_argument("--out-csv", type=Path, default=Path("outputs/experiments/caps_grid.csv"))
    parser.add_argument("--wave-sizes", type=int, nargs="+", default=[50, 100, 250])
    parser.add_argument("--batch-volumes", type=int, nargs="+", default=[2500, 5000, 10000])
    parser.add_argument("--plots", action="store_true", help="Guardar gráficas en outputs/plots/")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    csv_path = run_grid(
        load_instance(args.input),
        out_csv=args.out_csv,
        wave_sizes=args.wave_sizes,
        batch_volumes=args.batch_volumes,
    )
    print(f"CSV: {csv_path}")

    if args.plots:
        plot_cost_by_caps(csv_path, Path("outputs/plots/cost_by_caps.png"))
        plot_cost_split(csv_path, Path("outputs/plots/cost_split.png"))
        print("Gráficas en outputs/plots/")

if __name__ == "__main__":
    main()
