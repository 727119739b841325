from pathlib import Path
import pandas as pd
from wavebatch.demand.generator import InstanceSpec, make_instance
from wavebatch.experiments.runner import run_grid
from wavebatch.experiments.plots import plot_cost_by_caps

def test_run_grid_smoke(tmp_path: Path):
    csv_path = tmp_path / "grid.csv"
    inst = make_instance(3, InstanceSpec(n_orders=30))
    run_grid(
        inst,
        out_csv=csv_path,
        wave_sizes=[20, 60],
        batch_volumes=[2000, 8000],
    )
    assert csv_path.exists()
    df = pd.read_csv(csv_path)
    required_cols = {
        "max_wave_size", "max_batch_volume", "orders_total", "waves", "batches",
        "tour_cost", "rest_cost", "total_cost",
    }
    assert required_cols.issubset(set(df.columns))
    assert len(df) == 4
    assert (df["total_cost"] == df["tour_cost"] + df["rest_cost"]).all()
    assert (df["lines_total"] == inst.total_lines()).all()

    png = tmp_path / "plots" / "cost.png"
    plot_cost_by_caps(csv_path, png)
    assert png.exists()
