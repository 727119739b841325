from pathlib import Path
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def plot_cost_by_caps(csv_path: Path, out_png: Path):
    df = pd.read_csv(csv_path)
    plt.figure()
    for vol in sorted(df["max_batch_volume"].unique()):
        sub = df[df["max_batch_volume"] == vol].sort_values("max_wave_size")
        plt.plot(sub["max_wave_size"], sub["total_cost"], marker="o", label=f"batch ≤ {vol}")
    plt.xlabel("Tamaño máximo de ola (líneas)")
    plt.ylabel("Costo total")
    plt.title("Costo total por caps de ola y batch")
    plt.legend()
    plt.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_png)
    plt.close()

def plot_cost_split(csv_path: Path, out_png: Path):
    df = pd.read_csv(csv_path)
    labels = [f"{w}/{v}" for w, v in zip(df["max_wave_size"], df["max_batch_volume"])]
    plt.figure()
    plt.bar(labels, df["tour_cost"], label="tour")
    plt.bar(labels, df["rest_cost"], bottom=df["tour_cost"], label="rest")
    plt.xticks(rotation=45, ha="right")
    plt.xlabel("Caps (ola / batch)")
    plt.ylabel("Costo")
    plt.title("Tour vs rest por combinación de caps")
    plt.legend()
    plt.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_png)
    plt.close()
