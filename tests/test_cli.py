import json
from pathlib import Path

from wavebatch.cli import plan as plan_cli
from wavebatch.cli import check_solution as check_cli
from wavebatch.data.instance_io import dump_instance
from wavebatch.demand.generator import InstanceSpec, make_instance
from wavebatch.demand.orders import Order

def test_plan_then_check(tmp_path: Path, capsys):
    inp = dump_instance(make_instance(9, InstanceSpec(n_orders=25)), tmp_path / "in.json")
    out = tmp_path / "out.json"
    code = plan_cli.main([str(inp), str(out), "--max-wave-size", "30", "--max-batch-volume", "3000"])
    assert code == 0
    doc = json.loads(out.read_text(encoding="utf-8"))
    assert set(doc) == {"Waves", "Batches"}
    assert "total_cost=" in capsys.readouterr().out

    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"max_wave_size": 30, "max_batch_volume": 3000}', encoding="utf-8")
    assert check_cli.main([str(inp), str(out), "--config", str(cfg)]) == 0
    assert "SOLUCIÓN VÁLIDA" in capsys.readouterr().out

def test_plan_fails_without_partial_output(tmp_path: Path, capsys):
    inst = make_instance(9, InstanceSpec(n_orders=5))
    inst.orders.append(Order(77, (123456,)))
    inp = dump_instance(inst, tmp_path / "in.json")
    out = tmp_path / "out.json"
    assert plan_cli.main([str(inp), str(out)]) == 2
    assert not out.exists()
    assert "77" in capsys.readouterr().err

def test_plan_rejects_bad_cap(tmp_path: Path):
    inp = dump_instance(make_instance(1, InstanceSpec(n_orders=3)), tmp_path / "in.json")
    assert plan_cli.main([str(inp), str(tmp_path / "o.json"), "--max-wave-size", "0"]) == 2
