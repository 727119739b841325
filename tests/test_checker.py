from wavebatch.data.solution_io import solution_to_dict, parse_solution_document, document_from_solution
from wavebatch.demand.generator import InstanceSpec, make_instance
from wavebatch.experiments.checker import verify_solution
from wavebatch.experiments.kpis import evaluate
from wavebatch.picking.solution import plan
from wavebatch.spec.planner_config import PlannerConfig

CFG = PlannerConfig(max_wave_size=25, max_batch_volume=4000)

def make_case(seed=11):
    inst = make_instance(seed, InstanceSpec(n_orders=40))
    return inst, plan(inst, CFG)

def test_planned_solution_is_valid_and_costs_match():
    inst, sol = make_case()
    report = verify_solution(inst, document_from_solution(sol), CFG)
    assert report.is_valid, report.violations
    assert report.costs == evaluate(sol, CFG.costs)
    assert report.stats["items"] == report.stats["lines"]

def test_missing_line_is_reported():
    inst, sol = make_case()
    doc = solution_to_dict(sol)
    doc["Batches"][0]["Items"].pop()
    report = verify_solution(inst, parse_solution_document(doc), CFG)
    assert not report.is_valid
    assert any("faltan líneas" in v for v in report.violations)

def test_order_in_two_waves_is_reported():
    inst, sol = make_case()
    doc = solution_to_dict(sol)
    doc["Waves"][-1]["OrderIds"].append(doc["Waves"][0]["OrderIds"][0])
    report = verify_solution(inst, parse_solution_document(doc), CFG)
    assert any("está en las olas" in v for v in report.violations)

def test_overfull_batch_is_reported():
    inst, sol = make_case()
    tight = PlannerConfig(max_wave_size=25, max_batch_volume=1)
    report = verify_solution(inst, document_from_solution(sol), tight)
    assert not report.is_valid
    assert any("tiene volumen" in v for v in report.violations)
