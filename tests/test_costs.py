from wavebatch.experiments.kpis import tour_cost, rest_cost, total_cost, evaluate, to_row
from wavebatch.picking.batching import Batch, Item
from wavebatch.picking.solution import Solution
from wavebatch.picking.waves import Wave
from wavebatch.spec.planner_config import CostWeights

def make_solution():
    b0 = Batch(0, (Item(1, 0), Item(1, 1)), 6,
               ((1, frozenset({0, 1})), (2, frozenset({4}))))
    b1 = Batch(1, (Item(2, 2),), 5, ((2, frozenset({0})),))
    w0 = Wave(0, (1, 2), (0, 1), 3)
    return Solution(waves=(w0,), batches=(b0, b1))

def test_empty_solution_costs_nothing():
    s = Solution.empty()
    assert tour_cost(s) == 0
    assert rest_cost(s) == 0
    assert total_cost(s) == 0

def test_tour_cost_counts_warehouses_and_aisles_per_batch():
    # b0: 2 almacenes, 3 pasillos; b1: 1 almacén, 1 pasillo
    assert tour_cost(make_solution()) == 10 * 3 + 5 * 4

def test_rest_cost_counts_waves_and_batches():
    assert rest_cost(make_solution()) == 10 * 1 + 5 * 2

def test_total_is_tour_plus_rest():
    c = evaluate(make_solution())
    assert c.total_cost == c.tour_cost + c.rest_cost == 70
    assert c.to_dict() == {"tour_cost": 50, "rest_cost": 20, "total_cost": 70}

def test_custom_weights():
    w = CostWeights(per_warehouse=1, per_aisle=0, per_wave=100, per_batch=0)
    assert total_cost(make_solution(), w) == 3 + 100

def test_row_kpis():
    row = to_row(10, 20, 2, make_solution())
    d = row.to_dict()
    assert d["waves"] == 1 and d["batches"] == 2
    assert d["lines_total"] == 3
    assert d["avg_warehouses_per_batch"] == 1.5
    assert d["total_cost"] == 70
