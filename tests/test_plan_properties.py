from collections import Counter

import pytest
from wavebatch.data.solution_io import dumps_solution
from wavebatch.demand.generator import InstanceSpec, make_instance
from wavebatch.demand.instance import Instance
from wavebatch.demand.orders import Order
from wavebatch.errors import ConfigError, DuplicateOrderError, EmptyOrderError, UnknownArticleError
from wavebatch.experiments.kpis import evaluate
from wavebatch.picking.solution import plan
from wavebatch.spec.planner_config import PlannerConfig

CFG = PlannerConfig(max_wave_size=30, max_batch_volume=3000)
# volúmenes de hasta 5000: algunos artículos superan el cap solos
SPEC = InstanceSpec(n_orders=120, n_articles=90, max_volume=5000, max_lines=40)

@pytest.fixture(scope="module", params=[1, 7, 23])
def case(request):
    inst = make_instance(request.param, SPEC)
    return inst, plan(inst, CFG)

def test_every_order_in_exactly_one_wave(case):
    inst, sol = case
    counts = Counter(oid for w in sol.waves for oid in w.order_ids)
    assert set(counts) == {o.id for o in inst.orders}
    assert all(c == 1 for c in counts.values())

def test_every_line_in_one_batch_of_its_wave(case):
    inst, sol = case
    orders = {o.id: o for o in inst.orders}
    assert sol.item_count() == inst.total_lines()
    for w in sol.waves:
        placed = Counter((it.order_id, it.article_id) for bid in w.batch_ids for it in sol.batch(bid).items)
        expected = Counter((oid, a) for oid in w.order_ids for a in orders[oid].article_ids)
        assert placed == expected

def test_wave_cap(case):
    _, sol = case
    for w in sol.waves:
        assert w.size <= CFG.max_wave_size or len(w.order_ids) == 1

def test_batch_cap(case):
    _, sol = case
    for b in sol.batches:
        assert b.volume <= CFG.max_batch_volume or len(b.items) == 1

def test_ids_follow_creation_order(case):
    _, sol = case
    assert [w.id for w in sol.waves] == list(range(len(sol.waves)))
    assert [b.id for b in sol.batches] == list(range(len(sol.batches)))
    all_batch_ids = [bid for w in sol.waves for bid in w.batch_ids]
    assert sorted(all_batch_ids) == list(range(len(sol.batches)))

def test_cost_additivity(case):
    _, sol = case
    c = evaluate(sol)
    assert c.total_cost == c.tour_cost + c.rest_cost

def test_deterministic_output(case):
    inst, sol = case
    again = plan(inst, CFG)
    assert again == sol
    assert dumps_solution(again) == dumps_solution(sol)

def test_empty_instance_gives_empty_solution():
    sol = plan(Instance(), CFG)
    assert sol.waves == () and sol.batches == ()
    assert evaluate(sol).total_cost == 0

def test_unknown_article_fails_whole_pass():
    inst = make_instance(3, InstanceSpec(n_orders=5))
    inst.orders.append(Order(999, (0, 12345)))
    with pytest.raises(UnknownArticleError) as exc:
        plan(inst, CFG)
    assert exc.value.order_id == 999

def test_duplicate_and_empty_orders_are_rejected():
    inst = make_instance(3, InstanceSpec(n_orders=5))
    inst.orders.append(Order(0, (1,)))
    with pytest.raises(DuplicateOrderError):
        plan(inst, CFG)
    inst = make_instance(3, InstanceSpec(n_orders=5))
    inst.orders.append(Order(50, ()))
    with pytest.raises(EmptyOrderError):
        plan(inst, CFG)

def test_non_positive_cap_is_a_config_error():
    inst = make_instance(3, InstanceSpec(n_orders=5))
    with pytest.raises(ConfigError):
        plan(inst, PlannerConfig(max_wave_size=0))
