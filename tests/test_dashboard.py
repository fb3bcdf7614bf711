from store_checkout.config import StoreConfig
from store_checkout.dashboard import DashboardModel
from store_checkout.observations import RecordingReporter
from store_checkout.store import run_store


def test_model_folds_a_full_run():
    config = StoreConfig(visitors=8, cashiers=2, tick_ms=0, seed=3)
    rec = RecordingReporter()
    result = run_store(config, reporter=rec, sleep=lambda _s: None)

    model = DashboardModel(config)
    for obs in rec.observations:
        model.apply(obs)

    assert model.visitors_done == 8
    assert {lid: row.served for lid, row in model.rows.items()} == result.served_by_cashier
    assert all(row.cashier == "closed" for row in model.rows.values())
    assert all(row.in_service is None and row.waiting == 0 for row in model.rows.values())
    assert model.summary().startswith("Shopping: 0 | Waiting: 0 | Serving: 0")


def test_model_before_any_observation():
    model = DashboardModel(StoreConfig(visitors=3, cashiers=1, tick_ms=1))
    assert model.summary() == "Shopping: 3 | Waiting: 0 | Serving: 0 | Left the store: 0/3"
    assert model.rows[1].values() == ("Line 1", "0", "-", "0", "open")
