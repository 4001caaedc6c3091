"""
Unit tests for dashboard view recomputation and data export.

Usage:
    pytest tests/test_views.py -v
"""
import json
from datetime import datetime, timezone

from pulse_core.export import EXPORT_VERSION, build_export, dumps_export, export_filename
from pulse_core.records import MetricName
from pulse_core.views import ViewState, recompute, reset_range


class TestViewState:
    def test_defaults(self):
        state = ViewState()
        assert state.selected_metric is MetricName.STEPS
        assert state.activity_filter == "all"
        assert state.range_days == 14

    def test_range_is_clamped(self):
        assert ViewState(range_days=1).range_days == 7
        assert ViewState(range_days=400).range_days == 90

    def test_metric_string_is_normalized(self):
        assert ViewState(selected_metric="water").selected_metric is MetricName.WATER

    def test_reset_range(self):
        state = ViewState(range_days=60, search="run")
        reset = reset_range(state)
        assert reset.range_days == 14
        assert reset.search == "run"
        assert state.range_days == 60

    def test_reset_range_notifies(self, notifications):
        reset_range(ViewState(range_days=30), notifier=lambda *args: notifications.append(args))
        assert notifications == [("Date range reset to 14 days", "success")]


class TestRecompute:
    def test_views_follow_state(self, store):
        store.add_activity({"date": "2024-01-10", "type": "Running", "duration": 30, "notes": "Tempo"})
        store.add_activity({"date": "2024-01-09", "type": "Gym", "duration": 60})
        store.add_metric({"date": "2024-01-10", "metric": "water", "value": 1.5})
        store.add_metric({"date": "2024-01-10", "metric": "water", "value": 1})
        store.add_metric({"date": "2024-01-08", "metric": "steps", "value": 4000})

        state = ViewState(selected_metric="water", activity_filter="Running", range_days=7)
        views = recompute(state, store)

        assert views.activity_types == ["all", "Running", "Gym"]
        assert [a.type for a in views.activities] == ["Running"]
        assert [m.value for m in views.metrics] == [1.5, 1, 4000]
        assert len(views.chart) == 7
        assert views.chart[-1].to_dict() == {"date": "2024-01-10", "water": 2.5}
        assert views.chart_stats.total == 2.5
        assert views.summary.totals == {"water": 2.5}

    def test_recompute_after_mutation_reflects_change(self, store):
        state = ViewState()
        before = recompute(state, store)
        assert before.activities == []

        store.add_activity({"date": "2024-01-10", "type": "Yoga", "duration": 25})
        after = recompute(state, store)

        assert len(after.activities) == 1
        assert after.summary.recent_activities == after.activities

    def test_recompute_is_idempotent(self, store):
        store.add_metric({"date": "2024-01-10", "metric": "steps", "value": 100})
        state = ViewState(range_days=30)
        assert recompute(state, store) == recompute(state, store)

    def test_subscriber_driven_recompute(self, store):
        state = ViewState()
        latest = {}
        store.subscribe(lambda change: latest.update(views=recompute(state, store)))

        store.add_metric({"date": "2024-01-10", "metric": "steps", "value": 7000})

        assert latest["views"].summary.totals == {"steps": 7000}


class TestExport:
    def test_document_shape(self, store):
        store.add_activity({"date": "2024-01-10", "type": "Gym", "duration": 30})
        store.add_metric({"date": "2024-01-10", "metric": "sleep", "value": 7.5})
        now = datetime(2024, 1, 10, 18, 30, tzinfo=timezone.utc)

        document = build_export(store.activities, store.metrics, now=now)

        assert document["version"] == EXPORT_VERSION
        assert document["exportDate"] == "2024-01-10T18:30:00+00:00"
        assert document["activities"][0]["type"] == "Gym"
        assert document["metrics"][0] == store.metrics[0].to_dict()

    def test_filename_uses_date(self):
        assert export_filename("2024-01-10") == "ucenpulse-data-2024-01-10.json"

    def test_dumps_is_indented_json(self):
        text = dumps_export(build_export([], []))
        assert text.startswith("{\n  ")
        assert json.loads(text)["activities"] == []
