"""Tests for window aggregation and the summary request flow."""

import pytest

from conftest import FakeDocumentStore
from core.errors import AggregationError, SummaryError
from db.store import DocumentStore
from services.key_deriver import daily_key
from services.summary_service import aggregate_window, build_merchant_summary


def test_aggregate_no_documents_is_zero():
    store = FakeDocumentStore()

    total = aggregate_window(store, "daily", ["M1", "M2"], lambda mid: f"{mid}_daily_2024-05-15")

    assert total == 0
    assert store.requested == ["M1_daily_2024-05-15", "M2_daily_2024-05-15"]


def test_aggregate_skips_missing_merchant(summary_doc):
    store = FakeDocumentStore({"M1_daily_2024-05-15": summary_doc("M1", 100)})

    total = aggregate_window(store, "daily", ["M1", "M2"], lambda mid: f"{mid}_daily_2024-05-15")

    assert total == 100


def test_aggregate_total_independent_of_order(summary_doc):
    store = FakeDocumentStore({
        "A_k": summary_doc("A", 250),
        "B_k": summary_doc("B", 1_000),
        "C_k": summary_doc("C", 7),
    })

    forward = aggregate_window(store, "daily", ["A", "B", "C", "D"], lambda mid: f"{mid}_k")
    backward = aggregate_window(store, "daily", ["D", "C", "B", "A"], lambda mid: f"{mid}_k")

    assert forward == backward == 1_257


def test_aggregate_store_failure_aborts_window(summary_doc):
    store = FakeDocumentStore(
        {"A_k": summary_doc("A", 5), "C_k": summary_doc("C", 5)},
        failing={"B_k"},
    )

    with pytest.raises(AggregationError) as exc_info:
        aggregate_window(store, "weekly", ["A", "B", "C"], lambda mid: f"{mid}_k")

    assert exc_info.value.window == "weekly"
    assert exc_info.value.key == "B_k"
    # nothing after the failing key is fetched
    assert store.requested == ["A_k", "B_k"]


def test_aggregate_undecodable_document_aborts_window():
    store = FakeDocumentStore({"A_k": {"merchant_id": "A", "amount": "lots"}})

    with pytest.raises(AggregationError):
        aggregate_window(store, "monthly", ["A"], lambda mid: f"{mid}_k")


@pytest.mark.parametrize(
    "field, value",
    [
        ("amount", "100"),
        ("amount", 100.0),
        ("amount", True),
        ("amount", 2 ** 70),
        ("amount", -(2 ** 63) - 1),
        ("count", "3"),
        ("merchant_id", 123),
    ],
)
def test_aggregate_wrong_typed_field_aborts_window(field, value):
    store = FakeDocumentStore({"A_k": {"merchant_id": "A", "amount": 10, field: value}})

    with pytest.raises(AggregationError) as exc_info:
        aggregate_window(store, "daily", ["A"], lambda mid: f"{mid}_k")

    assert exc_info.value.key == "A_k"


def test_aggregate_accepts_int64_bounds():
    store = FakeDocumentStore({
        "A_k": {"amount": 2 ** 63 - 1},
        "B_k": {"amount": -(2 ** 63)},
    })

    assert aggregate_window(store, "daily", ["A", "B"], lambda mid: f"{mid}_k") == -1


def test_store_without_get_cannot_be_created():
    class NoGetStore(DocumentStore):
        pass

    with pytest.raises(TypeError):
        NoGetStore()


def test_aggregate_tolerates_sparse_documents():
    store = FakeDocumentStore({"A_k": {"amount": 42, "unexpected": True}, "B_k": {}})

    assert aggregate_window(store, "daily", ["A", "B"], lambda mid: f"{mid}_k") == 42


def test_build_summary_totals(wednesday, summary_doc):
    store = FakeDocumentStore({
        "M1_daily_2024-05-15": summary_doc("M1", 100),
        "M1_weekly_2024-05-13_2024-05-17": summary_doc("M1", 500),
        "M2_weekly_2024-05-13_2024-05-17": summary_doc("M2", 300),
        "M1_monthly_2024-05-31": summary_doc("M1", 2_000),
        "M2_monthly_2024-05-31": summary_doc("M2", 900),
    })

    response = build_merchant_summary(store, ["M1", "M2"], wednesday)

    assert response.error_schema.error_code == "D000"
    assert response.error_schema.error_message == {"indonesian": "Berhasil", "english": "Success"}
    output = response.output_schema
    assert output.merchant_ids == ["M1", "M2"]
    assert output.current_date == "2024-05-15"
    assert output.today_total_amount == "100"
    assert output.weekly_total_amount == "800"
    assert output.monthly_total_amount == "2900"


@pytest.mark.parametrize("merchant_ids", [[], None])
def test_build_summary_requires_merchants(wednesday, merchant_ids):
    with pytest.raises(SummaryError) as exc_info:
        build_merchant_summary(FakeDocumentStore(), merchant_ids, wednesday)

    assert exc_info.value.code == "E002"
    assert exc_info.value.status_code == 400


def test_daily_failure_short_circuits_other_windows(wednesday):
    store = FakeDocumentStore(failing={daily_key("M1", wednesday)})

    with pytest.raises(SummaryError) as exc_info:
        build_merchant_summary(store, ["M1", "M2"], wednesday)

    assert exc_info.value.code == "E003"
    assert exc_info.value.status_code == 500
    assert store.requested == ["M1_daily_2024-05-15"]


@pytest.mark.parametrize(
    "failing_key, code",
    [
        ("M1_weekly_2024-05-13_2024-05-17", "E004"),
        ("M1_monthly_2024-05-31", "E005"),
    ],
)
def test_window_failure_codes(wednesday, failing_key, code):
    store = FakeDocumentStore(failing={failing_key})

    with pytest.raises(SummaryError) as exc_info:
        build_merchant_summary(store, ["M1"], wednesday)

    assert exc_info.value.code == code
