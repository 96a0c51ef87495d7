"""Tests for GET /transactions/summary."""

from datetime import date


def add(client, headers, title, amount, tx_type, category, day, status="Completed"):
    response = client.post(
        "/transactions",
        json={
            "title": title,
            "category": category,
            "date": day,
            "amount": amount,
            "status": status,
            "type": tx_type,
        },
        headers=headers,
    )
    assert response.status_code == 201


def test_summary_for_explicit_window(client, auth_headers):
    add(client, auth_headers, "Salary", 1000, "Income", "SALARY", "2025-02-10")
    add(client, auth_headers, "Market", 400, "Expense", "GROCERIES", "2025-03-02")
    add(client, auth_headers, "Dividends", 200, "Income", "INVESTMENT", "2025-04-30")
    add(client, auth_headers, "Out of range", 999, "Income", "SALARY", "2025-05-01")
    add(client, auth_headers, "Last year salary", 800, "Income", "SALARY", "2024-03-01")

    response = client.get(
        "/transactions/summary?start_month=2025-02-01&end_month=2025-04-30",
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["error"] is False
    assert body["message"] == "Financial summary generated successfully"
    data = body["data"]
    assert data["income"] == {"value": 1200.0, "change_percent": 50.0}
    assert data["expenses"] == {"value": 400.0, "change_percent": 100.0}
    assert data["total_balance"] == {"value": 800.0, "change_percent": 0.0}
    assert data["investments"] == {"value": 200.0, "change_percent": 100.0}
    assert data["range_by_category"] == [
        {"category": "SALARY", "amount": 1000.0},
        {"category": "GROCERIES", "amount": 400.0},
        {"category": "INVESTMENT", "amount": 200.0},
    ]
    assert data["range_data"]["start_month"] == "2025-02-01"
    assert data["range_data"]["end_month"] == "2025-04-30"
    assert [tx["title"] for tx in data["range_data"]["transactions"]] == ["Salary", "Market", "Dividends"]


def test_summary_defaults_to_three_month_window(client, auth_headers, freeze_today):
    freeze_today(date(2025, 1, 20))
    add(client, auth_headers, "December bonus", 300, "Income", "SALARY", "2024-12-01")
    add(client, auth_headers, "November", 50, "Income", "SALARY", "2024-11-30")

    data = client.get("/transactions/summary", headers=auth_headers).json()["data"]

    assert data["range_data"]["start_month"] == "2024-12-01"
    assert data["range_data"]["end_month"] == "2025-02-28"
    assert data["income"]["value"] == 300.0


def test_summary_is_empty_for_a_new_user(client, auth_headers, other_headers):
    add(client, auth_headers, "Salary", 1000, "Income", "SALARY", "2025-03-01")

    data = client.get(
        "/transactions/summary?start_month=2025-01-01&end_month=2025-12-31",
        headers=other_headers,
    ).json()["data"]

    for key in ("total_balance", "income", "expenses", "investments"):
        assert data[key] == {"value": 0.0, "change_percent": 0.0}
    assert data["range_by_category"] == []
    assert data["range_data"]["transactions"] == []


def test_summary_rejects_malformed_dates(client, auth_headers):
    response = client.get("/transactions/summary?start_month=march", headers=auth_headers)

    assert response.status_code == 422
    assert response.json()["error"] is True
