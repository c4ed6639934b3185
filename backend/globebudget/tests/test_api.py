"""
Tests for the HTTP API.
"""
from datetime import date
from decimal import Decimal
from globebudget.models.exchange_rate import ExchangeRate


def money(value):
    return Decimal(str(value))


def put_budget(client, headers, mode="total", limit=1000):
    return client.put("/api/budget", headers=headers, json={
        "mode": mode,
        "limit": limit,
        "period_start": "2026-09-01",
        "period_end": "2026-09-30"
    })


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_requires_user_header(client):
    assert client.get("/api/budget").status_code == 401
    assert client.get("/api/budget", headers={"X-User-Id": "999"}).status_code == 401


def test_create_user(client):
    response = client.post("/api/users", json={"username": "ana"})
    assert response.status_code == 201
    user_id = response.json()["id"]
    
    assert client.get("/api/users/me", headers={"X-User-Id": str(user_id)}).json()["username"] == "ana"
    assert client.post("/api/users", json={"username": "ana"}).status_code == 400


def test_budget_crud(client, headers):
    assert client.get("/api/budget", headers=headers).status_code == 404
    
    response = put_budget(client, headers)
    assert response.status_code == 200
    assert response.json()["mode"] == "total"
    assert money(response.json()["limit"]) == Decimal(1000)
    
    assert client.delete("/api/budget", headers=headers).status_code == 204
    assert client.get("/api/budget", headers=headers).status_code == 404


def test_budget_rejects_inverted_period(client, headers):
    response = client.put("/api/budget", headers=headers, json={
        "mode": "total",
        "limit": 100,
        "period_start": "2026-09-30",
        "period_end": "2026-09-01"
    })
    assert response.status_code == 422


def test_dashboard_scenario(client, headers):
    put_budget(client, headers)
    client.post("/api/trips", headers=headers, json={
        "name": "Reading week",
        "destination": "Porto",
        "start_date": "2026-09-24",
        "end_date": "2026-09-27",
        "planned_cost": 100
    })
    client.post("/api/expenses", headers=headers, json={
        "description": "Textbooks",
        "amount": 200,
        "date": "2026-09-03"
    })
    
    response = client.get("/api/dashboard", headers=headers, params={"today": "2026-09-10"})
    assert response.status_code == 200
    view = response.json()
    
    assert view["has_budget"] is True
    assert money(view["figures"]["spent"]) == Decimal(200)
    assert money(view["figures"]["remaining"]) == Decimal(800)
    assert money(view["figures"]["remaining_after_planned"]) == Decimal(700)
    assert view["allowance"]["remaining_days"] == 21
    assert money(view["allowance"]["daily_allowance"]).quantize(Decimal("0.01")) == Decimal("38.10")
    assert view["current_week"]["week"] == "2026-09-07"
    assert len(view["weekly_budgets"]) == 5
    assert view["recommendations"]
    
    cached = client.get("/api/budget", headers=headers).json()
    assert money(cached["spent"]) == Decimal(200)
    assert money(cached["planned_spending"]) == Decimal(100)


def test_dashboard_without_budget(client, headers):
    view = client.get("/api/dashboard", headers=headers, params={"today": "2026-09-10"}).json()
    
    assert view["has_budget"] is False
    assert money(view["figures"]["remaining"]) == 0
    assert view["weekly_budgets"] == []
    assert view["recommendations"] == []


def test_remaining_mode_expense_round_trip(client, headers):
    put_budget(client, headers, mode="remaining", limit=500)
    
    created = client.post("/api/expenses", headers=headers, json={
        "description": "Groceries",
        "amount": 50,
        "date": "2026-09-10"
    })
    assert created.status_code == 201
    assert money(client.get("/api/budget", headers=headers).json()["limit"]) == Decimal(450)
    
    client.delete(f"/api/expenses/{created.json()['id']}", headers=headers)
    assert money(client.get("/api/budget", headers=headers).json()["limit"]) == Decimal(500)


def test_expense_date_edit_moves_it_to_another_week(client, headers):
    put_budget(client, headers)
    created = client.post("/api/expenses", headers=headers, json={
        "description": "Museum",
        "amount": 40,
        "date": "2026-09-10"
    }).json()
    
    response = client.put(f"/api/expenses/{created['id']}", headers=headers, json={"date": "2026-09-22"})
    assert response.status_code == 200
    assert response.json()["date"] == "2026-09-22"
    
    view = client.get("/api/dashboard", headers=headers, params={"today": "2026-09-10"}).json()
    spent_by_week = {row["week"]: money(row["spent"]) for row in view["weekly_budgets"]}
    assert spent_by_week["2026-09-07"] == Decimal(0)
    assert spent_by_week["2026-09-21"] == Decimal(40)


def test_balance_update(client, headers):
    put_budget(client, headers, mode="remaining", limit=500)
    
    response = client.post("/api/budget/balance", headers=headers, json={"new_balance": 430})
    assert response.status_code == 200
    body = response.json()
    assert money(body["budget"]["limit"]) == Decimal(430)
    assert money(body["adjustment"]["amount"]) == Decimal(70)
    assert body["adjustment"]["category"] == "Balance Adjustment"


def test_balance_update_requires_remaining_mode(client, headers):
    put_budget(client, headers, mode="total")
    response = client.post("/api/budget/balance", headers=headers, json={"new_balance": 430})
    assert response.status_code == 400


def test_invalid_entries_are_rejected(client, headers):
    trip = client.post("/api/trips", headers=headers, json={
        "name": "Backwards",
        "destination": "Nowhere",
        "start_date": "2026-09-10",
        "end_date": "2026-09-01"
    })
    negative = client.post("/api/expenses", headers=headers, json={
        "description": "Refund?",
        "amount": -5,
        "date": "2026-09-10"
    })
    assert trip.status_code == 422
    assert negative.status_code == 422


def test_trip_update_and_delete(client, headers):
    put_budget(client, headers)
    trip = client.post("/api/trips", headers=headers, json={
        "name": "Ski",
        "destination": "Innsbruck",
        "start_date": "2026-09-12",
        "end_date": "2026-09-14",
        "prepaid_cost": 120,
        "planned_cost": 80
    }).json()
    assert money(trip["total_cost"]) == Decimal(200)
    
    updated = client.put(f"/api/trips/{trip['id']}", headers=headers, json={"planned_cost": 30})
    assert money(updated.json()["total_cost"]) == Decimal(150)
    
    bad = client.put(f"/api/trips/{trip['id']}", headers=headers, json={"end_date": "2026-09-01"})
    assert bad.status_code == 400
    
    assert client.delete(f"/api/trips/{trip['id']}", headers=headers).status_code == 204
    assert client.get("/api/trips", headers=headers).json() == []
    assert money(client.get("/api/budget", headers=headers).json()["spent"]) == 0


def test_wishlist_never_counts_as_spent(client, headers):
    put_budget(client, headers)
    item = client.post("/api/wishlist", headers=headers, json={
        "name": "Northern lights",
        "location": "Tromso",
        "estimated_cost": 600
    })
    assert item.status_code == 201
    assert item.json()["priority"] == "medium"
    
    plain = client.get("/api/dashboard", headers=headers, params={"today": "2026-09-10"}).json()
    toggled = client.get(
        "/api/dashboard", headers=headers, params={"today": "2026-09-10", "include_wishlist": "true"}
    ).json()
    
    assert money(plain["figures"]["spent"]) == 0
    assert money(toggled["figures"]["displayed_planned"]) == Decimal(600)
    assert money(toggled["figures"]["remaining_after_planned"]) == Decimal(400)
    assert money(client.get("/api/budget", headers=headers).json()["planned_spending"]) == 0


def test_weekly_plan_flow(client, headers):
    put_budget(client, headers, mode="remaining", limit=300)
    week = "2026-09-21"
    
    assert client.get("/api/weekly-plans/2026-09-22", headers=headers).status_code == 400
    
    for day, name, amount in [(0, "Lunch", 20), (0, "Cinema", 30), (1, "Groceries", 15)]:
        response = client.post(f"/api/weekly-plans/{week}/events", headers=headers, json={
            "day_of_week": day,
            "event_name": name,
            "amount": amount
        })
        assert response.status_code == 201
    
    plan = client.get(f"/api/weekly-plans/{week}", headers=headers).json()
    assert [event["event_name"] for event in plan["events"]] == ["Lunch", "Cinema", "Groceries"]
    
    # 300 over the 10 days from 2026-09-21: 30 a day, 210 a week
    summary = client.get(
        f"/api/weekly-plans/{week}/summary", headers=headers, params={"today": "2026-09-21"}
    ).json()
    assert money(summary["planned_total"]) == Decimal(65)
    assert money(summary["weekly_allowance"]) == Decimal(210)
    assert money(summary["difference"]) == Decimal(145)
    assert summary["status"] == "under"
    
    event_id = plan["events"][0]["id"]
    assert client.delete(f"/api/weekly-plans/events/{event_id}", headers=headers).status_code == 204
    assert client.delete(f"/api/weekly-plans/{week}", headers=headers).status_code == 204
    assert client.delete(f"/api/weekly-plans/{week}", headers=headers).status_code == 404
    
    # Plans never touch the ledger
    assert money(client.get("/api/budget", headers=headers).json()["limit"]) == Decimal(300)


def test_home_currency_conversion_needs_no_fetch(client, headers):
    response = client.get("/api/fx-rates/convert", headers=headers, params={"amount": 12, "currency": "USD"})
    body = response.json()
    
    assert response.status_code == 200
    assert money(body["amount_home"]) == Decimal(12)
    assert money(body["home_unit"]) == Decimal(1)
    assert body["warning"] is None


def test_conversion_reports_home_unit_in_foreign_currency(client, headers, db):
    db.add(ExchangeRate(date=date.today(), base_currency="EUR", quote_currency="USD", rate=Decimal("1.25")))
    db.commit()
    
    body = client.get("/api/fx-rates/convert", headers=headers, params={"amount": 10, "currency": "EUR"}).json()
    
    assert money(body["amount_home"]) == Decimal("12.5")
    assert money(body["home_unit"]) == Decimal("0.8")
