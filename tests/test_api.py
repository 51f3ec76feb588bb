"""Tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient


def test_health(client: TestClient) -> None:
    """GET /health returns ok status."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_regimes(client: TestClient) -> None:
    """GET /regimes exposes both bracket tables with an uncapped top bracket."""
    response = client.get("/regimes")
    assert response.status_code == 200
    data = response.json()
    old = data["regimes"]["old"]
    new = data["regimes"]["new"]
    assert len(old["brackets"]) == 7
    assert len(new["brackets"]) == 5
    assert old["brackets"][-1]["upper"] is None
    assert new["personal_deduction"] == 15500000
    assert new["per_dependent_deduction"] == 6200000
    assert data["social_health_ceiling"] == 46800000
    assert data["unemployment_ceilings"]["4"] == 69000000
    assert data["insurance_rates"]["health"] == pytest.approx(0.015)


def test_regimes_lists_wage_regions(client: TestClient) -> None:
    regions = client.get("/regimes").json()["regions"]
    assert [r["region"] for r in regions] == [1, 2, 3, 4]
    assert regions[0]["label"] == "Vùng 1"
    assert regions[1]["description"]
    assert regions[3]["unemployment_ceiling"] == 69000000


def test_compare_gross(client: TestClient) -> None:
    """POST /compare with a gross salary returns both regimes and the saving."""
    response = client.post(
        "/compare",
        json={"salary": 40000000, "dependents": 2, "region": 1},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["old_regime"]["tax_amount"] == 1650000
    assert data["new_regime"]["tax_amount"] == 395000
    assert data["savings"] == 1255000
    assert data["savings_percent"] == pytest.approx(3.67, abs=0.01)
    assert data["old_regime"]["bracket"] == "Bậc 3"
    breakdown = data["old_regime"]["bracket_breakdown"]
    assert [line["bracket"] for line in breakdown] == [1, 2, 3]
    assert breakdown[-1]["is_highest"] is True
    assert data["new_regime"]["insurance"]["total"] == 4200000


def test_compare_net_mode(client: TestClient) -> None:
    """salary_mode=net solves gross under the new law first."""
    response = client.post(
        "/compare",
        json={"salary": 35405000, "salary_mode": "net", "dependents": 2},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["new_regime"]["gross_salary"] == pytest.approx(40000000, abs=1000)
    assert data["new_regime"]["net_salary"] == pytest.approx(35405000, abs=1000)


def test_compare_custom_insurance(client: TestClient) -> None:
    response = client.post(
        "/compare",
        json={
            "salary": 30000000,
            "insurance_mode": "custom",
            "custom_insurance": 10500000,
        },
    )
    assert response.status_code == 200
    insurance = response.json()["old_regime"]["insurance"]
    assert insurance["social"] == pytest.approx(8000000)
    assert insurance["total"] == 10500000


def test_compare_invalid_region(client: TestClient) -> None:
    """Unknown region is a 400, not a silent fallback to region 1."""
    response = client.post("/compare", json={"salary": 40000000, "region": 5})
    assert response.status_code == 400
    assert "region" in response.json()["error"]


def test_compare_custom_without_amount(client: TestClient) -> None:
    response = client.post(
        "/compare", json={"salary": 40000000, "insurance_mode": "custom"}
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_compare_negative_salary(client: TestClient) -> None:
    response = client.post("/compare", json={"salary": -1})
    assert response.status_code == 422


def test_compare_unknown_insurance_mode(client: TestClient) -> None:
    response = client.post(
        "/compare", json={"salary": 40000000, "insurance_mode": "voluntary"}
    )
    assert response.status_code == 422


def test_compare_missing_salary(client: TestClient) -> None:
    response = client.post("/compare", json={})
    assert response.status_code == 422


def test_gross_from_net(client: TestClient) -> None:
    response = client.post(
        "/gross-from-net",
        json={"target_net": 34150000, "dependents": 2, "regime": "old"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["regime"] == "old"
    assert data["gross_salary"] == pytest.approx(40000000, abs=1000)
    assert data["net_salary"] == pytest.approx(34150000, abs=1000)


def test_gross_from_net_defaults_to_new_law(client: TestClient) -> None:
    response = client.post("/gross-from-net", json={"target_net": 20000000})
    assert response.status_code == 200
    assert response.json()["regime"] == "new"


def test_gross_from_net_invalid_region(client: TestClient) -> None:
    response = client.post("/gross-from-net", json={"target_net": 20000000, "region": 0})
    assert response.status_code == 400


def test_provinces_search(client: TestClient) -> None:
    response = client.get("/provinces", params={"q": "đà nẵng"})
    assert response.status_code == 200
    assert response.json() == [{"name": "Đà Nẵng", "region": 2}]


def test_provinces_blank_query(client: TestClient) -> None:
    response = client.get("/provinces")
    assert response.status_code == 200
    assert response.json() == []


def test_compare_net_mode_huge_salary(client: TestClient) -> None:
    response = client.post("/compare", json={"salary": 1e28, "salary_mode": "net"})
    assert response.status_code == 422


def test_compare_net_mode_above_solver_ceiling(client: TestClient) -> None:
    """Accepted as a gross salary but too large to solve for as a net one."""
    response = client.post("/compare", json={"salary": 5e14, "salary_mode": "net"})
    assert response.status_code == 400
    assert "Target net salary" in response.json()["error"]


def test_compare_gross_at_ceiling(client: TestClient) -> None:
    response = client.post("/compare", json={"salary": 1e15})
    assert response.status_code == 200
    assert response.json()["new_regime"]["insurance"]["total"] == 5438000


def test_gross_from_net_huge_target(client: TestClient) -> None:
    response = client.post("/gross-from-net", json={"target_net": 1e28})
    assert response.status_code == 422
