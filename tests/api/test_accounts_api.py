"""
Tests for account API endpoints.
"""

import pytest


def open_account(client, customer_id, balance=1000, account_type="SAVINGS", path="/api/accounts"):
    return client.post(path, json={
        "customer_id": customer_id,
        "type": account_type,
        "initial_balance": balance,
    })


class TestCreateAccount:

    def test_create_account_returns_201(self, client, customer_id):
        response = open_account(client, customer_id)
        assert response.status_code == 201

        body = response.json()
        assert body["message"] == "Account created successfully"
        account_no = body["data"]["account_no"]
        assert len(account_no) == 12
        assert account_no.isdigit()

    def test_create_path_kept_for_older_clients(self, client, customer_id):
        response = open_account(client, customer_id, path="/api/accounts/create")
        assert response.status_code == 201
        assert response.json()["data"]["account_no"]

    def test_zero_opening_balance_is_accepted(self, client, customer_id):
        response = open_account(client, customer_id, balance=0)
        assert response.status_code == 201

    @pytest.mark.parametrize("missing", ["customer_id", "type", "initial_balance"])
    def test_missing_field_returns_400(self, client, customer_id, missing):
        payload = {
            "customer_id": customer_id,
            "type": "SAVINGS",
            "initial_balance": 100,
        }
        del payload[missing]

        response = client.post("/api/accounts", json=payload)
        assert response.status_code == 400
        assert missing in response.json()["message"]

    def test_unknown_customer_is_a_ledger_fault(self, client):
        response = open_account(client, "CUS000000000")
        assert response.status_code == 500
        assert "Customer CUS000000000 not found" in response.json()["error"]


class TestReadAccount:

    def test_get_account(self, client, customer_id):
        account_no = open_account(client, customer_id).json()["data"]["account_no"]

        response = client.get(f"/api/accounts/{account_no}")
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["account_no"] == account_no
        assert data["customer_id"] == customer_id
        assert data["type"] == "SAVINGS"
        assert data["status"] == "ACTIVE"
        assert data["balance"] == 1000
        assert data["customer_name"] == "Ayesha Khan"
        assert data["cnic"] == "35202-1234567-1"
        assert data["contact"] == "0300-1234567"
        assert data["opening_date"]

    def test_unknown_account_returns_404_without_data(self, client):
        response = client.get("/api/accounts/000000000000")
        assert response.status_code == 404

        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Account not found"
        assert "data" not in body

    def test_get_balance(self, client, customer_id):
        account_no = open_account(client, customer_id, balance=250).json()["data"]["account_no"]

        response = client.get(f"/api/accounts/{account_no}/balance")
        assert response.status_code == 200
        assert response.json()["data"] == {"account_no": account_no, "balance": 250}

    def test_balance_of_unknown_account_returns_404(self, client):
        response = client.get("/api/accounts/000000000000/balance")
        assert response.status_code == 404

    def test_list_accounts_names_holders(self, client, customer_id):
        open_account(client, customer_id)
        open_account(client, customer_id, account_type="CURRENT")

        data = client.get("/api/accounts").json()["data"]
        assert len(data) == 2
        assert {a["type"] for a in data} == {"SAVINGS", "CURRENT"}
        assert all(a["customer_name"] == "Ayesha Khan" for a in data)

    def test_list_accounts_highest_number_first(self, client, customer_id):
        for _ in range(5):
            open_account(client, customer_id)

        numbers = [a["account_no"] for a in client.get("/api/accounts").json()["data"]]
        assert numbers == sorted(numbers, reverse=True)


class TestUpdateAccountStatus:

    def test_status_update_is_visible_on_next_read(self, client, funded_account):
        response = client.put(
            f"/api/accounts/{funded_account}/status",
            json={"status": "FROZEN"},
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Account status updated successfully"

        data = client.get(f"/api/accounts/{funded_account}").json()["data"]
        assert data["status"] == "FROZEN"

    def test_status_value_is_case_insensitive(self, client, funded_account):
        response = client.put(
            f"/api/accounts/{funded_account}/status",
            json={"status": "closed"},
        )
        assert response.status_code == 200

    def test_unknown_account_returns_404(self, client):
        response = client.put(
            "/api/accounts/000000000000/status",
            json={"status": "ACTIVE"},
        )
        assert response.status_code == 404

    def test_invalid_status_returns_400(self, client, funded_account):
        response = client.put(
            f"/api/accounts/{funded_account}/status",
            json={"status": "SLEEPING"},
        )
        assert response.status_code == 400
