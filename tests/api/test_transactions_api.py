"""
Tests for transaction API endpoints.
"""

from decimal import Decimal

from banking_api.models.enums import AccountType


def balance_of(client, account_no):
    return client.get(f"/api/accounts/{account_no}/balance").json()["data"]["balance"]


class TestDeposit:

    def test_deposit_returns_201(self, client, funded_account):
        response = client.post("/api/transactions/deposit", json={
            "account_no": funded_account,
            "amount": 500,
        })
        assert response.status_code == 201

        body = response.json()
        assert body["message"] == "Deposit successful"
        assert body["data"]["transaction_id"].startswith("TXN")
        assert body["data"]["amount"] == 500

    def test_deposit_updates_balance(self, client, funded_account):
        client.post("/api/transactions/deposit", json={
            "account_no": funded_account,
            "amount": 500,
        })
        assert balance_of(client, funded_account) == 1500

    def test_deposit_to_unknown_account_is_a_ledger_fault(self, client):
        response = client.post("/api/transactions/deposit", json={
            "account_no": "000000000000",
            "amount": 500,
        })
        assert response.status_code == 500
        assert "not found" in response.json()["error"]


class TestWithdraw:

    def test_withdraw_updates_balance(self, client, funded_account):
        response = client.post("/api/transactions/withdraw", json={
            "account_no": funded_account,
            "amount": 300,
        })
        assert response.status_code == 201
        assert response.json()["message"] == "Withdrawal successful"
        assert balance_of(client, funded_account) == 700

    def test_insufficient_funds_is_a_ledger_fault(self, client, funded_account):
        response = client.post("/api/transactions/withdraw", json={
            "account_no": funded_account,
            "amount": 5000,
        })
        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Ledger operation failed"
        assert "Insufficient balance" in body["error"]

        assert balance_of(client, funded_account) == 1000
        assert client.get("/api/transactions").json()["data"] == []


class TestTransfer:

    def test_transfer_moves_money(self, client, gateway, customer_id, funded_account):
        other = gateway.create_account(
            customer_id, AccountType.CURRENT, Decimal("0")
        ).account_no

        response = client.post("/api/transactions/transfer", json={
            "from_account": funded_account,
            "to_account": other,
            "amount": 400,
        })
        assert response.status_code == 201

        data = response.json()["data"]
        assert data["from_account"] == funded_account
        assert data["to_account"] == other
        assert data["amount"] == 400

        assert balance_of(client, funded_account) == 600
        assert balance_of(client, other) == 400

    def test_same_account_transfer_is_decided_by_ledger(self, client, funded_account):
        response = client.post("/api/transactions/transfer", json={
            "from_account": funded_account,
            "to_account": funded_account,
            "amount": 100,
        })
        assert response.status_code == 500
        assert "same account" in response.json()["error"]
        assert balance_of(client, funded_account) == 1000


class TestReadTransactions:

    def test_get_transaction(self, client, funded_account):
        transaction_id = client.post("/api/transactions/deposit", json={
            "account_no": funded_account,
            "amount": 75.5,
        }).json()["data"]["transaction_id"]

        response = client.get(f"/api/transactions/{transaction_id}")
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["transaction_id"] == transaction_id
        assert data["type"] == "DEPOSIT"
        assert data["from_account"] is None
        assert data["to_account"] == funded_account
        assert data["amount"] == 75.5
        assert data["status"] == "COMPLETED"
        assert data["fee"] == 0
        assert data["date_time"]

    def test_unknown_transaction_returns_404(self, client):
        response = client.get("/api/transactions/TXN000000000000")
        assert response.status_code == 404
        assert response.json()["message"] == "Transaction not found"

    def test_list_transactions(self, client, funded_account):
        for path in ("deposit", "withdraw"):
            client.post(f"/api/transactions/{path}", json={
                "account_no": funded_account,
                "amount": 10,
            })

        data = client.get("/api/transactions").json()["data"]
        assert sorted(t["type"] for t in data) == ["DEPOSIT", "WITHDRAWAL"]
