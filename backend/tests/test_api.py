"""HTTP surface: routing, bearer-token callers and error status mapping."""
import asyncio

import httpx

from app.main import app
from app.middleware.auth import create_access_token
from conftest import ADMIN, ALICE, BOB, CAROL, TOKEN_A, open_ledger


def run_with_client(check):
    async def scenario():
        async with open_ledger() as ledger:
            app.state.ledger = ledger
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
                await check(client)

    asyncio.run(scenario())


def auth(address):
    return {"Authorization": f"Bearer {create_access_token(address)}"}


ASSET_BODY = {"address": TOKEN_A, "name": "Foo", "symbol": "FOO", "total_supply": "1000"}


def test_health():
    async def check(client):
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    run_with_client(check)


def test_register_requires_token_and_privilege():
    async def check(client):
        resp = await client.post("/api/assets", json=ASSET_BODY)
        assert resp.status_code == 401

        resp = await client.post("/api/assets", json=ASSET_BODY, headers={"Authorization": "Bearer junk"})
        assert resp.status_code == 401

        resp = await client.post("/api/assets", json=ASSET_BODY, headers=auth(ALICE))
        assert resp.status_code == 403
        assert resp.json()["error"] == "Unauthorized"

        resp = await client.post("/api/assets", json=ASSET_BODY, headers=auth(ADMIN))
        assert resp.status_code == 201
        body = resp.json()
        assert body["address"] == TOKEN_A
        assert body["total_supply"] == "1000"
        assert body["unique_holder_count"] == 0
        assert body["is_active"] is True

        resp = await client.post("/api/assets", json=ASSET_BODY, headers=auth(ADMIN))
        assert resp.status_code == 409
        assert resp.json()["error"] == "AlreadyRegistered"

    run_with_client(check)


def test_transfer_flow_over_http():
    async def check(client):
        await client.post("/api/assets", json=ASSET_BODY, headers=auth(ADMIN))

        ids = []
        for sender, receiver, amount in [(ALICE, BOB, 50), (BOB, CAROL, "20"), (ALICE, CAROL, 10)]:
            resp = await client.post(
                "/api/transfers",
                json={"asset_address": TOKEN_A, "from": sender, "to": receiver, "amount": amount},
            )
            assert resp.status_code == 201
            ids.append(resp.json()["id"])

        resp = await client.get(f"/api/assets/{TOKEN_A}/transfers")
        assert resp.json() == {"asset": TOKEN_A, "transfer_ids": ids}

        resp = await client.get(f"/api/transfers/{ids[1]}")
        body = resp.json()
        assert (body["sender"], body["receiver"], body["amount"]) == (BOB, CAROL, "20")
        assert body["tx_type"] == "transfer"

        resp = await client.get(f"/api/assets/{TOKEN_A}")
        assert resp.json()["unique_holder_count"] == 3
        assert resp.json()["transaction_count"] == 3

        resp = await client.get(f"/api/assets/{TOKEN_A}/holders/{CAROL}")
        assert resp.json()["seen"] is True

        resp = await client.get("/api/stats")
        assert resp.json() == {"total_assets": 1, "total_transfers": 3, "total_snapshots": 0}

    run_with_client(check)


def test_error_statuses():
    async def check(client):
        resp = await client.get(f"/api/assets/{TOKEN_A}")
        assert resp.status_code == 404
        assert resp.json()["error"] == "NotFound"

        resp = await client.get("/api/transfers/0")
        assert resp.status_code == 404

        resp = await client.post(
            "/api/transfers",
            json={"asset_address": TOKEN_A, "from": ALICE, "to": BOB, "amount": 5},
        )
        assert resp.status_code == 404

        await client.post("/api/assets", json=ASSET_BODY, headers=auth(ADMIN))
        resp = await client.post(
            "/api/transfers",
            json={"asset_address": TOKEN_A, "from": ALICE, "to": BOB, "amount": 0},
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "InvalidAmount"

        resp = await client.post(
            "/api/assets",
            json={**ASSET_BODY, "address": "0xfeed", "name": ""},
            headers=auth(ADMIN),
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "InvalidInput"

    run_with_client(check)


def test_status_and_snapshots_over_http():
    async def check(client):
        await client.post("/api/assets", json=ASSET_BODY, headers=auth(ADMIN))

        resp = await client.patch(f"/api/assets/{TOKEN_A}/status", json={"active": False}, headers=auth(ADMIN))
        assert resp.status_code == 200
        assert resp.json()["is_active"] is False

        snapshot = {"asset_address": TOKEN_A, "volume_24h": "80", "avg_tx_size": 26}
        resp = await client.post("/api/snapshots", json=snapshot, headers=auth(BOB))
        assert resp.status_code == 403

        resp = await client.post("/api/snapshots", json=snapshot, headers=auth(ADMIN))
        assert resp.status_code == 201
        snapshot_id = resp.json()["id"]

        resp = await client.get(f"/api/snapshots/{snapshot_id}")
        assert resp.json()["volume_24h"] == "80"
        assert resp.json()["avg_tx_size"] == "26"

        resp = await client.get("/api/assets")
        assert resp.json() == {"addresses": [TOKEN_A], "total": 1}

    run_with_client(check)


def test_privilege_transfer_over_http():
    async def check(client):
        resp = await client.get("/api/access")
        assert resp.json() == {"privileged_identity": ADMIN}

        resp = await client.post("/api/access/transfer", json={"new_identity": BOB}, headers=auth(ALICE))
        assert resp.status_code == 403

        resp = await client.post("/api/access/transfer", json={"new_identity": BOB}, headers=auth(ADMIN))
        assert resp.status_code == 200
        assert resp.json() == {"privileged_identity": BOB}

        # The old identity's token is still valid, but no longer privileged
        resp = await client.post("/api/assets", json=ASSET_BODY, headers=auth(ADMIN))
        assert resp.status_code == 403
        resp = await client.post("/api/assets", json=ASSET_BODY, headers=auth(BOB))
        assert resp.status_code == 201

    run_with_client(check)
