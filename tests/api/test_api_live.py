"""End-to-end requests against the SQLite-backed store."""

from __future__ import annotations

import pytest


async def _create(client, path, body):
    r = await client.post(path, json=body)
    assert r.status_code == 201, r.text
    return r.json()


@pytest.mark.asyncio
async def test_lists_start_empty(live_client):
    for collection in ("sheets", "roasters", "beans", "shots"):
        r = await live_client.get(f"/rest/v1/{collection}")
        assert r.status_code == 200
        assert r.json() == []


@pytest.mark.asyncio
async def test_shot_scenario(live_client):
    roaster = await _create(live_client, "/rest/v1/roasters", {"name": "BlueBottle"})
    beans = await _create(
        live_client,
        "/rest/v1/beans",
        {
            "roaster_id": roaster["id"],
            "name": "Giant Steps",
            "roast_date": "2024-04-28",
            "roast_level": "medium-to-dark",
        },
    )
    sheet = await _create(live_client, "/rest/v1/sheets", {"name": "Morning"})
    shot = await _create(
        live_client,
        "/rest/v1/shots",
        {
            "sheet_id": sheet["id"],
            "beans_id": beans["id"],
            "grind_setting": 12,
            "quantity_in": 18.0,
            "quantity_out": 36.0,
            "shot_time": 28.5,
            "water_temperature": 0,
            "rating": 7.5,
            "comparison_with_previous": "better",
        },
    )

    assert shot["sheet"]["name"] == "Morning"
    assert shot["beans"]["name"] == "Giant Steps"
    assert shot["beans"]["roaster"]["name"] == "BlueBottle"
    assert shot["beans"]["roast_level"] == "medium-to-dark"
    assert shot["shot_time"] == 28.5
    assert shot["water_temperature"] == 93.0

    r = await live_client.get(f"/rest/v1/shots/{shot['id']}")
    assert r.status_code == 200
    assert r.json() == shot

    r = await live_client.delete(f"/rest/v1/roasters/{roaster['id']}")
    assert r.status_code == 400
    assert r.json() == {
        "msg": "cannot delete due to existing references: roaster foreign key constraint failed"
    }

    r = await live_client.delete(f"/rest/v1/shots/{shot['id']}")
    assert r.json() == {"id": shot["id"], "msg": "shot deleted successfully"}
    r = await live_client.get(f"/rest/v1/shots/{shot['id']}")
    assert r.status_code == 404
    assert r.json() == {"msg": "no shot found for given id"}


@pytest.mark.asyncio
async def test_duplicate_and_empty_names(live_client):
    await _create(live_client, "/rest/v1/sheets", {"name": "Morning"})

    r = await live_client.post("/rest/v1/sheets", json={"name": "Morning"})
    assert r.status_code == 409
    assert r.json() == {"msg": "a sheet with the given name already exists"}

    r = await live_client.post("/rest/v1/sheets", json={"name": ""})
    assert r.status_code == 400
    assert r.json() == {"msg": "sheet name must not be empty"}


@pytest.mark.asyncio
async def test_beans_for_missing_roaster_is_not_found(live_client):
    r = await live_client.post("/rest/v1/beans", json={"roaster_id": 404, "name": "Orphan"})
    assert r.status_code == 404
    assert r.json() == {"msg": "no roaster found for given id"}


@pytest.mark.asyncio
async def test_shot_for_missing_beans_is_not_found(live_client):
    sheet = await _create(live_client, "/rest/v1/sheets", {"name": "Morning"})

    r = await live_client.post(
        "/rest/v1/shots", json={"sheet_id": sheet["id"], "beans_id": 999, "rating": 5}
    )
    assert r.status_code == 404
    assert r.json() == {"msg": "no beans found for given id"}


@pytest.mark.asyncio
async def test_rating_out_of_range_is_bad_request(live_client):
    r = await live_client.post(
        "/rest/v1/shots", json={"sheet_id": 1, "beans_id": 1, "rating": 11}
    )
    assert r.status_code == 400
    assert r.json() == {"msg": "shot rating is out of range. Must be between 0.0 and 10.0"}


@pytest.mark.asyncio
async def test_rename_roaster(live_client):
    roaster = await _create(live_client, "/rest/v1/roasters", {"name": "BlueBottle"})

    r = await live_client.put(f"/rest/v1/roasters/{roaster['id']}", json={"name": "Onyx"})
    assert r.status_code == 200
    assert r.json()["name"] == "Onyx"

    r = await live_client.put("/rest/v1/roasters/404", json={"name": "Nobody"})
    assert r.status_code == 404
