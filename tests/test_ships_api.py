from conftest import epoch_ms

BASE = "/rest/ships"


def new_ship(**overrides):
    body = {
        "name": "Voyager",
        "planet": "Neptune",
        "shipType": "TRANSPORT",
        "prodDate": epoch_ms(3010),
        "speed": 0.6,
        "crewSize": 40,
    }
    body.update(overrides)
    return body


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_defaults_to_three_ships(client):
    response = client.get(BASE)
    assert response.status_code == 200
    ships = response.json()
    assert [ship["id"] for ship in ships] == [1, 2, 3]
    assert set(ships[0]) == {"id", "name", "planet", "shipType", "prodDate", "isUsed", "speed", "crewSize", "rating"}


def test_list_with_filters_order_and_paging(client):
    response = client.get(BASE, params={"planet": "ar", "order": "SPEED", "pageNumber": 0, "pageSize": 10})
    assert response.status_code == 200
    assert [ship["speed"] for ship in response.json()] == [0.33, 0.5, 0.75, 0.9]


def test_list_filters_by_type_and_date(client):
    response = client.get(BASE, params={"shipType": "TRANSPORT", "after": epoch_ms(3000), "isUsed": "false"})
    assert [ship["name"] for ship in response.json()] == ["Hermes", "Nostromo"]


def test_list_rejects_unknown_tokens(client):
    assert client.get(BASE, params={"order": "NAME"}).status_code == 400
    assert client.get(BASE, params={"shipType": "BOAT"}).status_code == 400
    assert client.get(f"{BASE}/count", params={"shipType": "BOAT"}).status_code == 400


def test_list_rejects_negative_paging(client):
    assert client.get(BASE, params={"pageNumber": -1}).status_code == 400
    assert client.get(BASE, params={"pageSize": -3}).status_code == 400


def test_count(client):
    assert client.get(f"{BASE}/count").json() == 5
    assert client.get(f"{BASE}/count", params={"planet": "earth"}).json() == 2
    assert client.get(f"{BASE}/count", params={"minRating": 100}).json() == 0


def test_create_ship(client):
    response = client.post(BASE, json=new_ship(id=77, rating=99.9))
    assert response.status_code == 200
    ship = response.json()
    assert ship["id"] == 6
    assert ship["isUsed"] is False
    assert ship["rating"] == 4.8

    assert client.get(f"{BASE}/6").json() == ship
    assert client.get(f"{BASE}/count").json() == 6


def test_create_crew_size_bounds(client):
    assert client.post(BASE, json=new_ship(crewSize=10000)).status_code == 400
    assert client.post(BASE, json=new_ship(crewSize=9999)).status_code == 200


def test_create_production_year_bounds(client):
    assert client.post(BASE, json=new_ship(prodDate=epoch_ms(2799))).status_code == 400
    assert client.post(BASE, json=new_ship(prodDate=epoch_ms(2800))).status_code == 200


def test_create_rejects_bad_bodies(client):
    body = new_ship()
    del body["planet"]
    assert client.post(BASE, json=body).status_code == 400
    assert client.post(BASE, json={}).status_code == 400
    assert client.post(BASE, json=new_ship(shipType="BOAT")).status_code == 400
    assert client.post(BASE, json=new_ship(speed=1.5)).status_code == 400
    assert client.post(BASE, content=b"not json", headers={"Content-Type": "application/json"}).status_code == 400
    assert client.get(f"{BASE}/count").json() == 5


def test_get_ship(client):
    response = client.get(f"{BASE}/3")
    assert response.status_code == 200
    assert response.json()["name"] == "Hermes"


def test_get_ship_errors(client):
    assert client.get(f"{BASE}/0").status_code == 400
    assert client.get(f"{BASE}/abc").status_code == 400
    assert client.get(f"{BASE}/99").status_code == 404


def test_update_crew_size_resets_is_used(client):
    before = client.get(f"{BASE}/2").json()
    assert before["isUsed"] is True

    response = client.post(f"{BASE}/2", json={"crewSize": 50})

    assert response.status_code == 200
    ship = response.json()
    assert ship["crewSize"] == 50
    assert ship["isUsed"] is False
    assert ship["rating"] == 0.6
    assert client.get(f"{BASE}/2").json() == ship


def test_update_without_fields_changes_nothing(client):
    before = client.get(f"{BASE}/2").json()
    assert client.post(f"{BASE}/2", json={}).json() == before
    assert client.post(f"{BASE}/2", json={"isUsed": False}).json() == before
    assert client.get(f"{BASE}/2").json() == before


def test_update_accepts_out_of_range_speed(client):
    response = client.post(f"{BASE}/1", json={"speed": 2.0, "isUsed": True})
    assert response.status_code == 200
    assert response.json()["speed"] == 2.0
    assert response.json()["rating"] == 4.0


def test_update_rejects_speed_with_unbounded_rating(client):
    before = client.get(f"{BASE}/1").json()
    response = client.post(f"{BASE}/1", json={"speed": 1e306})
    assert response.status_code == 400
    assert client.get(f"{BASE}/1").json() == before


def test_body_keys_must_be_camel_case(client):
    body = {"name": "Voyager", "planet": "Neptune", "ship_type": "TRANSPORT",
            "prod_date": epoch_ms(3010), "speed": 0.6, "crew_size": 40}
    assert client.post(BASE, json=body).status_code == 400

    before = client.get(f"{BASE}/2").json()
    assert client.post(f"{BASE}/2", json={"crew_size": 5}).json() == before


def test_update_rejects_invalid_values(client):
    before = client.get(f"{BASE}/1").json()
    assert client.post(f"{BASE}/1", json={"name": ""}).status_code == 400
    assert client.post(f"{BASE}/1", json={"crewSize": 0}).status_code == 400
    assert client.post(f"{BASE}/1", json={"prodDate": -1}).status_code == 400
    assert client.post(f"{BASE}/1", json={"name": "Ok", "crewSize": 10000}).status_code == 400
    assert client.get(f"{BASE}/1").json() == before


def test_update_unknown_ship(client):
    assert client.post(f"{BASE}/99", json={"name": "Ghost"}).status_code == 404
    assert client.post(f"{BASE}/0", json={"name": "Ghost"}).status_code == 400


def test_delete_ship(client):
    response = client.delete(f"{BASE}/1")
    assert response.status_code == 200
    assert response.content == b""
    assert client.get(f"{BASE}/1").status_code == 404
    assert client.get(f"{BASE}/count").json() == 4


def test_delete_errors(client):
    assert client.delete(f"{BASE}/99").status_code == 404
    assert client.delete(f"{BASE}/0").status_code == 400
