APARTMENT = {
    "unit_number": "704",
    "block": "B",
    "floor": 7,
    "total_area": "72.30",
    "private_area": "65.00",
    "bedrooms": 3,
    "suites": 1,
    "bathrooms": 2,
    "parking_spots": 1,
    "has_balcony": True,
    "price": "320000.00",
    "development": "Residencial Vista Verde",
}


def _sell(api, headers, client_id, apartment_id, confirm=False):
    sale = api.post(
        "/api/v1/sales",
        json={"client_id": client_id, "apartment_id": apartment_id},
        headers=headers,
    ).json()
    if confirm:
        api.post(f"/api/v1/sales/{sale['id']}/confirm", headers=headers)
    return sale


def test_only_admin_creates_apartments(api, user_headers, admin_headers):
    assert api.post("/api/v1/apartments", json=APARTMENT, headers=user_headers).status_code == 403

    response = api.post("/api/v1/apartments", json=APARTMENT, headers=admin_headers)

    assert response.status_code == 201
    assert response.json()["status"] == "Disponível"
    assert response.json()["price"] == "320000.00"


def test_status_in_create_payload_is_ignored(api, admin_headers):
    response = api.post(
        "/api/v1/apartments", json={**APARTMENT, "status": "Vendido"}, headers=admin_headers
    )
    assert response.json()["status"] == "Disponível"


def test_layout_validation(api, admin_headers):
    response = api.post(
        "/api/v1/apartments", json={**APARTMENT, "suites": 4}, headers=admin_headers
    )
    assert response.status_code == 422


def test_manual_status_toggle(api, admin_headers):
    apartment_id = api.post("/api/v1/apartments", json=APARTMENT, headers=admin_headers).json()["id"]

    response = api.put(
        f"/api/v1/apartments/{apartment_id}",
        json={**APARTMENT, "status": "Indisponível"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "Indisponível"

    response = api.put(
        f"/api/v1/apartments/{apartment_id}",
        json={**APARTMENT, "status": "Disponível", "price": "310000.00"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "Disponível"
    assert response.json()["price"] == "310000.00"


def test_sale_statuses_cannot_be_set_by_hand(api, admin_headers):
    apartment_id = api.post("/api/v1/apartments", json=APARTMENT, headers=admin_headers).json()["id"]

    response = api.put(
        f"/api/v1/apartments/{apartment_id}",
        json={**APARTMENT, "status": "Vendido"},
        headers=admin_headers,
    )

    assert response.status_code == 409
    fetched = api.get(f"/api/v1/apartments/{apartment_id}", headers=admin_headers).json()
    assert fetched["status"] == "Disponível"


def test_reserved_apartment_cannot_be_released_by_hand(api, admin_headers, buyer, apartment):
    _sell(api, admin_headers, buyer.id, apartment.id)

    response = api.put(
        f"/api/v1/apartments/{apartment.id}",
        json={**APARTMENT, "status": "Disponível"},
        headers=admin_headers,
    )

    assert response.status_code == 409
    fetched = api.get(f"/api/v1/apartments/{apartment.id}", headers=admin_headers).json()
    assert fetched["status"] == "Reservado"


def test_sold_apartment_without_sale_can_be_released(api, admin_headers, buyer, apartment):
    sale = _sell(api, admin_headers, buyer.id, apartment.id, confirm=True)
    api.delete(f"/api/v1/sales/{sale['id']}", headers=admin_headers)

    response = api.put(
        f"/api/v1/apartments/{apartment.id}",
        json={**APARTMENT, "status": "Disponível"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Disponível"


def test_list_by_status(api, admin_headers, buyer, apartment):
    api.post("/api/v1/apartments", json=APARTMENT, headers=admin_headers)
    _sell(api, admin_headers, buyer.id, apartment.id)

    everything = api.get("/api/v1/apartments", headers=admin_headers).json()
    reserved = api.get("/api/v1/apartments/status/Reservado", headers=admin_headers).json()

    assert everything["count"] == 2
    assert [a["id"] for a in reserved["apartments"]] == [apartment.id]


def test_delete_apartment(api, admin_headers, buyer, apartment):
    other_id = api.post("/api/v1/apartments", json=APARTMENT, headers=admin_headers).json()["id"]
    _sell(api, admin_headers, buyer.id, apartment.id)

    assert api.delete(f"/api/v1/apartments/{apartment.id}", headers=admin_headers).status_code == 409
    assert api.delete(f"/api/v1/apartments/{other_id}", headers=admin_headers).status_code == 204
    assert api.get(f"/api/v1/apartments/{other_id}", headers=admin_headers).status_code == 404
