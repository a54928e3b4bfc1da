from .conftest import make_apartment


def _post_sale(api, headers, client_id, apartment_id, **extra):
    return api.post(
        "/api/v1/sales",
        json={"client_id": client_id, "apartment_id": apartment_id, **extra},
        headers=headers,
    )


def test_requires_authentication(api):
    response = api.get("/api/v1/sales")
    assert response.status_code == 401


def test_rejects_garbage_token(api):
    response = api.get("/api/v1/sales", headers={"Authorization": "Bearer nao-e-um-jwt"})
    assert response.status_code == 401


def test_create_sale(api, user_headers, buyer, apartment):
    response = _post_sale(api, user_headers, buyer.id, apartment.id, payment_method="À vista")

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Pendente"
    assert body["apartment_status"] == "Reservado"
    assert body["payment_method"] == "À vista"
    assert body["client_name"] == "Ana Pereira"
    assert body["apartment_label"]

    apartment_body = api.get(f"/api/v1/apartments/{apartment.id}", headers=user_headers).json()
    assert apartment_body["status"] == "Reservado"


def test_create_sale_unknown_client(api, user_headers, apartment):
    response = _post_sale(api, user_headers, 999, apartment.id)

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "not_found"


def test_create_sale_conflict_on_reserved_apartment(api, user_headers, buyer, other_buyer, apartment):
    assert _post_sale(api, user_headers, buyer.id, apartment.id).status_code == 201

    response = _post_sale(api, user_headers, other_buyer.id, apartment.id)

    assert response.status_code == 409
    body = response.json()
    assert body["error_code"] == "conflict"
    assert body["details"]["apartment_status"] == "Reservado"


def test_create_sale_invalid_terms(api, user_headers, buyer, apartment):
    response = _post_sale(api, user_headers, buyer.id, apartment.id, price="1000", down_payment="2000")
    assert response.status_code == 422


def test_create_sale_down_payment_above_apartment_price(api, user_headers, buyer, apartment):
    response = _post_sale(api, user_headers, buyer.id, apartment.id, down_payment="999999")

    assert response.status_code == 422
    assert response.json()["error_code"] == "validation_error"


def test_confirm_then_confirm_again(api, user_headers, buyer, apartment):
    sale_id = _post_sale(api, user_headers, buyer.id, apartment.id).json()["id"]

    response = api.post(f"/api/v1/sales/{sale_id}/confirm", headers=user_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "Confirmada"
    assert response.json()["apartment_status"] == "Vendido"

    again = api.post(f"/api/v1/sales/{sale_id}/confirm", headers=user_headers)
    assert again.status_code == 409


def test_cancel_releases_apartment(api, user_headers, buyer, apartment):
    sale_id = _post_sale(api, user_headers, buyer.id, apartment.id).json()["id"]

    response = api.post(f"/api/v1/sales/{sale_id}/cancel", headers=user_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "Cancelada"
    assert response.json()["apartment_status"] == "Disponível"


def test_confirm_unknown_sale(api, user_headers):
    assert api.post("/api/v1/sales/999/confirm", headers=user_headers).status_code == 404


def test_delete_requires_admin(api, user_headers, buyer, apartment):
    sale_id = _post_sale(api, user_headers, buyer.id, apartment.id).json()["id"]

    response = api.delete(f"/api/v1/sales/{sale_id}", headers=user_headers)

    assert response.status_code == 403


def test_admin_deletes_sale(api, admin_headers, buyer, apartment):
    sale_id = _post_sale(api, admin_headers, buyer.id, apartment.id).json()["id"]

    response = api.delete(f"/api/v1/sales/{sale_id}", headers=admin_headers)

    assert response.status_code == 204
    assert api.get(f"/api/v1/sales/{sale_id}", headers=admin_headers).status_code == 404
    apartment_body = api.get(f"/api/v1/apartments/{apartment.id}", headers=admin_headers).json()
    assert apartment_body["status"] == "Disponível"


def test_update_sale(api, user_headers, buyer, apartment):
    sale_id = _post_sale(api, user_headers, buyer.id, apartment.id).json()["id"]

    response = api.put(
        f"/api/v1/sales/{sale_id}",
        json={"installments": 120, "installment_value": "1500.00", "seller": "Carla Lima"},
        headers=user_headers,
    )

    assert response.status_code == 200
    assert response.json()["installments"] == 120
    assert response.json()["seller"] == "Carla Lima"


def test_update_confirmed_sale_conflicts(api, user_headers, buyer, apartment):
    sale_id = _post_sale(api, user_headers, buyer.id, apartment.id).json()["id"]
    api.post(f"/api/v1/sales/{sale_id}/confirm", headers=user_headers)

    response = api.put(f"/api/v1/sales/{sale_id}", json={"notes": "tarde demais"}, headers=user_headers)

    assert response.status_code == 409


def test_listing_filters(api, user_headers, buyer, other_buyer, apartment, db_session):
    second_apartment = make_apartment(db_session, unit_number="303")
    first_id = _post_sale(api, user_headers, buyer.id, apartment.id).json()["id"]
    _post_sale(api, user_headers, other_buyer.id, second_apartment.id)
    api.post(f"/api/v1/sales/{first_id}/confirm", headers=user_headers)

    everything = api.get("/api/v1/sales", headers=user_headers).json()
    assert everything["count"] == 2

    by_client = api.get(f"/api/v1/sales/client/{buyer.id}", headers=user_headers).json()
    assert [s["id"] for s in by_client["sales"]] == [first_id]

    by_apartment = api.get(f"/api/v1/sales/apartment/{second_apartment.id}", headers=user_headers).json()
    assert by_apartment["count"] == 1
    assert by_apartment["sales"][0]["client_id"] == other_buyer.id

    confirmed = api.get("/api/v1/sales/status/Confirmada", headers=user_headers).json()
    assert [s["id"] for s in confirmed["sales"]] == [first_id]

    pending = api.get("/api/v1/sales/status/Pendente", headers=user_headers).json()
    assert pending["count"] == 1


def test_unknown_status_filter(api, user_headers):
    assert api.get("/api/v1/sales/status/Perdida", headers=user_headers).status_code == 422
