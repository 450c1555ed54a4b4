# tests/test_categories.py


def test_create_and_get_category(client, category):
    response = client.get(f"/categories/get/{category['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Drinks"
    assert body["description"] == "Cold and hot drinks"


def test_get_missing_category(client):
    assert client.get("/categories/get/42").status_code == 404


def test_list_categories(client, category):
    client.post("/categories/create", json={"name": "Desserts"})

    names = [c["name"] for c in client.get("/categories/all").json()]
    assert names == ["Drinks", "Desserts"]


def test_update_merges_fields(client, category):
    response = client.post(f"/categories/update/{category['id']}", json={"name": "Beverages"})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Beverages"
    assert body["description"] == "Cold and hot drinks"


def test_update_can_clear_description(client, category):
    response = client.post(f"/categories/update/{category['id']}", json={"description": None})

    assert response.status_code == 200
    assert response.json()["description"] is None


def test_update_missing_category(client):
    response = client.post("/categories/update/999", json={"name": "Ghost"})
    assert response.status_code == 404


def test_duplicate_name_conflicts(client, category):
    response = client.post("/categories/create", json={"name": "Drinks"})
    assert response.status_code == 409


def test_delete_category(client, category):
    response = client.post(f"/categories/delete/{category['id']}")

    assert response.status_code == 200
    assert response.json()["name"] == "Drinks"
    assert client.get(f"/categories/get/{category['id']}").status_code == 404


def test_delete_category_detaches_products(client, category, product):
    assert client.post(f"/categories/delete/{category['id']}").status_code == 200

    response = client.get(f"/products/{product['id']}")
    assert response.status_code == 200
    assert response.json()["category_id"] is None


def test_delete_missing_category(client):
    assert client.post("/categories/delete/999").status_code == 404
