# tests/test_ingredients.py


def test_create_and_get_ingredient(client, make_ingredient):
    sugar = make_ingredient("sugar")

    response = client.get(f"/ingredients/get/{sugar['id']}")
    assert response.status_code == 200
    assert response.json() == {"id": sugar["id"], "name": "sugar"}


def test_list_ingredients(client, make_ingredient):
    make_ingredient("sugar")
    make_ingredient("lemon")

    names = [i["name"] for i in client.get("/ingredients/all").json()]
    assert names == ["sugar", "lemon"]


def test_update_ingredient(client, make_ingredient):
    sugar = make_ingredient("sugar")

    response = client.put(f"/ingredients/update/{sugar['id']}", json={"name": "cane sugar"})
    assert response.status_code == 200
    assert response.json()["name"] == "cane sugar"


def test_update_to_existing_name_conflicts(client, make_ingredient):
    make_ingredient("sugar")
    lemon = make_ingredient("lemon")

    response = client.put(f"/ingredients/update/{lemon['id']}", json={"name": "sugar"})
    assert response.status_code == 409


def test_missing_ingredient(client):
    assert client.get("/ingredients/get/7").status_code == 404
    assert client.put("/ingredients/update/7", json={"name": "salt"}).status_code == 404
    assert client.delete("/ingredients/delete/7").status_code == 404


def test_delete_ingredient(client, make_ingredient):
    sugar = make_ingredient("sugar")

    response = client.delete(f"/ingredients/delete/{sugar['id']}")
    assert response.status_code == 200
    assert client.get(f"/ingredients/get/{sugar['id']}").status_code == 404


def test_delete_ingredient_drops_links(client, product, make_ingredient):
    sugar = make_ingredient("sugar")
    client.post("/products/ingredients", json={"product_id": product["id"], "ingredient_id": sugar["id"]})

    assert client.delete(f"/ingredients/delete/{sugar['id']}").status_code == 200

    response = client.get(f"/products/{product['id']}")
    assert response.status_code == 200
    assert response.json()["ingredients"] == []
    assert client.get("/products/ingredients").json() == []


def test_blank_name_rejected(client):
    assert client.post("/ingredients/create", json={"name": "   "}).status_code == 422
