# tests/test_products.py


def _link(client, product_id: int, ingredient_id: int):
    return client.post(
        "/products/ingredients",
        json={"product_id": product_id, "ingredient_id": ingredient_id}
    )


def test_create_product_defaults_available(client, product, category):
    assert product["slug"] == "lemonade"
    assert product["price"] == "12.50"
    assert product["category_id"] == category["id"]
    assert product["is_available"] is True


def test_product_without_associations_has_empty_collections(client, product):
    response = client.get(f"/products/{product['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Lemonade"
    assert body["images"] == []
    assert body["ingredients"] == []


def test_product_aggregate_includes_images_and_ingredients(client, product, make_ingredient):
    sugar = make_ingredient("sugar")
    lemon = make_ingredient("lemon")
    assert _link(client, product["id"], sugar["id"]).status_code == 201
    assert _link(client, product["id"], lemon["id"]).status_code == 201

    client.post(
        "/products/images",
        json={"product_id": product["id"], "image_url": "https://cdn.example.com/b.png", "sort_order": 2}
    )
    client.post(
        "/products/images",
        json={"product_id": product["id"], "image_url": "https://cdn.example.com/a.png", "alt_text": "glass"}
    )

    body = client.get(f"/products/{product['id']}").json()

    assert [i["image_url"] for i in body["images"]] == [
        "https://cdn.example.com/a.png",
        "https://cdn.example.com/b.png"
    ]
    assert body["images"][0]["alt_text"] == "glass"
    assert sorted(i["name"] for i in body["ingredients"]) == ["lemon", "sugar"]


def test_list_products_groups_associations(client, product, make_ingredient):
    other = client.post("/products", json={"name": "Tea", "slug": "tea", "price": "3.00"}).json()
    sugar = make_ingredient("sugar")
    _link(client, product["id"], sugar["id"])
    client.post("/products/images", json={"product_id": other["id"], "image_url": "https://cdn.example.com/tea.png"})

    products = {p["slug"]: p for p in client.get("/products").json()}

    assert [i["name"] for i in products["lemonade"]["ingredients"]] == ["sugar"]
    assert products["lemonade"]["images"] == []
    assert products["tea"]["ingredients"] == []
    assert [i["image_url"] for i in products["tea"]["images"]] == ["https://cdn.example.com/tea.png"]


def test_get_missing_product(client):
    assert client.get("/products/999").status_code == 404


def test_create_product_with_unknown_category(client):
    response = client.post(
        "/products",
        json={"name": "Cake", "slug": "cake", "price": "5.00", "category_id": 404}
    )
    assert response.status_code == 404


def test_duplicate_slug_conflicts(client, product):
    response = client.post("/products", json={"name": "Other", "slug": "lemonade", "price": "1.00"})
    assert response.status_code == 409


def test_negative_price_rejected(client):
    response = client.post("/products", json={"name": "Cake", "slug": "cake", "price": "-1.00"})
    assert response.status_code == 422


def test_update_product_merges_fields(client, product):
    client.put(f"/products/{product['id']}", json={"is_available": False})

    response = client.put(f"/products/{product['id']}", json={"price": "14.00", "is_available": False})

    assert response.status_code == 200
    body = response.json()
    assert body["price"] == "14.00"
    assert body["name"] == "Lemonade"
    assert body["description"] == "Fresh lemonade"
    assert body["is_available"] is False


def test_update_without_availability_marks_available(client, product):
    client.put(f"/products/{product['id']}", json={"is_available": False})

    response = client.put(f"/products/{product['id']}", json={"name": "Pink lemonade"})

    assert response.json()["is_available"] is True


def test_update_missing_product(client):
    assert client.put("/products/999", json={"name": "Ghost"}).status_code == 404


def test_delete_product(client, product):
    response = client.delete(f"/products/{product['id']}")

    assert response.status_code == 200
    assert response.json()["slug"] == "lemonade"
    assert client.get(f"/products/{product['id']}").status_code == 404
    assert client.delete(f"/products/{product['id']}").status_code == 404


def test_delete_product_removes_images_and_links(client, product, make_ingredient):
    sugar = make_ingredient("sugar")
    _link(client, product["id"], sugar["id"])
    client.post("/products/images", json={"product_id": product["id"], "image_url": "https://cdn.example.com/a.png"})

    assert client.delete(f"/products/{product['id']}").status_code == 200

    assert client.get("/products/images").json() == []
    assert client.get("/products/ingredients").json() == []
    assert client.get(f"/ingredients/get/{sugar['id']}").status_code == 200


def test_image_crud(client, product):
    created = client.post(
        "/products/images",
        json={"product_id": product["id"], "image_url": "https://cdn.example.com/a.png"}
    )
    assert created.status_code == 201
    image = created.json()
    assert image["sort_order"] == 0

    updated = client.put(f"/products/images/{image['id']}", json={"alt_text": "front", "sort_order": 3})
    assert updated.json()["alt_text"] == "front"
    assert updated.json()["image_url"] == "https://cdn.example.com/a.png"

    assert client.get(f"/products/images/{image['id']}").json()["sort_order"] == 3
    assert len(client.get("/products/images").json()) == 1
    assert len(client.get(f"/products/images/product/{product['id']}").json()) == 1

    assert client.delete(f"/products/images/{image['id']}").status_code == 200
    assert client.get(f"/products/images/{image['id']}").status_code == 404


def test_missing_image(client):
    assert client.put("/products/images/999", json={"alt_text": "front"}).status_code == 404
    assert client.delete("/products/images/999").status_code == 404


def test_image_for_missing_product(client):
    response = client.post("/products/images", json={"product_id": 999, "image_url": "https://x/y.png"})
    assert response.status_code == 404
    assert client.get("/products/images/product/999").status_code == 404


def test_delete_link_removes_only_that_pair(client, product, make_ingredient):
    sugar = make_ingredient("sugar")
    lemon = make_ingredient("lemon")
    _link(client, product["id"], sugar["id"])
    _link(client, product["id"], lemon["id"])

    response = client.delete(f"/products/ingredients/{product['id']}/{sugar['id']}")
    assert response.status_code == 200

    links = client.get("/products/ingredients").json()
    assert links == [{"product_id": product["id"], "ingredient_id": lemon["id"]}]
    names = [i["name"] for i in client.get(f"/products/{product['id']}").json()["ingredients"]]
    assert names == ["lemon"]
    assert client.get(f"/products/ingredients/{product['id']}/{sugar['id']}").status_code == 404


def test_duplicate_link_conflicts(client, product, make_ingredient):
    sugar = make_ingredient("sugar")
    _link(client, product["id"], sugar["id"])

    assert _link(client, product["id"], sugar["id"]).status_code == 409


def test_link_to_missing_targets(client, product, make_ingredient):
    sugar = make_ingredient("sugar")

    assert _link(client, product["id"], 999).status_code == 404
    assert _link(client, 999, sugar["id"]).status_code == 404


def test_update_link_moves_pair(client, product, make_ingredient):
    sugar = make_ingredient("sugar")
    honey = make_ingredient("honey")
    _link(client, product["id"], sugar["id"])

    response = client.put(
        f"/products/ingredients/{product['id']}/{sugar['id']}",
        json={"product_id": product["id"], "ingredient_id": honey["id"]}
    )

    assert response.status_code == 200
    assert response.json() == {"product_id": product["id"], "ingredient_id": honey["id"]}
    assert client.get(f"/products/ingredients/{product['id']}/{honey['id']}").status_code == 200
    assert client.get(f"/products/ingredients/{product['id']}/{sugar['id']}").status_code == 404


def test_update_link_to_missing_targets(client, product, make_ingredient):
    sugar = make_ingredient("sugar")
    _link(client, product["id"], sugar["id"])
    url = f"/products/ingredients/{product['id']}/{sugar['id']}"

    assert client.put(url, json={"product_id": product["id"], "ingredient_id": 999}).status_code == 404
    assert client.put(url, json={"product_id": 999, "ingredient_id": sugar["id"]}).status_code == 404
    assert client.get(url).status_code == 200


def test_update_link_onto_existing_pair_conflicts(client, product, make_ingredient):
    sugar = make_ingredient("sugar")
    honey = make_ingredient("honey")
    _link(client, product["id"], sugar["id"])
    _link(client, product["id"], honey["id"])

    response = client.put(
        f"/products/ingredients/{product['id']}/{sugar['id']}",
        json={"product_id": product["id"], "ingredient_id": honey["id"]}
    )

    assert response.status_code == 409
    assert len(client.get("/products/ingredients").json()) == 2


def test_update_missing_link(client, product, make_ingredient):
    sugar = make_ingredient("sugar")

    response = client.put(
        f"/products/ingredients/{product['id']}/{sugar['id']}",
        json={"product_id": product["id"], "ingredient_id": sugar["id"]}
    )

    assert response.status_code == 404


def test_missing_link(client):
    assert client.delete("/products/ingredients/1/1").status_code == 404
