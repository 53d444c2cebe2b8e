from conftest import add_booking


def _ids(resp):
    return [p["id"] for p in resp.get_json()["properties"]]


def test_list_sorted_by_rating_by_default(client, villa, cabin):
    resp = client.get("/api/properties")

    assert resp.status_code == 200
    assert _ids(resp) == [villa, cabin]


def test_list_sorted_by_price(client, villa, cabin):
    assert _ids(client.get("/api/properties?sort=price")) == [cabin, villa]


def test_property_shape(client, villa):
    prop = client.get(f"/api/properties/{villa}").get_json()["property"]

    assert prop["title"] == "Luxury Ocean View Villa"
    assert prop["location"]["city"] == "St Ives"
    assert prop["location"]["postcode"] == "TR26 1LP"
    assert prop["capacity"] == {"guests": 8, "bedrooms": 4, "bathrooms": 3, "beds": 4}
    assert prop["nightly_price"] == 850.0
    assert prop["amenities"] == ["WiFi", "Pool", "Parking"]


def test_unknown_property_is_not_found(client):
    resp = client.get("/api/properties/missing")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Property not found"}


def test_filter_by_location_matches_region_case_insensitively(client, villa, cabin):
    assert _ids(client.get("/api/properties?location=scotland")) == [cabin]
    assert _ids(client.get("/api/properties?location=cornwall")) == [villa]
    assert _ids(client.get("/api/properties?location=united")) == [villa, cabin]


def test_filter_by_guests_and_price(client, villa, cabin):
    assert _ids(client.get("/api/properties?guests=7")) == [villa]
    assert _ids(client.get("/api/properties?max_price=300")) == [cabin]
    assert _ids(client.get("/api/properties?min_price=300&max_price=900")) == [villa]


def test_filter_by_type_amenities_and_featured(client, villa, cabin):
    assert _ids(client.get("/api/properties?property_type=cabin&property_type=loft")) == [cabin]
    assert _ids(client.get("/api/properties?amenities=wifi&amenities=hot%20tub")) == [cabin]
    assert _ids(client.get("/api/properties?featured=true")) == [villa]


def test_bad_filters_are_rejected(client, villa):
    assert client.get("/api/properties?guests=many").status_code == 400
    assert client.get("/api/properties?max_price=cheap").status_code == 400
    assert client.get("/api/properties?sort=distance").status_code == 400
    assert client.get("/api/properties?property_type=castle").status_code == 400


def test_availability_lists_confirmed_ranges_only(client, app, villa):
    add_booking(app, villa, "2026-08-01", "2026-08-05", status="confirmed")
    add_booking(app, villa, "2026-07-01", "2026-07-03", status="confirmed")
    add_booking(app, villa, "2026-09-01", "2026-09-03", status="pending")

    resp = client.get(f"/api/properties/{villa}/availability")

    assert resp.status_code == 200
    assert resp.get_json() == {"unavailable": [
        {"start_date": "2026-07-01", "end_date": "2026-07-03"},
        {"start_date": "2026-08-01", "end_date": "2026-08-05"},
    ]}


def test_quote(client, cabin):
    resp = client.post(f"/api/properties/{cabin}/quote", json={
        "start_date": "2026-07-01", "end_date": "2026-07-03", "guest_count": 2,
    })

    assert resp.status_code == 200
    assert resp.get_json()["pricing"] == {
        "base_price": 275.0,
        "nights": 2,
        "subtotal": 550.0,
        "cleaning_fee": 100.0,
        "service_fee": 27.5,
        "taxes": 55.0,
        "total": 732.5,
        "currency": "GBP",
    }


def test_quote_rejects_bad_input(client, cabin):
    url = f"/api/properties/{cabin}/quote"
    assert client.post(url, json={"start_date": "2026-07-01"}).status_code == 400
    assert client.post(url, json={"start_date": "2026-07-03", "end_date": "2026-07-01"}).status_code == 400
    assert client.post(url, json={
        "start_date": "2026-07-01", "end_date": "2026-07-03", "guest_count": 7,
    }).status_code == 400
    assert client.post("/api/properties/missing/quote", json={}).status_code == 404
