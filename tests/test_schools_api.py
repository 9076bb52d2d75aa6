def _distance(client, **params):
    return client.get("/schools/distance", query_string=params)


def test_list_schools(client):
    body = client.get("/schools/").get_json()
    assert "Central Office" in body["origins"]
    assert body["origins"] == sorted(body["origins"])
    assert "Adams Early Learning Center" in body["destinations"]
    assert "Adams Early Learning Center" not in body["origins"]


def test_distance_is_symmetric(client):
    forward = _distance(client, **{"from": "Lincoln Elementary", "to": "Roosevelt High"})
    backward = _distance(client, **{"from": "Roosevelt High", "to": "Lincoln Elementary"})
    assert forward.status_code == backward.status_code == 200
    assert forward.get_json()["miles"] == backward.get_json()["miles"] == 3


def test_distance_unknown_route(client):
    res = _distance(client, **{"from": "Central Office", "to": "Adams Early Learning Center"})
    assert res.status_code == 404
    assert res.get_json()["error"] == "unknown_route"


def test_distance_requires_both_schools(client):
    res = _distance(client, **{"from": "Central Office"})
    assert res.status_code == 400
