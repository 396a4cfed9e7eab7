def test_root_returns_hello_world(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello World!"
    assert response.headers["content-type"].startswith("text/plain")


def test_hello_route(client):
    response = client.get("/hello")
    assert response.status_code == 200
    assert response.text == "Hello from /hello Route"
