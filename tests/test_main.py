def test_read_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"app": "Bookkeeping API", "status": "running"}


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_collaborators_built_once_per_app(app):
    assert app.state.engine is app.state.session_factory.kw["bind"]
    assert app.state.invoice_renderer.font_path is None


def test_import_does_not_build_an_app():
    import backend.app.main as main

    assert not hasattr(main, "app")
    assert callable(main.create_app)
