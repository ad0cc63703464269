"""Endpoint tests for generic text files."""


class TestFilesApi:
    def test_list_files(self, client, storage):
        storage.files.update({"a.txt": b"a", "b.csv": b"b"})

        response = client.get("/files")

        assert response.status_code == 200
        assert response.json() == {
            "mensaje": "Listado de ficheros",
            "contenido": ["a.txt", "b.csv"],
        }

    def test_create_file(self, client, storage):
        response = client.post(
            "/files", json={"filename": "nuevo.txt", "content": "hola mundo"}
        )

        assert response.status_code == 200
        assert response.json() == {"mensaje": "Guardado con éxito"}
        assert storage.files["nuevo.txt"] == b"hola mundo"

    def test_create_existing_file_conflicts(self, client, storage):
        storage.files["nuevo.txt"] = b"previo"

        response = client.post(
            "/files", json={"filename": "nuevo.txt", "content": "otro"}
        )

        assert response.status_code == 409
        assert response.json() == {"mensaje": "El archivo ya existe"}
        assert storage.files["nuevo.txt"] == b"previo"

    def test_create_without_content_is_unprocessable(self, client, storage):
        response = client.post("/files", json={"filename": "nuevo.txt"})

        assert response.status_code == 422
        body = response.json()
        assert body["mensaje"] == "Parámetros de entrada no válidos"
        assert body["errores"]
        assert storage.files == {}

    def test_create_with_empty_filename_is_unprocessable(self, client):
        response = client.post("/files", json={"filename": "", "content": "x"})

        assert response.status_code == 422

    def test_create_with_non_string_content_is_unprocessable(self, client):
        response = client.post("/files", json={"filename": "n.txt", "content": 5})

        assert response.status_code == 422

    def test_create_with_empty_content_is_unprocessable(self, client, storage):
        response = client.post("/files", json={"filename": "n.txt", "content": ""})

        assert response.status_code == 422
        assert "n.txt" not in storage.files

    def test_update_with_empty_content_is_unprocessable(self, client, storage):
        storage.files["nota.txt"] = b"viejo"

        response = client.put("/files/nota.txt", json={"content": ""})

        assert response.status_code == 422
        assert storage.files["nota.txt"] == b"viejo"

    def test_read_file(self, client, storage):
        storage.files["nota.txt"] = "contenido ñ".encode("utf-8")

        response = client.get("/files/nota.txt")

        assert response.status_code == 200
        assert response.json() == {
            "mensaje": "Archivo leído con éxito",
            "contenido": "contenido ñ",
        }

    def test_read_missing_file(self, client):
        response = client.get("/files/ghost.txt")

        assert response.status_code == 404
        assert response.json() == {"mensaje": "Archivo no encontrado"}

    def test_update_file(self, client, storage):
        storage.files["nota.txt"] = b"viejo"

        response = client.put("/files/nota.txt", json={"content": "nuevo"})

        assert response.status_code == 200
        assert response.json() == {"mensaje": "Actualizado con éxito"}
        assert storage.files["nota.txt"] == b"nuevo"

    def test_update_missing_file(self, client, storage):
        response = client.put("/files/ghost.txt", json={"content": "x"})

        assert response.status_code == 404
        assert response.json() == {"mensaje": "El archivo no existe"}
        assert "ghost.txt" not in storage.files

    def test_update_without_content_is_unprocessable(self, client, storage):
        storage.files["nota.txt"] = b"viejo"

        response = client.put("/files/nota.txt", json={})

        assert response.status_code == 422
        assert storage.files["nota.txt"] == b"viejo"

    def test_delete_twice(self, client, storage):
        storage.files["nota.txt"] = b"x"

        first = client.delete("/files/nota.txt")
        second = client.delete("/files/nota.txt")

        assert first.status_code == 200
        assert first.json() == {"mensaje": "Eliminado con éxito"}
        assert second.status_code == 404
        assert second.json() == {"mensaje": "El archivo no existe"}

    def test_unknown_route_uses_mensaje(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert "mensaje" in response.json()
