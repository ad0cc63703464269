"""Endpoint tests for JSON files."""

import json

INVALID = "Contenido no es un JSON válido"


class TestJsonApi:
    def test_index_lists_files_with_valid_json_content(self, client, storage):
        storage.files.update(
            {
                "valid.json": json.dumps({"key": "value"}).encode(),
                "broken.json": b"{key: value}",
                "list.txt": b"[1, 2]",
                "file1.csv": b"header1,header2\nvalue1,value2",
            }
        )

        response = client.get("/json")

        assert response.status_code == 200
        assert response.json() == {
            "mensaje": "Operación exitosa",
            "contenido": ["valid.json", "list.txt"],
        }

    def test_store(self, client, storage):
        response = client.post(
            "/json", json={"filename": "data.json", "content": '{"k": 1}'}
        )

        assert response.status_code == 200
        assert response.json() == {"mensaje": "Fichero guardado exitosamente"}
        assert storage.files["data.json"] == b'{"k": 1}'

    def test_store_invalid_json(self, client, storage):
        response = client.post("/json", json={"filename": "data.json", "content": "{k:1}"})

        assert response.status_code == 415
        assert response.json() == {"mensaje": INVALID}
        assert "data.json" not in storage.files

    def test_store_deeply_nested_content_is_unsupported(self, client, storage):
        response = client.post(
            "/json", json={"filename": "deep.json", "content": "[" * 100000}
        )

        assert response.status_code == 415
        assert response.json() == {"mensaje": INVALID}
        assert "deep.json" not in storage.files

    def test_index_skips_deeply_nested_files(self, client, storage):
        storage.files.update({"deep.txt": b"[" * 100000, "valid.json": b"[]"})

        response = client.get("/json")

        assert response.status_code == 200
        assert response.json()["contenido"] == ["valid.json"]

    def test_show_deeply_nested_file(self, client, storage):
        storage.files["deep.json"] = b"[" * 100000

        response = client.get("/json/deep.json")

        assert response.status_code == 200
        assert response.json() == {"mensaje": "Operación exitosa", "contenido": None}

    def test_store_existing(self, client, storage):
        storage.files["data.json"] = b"{}"

        response = client.post("/json", json={"filename": "data.json", "content": "[]"})

        assert response.status_code == 409
        assert response.json() == {"mensaje": "El fichero ya existe"}

    def test_store_missing_content(self, client):
        response = client.post("/json", json={"filename": "data.json"})

        assert response.status_code == 422

    def test_show_returns_decoded_structure(self, client, storage):
        original = {"nombre": "Ana", "cursos": ["DAW", "DAM"], "activo": True}
        storage.files["alumno.json"] = json.dumps(original).encode()

        response = client.get("/json/alumno.json")

        assert response.status_code == 200
        assert response.json() == {"mensaje": "Operación exitosa", "contenido": original}

    def test_show_missing(self, client):
        response = client.get("/json/ghost.json")

        assert response.status_code == 404
        assert response.json() == {"mensaje": "El fichero no existe"}

    def test_update(self, client, storage):
        storage.files["data.json"] = b"{}"

        response = client.put("/json/data.json", json={"content": '{"k": 2}'})

        assert response.status_code == 200
        assert response.json() == {"mensaje": "Fichero actualizado exitosamente"}
        assert client.get("/json/data.json").json()["contenido"] == {"k": 2}

    def test_update_invalid_json(self, client, storage):
        storage.files["data.json"] = b"{}"

        response = client.put("/json/data.json", json={"content": "{"})

        assert response.status_code == 415
        assert storage.files["data.json"] == b"{}"

    def test_update_missing(self, client):
        response = client.put("/json/ghost.json", json={"content": "{"})

        assert response.status_code == 404

    def test_destroy(self, client, storage):
        storage.files["data.json"] = b"{}"

        assert client.delete("/json/data.json").json() == {
            "mensaje": "Fichero eliminado exitosamente"
        }
        assert client.delete("/json/data.json").status_code == 404
