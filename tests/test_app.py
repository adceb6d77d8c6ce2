import io

import pytest

from app import app


@pytest.fixture
def client(tmp_path):
    app.config.update(TESTING=True, DATA_DIR=str(tmp_path))
    with app.test_client() as client:
        yield client


def upload(client, route, data, filename):
    return client.post(
        route,
        data={"file": (io.BytesIO(data), filename)},
        content_type="multipart/form-data",
    )


TEXT = ("Huffman coding über alles ✓\n" * 40).encode("utf-8")


def test_home_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Compress File" in response.data


def test_compress_and_download(client, tmp_path):
    response = upload(client, "/compress_file", TEXT, "notes.txt")
    assert response.status_code == 200
    result = response.get_json()
    assert result["success"]
    assert result["compressed_filename"] == "notes.txt.huff"
    assert result["original_size"] == len(TEXT)
    assert result["compressed_size"] < len(TEXT)
    assert result["download_url"] == f"/download/{result['job']}/notes.txt.huff"

    download = client.get(result["download_url"])
    assert download.status_code == 200
    assert download.data == (tmp_path / result["job"] / "notes.txt.huff").read_bytes()


def test_same_filename_uploads_are_kept_apart(client):
    first = upload(client, "/compress_file", TEXT, "notes.txt").get_json()
    second = upload(client, "/compress_file", b"something else entirely", "notes.txt").get_json()
    assert first["job"] != second["job"]

    kept = client.get(first["download_url"]).data
    restored = upload(client, "/decompress_file", kept, "notes.txt.huff").get_json()
    assert client.get(restored["download_url"]).data == TEXT


def test_decompress_roundtrip(client):
    compressed = client.get(
        upload(client, "/compress_file", TEXT, "notes.txt").get_json()["download_url"]
    ).data

    response = upload(client, "/decompress_file", compressed, "notes.txt.huff")
    assert response.status_code == 200
    result = response.get_json()
    assert result["decompressed_file"] == "notes_decompressed.txt"
    assert client.get(result["download_url"]).data == TEXT


def test_binary_roundtrip(client):
    data = bytes(range(256)) * 4
    compressed = client.get(
        upload(client, "/compress_file", data, "blob.bin").get_json()["download_url"]
    ).data
    result = upload(client, "/decompress_file", compressed, "blob.bin.huff").get_json()
    assert client.get(result["download_url"]).data == data


def test_empty_upload(client):
    result = upload(client, "/compress_file", b"", "empty.txt").get_json()
    assert result["success"] and result["empty"]


def test_missing_file(client):
    response = client.post("/compress_file", data={}, content_type="multipart/form-data")
    assert response.status_code == 400


def test_unsupported_extension(client):
    response = upload(client, "/compress_file", b"MZ", "tool.exe")
    assert response.status_code == 400


def test_decompress_requires_huff(client):
    response = upload(client, "/decompress_file", b"abc", "notes.txt")
    assert response.status_code == 400


def test_decompress_corrupt(client):
    response = upload(client, "/decompress_file", b"\xff\xff\xff\xff", "notes.txt.huff")
    assert response.status_code == 422
    assert not response.get_json()["success"]


def test_invalid_utf8_text(client):
    response = upload(client, "/compress_file", b"\xff\xfe\xfd", "bad.txt")
    assert response.status_code == 422


def test_download_missing(client):
    assert client.get("/download/abc123/nothing.huff").status_code == 404


def test_download_name_is_sanitized(client):
    result = upload(client, "/compress_file", TEXT, "notes.txt").get_json()
    # Sanitizes to an empty name, which must not resolve to the job folder itself
    response = client.get(f"/download/{result['job']}/..")
    assert response.status_code == 404

    response = client.get(result["download_url"])
    assert "notes.txt.huff" in response.headers["Content-Disposition"]
