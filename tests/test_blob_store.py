import re

from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage

from apps.common.storage import BlobStore, new_blob_name

ULID_NAME = re.compile(r"^[0-9A-HJKMNP-TV-Z]{26}\.[a-z0-9]+$")


def test_blob_name_is_a_26_char_ulid_with_extension():
    name = new_blob_name("My Team Logo.PNG")
    assert ULID_NAME.match(name)
    assert name.endswith(".png")
    assert len(name.split(".")[0]) == 26


def test_blob_names_are_unique():
    names = [new_blob_name("a.jpg") for _ in range(50)]
    assert len(set(names)) == 50


def test_blob_name_without_extension_gets_default():
    assert new_blob_name("noextension").endswith(".bin")
    assert new_blob_name(None).endswith(".bin")


def test_put_saves_under_prefix(blob_store, image):
    path = blob_store.put(image("sample.jpg"), "logos")
    assert path.startswith("logos/")
    assert blob_store.exists(path)


def test_put_stores_the_uploaded_bytes(blob_store, image, read_blob):
    upload = image("sample.png")
    path = blob_store.put(upload, "/nested/prefix/")
    upload.seek(0)
    assert path.startswith("nested/prefix/")
    assert read_blob(path) == upload.read()


def test_put_never_reuses_a_path(blob_store, read_blob):
    first = blob_store.put(ContentFile(b"one", name="a.txt"), "docs")
    second = blob_store.put(ContentFile(b"two", name="a.txt"), "docs")
    assert first != second
    assert read_blob(first) == b"one"
    assert read_blob(second) == b"two"


def test_delete_accepts_single_path_and_lists(blob_store):
    paths = [blob_store.put(ContentFile(b"x", name="x.png"), "logos") for _ in range(3)]

    blob_store.delete(paths[0])
    assert not blob_store.exists(paths[0])

    blob_store.delete(paths[1:])
    assert not any(blob_store.exists(path) for path in paths)


def test_delete_missing_path_is_not_an_error(blob_store):
    assert blob_store.delete("logos/does-not-exist.png") == 1
    assert blob_store.delete([None, ""]) == 0
    assert blob_store.delete(None) == 0


def test_delete_continues_after_backend_error(tmp_path, monkeypatch, caplog):
    blob_store = BlobStore(storage=FileSystemStorage(location=tmp_path / "blobs"))
    good = blob_store.put(ContentFile(b"x", name="x.png"), "logos")
    real_delete = blob_store.storage.delete

    def flaky_delete(name):
        if name == "logos/broken.png":
            raise PermissionError("read-only")
        return real_delete(name)

    monkeypatch.setattr(blob_store.storage, "delete", flaky_delete)

    assert blob_store.delete(["logos/broken.png", good]) == 1
    assert not blob_store.exists(good)
    assert "Could not delete blob logos/broken.png" in caplog.text


def test_url_for_is_absolute(blob_store):
    assert blob_store.url_for("logos/01HXYZ.png") == "http://testserver/storage/logos/01HXYZ.png"


def test_url_for_keeps_path_of_base_url(media_root):
    store = BlobStore(base_url="https://example.com/roster/")
    assert store.url_for("logos/01HX.png") == "https://example.com/roster/storage/logos/01HX.png"


def test_url_for_uses_given_base_url(media_root):
    store = BlobStore(base_url="https://cdn.example.org")
    assert store.url_for("profile-images/a.png") == "https://cdn.example.org/storage/profile-images/a.png"
    assert store.url_for(None) is None


def test_list_returns_paths_under_prefix(blob_store):
    assert blob_store.list("logos") == []
    path = blob_store.put(ContentFile(b"x", name="x.png"), "logos")
    blob_store.put(ContentFile(b"x", name="x.png"), "profile-images")
    assert blob_store.list("logos") == [path]
