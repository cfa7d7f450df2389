from __future__ import annotations

import base64
from types import SimpleNamespace

import file_ingestion
import session_state


def _upload(name: str, mime: str | None, payload: bytes, file_id: str | None = None):
    return SimpleNamespace(name=name, type=mime, file_id=file_id, getvalue=lambda: payload)


def _session() -> dict:
    state: dict = {}
    session_state.ensure_state(state)
    return state


def test_image_upload_is_appended_and_text_untouched():
    state = _session()
    state["file_content"] = "Bestaande bio"

    upload = file_ingestion.ingest_file(_upload("poster.png", "image/png", b"\x89PNG"), state)

    assert upload is not None and upload.is_image
    assert state["file_content"] == "Bestaande bio"
    assert len(state["uploaded_images"]) == 1
    image = state["uploaded_images"][0]
    assert image.mime_type == "image/png"
    assert base64.b64decode(image.data) == b"\x89PNG"


def test_text_upload_replaces_previous_text_and_keeps_images():
    state = _session()
    file_ingestion.ingest_file(_upload("cover.jpg", "image/jpeg", b"jpeg-bytes"), state)
    file_ingestion.ingest_file(_upload("bio.txt", "text/plain", "Eerste versie".encode()), state)
    file_ingestion.ingest_file(_upload("bio2.md", "text/markdown", "Tweede versie".encode()), state)

    assert state["file_content"] == "Tweede versie"
    assert len(state["uploaded_images"]) == 1


def test_multiple_images_accumulate_in_order():
    state = _session()
    file_ingestion.ingest_file(_upload("a.png", "image/png", b"a"), state)
    file_ingestion.ingest_file(_upload("b.webp", "image/webp", b"b"), state)

    assert [image.mime_type for image in state["uploaded_images"]] == ["image/png", "image/webp"]


def test_same_upload_on_rerun_is_ingested_once():
    state = _session()
    upload = _upload("a.png", "image/png", b"same")

    assert file_ingestion.ingest_file(upload, state) is not None
    assert file_ingestion.ingest_file(upload, state) is None
    assert len(state["uploaded_images"]) == 1


def test_classification_uses_declared_type_not_extension():
    upload = file_ingestion.read_upload("notes.png", "text/plain", b"gewone tekst")
    assert upload.is_image is False
    assert upload.text == "gewone tekst"


def test_text_decoding_strips_bom_and_replaces_invalid_bytes():
    upload = file_ingestion.read_upload("bio.txt", "text/plain", "\ufeffCafé".encode("utf-8") + b"\xff")
    assert upload.text.startswith("Café")
    assert "\ufffd" in upload.text


def test_missing_mime_type_is_read_as_text():
    upload = file_ingestion.read_upload("data.csv", None, b"a,b\n1,2")
    assert upload.text == "a,b\n1,2"
    assert upload.mime_type == ""


def test_fingerprint_depends_on_name_and_payload():
    assert file_ingestion.upload_fingerprint("a", b"x") == file_ingestion.upload_fingerprint("a", b"x")
    assert file_ingestion.upload_fingerprint("a", b"x") != file_ingestion.upload_fingerprint("b", b"x")
    assert file_ingestion.upload_fingerprint("a", b"x") != file_ingestion.upload_fingerprint("a", b"y")


def test_reuploading_an_earlier_text_file_restores_its_content():
    state = _session()
    file_ingestion.ingest_file(_upload("bio.txt", "text/plain", b"A"), state)
    file_ingestion.ingest_file(_upload("bio2.txt", "text/plain", b"B"), state)
    file_ingestion.ingest_file(_upload("bio.txt", "text/plain", b"A"), state)

    assert state["file_content"] == "A"


def test_same_image_uploaded_twice_is_appended_twice():
    state = _session()
    file_ingestion.ingest_file(_upload("a.png", "image/png", b"same", file_id="upload-1"), state)
    file_ingestion.ingest_file(_upload("a.png", "image/png", b"same", file_id="upload-2"), state)

    assert len(state["uploaded_images"]) == 2


def test_widget_value_handed_back_on_rerun_is_skipped():
    state = _session()
    upload = _upload("a.png", "image/png", b"same", file_id="upload-1")

    assert file_ingestion.ingest_file(upload, state) is not None
    assert file_ingestion.ingest_file(upload, state) is None
    assert len(state["uploaded_images"]) == 1


def test_upload_event_id_prefers_file_id():
    with_id = _upload("a.png", "image/png", b"x", file_id="abc")
    without_id = _upload("a.png", "image/png", b"x")

    assert file_ingestion.upload_event_id(with_id, b"x") == "id:abc"
    assert file_ingestion.upload_event_id(without_id, b"x") == "sha256:" + file_ingestion.upload_fingerprint("a.png", b"x")
