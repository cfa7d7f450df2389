from __future__ import annotations

from session_proxy import PressSessionProxy


def test_step_and_epoch_accessors():
    backing: dict = {}
    proxy = PressSessionProxy(backing)

    assert proxy.step == 0
    proxy.step = 3
    assert backing["step"] == 3

    assert proxy.epoch == 0
    assert proxy.bump_epoch() == 1
    assert backing["session_epoch"] == 1


def test_upload_accessors():
    proxy = PressSessionProxy({"file_content": "Bio", "uploaded_images": [object(), object()]})
    assert proxy.file_content == "Bio"
    assert proxy.image_count == 2
    assert proxy.upload_error is None

    proxy.upload_error = "Bestand kon niet gelezen worden"
    assert proxy.upload_error == "Bestand kon niet gelezen worden"


def test_suggestions_are_stored_per_field():
    backing: dict = {"suggestions": {"what": "1. Iets"}}
    proxy = PressSessionProxy(backing)

    proxy.store_suggestion("who", "1. DJ X")

    assert proxy.suggestion_for("what") == "1. Iets"
    assert proxy.suggestion_for("who") == "1. DJ X"
    assert proxy.suggestion_for("when") == ""
    assert backing["suggestions"] == {"what": "1. Iets", "who": "1. DJ X"}
