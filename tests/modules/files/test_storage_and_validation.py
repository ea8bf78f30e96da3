# -*- coding: utf-8 -*-
"""
tests/modules/files/test_storage_and_validation.py

Nombres de almacenamiento, contención en UPLOAD_DIR y validación de
uploads (código puro).
"""

import re

import pytest

from app.modules.files.enums import FileEntityType
from app.modules.files.facades.upload_validation import (
    REASON_EXTENSION,
    REASON_MIME,
    REASON_TOO_LARGE,
    normalize_content_type,
    validate_upload,
)
from app.modules.files.services.storage import (
    LocalBlobStorage,
    build_stored_filename,
    resolve_inside,
    sanitize_filename,
)
from app.modules.files.services.storage.safe_filename import MAX_FILENAME_LENGTH
from app.shared.errors import ValidationRejected


@pytest.mark.parametrize(
    "original,expected",
    [
        ("report.pdf", "report.pdf"),
        ("Propuesta final (v2).pdf", "Propuesta_final__v2_.pdf"),
        ("../../etc/passwd", ".._.._etc_passwd"),
        ("café.png", "caf_.png"),
        ("a\\b.txt", "a_b.txt"),
    ],
)
def test_sanitize_filename(original, expected):
    assert sanitize_filename(original) == expected


def test_stored_filename_is_prefixed_with_epoch_ms_and_token():
    assert build_stored_filename("my file.pdf", now_ms=1700000000123, token="ab12cd34") == (
        "1700000000123-ab12cd34-my_file.pdf"
    )
    assert build_stored_filename("", now_ms=1, token="00000000") == "1-00000000-file"
    assert re.fullmatch(r"1-[0-9a-f]{8}-a\.pdf", build_stored_filename("a.pdf", now_ms=1))


def test_same_name_in_same_millisecond_gets_distinct_names():
    names = {build_stored_filename("a.pdf", now_ms=1700000000000) for _ in range(50)}
    assert len(names) == 50


def test_stored_filename_is_capped_and_keeps_extension():
    name = build_stored_filename("x" * 400 + ".pdf", now_ms=1)
    assert len(name) == MAX_FILENAME_LENGTH
    assert name.endswith(".pdf")


def test_resolve_inside_accepts_plain_names(tmp_path):
    assert resolve_inside(tmp_path, "1-a.pdf") == (tmp_path / "1-a.pdf").resolve()


@pytest.mark.parametrize("name", ["", ".", "..", "../escape.txt", "sub/dir.txt", "/etc/passwd"])
def test_resolve_inside_rejects_escapes(tmp_path, name):
    with pytest.raises(ValidationRejected) as exc:
        resolve_inside(tmp_path, name)
    assert exc.value.reason == "invalid_filename"


async def test_local_blob_storage_roundtrip(tmp_path):
    blobs = LocalBlobStorage(tmp_path / "store")

    path = await blobs.store(b"data", "1-a.txt")
    assert await blobs.exists(path)

    await blobs.remove(path)
    assert not await blobs.exists(path)
    # Borrar dos veces no falla
    await blobs.remove(path)


async def test_local_blob_storage_never_overwrites(tmp_path):
    blobs = LocalBlobStorage(tmp_path / "store")
    path = await blobs.store(b"FIRST", "1-a.pdf")

    with pytest.raises(FileExistsError):
        await blobs.store(b"SECOND", "1-a.pdf")
    assert (tmp_path / "store" / "1-a.pdf").read_bytes() == b"FIRST"
    assert path == str((tmp_path / "store" / "1-a.pdf").resolve())


async def test_local_blob_storage_refuses_traversal(tmp_path):
    blobs = LocalBlobStorage(tmp_path / "store")
    with pytest.raises(ValidationRejected):
        await blobs.store(b"x", "../outside.txt")
    assert not (tmp_path / "outside.txt").exists()


# ---------------------------------------------------------------------------
# validate_upload
# ---------------------------------------------------------------------------

def test_accepts_allowed_pair():
    assert validate_upload("Scan.PDF", "application/pdf", 10) == ".pdf"


def test_content_type_parameters_are_ignored():
    assert normalize_content_type("Text/Plain; charset=utf-8") == "text/plain"
    assert validate_upload("notes.txt", "text/plain; charset=utf-8", 10) == ".txt"


@pytest.mark.parametrize(
    "filename,content_type,size,reason",
    [
        ("big.pdf", "application/pdf", 11, REASON_TOO_LARGE),
        ("tool.exe", "image/png", 1, REASON_EXTENSION),
        ("noext", "application/pdf", 1, REASON_EXTENSION),
        ("image.png", "application/x-msdownload", 1, REASON_MIME),
        ("image.png", None, 1, REASON_MIME),
    ],
)
def test_rejections(filename, content_type, size, reason):
    with pytest.raises(ValidationRejected) as exc:
        validate_upload(filename, content_type, size, max_bytes=10)
    assert exc.value.reason == reason


def test_size_at_limit_is_accepted():
    assert validate_upload("a.pdf", "application/pdf", 10, max_bytes=10) == ".pdf"


@pytest.mark.parametrize("raw,parsed", [("Project", FileEntityType.project), (" order ", FileEntityType.order),
                                        ("invoice", None), (None, None)])
def test_entity_type_parse(raw, parsed):
    assert FileEntityType.parse(raw) is parsed
