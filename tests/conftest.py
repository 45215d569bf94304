"""Pytest configuration for shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from magicsniff.core.rule_table import PNG_IEND_CHUNK, PNG_SIGNATURE, TAR_MAGIC_OFFSET, TGA_FOOTER
from magicsniff.domain.file_types import FileType


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests crossing the filesystem or CLI")


def _tar_header(magic: bytes) -> bytes:
    header = bytearray(512)
    name = b"hello.txt"
    header[: len(name)] = name
    header[TAR_MAGIC_OFFSET : TAR_MAGIC_OFFSET + len(magic)] = magic
    return bytes(header) + b"hello world\n".ljust(512, b"\x00")


def build_samples() -> dict[FileType, bytes]:
    """Minimal buffers carrying each file type's signature"""
    return {
        FileType.TGA: b"\x00\x00\x02" + b"\x00" * 15 + b"\x10\x20\x30" * 4 + b"\x00" * 8 + TGA_FOOTER,
        FileType.JPEG: b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01" + b"\x00" * 32 + b"\xff\xd9",
        FileType.PNG: PNG_SIGNATURE
        + b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x02\x00\x00\x00\x90wS\xde"
        + PNG_IEND_CHUNK,
        FileType.BMP: b"BM" + (58).to_bytes(4, "little") + b"\x00" * 52,
        FileType.GIF: b"GIF89a\x01\x00\x01\x00\x80\x00\x00" + b"\x00" * 16 + b"\x3b",
        FileType.TIFF: b"II*\x00\x08\x00\x00\x00" + b"\x00" * 32,
        FileType.ZIP: b"PK\x03\x04\x14\x00" + b"\x00" * 24 + b"a.txt",
        FileType.TAR: _tar_header(b"ustar  \x00"),
        FileType.BZIP2: b"BZh91AY&SY" + b"\x00" * 16,
        FileType.GZIP: b"\x1f\x8b\x08\x00" + b"\x00" * 16,
        FileType.PDF: b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF\n",
    }


@pytest.fixture
def samples() -> dict[FileType, bytes]:
    return build_samples()


@pytest.fixture
def tar_header():
    return _tar_header


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the user's ~/.magicsniff configuration"""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    return home
