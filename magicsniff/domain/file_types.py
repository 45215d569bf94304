#!/usr/bin/env python3
"""
Known file types and their display metadata.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from __future__ import annotations

from enum import Enum


class FileType(Enum):
    """File formats recognized by the rule table"""

    # Images
    TGA = "TGA"
    JPEG = "JPEG"
    PNG = "PNG"
    BMP = "BMP"
    GIF = "GIF"
    TIFF = "TIFF"

    # Archives
    ZIP = "ZIP"
    TAR = "TAR"  # empty tar files carry no magic, only archives with at least one member

    # Compression
    BZIP2 = "BZIP2"
    GZIP = "GZIP"

    # Documents
    PDF = "PDF"

    def extension(self) -> str:
        """Canonical filename extension, without the leading dot"""
        return FILE_TYPE_METADATA[self]["extension"]

    def description(self) -> str:
        return FILE_TYPE_METADATA[self]["description"]

    def category(self) -> str:
        return FILE_TYPE_METADATA[self]["category"]


FILE_TYPE_METADATA: dict[FileType, dict[str, str]] = {
    FileType.TGA: {
        "extension": "tga",
        "description": "Truevision TGA Image",
        "category": "Image",
    },
    FileType.JPEG: {
        "extension": "jpg",
        "description": "JPEG Image",
        "category": "Image",
    },
    FileType.PNG: {
        "extension": "png",
        "description": "PNG Image",
        "category": "Image",
    },
    FileType.BMP: {
        "extension": "bmp",
        "description": "Windows Bitmap Image",
        "category": "Image",
    },
    FileType.GIF: {
        "extension": "gif",
        "description": "GIF Image",
        "category": "Image",
    },
    FileType.TIFF: {
        "extension": "tif",
        "description": "TIFF Image",
        "category": "Image",
    },
    FileType.ZIP: {
        "extension": "zip",
        "description": "ZIP Archive",
        "category": "Archive",
    },
    FileType.TAR: {
        "extension": "tar",
        "description": "Tape Archive",
        "category": "Archive",
    },
    FileType.BZIP2: {
        "extension": "bz2",
        "description": "bzip2 Compressed Data",
        "category": "Compression",
    },
    FileType.GZIP: {
        "extension": "gz",
        "description": "gzip Compressed Data",
        "category": "Compression",
    },
    FileType.PDF: {
        "extension": "pdf",
        "description": "PDF Document",
        "category": "Document",
    },
}
