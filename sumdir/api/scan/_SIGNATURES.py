"""Ordered table of binary signatures (magic numbers).

Each row is ``(label, parts)`` where every ``(offset, magic)`` part must match
the file prefix. Rows are tried in order and the first match wins, so more
specific signatures precede the generic ones they overlap with.
"""

FALLBACK_MIMETYPE = "application/octet-stream"

SIGNATURES: tuple[tuple[str, tuple[tuple[int, bytes], ...]], ...] = (
    # images
    ("image/jpeg", ((0, b"\xff\xd8\xff"),)),
    ("image/png", ((0, b"\x89PNG\r\n\x1a\n"),)),
    ("image/gif", ((0, b"GIF87a"),)),
    ("image/gif", ((0, b"GIF89a"),)),
    ("image/webp", ((0, b"RIFF"), (8, b"WEBP"))),
    ("image/tiff", ((0, b"II*\x00"),)),
    ("image/tiff", ((0, b"MM\x00*"),)),
    ("image/vnd.adobe.photoshop", ((0, b"8BPS"),)),
    ("image/vnd.microsoft.icon", ((0, b"\x00\x00\x01\x00"),)),
    ("image/bmp", ((0, b"BM"),)),
    # documents
    ("application/pdf", ((0, b"%PDF"),)),
    ("application/rtf", ((0, b"{\\rtf"),)),
    ("application/x-ole-storage", ((0, b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"),)),
    ("application/postscript", ((0, b"%!"),)),
    # audio
    ("audio/mpeg", ((0, b"ID3"),)),
    ("audio/mpeg", ((0, b"\xff\xfb"),)),
    ("audio/mpeg", ((0, b"\xff\xf3"),)),
    ("audio/mpeg", ((0, b"\xff\xf2"),)),
    ("audio/x-flac", ((0, b"fLaC"),)),
    ("audio/ogg", ((0, b"OggS"),)),
    ("audio/x-wav", ((0, b"RIFF"), (8, b"WAVE"))),
    ("audio/midi", ((0, b"MThd"),)),
    ("audio/m4a", ((4, b"ftypM4A"),)),
    # video
    ("video/quicktime", ((4, b"ftypqt"),)),
    ("video/mp4", ((4, b"ftyp"),)),
    ("video/x-matroska", ((0, b"\x1a\x45\xdf\xa3"),)),
    ("video/x-msvideo", ((0, b"RIFF"), (8, b"AVI "))),
    ("video/x-flv", ((0, b"FLV\x01"),)),
    # archives
    ("application/zip", ((0, b"PK\x03\x04"),)),
    ("application/zip", ((0, b"PK\x05\x06"),)),
    ("application/zip", ((0, b"PK\x07\x08"),)),
    ("application/gzip", ((0, b"\x1f\x8b"),)),
    ("application/x-bzip2", ((0, b"BZh"),)),
    ("application/x-xz", ((0, b"\xfd7zXZ\x00"),)),
    ("application/x-7z-compressed", ((0, b"7z\xbc\xaf\x27\x1c"),)),
    ("application/vnd.rar", ((0, b"Rar!\x1a\x07"),)),
    ("application/zstd", ((0, b"\x28\xb5\x2f\xfd"),)),
    ("application/x-tar", ((257, b"ustar"),)),
    # executables
    ("application/x-executable", ((0, b"\x7fELF"),)),
    ("application/x-mach-binary", ((0, b"\xcf\xfa\xed\xfe"),)),
    ("application/x-mach-binary", ((0, b"\xce\xfa\xed\xfe"),)),
    ("application/x-mach-binary", ((0, b"\xfe\xed\xfa\xcf"),)),
    ("application/x-mach-binary", ((0, b"\xfe\xed\xfa\xce"),)),
    ("application/vnd.microsoft.portable-executable", ((0, b"MZ"),)),
    ("application/wasm", ((0, b"\x00asm"),)),
    # fonts
    ("font/woff", ((0, b"wOFF"),)),
    ("font/woff2", ((0, b"wOF2"),)),
    ("font/otf", ((0, b"OTTO"),)),
    ("font/ttf", ((0, b"\x00\x01\x00\x00\x00"),)),
    # databases
    ("application/vnd.sqlite3", ((0, b"SQLite format 3\x00"),)),
)
