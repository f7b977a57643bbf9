"""Encoding detection and conversion to and from the canonical UTF-8 text."""

import codecs
import subprocess
from dataclasses import dataclass
from pathlib import Path

import chardet
import structlog

from srtkit.constants import CANONICAL_ENCODING
from srtkit.errors import EncodingUndetectableError
from srtkit.utils.config import Settings, get_settings

logger = structlog.get_logger()

# Longer signatures first: UTF-32LE starts with the UTF-16LE mark
BOM_SIGNATURES: tuple[tuple[str, bytes], ...] = (
    ("UTF-32BE", codecs.BOM_UTF32_BE),
    ("UTF-32LE", codecs.BOM_UTF32_LE),
    ("UTF-8", codecs.BOM_UTF8),
    ("UTF-16BE", codecs.BOM_UTF16_BE),
    ("UTF-16LE", codecs.BOM_UTF16_LE),
)

_BOM_BY_CODEC: dict[str, bytes] = {
    "utf-8": codecs.BOM_UTF8,
    "utf-16-be": codecs.BOM_UTF16_BE,
    "utf-16-le": codecs.BOM_UTF16_LE,
    "utf-32-be": codecs.BOM_UTF32_BE,
    "utf-32-le": codecs.BOM_UTF32_LE,
}

# Windows-1252 characters for the 0x80-0x9F range, where it differs from
# ISO-8859-1. 0x81, 0x8D, 0x8F, 0x90 and 0x9D are undefined and kept as is.
CP1252_HIGH_BYTES: dict[int, str] = {
    0x80: "€",  # euro sign
    0x82: "‚",  # single low-9 quotation mark
    0x83: "ƒ",  # latin small letter f with hook
    0x84: "„",  # double low-9 quotation mark
    0x85: "…",  # horizontal ellipsis
    0x86: "†",  # dagger
    0x87: "‡",  # double dagger
    0x88: "ˆ",  # modifier letter circumflex accent
    0x89: "‰",  # per mille sign
    0x8A: "Š",  # latin capital letter s with caron
    0x8B: "‹",  # single left-pointing angle quotation mark
    0x8C: "Œ",  # latin capital ligature oe
    0x8E: "Ž",  # latin capital letter z with caron
    0x91: "‘",  # left single quotation mark
    0x92: "’",  # right single quotation mark
    0x93: "“",  # left double quotation mark
    0x94: "”",  # right double quotation mark
    0x95: "•",  # bullet
    0x96: "–",  # en dash
    0x97: "—",  # em dash
    0x98: "˜",  # small tilde
    0x99: "™",  # trade mark sign
    0x9A: "š",  # latin small letter s with caron
    0x9B: "›",  # single right-pointing angle quotation mark
    0x9C: "œ",  # latin small ligature oe
    0x9E: "ž",  # latin small letter z with caron
    0x9F: "Ÿ",  # latin capital letter y with diaeresis
}

_LATIN_LABELS = frozenset(
    {
        "windows-1252",
        "cp1252",
        "iso-8859-1",
        "iso8859-1",
        "latin-1",
        "latin1",
        "iso-8859-15",
        "iso8859-15",
    }
)


@dataclass(frozen=True)
class DecodedText:
    """Result of decoding raw subtitle bytes."""

    text: str
    encoding: str
    has_bom: bool


def detect_bom(data: bytes) -> str | None:
    """Return the encoding announced by a byte-order mark, if any."""
    for encoding, signature in BOM_SIGNATURES:
        if data.startswith(signature):
            return encoding
    return None


def cp1252_to_text(data: bytes) -> str:
    """Decode Windows-1252 bytes, tolerating bytes the codec leaves undefined."""
    return data.decode("latin-1").translate(CP1252_HIGH_BYTES)


def _is_latin_label(label: str) -> bool:
    label = label.strip().lower()
    return label.startswith("unknown") or label in _LATIN_LABELS


def _cp1252_undefined_bytes(error: UnicodeEncodeError) -> tuple[bytes | str, int]:
    # U+0080-U+009F come from bytes cp1252 leaves undefined; write them back as is
    chunk = error.object[error.start : error.end]
    if all(0x80 <= ord(char) <= 0x9F for char in chunk):
        return chunk.encode("latin-1"), error.end
    return "?" * len(chunk), error.end


codecs.register_error("srtkit-cp1252", _cp1252_undefined_bytes)


def _codec_name(encoding: str) -> str:
    name = codecs.lookup(encoding).name
    # "utf-8-sig" is handled through has_bom
    return "utf-8" if name == "utf-8-sig" else name


def decode_to_canonical(
    data: bytes,
    label: str,
    *,
    default_encoding: str = "Windows-1252",
) -> DecodedText:
    """Convert raw bytes into text.

    Args:
        data: Raw subtitle bytes
        label: Declared or detected encoding label ("unknown" is accepted)
        default_encoding: Encoding recorded when the label is Latin or unknown

    Returns:
        Decoded text, the encoding to use when saving, and whether a BOM
        was present

    Raises:
        EncodingUndetectableError: If the label names no known codec or the
            bytes cannot be decoded with it
    """
    if _is_latin_label(label):
        return DecodedText(
            text=cp1252_to_text(data),
            encoding=default_encoding,
            has_bom=False,
        )

    has_bom = label.strip().lower().startswith("utf") and detect_bom(data) is not None

    try:
        text = data.decode(_codec_name(label))
    except LookupError as e:
        raise EncodingUndetectableError(
            f"Unsupported encoding '{label}'", detail=str(e)
        ) from e
    except UnicodeDecodeError as e:
        raise EncodingUndetectableError(
            f"Content is not valid {label}", detail=str(e)
        ) from e

    if text.startswith("\ufeff"):
        text = text[1:]

    encoding = label
    if _codec_name(label) == "utf-8":
        encoding = CANONICAL_ENCODING

    return DecodedText(text=text, encoding=encoding, has_bom=has_bom)


def encode_from_canonical(text: str, encoding: str, has_bom: bool) -> bytes:
    """Convert text back into bytes for writing.

    Args:
        text: Serialized subtitle text
        encoding: Target encoding
        has_bom: Prepend the target's byte-order mark if it is missing

    Returns:
        Encoded bytes

    Raises:
        EncodingUndetectableError: If the encoding names no known codec
    """
    try:
        codec = _codec_name(encoding)
    except LookupError as e:
        raise EncodingUndetectableError(
            f"Unsupported encoding '{encoding}'", detail=str(e)
        ) from e

    if codec == "utf-8":
        data = text.encode("utf-8")
    elif codec == "cp1252":
        data = text.encode(codec, errors="srtkit-cp1252")
    else:
        data = text.encode(codec, errors="replace")

    bom = _BOM_BY_CODEC.get(codec)
    if has_bom and bom and detect_bom(data) is None:
        data = bom + data
    return data


def _detect_with_file(path: Path, settings: Settings) -> str:
    cmd = [settings.file_command, "--brief", "--mime-encoding", str(path)]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=True)
    except (FileNotFoundError, subprocess.CalledProcessError) as e:
        raise EncodingUndetectableError(
            f"Unable to detect file encoding of {path}", detail=str(e)
        ) from e

    # Some builds ignore --brief; keep what follows "charset=" or ": "
    output = result.stdout.strip()
    for marker in ("charset=", ": "):
        if marker in output:
            output = output.rsplit(marker, 1)[1]
    return output.strip()


def _detect_with_chardet(path: Path) -> str:
    result = chardet.detect(path.read_bytes())
    return result.get("encoding") or "unknown"


def detect_encoding(path: Path, settings: Settings | None = None) -> str:
    """Guess the encoding label of a file.

    Args:
        path: File to inspect
        settings: Settings selecting the detector; defaults to get_settings()

    Returns:
        Best-effort encoding label; "unknown" is a valid result

    Raises:
        EncodingUndetectableError: If the detector fails or returns no label
    """
    settings = settings or get_settings()

    if settings.charset_detector == "chardet":
        label = _detect_with_chardet(path)
    else:
        label = _detect_with_file(path, settings)

    if not label:
        raise EncodingUndetectableError(f"Unable to detect file encoding of {path}")

    logger.debug(
        "encoding_detected",
        path=str(path),
        detector=settings.charset_detector,
        label=label,
    )
    return label
