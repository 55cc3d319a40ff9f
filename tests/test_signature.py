from png_core.protocol import PNG_SIGNATURE
from png_verify.signature import channel_fingerprint, check_signature, eol_fingerprint


def test_valid_signature_has_no_findings():
    assert check_signature(PNG_SIGNATURE) == []


def test_wrong_name_is_not_png():
    findings = check_signature(b"\x89GIF\r\n\x1a\n")
    assert [f["code"] for f in findings] == ["E_NOT_PNG"]
    assert findings[0]["message"] == "not a PNG file"


def test_dos_to_unix_fingerprint():
    # CR stripped: signature shifts left by one byte
    magic = b"\x0aPNG\n\x1a\n\x00"
    findings = check_signature(magic)
    assert findings[0]["code"] == "E_SIG_CORRUPT"
    assert findings[0]["advisories"] == [
        " It seems to have suffered DOS->unix conversion",
        "  It was probably transmitted in text mode",
    ]


def test_eol_fingerprints():
    cases = {
        b"\r\x1a\n\x00": "DOS->Mac",
        b"\r\r\x1a\n": "unix->Mac",
        b"\n\n\x1a\n": "Mac-unix",
        b"\r\n\x1a\r": "unix->DOS",
        b"\r\r\n\x1a": "unix->DOS",
    }
    for trailer, label in cases.items():
        assert eol_fingerprint(b"\x89PNG" + trailer) == f" It seems to have suffered {label} conversion"


def test_unknown_trailer_is_generic_eol():
    assert eol_fingerprint(b"\x89PNGabcd") == " It seems to have suffered EOL conversion"


def test_good_trailer_bad_marker_only_reports_channel():
    magic = b"\x09PNG\r\n\x1a\n"
    assert eol_fingerprint(magic) is None
    assert channel_fingerprint(magic) == " It was probably transmitted through a 7bit channel"
    findings = check_signature(magic)
    assert findings[0]["code"] == "E_SIG_CORRUPT"
    assert findings[0]["advisories"] == [" It was probably transmitted through a 7bit channel"]


def test_good_marker_has_no_channel_advisory():
    assert channel_fingerprint(b"\x89PNG\n\x1a\n\x00") is None
