"""Tests for the versioned stable formats."""

import logging
import math
import struct

import pytest

from conftest import ALL_FORMATS
from pyspan import (
    DAY,
    INFINITY,
    NAN,
    ZERO,
    Duration,
    SpanDecodeError,
    UnknownFormatVersionError,
)
from pyspan.stable import LATEST, FormatVersion, V1Format, V2Format, V3Format, get_format
from span_values import PI, SPAN_EXAMPLES, random_finite_spans, span_id

FORMAT_PARAMS = [pytest.param(fmt, id=str(fmt.version)) for fmt in ALL_FORMATS]


class TestRegistry:
    @pytest.mark.parametrize(
        "version,cls",
        [
            pytest.param("v1", V1Format, id="v1"),
            pytest.param("v2", V2Format, id="v2"),
            pytest.param(FormatVersion.V3, V3Format, id="v3"),
        ],
    )
    def test_get_format(self, version, cls):
        assert isinstance(get_format(version), cls)

    def test_default_is_latest(self):
        assert LATEST == FormatVersion.V3
        assert isinstance(get_format(), V3Format)

    def test_unknown_version(self):
        with pytest.raises(UnknownFormatVersionError) as exc_info:
            get_format("v9")
        assert str(exc_info.value) == "unknown format version"
        assert "'v9'" in exc_info.value.internal()
        assert "v1, v2, v3" in exc_info.value.internal()

    def test_repr(self):
        assert repr(V3Format()) == "V3Format()"


class TestBinary:
    @pytest.mark.parametrize("fmt", FORMAT_PARAMS)
    def test_native_double(self, fmt):
        assert fmt.to_bytes(DAY) == struct.pack("=d", 86400.0)
        assert fmt.to_bytes(DAY) == DAY.to_bytes()

    @pytest.mark.parametrize("fmt", FORMAT_PARAMS)
    def test_round_trip_is_bit_exact(self, fmt):
        for span in SPAN_EXAMPLES + [NAN, Duration(-math.nan), Duration(-0.0), INFINITY]:
            assert fmt.of_bytes(fmt.to_bytes(span)).bit_equal(span)

    def test_identical_across_versions(self):
        for span in random_finite_spans(200):
            encodings = {fmt.to_bytes(span) for fmt in ALL_FORMATS}
            assert len(encodings) == 1

    def test_older_bytes_decode_in_newer_version(self, v1_format, v3_format):
        span = Duration.of_us(PI)
        assert v3_format.of_bytes(v1_format.to_bytes(span)).bit_equal(span)

    @pytest.mark.parametrize("fmt", FORMAT_PARAMS)
    @pytest.mark.parametrize("size", [0, 7, 9, 16])
    def test_bad_length(self, fmt, size):
        with pytest.raises(SpanDecodeError) as exc_info:
            fmt.of_bytes(b"\x00" * size)
        assert str(exc_info.value) == "invalid binary duration encoding"
        assert f"got {size}" in exc_info.value.internal()


class TestV1Text:
    @pytest.mark.parametrize(
        "span,expected",
        [
            pytest.param(ZERO, "0s", id="zero"),
            pytest.param(Duration.of_ns(1), "1e-06ms", id="ns"),
            pytest.param(Duration.of_us(1), "0.001ms", id="us"),
            pytest.param(Duration.of_ms(1), "1ms", id="ms"),
            pytest.param(Duration.of_ns(PI), "3.14159e-06ms", id="pi_ns"),
            pytest.param(Duration(1), "1s", id="s"),
            pytest.param(Duration.of_min(1), "1m", id="m"),
            pytest.param(Duration.of_hr(1), "1h", id="h"),
            pytest.param(DAY, "1d", id="d"),
            pytest.param(Duration.of_day(PI), "3.14159d", id="pi_d"),
            pytest.param(-Duration.of_hr(PI), "-3.14159h", id="negative"),
            pytest.param(INFINITY, "infd", id="inf"),
            pytest.param(NAN, "nand", id="nan"),
        ],
    )
    def test_to_text(self, v1_format, span, expected):
        assert v1_format.to_text(span) == expected

    def test_within_precision(self, v1_format):
        for span in random_finite_spans(1000):
            if abs(span.seconds) > 1e300:
                continue
            decoded = v1_format.of_text(v1_format.to_text(span))
            error = abs(decoded.seconds - span.seconds)
            assert error <= v1_format.precision(span).seconds, (span.seconds, error)

    def test_reads_non_finite(self, v1_format):
        assert v1_format.of_text("infd") == INFINITY
        assert v1_format.of_text("nand").is_nan()

    @pytest.mark.parametrize("text", ["", "1", "1us", "1d2h", "1_0s", "INFs"])
    def test_rejects(self, v1_format, text):
        with pytest.raises(SpanDecodeError) as exc_info:
            v1_format.of_text(text)
        assert str(exc_info.value) == "invalid text duration encoding"


class TestV2Text:
    @pytest.mark.parametrize(
        "span,expected",
        [
            pytest.param(ZERO, "0s", id="zero"),
            pytest.param(Duration.of_ns(1), "1ns", id="ns"),
            pytest.param(Duration.of_ns(PI), "3.1415926535897931ns", id="pi_ns"),
            pytest.param(Duration.of_us(PI), "3.1415926535897931us", id="pi_us"),
            pytest.param(Duration.of_ms(PI), "3.1415926535897931ms", id="pi_ms"),
            pytest.param(Duration(PI), "3.1415926535897931s", id="pi_s"),
            pytest.param(Duration.of_min(PI), "3.1415926535897927m", id="pi_m"),
            pytest.param(Duration.of_hr(PI), "3.1415926535897931h", id="pi_h"),
            pytest.param(Duration.of_day(PI), "3.1415926535897936d", id="pi_d"),
            pytest.param(-Duration.of_day(PI), "-3.1415926535897936d", id="negative_pi_d"),
            pytest.param(Duration.of_min(1.5), "1.5m", id="fractional_minutes"),
            pytest.param(-DAY, "-1d", id="negative"),
            pytest.param(INFINITY, "INFs", id="inf"),
            pytest.param(NAN, "NANs", id="nan"),
        ],
    )
    def test_to_text(self, v2_format, span, expected):
        assert v2_format.to_text(span) == expected

    def test_not_always_exact(self, v2_format):
        span = Duration.of_us(PI)
        decoded = v2_format.of_text(v2_format.to_text(span))
        assert not decoded.bit_equal(span)
        assert abs(decoded.seconds - span.seconds) <= v2_format.precision(span).seconds

    def test_within_precision(self, v2_format):
        for span in random_finite_spans(1000):
            decoded = v2_format.of_text(v2_format.to_text(span))
            error = abs(decoded.seconds - span.seconds)
            assert error <= v2_format.precision(span).seconds, (span.seconds, error)

    @pytest.mark.parametrize("text", ["", "1d2h", "1", "infd"])
    def test_rejects(self, v2_format, text):
        with pytest.raises(SpanDecodeError):
            v2_format.of_text(text)


class TestV3Text:
    @pytest.mark.parametrize("span", SPAN_EXAMPLES, ids=span_id)
    def test_exact(self, v3_format, span):
        assert v3_format.of_text(v3_format.to_text(span)).bit_equal(span)

    def test_exact_random(self, v3_format):
        for span in random_finite_spans(1000):
            assert v3_format.of_text(v3_format.to_text(span)).bit_equal(span)

    def test_matches_duration_to_string(self, v3_format):
        span = Duration.of_us(PI)
        assert v3_format.to_text(span) == span.to_string()
        assert v3_format.precision(span) == ZERO

    def test_reads_v1_like_v1(self, v1_format, v3_format):
        extras = [INFINITY, -INFINITY, NAN]
        for span in random_finite_spans(1000) + SPAN_EXAMPLES + extras:
            text = v1_format.to_text(span)
            assert v3_format.of_text(text).bit_equal(v1_format.of_text(text)), text

    def test_reads_v2_like_v2(self, v2_format, v3_format):
        extras = [INFINITY, -INFINITY, NAN]
        for span in random_finite_spans(1000) + SPAN_EXAMPLES + extras:
            text = v2_format.to_text(span)
            assert v3_format.of_text(text).bit_equal(v2_format.of_text(text)), text

    def test_rejects_garbage(self, v3_format):
        with pytest.raises(SpanDecodeError) as exc_info:
            v3_format.of_text("twelve")
        assert str(exc_info.value) == "invalid text duration encoding"
        assert "'twelve'" in exc_info.value.internal()

    def test_logs_legacy_fallback(self, v3_format, caplog):
        with caplog.at_level(logging.DEBUG, logger="pyspan.stable.v3"):
            assert v3_format.of_text("infd") == INFINITY
        assert "Decoded 'infd' with the v1 grammar" in caplog.text
