"""Tests for operation-specific Rich renderers."""

from xkpass.domain.presets import PRESETS
from xkpass.output.renderers import render_quiet, render_result
from xkpass.services.result import ServiceError, ServiceResult
from xkpass.services.synthesize import PassphraseService

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


def _generated(preset: str | None = "Default") -> ServiceResult:
    return _ok(
        "generate",
        passwords=["!!12-apple-KIWI-mango-67!!", "::04.date.LEMON.fig.99::"],
        preset=preset,
        candidates=8,
        entropy_bits=21.4,
        config={"word_count": 3, "separators": "-."},
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = _err("generate", "DICTIONARY_UNAVAILABLE", "Cannot read dictionary x")
        output = render_result(result)
        assert "ERROR" in output
        assert "generate" in output
        assert "Cannot read dictionary x" in output
        assert "DICTIONARY_UNAVAILABLE" not in output

    def test_verbose_shows_code_and_detail(self) -> None:
        result = _err("generate", "DICTIONARY_UNAVAILABLE", "Bad", path="/tmp/w.txt")
        output = render_result(result, verbose=True)
        assert "DICTIONARY_UNAVAILABLE" in output
        assert "path" in output
        assert "/tmp/w.txt" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="generate"))
        assert "Unknown error" in output


# ── Generate renderer ────────────────────────────────────────────────


class TestGenerateRenderer:
    def test_lists_passwords_verbatim(self) -> None:
        output = render_result(_generated())
        assert "OK" in output
        assert "!!12-apple-KIWI-mango-67!!" in output.splitlines()
        assert "::04.date.LEMON.fig.99::" in output.splitlines()

    def test_summary_fields(self) -> None:
        output = render_result(_generated())
        assert "preset: Default" in output
        assert "21.4 bits from 8 candidate words" in output

    def test_custom_config_label(self) -> None:
        assert "preset: custom" in render_result(_generated(preset=None))

    def test_verbose_shows_config(self) -> None:
        output = render_result(_generated(), verbose=True)
        assert "word_count: 3" in output
        assert "separators: -." in output

    def test_verbose_names_whitespace_separator(self) -> None:
        result = _ok("generate", passwords=["a b"], preset=None, config={"separators": " "})
        assert "separators: <space>" in render_result(result, verbose=True)

    def test_non_verbose_hides_config(self) -> None:
        assert "word_count" not in render_result(_generated())

    def test_long_password_not_wrapped(self) -> None:
        password = "x" * 200
        output = render_result(_ok("generate", passwords=[password], preset="WiFi"))
        assert password in output.splitlines()


# ── Preset table ─────────────────────────────────────────────────────


class TestPresetRenderer:
    def test_lists_every_preset(self) -> None:
        output = render_result(PassphraseService().list_presets())
        for name in ("XKCD", "WiFi", "NTLM", "Web16", "Web32"):
            assert name in output
        assert "default preset" in output

    def test_marks_default(self) -> None:
        output = render_result(PassphraseService().list_presets())
        assert "*" in output

    def test_whitespace_separator_is_visible(self) -> None:
        result = _ok(
            "list_presets",
            default="Default",
            presets={"SecurityQ": PRESETS["SecurityQ"].model_dump(mode="json")},
        )
        output = render_result(result)
        assert "<space>" in output
        assert ".!?" in output

    def test_disabled_symbols(self) -> None:
        result = _ok(
            "list_presets",
            default="Default",
            presets={"XKCD": PRESETS["XKCD"].model_dump(mode="json")},
        )
        assert "(none)" in render_result(result)


# ── Quiet mode ───────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_generate_one_password_per_line(self) -> None:
        output = render_quiet(_generated())
        assert output.splitlines() == [
            "!!12-apple-KIWI-mango-67!!",
            "::04.date.LEMON.fig.99::",
        ]

    def test_preset_names(self) -> None:
        output = render_quiet(PassphraseService().list_presets())
        assert output.splitlines() == list(PRESETS)

    def test_error(self) -> None:
        result = _err("generate", "INSUFFICIENT_DICTIONARY", "Too few words")
        assert render_quiet(result) == "ERROR: generate: Too few words"
