"""
Tests for the normalization pipeline and its language gate.
"""

import pytest

from snippet_toolkit.normalizer import (
    NormalizationError,
    NormalizerConfig,
    needs_normalization,
    normalize,
)


class TestNeedsNormalization:
    """Tests for needs_normalization()."""

    @pytest.mark.parametrize("language", ["typescript", "tsx", "TSX"])
    def test_needs_when_live_typed_language_then_true(self, language):
        assert needs_normalization(True, language)

    @pytest.mark.parametrize("language", ["javascript", "jsx", "python", None, ""])
    def test_needs_when_untyped_language_then_false(self, language):
        assert not needs_normalization(True, language)

    def test_needs_when_not_live_then_false(self):
        assert not needs_normalization(False, "typescript")

    def test_needs_when_custom_typed_languages_then_respected(self):
        config = NormalizerConfig(typed_languages=frozenset({"flow"}))
        assert needs_normalization(True, "flow", config)
        assert not needs_normalization(True, "tsx", config)


class TestNormalize:
    """Tests for normalize()."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "  padded  \n", "const x: number = 1;", "a\r\nb"])
    async def test_normalize_when_disabled_then_identity(self, text, transformer, formatter):
        result = await normalize(text, False, transformer=transformer, formatter=formatter)
        assert result == text
        assert transformer.calls == []
        assert formatter.calls == []

    @pytest.mark.asyncio
    async def test_normalize_when_enabled_then_transform_then_format(self, transformer, formatter):
        result = await normalize(
            'const x: number = "1";', True, transformer=transformer, formatter=formatter
        )
        assert result == "const x = '1';\n"
        assert transformer.calls == ['const x: number = "1";']
        assert formatter.calls == ['const x = "1";']

    @pytest.mark.asyncio
    async def test_normalize_when_transform_fails_then_raises_without_formatting(
        self, make_transformer, formatter
    ):
        transformer = make_transformer(fail_on="@@")
        with pytest.raises(NormalizationError) as exc_info:
            await normalize("@@ bad", True, transformer=transformer, formatter=formatter)
        assert exc_info.value.stage == "transform"
        assert formatter.calls == []

    @pytest.mark.asyncio
    async def test_normalize_when_default_backends_then_use_config_commands(self, python_command):
        config = NormalizerConfig(
            transform_command=python_command(
                "import sys; sys.stdout.write(sys.stdin.read().replace(': number', ''))"
            ),
            format_command=python_command(
                "import sys; sys.stdout.write(sys.stdin.read().strip() + '\\n')"
            ),
        )
        result = await normalize("let n: number = 3;  ", True, config=config)
        assert result == "let n = 3;\n"
