"""Passphrase synthesis: engine entry point and PassphraseService.

Pipeline: RESOLVE → LOAD → FILTER → SAMPLE → CASE → ASSEMBLE

Resolution, loading and filtering happen once per invocation
(:func:`plan_synthesis`); sampling onwards runs once per password
(:meth:`SynthesisPlan.draw`).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from xkpass.domain.assembly import assemble, draw_fillers
from xkpass.domain.casing import apply_case
from xkpass.domain.entropy import estimate_entropy
from xkpass.domain.errors import InvalidConfiguration, PassphraseError
from xkpass.domain.models import CustomMode, Mode, PassphraseConfig, PresetMode, make_config
from xkpass.domain.presets import DEFAULT_PRESET, PRESETS, canonical_preset_name, resolve_mode
from xkpass.domain.randomness import RandomSource, SecureRandom
from xkpass.domain.words import filter_words, sample_words
from xkpass.infrastructure.dictionary import load_words
from xkpass.services.base import BaseService
from xkpass.services.result import ServiceResult

logger = logging.getLogger(__name__)

# xkpasswd.net's minimum for entropy seen by an attacker who knows the config.
MIN_RECOMMENDED_ENTROPY = 52.0


@dataclass(frozen=True)
class SynthesisPlan:
    """A resolved configuration and its filtered candidate words."""

    config: PassphraseConfig
    candidates: tuple[str, ...]
    preset: str | None = None

    @property
    def entropy_bits(self) -> float:
        return estimate_entropy(self.config, len(self.candidates))

    def draw(self, random: RandomSource) -> str:
        """Synthesize one password. Random values are consumed in pipeline order."""
        sampled = sample_words(list(self.candidates), self.config.word_count, random)
        cased = apply_case(sampled, self.config.case, random)
        fillers = draw_fillers(self.config, random)
        return assemble(cased, self.config, fillers, random)


@dataclass(frozen=True)
class Passphrase:
    """A synthesized password with the configuration that produced it."""

    password: str
    config: PassphraseConfig
    candidates: int
    entropy_bits: float
    preset: str | None = None

    def __str__(self) -> str:
        return self.password


def plan_synthesis(
    mode: Mode,
    *,
    words: Iterable[str] | None = None,
    dictionary: Path | str | None = None,
) -> SynthesisPlan:
    """Resolve *mode* and filter the word source.

    *words* takes precedence over *dictionary*; with neither, the bundled
    word list is used.
    """
    config = resolve_mode(mode)
    preset = canonical_preset_name(mode.name) if isinstance(mode, PresetMode) else None
    raw = list(words) if words is not None else load_words(dictionary)
    candidates = filter_words(raw, config.min_length, config.max_length)
    logger.debug("Filtered %d of %d words (preset=%s)", len(candidates), len(raw), preset)
    return SynthesisPlan(config=config, candidates=tuple(candidates), preset=preset)


def synthesize(
    mode: Mode,
    *,
    words: Iterable[str] | None = None,
    dictionary: Path | str | None = None,
    random_source: RandomSource | None = None,
) -> str:
    """Synthesize a single password for *mode*.

    Raises:
        InvalidConfiguration: Unknown preset.
        DictionaryUnavailable: The word source cannot be read.
        InsufficientDictionary: Too few words survive length filtering.
    """
    plan = plan_synthesis(mode, words=words, dictionary=dictionary)
    return plan.draw(random_source or SecureRandom())


def synthesize_passphrase(
    mode: Mode,
    *,
    words: Iterable[str] | None = None,
    dictionary: Path | str | None = None,
    random_source: RandomSource | None = None,
) -> Passphrase:
    """Like :func:`synthesize`, but also report the resolved configuration."""
    plan = plan_synthesis(mode, words=words, dictionary=dictionary)
    return Passphrase(
        password=plan.draw(random_source or SecureRandom()),
        config=plan.config,
        candidates=len(plan.candidates),
        entropy_bits=plan.entropy_bits,
        preset=plan.preset,
    )


class PassphraseService(BaseService):
    """Generates passwords and describes presets for interfaces."""

    def generate(
        self,
        mode: Mode | None = None,
        *,
        count: int | None = None,
        dictionary: Path | str | None = None,
        overrides: dict[str, Any] | None = None,
        random_source: RandomSource | None = None,
    ) -> ServiceResult:
        """Generate *count* passwords from one resolved plan.

        Without a *mode*, non-empty *overrides* build a custom configuration
        on top of the defaults; otherwise the settings' default preset is
        used. A preset always replaces the whole configuration, so overrides
        given alongside one are ignored with a warning.

        Unset arguments fall back to settings (``[generate]`` and
        ``[dictionary]`` sections), then to code defaults.
        """
        settings = self._settings
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        warnings: list[str] = []
        if isinstance(mode, PresetMode) and overrides:
            warnings.append(
                f"Preset '{mode.name}' replaces the whole configuration; "
                f"ignored: {', '.join(sorted(overrides))}"
            )
        if count is None:
            count = settings.generate.count if settings else 1
        if dictionary is None and settings is not None:
            dictionary = settings.dictionary.path

        try:
            if count < 1:
                msg = f"count must be at least 1, got {count}"
                raise InvalidConfiguration(msg, count=count)
            if mode is None and overrides:
                mode = CustomMode(make_config(**overrides))
            elif mode is None:
                mode = PresetMode(settings.generate.preset if settings else DEFAULT_PRESET)
            plan = plan_synthesis(mode, dictionary=dictionary)
            rng = random_source or SecureRandom()
            passwords = [plan.draw(rng) for _ in range(count)]
        except PassphraseError as exc:
            return self._failure("generate", exc)

        entropy = plan.entropy_bits
        threshold = settings.generate.min_entropy if settings else MIN_RECOMMENDED_ENTROPY
        if entropy < threshold:
            warnings.append(
                f"Estimated entropy {entropy} bits is below the recommended {threshold} bits"
            )
        logger.debug("Generated %d password(s), %.2f bits each", count, entropy)
        return ServiceResult(
            ok=True,
            op="generate",
            data={
                "passwords": passwords,
                "preset": plan.preset,
                "candidates": len(plan.candidates),
                "entropy_bits": entropy,
                "config": plan.config.model_dump(mode="json"),
            },
            warnings=warnings,
        )

    def list_presets(self) -> ServiceResult:
        """Describe every preset's full configuration."""
        return ServiceResult(
            ok=True,
            op="list_presets",
            data={
                "default": DEFAULT_PRESET,
                "presets": {name: cfg.model_dump(mode="json") for name, cfg in PRESETS.items()},
            },
        )
