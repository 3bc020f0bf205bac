"""Batch contrast audit over foreground/background color tokens.

Token names follow 'st-color-<kind>-<role>-...', e.g.
'st-color-fg-surface-base'. Foregrounds (kind 'fg') are checked against
backgrounds (kind 'bg') of the same role; the 'surface' role pairs with
everything.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Literal

from staple import defaults
from .contrast import (
    APCARating,
    APCAUseCase,
    WCAGRating,
    apca_contrast_hex,
    apca_rating,
    wcag_contrast_hex,
    wcag_rating,
)

logger = logging.getLogger(__name__)

Mode = Literal["light", "dark"]
FilterMode = Literal["all", "pass", "fail"]

_ALPHA_HEX_RE = re.compile(r"#[0-9a-fA-F]{8}")
_TOKEN_PREFIX = "st-color-"


@dataclass(frozen=True)
class ColorToken:
    name: str
    light: str
    dark: str


@dataclass(frozen=True)
class PairResult:
    fg: ColorToken
    bg: ColorToken
    wcag_ratio: float
    wcag_rating: WCAGRating
    apca_lc: float
    apca_rating: APCARating


@dataclass(frozen=True)
class AuditSummary:
    total: int
    aaa: int
    aa: int
    aa_large: int
    fail: int


def is_alpha_hex(value: str) -> bool:
    return _ALPHA_HEX_RE.fullmatch(value) is not None


def token_role(name: str) -> str:
    """'st-color-fg-surface-base' -> 'surface'."""
    parts = name.replace(_TOKEN_PREFIX, "", 1).split("-")
    return parts[1] if len(parts) > 1 else ""


def audit_token_pairs(
    tokens: Iterable[ColorToken],
    mode: Mode = "light",
    use_case: APCAUseCase = defaults.DEFAULT_APCA_USE_CASE,
) -> list[PairResult]:
    """Check every compatible fg/bg token pair in one color mode.

    Pairs involving translucent (8-digit) colors are skipped, since
    their contrast depends on what lies underneath.
    """
    if mode not in ("light", "dark"):
        raise ValueError(f"Unknown mode: {mode}")

    tokens = list(tokens)
    fg_tokens = [t for t in tokens if "-fg-" in t.name]
    bg_tokens = [t for t in tokens if "-bg-" in t.name]

    results = []
    for fg in fg_tokens:
        for bg in bg_tokens:
            fg_role, bg_role = token_role(fg.name), token_role(bg.name)
            if fg_role != bg_role and "surface" not in (fg_role, bg_role):
                continue

            fg_hex = getattr(fg, mode)
            bg_hex = getattr(bg, mode)
            if is_alpha_hex(fg_hex) or is_alpha_hex(bg_hex):
                continue

            ratio = wcag_contrast_hex(fg_hex, bg_hex)
            lc = apca_contrast_hex(fg_hex, bg_hex)
            results.append(PairResult(
                fg=fg,
                bg=bg,
                wcag_ratio=ratio,
                wcag_rating=wcag_rating(ratio),
                apca_lc=lc,
                apca_rating=apca_rating(lc, use_case),
            ))

    logger.debug(
        "Audited %d pairs (%d fg x %d bg tokens, %s mode)",
        len(results), len(fg_tokens), len(bg_tokens), mode,
    )
    return results


def filter_pairs(pairs: Iterable[PairResult], which: FilterMode = "all") -> list[PairResult]:
    """'pass' keeps AA/AAA pairs, 'fail' keeps AA Large and Fail."""
    if which == "all":
        return list(pairs)
    if which == "pass":
        return [p for p in pairs if p.wcag_rating in ("AA", "AAA")]
    if which == "fail":
        return [p for p in pairs if p.wcag_rating in ("AA Large", "Fail")]
    raise ValueError(f"Unknown filter: {which}")


def summarize(pairs: Iterable[PairResult]) -> AuditSummary:
    ratings = [p.wcag_rating for p in pairs]
    return AuditSummary(
        total=len(ratings),
        aaa=ratings.count("AAA"),
        aa=ratings.count("AA"),
        aa_large=ratings.count("AA Large"),
        fail=ratings.count("Fail"),
    )
