"""Rule-based grading of English writing submissions.

Everything here is pure: ``correct(content)`` analyses the text and returns
grammar errors, structure issues, scores, improvement suggestions and a
Persian feedback sentence. Persistence is handled by the service layer.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Any

# Word matching follows ASCII semantics; the grader targets English text.
_WORD_RE = re.compile(r"\b\w+\b", re.ASCII)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_ADJECTIVE_RE = re.compile(r"\b\w+ly\b|\b\w+ful\b|\b\w+ous\b", re.IGNORECASE | re.ASCII)

MIN_SENTENCE_CHARS = 10
MIN_SENTENCES = 3

SIMPLE_WORD_ALTERNATIVES: dict[str, tuple[str, ...]] = {
    "good": ("excellent", "wonderful", "great", "fantastic"),
    "bad": ("terrible", "awful", "poor", "horrible"),
    "nice": ("pleasant", "delightful", "charming", "lovely"),
    "big": ("large", "huge", "enormous", "massive"),
    "small": ("tiny", "little", "miniature", "compact"),
    "very": ("extremely", "incredibly", "remarkably", "particularly"),
}

FEEDBACK_EXCELLENT = "عالی! نوشته شما بسیار خوب است."
FEEDBACK_GOOD = "خوب است، اما می‌توانید بهتر کنید."
FEEDBACK_NEEDS_PRACTICE = "نیاز به تمرین بیشتر دارید."
FEEDBACK_GRAMMAR = "توجه بیشتری به گرامر داشته باشید."
FEEDBACK_VOCABULARY = "سعی کنید از واژگان متنوع‌تری استفاده کنید."


@dataclass(frozen=True)
class GrammarRule:
    pattern: re.Pattern[str]
    correction: Callable[[str], str]
    type: str
    explanation: str


def _add_third_person_s(text: str) -> str:
    subject, verb = text.split()[:2]
    return f"{subject} {verb}s"


GRAMMAR_RULES: tuple[GrammarRule, ...] = (
    GrammarRule(
        pattern=re.compile(r"\b(he|she|it)\s+(go|come|do|have)\b", re.IGNORECASE),
        correction=_add_third_person_s,
        type="subject_verb_agreement",
        explanation="Subject and verb must agree in number",
    ),
    GrammarRule(
        pattern=re.compile(r"\ba\s+(a|e|i|o|u)\w+", re.IGNORECASE | re.ASCII),
        correction=lambda text: text.replace("a ", "an ", 1),
        type="article",
        explanation='Use "an" before words starting with a vowel sound',
    ),
    GrammarRule(
        pattern=re.compile(r"\ban\s+[bcdfghjklmnpqrstvwxyz]\w+", re.IGNORECASE | re.ASCII),
        correction=lambda text: text.replace("an ", "a ", 1),
        type="article",
        explanation='Use "a" before words starting with a consonant sound',
    ),
    GrammarRule(
        pattern=re.compile(r"\b(i|we|you|they)\s+(is|was)\b", re.IGNORECASE),
        correction=lambda text: re.sub(r"\s+(is|was)\b", " are", text, count=1, flags=re.IGNORECASE),
        type="verb_tense",
        explanation="Incorrect verb form",
    ),
)


@dataclass(frozen=True)
class GrammarError:
    type: str
    original: str
    corrected: str
    start: int
    end: int
    explanation: str
    severity: str = "minor"


@dataclass(frozen=True)
class StructureIssue:
    type: str
    sentence: str
    suggestion: str
    position: int


@dataclass(frozen=True)
class Improvement:
    type: str
    original: str
    suggested: str
    explanation: str
    priority: str


@dataclass(frozen=True)
class Scores:
    overall: int
    grammar: int
    vocabulary: int
    coherence: int
    creativity: int


@dataclass(frozen=True)
class Analysis:
    grammar_errors: list[GrammarError] = field(default_factory=list)
    structure_issues: list[StructureIssue] = field(default_factory=list)
    sentence_count: int = 0
    average_sentence_length: float = 0.0

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Correction:
    word_count: int
    character_count: int
    scores: Scores
    analysis: Analysis
    improvements: list[Improvement]
    feedback: str


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def count_words(content: str) -> int:
    return len(content.split())


def split_sentences(content: str) -> list[str]:
    return [part for part in _SENTENCE_SPLIT_RE.split(content) if part.strip()]


def _average_sentence_length(content: str, sentences: list[str]) -> float:
    return len(content) / len(sentences) if sentences else 0.0


def find_grammar_errors(content: str) -> list[GrammarError]:
    """Scan every rule in order; matches whose correction is a no-op are skipped."""
    errors: list[GrammarError] = []
    for rule in GRAMMAR_RULES:
        for match in rule.pattern.finditer(content):
            original = match.group(0)
            corrected = rule.correction(original)
            if original.lower() == corrected.lower():
                continue
            errors.append(
                GrammarError(
                    type=rule.type,
                    original=original,
                    corrected=corrected,
                    start=match.start(),
                    end=match.end(),
                    explanation=rule.explanation,
                )
            )
    return errors


def analyze(content: str) -> Analysis:
    sentences = split_sentences(content)
    issues = [
        StructureIssue(
            type="sentence_length",
            sentence=sentence.strip(),
            suggestion="This sentence is too short. Try to add more details.",
            position=index,
        )
        for index, sentence in enumerate(sentences)
        if len(sentence.strip()) < MIN_SENTENCE_CHARS
    ]
    return Analysis(
        grammar_errors=find_grammar_errors(content),
        structure_issues=issues,
        sentence_count=len(sentences),
        average_sentence_length=_average_sentence_length(content, sentences),
    )


def calculate_scores(analysis: Analysis, content: str) -> Scores:
    grammar = max(0, 100 - len(analysis.grammar_errors) * 10)

    words = _WORD_RE.findall(content.lower())
    vocabulary = min(100, round_half_up(len(set(words)) / len(words) * 100)) if words else 0

    average_length = _average_sentence_length(content, split_sentences(content))
    coherence = 80 if 50 < average_length < 150 else 60

    word_count = count_words(content)
    adjectives = len(_ADJECTIVE_RE.findall(content))
    creativity = min(100, round_half_up(adjectives / word_count * 1000)) if word_count else 0

    overall = round_half_up(grammar * 0.3 + vocabulary * 0.25 + coherence * 0.25 + creativity * 0.2)
    return Scores(
        overall=overall,
        grammar=grammar,
        vocabulary=vocabulary,
        coherence=coherence,
        creativity=creativity,
    )


def suggest_improvements(content: str, analysis: Analysis) -> list[Improvement]:
    improvements = [
        Improvement(
            type="grammar",
            original=error.original,
            suggested=error.corrected,
            explanation=error.explanation,
            priority="high",
        )
        for error in analysis.grammar_errors
    ]

    words = set(_WORD_RE.findall(content.lower()))
    for word, alternatives in SIMPLE_WORD_ALTERNATIVES.items():
        if word in words:
            improvements.append(
                Improvement(
                    type="vocabulary",
                    original=word,
                    suggested=alternatives[0],
                    explanation=f'Consider using "{alternatives[0]}" instead of "{word}" for more variety',
                    priority="medium",
                )
            )

    if len(split_sentences(content)) < MIN_SENTENCES:
        improvements.append(
            Improvement(
                type="structure",
                original="",
                suggested="Try to write more sentences to develop your ideas",
                explanation="Your text is too short. Add more sentences to provide more details.",
                priority="high",
            )
        )

    if "," not in content:
        improvements.append(
            Improvement(
                type="style",
                original="",
                suggested="Use commas to connect related ideas",
                explanation="Using commas can make your writing flow better",
                priority="low",
            )
        )
    return improvements


def build_feedback(scores: Scores, analysis: Analysis) -> str:
    if scores.overall >= 80:
        messages = [FEEDBACK_EXCELLENT]
    elif scores.overall >= 60:
        messages = [FEEDBACK_GOOD]
    else:
        messages = [FEEDBACK_NEEDS_PRACTICE]

    if scores.grammar < 70:
        messages.append(FEEDBACK_GRAMMAR)
    if scores.vocabulary < 70:
        messages.append(FEEDBACK_VOCABULARY)
    if analysis.grammar_errors:
        messages.append(f"{len(analysis.grammar_errors)} خطای گرامری شناسایی شد.")
    return " ".join(messages)


def correct(content: str) -> Correction:
    analysis = analyze(content)
    scores = calculate_scores(analysis, content)
    return Correction(
        word_count=count_words(content),
        character_count=len(content),
        scores=scores,
        analysis=analysis,
        improvements=suggest_improvements(content, analysis),
        feedback=build_feedback(scores, analysis),
    )
