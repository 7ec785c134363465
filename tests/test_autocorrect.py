from __future__ import annotations

import pytest

from zabanyar.modules.writing_practice import autocorrect
from zabanyar.modules.writing_practice.autocorrect import Analysis, GrammarError, Scores


def test_subject_verb_agreement_is_flagged_with_offsets() -> None:
    errors = autocorrect.find_grammar_errors("He go to school.")

    assert len(errors) == 1
    error = errors[0]
    assert error.type == "subject_verb_agreement"
    assert (error.original, error.corrected) == ("He go", "He gos")
    assert (error.start, error.end) == (0, 5)
    assert error.severity == "minor"


def test_article_rules_fire_in_rule_order() -> None:
    errors = autocorrect.find_grammar_errors("I ate a apple and an banana.")

    assert [(error.original, error.corrected) for error in errors] == [
        ("a apple", "an apple"),
        ("an banana", "a banana"),
    ]
    assert {error.type for error in errors} == {"article"}


def test_plural_subject_with_singular_verb() -> None:
    errors = autocorrect.find_grammar_errors("Yesterday they was happy.")

    assert [(error.type, error.corrected) for error in errors] == [("verb_tense", "they are")]


def test_matches_whose_correction_changes_nothing_are_skipped() -> None:
    # The article fix only rewrites a lower-case "a ".
    assert autocorrect.find_grammar_errors("A apple fell.") == []


def test_short_sentences_are_reported_as_structure_issues() -> None:
    analysis = autocorrect.analyze("Hi. This sentence is long enough to pass.")

    assert analysis.sentence_count == 2
    assert [(issue.sentence, issue.position) for issue in analysis.structure_issues] == [("Hi", 0)]


def test_scores_for_a_short_clean_sentence() -> None:
    content = "The cat sat."

    scores = autocorrect.calculate_scores(autocorrect.analyze(content), content)

    assert scores == Scores(overall=70, grammar=100, vocabulary=100, coherence=60, creativity=0)


def test_coherence_rewards_mid_length_sentences_and_vocabulary_penalises_repeats() -> None:
    content = "word " * 12 + "end."

    scores = autocorrect.calculate_scores(autocorrect.analyze(content), content)

    assert scores.coherence == 80
    assert scores.vocabulary == 15


def test_creativity_counts_adjective_like_suffixes_and_is_capped() -> None:
    content = "He is really careful and famous."

    scores = autocorrect.calculate_scores(autocorrect.analyze(content), content)

    assert scores.creativity == 100


def test_grammar_score_never_goes_negative() -> None:
    content = " ".join(["he go."] * 12)

    scores = autocorrect.calculate_scores(autocorrect.analyze(content), content)

    assert scores.grammar == 0


def test_empty_text_is_graded_without_errors() -> None:
    correction = autocorrect.correct("")

    assert correction.word_count == 0
    assert correction.character_count == 0
    assert correction.scores.vocabulary == 0
    assert correction.scores.overall == 45


def test_improvements_for_simple_words_short_text_and_missing_commas() -> None:
    content = "The cat sat."
    assert [item.type for item in autocorrect.suggest_improvements(content, autocorrect.analyze(content))] == [
        "structure",
        "style",
    ]

    content = "It is a good day, very nice."
    improvements = autocorrect.suggest_improvements(content, autocorrect.analyze(content))

    vocabulary = [(item.original, item.suggested, item.priority) for item in improvements if item.type == "vocabulary"]
    assert vocabulary == [
        ("good", "excellent", "medium"),
        ("nice", "pleasant", "medium"),
        ("very", "extremely", "medium"),
    ]
    assert "style" not in {item.type for item in improvements}


def test_grammar_errors_become_high_priority_improvements() -> None:
    content = "She have a idea, and it is good. We like it a lot. It works fine."

    improvements = autocorrect.suggest_improvements(content, autocorrect.analyze(content))

    grammar = [(item.suggested, item.priority) for item in improvements if item.type == "grammar"]
    assert grammar == [("She haves", "high"), ("an idea", "high")]


@pytest.mark.parametrize(
    ("overall", "expected"),
    [
        (80, autocorrect.FEEDBACK_EXCELLENT),
        (60, autocorrect.FEEDBACK_GOOD),
        (59, autocorrect.FEEDBACK_NEEDS_PRACTICE),
    ],
)
def test_feedback_opening_follows_overall_score(overall: int, expected: str) -> None:
    scores = Scores(overall=overall, grammar=100, vocabulary=100, coherence=80, creativity=50)

    assert autocorrect.build_feedback(scores, Analysis()) == expected


def test_feedback_mentions_weak_areas_and_error_count() -> None:
    error = GrammarError(type="article", original="a apple", corrected="an apple", start=0, end=7, explanation="")
    scores = Scores(overall=50, grammar=60, vocabulary=40, coherence=60, creativity=0)

    feedback = autocorrect.build_feedback(scores, Analysis(grammar_errors=[error] * 4))

    assert feedback == " ".join(
        [
            autocorrect.FEEDBACK_NEEDS_PRACTICE,
            autocorrect.FEEDBACK_GRAMMAR,
            autocorrect.FEEDBACK_VOCABULARY,
            "4 خطای گرامری شناسایی شد.",
        ]
    )


def test_analysis_serialises_to_plain_dicts() -> None:
    data = autocorrect.analyze("He go.").as_dict()

    assert data["grammar_errors"][0]["corrected"] == "He gos"
    assert data["structure_issues"][0]["sentence"] == "He go"
