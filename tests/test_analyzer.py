"""
Tests for vaderlite/core/analyzer.py

TestReferenceSentences runs against the lexicon bundled with vaderSentiment
and checks the published VADER scores for the classic example sentences.
"""
import math
from unittest.mock import patch

import pytest

import vaderlite
from vaderlite.core import analyzer as analyzer_module
from vaderlite.core.analyzer import SentimentIntensityAnalyzer, get_default_analyzer
from vaderlite.core.lexicon import EmojiLexicon, Lexicon
from vaderlite.core.scoring import SentimentScores
from vaderlite.utils.constants import RuleTables


# ---------------------------------------------------------------------------
# Tests: pipeline over the small lexicon
# ---------------------------------------------------------------------------
class TestPipeline:
    def test_returns_scores(self, analyzer):
        assert isinstance(analyzer.polarity_scores("good"), SentimentScores)

    @pytest.mark.parametrize("text", ["", "   ", "a b c", "the table is wooden"])
    def test_no_sentiment_inputs(self, analyzer, text):
        sc = analyzer.polarity_scores(text)
        assert sc.compound == 0.0
        assert sc.pos == 0.0 and sc.neg == 0.0

    def test_punctuation_only_scores_slightly_negative(self, analyzer):
        # 3 × 0.292 for "!!!" plus 3 × 0.18 for "???"
        amp = 3 * 0.292 + 3 * 0.18
        sc = analyzer.polarity_scores("!!! ??? ...")
        assert sc.compound == pytest.approx(-amp / math.sqrt(amp * amp + 15.0))
        assert sc.pos == 0.0 and sc.neg == 0.0

    def test_balanced_text_with_exclamation_leans_negative(self):
        analyzer = SentimentIntensityAnalyzer(
            lexicon=Lexicon.from_mapping({"good": 1.0, "bad": -1.0}),
            emoji_lexicon=EmojiLexicon({}),
        )
        sc = analyzer.polarity_scores("good bad!")
        assert sc.compound < 0
        assert sc.pos == pytest.approx(sc.neg)

    def test_empty_text_is_all_zero(self, analyzer):
        assert analyzer.polarity_scores("") == SentimentScores(0.0, 0.0, 0.0, 0.0)

    def test_not_bad_at_all(self, analyzer):
        assert analyzer.polarity_scores("Not bad at all").compound == pytest.approx(0.431, abs=1e-3)

    def test_kind_of_good(self, analyzer):
        sc = analyzer.polarity_scores("The book was only kind of good.")
        assert sc.compound == pytest.approx(0.3832, abs=1e-4)

    def test_but_shifts_weight(self, analyzer):
        sc = analyzer.polarity_scores("The food was good, but the service was horrible")
        # 1.9 * 0.5 + (-2.5) * 1.5
        assert sc.compound < 0
        assert sc.compound == pytest.approx(-2.8 / (2.8 ** 2 + 15) ** 0.5)

    def test_emoticon_is_lexicon_token(self, analyzer):
        assert analyzer.polarity_scores("see you :)").compound > 0

    def test_emoji_translated_before_scoring(self, emoji_analyzer):
        assert emoji_analyzer.polarity_scores("😀").compound > 0
        parsed = emoji_analyzer.parse("so 😀 today")
        assert parsed.words == ["so", "grinning", "face", "today"]

    def test_idempotent(self, analyzer):
        text = "VADER is VERY SMART, handsome, and FUNNY!!!"
        assert analyzer.polarity_scores(text) == analyzer.polarity_scores(text)

    def test_intensifier_does_not_decrease(self, analyzer):
        plain = analyzer.polarity_scores("the movie is good").compound
        boosted = analyzer.polarity_scores("the movie is very good").compound
        assert boosted >= plain

    @pytest.mark.parametrize("text", [
        "GOOD GREAT EXCELLENT good great excellent!!!!!!!!",
        "horrible HORRIBLE bad BAD sux SUX!!!! ????",
        "not not not not good",
    ])
    def test_invariants(self, analyzer, text):
        sc = analyzer.polarity_scores(text)
        assert -1.0 <= sc.compound <= 1.0
        assert min(sc.neg, sc.neu, sc.pos) >= 0.0
        assert sc.neg + sc.neu + sc.pos == pytest.approx(1.0, abs=1e-9)

    def test_extra_lexicon(self):
        a = SentimentIntensityAnalyzer(lexicon={"good": 1.9}, emoji_lexicon={},
                                       extra_lexicon={"Moon": 2.0})
        assert a.lexicon["moon"] == pytest.approx(2.0)
        assert a.polarity_scores("to the moon").compound > 0

    def test_accepts_lexicon_instance(self, small_lexicon):
        a = SentimentIntensityAnalyzer(lexicon=small_lexicon, emoji_lexicon={})
        assert a.lexicon is small_lexicon

    def test_custom_rules(self):
        rules = RuleTables.build(idioms={"to the moon": 3.5})
        a = SentimentIntensityAnalyzer(lexicon={"moon": 0.5}, emoji_lexicon={}, rules=rules)
        assert a.polarity_scores("going to the moon").compound == pytest.approx(
            3.5 / (3.5 ** 2 + 15) ** 0.5)

    def test_default_rules(self, analyzer):
        assert analyzer.rules is RuleTables.default()

    def test_defaults_loaded_once(self):
        sentinel_lexicon = Lexicon.from_mapping({"good": 1.9})
        analyzer_module.default_lexicon.cache_clear()
        analyzer_module.default_emoji_lexicon.cache_clear()
        try:
            with patch.object(analyzer_module, "load_lexicon", return_value=sentinel_lexicon) as load, \
                    patch.object(analyzer_module, "load_emoji_lexicon", return_value={}) as load_emoji:
                first = SentimentIntensityAnalyzer()
                second = SentimentIntensityAnalyzer()
            assert load.call_count == 1
            assert load_emoji.call_count == 1
            assert first.lexicon is second.lexicon is sentinel_lexicon
        finally:
            analyzer_module.default_lexicon.cache_clear()
            analyzer_module.default_emoji_lexicon.cache_clear()


# ---------------------------------------------------------------------------
# Tests: reference sentences (bundled lexicon)
# ---------------------------------------------------------------------------
class TestReferenceSentences:
    @pytest.mark.parametrize("text,compound", [
        ("VADER is smart, handsome, and funny.", 0.8316),
        ("VADER is smart, handsome, and funny!", 0.8439),
        ("VADER is very smart, handsome, and funny.", 0.8545),
        ("The book was only kind of good.", 0.3832),
        ("At least it isn't a horrible book.", 0.431),
        ("Today SUX!", -0.5461),
        ("Not bad at all", 0.431),
        ("Sentiment analysis has never been good.", -0.3412),
        ("Sentiment analysis has never been this good!", 0.5672),
        ("With VADER, sentiment analysis is the shit!", 0.6476),
    ])
    def test_compound(self, text, compound):
        assert get_default_analyzer().polarity_scores(text).compound == pytest.approx(compound, abs=1e-3)

    def test_proportions(self):
        sc = get_default_analyzer().polarity_scores("VADER is smart, handsome, and funny.")
        assert sc.pos == pytest.approx(0.746, abs=1e-3)
        assert sc.neu == pytest.approx(0.254, abs=1e-3)
        assert sc.neg == 0.0

    def test_negation(self):
        assert get_default_analyzer().polarity_scores("VADER is not smart, handsome, nor funny.").compound < 0

    def test_least_as_negation_vs_comparison(self):
        a = get_default_analyzer()
        assert a.polarity_scores(
            "Roger Dodger is one of the least compelling variations on this theme.").compound < 0
        assert a.polarity_scores(
            "Roger Dodger is at least compelling as a variation on the theme.").compound > 0

    def test_emoji_sentence(self):
        assert get_default_analyzer().polarity_scores(
            "Catch utf-8 emoji such as 💘 and 💋 and 😁").compound > 0

    def test_module_level_polarity_scores(self):
        text = "The book was good."
        assert vaderlite.polarity_scores(text) == get_default_analyzer().polarity_scores(text)

    def test_default_analyzer_is_cached(self):
        assert get_default_analyzer() is get_default_analyzer()
