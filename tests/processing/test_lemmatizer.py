"""Tests for lemma resolution, fallback and caching."""

import asyncio
from unittest.mock import MagicMock, patch

import pytest

from bookwords.processing.cache import LemmaCache
from bookwords.processing.lemmatizer import LemmaResolver
from bookwords.processing.lexicon import PorterStemmerFallback, StaticLexicalDatabase, WordNetDatabase


class TestLemmaResolver:
    """Test the lookup / fallback / cache strategy."""

    @pytest.mark.asyncio
    async def test_dictionary_candidate_used(self, database):
        resolver = LemmaResolver(database=database)
        assert await resolver.resolve("ran") == "run"

    @pytest.mark.asyncio
    async def test_first_candidate_wins(self):
        resolver = LemmaResolver(database=StaticLexicalDatabase({"saw": ["saw", "see"]}))
        assert await resolver.resolve("saw") == "saw"

    @pytest.mark.asyncio
    async def test_stemmer_fallback_on_empty_result(self, database):
        resolver = LemmaResolver(database=database)
        assert await resolver.resolve("running") == "run"
        assert await resolver.resolve("cats") == "cat"

    @pytest.mark.asyncio
    async def test_stemmer_fallback_on_lookup_failure(self, make_database):
        failing = make_database(entries={"jumping": ["jump"]}, failing={"jumping"})
        resolver = LemmaResolver(database=failing)
        assert await resolver.resolve("jumping") == "jump"
        assert failing.calls == ["jumping"]

    @pytest.mark.asyncio
    async def test_unknown_word_never_empty(self, database):
        resolver = LemmaResolver(database=database)
        lemma = await resolver.resolve("zzztesting123")
        assert lemma
        assert lemma.startswith("zzztest")

    @pytest.mark.asyncio
    async def test_empty_candidates_are_skipped(self):
        resolver = LemmaResolver(database=StaticLexicalDatabase({"mice": ["", "mouse"]}))
        assert await resolver.resolve("mice") == "mouse"

    @pytest.mark.asyncio
    async def test_cache_prevents_second_lookup(self, database):
        resolver = LemmaResolver(database=database)

        first = await resolver.resolve("testing")
        second = await resolver.resolve("testing")

        assert first == second
        assert database.calls == ["testing"]
        assert resolver.cache.get("testing") == first

    @pytest.mark.asyncio
    async def test_fallback_result_is_cached(self, database):
        resolver = LemmaResolver(database=database)
        await resolver.resolve("walking")
        assert "walking" in resolver.cache

    @pytest.mark.asyncio
    async def test_prefilled_cache_skips_dictionary(self, database):
        cache = LemmaCache({"went": "go"})
        resolver = LemmaResolver(database=database, cache=cache)
        assert await resolver.resolve("went") == "go"
        assert database.calls == []

    @pytest.mark.asyncio
    async def test_concurrent_resolutions_share_one_lookup(self, make_database):
        database = make_database(entries={"geese": ["goose"]}, delay=0.01)
        resolver = LemmaResolver(database=database)

        lemmas = await asyncio.gather(*(resolver.resolve("geese") for _ in range(25)))

        assert lemmas == ["goose"] * 25
        assert database.calls == ["geese"]
        assert resolver._inflight == {}
        assert resolver.cache.get_stats()["session_misses"] == 1


class TestPorterStemmerFallback:
    """Test the rule-based fallback."""

    def test_stems_suffixes(self):
        stemmer = PorterStemmerFallback()
        assert stemmer.stem("running") == "run"
        assert stemmer.stem("runs") == "run"

    def test_empty_word(self):
        assert PorterStemmerFallback().stem("") == ""

    def test_short_word_unchanged(self):
        assert PorterStemmerFallback().stem("cat") == "cat"


class TestWordNetUnavailable:
    """A missing corpus is reported once and then fails fast."""

    def test_lookup_raises_and_is_not_retried(self):
        database = WordNetDatabase(download=False)
        wordnet = MagicMock()
        wordnet.get_version.side_effect = LookupError("missing")
        with patch("bookwords.processing.lexicon.nltk.data.find", side_effect=LookupError), patch(
            "nltk.corpus.wordnet", new=wordnet
        ):
            with pytest.raises(LookupError):
                database.lookup_sync("dogs")
            with pytest.raises(LookupError):
                database.lookup_sync("cats")

        assert wordnet.get_version.call_count == 1

    @pytest.mark.asyncio
    async def test_resolver_falls_back_to_stemmer(self):
        database = WordNetDatabase(download=False)
        database._unavailable = True
        resolver = LemmaResolver(database=database)
        assert await resolver.resolve("walking") == "walk"
