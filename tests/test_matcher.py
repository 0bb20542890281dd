import pytest

from tukant.config import RhymeConfig
from tukant.core import build_index
from tukant.core.corpus_index import DocumentRef
from tukant.core.matcher import MatchCandidate, find_rhymes, purity_ratio, rank_candidates


def _words(matches):
    return [match.word for match in matches]


def test_naam_rhymes_with_every_aam_word_at_depth_two(aam_index, cache, config):
    matches = find_rhymes("नाम", 2, aam_index, cache, config)

    assert sorted(_words(matches)) == sorted(["राम", "श्याम", "धाम", "काम"])
    assert all(match.suffix_key == "aa m" for match in matches)


def test_matches_rank_by_purity_then_code_point_order(aam_index, cache, config):
    matches = find_rhymes("नाम", 2, aam_index, cache, config)

    assert _words(matches) == ["काम", "धाम", "राम", "श्याम"]
    assert matches[0].purity == pytest.approx(2 / 3)
    assert matches[-1].purity == pytest.approx(0.5)


def test_query_word_is_never_its_own_rhyme(verse_index, cache, config):
    for word in verse_index.words():
        for depth in range(1, 6):
            assert word not in _words(find_rhymes(word, depth, verse_index, cache, config))


def test_candidates_carry_their_document_refs(aam_index, cache, config):
    matches = find_rhymes("राम", 2, aam_index, cache, config)
    by_word = {match.word: match for match in matches}

    assert by_word["नाम"].refs == (DocumentRef(url="/poems/3/"),)
    assert by_word["नाम"].refs[0].author == "सूरदास"


def test_match_count_never_grows_with_depth(verse_index, cache, config):
    for query in ("नाम", "हरन", "कमल", "मन"):
        counts = [
            len(find_rhymes(query, depth, verse_index, cache, config))
            for depth in range(1, 8)
        ]
        assert counts == sorted(counts, reverse=True)


def test_depth_beyond_the_query_yields_nothing(aam_index, cache, config):
    assert find_rhymes("नाम", 4, aam_index, cache, config) == []


def test_short_candidates_do_not_match_deep_suffixes(cache, config):
    index = build_index([{"title": "", "url": "/x/", "text": "आम सुनाम"}], config)

    assert _words(find_rhymes("नाम", 2, index, cache, config)) == ["आम", "सुनाम"]
    assert _words(find_rhymes("नाम", 3, index, cache, config)) == ["सुनाम"]


def test_depth_below_one_is_rejected(aam_index, cache, config):
    with pytest.raises(ValueError):
        find_rhymes("नाम", 0, aam_index, cache, config)


def test_no_rhymes_is_an_empty_list(aam_index, cache, config):
    assert find_rhymes("पुस्तक", 1, aam_index, cache, config) == []


def test_purity_tolerance_turns_close_ratios_into_alphabetical_ties(cache):
    index = build_index([{"title": "", "url": "/y/", "text": "धाम आराम"}], RhymeConfig())

    strict = find_rhymes("नाम", 2, index, cache, RhymeConfig(purity_tolerance=0.1))
    loose = find_rhymes("नाम", 2, index, cache, RhymeConfig(purity_tolerance=0.2))

    assert _words(strict) == ["धाम", "आराम"]
    assert _words(loose) == ["आराम", "धाम"]


def test_rank_candidates_orders_by_purity_descending():
    candidates = [
        MatchCandidate(word="ख", refs=(), suffix_key="", purity=0.25),
        MatchCandidate(word="क", refs=(), suffix_key="", purity=1.0),
        MatchCandidate(word="ग", refs=(), suffix_key="", purity=0.5),
    ]

    assert _words(rank_candidates(candidates, tolerance=0.1)) == ["क", "ग", "ख"]


def test_purity_ratio_guards_empty_forms():
    assert purity_ratio(2, 4) == 0.5
    assert purity_ratio(1, 0) == 0.0


@pytest.mark.parametrize("text", ["स्याम गुलाम अविराम", "अविराम स्याम गुलाम", "गुलाम अविराम स्याम"])
def test_ranking_ignores_corpus_order(cache, config, text):
    index = build_index([{"title": "", "url": "/order/", "text": text}], config)

    matches = find_rhymes("नाम", 2, index, cache, config)

    # स्याम (0.5) and गुलाम (0.4) tie; अविराम (0.333) is a band below.
    assert _words(matches) == ["गुलाम", "स्याम", "अविराम"]


def test_ranking_never_lets_a_clearly_purer_word_fall_behind():
    candidates = [
        MatchCandidate(word=word, refs=(), suffix_key="", purity=purity)
        for word, purity in [("घ", 0.3), ("क", 0.6), ("ग", 0.4), ("ख", 0.5), ("च", 0.2)]
    ]

    ranked = rank_candidates(candidates, tolerance=0.1)

    for position, earlier in enumerate(ranked):
        for later in ranked[position + 1:]:
            assert later.purity <= earlier.purity + 0.1 + 1e-9
    assert _words(ranked) == ["क", "ख", "ग", "घ", "च"]
    assert _words(rank_candidates(list(reversed(candidates)), tolerance=0.1)) == _words(ranked)
