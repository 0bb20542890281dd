import types

from tukant.config import RhymeConfig
from tukant.core.corpus_index import DocumentRef, build_index, document_ref
from tukant.core.script import clean_word, tokenise


def test_clean_word_strips_verse_punctuation_and_whitespace():
    assert clean_word("नाम।") == "नाम"
    assert clean_word("“श्याम”,") == "श्याम"
    assert clean_word("धाम॥ ") == "धाम"
    assert clean_word("राम-" + chr(0x200D) + "नाम") == "रामनाम"
    assert clean_word(" ना म ") == "नाम"
    assert clean_word("") == ""


def test_tokenise_keeps_devanagari_words_of_minimum_length():
    words = tokenise("राम नाम hello व ! काम।", min_length=2)

    assert words == ["राम", "नाम", "काम"]


def test_index_deduplicates_refs_by_url_in_first_seen_order():
    documents = [
        {"title": "पहला", "url": "/a/", "text": "नाम नाम नाम"},
        {"title": "दूसरा", "url": "/b/", "text": "नाम"},
        {"title": "फिर पहला", "url": "/a/", "text": "नाम"},
    ]

    index = build_index(documents)

    assert [ref.url for ref in index.refs("नाम")] == ["/a/", "/b/"]
    assert index.refs("नाम")[0].title == "पहला"
    assert index.document_count == 3


def test_index_includes_title_words_and_skips_non_qualifying_tokens():
    index = build_index(
        [{"title": "चरण वंदना", "url": "/c/", "text": "व hello मन।"}],
        RhymeConfig(),
    )

    assert set(index.words()) == {"चरण", "वंदना", "मन"}
    assert "व" not in index
    assert "hello" not in index


def test_index_respects_configured_minimum_word_length():
    index = build_index(
        [{"title": "", "url": "/d/", "text": "मन मोहन"}],
        RhymeConfig(min_word_length=3),
    )

    assert index.words() == ("मोहन",)


def test_document_ref_reads_mappings_and_objects():
    as_mapping = document_ref({"title": "पद", "url": "/e/", "poet": "सूरदास"})
    as_object = document_ref(types.SimpleNamespace(title="दोहा", url="/f/", text="", author=""))

    assert as_mapping == DocumentRef(url="/e/")
    assert as_mapping.author == "सूरदास"
    assert as_object.title == "दोहा"
    assert as_object.author is None


def test_refs_for_unknown_word_are_empty(aam_index):
    assert aam_index.refs("पुस्तक") == ()
    assert len(aam_index) == 5
    assert list(aam_index) == ["राम", "श्याम", "धाम", "नाम", "काम"]
