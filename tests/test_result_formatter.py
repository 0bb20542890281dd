from __future__ import annotations

import json

from tukant.app.services.result_formatter import RhymeResultFormatter, truncate
from tukant.app.services.rhyme_service import RhymeDictionary


def test_payload_for_aam_rhymes(dictionary) -> None:
    payload = RhymeResultFormatter().to_payload(dictionary.query("नाम"))

    assert payload["status"] == "ok"
    assert payload["query"] == "नाम"
    assert payload["depth"] == 2
    assert payload["depths"] == [
        {"depth": 1, "suffix": "म", "count": 4},
        {"depth": 2, "suffix": "ाम", "count": 4},
    ]
    assert payload["summary"] == {"total": 4, "suffix": "ाम", "clusters": 2}
    assert payload["message"] == "4 तुक मिली / 4 rhymes found"

    (group,) = payload["groups"]
    assert group["ending"] == "ाम"
    assert group["count"] == 4
    first = group["entries"][0]
    assert first["word"] == "काम"
    assert (first["stem"], first["ending"]) == ("क", "ाम")
    assert first["purity"] == 0.667
    assert first["sources"] == [
        {"title": "काम", "short_title": "काम", "url": "/poems/4/", "author": "बिहारी"}
    ]
    last = group["entries"][-1]
    assert last["word"] == "श्याम"
    assert last["sources"][0]["author"] is None


def test_homophone_groups_keep_their_own_endings(dictionary) -> None:
    payload = RhymeResultFormatter().to_payload(dictionary.query("हरन"))

    assert [group["ending"] for group in payload["groups"]] == ["रण", "रन"]
    entry = payload["groups"][0]["entries"][0]
    assert (entry["stem"], entry["ending"]) == ("च", "रण")
    assert entry["sources"][0]["author"] == "मीराबाई"


def test_no_match_and_invalid_payloads_carry_only_a_message(dictionary) -> None:
    formatter = RhymeResultFormatter()

    missing = formatter.to_payload(dictionary.query("पुस्तक"))
    invalid = formatter.to_payload(dictionary.query("hello"))

    assert missing["status"] == "no_matches"
    assert missing["message"] == '"पुस्तक" की तुक नहीं मिली / No rhymes found.'
    assert missing["summary"] is None
    assert missing["groups"] == []
    assert invalid["status"] == "invalid"
    assert invalid["depth"] is None
    assert invalid["depths"] == []
    assert invalid["message"].endswith("Type a word to find rhymes.")


def test_single_rhyme_message_is_singular(config) -> None:
    engine = RhymeDictionary([{"title": "", "url": "/one/", "text": "धाम"}], config=config)

    payload = RhymeResultFormatter().to_payload(engine.query("नाम"))

    assert payload["depth"] == 1
    assert payload["message"] == "1 तुक मिली / 1 rhyme found"


def test_long_titles_are_shortened_for_display(config) -> None:
    title = "चरण कमल बंदौं हरि राई जाकी कृपा पंगु गिरि लंघै"
    engine = RhymeDictionary([{"title": title, "url": "/long/", "text": "धाम काम"}], config=config)

    payload = RhymeResultFormatter(title_limit=10).to_payload(engine.query("नाम"))

    source = payload["groups"][0]["entries"][0]["sources"][0]
    assert source["title"] == title
    assert source["short_title"] == title[:10] + "…"


def test_payload_is_json_serialisable(dictionary) -> None:
    payload = RhymeResultFormatter().to_payload(dictionary.query("नाम"))

    assert json.loads(json.dumps(payload, ensure_ascii=False)) == payload


def test_truncate_leaves_short_text_alone() -> None:
    assert truncate("राम", 22) == "राम"
    assert truncate("क" * 23, 22) == "क" * 22 + "…"
