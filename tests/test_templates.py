"""Tests for templates module - deterministic fallback text."""

from wishforge.core.models import (
    PickupRequest,
    RoastRequest,
    ShayariRequest,
    StatusRequest,
    WishRequest,
)
from wishforge.core.templates import (
    LATIN_TABLE,
    join_parts,
    latinize,
    numbered,
    numbered_blocks,
    pick_emojis,
    pickup_lines,
    roast_generator,
    shayari,
    status_pack,
    wishify,
)


def _lines(text):
    return text.split("\n")


class TestHelpers:

    def test_pick_emojis_levels(self):
        base = ["a", "b", "c"]
        assert pick_emojis(0, base) == []
        assert pick_emojis(1, base) == ["a", "b"]
        assert pick_emojis(2, base) == ["a", "b", "c"]

    def test_join_parts_skips_empty(self):
        assert join_parts(["a", "", "b", ""]) == "a b"

    def test_numbered(self):
        assert numbered(["x", "y"]) == "1. x\n2. y"

    def test_numbered_blocks(self):
        assert numbered_blocks(["a\nb", "c"]) == "1.\na\nb\n\n2.\nc"

    def test_latinize_known_words(self):
        assert latinize("दिल रात") == "dil raat"

    def test_latinize_leaves_unmapped_words(self):
        assert latinize("दिल की बात") == "dil की बात"

    def test_latinize_longer_word_first(self):
        assert latinize("खुशबू") == "khushboo"

    def test_latin_table_has_core_words(self):
        words = dict(LATIN_TABLE)
        for devanagari in ("दिल", "रात", "दुआएँ", "खुश", "तेरी", "यादें"):
            assert devanagari in words


class TestWishify:

    def test_default_diwali(self):
        text = wishify(WishRequest(occasion="Diwali"))
        lines = _lines(text)
        assert len(lines) == 3
        for i, line in enumerate(lines, start=1):
            assert line.startswith(f"{i}. ")
            assert "Diwali" in line
            assert "mubarak" in line

    def test_exact_first_line(self):
        text = wishify(WishRequest(occasion="Diwali"))
        assert _lines(text)[0] == "1. Diwali mubarak ho! Bas khushiyan hi khushiyan! Dil se blessings! 🎉 ✨"

    def test_endings_rotate(self):
        lines = _lines(wishify(WishRequest(occasion="Holi", variant_count=5)))
        assert "Bas khushiyan hi khushiyan!" in lines[0]
        assert "Aaj ka din full vibe!" in lines[1]
        assert "Bas khushiyan hi khushiyan!" in lines[3]

    def test_hindi(self):
        text = wishify(WishRequest(occasion="दिवाली", language="Hindi"))
        assert "की हार्दिक शुभकामनाएँ!" in text
        assert "दिल से दुआएँ!" in text

    def test_name_and_medium_length(self):
        text = wishify(WishRequest(occasion="Birthday", name="Riya", length="medium"))
        assert text.startswith("1. Riya, Birthday ke din, khushiyon ki barsaat ho!")

    def test_no_emoji(self):
        text = wishify(WishRequest(occasion="Diwali", emoji_level=0))
        assert "🎉" not in text
        assert not text.endswith(" ")

    def test_funny_and_formal_tones(self):
        assert "Thoda masti, thoda pyaar!" in wishify(WishRequest(occasion="Eid", tone="funny"))
        assert "Best wishes and regards." in wishify(WishRequest(occasion="Eid", tone="formal"))

    def test_deterministic(self):
        req = WishRequest(occasion="Diwali", variant_count=5, emoji_level=2)
        assert wishify(req) == wishify(req)


class TestShayari:

    def test_default_two_blocks(self):
        text = shayari(ShayariRequest(theme="dosti"))
        blocks = text.split("\n\n")
        assert len(blocks) == 2
        assert blocks[0].startswith("1.\n")
        assert blocks[1].startswith("2.\n")
        assert all(len(b.split("\n")) == 5 for b in blocks)

    def test_theme_in_every_verse(self):
        text = shayari(ShayariRequest(theme="dosti", variant_count=3))
        assert text.count("dosti") == 3

    def test_variants_differ(self):
        blocks = shayari(ShayariRequest(theme="pyaar", variant_count=3)).split("\n\n")
        verses = {b.split("\n", 1)[1] for b in blocks}
        assert len(verses) == 3

    def test_devanagari_by_default(self):
        text = shayari(ShayariRequest(theme="dosti"))
        assert "दिल" in text
        assert "dil" not in text

    def test_hinglish_is_latinized(self):
        text = shayari(ShayariRequest(theme="dosti", language="Hinglish"))
        assert "dil" in text
        assert "yaadein" in text
        assert "duaayein" in text
        assert "दिल" not in text
        assert "दुआएँ" not in text

    def test_latin_script_is_latinized(self):
        text = shayari(ShayariRequest(theme="dosti", script="latin"))
        assert "दिल" not in text
        assert "teri" in text


class TestStatusPack:

    def test_count_lines(self):
        lines = _lines(status_pack(StatusRequest(theme="exam", count=7)))
        assert len(lines) == 7
        assert lines[0] == "1. 🔥 exam mode: ON"
        assert lines[6] == "7. 🏆 Small steps, big exam"

    def test_clean_style(self):
        lines = _lines(status_pack(StatusRequest(theme="exam", count=3, style="clean")))
        assert all(line.split(" ", 2)[1] == "•" for line in lines)

    def test_hashtaggy(self):
        text = status_pack(StatusRequest(theme="Monday motivation", style="hashtaggy"))
        assert all(line.endswith("#Mondaymotivation") for line in _lines(text))

    def test_hindi(self):
        text = status_pack(StatusRequest(theme="परीक्षा", language="Hindi", count=3))
        assert "परीक्षा मोड: चालू" in text

    def test_other_languages_use_devanagari(self):
        text = status_pack(StatusRequest(theme="exam", language="Marathi", count=3))
        assert "exam मोड: चालू" in text


class TestRoastGenerator:

    def test_count_and_target(self):
        lines = _lines(roast_generator(RoastRequest(target="Rahul", count=4)))
        assert len(lines) == 4
        assert all("Rahul" in line for line in lines)
        assert all(line.endswith("😜") for line in lines)

    def test_spice_selects_pool(self):
        text = roast_generator(RoastRequest(target="Rahul", spice="spicy", count=2))
        assert "attitude full hai" in text
        assert text.endswith("🔥")

    def test_unknown_spice_is_mild(self):
        assert roast_generator(RoastRequest(target="A", spice="nuclear")) == \
            roast_generator(RoastRequest(target="A", spice="mild"))

    def test_hindi(self):
        text = roast_generator(RoastRequest(target="राहुल", language="Hindi", count=2))
        assert "राहुल इतना लेट आता है" in text


class TestPickupLines:

    def test_defaults(self):
        lines = _lines(pickup_lines(PickupRequest()))
        assert len(lines) == 5
        assert "chai" in lines[0]

    def test_name_prefix(self):
        text = pickup_lines(PickupRequest(name="Simran", count=3, vibe="filmy"))
        assert all(line.split(". ", 1)[1].startswith("Simran, ") for line in _lines(text))

    def test_unknown_vibe_is_cute(self):
        assert pickup_lines(PickupRequest(vibe="weird")) == pickup_lines(PickupRequest(vibe="cute"))

    def test_deterministic(self):
        req = PickupRequest(vibe="nerdy", count=7)
        assert pickup_lines(req) == pickup_lines(req)
