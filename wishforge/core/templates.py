# =============================================================================
# core/templates.py  —  Template Engine (the guaranteed answer)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a normalized request into finished text WITHOUT any network,
#   randomness or clock.  One function per generation tool:
#
#     wishify()          → numbered festival/birthday wishes
#     shayari()          → numbered 4-line verses, optionally latinized
#     status_pack()      → numbered WhatsApp status hooks
#     roast_generator()  → numbered light-hearted roasts
#     pickup_lines()     → numbered cheesy pickup lines
#
# THE SELECTION RULE:
#   Variant i always takes fragment pool[i % len(pool)].  Same request in,
#   same bytes out, every time.  That is what makes this module the fallback
#   the dispatcher can always lean on when the remote LLM is missing or down.
#
# FORMATTING:
#   Line tools     → "1. ...\n2. ...\n3. ..."
#   shayari        → "1.\n<verse>\n\n2.\n<verse>"  (each number is a block)
# =============================================================================

from wishforge.core.models import (
    PickupRequest,
    RoastRequest,
    ShayariRequest,
    StatusRequest,
    WishRequest,
)


# =============================================================================
# Shared helpers
# =============================================================================
def pick_emojis(level: int, base: list[str]) -> list[str]:
    """0 → none, 1 → the first two, 2 (or more) → all of them."""
    if level <= 0:
        return []
    if level == 1:
        return base[:2]
    return list(base)


def join_parts(parts: list[str]) -> str:
    """Single-space join that skips empty fragments."""
    return " ".join(p for p in parts if p)


def numbered(lines: list[str]) -> str:
    return "\n".join(f"{i + 1}. {line}" for i, line in enumerate(lines))


def numbered_blocks(blocks: list[str]) -> str:
    return "\n\n".join(f"{i + 1}.\n{block}" for i, block in enumerate(blocks))


# -----------------------------------------------------------------------------
# Latinization — NOT a transliterator
# -----------------------------------------------------------------------------
# A fixed substring table for the Devanagari words our own verses use.
# Anything not in the table stays in Devanagari.  Order matters: longer
# words that contain a shorter entry ("खुशबू" ⊃ "खुश") must come first.
# -----------------------------------------------------------------------------
LATIN_TABLE: tuple[tuple[str, str], ...] = (
    ("खुशबू", "khushboo"),
    ("दिल", "dil"),
    ("रात", "raat"),
    ("दुआएँ", "duaayein"),
    ("खुश", "khush"),
    ("तेरी", "teri"),
    ("यादें", "yaadein"),
    ("हमेशा", "hamesha"),
    ("हँसी", "hansi"),
    ("सदा", "sada"),
)


def latinize(text: str) -> str:
    for devanagari, roman in LATIN_TABLE:
        text = text.replace(devanagari, roman)
    return text


# =============================================================================
# wishify
# =============================================================================
WISH_EMOJIS = ["🎉", "✨", "🎊", "🌟", "💫"]

WISH_ENDINGS: dict[str, list[str]] = {
    "Hinglish": [
        "Bas khushiyan hi khushiyan!",
        "Aaj ka din full vibe!",
        "Dil se blessings!",
    ],
    "Hindi": [
        "सदा मुस्कुराते रहो!",
        "खुशियाँ आपके कदम चूमें!",
        "ढेरों शुभकामनाएँ!",
    ],
}

# tone → (Hinglish tag, Hindi tag); anything unknown reads as "sweet"
WISH_TONE_TAGS: dict[str, tuple[str, str]] = {
    "funny": ("Thoda masti, thoda pyaar!", "थोड़ी मस्ती, थोड़ा प्यार!"),
    "formal": ("Best wishes and regards.", "शुभकामनाएँ एवं सादर।"),
    "sweet": ("Dil se blessings!", "दिल से दुआएँ!"),
}


def _wish_core(req: WishRequest) -> str:
    personal = f"{req.name}, " if req.name else ""
    hinglish = req.language == "Hinglish"
    if req.length == "short":
        if hinglish:
            return f"{personal}{req.occasion} mubarak ho!"
        return f"{personal}{req.occasion} की हार्दिक शुभकामनाएँ!"
    if hinglish:
        return f"{personal}{req.occasion} ke din, khushiyon ki barsaat ho!"
    return f"{personal}{req.occasion} पर खुशियों की बरसात हो!"


def wishify(req: WishRequest) -> str:
    """Numbered list of req.variant_count wishes for req.occasion."""
    endings = WISH_ENDINGS.get(req.language, WISH_ENDINGS["Hinglish"])
    hinglish_tag, hindi_tag = WISH_TONE_TAGS.get(req.tone, WISH_TONE_TAGS["sweet"])
    tone_tag = hinglish_tag if req.language == "Hinglish" else hindi_tag
    emojis = " ".join(pick_emojis(req.emoji_level, WISH_EMOJIS))
    core = _wish_core(req)

    variants = [
        join_parts([core, endings[i % len(endings)], tone_tag, emojis])
        for i in range(req.variant_count)
    ]
    return numbered(variants)


# =============================================================================
# shayari
# =============================================================================
# Each verse is four lines with the theme woven into line two.  Variant i
# uses SHAYARI_VERSES[i % 3], so the three allowed variants are distinct.
# =============================================================================
SHAYARI_VERSES: list[tuple[str, str, str, str]] = [
    (
        "दिल की राहों में तेरी यादें बसी हैं",
        "{theme} की बातें इन लफ़्ज़ों में हँसी हैं।",
        "चाँदनी रात में दुआएँ ये कही हैं,",
        "खुश रहे तू हमेशा, यही अरज़ू रहीं हैं…",
    ),
    (
        "तेरी हँसी से रोशन मेरी हर रात है,",
        "{theme} में छुपी कोई प्यारी सी बात है।",
        "दिल ने माँगी हैं दुआएँ तेरे लिए,",
        "खुश रहना सदा, यही मेरी सौगात है…",
    ),
    (
        "यादें तेरी साथ चलें हर एक राह में,",
        "{theme} की खुशबू बसी है इस चाह में।",
        "रात भर जागे हैं दिल के अरमान,",
        "खुश रहे तू सदा मेरी निगाह में…",
    ),
]


def _shayari_verse(theme: str, i: int) -> str:
    lines = SHAYARI_VERSES[i % len(SHAYARI_VERSES)]
    return "\n".join(line.format(theme=theme) for line in lines)


def shayari(req: ShayariRequest) -> str:
    """Numbered 4-line verses; latinized for Hinglish or script=latin."""
    latin = req.language == "Hinglish" or req.script == "latin"
    verses = []
    for i in range(req.variant_count):
        verse = _shayari_verse(req.theme, i)
        verses.append(latinize(verse) if latin else verse)
    return numbered_blocks(verses)


# =============================================================================
# status_pack
# =============================================================================
STATUS_EMOJIS = ["🔥", "✨", "💪", "🚀", "🎯", "⚡", "🏆"]

STATUS_CORES: dict[str, list[str]] = {
    "Hinglish": [
        "{theme} mode: ON",
        "Bas karte jao, baaki sab ho jayega",
        "No excuses, only {theme}",
        "{theme} vibes only",
        "Kal se nahi, aaj se {theme}",
        "Focus > Fomo — {theme}",
        "Small steps, big {theme}",
    ],
    "Hindi": [
        "{theme} मोड: चालू",
        "बस करते जाओ, बाक़ी सब हो जाएगा",
        "बहाने नहीं, सिर्फ़ {theme}",
        "{theme} की वाइब्स ओनली",
        "कल नहीं, आज से {theme}",
        "ध्यान > लालच — {theme}",
        "छोटे कदम, बड़ा {theme}",
    ],
}


def _hashtag(theme: str) -> str:
    return "#" + "".join(theme.split())


def status_pack(req: StatusRequest) -> str:
    """Numbered status lines; style picks the prefix and optional hashtag."""
    # Devanagari for anything but Hinglish, same rule as wishify
    cores = STATUS_CORES["Hinglish"] if req.language == "Hinglish" else STATUS_CORES["Hindi"]
    prefixes = STATUS_EMOJIS if req.style == "emoji-heavy" else ["•"]
    tag = _hashtag(req.theme) if req.style == "hashtaggy" else ""

    lines = []
    for i in range(req.count):
        core = cores[i % len(cores)].format(theme=req.theme)
        lines.append(join_parts([prefixes[i % len(prefixes)], core, tag]))
    return numbered(lines)


# =============================================================================
# roast_generator
# =============================================================================
# Friendly roasts only.  spice picks the pool; unknown spice reads as mild.
# =============================================================================
ROAST_LINES: dict[str, dict[str, list[str]]] = {
    "Hinglish": {
        "mild": [
            "{target}, tumhara WiFi aur tumhari planning dono weak signal dete hain.",
            "{target} itna late aata hai ki ghadi bhi sorry bolti hai.",
            "{target} ki gym membership sirf selfie ke liye active hai.",
            "{target}, tumhari excuses ki list PhD level ki hai.",
            "{target} ka 'bas 5 minute' matlab pura episode.",
        ],
        "medium": [
            "{target} ki cooking dekh ke Swiggy ne bhi haath jod liye.",
            "{target} ka sense of humour abhi bhi loading pe hai.",
            "{target}, group chat mein tumhara 'seen' hi tumhara contribution hai.",
            "{target} itna overthink karta hai ki Google bhi confuse ho jaye.",
            "{target} ke jokes pe sirf {target} hi hasta hai.",
        ],
        "spicy": [
            "{target}, tumhari life ka plot twist bhi predictable hai.",
            "{target} ke paas attitude full hai, reason zero.",
            "{target} ka fashion sense dekh ke mirror ne resign kar diya.",
            "{target}, tumhe dekh ke motivation bhi chhutti pe chala jata hai.",
            "{target} ka confidence dekh ke lagta hai result abhi aaya nahi.",
        ],
    },
    "Hindi": {
        "mild": [
            "{target} इतना लेट आता है कि घड़ी भी माफ़ी माँगती है।",
            "{target} की जिम मेंबरशिप सिर्फ़ सेल्फ़ी के लिए है।",
            "{target} के 'बस 5 मिनट' में पूरा दिन निकल जाता है।",
        ],
        "medium": [
            "{target} का खाना देखकर रसोई ने भी हाथ जोड़ लिए।",
            "{target} का सेंस ऑफ़ ह्यूमर अभी भी लोड हो रहा है।",
            "{target} के चुटकुलों पर सिर्फ़ {target} ही हँसता है।",
        ],
        "spicy": [
            "{target} की ज़िंदगी का ट्विस्ट भी पहले से पता होता है।",
            "{target} के पास एटीट्यूड पूरा है, वजह ज़ीरो।",
            "{target} का फ़ैशन देखकर आईने ने इस्तीफ़ा दे दिया।",
        ],
    },
}

ROAST_EMOJI = {"mild": "😜", "medium": "😂", "spicy": "🔥"}


def roast_generator(req: RoastRequest) -> str:
    """Numbered roast lines about req.target."""
    by_spice = ROAST_LINES.get(req.language, ROAST_LINES["Hinglish"])
    spice = req.spice if req.spice in by_spice else "mild"
    pool = by_spice[spice]
    lines = [
        join_parts([pool[i % len(pool)].format(target=req.target), ROAST_EMOJI[spice]])
        for i in range(req.count)
    ]
    return numbered(lines)


# =============================================================================
# pickup_lines
# =============================================================================
PICKUP_LINES: dict[str, dict[str, list[str]]] = {
    "Hinglish": {
        "cute": [
            "Tum chai ho kya? Kyunki tumhare bina subah adhoori lagti hai.",
            "Mere phone ki battery aur mera dil, dono tumhe dekh ke full ho jaate hain.",
            "Tumhari smile ka WiFi password kya hai? Connect hona hai.",
            "Google Maps bhi fail hai, tum tak pahunchne ka raasta sirf dil jaanta hai.",
            "Tum sugar ho kya? Har cheez meethi kar deti ho.",
        ],
        "filmy": [
            "Palat... palat... agar palti toh samajh lena tum bhi mujhe pasand karti ho.",
            "Bade bade deshon mein choti choti baatein hoti rehti hain, par tum badi baat ho.",
            "Kuch kuch hota hai jab tum paas hoti ho.",
            "Mere paas gaadi hai, bungalow hai... bas tumhari kami hai.",
            "Tujhe dekha toh yeh jaana sanam, playlist ab complete hai.",
        ],
        "nerdy": [
            "Tum Ctrl ho aur main S, saath mein sab save ho jaata hai.",
            "Tumhare bina meri life ek infinite loop hai.",
            "Kya tum 404 ho? Kyunki tumhare bina sab missing lagta hai.",
            "Hum dono ka chemistry formula H2-Oh-yes hai.",
            "Tum mere code ka comment ho, sab samjha deti ho.",
        ],
    },
    "Hindi": {
        "cute": [
            "क्या तुम चाय हो? तुम्हारे बिना सुबह अधूरी लगती है।",
            "तुम्हारी मुस्कान देखकर मेरा दिन बन जाता है।",
            "तुम चीनी हो क्या? हर बात मीठी कर देती हो।",
        ],
        "filmy": [
            "पलट... अगर पलटी तो समझ लेना तुम भी मुझे पसंद करती हो।",
            "कुछ कुछ होता है जब तुम पास होती हो।",
            "मेरे पास गाड़ी है, बंगला है... बस तुम्हारी कमी है।",
        ],
        "nerdy": [
            "तुम्हारे बिना मेरी ज़िंदगी एक अनंत लूप है।",
            "तुम मेरे कोड की टिप्पणी हो, सब समझा देती हो।",
            "हम दोनों का रसायन एकदम सही सूत्र है।",
        ],
    },
}

PICKUP_EMOJIS = ["😍", "💘", "😉", "🌹", "💖", "✨", "🥰"]


def pickup_lines(req: PickupRequest) -> str:
    """Numbered pickup lines in the requested vibe."""
    by_vibe = PICKUP_LINES.get(req.language, PICKUP_LINES["Hinglish"])
    pool = by_vibe.get(req.vibe, by_vibe["cute"])
    personal = f"{req.name}," if req.name else ""
    lines = [
        join_parts([personal, pool[i % len(pool)], PICKUP_EMOJIS[i % len(PICKUP_EMOJIS)]])
        for i in range(req.count)
    ]
    return numbered(lines)
