# =============================================================================
# core/prompts.py  —  What we ask the remote LLM
# =============================================================================
#
# Two pieces:
#   SYSTEM_INSTRUCTION  → fixed persona + output-format constraints, sent
#                         with EVERY remote call, to either backend
#   build_*_prompt()    → one user prompt per generation tool, built from the
#                         same normalized request the templates use
#
# The instruction insists on "numbered list only".  The dispatcher passes
# whatever comes back straight to the client (trimmed), so a chatty preface
# would end up in someone's WhatsApp status.
# =============================================================================

from wishforge.core.models import (
    PickupRequest,
    RoastRequest,
    ShayariRequest,
    StatusRequest,
    WishRequest,
)

SYSTEM_INSTRUCTION = (
    "You are WishForge, a witty Indian social-media copywriter who writes short, "
    "warm, highly shareable text in Hindi and Hinglish. "
    "Return ONLY a numbered list. No commentary, no preface, no closing notes. "
    "Keep every item culturally appropriate and family friendly."
)

_EMOJI_HINT = {0: "Use no emoji.", 1: "Use a couple of emoji.", 2: "Use lots of emoji."}


def build_wish_prompt(req: WishRequest) -> str:
    to = f" for {req.name}" if req.name else ""
    return (
        f"Write {req.variant_count} {req.length} {req.tone} {req.occasion} wishes{to} "
        f"in {req.language}. {_EMOJI_HINT.get(req.emoji_level, '')} "
        f"Number them 1 to {req.variant_count}."
    )


def build_shayari_prompt(req: ShayariRequest) -> str:
    script = "Roman (latin) script" if req.script == "latin" else "Devanagari script"
    return (
        f"Write {req.variant_count} rhyming shayari of 2-4 lines each on the theme "
        f"'{req.theme}' in {req.language}, using {script}. "
        f"Number each shayari, with the verse lines on the following lines."
    )


def build_status_prompt(req: StatusRequest) -> str:
    return (
        f"Write {req.count} crisp WhatsApp status lines about '{req.theme}' in "
        f"{req.language}. Style: {req.style}. Each line must be a scroll-stopping hook. "
        f"Number them 1 to {req.count}."
    )


def build_roast_prompt(req: RoastRequest) -> str:
    return (
        f"Write {req.count} friendly, {req.spice} roast one-liners about {req.target} "
        f"in {req.language}. Playful teasing only, never hurtful. "
        f"Number them 1 to {req.count}."
    )


def build_pickup_prompt(req: PickupRequest) -> str:
    to = f" addressed to {req.name}" if req.name else ""
    return (
        f"Write {req.count} {req.vibe} pickup lines{to} in {req.language}. "
        f"Cheesy is fine, creepy is not. Number them 1 to {req.count}."
    )
