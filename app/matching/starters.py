"""Conversation starters for a matched pair.

Built from what the two profiles share plus what the other user's gym,
location and bio reveal, then padded with generic fitness prompts.
"""

from __future__ import annotations

import zlib
from dataclasses import dataclass
from enum import Enum

from app.matching.profile import Profile

MAX_STARTERS = 5


class StarterCategory(str, Enum):
    shared_interest = "shared_interest"
    location = "location"
    bio = "bio"
    fitness = "fitness"


@dataclass(frozen=True, slots=True)
class ConversationStarter:
    text: str
    icon: str
    category: StarterCategory


# Bio keyword(s) → starter. First matching entry wins.
_BIO_STARTERS: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (("marathon", "running"), "I saw you're into running! Are you training for any races?", "figure.run.circle"),
    (("gym", "lift"), "Fellow gym enthusiast! What's your current training split?", "dumbbell"),
    (("yoga",), "I noticed you're into yoga! Do you have a favorite style?", "figure.yoga"),
    (("crossfit",), "CrossFit fan too! What's your favorite WOD?", "figure.cross.training"),
)

FITNESS_STARTERS: tuple[ConversationStarter, ...] = (
    ConversationStarter("What's your current fitness goal? I'd love to support each other!", "target", StarterCategory.fitness),
    ConversationStarter("What time of day do you usually work out?", "clock.fill", StarterCategory.fitness),
    ConversationStarter("What got you into fitness? I'd love to hear your story!", "heart.circle", StarterCategory.fitness),
    ConversationStarter("What's the best workout advice you've ever received?", "lightbulb.fill", StarterCategory.fitness),
    ConversationStarter(
        "Are you training for anything specific right now?",
        "figure.strengthtraining.traditional",
        StarterCategory.fitness,
    ),
    ConversationStarter("What's your go-to workout when you need motivation?", "bolt.heart.fill", StarterCategory.fitness),
)


def _rotation(a: Profile, b: Profile) -> int:
    """Stable per-pair offset into FITNESS_STARTERS."""
    key = f"{a.user_id}|{b.user_id}".encode()
    return zlib.crc32(key) % len(FITNESS_STARTERS)


def generate_starters(a: Profile, b: Profile, limit: int = MAX_STARTERS) -> list[ConversationStarter]:
    """Starters `a` could send to `b`, most specific first."""
    starters: list[ConversationStarter] = []

    shared_workouts = sorted(a.workout_types & b.workout_types)
    if shared_workouts:
        starters.append(ConversationStarter(
            f"I see you're into {shared_workouts[0]} too! What's your typical routine?",
            "figure.run",
            StarterCategory.shared_interest,
        ))

    shared_interests = sorted(a.interests & b.interests)
    if shared_interests:
        starters.append(ConversationStarter(
            f"I noticed we both like {shared_interests[0]}! How long have you been doing it?",
            "star.fill",
            StarterCategory.shared_interest,
        ))

    if b.gym.strip():
        starters.append(ConversationStarter(
            f"Do you usually work out at {b.gym.strip()}? I've been looking for training partners there!",
            "mappin.circle.fill",
            StarterCategory.location,
        ))
    elif b.location.strip():
        starters.append(ConversationStarter(
            f"What's your favorite spot to work out in {b.location.strip()}?",
            "mappin.circle.fill",
            StarterCategory.location,
        ))

    bio = b.bio.lower()
    if bio:
        for keywords, text, icon in _BIO_STARTERS:
            if any(k in bio for k in keywords):
                starters.append(ConversationStarter(text, icon, StarterCategory.bio))
                break

    offset = _rotation(a, b)
    rotated = FITNESS_STARTERS[offset:] + FITNESS_STARTERS[:offset]
    cap = min(max(limit, 0), MAX_STARTERS)
    starters.extend(rotated[: max(0, cap - len(starters))])
    return starters[:cap]
